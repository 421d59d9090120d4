# Copyright (c) 2026 Serializers contributors
# SPDX-License-Identifier: MIT

"""
Scalar encoding for ``Builder.attr``.

Turns leaf values (numbers, strings, plain containers, numpy values, enums,
dataclasses) into JSON-compatible Python objects. Values produced by other
serializers never pass through here; they are already value trees.

Encoding is strict: anything without a faithful JSON form raises
ScalarEncodingError instead of being coerced.
"""

from __future__ import annotations

import dataclasses
import math
from collections.abc import Mapping
from datetime import date, datetime, time
from enum import Enum
from pathlib import PurePath
from typing import Any, Dict, List, Union

import numpy as np

from serializers.errors import ScalarEncodingError

JSONScalar = Union[str, int, float, bool, None]
JSONValue = Union[JSONScalar, List["JSONValue"], Dict[str, "JSONValue"]]
JSONObject = Dict[str, JSONValue]


def encode_scalar(value: Any) -> JSONValue:
    """
    Encode a leaf value as a JSON value tree.

    Args:
        value: Any of: None, bool, int, finite float, str, numpy scalar or
            array, Enum, date/datetime/time, PurePath, list, tuple, mapping
            with str (or int) keys, dataclass instance, or an object with a
            ``to_dict()`` method.

    Returns:
        A JSON-compatible Python object.

    Raises:
        ScalarEncodingError: If the value (or anything nested in it) has no
            JSON representation. ``path`` points at the offending element.
    """
    if value is None:
        return None

    # np.float64 subclasses float and IntEnum subclasses int, so these go
    # before the builtin checks. datetime64/timedelta64 go before np.generic:
    # .item() turns sub-microsecond units into bare integers.
    if isinstance(value, (np.datetime64, np.timedelta64)) or (
        isinstance(value, np.ndarray) and value.dtype.kind in "mM"
    ):
        return _encode_numpy_time(value)
    if isinstance(value, np.generic):
        return encode_scalar(value.item())
    if isinstance(value, np.ndarray):
        return encode_scalar(value.tolist())

    if isinstance(value, Enum):
        return encode_scalar(value.value)

    # bool is an int subclass; both pass through unchanged
    if isinstance(value, (bool, int, str)):
        return value

    if isinstance(value, float):
        if not math.isfinite(value):
            raise ScalarEncodingError(f"Non-finite float {value!r} is not valid JSON")
        return value

    if isinstance(value, (datetime, date, time)):
        return value.isoformat()

    if isinstance(value, PurePath):
        return str(value)

    if isinstance(value, (list, tuple)):
        return _encode_items(value)

    if isinstance(value, Mapping):
        return _encode_mapping(value)

    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return _encode_mapping(
            {f.name: getattr(value, f.name) for f in dataclasses.fields(value)}
        )

    to_dict = getattr(value, "to_dict", None)
    if callable(to_dict):
        return encode_scalar(to_dict())

    raise ScalarEncodingError(
        f"Object of type {type(value).__name__} is not JSON serializable"
    )


def _encode_items(items) -> list[JSONValue]:
    out: list[JSONValue] = []
    for index, item in enumerate(items):
        try:
            out.append(encode_scalar(item))
        except ScalarEncodingError as exc:
            raise exc.prefixed(index)
    return out


def _encode_mapping(mapping: Mapping) -> JSONObject:
    out: JSONObject = {}
    for key, item in mapping.items():
        # Integer keys are written as strings, as JSON object keys must be
        if isinstance(key, int) and not isinstance(key, bool):
            key = str(key)
        elif not isinstance(key, str):
            raise ScalarEncodingError(
                f"Mapping key {key!r} of type {type(key).__name__} is not a string"
            )
        if key in out:
            raise ScalarEncodingError(f"Mapping key {key!r} appears more than once")
        try:
            out[key] = encode_scalar(item)
        except ScalarEncodingError as exc:
            raise exc.prefixed(key)
    return out


def _encode_numpy_time(value) -> JSONValue:
    """ISO 8601 strings for datetime64 values; timedelta64 and NaT are rejected."""
    if np.asarray(value).dtype.kind == "m":
        raise ScalarEncodingError(
            f"numpy timedelta64 has no JSON representation, got {value!r}"
        )
    if np.isnat(value).any():
        raise ScalarEncodingError("numpy NaT is not valid JSON")
    if isinstance(value, np.ndarray):
        return np.datetime_as_string(value).tolist()
    return str(np.datetime_as_string(value))
