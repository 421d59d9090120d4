# Copyright (c) 2026 Serializers contributors
# SPDX-License-Identifier: MIT

"""
Serialization engine.

A serializer is any callable taking ``(value, builder)``: a plain function,
a lambda, a closure or an object with ``__call__``. The functions here run
a serializer from the root, collect the builder contents into a value tree
and render it.

Example::

    def serialize_country(country, b):
        b.attr("id", country.id)

    def serialize_user(user, b):
        b.attr("id", user.id)
        b.has_one("country", user.country, serialize_country)
        b.has_many("friends", user.friends, serialize_user)

    serialize(serialize_user, bob)
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any, Optional, Protocol, TypeVar

from serializers.core.builder import (
    Builder,
    _check_max_depth,
    _check_serializer,
    _check_values,
)
from serializers.core.values import JSONObject
from serializers.errors import ScalarEncodingError
from serializers.render import RenderConfig, render
from serializers.render.base import DEFAULT_CONFIG

logger = logging.getLogger(__name__)

T_contra = TypeVar("T_contra", contravariant=True)


class Serializer(Protocol[T_contra]):
    """Anything callable as ``serializer(value, builder)``."""

    def __call__(self, value: T_contra, builder: Builder, /) -> None: ...


def to_value(
    serializer: Serializer[Any],
    value: Any,
    *,
    max_depth: Optional[int] = None,
) -> JSONObject:
    """
    Turn one object into a value tree.

    Args:
        serializer: Serializer accepting ``value``.
        value: The root object.
        max_depth: Deepest has_one/has_many nesting allowed (None = no limit).

    Returns:
        The object as a dict of JSON values.

    Raises:
        ScalarEncodingError: If any leaf value cannot be encoded.
        MaxDepthExceeded: If ``max_depth`` is set and exceeded.
    """
    _check_serializer(serializer)
    _check_max_depth(max_depth)
    logger.debug(f"Serializing {type(value).__name__} with {_name_of(serializer)}")
    try:
        return Builder(max_depth=max_depth).populate(serializer, value)
    except ScalarEncodingError as exc:
        logger.debug(f"Serialization with {_name_of(serializer)} aborted: {exc}")
        raise


def to_values(
    serializer: Serializer[Any],
    values: Iterable[Any],
    *,
    max_depth: Optional[int] = None,
) -> list[JSONObject]:
    """
    Turn a sequence of root objects into a list of value trees.

    Args:
        serializer: Serializer accepting each item.
        values: Root objects, rendered in input order.
        max_depth: Deepest has_one/has_many nesting allowed (None = no limit).
    """
    _check_serializer(serializer)
    _check_values(values, "serialize_many")
    _check_max_depth(max_depth)
    out: list[JSONObject] = []
    for index, value in enumerate(values):
        try:
            out.append(Builder(max_depth=max_depth).populate(serializer, value))
        except ScalarEncodingError as exc:
            logger.debug(f"Serialization with {_name_of(serializer)} aborted: {exc}")
            raise exc.prefixed(index)
    logger.debug(f"Serialized {len(out)} values with {_name_of(serializer)}")
    return out


def serialize(
    serializer: Serializer[Any],
    value: Any,
    config: Optional[RenderConfig] = None,
) -> str:
    """
    Serialize one object to a JSON object string.

    Args:
        serializer: Serializer accepting ``value``.
        value: The root object.
        config: Render settings (uses defaults if None).
    """
    config = config or DEFAULT_CONFIG
    return render(to_value(serializer, value, max_depth=config.max_depth), config)


def serialize_many(
    serializer: Serializer[Any],
    values: Iterable[Any],
    config: Optional[RenderConfig] = None,
) -> str:
    """
    Serialize a sequence of objects to one JSON array string.

    Args:
        serializer: Serializer accepting each item.
        values: Root objects, rendered in input order.
        config: Render settings (uses defaults if None).
    """
    config = config or DEFAULT_CONFIG
    return render(to_values(serializer, values, max_depth=config.max_depth), config)


def _name_of(serializer: Any) -> str:
    return getattr(serializer, "__qualname__", None) or repr(serializer)
