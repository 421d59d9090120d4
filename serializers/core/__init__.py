# Copyright (c) 2026 Serializers contributors
# SPDX-License-Identifier: MIT

"""
Serialization core.

The Builder accumulates one object's keys and values, the engine runs
serializers from the root, and the scalar encoder turns leaf values into
JSON values. Everything else lowers onto these pieces.
"""

from serializers.core.values import JSONObject, JSONValue, encode_scalar
from serializers.core.builder import Builder
from serializers.core.engine import (
    Serializer,
    serialize,
    serialize_many,
    to_value,
    to_values,
)

__all__ = [
    # Engine
    "Serializer",
    "to_value",
    "to_values",
    "serialize",
    "serialize_many",
    # Accumulator
    "Builder",
    # Leaf values
    "encode_scalar",
    "JSONValue",
    "JSONObject",
]
