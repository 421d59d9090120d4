# Copyright (c) 2026 Serializers contributors
# SPDX-License-Identifier: MIT

"""
Serializers -- several JSON shapes for the same Python object.

A serializer is any callable ``(value, builder)`` that picks the fields it
wants, names their keys, and hands nested objects to other serializers.
One type can have as many serializers as it has output shapes.

Quick start::

    from serializers import serialize

    def serialize_country(country, b):
        b.attr("id", country.id)

    def serialize_user(user, b):
        b.attr("id", user.id)
        b.attr("name", user.name)
        b.has_one("country", user.country, serialize_country)
        b.has_many("friends", user.friends, serialize_user)

    serialize(serialize_user, bob)
    # '{"country":{"id":1},"friends":[],"id":1,"name":"Bob"}'
"""

from __future__ import annotations

__version__ = "0.2.0"

from serializers.core import (
    Builder,
    JSONObject,
    JSONValue,
    Serializer,
    encode_scalar,
    serialize,
    serialize_many,
    to_value,
    to_values,
)
from serializers.errors import (
    MaxDepthExceeded,
    ScalarEncodingError,
    SerializerError,
    SerializerTypeError,
)
from serializers.render import OutputFormat, RenderConfig, render
from serializers.schema import (
    SELF,
    FieldSerializer,
    FunctionSerializer,
    attr,
    declare,
    has_many,
    has_one,
    serializer,
)

__all__ = [
    # Core API
    "Serializer",
    "Builder",
    "to_value",
    "to_values",
    "serialize",
    "serialize_many",
    "encode_scalar",
    # Rendering
    "render",
    "OutputFormat",
    "RenderConfig",
    # Declarative layer
    "declare",
    "serializer",
    "attr",
    "has_one",
    "has_many",
    "SELF",
    "FieldSerializer",
    "FunctionSerializer",
    # Types
    "JSONValue",
    "JSONObject",
    # Errors
    "SerializerError",
    "ScalarEncodingError",
    "MaxDepthExceeded",
    "SerializerTypeError",
    # Version
    "__version__",
]
