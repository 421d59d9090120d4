# Copyright (c) 2026 Serializers contributors
# SPDX-License-Identifier: MIT

"""
Declarative serializer definitions.

A thin layer over the core: every declared serializer is an ordinary
``(value, builder)`` callable, and field specs only call ``Builder.attr``,
``Builder.has_one`` and ``Builder.has_many``.
"""

from serializers.schema.fields import (
    SELF,
    Attr,
    Field,
    HasMany,
    HasOne,
    attr,
    has_many,
    has_one,
)
from serializers.schema.declared import (
    FieldSerializer,
    FunctionSerializer,
    NamedSerializer,
    declare,
    serializer,
)

__all__ = [
    # Declaring
    "declare",
    "serializer",
    # Field specs
    "attr",
    "has_one",
    "has_many",
    "SELF",
    "Attr",
    "HasOne",
    "HasMany",
    "Field",
    # Serializer types
    "NamedSerializer",
    "FieldSerializer",
    "FunctionSerializer",
]
