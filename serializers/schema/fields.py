# Copyright (c) 2026 Serializers contributors
# SPDX-License-Identifier: MIT

"""
Field specs for declared serializers.

Each spec reads one attribute off the source object and writes it into the
builder under its output key. Specs are immutable and can be shared between
any number of declared serializers.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Union

from serializers.core import Builder, Serializer


class _SelfReference:
    """Placeholder for the serializer a field is declared in."""

    _instance: Optional[_SelfReference] = None

    def __new__(cls) -> _SelfReference:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "SELF"


# Use as the serializer of has_one/has_many to recurse into the same serializer
SELF = _SelfReference()


@dataclass(frozen=True, slots=True)
class Attr:
    """
    A plain attribute.

    Attributes:
        key: Output key.
        field: Attribute name read from the source object.
    """
    key: str
    field: str

    def apply(self, owner: Serializer, value: Any, builder: Builder) -> None:
        builder.attr(self.key, getattr(value, self.field))


@dataclass(frozen=True, slots=True)
class HasOne:
    """
    A nested object rendered by another serializer.

    Attributes:
        key: Output key.
        field: Attribute name read from the source object.
        serializer: Serializer for the nested object, or SELF.
    """
    key: str
    field: str
    serializer: Union[Serializer, _SelfReference]

    def apply(self, owner: Serializer, value: Any, builder: Builder) -> None:
        builder.has_one(
            self.key, getattr(value, self.field), _resolve(self.serializer, owner)
        )


@dataclass(frozen=True, slots=True)
class HasMany:
    """
    A list of nested objects rendered by another serializer.

    Attributes:
        key: Output key.
        field: Attribute name of an iterable on the source object.
        serializer: Serializer for each item, or SELF.
    """
    key: str
    field: str
    serializer: Union[Serializer, _SelfReference]

    def apply(self, owner: Serializer, value: Any, builder: Builder) -> None:
        builder.has_many(
            self.key, getattr(value, self.field), _resolve(self.serializer, owner)
        )


Field = Union[Attr, HasOne, HasMany]


def attr(key: str, field: Optional[str] = None) -> Attr:
    """Declare an attribute. ``field`` defaults to ``key``."""
    _check_names(key, field)
    return Attr(key=key, field=field or key)


def has_one(
    key: str,
    serializer: Union[Serializer, _SelfReference],
    *,
    field: Optional[str] = None,
) -> HasOne:
    """Declare a nested object. ``field`` defaults to ``key``."""
    _check_names(key, field)
    _check_target(serializer)
    return HasOne(key=key, field=field or key, serializer=serializer)


def has_many(
    key: str,
    serializer: Union[Serializer, _SelfReference],
    *,
    field: Optional[str] = None,
) -> HasMany:
    """Declare a nested list. ``field`` defaults to ``key``."""
    _check_names(key, field)
    _check_target(serializer)
    return HasMany(key=key, field=field or key, serializer=serializer)


def _resolve(
    serializer: Union[Serializer, _SelfReference], owner: Serializer
) -> Serializer:
    return owner if serializer is SELF else serializer


def _check_names(key: Any, field: Any) -> None:
    _check_name("key", key)
    if field is not None:
        _check_name("name", field)


def _check_name(label: str, name: Any) -> None:
    if not isinstance(name, str):
        raise TypeError(f"Field {label} must be str, got {type(name).__name__}")
    if not name:
        raise ValueError(f"Field {label} cannot be empty")


def _check_target(serializer: Any) -> None:
    if serializer is not SELF and not callable(serializer):
        raise TypeError(
            f"Expected a serializer callable or SELF, got {type(serializer).__name__}"
        )
