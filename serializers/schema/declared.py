# Copyright (c) 2026 Serializers contributors
# SPDX-License-Identifier: MIT

"""
Named serializers with convenience methods.

``declare`` builds a serializer from field specs; ``@serializer`` wraps a
hand-written function. Both produce callables with the usual
``(value, builder)`` shape, so they mix freely with plain functions in
``has_one`` / ``has_many``.

Example::

    serialize_country = declare("serialize_country", attr("id"))

    serialize_user = declare(
        "serialize_user",
        attr("id"),
        attr("name"),
        has_one("country", serialize_country),
        has_many("friends", SELF),
        type=User,
    )

    serialize_user.serialize(bob)
"""

from __future__ import annotations

import functools
from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import Any, Callable, Optional

from serializers.core import Builder, JSONObject, engine
from serializers.errors import SerializerTypeError
from serializers.render import RenderConfig
from serializers.schema.fields import Attr, Field, HasMany, HasOne


class NamedSerializer(ABC):
    """
    Base class for serializers that carry a name and an optional source type.

    Subclasses implement ``populate``. Calling the instance checks the source
    type first, so a value of the wrong type fails before any field is read.
    """

    def __init__(self, name: str, type: Optional[type] = None) -> None:
        if not name:
            raise ValueError("Serializer name cannot be empty")
        self.name = name
        self.type = type

    @abstractmethod
    def populate(self, value: Any, builder: Builder) -> None:
        """Write the fields of ``value`` into ``builder``."""

    def __call__(self, value: Any, builder: Builder) -> None:
        if self.type is not None and not isinstance(value, self.type):
            raise SerializerTypeError(
                f"{self.name} expects {self.type.__name__}, "
                f"got {type(value).__name__}"
            )
        self.populate(value, builder)

    def to_value(self, value: Any, *, max_depth: Optional[int] = None) -> JSONObject:
        """Value tree for one object."""
        return engine.to_value(self, value, max_depth=max_depth)

    def to_values(
        self, values: Iterable[Any], *, max_depth: Optional[int] = None
    ) -> list[JSONObject]:
        """Value trees for a sequence of objects."""
        return engine.to_values(self, values, max_depth=max_depth)

    def serialize(self, value: Any, config: Optional[RenderConfig] = None) -> str:
        """JSON object string for one object."""
        return engine.serialize(self, value, config)

    def serialize_many(
        self, values: Iterable[Any], config: Optional[RenderConfig] = None
    ) -> str:
        """JSON array string for a sequence of objects."""
        return engine.serialize_many(self, values, config)

    def __repr__(self) -> str:
        type_name = self.type.__name__ if self.type is not None else "Any"
        return f"{type(self).__name__}({self.name}<{type_name}>)"


class FieldSerializer(NamedSerializer):
    """
    Serializer made of attr / has_one / has_many field specs.

    Fields are applied in declaration order, so a later field with the same
    key replaces an earlier one.
    """

    def __init__(
        self,
        name: str,
        fields: tuple[Field, ...],
        type: Optional[type] = None,
    ) -> None:
        super().__init__(name, type)
        for f in fields:
            if not isinstance(f, (Attr, HasOne, HasMany)):
                raise TypeError(
                    f"Expected attr/has_one/has_many field, got {f.__class__.__name__}"
                )
        self.fields = tuple(fields)

    @property
    def keys(self) -> tuple[str, ...]:
        """Output keys in declaration order (duplicates collapsed)."""
        return tuple(dict.fromkeys(f.key for f in self.fields))

    def populate(self, value: Any, builder: Builder) -> None:
        for f in self.fields:
            f.apply(self, value, builder)

    def extend(self, *fields: Field, name: Optional[str] = None) -> FieldSerializer:
        """
        New serializer with extra fields appended.

        The original is left untouched. SELF in the new serializer refers to
        the new serializer.
        """
        return FieldSerializer(name or self.name, self.fields + fields, self.type)

    def exclude(self, *keys: str, name: Optional[str] = None) -> FieldSerializer:
        """New serializer without the fields writing any of ``keys``."""
        unknown = set(keys) - set(self.keys)
        if unknown:
            raise KeyError(f"{self.name} has no fields {sorted(unknown)}")
        kept = tuple(f for f in self.fields if f.key not in keys)
        return FieldSerializer(name or self.name, kept, self.type)


class FunctionSerializer(NamedSerializer):
    """Named wrapper around a ``(value, builder)`` function."""

    def __init__(
        self,
        func: Callable[[Any, Builder], None],
        name: Optional[str] = None,
        type: Optional[type] = None,
    ) -> None:
        if not callable(func):
            raise TypeError(f"Expected a function, got {func.__class__.__name__}")
        functools.update_wrapper(self, func)
        super().__init__(name or getattr(func, "__name__", func.__class__.__name__), type)
        self.func = func

    def populate(self, value: Any, builder: Builder) -> None:
        self.func(value, builder)


def declare(name: str, *fields: Field, type: Optional[type] = None) -> FieldSerializer:
    """
    Declare a serializer from field specs.

    Args:
        name: Serializer name, used in error messages and logs.
        *fields: ``attr`` / ``has_one`` / ``has_many`` specs, applied in order.
        type: Optional source type; other types raise SerializerTypeError.

    Returns:
        A FieldSerializer.
    """
    return FieldSerializer(name, fields, type)


def serializer(
    func: Optional[Callable[[Any, Builder], None]] = None,
    *,
    type: Optional[type] = None,
    name: Optional[str] = None,
):
    """
    Decorator turning a ``(value, builder)`` function into a FunctionSerializer.

    Usable bare (``@serializer``) or with options
    (``@serializer(type=User)``).
    """
    if func is None:
        return lambda f: FunctionSerializer(f, name=name, type=type)
    return FunctionSerializer(func, name=name, type=type)
