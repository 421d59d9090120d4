# Copyright (c) 2026 Serializers contributors
# SPDX-License-Identifier: MIT

"""
Builder: the per-call accumulator of key/value contributions.

A serializer receives one fresh Builder per object it renders and writes into
it with ``attr``, ``has_one`` and ``has_many``. The builder is discarded as
soon as its contents have been turned into a value tree.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING, Any, Optional

from serializers.core.values import JSONObject, JSONValue, encode_scalar
from serializers.errors import MaxDepthExceeded, ScalarEncodingError

if TYPE_CHECKING:
    from serializers.core.engine import Serializer


class Builder:
    """
    Gathers keys and values for one JSON object.

    Keys are unique; writing a key twice keeps the second value.

    Attributes:
        depth: Nesting level of the object being built (root is 0).
        max_depth: Deepest nesting level allowed, or None for no limit.
    """

    __slots__ = ("_map", "depth", "max_depth")

    def __init__(self, *, depth: int = 0, max_depth: Optional[int] = None) -> None:
        _check_max_depth(max_depth)
        self._map: JSONObject = {}
        self.depth = depth
        self.max_depth = max_depth

    def attr(self, key: str, value: Any) -> Builder:
        """
        Add a single key/value pair.

        Args:
            key: Output key.
            value: Leaf value, encoded with ``encode_scalar``.

        Raises:
            ScalarEncodingError: If the value has no JSON representation.
        """
        _check_key(key)
        try:
            self._map[key] = encode_scalar(value)
        except ScalarEncodingError as exc:
            raise exc.prefixed(key)
        return self

    def has_one(self, key: str, value: Any, serializer: Serializer) -> Builder:
        """
        Add a nested object rendered by ``serializer``.

        Args:
            key: Output key.
            value: The associated object.
            serializer: Serializer accepting ``value``.
        """
        _check_key(key)
        _check_serializer(serializer)
        child = self.child()
        try:
            serializer(value, child)
        except ScalarEncodingError as exc:
            raise exc.prefixed(key)
        self._map[key] = child.to_value()
        return self

    def has_many(self, key: str, values: Iterable[Any], serializer: Serializer) -> Builder:
        """
        Add an array with each item rendered by ``serializer``.

        Input order is kept. An empty iterable stores an empty array.

        Args:
            key: Output key.
            values: Iterable of associated objects.
            serializer: Serializer accepting each item.
        """
        _check_key(key)
        _check_serializer(serializer)
        _check_values(values, f"has_many({key!r})")

        items: list[JSONValue] = []
        for index, value in enumerate(values):
            child = self.child()
            try:
                serializer(value, child)
            except ScalarEncodingError as exc:
                raise exc.prefixed(key, index)
            items.append(child.to_value())
        self._map[key] = items
        return self

    def child(self) -> Builder:
        """New empty builder one nesting level deeper."""
        depth = self.depth + 1
        if self.max_depth is not None and depth > self.max_depth:
            raise MaxDepthExceeded(self.max_depth)
        return Builder(depth=depth, max_depth=self.max_depth)

    def populate(self, serializer: Serializer, value: Any) -> JSONObject:
        """Let ``serializer`` write ``value`` into this builder and return the result."""
        serializer(value, self)
        return self.to_value()

    def to_value(self) -> JSONObject:
        """The accumulated object (a shallow copy)."""
        return dict(self._map)

    def keys(self):
        return self._map.keys()

    def __contains__(self, key: object) -> bool:
        return key in self._map

    def __len__(self) -> int:
        return len(self._map)

    def __repr__(self) -> str:
        return f"Builder(depth={self.depth}, keys={sorted(self._map)!r})"


def _check_key(key: Any) -> None:
    if not isinstance(key, str):
        raise TypeError(f"Keys must be str, got {type(key).__name__}")


def _check_serializer(serializer: Any) -> None:
    if not callable(serializer):
        raise TypeError(
            f"Expected a serializer callable (value, builder), "
            f"got {type(serializer).__name__}"
        )


def _check_values(values: Any, label: str) -> None:
    # str, bytes and mappings are iterable but are never a sequence of objects
    if isinstance(values, (str, bytes, Mapping)):
        raise TypeError(
            f"{label} expects an iterable of values, got {type(values).__name__}"
        )


def _check_max_depth(max_depth: Optional[int]) -> None:
    if max_depth is not None and max_depth < 0:
        raise ValueError(f"max_depth must be >= 0, got {max_depth}")
