# Copyright (c) 2026 Serializers contributors
# SPDX-License-Identifier: MIT

"""
Exception classes for the serializers library.

All library-specific exceptions inherit from SerializerError. Each one also
derives from the closest builtin so callers can catch either.
"""

from __future__ import annotations

from typing import Union

PathItem = Union[str, int]


class SerializerError(Exception):
    """Base exception for all serializer errors."""


class ScalarEncodingError(SerializerError, ValueError):
    """
    Raised when a value handed to ``attr`` has no JSON representation.

    Attributes:
        reason: What went wrong with the leaf value.
        path: Keys and list indices leading from the root object to the
            failing value, outermost first.
    """

    def __init__(self, reason: str, path: tuple[PathItem, ...] = ()) -> None:
        super().__init__(reason)
        self.reason = reason
        self.path = path

    def prefixed(self, *items: PathItem) -> ScalarEncodingError:
        """Prepend enclosing keys/indices to the path, in place."""
        self.path = (*items, *self.path)
        return self

    @property
    def location(self) -> str:
        """Path as ``friends[0].country.id``."""
        out = ""
        for item in self.path:
            if isinstance(item, int):
                out += f"[{item}]"
            else:
                out += f".{item}" if out else item
        return out

    def __str__(self) -> str:
        if not self.path:
            return self.reason
        return f"{self.location}: {self.reason}"


class MaxDepthExceeded(SerializerError, RecursionError):
    """Raised when nesting goes deeper than the configured ``max_depth``."""

    def __init__(self, max_depth: int) -> None:
        super().__init__(f"Nesting exceeded max_depth={max_depth}")
        self.max_depth = max_depth


class SerializerTypeError(SerializerError, TypeError):
    """Raised when a typed serializer is called with a value of another type."""
