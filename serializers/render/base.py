# Copyright (c) 2026 Serializers contributors
# SPDX-License-Identifier: MIT

"""Output formats and render configuration."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class OutputFormat(Enum):
    """Text layout of rendered JSON."""

    JSON = "json"
    JSON_PRETTY = "json_pretty"


@dataclass(frozen=True)
class RenderConfig:
    """Configuration for turning value trees into text."""

    format: OutputFormat = OutputFormat.JSON

    # Sorted keys give byte-stable output for the same object graph
    sort_keys: bool = True

    # False writes non-ASCII characters as-is (UTF-8 text)
    ensure_ascii: bool = False

    # Deepest nesting of has_one/has_many allowed; None = unbounded
    max_depth: Optional[int] = None

    def __post_init__(self) -> None:
        """Validate max_depth."""
        if self.max_depth is not None and self.max_depth < 0:
            raise ValueError(f"max_depth must be >= 0, got {self.max_depth}")


DEFAULT_CONFIG = RenderConfig()
