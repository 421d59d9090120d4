# Copyright (c) 2026 Serializers contributors
# SPDX-License-Identifier: MIT

"""
JSON text rendering for value trees.

Value trees are already plain Python objects, so rendering is a single
``json.dumps`` call whose layout is picked by the RenderConfig.
"""

from __future__ import annotations

import json
from typing import Optional

from serializers.core.values import JSONValue
from serializers.render.base import DEFAULT_CONFIG, OutputFormat, RenderConfig


def render(value: JSONValue, config: Optional[RenderConfig] = None) -> str:
    """Render a value tree as JSON text.

    Args:
        value: Value tree from ``to_value`` / ``to_values``.
        config: Render settings (uses defaults if None).

    Returns:
        A single JSON document.

    Example::

        >>> render({"name": "Bob", "id": 1})
        '{"id":1,"name":"Bob"}'
    """
    config = config or DEFAULT_CONFIG

    if config.format == OutputFormat.JSON_PRETTY:
        return json.dumps(
            value,
            indent=2,
            sort_keys=config.sort_keys,
            ensure_ascii=config.ensure_ascii,
            allow_nan=False,
        )
    else:
        return json.dumps(
            value,
            separators=(",", ":"),
            sort_keys=config.sort_keys,
            ensure_ascii=config.ensure_ascii,
            allow_nan=False,
        )
