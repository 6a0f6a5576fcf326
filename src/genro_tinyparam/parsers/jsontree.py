# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""JSON parser and serializer for ParamTree.

The accepted document shape is narrow: the root must be an object, every
inner value must be an object, and every leaf must be a string. Numbers,
booleans, null and arrays are rejected, so numeric-looking parameters are
always stored quoted (``"volume": "50"``). Duplicate keys inside one object
are rejected as well.
"""

from __future__ import annotations

import json
from typing import Any

from ..exceptions import ParseError, SerializationError
from ..node import ParamNode
from ..tree import ParamTree

DEFAULT_INDENT = 4


def _build_tree(pairs: list[tuple[str, Any]]) -> ParamTree:
    """object_pairs_hook turning each decoded JSON object into a ParamTree.

    The decoder gives the hook no position, so the ParseError raised here
    has no lineno/colno. It names the offending key instead.
    """
    tree = ParamTree()
    for label, value in pairs:
        if not isinstance(value, (str, ParamTree)):
            kind = 'array' if isinstance(value, list) else type(value).__name__
            raise ParseError(f"Unsupported {kind} value for key '{label}'")
        if label in tree:
            raise ParseError(f"Duplicate key '{label}'")
        tree._insert_node(ParamNode(label, value))
    return tree


def parse_json(text: str) -> ParamTree:
    """Parse JSON text into a ParamTree.

    Args:
        text: The full document.

    Returns:
        The root ParamTree.

    Raises:
        ParseError: If the text is not valid JSON or not a tree of objects
            with string leaves. Only decoder errors carry lineno/colno.
    """
    try:
        result = json.loads(text, object_pairs_hook=_build_tree)
    except ParseError:
        raise
    except json.JSONDecodeError as exc:
        raise ParseError(exc.msg, exc.lineno, exc.colno) from exc
    except (ValueError, RecursionError) as exc:
        raise ParseError(str(exc)) from exc
    if not isinstance(result, ParamTree):
        raise ParseError(f"Root must be an object, not {type(result).__name__}")
    return result


def serialize_json(tree: ParamTree, indent: int | None = DEFAULT_INDENT) -> str:
    """Serialize a ParamTree to JSON text.

    Raises:
        SerializationError: If the tree holds values JSON cannot encode.
    """
    try:
        return json.dumps(tree.as_dict(), indent=indent, ensure_ascii=False)
    except (TypeError, ValueError) as exc:
        raise SerializationError(f"Cannot serialize tree: {exc}") from exc
