# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Dotted key resolution against a ParamTree."""

from __future__ import annotations

from .exceptions import InvalidArgumentError, NotALeafError, PathNotFoundError
from .node import ParamNode
from .tree import ParamTree


def split_key(key: str) -> list[str]:
    """Split a dotted key into its segments.

    Raises:
        InvalidArgumentError: If key is not a non-empty string or has an
            empty segment ('a..b', '.a', 'a.').
    """
    if not isinstance(key, str) or not key:
        raise InvalidArgumentError(f"Key must be a non-empty string, got {key!r}")
    parts = key.split('.')
    if '' in parts:
        raise InvalidArgumentError(f"Empty segment in key '{key}'")
    return parts


def resolve(tree: ParamTree, key: str) -> ParamNode:
    """Return the leaf node addressed by a dotted key.

    A key without dots is looked up directly under the root. Longer keys
    descend through object nodes; every segment but the last must name an
    object and the last must name a leaf.

    Args:
        tree: The root ParamTree.
        key: Dotted key, e.g. 'system.audio.volume'.

    Returns:
        The terminal leaf ParamNode, owned by tree.

    Raises:
        InvalidArgumentError: If key is malformed.
        PathNotFoundError: If a segment has no matching child.
        NotALeafError: If a leaf is met before the last segment, or the
            last segment names an object.
    """
    parts = split_key(key)

    if len(parts) == 1:
        if key not in tree:
            raise PathNotFoundError(key, key)
        node = tree.get_node(key)
    else:
        current = tree
        for part in parts[:-1]:
            if part not in current:
                raise PathNotFoundError(key, part)
            node = current.get_node(part)
            if not node.is_branch:
                raise NotALeafError(key, part, "is a leaf, cannot descend")
            current = node.value
        label = parts[-1]
        if label not in current:
            raise PathNotFoundError(key, label)
        node = current.get_node(label)

    if not node.is_leaf:
        raise NotALeafError(key, parts[-1], "is an object, not a leaf")
    return node
