# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""ParamTree node class."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .tree import ParamTree


class ParamNode:
    """A node in a ParamTree hierarchy.

    Each node has:
    - label: The node's unique name/key within its parent
    - value: Either a string (leaf) or a ParamTree (object with children)
    - parent: Reference to the containing ParamTree

    Example:
        >>> node = ParamNode('volume', '50')
        >>> node.label
        'volume'
        >>> node.is_leaf
        True
    """

    __slots__ = ('label', 'value', 'parent')

    def __init__(
        self,
        label: str,
        value: str | ParamTree,
        parent: ParamTree | None = None,
    ) -> None:
        """Initialize a ParamNode.

        Args:
            label: The node's unique name/key.
            value: A string for leaves, a ParamTree for object nodes.
            parent: The ParamTree containing this node.
        """
        self.label = label
        self.value = value
        self.parent = parent

    def __repr__(self) -> str:
        value_repr = (
            f"ParamTree({len(self.value)})"
            if self.is_branch
            else repr(self.value)
        )
        return f"ParamNode({self.label!r}, value={value_repr})"

    @property
    def is_branch(self) -> bool:
        """True if this node is an object holding children."""
        from .tree import ParamTree
        return isinstance(self.value, ParamTree)

    @property
    def is_leaf(self) -> bool:
        """True if this node holds a string value."""
        return isinstance(self.value, str)

    @property
    def path(self) -> str:
        """Dotted path of this node from the tree root."""
        labels = [self.label]
        tree = self.parent
        while tree is not None and tree.parent is not None:
            labels.append(tree.parent.label)
            tree = tree.parent.parent
        return '.'.join(reversed(labels))
