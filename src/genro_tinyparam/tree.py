# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""ParamTree - the in-memory parameter hierarchy.

A ParamTree is an ordered mapping from label to ParamNode. Object nodes hold
a nested ParamTree, leaf nodes hold a string. The shape of a tree is fixed
once it has been loaded: the store only ever replaces leaf strings.

Example:
    >>> tree = ParamTree({'system': {'audio': {'volume': '50'}}})
    >>> tree.get_node('system').value.get_node('audio').is_branch
    True
    >>> tree.as_dict()
    {'system': {'audio': {'volume': '50'}}}
"""

from __future__ import annotations

from typing import Any, Iterator

from .node import ParamNode


class ParamTree:
    """An ordered container of ParamNode children.

    Attributes:
        parent: The ParamNode that contains this tree as its value,
            or None if this is the root.
    """

    __slots__ = ('_nodes', 'parent')

    def __init__(
        self,
        source: dict[str, Any] | None = None,
        parent: ParamNode | None = None,
    ) -> None:
        """Initialize a ParamTree.

        Args:
            source: Optional nested dict. Values must be strings or dicts.
            parent: The ParamNode that contains this tree as its value.

        Raises:
            TypeError: If source is not a dict or holds a non-string leaf.
        """
        self._nodes: dict[str, ParamNode] = {}
        self.parent = parent
        if source is not None:
            self._load_source(source)

    def _load_source(self, source: dict[str, Any]) -> None:
        if not isinstance(source, dict):
            raise TypeError(f"source must be dict, not {type(source).__name__}")
        for label, value in source.items():
            if isinstance(value, dict):
                value = ParamTree(value)
            elif not isinstance(value, str):
                raise TypeError(
                    f"value of '{label}' must be str or dict, not {type(value).__name__}"
                )
            self._insert_node(ParamNode(label, value))

    def _insert_node(self, node: ParamNode) -> None:
        """Attach a node as a child of this tree.

        Raises:
            ValueError: If a child with the same label already exists.
        """
        if node.label in self._nodes:
            raise ValueError(f"Duplicate label '{node.label}'")
        node.parent = self
        if isinstance(node.value, ParamTree):
            node.value.parent = node
        self._nodes[node.label] = node

    # ==================== Special Methods ====================

    def __repr__(self) -> str:
        return f"ParamTree({self.keys()})"

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[ParamNode]:
        """Iterate over direct child nodes in document order."""
        return iter(self._nodes.values())

    def __contains__(self, label: str) -> bool:
        return label in self._nodes

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ParamTree):
            return NotImplemented
        return self.as_dict() == other.as_dict()

    __hash__ = None  # type: ignore[assignment]

    # ==================== Access ====================

    def get_node(self, label: str) -> ParamNode:
        """Get the direct child with the given label.

        Raises:
            KeyError: If there is no such child.
        """
        return self._nodes[label]

    def keys(self) -> list[str]:
        """Return labels at this level in document order."""
        return list(self._nodes)

    def walk(self) -> Iterator[tuple[str, str]]:
        """Yield (dotted_path, value) for every leaf, depth first.

        Paths are always taken from the root, also when walking a subtree.

        Example:
            >>> list(ParamTree({'a': {'b': '1'}, 'c': '2'}).walk())
            [('a.b', '1'), ('c', '2')]
        """
        for node in self._nodes.values():
            if node.is_branch:
                yield from node.value.walk()
            else:
                yield node.path, node.value

    # ==================== Conversion ====================

    def as_dict(self) -> dict[str, Any]:
        """Convert to a plain nested dict."""
        result: dict[str, Any] = {}
        for node in self._nodes.values():
            result[node.label] = node.value.as_dict() if node.is_branch else node.value
        return result

    def copy(self) -> ParamTree:
        """Return a deep, detached copy of this tree."""
        return ParamTree(self.as_dict())
