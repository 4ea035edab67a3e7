"""Region hierarchy.

Regions form a tree. Offers are always recorded against a leaf region; a
search may name any region, and a parent region matches every leaf beneath it.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any


class RegionHierarchy:
    """
    Read-only resolver from parent region id to the leaf ids beneath it.

    Leaves never appear as keys, so `is_parent` doubles as the leaf test.
    """

    __slots__ = ("_leaves",)

    def __init__(self, leaves_by_parent: Mapping[int, frozenset[int]]) -> None:
        self._leaves: Mapping[int, frozenset[int]] = MappingProxyType(
            {parent: frozenset(leaves) for parent, leaves in leaves_by_parent.items() if leaves}
        )

    @classmethod
    def from_tree(cls, tree: Mapping[str, Any]) -> RegionHierarchy:
        """
        Build the hierarchy from a nested region tree.

        Args:
            tree: Root node shaped as {"id": int, "subregions": [node, ...]}

        Returns:
            RegionHierarchy with one entry per node that has subregions
        """
        leaves_by_parent: dict[int, frozenset[int]] = {}

        def collect(node: Mapping[str, Any]) -> frozenset[int]:
            region_id = int(node["id"])
            children = node.get("subregions") or []
            if not children:
                return frozenset((region_id,))

            leaves: set[int] = set()
            for child in children:
                leaves |= collect(child)

            leaves_by_parent[region_id] = frozenset(leaves)
            return leaves_by_parent[region_id]

        collect(tree)
        return cls(leaves_by_parent)

    @property
    def parents(self) -> Mapping[int, frozenset[int]]:
        return self._leaves

    def is_parent(self, region_id: int) -> bool:
        return region_id in self._leaves

    def leaves_of(self, region_id: int) -> frozenset[int]:
        """Leaf ids beneath region_id; empty for leaves and unknown ids."""
        return self._leaves.get(region_id, frozenset())

    def contains(self, region_id: int, leaf_id: int) -> bool:
        """True if an offer recorded at leaf_id lies inside region_id."""
        leaves = self._leaves.get(region_id)
        if leaves is None:
            return region_id == leaf_id
        return leaf_id in leaves

    def __len__(self) -> int:
        return len(self._leaves)
