"""Region tree loading.

The hierarchy is static configuration: read once, cached for the process.
"""

from __future__ import annotations

import json
import logging
from functools import lru_cache
from pathlib import Path

from rental_offers.domain.region import RegionHierarchy
from rental_offers.infra.config import region_tree_path

logger = logging.getLogger(__name__)


def load_region_hierarchy(path: Path) -> RegionHierarchy:
    """
    Load a region tree JSON file.

    Args:
        path: File holding {"id": int, "subregions": [...]} nodes

    Returns:
        RegionHierarchy built from the tree

    Raises:
        RuntimeError: If the file is missing or not a valid region tree
    """
    try:
        tree = json.loads(path.read_text(encoding="utf-8"))
        hierarchy = RegionHierarchy.from_tree(tree)
    except (OSError, ValueError, KeyError, TypeError) as exc:
        raise RuntimeError(f"Cannot load region tree from {path}: {exc}") from exc

    logger.info(
        "Region hierarchy loaded",
        extra={"path": str(path), "parent_regions": len(hierarchy)},
    )
    return hierarchy


@lru_cache(maxsize=1)
def get_region_hierarchy() -> RegionHierarchy:
    """Process-wide hierarchy from REGION_TREE_PATH (or the packaged default)."""
    return load_region_hierarchy(region_tree_path())
