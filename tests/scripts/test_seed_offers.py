"""Tests for the deterministic offer generator in scripts/seed_offers.py."""

from __future__ import annotations

import importlib.util
import random
from pathlib import Path
from types import ModuleType

import pytest

from rental_offers.domain.offer import Offer

SCRIPT_PATH = Path(__file__).resolve().parents[2] / "scripts" / "seed_offers.py"


@pytest.fixture(scope="module")
def seed_module() -> ModuleType:
    spec = importlib.util.spec_from_file_location("seed_offers", SCRIPT_PATH)
    assert spec is not None and spec.loader is not None
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def _generate(seed_module: ModuleType, seed: int, n: int = 20) -> list[Offer]:
    random.seed(seed)
    return [seed_module.generate_offer([3, 4, 5]) for _ in range(n)]


def test_same_seed_gives_same_offers(seed_module: ModuleType) -> None:
    first = _generate(seed_module, 42)
    second = _generate(seed_module, 42)

    assert first == second
    assert len({offer.id for offer in first}) == len(first)


def test_different_seed_gives_different_ids(seed_module: ModuleType) -> None:
    assert [o.id for o in _generate(seed_module, 1)] != [o.id for o in _generate(seed_module, 2)]


def test_generated_offers_are_valid(seed_module: ModuleType) -> None:
    for offer in _generate(seed_module, 7, n=100):
        offer.validate()
        assert offer.most_specific_region_id in {3, 4, 5}
        assert offer.duration_ms % seed_module.MILLISECONDS_PER_DAY == 0
