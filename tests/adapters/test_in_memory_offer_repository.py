"""
Test suite for InMemoryOfferRepository.

Sections:
- Append / Snapshot / Clear semantics
- Duplicate IDs
- Snapshot isolation under concurrent writers
"""

from __future__ import annotations

import threading
from typing import Callable

import pytest

from rental_offers.adapters.in_memory_offer_repository import InMemoryOfferRepository
from rental_offers.domain.errors import ConflictError
from rental_offers.domain.offer import Offer


# ==============================================================================
# Append / Snapshot / Clear
# ==============================================================================


def test_new_repository_is_empty() -> None:
    repo = InMemoryOfferRepository()

    assert repo.snapshot() == ()
    assert repo.count() == 0


def test_initial_offers_are_stored(make_offer: Callable[..., Offer]) -> None:
    repo = InMemoryOfferRepository([make_offer("a"), make_offer("b")])

    assert [o.id for o in repo.snapshot()] == ["a", "b"]


def test_append_preserves_insertion_order_across_batches(make_offer: Callable[..., Offer]) -> None:
    repo = InMemoryOfferRepository()

    repo.append([make_offer("b"), make_offer("a")])
    repo.append([make_offer("c")])

    assert [o.id for o in repo.snapshot()] == ["b", "a", "c"]
    assert repo.count() == 3


def test_clear_removes_everything(make_offer: Callable[..., Offer]) -> None:
    repo = InMemoryOfferRepository([make_offer("a")])

    repo.clear()

    assert repo.snapshot() == ()
    assert repo.count() == 0


def test_ids_can_be_reused_after_clear(make_offer: Callable[..., Offer]) -> None:
    repo = InMemoryOfferRepository([make_offer("a")])
    repo.clear()

    repo.append([make_offer("a")])

    assert repo.count() == 1


def test_snapshot_is_not_affected_by_later_writes(make_offer: Callable[..., Offer]) -> None:
    repo = InMemoryOfferRepository([make_offer("a")])
    before = repo.snapshot()

    repo.append([make_offer("b")])
    repo.clear()

    assert [o.id for o in before] == ["a"]


# ==============================================================================
# Duplicate IDs
# ==============================================================================


def test_append_rejects_already_stored_id(make_offer: Callable[..., Offer]) -> None:
    repo = InMemoryOfferRepository([make_offer("a")])

    with pytest.raises(ConflictError) as exc_info:
        repo.append([make_offer("b"), make_offer("a")])

    assert exc_info.value.context == {"offer_ids": ["a"]}
    assert [o.id for o in repo.snapshot()] == ["a"]


def test_append_rejects_id_repeated_within_batch(make_offer: Callable[..., Offer]) -> None:
    repo = InMemoryOfferRepository()

    with pytest.raises(ConflictError):
        repo.append([make_offer("x"), make_offer("y"), make_offer("x")])

    assert repo.count() == 0


# ==============================================================================
# Concurrency
# ==============================================================================


def test_readers_never_see_a_partial_batch(make_offer: Callable[..., Offer]) -> None:
    """Snapshots taken during concurrent appends always hold whole batches."""
    repo = InMemoryOfferRepository()
    batch_size = 25
    batches = 40
    observed_sizes: list[int] = []
    done = threading.Event()

    def writer() -> None:
        for b in range(batches):
            repo.append([make_offer(f"{b}-{i}") for i in range(batch_size)])
        done.set()

    def reader() -> None:
        while not done.is_set():
            observed_sizes.append(len(repo.snapshot()))

    threads = [threading.Thread(target=writer)] + [threading.Thread(target=reader) for _ in range(3)]
    for t in threads:
        t.start()
    for t in threads:
        t.join(timeout=30)

    assert repo.count() == batch_size * batches
    assert all(size % batch_size == 0 for size in observed_sizes)


def test_concurrent_writers_do_not_lose_offers(make_offer: Callable[..., Offer]) -> None:
    repo = InMemoryOfferRepository()

    def writer(prefix: str) -> None:
        for i in range(50):
            repo.append([make_offer(f"{prefix}-{i}")])

    threads = [threading.Thread(target=writer, args=(f"w{n}",)) for n in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join(timeout=30)

    assert repo.count() == 200
    assert len({o.id for o in repo.snapshot()}) == 200
