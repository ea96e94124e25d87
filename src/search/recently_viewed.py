"""Session-scoped list of recently viewed dogs.

The list lives in the host session under a configurable key. Functions
here take the current list and return a new one; callers write it back
with :func:`store`.
"""

from __future__ import annotations

import logging
from collections.abc import MutableMapping, Sequence
from typing import Any

from src.data.schemas import DogSummary
from src.petfinder.client import PetfinderClient
from src.search.assembler import to_summary

logger = logging.getLogger(__name__)


def load(session: MutableMapping[str, Any], key: str) -> list[str]:
    """Read the viewed dog ids from *session*, empty when absent."""
    return list(session.get(key) or [])


def store(session: MutableMapping[str, Any], key: str, viewed: Sequence[str]) -> None:
    session[key] = list(viewed)


def record(viewed: Sequence[str] | None, dog_id: str) -> list[str]:
    """Return *viewed* with *dog_id* appended unless it is already present."""
    updated = list(viewed or [])
    if dog_id not in updated:
        updated.append(dog_id)
    return updated


def list_except(
    viewed: Sequence[str] | None,
    current_id: str,
    client: PetfinderClient,
) -> list[DogSummary]:
    """Fetch summaries for every viewed dog except *current_id*.

    Dogs are fetched one at a time in insertion order. A dog that can no
    longer be fetched is skipped.

    Args:
        viewed: Dog ids in the order they were first viewed.
        current_id: Id of the dog being displayed.
        client: Petfinder client used for the lookups.

    Returns:
        List of DogSummary objects in insertion order.
    """
    summaries = []
    for dog_id in viewed or []:
        if dog_id == current_id:
            continue
        try:
            summaries.append(to_summary(client.get_dog(dog_id)))
        except Exception as exc:
            logger.warning("Skipping recently viewed dog %s: %s", dog_id, exc)
    return summaries
