"""Map Petfinder animal records onto template view-models."""

from __future__ import annotations

from typing import Any

from src.data.schemas import DogSummary

DEFAULT_SOURCE = "petfinder"

# Preferred photo size first.
_PHOTO_SIZES = ("full", "large", "medium", "small")


def breed_slug(breed: str | None) -> str | None:
    """Return the URL-safe slug for a breed name, e.g. 'Shih Tzu' -> 'shih-tzu'."""
    if breed is None:
        return None
    return breed.lower().replace(" ", "-")


def to_summary(animal: dict[str, Any]) -> DogSummary:
    """Convert a Petfinder v2 animal record into a DogSummary.

    Args:
        animal: Decoded ``animal`` object from the Petfinder API.

    Returns:
        DogSummary with every field the templates read.
    """
    breed = (animal.get("breeds") or {}).get("primary")
    contact = animal.get("contact") or None

    return DogSummary(
        id=_as_str(animal.get("id")),
        shelter_dog_id=_as_str(animal.get("organization_animal_id")),
        name=animal.get("name"),
        photos=_photo_urls(animal.get("photos") or []),
        breed=breed,
        breed_link=breed_slug(breed),
        age=animal.get("age"),
        sex=animal.get("gender"),
        size=animal.get("size"),
        description=animal.get("description"),
        contact=contact,
        location=_location(contact),
        shelter_id=_as_str(animal.get("organization_id")),
        source=animal.get("source") or DEFAULT_SOURCE,
    )


def _as_str(value: Any) -> str | None:
    return None if value is None else str(value)


def _photo_urls(photos: list[dict[str, str]]) -> list[str]:
    """Pick the largest available URL of each photo, keeping their order."""
    urls = []
    for photo in photos:
        url = next((photo[size] for size in _PHOTO_SIZES if photo.get(size)), None)
        if url:
            urls.append(url)
    return urls


def _location(contact: dict[str, Any] | None) -> str | None:
    if not contact:
        return None
    address = contact.get("address") or {}
    parts = [part for part in (address.get("city"), address.get("state")) if part]
    return ", ".join(parts) or None
