"""Shared test fixtures for the Simple Puppy test suite."""

from __future__ import annotations

from typing import Any
from unittest.mock import MagicMock

import pytest

from src.petfinder.client import AGES, GENDERS, SIZES


def make_animal(
    animal_id: int = 101,
    name: str = "Buddy",
    breed: str = "Shih Tzu",
    animal_type: str = "Dog",
    organization_id: str = "NJ123",
) -> dict[str, Any]:
    """Build a Petfinder v2 animal record."""
    return {
        "id": animal_id,
        "organization_id": organization_id,
        "organization_animal_id": f"A-{animal_id}",
        "type": animal_type,
        "name": name,
        "breeds": {"primary": breed, "secondary": None, "mixed": False},
        "age": "Young",
        "gender": "Male",
        "size": "Small",
        "description": f"{name} loves walks.",
        "photos": [
            {
                "small": f"https://photos.example/{animal_id}-s.jpg",
                "medium": f"https://photos.example/{animal_id}-m.jpg",
                "large": f"https://photos.example/{animal_id}-l.jpg",
                "full": f"https://photos.example/{animal_id}-f.jpg",
            }
        ],
        "contact": {
            "email": "adopt@shelter.example",
            "phone": "555-0100",
            "address": {
                "address1": None,
                "city": "Hoboken",
                "state": "NJ",
                "postcode": "07030",
                "country": "US",
            },
        },
    }


@pytest.fixture
def sample_animal() -> dict[str, Any]:
    """Create a sample Petfinder animal record."""
    return make_animal()


@pytest.fixture
def search_payload() -> dict[str, Any]:
    """Create a sample /animals search payload."""
    return {
        "animals": [make_animal(101, "Buddy"), make_animal(102, "Luna", "Pug")],
        "pagination": {"count_per_page": 20, "total_count": 2, "current_page": 1},
    }


@pytest.fixture
def mock_petfinder() -> MagicMock:
    """Create a mock Petfinder client with static option lists."""
    mock = MagicMock()
    mock.get_ages.return_value = list(AGES)
    mock.get_genders.return_value = list(GENDERS)
    mock.get_sizes.return_value = list(SIZES)
    mock.get_breed_list.return_value = ["Pug", "Shih Tzu"]
    mock.describe_search.return_value = {
        "method": "GET",
        "url": "https://api.petfinder.com/v2/animals",
        "params": {"type": "dog"},
    }
    mock.ping.return_value = True
    return mock


@pytest.fixture
def animal_factory():
    """Return a builder for Petfinder animal records."""
    return make_animal
