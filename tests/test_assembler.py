"""Tests for src/search/assembler.py."""

from __future__ import annotations

from typing import Any

import pytest

from src.search.assembler import breed_slug, to_summary


class TestBreedSlug:
    """Tests for breed slug derivation."""

    @pytest.mark.parametrize(
        ("breed", "expected"),
        [
            ("Shih Tzu", "shih-tzu"),
            ("Pug", "pug"),
            ("German Shepherd Dog", "german-shepherd-dog"),
        ],
    )
    def test_slug(self, breed: str, expected: str) -> None:
        """Should lowercase and hyphenate breed names."""
        assert breed_slug(breed) == expected

    def test_none_breed(self) -> None:
        """Missing breed should stay None."""
        assert breed_slug(None) is None


class TestToSummary:
    """Tests for animal record mapping."""

    def test_maps_fields(self, sample_animal: dict[str, Any]) -> None:
        """Should copy Petfinder fields into the summary shape."""
        dog = to_summary(sample_animal)
        assert dog.id == "101"
        assert dog.shelter_dog_id == "A-101"
        assert dog.name == "Buddy"
        assert dog.breed == "Shih Tzu"
        assert dog.breed_link == "shih-tzu"
        assert dog.age == "Young"
        assert dog.sex == "Male"
        assert dog.size == "Small"
        assert dog.description == "Buddy loves walks."
        assert dog.shelter_id == "NJ123"
        assert dog.contact["email"] == "adopt@shelter.example"

    def test_location_from_contact_address(self, sample_animal: dict[str, Any]) -> None:
        """Location should be 'City, ST' from the contact address."""
        assert to_summary(sample_animal).location == "Hoboken, NJ"

    def test_default_source(self, sample_animal: dict[str, Any]) -> None:
        """Source should default to petfinder."""
        assert to_summary(sample_animal).source == "petfinder"

    def test_prefers_largest_photo(self, sample_animal: dict[str, Any]) -> None:
        """Should pick the full size URL, falling back to smaller sizes."""
        sample_animal["photos"].append({"small": "s.jpg", "medium": "m.jpg"})
        dog = to_summary(sample_animal)
        assert dog.photos == ["https://photos.example/101-f.jpg", "m.jpg"]

    def test_sparse_record(self) -> None:
        """Missing fields should map to None rather than fail."""
        dog = to_summary({"id": 7})
        assert dog.id == "7"
        assert dog.breed is None
        assert dog.breed_link is None
        assert dog.photos == []
        assert dog.location is None
        assert dog.contact is None

    def test_is_deterministic(self, sample_animal: dict[str, Any]) -> None:
        """Mapping the same record twice should give equal results."""
        assert to_summary(sample_animal) == to_summary(sample_animal)
