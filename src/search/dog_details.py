"""Dog detail page orchestration."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from src.data.schemas import DogDetailResponse, DogSummary, GeneralInfo, ShelterInfo
from src.petfinder.client import PetfinderClient
from src.petfinder.exceptions import RecordDoesNotExist
from src.search import recently_viewed
from src.search.assembler import to_summary

logger = logging.getLogger(__name__)

DOG_UNAVAILABLE_MESSAGE = (
    "This Dog was just adopted or is no longer available. "
    "Please select another Dog to view the details."
)


class DogDetailService:
    """Loads a dog with its shelter and the visitor's recently viewed dogs.

    Args:
        client: Petfinder API client.
    """

    def __init__(self, client: PetfinderClient) -> None:
        self.client = client

    def get_dog(
        self, dog_id: str, viewed: Sequence[str] | None = None
    ) -> tuple[DogDetailResponse, list[str]]:
        """Build the detail page model for *dog_id*.

        Calls Petfinder sequentially: the dog, the shelter's dogs, the
        shelter details, then each recently viewed dog.

        Args:
            dog_id: Petfinder animal id.
            viewed: Recently viewed dog ids from the session.

        Returns:
            Tuple of (response, updated recently viewed ids). The ids are
            unchanged when the dog could not be loaded.
        """
        try:
            dog = to_summary(self.client.get_dog(dog_id))
            dog.id = dog_id

            shelter = ShelterInfo(
                dogs=self._shelter_dogs(dog.shelter_id),
                details=self._shelter_details(dog.shelter_id),
            )
            general = GeneralInfo(
                recently_viewed=recently_viewed.list_except(viewed, dog_id, self.client),
                genders=self.client.get_genders(),
                sizes=self.client.get_sizes(),
            )
        except RecordDoesNotExist:
            logger.error("Petfinder dog details page: Invalid dog id %s provided.", dog_id)
            return DogDetailResponse.failure(DOG_UNAVAILABLE_MESSAGE), list(viewed or [])
        except Exception:
            logger.error(
                "Petfinder dog details page: Unidentified exception for dog id %s.",
                dog_id,
                exc_info=True,
            )
            return DogDetailResponse.failure(DOG_UNAVAILABLE_MESSAGE), list(viewed or [])

        response = DogDetailResponse.success(dog=dog, shelter=shelter, general=general)
        return response, recently_viewed.record(viewed, dog_id)

    def _shelter_dogs(self, shelter_id: str | None) -> list[DogSummary]:
        """Summaries of the dogs listed by the shelter, other animals excluded."""
        if not shelter_id:
            return []
        animals = self.client.get_shelter_dogs(shelter_id)
        return [to_summary(animal) for animal in animals if animal.get("type") == "Dog"]

    def _shelter_details(self, shelter_id: str | None) -> dict[str, Any] | None:
        if not shelter_id:
            return None
        try:
            return self.client.get_shelter_details(shelter_id)
        except Exception:
            logger.warning("Failed to fetch shelter details for shelter=%s", shelter_id)
            return None
