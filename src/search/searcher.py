"""Dog search orchestration on top of the Petfinder client."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from src.data.schemas import SearchCriteria, SearchPage
from src.petfinder.client import PetfinderClient
from src.petfinder.exceptions import InvalidLocation, RecordDoesNotExist
from src.search.assembler import to_summary

logger = logging.getLogger(__name__)

NO_DOGS_MESSAGE = (
    "No Dogs found for the criteria provided. "
    "Please make some changes and try again."
)
INVALID_ZIP_MESSAGE = (
    "The zip code provided is invalid. Please change it and try again."
)
INVALID_CRITERIA_MESSAGE = (
    "The criteria provided is invalid. Please make some changes and try again."
)


class DogSearcher:
    """Runs dog searches and shapes the results for the search page.

    Args:
        client: Petfinder API client.
    """

    def __init__(self, client: PetfinderClient) -> None:
        self.client = client

    def show_search_page(self, params: Mapping[str, str]) -> SearchPage:
        """Build the search page model for the given request parameters.

        With no parameters the page shows an empty form and no dogs.
        Otherwise the criteria are sent to Petfinder and failures are
        turned into a user-facing message.

        Args:
            params: Request query parameters (criteria plus optional offset).

        Returns:
            SearchPage with every key populated.
        """
        page = SearchPage(
            ages=self.client.get_ages(),
            genders=self.client.get_genders(),
            sizes=self.client.get_sizes(),
        )

        if not params:
            page.breeds = self._breed_list()
            page.message = ""
            return page

        criteria = SearchCriteria.from_params(params)
        offset = _parse_offset(params.get("offset"))
        page.search_criteria = criteria
        page.api_request = self.client.describe_search(criteria.model_dump(), offset)
        page.last_offset = offset

        try:
            payload = self.client.find_dogs(criteria.model_dump(), offset)
        except Exception as exc:
            page.message = _failure_message(exc)
            return page

        page.dogs = [to_summary(animal) for animal in payload.get("animals", [])]
        page.last_offset = _current_page(payload)
        page.breeds = self._breed_list()
        page.message = ""
        return page

    def find_dogs(self, params: Mapping[str, str]) -> dict[str, Any]:
        """Search dogs and return the raw Petfinder payload.

        Returns:
            Petfinder payload on success, or ``{"fail": True, "message": ...}``.
        """
        criteria = SearchCriteria.from_params(params)
        offset = _parse_offset(params.get("offset"))
        try:
            return self.client.find_dogs(criteria.model_dump(), offset)
        except Exception as exc:
            return {"fail": True, "message": _failure_message(exc)}

    def _breed_list(self) -> list[str]:
        try:
            return self.client.get_breed_list()
        except Exception as exc:
            logger.warning("Failed to fetch Petfinder breed list: %s", exc)
            return []


def _failure_message(exc: Exception) -> str:
    """Log a search failure and return the message shown to the user."""
    if isinstance(exc, RecordDoesNotExist):
        return NO_DOGS_MESSAGE
    if isinstance(exc, InvalidLocation):
        logger.error("Petfinder search page: Invalid zip code exception")
        return INVALID_ZIP_MESSAGE
    logger.error("Petfinder search page: %s", exc)
    return INVALID_CRITERIA_MESSAGE


def _parse_offset(value: Any) -> int | None:
    try:
        return int(value) if value else None
    except (TypeError, ValueError):
        return None


def _current_page(payload: dict[str, Any]) -> int | None:
    pagination = payload.get("pagination") or {}
    page = pagination.get("current_page")
    return int(page) if page is not None else None
