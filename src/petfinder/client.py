"""Thin client for the Petfinder v2 REST API."""

from __future__ import annotations

import logging
import time
from collections.abc import Mapping
from typing import Any

import requests

from src.petfinder.exceptions import (
    InvalidLocation,
    PetfinderAuthError,
    PetfinderError,
    RecordDoesNotExist,
)

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.petfinder.com/v2"

# Values accepted by the /animals endpoint for dogs.
AGES: list[str] = ["Baby", "Young", "Adult", "Senior"]
GENDERS: list[str] = ["Male", "Female"]
SIZES: list[str] = ["Small", "Medium", "Large", "Xlarge"]

_CRITERIA_KEYS = ("location", "size", "breed", "age", "gender")


class PetfinderClient:
    """Client for the dog-related parts of the Petfinder v2 API.

    Handles the OAuth client-credentials flow and token refresh, and
    translates API failures into the errors in
    :mod:`src.petfinder.exceptions`.

    Args:
        api_key: Petfinder API key (OAuth client id).
        secret: Petfinder API secret.
        base_url: API root, without trailing slash.
        timeout: Per-request timeout in seconds.
        page_size: Number of animals requested per search page.

    Missing credentials surface as PetfinderAuthError on the first request.
    """

    def __init__(
        self,
        api_key: str,
        secret: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 30.0,
        page_size: int = 20,
    ) -> None:
        self.api_key = api_key
        self.secret = secret
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.page_size = page_size

        self.session = requests.Session()
        self._token: str | None = None
        self._token_exp: float = 0.0
        self._breeds: list[str] | None = None

    def close(self) -> None:
        """Release the underlying HTTP connection pool."""
        self.session.close()

    # ------------------------------------------------------------------
    # Auth
    # ------------------------------------------------------------------

    def _ensure_token(self) -> None:
        """Fetch a new access token if missing or close to expiry."""
        if self._token and time.time() < self._token_exp - 60:
            return
        if not self.api_key or not self.secret:
            raise PetfinderAuthError(
                "Missing credentials: set PETFINDER_API_KEY and PETFINDER_SECRET"
            )

        try:
            resp = self.session.post(
                f"{self.base_url}/oauth2/token",
                data={
                    "grant_type": "client_credentials",
                    "client_id": self.api_key,
                    "client_secret": self.secret,
                },
                timeout=self.timeout,
            )
        except requests.RequestException as err:
            raise PetfinderError(f"Petfinder token request failed: {err}") from err

        if resp.status_code in (400, 401):
            raise PetfinderAuthError("Petfinder rejected the API credentials")
        if not resp.ok:
            raise PetfinderError(
                f"Petfinder token request returned {resp.status_code}"
            )

        try:
            data = resp.json()
            self._token = data["access_token"]
        except (ValueError, KeyError, TypeError) as err:
            raise PetfinderError("Petfinder token response has no access token") from err
        self._token_exp = time.time() + int(data.get("expires_in", 3600))
        logger.info("Authenticated with Petfinder API")

    def _headers(self) -> dict[str, str]:
        self._ensure_token()
        return {"Authorization": f"Bearer {self._token}"}

    def ping(self) -> bool:
        """Return True if an access token can be obtained."""
        try:
            self._ensure_token()
        except PetfinderError as exc:
            logger.warning("Petfinder API unreachable: %s", exc)
            return False
        return True

    # ------------------------------------------------------------------
    # HTTP helpers
    # ------------------------------------------------------------------

    def _get(self, path: str, params: dict[str, Any] | None = None) -> dict[str, Any]:
        """GET with auth; on 401, refresh the token once and retry."""
        url = f"{self.base_url}{path}"
        try:
            resp = self.session.get(
                url, headers=self._headers(), params=params, timeout=self.timeout
            )
            if resp.status_code == 401:
                self._token = None
                resp = self.session.get(
                    url, headers=self._headers(), params=params, timeout=self.timeout
                )
        except requests.RequestException as err:
            raise PetfinderError(f"Request to {url} failed: {err}") from err

        _raise_for_status(resp)
        return resp.json()

    # ------------------------------------------------------------------
    # Search
    # ------------------------------------------------------------------

    def search_params(
        self, criteria: Mapping[str, str], offset: int | None = None
    ) -> dict[str, Any]:
        """Build /animals query parameters from search criteria.

        Empty criteria values are dropped so Petfinder does not filter on them.
        """
        params: dict[str, Any] = {"type": "dog", "limit": self.page_size}
        for key in _CRITERIA_KEYS:
            value = criteria.get(key)
            if value:
                params[key] = value
        if offset:
            params["page"] = offset
        return params

    def describe_search(
        self, criteria: Mapping[str, str], offset: int | None = None
    ) -> dict[str, Any]:
        """Describe the search request for diagnostics. Carries no credentials."""
        return {
            "method": "GET",
            "url": f"{self.base_url}/animals",
            "params": self.search_params(criteria, offset),
        }

    def find_dogs(
        self, criteria: Mapping[str, str], offset: int | None = None
    ) -> dict[str, Any]:
        """Search adoptable dogs.

        Args:
            criteria: Mapping with optional location, size, breed, age, gender.
            offset: Page number to fetch; first page when None.

        Returns:
            Decoded payload with ``animals`` and ``pagination`` keys.

        Raises:
            RecordDoesNotExist: If no dogs match the criteria.
            InvalidLocation: If Petfinder rejects the location.
            PetfinderError: For any other API failure.
        """
        data = self._get("/animals", params=self.search_params(criteria, offset))
        if not data.get("animals"):
            raise RecordDoesNotExist("No dogs matched the search criteria")
        return data

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    def get_dog(self, dog_id: str) -> dict[str, Any]:
        """Return the animal record for *dog_id*."""
        return self._get(f"/animals/{dog_id}")["animal"]

    def get_shelter_dogs(self, shelter_id: str) -> list[dict[str, Any]]:
        """Return the animals listed by a shelter, in Petfinder's order.

        The list may contain other animal types; callers filter on ``type``.
        """
        data = self._get("/animals", params={"organization": shelter_id, "limit": 100})
        return data.get("animals", [])

    def get_shelter_details(self, shelter_id: str) -> dict[str, Any]:
        """Return the organization record for *shelter_id*."""
        return self._get(f"/organizations/{shelter_id}")["organization"]

    def get_breed_list(self) -> list[str]:
        """Return dog breed names, fetched once per client."""
        if self._breeds is None:
            data = self._get("/types/dog/breeds")
            self._breeds = [breed["name"] for breed in data.get("breeds", [])]
            logger.info("Cached %d Petfinder dog breeds", len(self._breeds))
        return list(self._breeds)

    def get_ages(self) -> list[str]:
        return list(AGES)

    def get_genders(self) -> list[str]:
        return list(GENDERS)

    def get_sizes(self) -> list[str]:
        return list(SIZES)


def _raise_for_status(resp: requests.Response) -> None:
    """Translate an error response into a Petfinder exception.

    Petfinder reports errors as problem+json bodies; a 400 whose
    ``invalid-params`` entries name ``location`` is an invalid location.
    """
    if resp.ok:
        return

    try:
        body = resp.json()
    except ValueError:
        body = {}
    if not isinstance(body, dict):
        body = {}
    detail = body.get("detail") or body.get("title") or resp.reason

    if resp.status_code == 404:
        raise RecordDoesNotExist(detail or "Record not found")

    invalid_params = body.get("invalid-params") or []
    if resp.status_code == 400 and any(
        param.get("path") == "location" for param in invalid_params
    ):
        raise InvalidLocation(detail or "Invalid location")

    raise PetfinderError(f"Petfinder API returned {resp.status_code}: {detail}")
