"""Errors raised by the Petfinder API client."""

from __future__ import annotations


class PetfinderError(RuntimeError):
    """Base class for any Petfinder API failure."""


class PetfinderAuthError(PetfinderError):
    """Raised when credentials are missing or authentication fails."""


class RecordDoesNotExist(PetfinderError):
    """Raised when the requested animal or organization is not found,
    or when a search matches no animals."""


class InvalidLocation(PetfinderError):
    """Raised when Petfinder rejects the ``location`` search parameter."""
