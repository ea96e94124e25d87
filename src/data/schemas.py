"""Pydantic view-models handed to templates and JSON endpoints."""

from __future__ import annotations

from collections.abc import Mapping

from pydantic import BaseModel, Field


class SearchCriteria(BaseModel):
    """Dog search filters echoed back to the search form."""

    location: str = Field(default="", description="Zip code or 'City, ST'")
    size: str = ""
    breed: str = ""
    age: str = ""
    gender: str = ""

    @classmethod
    def from_params(cls, params: Mapping[str, str]) -> SearchCriteria:
        """Build criteria from request parameters, ignoring unknown keys."""
        return cls(
            **{
                name: str(params[name])
                for name in cls.model_fields
                if params.get(name) is not None
            }
        )


class DogSummary(BaseModel):
    """Flat dog record consumed by the templates.

    All fields default to null so an empty instance is the placeholder
    for a dog that could not be loaded.
    """

    id: str | None = None
    shelter_dog_id: str | None = Field(
        default=None, description="Identifier assigned by the shelter"
    )
    name: str | None = None
    photos: list[str] = Field(default_factory=list)
    breed: str | None = None
    breed_link: str | None = Field(default=None, description="URL-safe breed slug")
    age: str | None = None
    sex: str | None = None
    size: str | None = None
    description: str | None = None
    contact: dict | None = None
    location: str | None = None
    shelter_id: str | None = None
    source: str | None = Field(default=None, description="Data source tag")


class ShelterInfo(BaseModel):
    """The shelter owning a dog and the other dogs it lists."""

    dogs: list[DogSummary] | None = None
    details: dict | None = None


class GeneralInfo(BaseModel):
    """Page-wide data for the dog detail page."""

    recently_viewed: list[DogSummary] | None = None
    genders: list[str] | None = None
    sizes: list[str] | None = None


class SearchPage(BaseModel):
    """Everything the search page renders, present on success and failure."""

    dogs: list[DogSummary] = Field(default_factory=list)
    breeds: list[str] = Field(default_factory=list)
    ages: list[str] = Field(default_factory=list)
    genders: list[str] = Field(default_factory=list)
    sizes: list[str] = Field(default_factory=list)
    search_criteria: SearchCriteria = Field(default_factory=SearchCriteria)
    message: str | None = None
    last_offset: int | None = Field(
        default=None, description="Page number of the last successful search"
    )
    api_request: dict | None = Field(
        default=None, description="Descriptor of the Petfinder request sent"
    )


class DogDetailResponse(BaseModel):
    """Dog detail page model.

    Build it through :meth:`success` or :meth:`failure`; both variants
    define every section so templates never hit a missing key.
    """

    fail: bool = False
    message: str | None = None
    dog: DogSummary = Field(default_factory=DogSummary)
    shelter: ShelterInfo = Field(default_factory=ShelterInfo)
    general: GeneralInfo = Field(default_factory=GeneralInfo)

    @classmethod
    def success(
        cls, dog: DogSummary, shelter: ShelterInfo, general: GeneralInfo
    ) -> DogDetailResponse:
        return cls(fail=False, dog=dog, shelter=shelter, general=general)

    @classmethod
    def failure(cls, message: str) -> DogDetailResponse:
        return cls(fail=True, message=message)
