"""Central application configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Config:
    """Central application configuration.

    Reads from environment variables with sensible defaults.
    Petfinder credentials have no default and must be provided
    through the environment or a ``.env`` file.
    """

    # Petfinder API
    petfinder_api_key: str = field(
        default_factory=lambda: os.getenv("PETFINDER_API_KEY", "")
    )
    petfinder_secret: str = field(
        default_factory=lambda: os.getenv("PETFINDER_SECRET", "")
    )
    petfinder_base_url: str = field(
        default_factory=lambda: os.getenv(
            "PETFINDER_BASE_URL", "https://api.petfinder.com/v2"
        )
    )
    request_timeout: float = 30.0

    # Search
    search_page_size: int = 20

    # Session
    session_secret: str = field(
        default_factory=lambda: os.getenv("SESSION_SECRET", "simple-puppy-dev-secret")
    )
    recently_viewed_key: str = "recentlyViewedDogs"

    # Server
    host: str = field(default_factory=lambda: os.getenv("HOST", "0.0.0.0"))
    port: int = field(default_factory=lambda: int(os.getenv("PORT", "8000")))


def get_config() -> Config:
    """Get application configuration.

    Returns:
        Config instance with values from environment or defaults.
    """
    return Config()
