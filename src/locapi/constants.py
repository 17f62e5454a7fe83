"""Constants used throughout the locapi library.

This module defines the default loc.gov authority, default client settings,
and the enumerations used for URL parameters (response format, format-route
media types and sort fields).
"""

from enum import Enum

# Base URL
LOC_BASE_URL = "https://www.loc.gov"

# Default settings
DEFAULT_TIMEOUT: float = 30.0  # Default request timeout in seconds
DEFAULT_PAGE: int = 1  # Page number sent when the caller does not choose one

LOCAPI_VERSION: str = "0.1.0"
DEFAULT_USER_AGENT: str = f"locapi/{LOCAPI_VERSION}"
CLIENT_HEADERS: dict[str, str] = {
    "accept": "application/json",
    "User-Agent": DEFAULT_USER_AGENT,
}

# --- API Parameter Enums --- #


class Format(Enum):
    """Response format selected with the ``fo`` parameter."""

    JSON = "json"
    YAML = "yaml"

    @property
    def slug(self) -> str:
        return self.value


class SortField(Enum):
    """Sort orders accepted by the ``sb`` parameter."""

    DATE = "date"
    DATE_DESC = "date_desc"
    TITLE_S = "title_s"
    TITLE_S_DESC = "title_s_desc"
    SHELF_ID = "shelf_id"  # call number / physical location
    SHELF_ID_DESC = "shelf_id_desc"

    @property
    def slug(self) -> str:
        return self.value


class MediaType(Enum):
    """Original formats served under their own ``/{format}/`` route."""

    AUDIO = "audio"
    BOOKS = "books"
    FILM_AND_VIDEOS = "film-and-videos"
    LEGISLATION = "legislation"
    MANUSCRIPTS = "manuscripts"
    MAPS = "maps"
    NEWSPAPERS = "newspapers"
    PHOTOS = "photos"
    NOTATED_MUSIC = "notated-music"
    WEB_ARCHIVES = "web-archives"

    @property
    def slug(self) -> str:
        return self.value
