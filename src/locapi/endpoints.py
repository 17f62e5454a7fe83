"""Defines the loc.gov API routes and builds their request URLs.

Each route is a Pydantic model carrying exactly the parameters that route
accepts; together they form the ``Endpoint`` tagged union (discriminated on
``route``). ``to_url()`` is a pure function of the model: identical inputs always
produce identical URLs, rooted at the default ``https://www.loc.gov`` authority.
The client swaps that authority for the configured deployment.

Routes:
    search       /search/
    collections  /collections/
    collection   /collections/{name}/
    format       /{media type}/
    item         /item/{item_id}/
    resource     /resource/{resource_id}/
"""

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field

from .constants import LOC_BASE_URL, MediaType
from .exceptions import BuildError
from .log_config import logger
from .params import CommonQueryParams, ItemParams, ResourceParams

# --- Route Paths ---
SEARCH = "search"
COLLECTIONS = "collections"
ITEM = "item"
RESOURCE = "resource"


def _kebab(query_string: str) -> str:
    # collection routes expect kebab-case
    return query_string.replace(" ", "-")


class SearchEndpoint(BaseModel):
    """The ``/search/`` route: searches across the whole loc.gov site."""

    route: Literal["search"] = "search"
    params: CommonQueryParams = Field(default_factory=CommonQueryParams)

    model_config = ConfigDict(extra="forbid")

    def to_url(self) -> str:
        """Build the search URL.

        Raises:
            BuildError: If no query, filter, attribute selection, pagination or
                sort was given; a bare search is meaningless to loc.gov.
        """
        if not self.params.has_clauses():
            raise BuildError("No query parameters provided for the search endpoint")
        return f"{LOC_BASE_URL}/{SEARCH}/{self.params.to_query_string()}"


class CollectionsEndpoint(BaseModel):
    """The ``/collections/`` route: lists all digital collections."""

    route: Literal["collections"] = "collections"
    params: CommonQueryParams = Field(default_factory=CommonQueryParams)

    model_config = ConfigDict(extra="forbid")

    def to_url(self) -> str:
        return f"{LOC_BASE_URL}/{COLLECTIONS}/{_kebab(self.params.to_query_string())}"


class CollectionEndpoint(BaseModel):
    """The ``/collections/{name}/`` route for one collection.

    Attributes:
        name: The collection slug in kebab-case, e.g. ``"civil-war-maps"``.
    """

    route: Literal["collection"] = "collection"
    name: str
    params: CommonQueryParams = Field(default_factory=CommonQueryParams)

    model_config = ConfigDict(extra="forbid")

    def to_url(self) -> str:
        return (
            f"{LOC_BASE_URL}/{COLLECTIONS}/{self.name}/"
            f"{_kebab(self.params.to_query_string())}"
        )


class FormatEndpoint(BaseModel):
    """The ``/{format}/`` route, e.g. ``/maps/`` or ``/film-and-videos/``."""

    route: Literal["format"] = "format"
    media_type: MediaType
    params: CommonQueryParams = Field(default_factory=CommonQueryParams)

    model_config = ConfigDict(extra="forbid")

    def to_url(self) -> str:
        return f"{LOC_BASE_URL}/{self.media_type.slug}/{self.params.to_query_string()}"


class ItemEndpoint(BaseModel):
    """The ``/item/{item_id}/`` route.

    Attributes:
        item_id: The identifier segment of the item URL, e.g. ``"2014717546"``.
    """

    route: Literal["item"] = "item"
    item_id: str
    params: ItemParams = Field(default_factory=ItemParams)

    model_config = ConfigDict(extra="forbid")

    def to_url(self) -> str:
        return f"{LOC_BASE_URL}/{ITEM}/{self.item_id}/{self.params.to_query_string()}"


class ResourceEndpoint(BaseModel):
    """The ``/resource/{resource_id}/`` route."""

    route: Literal["resource"] = "resource"
    resource_id: str
    params: ResourceParams = Field(default_factory=ResourceParams)

    model_config = ConfigDict(extra="forbid")

    def to_url(self) -> str:
        return (
            f"{LOC_BASE_URL}/{RESOURCE}/{self.resource_id}/"
            f"{self.params.to_query_string()}"
        )


Endpoint = Annotated[
    SearchEndpoint
    | CollectionsEndpoint
    | CollectionEndpoint
    | FormatEndpoint
    | ItemEndpoint
    | ResourceEndpoint,
    Field(discriminator="route"),
]


def build_url(endpoint: Endpoint) -> str:
    """Build the request URL for any route.

    Args:
        endpoint: One of the route models.

    Returns:
        str: The full URL on the default loc.gov authority.

    Raises:
        BuildError: For a search endpoint without any parameters.
    """
    url = endpoint.to_url()
    logger.debug(f"Built {endpoint.route} URL: {url}")
    return url
