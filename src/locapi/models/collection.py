# locapi/models/collection.py
"""Pydantic models for the ``/collections/`` and ``/collections/{name}/`` routes.

The collections listing returns one ``CollectionItem`` per digital collection.
A single collection returns the items it holds, which have the same shape as
search results.
"""

from .base import FacetRes, LocModel, Pagination
from .search import ResultItem
from .values import OneOrMany, TextOrList


class CollectionItem(LocModel):
    """Represents one digital collection in a collections listing.

    Attributes:
        id: The collection URL, used as its identifier.
        title: Display title.
        description: Collection description.
        collection_slug: The kebab-case name used in ``/collections/{name}/``.
        normalized_slug: Normalized form of the slug.
        url: Collection landing page.
    """

    id: TextOrList | None = None
    title: TextOrList | None = None
    description: TextOrList | None = None
    private_note: TextOrList | None = None
    collection_slug: TextOrList | None = None
    organization: TextOrList | None = None
    url: TextOrList | None = None
    site_map: TextOrList | None = None
    type: TextOrList | None = None
    normalized_slug: TextOrList | None = None
    created_at: TextOrList | None = None
    updated_at: TextOrList | None = None


class CollectionsResponse(LocModel):
    """Response of the ``/collections/`` route."""

    facets: OneOrMany[FacetRes] | None = None
    pagination: Pagination | None = None
    results: list[CollectionItem] | None = None


class CollectionResponse(LocModel):
    """Response of the ``/collections/{name}/`` route."""

    facets: OneOrMany[FacetRes] | None = None
    pagination: Pagination | None = None
    results: list[ResultItem] | None = None
