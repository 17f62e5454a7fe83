# locapi/models/search.py
"""Pydantic models for search and format-route responses.

The ``/search/`` and ``/{format}/`` routes return the same envelope: facets,
pagination and a list of result summaries.
Reference: https://www.loc.gov/apis/json-and-yaml/responses/search-results/
"""

from .base import FacetRes, LocModel, Pagination
from .values import BoolOrText, NumberOrText, OneOrMany, TextOrList


class ItemSummary(LocModel):
    """Condensed item record nested in a search result's ``item`` field."""

    call_number: OneOrMany[str] | None = None
    contributor_names: OneOrMany[str] | None = None
    created_published: OneOrMany[str] | None = None
    date_issued: TextOrList | None = None
    digitized_label: TextOrList | None = None
    genre: OneOrMany[str] | None = None
    language: OneOrMany[str] | None = None
    location: OneOrMany[str] | None = None
    medium: TextOrList | None = None
    other_title: OneOrMany[str] | None = None
    publication_frequency: OneOrMany[str] | None = None
    score: NumberOrText | None = None
    subject_headings: OneOrMany[str] | None = None
    subjects: OneOrMany[str] | None = None
    summary: TextOrList | None = None
    title: TextOrList | None = None


class ResultItem(LocModel):
    """Represents one entry of the ``results`` list of a search response.

    Attributes:
        id: The item URL on loc.gov, used as its identifier.
        title: The item title.
        date: Date of the item.
        contributor: Contributor names.
        subject: Subject terms.
        location: Place names.
        original_format: Original formats (e.g. "map", "photo, print, drawing").
        online_format: Online formats (e.g. "image", "pdf").
        image_url: Thumbnail and image URLs.
        item: The condensed item record.
        type: Result type(s).
        access_restricted: Whether access is restricted, as sent upstream.
        digitized: Whether the item is digitized, as sent upstream.
    """

    access_restricted: BoolOrText | None = None
    aka: OneOrMany[str] | None = None
    campaigns: OneOrMany[str] | None = None
    contributor: OneOrMany[str] | None = None
    date: TextOrList | None = None
    dates: OneOrMany[str] | None = None
    description: TextOrList | None = None
    digitized: BoolOrText | None = None
    extract_timestamp: TextOrList | None = None
    group: OneOrMany[str] | None = None
    hassegments: BoolOrText | None = None
    id: TextOrList | None = None
    image_url: OneOrMany[str] | None = None
    index: NumberOrText | None = None
    item: OneOrMany[ItemSummary] | None = None
    language: OneOrMany[str] | None = None
    location: OneOrMany[str] | None = None
    mime_type: OneOrMany[str] | None = None
    number: OneOrMany[str] | None = None
    online_format: OneOrMany[str] | None = None
    original_format: OneOrMany[str] | None = None
    other_title: OneOrMany[str] | None = None
    partof: OneOrMany[str] | None = None
    publication_frequency: OneOrMany[str] | None = None
    shelf_id: TextOrList | None = None
    site: OneOrMany[str] | None = None
    subject: OneOrMany[str] | None = None
    title: TextOrList | None = None
    type: TextOrList | None = None


class SearchResultResponse(LocModel):
    """Response of the ``/search/`` route."""

    facets: OneOrMany[FacetRes] | None = None
    pagination: Pagination | None = None
    results: list[ResultItem] | None = None


class FormatResponse(LocModel):
    """Response of the ``/{format}/`` routes (e.g. ``/maps/``)."""

    facets: OneOrMany[FacetRes] | None = None
    pagination: Pagination | None = None
    results: list[ResultItem] | None = None
