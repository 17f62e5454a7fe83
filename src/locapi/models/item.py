# locapi/models/item.py
"""Pydantic models for the ``/item/{item_id}/`` route.

An item response describes one catalog record: its bibliographic attributes
(``item``), the digitized resources attached to it (``resources``), citation
strings (``cite_this``) and a number of related sections. Almost every field
varies between a scalar and an array depending on the record, so the models
below lean on ``OneOrMany``.
Reference: https://www.loc.gov/apis/json-and-yaml/responses/item-and-resource/
"""

from typing import Any

from .base import LocModel, Pagination
from .values import BoolOrText, NumberOrText, OneOrMany, TextOrList


class File(LocModel):
    """One file of a resource (an image size, an audio stream, a PDF, ...).

    Attributes:
        url: Where the file can be fetched.
        mimetype: MIME type of the file.
        height, width: Pixel dimensions for images.
        size: File size in bytes.
        duration: Duration in seconds for audio and video.
        format: IIIF, audio or video specific format information.
        use: Intended use of the file (JSON key ``use``).
    """

    caption: OneOrMany[str] | None = None
    duration: NumberOrText | None = None
    format: OneOrMany[Any] | None = None
    height: NumberOrText | None = None
    info: TextOrList | None = None
    levels: NumberOrText | None = None
    mimetype: TextOrList | None = None
    other_name: TextOrList | None = None
    profile: OneOrMany[str] | None = None
    protocol: TextOrList | None = None
    size: NumberOrText | None = None
    streams: OneOrMany[str] | None = None
    tiles: OneOrMany[str] | None = None
    type: TextOrList | None = None
    url: TextOrList | None = None
    use: TextOrList | None = None
    width: NumberOrText | None = None


class CiteThis(LocModel):
    """Citation strings for an item."""

    chicago: TextOrList | None = None
    mla: TextOrList | None = None
    apa: TextOrList | None = None


# Sections without a documented schema; every key is kept in ``additional``.


class Segment(LocModel):
    pass


class RelatedItem(LocModel):
    pass


class MoreLikeThis(LocModel):
    pass


class Page(LocModel):
    pass


class ItemAttribute(LocModel):
    """The bibliographic record found under an item response's ``item`` key."""

    place_of_publication: TextOrList | None = None
    source_collection: OneOrMany[str] | None = None
    display_offsite: BoolOrText | None = None
    contributors: OneOrMany[str] | None = None
    location_county: OneOrMany[str] | None = None
    access_restricted: BoolOrText | None = None
    site: OneOrMany[str] | None = None
    original_format: OneOrMany[str] | None = None
    partof_title: OneOrMany[str] | None = None
    date: TextOrList | None = None
    item_type: TextOrList | None = None
    url: TextOrList | None = None
    subject_headings: OneOrMany[str] | None = None
    newspaper_title: OneOrMany[str] | None = None
    created_published: OneOrMany[str] | None = None
    extract_urls: OneOrMany[str] | None = None
    partof_division: OneOrMany[str] | None = None
    contents: OneOrMany[str] | None = None
    subject: OneOrMany[str] | None = None
    index: NumberOrText | None = None
    digital_id: OneOrMany[str] | None = None
    call_number: OneOrMany[str] | None = None
    group: OneOrMany[str] | None = None
    score: NumberOrText | None = None
    location_country: OneOrMany[str] | None = None
    title: TextOrList | None = None
    description: TextOrList | None = None
    related_items: OneOrMany[str] | None = None
    id: TextOrList | None = None
    online_format: OneOrMany[str] | None = None
    subjects: OneOrMany[str] | None = None
    language: OneOrMany[str] | None = None
    rights: OneOrMany[str] | None = None
    locations: OneOrMany[str] | None = None
    notes: OneOrMany[str] | None = None
    shelf_id: TextOrList | None = None
    batch: OneOrMany[str] | None = None
    summary: TextOrList | None = None
    digitized: BoolOrText | None = None
    publication_frequency: OneOrMany[str] | None = None
    resources: OneOrMany[str] | None = None
    aka: OneOrMany[str] | None = None
    contributor_names: OneOrMany[str] | None = None
    image_url: OneOrMany[str] | None = None
    access_advisory: OneOrMany[str] | None = None


class ResourceObject(LocModel):
    """A digitized resource listed under an item response's ``resources`` key.

    ``files`` is nested twice: loc.gov groups files per page, and both levels
    may collapse to a single value.
    """

    files: OneOrMany[OneOrMany[File]] | None = None
    caption: OneOrMany[str] | None = None
    url: OneOrMany[str] | None = None
    image: OneOrMany[str] | None = None
    type: TextOrList | None = None
    height: OneOrMany[NumberOrText] | None = None
    width: OneOrMany[NumberOrText] | None = None
    duration: OneOrMany[NumberOrText] | None = None
    mimetype: OneOrMany[str] | None = None
    size: OneOrMany[NumberOrText] | None = None
    id: OneOrMany[str] | None = None
    title: OneOrMany[str] | None = None


class ItemEnvelope(LocModel):
    """Top-level sections shared by item and resource responses."""

    views: OneOrMany[Any] | None = None
    timestamp: NumberOrText | None = None
    locations: OneOrMany[str] | None = None
    fulltext_service: TextOrList | None = None
    next_issue: TextOrList | None = None
    newspaper_holdings_url: TextOrList | None = None
    title_url: TextOrList | None = None
    page: OneOrMany[Page] | None = None
    pagination: OneOrMany[Pagination] | None = None
    cite_this: OneOrMany[CiteThis] | None = None
    calendar_url: TextOrList | None = None
    previous_issue: TextOrList | None = None
    segments: OneOrMany[Segment] | None = None
    related_items: OneOrMany[RelatedItem] | None = None
    word_coordinates_query: OneOrMany[Any] | None = None
    more_like_this: OneOrMany[MoreLikeThis] | None = None
    articles_and_essays: OneOrMany[str] | None = None
    traditional_knowledge_labels: OneOrMany[str] | None = None
    item: OneOrMany[ItemAttribute] | None = None
    word_coordinates_pages: OneOrMany[Any] | None = None
    type: TextOrList | None = None
    options: OneOrMany[Any] | None = None
    resources: OneOrMany[ResourceObject] | None = None


class ItemResponse(ItemEnvelope):
    """Response of the ``/item/{item_id}/`` route."""

    resource: OneOrMany[Any] | None = None
