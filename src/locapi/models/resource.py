# locapi/models/resource.py
"""Pydantic models for the ``/resource/{resource_id}/`` route.

A resource response shares its envelope with item responses; only the
``resource`` section differs, describing the single digitized resource that
was requested.
"""

from .base import LocModel
from .item import File, ItemEnvelope
from .values import BoolOrText, NumberOrText, OneOrMany, TextOrList


class ResourceDetail(LocModel):
    """Detailed description of one digitized resource.

    Attributes:
        files: Files of the resource, grouped per page.
        image: Representative image URL.
        pdf: PDF download URL, when available.
        fulltext_file: Full text (OCR) file URL.
        download_restricted: Whether downloads are restricted, as sent upstream.
        representative_index: Index of the representative file.
    """

    caption: OneOrMany[str] | None = None
    files: OneOrMany[list[File]] | None = None
    audio: TextOrList | None = None
    background: TextOrList | None = None
    begin: TextOrList | None = None
    capture_range: OneOrMany[str] | None = None
    djvu_text_file: TextOrList | None = None
    download_restricted: BoolOrText | None = None
    duration: NumberOrText | None = None
    end: TextOrList | None = None
    fulltext_derivative: TextOrList | None = None
    fulltext_file: TextOrList | None = None
    height: NumberOrText | None = None
    id: TextOrList | None = None
    info: TextOrList | None = None
    image: TextOrList | None = None
    paprika_resource_path: TextOrList | None = None
    pdf: TextOrList | None = None
    representative_index: NumberOrText | None = None
    type: TextOrList | None = None
    url: TextOrList | None = None
    uuid: TextOrList | None = None
    version: NumberOrText | None = None
    video_stream: TextOrList | None = None
    video: TextOrList | None = None
    width: NumberOrText | None = None
    word_coordinates: TextOrList | None = None


class ResourceResponse(ItemEnvelope):
    """Response of the ``/resource/{resource_id}/`` route."""

    resource: OneOrMany[ResourceDetail] | None = None
