"""Parameter models for loc.gov requests and their query-string encoding.

This module holds the structured inputs callers pass to the client: attribute
selection (``at`` / ``at!``), facet filters (``fa``), the query parameters shared
by the list routes, and the narrower boolean attribute flags accepted by the
item and resource routes.

The models keep "unset" as ``None``; defaults (``fo=json``, ``sp=1``) are only
applied when a model is encoded.
"""

from typing import ClassVar
from urllib.parse import quote

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .constants import DEFAULT_PAGE, Format, SortField
from .log_config import logger

# Characters left as-is in free-text queries. Spaces are turned into "+" by the
# client, or into "-" by the collection routes.
QUERY_SAFE_CHARS = " +:,"
# Facet values also keep "/" literal, as in date ranges like "dates:1800/1899".
FILTER_SAFE_CHARS = QUERY_SAFE_CHARS + "/"


class AttributeSelection(BaseModel):
    """Selects optional response sections to include or exclude.

    Attributes:
        include: Sections to include, e.g. ``["pagination", "results"]``.
        exclude: Sections to exclude, e.g. ``["more_like_this"]``.
    """

    include: list[str] = Field(default_factory=list)
    exclude: list[str] = Field(default_factory=list)

    model_config = ConfigDict(extra="forbid")

    @model_validator(mode="after")
    def warn_on_conflicting_names(self) -> "AttributeSelection":
        conflicting = sorted(set(self.include) & set(self.exclude))
        if conflicting:
            logger.warning(
                f"Attributes both included and excluded: {conflicting}. "
                "loc.gov decides which clause wins."
            )
        return self

    def to_query_param(self) -> str:
        """Encode as ``at=a,b&at!=c``, omitting an empty side entirely.

        Example:
            >>> AttributeSelection(include=["item", "resources"], exclude=["more_like_this"]).to_query_param()
            'at=item,resources&at!=more_like_this'
        """
        parts = []
        if self.include:
            parts.append(f"at={','.join(self.include)}")
        if self.exclude:
            parts.append(f"at!={','.join(self.exclude)}")
        return "&".join(parts)

    def is_empty(self) -> bool:
        return not self.include and not self.exclude


class FacetFilter(BaseModel):
    """Facet filters (``fa``), each a ``field:value`` string such as ``"subject:maps"``.

    The ``field:value`` shape is not checked here; loc.gov defines the vocabulary.
    Each filter is percent-encoded like the query text, so ``#``, ``&`` and ``=``
    in a value cannot cut the query string short.
    """

    filters: list[str] = Field(default_factory=list)

    model_config = ConfigDict(extra="forbid")

    def to_query_param(self) -> str:
        """Percent-encode each filter and join them with ``|``.

        Example:
            >>> FacetFilter(filters=["location:ohio", "subject:wildlife"]).to_query_param()
            'location:ohio|subject:wildlife'
        """
        return "|".join(quote(f, safe=FILTER_SAFE_CHARS) for f in self.filters)


class CommonQueryParams(BaseModel):
    """Query parameters shared by the search, format and collection routes.

    Attributes:
        format: Response format (``fo``); ``json`` when unset.
        attributes: Sections to include or exclude (``at`` / ``at!``).
        query: Keyword search over metadata and full text (``q``). Pass raw
            text: it is percent-encoded when the URL is built, so an already
            encoded sequence such as ``%20`` is sent as ``%2520``.
        filter: Facet filters (``fa``).
        per_page: Results per page (``c``); loc.gov defaults to 25.
        page: Page number (``sp``); the first page is 1 and is sent when unset.
        sort: Sort order (``sb``).
    """

    format: Format | None = None
    attributes: AttributeSelection | None = None
    query: str | None = None
    filter: FacetFilter | None = None
    per_page: int | None = Field(default=None, ge=0)
    page: int | None = Field(default=None, ge=0)
    sort: SortField | None = None

    model_config = ConfigDict(extra="forbid")

    def has_clauses(self) -> bool:
        """Whether the caller set anything besides the response format."""
        return any(
            (
                self.attributes is not None and not self.attributes.is_empty(),
                bool(self.query),
                self.filter is not None and bool(self.filter.filters),
                self.per_page is not None,
                self.page is not None,
                self.sort is not None,
            )
        )

    def to_query_string(self) -> str:
        """Encode the parameters in the fixed loc.gov clause order.

        The result is ``?fo=<format>&`` followed by the attribute selection and
        then ``&q``, ``&fa``, ``&c``, ``&sp`` and ``&sb`` clauses. Unset clauses
        are omitted, except the page which falls back to ``sp=1``.
        """
        fmt = (self.format or Format.JSON).slug
        attributes = self.attributes.to_query_param() if self.attributes else ""
        query = f"&q={quote(self.query, safe=QUERY_SAFE_CHARS)}" if self.query else ""
        facet = (
            f"&fa={self.filter.to_query_param()}"
            if self.filter and self.filter.filters
            else ""
        )
        per_page = f"&c={self.per_page}" if self.per_page is not None else ""
        page = f"&sp={self.page if self.page is not None else DEFAULT_PAGE}"
        sort = f"&sb={self.sort.slug}" if self.sort else ""
        return f"?fo={fmt}&{attributes}{query}{facet}{per_page}{page}{sort}"


class _AttributeFlags(BaseModel):
    """Boolean ``at=<flag>`` switches used by the item and resource routes."""

    flag_order: ClassVar[tuple[str, ...]] = ()

    model_config = ConfigDict(extra="forbid")

    def to_query_param(self) -> str:
        """One ``at=<flag>`` clause per flag set to True, joined by ``&``."""
        return "&".join(
            f"at={name}" for name in self.flag_order if getattr(self, name) is True
        )


class ItemAttributes(_AttributeFlags):
    """Sections that can be requested from the ``/item/{item_id}/`` route.

    Attributes:
        item: Include the bibliographic record (``at=item``).
        resources: Include the digitized resources (``at=resources``).
        cite_this: Include citation strings (``at=cite_this``).
    """

    flag_order: ClassVar[tuple[str, ...]] = ("item", "resources", "cite_this")

    cite_this: bool | None = None
    item: bool | None = None
    resources: bool | None = None


class ResourceAttributes(_AttributeFlags):
    """Sections that can be requested from the ``/resource/{resource_id}/`` route.

    Attributes:
        resource: Include the resource details (``at=resource``).
        page: Include page information (``at=page``).
        segments: Include segment information (``at=segments``).
        cite_this: Include citation strings (``at=cite_this``).
        resources: Include sibling resources (``at=resources``).
        item: Include the parent item record (``at=item``).
    """

    flag_order: ClassVar[tuple[str, ...]] = (
        "resource",
        "page",
        "segments",
        "cite_this",
        "resources",
        "item",
    )

    cite_this: bool | None = None
    item: bool | None = None
    page: bool | None = None
    resource: bool | None = None
    resources: bool | None = None
    segments: bool | None = None


class ItemParams(BaseModel):
    """Parameters of the ``/item/{item_id}/`` route."""

    format: Format | None = None
    attributes: ItemAttributes | None = None

    model_config = ConfigDict(extra="forbid")

    def to_query_string(self) -> str:
        fmt = (self.format or Format.JSON).slug
        attributes = self.attributes.to_query_param() if self.attributes else ""
        return f"?fo={fmt}&{attributes}"


class ResourceParams(BaseModel):
    """Parameters of the ``/resource/{resource_id}/`` route."""

    format: Format | None = None
    attributes: ResourceAttributes | None = None

    model_config = ConfigDict(extra="forbid")

    def to_query_string(self) -> str:
        fmt = (self.format or Format.JSON).slug
        attributes = self.attributes.to_query_param() if self.attributes else ""
        return f"?fo={fmt}&{attributes}"
