"""Base Pydantic models shared by every loc.gov response.

This module defines the common response base class, which keeps every JSON key
the models do not declare, and the facet and pagination sections that appear
in search, format and collection responses.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .values import NumberOrText, OneOrMany, TextOrList


class LocModel(BaseModel):
    """Base model for loc.gov payloads.

    Declared fields are all optional. Any other key in the payload is kept
    (``extra="allow"``) so that new upstream fields are never dropped or
    rejected; they are available through ``additional``.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    @property
    def additional(self) -> dict[str, Any]:
        """The payload keys that are not declared on this model, as raw JSON values."""
        return dict(self.model_extra or {})


class FilterItem(LocModel):
    """Represents a single filter value within a facet.

    Attributes:
        count: Number of results matching this filter.
        not_: URL excluding this filter (JSON key ``not``).
        off: URL toggling this filter off.
        on: URL toggling this filter on.
        term: The facet term.
        title: Display title of the filter.
    """

    count: NumberOrText | None = None
    not_: TextOrList | None = Field(default=None, alias="not")
    off: TextOrList | None = None
    on: TextOrList | None = None
    term: TextOrList | None = None
    title: TextOrList | None = None


class FacetRes(LocModel):
    """Represents one facet category (e.g. subject, location) and its filters."""

    type: TextOrList | None = None
    filters: OneOrMany[FilterItem] | None = None


class PageListItem(LocModel):
    """One entry of the numbered page list in ``Pagination.page_list``."""

    url: TextOrList | None = None
    number: NumberOrText | None = None


class Pagination(LocModel):
    """Represents the pagination section of list responses.

    Counts are ``NumberOrText`` because loc.gov sometimes sends them quoted.

    Attributes:
        from_: Index of the first result on this page (JSON key ``from``).
        to: Index of the last result on this page.
        of: Total number of results.
        total: Total number of pages.
        current: Current page number.
        perpage: Results per page.
        perpage_options: Page sizes offered by the site.
        first, last, next, previous: Navigation URLs.
        results: Human readable range, e.g. ``"1 - 25"``.
        page_list: Numbered page links.
    """

    from_: NumberOrText | None = Field(default=None, alias="from")
    results: TextOrList | None = None
    last: TextOrList | None = None
    total: NumberOrText | None = None
    previous: TextOrList | None = None
    perpage: NumberOrText | None = None
    perpage_options: OneOrMany[int] | None = None
    of: NumberOrText | None = None
    next: TextOrList | None = None
    current: NumberOrText | None = None
    to: NumberOrText | None = None
    page_list: OneOrMany[PageListItem] | None = None
    first: TextOrList | None = None
