"""Pydantic models for loc.gov API responses."""

from .base import FacetRes, FilterItem, LocModel, PageListItem, Pagination
from .collection import CollectionItem, CollectionResponse, CollectionsResponse
from .item import (
    CiteThis,
    File,
    ItemAttribute,
    ItemEnvelope,
    ItemResponse,
    MoreLikeThis,
    Page,
    RelatedItem,
    ResourceObject,
    Segment,
)
from .resource import ResourceDetail, ResourceResponse
from .search import FormatResponse, ItemSummary, ResultItem, SearchResultResponse
from .values import (
    BoolOrText,
    Many,
    NumberOrText,
    OneOrMany,
    Single,
    TextOrList,
    as_list,
    to_bool,
    to_number,
)

__all__ = [
    "BoolOrText",
    "CiteThis",
    "CollectionItem",
    "CollectionResponse",
    "CollectionsResponse",
    "FacetRes",
    "File",
    "FilterItem",
    "FormatResponse",
    "ItemAttribute",
    "ItemEnvelope",
    "ItemResponse",
    "ItemSummary",
    "LocModel",
    "Many",
    "MoreLikeThis",
    "NumberOrText",
    "OneOrMany",
    "Page",
    "PageListItem",
    "Pagination",
    "RelatedItem",
    "ResourceDetail",
    "ResourceObject",
    "ResourceResponse",
    "ResultItem",
    "SearchResultResponse",
    "Segment",
    "Single",
    "TextOrList",
    "as_list",
    "to_bool",
    "to_number",
]
