"""locapi: a typed client for the Library of Congress (loc.gov) JSON API.

This package builds correctly-encoded loc.gov request URLs from structured
parameter models, performs the requests with httpx and decodes the
shape-variant JSON responses into Pydantic models.
"""

__version__ = "0.1.0"

from . import client, config, endpoints, exceptions, log_config, models, params, types
from .client import LocClient
from .constants import Format, MediaType, SortField
from .params import (
    AttributeSelection,
    CommonQueryParams,
    FacetFilter,
    ItemAttributes,
    ItemParams,
    ResourceAttributes,
    ResourceParams,
)

__all__ = [
    "__version__",
    "AttributeSelection",
    "CommonQueryParams",
    "FacetFilter",
    "Format",
    "ItemAttributes",
    "ItemParams",
    "LocClient",
    "MediaType",
    "ResourceAttributes",
    "ResourceParams",
    "SortField",
    "client",
    "config",
    "endpoints",
    "exceptions",
    "log_config",
    "models",
    "params",
    "types",
]
