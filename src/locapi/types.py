# locapi/types.py
"""Request data structure and hook type aliases.

The client builds every URL itself, so a request is fully described by its
method, final URL and headers.
"""

from collections.abc import Callable
from typing import Any

import httpx
from pydantic import BaseModel, ConfigDict, Field


class RequestData(BaseModel):
    """Encapsulates data for a single HTTP request."""

    method: str = "GET"
    url: str
    headers: dict[str, str] = Field(default_factory=dict)

    model_config = ConfigDict(extra="forbid")

    def build_request(self) -> httpx.Request:
        """Builds an httpx.Request object from the stored data."""
        return httpx.Request(method=self.method, url=self.url, headers=self.headers)


PreRequestHook = Callable[[str, str, httpx.Headers], None]
"""Type alias for a pre-request hook.

Pre-request hooks are called right before the GET request is sent.

Args:
    method (str): The HTTP method of the request (always "GET" for loc.gov).
    url (str): The final URL of the request.
    headers (httpx.Headers): A mutable `httpx.Headers` object. Hooks can
        modify this object in place.
Return:
    None: Hooks are expected to modify arguments in-place or perform side effects.
"""

PostRequestHook = Callable[[httpx.Response, Any], None]
"""Type alias for a post-request hook.

Post-request hooks are called after a successful response has been decoded.

Args:
    response (httpx.Response): The raw `httpx.Response` object.
    parsed_model (Any): The response decoded into the route's Pydantic model.
Return:
    None: Hooks are expected to perform side effects.
"""
