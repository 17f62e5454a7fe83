"""Synchronous client for the Library of Congress (loc.gov) JSON API.

This module provides the LocClient class. Each public method builds the
route's URL from structured parameters, performs exactly one GET request and
decodes the body into the route's Pydantic model. Failures are translated into
the ``locapi.exceptions`` hierarchy; nothing is retried or cached.
"""

import ssl
from typing import Any, Self, TypeVar

import certifi
import httpx
from pydantic import BaseModel, ValidationError

from .config import ApiSettings, get_settings
from .constants import CLIENT_HEADERS, LOC_BASE_URL, MediaType, SortField
from .endpoints import (
    CollectionEndpoint,
    CollectionsEndpoint,
    Endpoint,
    FormatEndpoint,
    ItemEndpoint,
    ResourceEndpoint,
    SearchEndpoint,
    build_url,
)
from .exceptions import (
    APIError,
    ConfigInvariantError,
    DecodeError,
    NetworkError,
    NotFoundError,
    RateLimitError,
    TimeoutError,
    TransportError,
)
from .log_config import logger
from .models import (
    CollectionResponse,
    CollectionsResponse,
    FormatResponse,
    ItemResponse,
    ResourceResponse,
    SearchResultResponse,
)
from .params import (
    AttributeSelection,
    CommonQueryParams,
    FacetFilter,
    ItemAttributes,
    ItemParams,
    ResourceAttributes,
    ResourceParams,
)
from .types import RequestData

ResponseT = TypeVar("ResponseT", bound=BaseModel)


class LocClient:
    """Blocking client for the loc.gov JSON API.

    Every method returns a ``(response, url)`` tuple: the decoded response model
    and the exact URL that was requested.

    Typical usage:
    ```python
    with LocClient() as client:
        results, url = client.search("baseball cards", per_page=10)
        for result in results.results or []:
            print(result.title)
    ```

    Attributes:
        _settings (ApiSettings): The resolved settings for this client instance.
        _base_url (str): Authority requests are sent to, without a trailing slash.
        _http_client (httpx.Client): The underlying HTTP client.
        _should_close_client (bool): Whether this instance owns ``_http_client``.
    """

    def __init__(
        self,
        settings: ApiSettings | None = None,
        *,
        base_url: str | None = None,
        http_client: httpx.Client | None = None,
    ):
        """Initializes the LocClient.

        Args:
            settings: Optional settings; loaded via ``get_settings()`` when omitted.
            base_url: Optional authority overriding ``settings.base_url``, e.g. a
                staging deployment or a local mock server.
            http_client: Optional pre-configured ``httpx.Client``. It is not closed
                by ``close()``.
        """
        self._settings = settings or get_settings()
        self._base_url: str = (base_url or self._settings.base_url).rstrip("/")

        self._should_close_client = http_client is None
        self._http_client = http_client or self._create_default_http_client()

        logger.debug(f"LocClient initialized for {self._base_url}")

    def _create_default_http_client(self) -> httpx.Client:
        ssl_context = ssl.create_default_context(cafile=certifi.where())
        logger.debug("Using certifi SSL context.")

        headers = dict(CLIENT_HEADERS)
        headers["User-Agent"] = self._settings.user_agent
        return httpx.Client(
            timeout=self._settings.request_timeout,
            verify=ssl_context,
            follow_redirects=self._settings.follow_redirects,
            headers=headers,
        )

    @property
    def base_url(self) -> str:
        return self._base_url

    def _replace_base_url(self, url: str) -> str:
        """Swap the default loc.gov authority of a built URL for the configured one.

        Raises:
            ConfigInvariantError: If ``url`` does not start with the default authority.
        """
        if not url.startswith(LOC_BASE_URL):
            logger.error(f"Built URL does not start with {LOC_BASE_URL}: {url}")
            raise ConfigInvariantError(
                f"Built URL '{url}' does not start with '{LOC_BASE_URL}'"
            )
        return f"{self._base_url}{url[len(LOC_BASE_URL) :]}"

    def _run_pre_request_hooks(self, request_data: RequestData) -> None:
        hook_headers = httpx.Headers(request_data.headers)
        logger.debug(
            f"Executing {len(self._settings.pre_request_hooks)} pre-request hooks "
            f"for {request_data.method} {request_data.url}"
        )
        for hook in self._settings.pre_request_hooks:
            try:
                hook(request_data.method, request_data.url, hook_headers)
            except Exception as e:
                logger.exception(
                    f"Error executing pre-request hook {getattr(hook, '__name__', str(hook))}: {e}"
                )
        request_data.headers = dict(hook_headers.items())

    def _run_post_request_hooks(self, response: httpx.Response, parsed: Any) -> None:
        logger.debug(
            f"Executing {len(self._settings.post_request_hooks)} post-request hooks "
            f"for {response.request.method} {response.request.url}"
        )
        for hook in self._settings.post_request_hooks:
            try:
                hook(response, parsed)
            except Exception as e:
                logger.exception(
                    f"Error executing post-request hook {getattr(hook, '__name__', str(hook))}: {e}"
                )

    def _send(self, request: httpx.Request) -> httpx.Response:
        """Send one request, translating httpx failures into locapi errors."""
        logger.debug(f"Sending request: {request.method} {request.url}")
        logger.trace(f"Request Headers: {request.headers}")
        try:
            response = self._http_client.send(request)
        except httpx.TimeoutException as e:
            logger.error(f"Request timed out: {request.url}")
            raise TimeoutError("Request timed out", request=request) from e
        except httpx.NetworkError as e:
            logger.error(f"Network error occurred for {request.url}: {e}")
            raise NetworkError(
                f"Network error for {request.url}: {e}", request=request
            ) from e
        except httpx.RequestError as e:
            logger.error(f"HTTP request error for {request.url}: {e}")
            raise TransportError(
                f"HTTP request error for {request.url}: {e}", request=request
            ) from e

        logger.debug(f"Received response: {response.status_code} for {request.url}")
        logger.trace(f"Response Headers: {response.headers}")

        if not response.is_success:
            logger.error(
                f"Request failed with status {response.status_code}: {request.url}"
            )
            if response.status_code == httpx.codes.NOT_FOUND:
                raise NotFoundError("Resource not found.", response=response)
            if response.status_code == httpx.codes.TOO_MANY_REQUESTS:
                raise RateLimitError("API rate limit exceeded.", response=response)
            raise APIError(
                f"API request failed with status {response.status_code}",
                response=response,
            )
        return response

    def _decode(self, response: httpx.Response, model: type[ResponseT]) -> ResponseT:
        try:
            payload = response.json()
        except ValueError as e:
            logger.error(f"Response from {response.request.url} is not valid JSON: {e}")
            raise DecodeError(
                f"Response body is not valid JSON: {e}", response=response
            ) from e
        try:
            return model.model_validate(payload)
        except ValidationError as e:
            logger.error(
                f"Response from {response.request.url} does not match {model.__name__}: {e}"
            )
            raise DecodeError(
                f"Response does not match {model.__name__}: {e}", response=response
            ) from e

    def _get(self, endpoint: Endpoint, model: type[ResponseT]) -> tuple[ResponseT, str]:
        """Build the endpoint's URL, fetch it once and decode the body.

        Returns:
            tuple[ResponseT, str]: The decoded model and the URL as sent, after
                httpx has percent-encoded it.

        Raises:
            BuildError: If the endpoint cannot be turned into a URL.
            ConfigInvariantError: If the built URL lacks the default authority.
            TransportError: For timeouts, connection failures and non-2xx statuses.
            DecodeError: If the body is not JSON or does not fit ``model``.
        """
        url = self._replace_base_url(build_url(endpoint))
        request_data = RequestData(url=url)
        if self._settings.pre_request_hooks:
            self._run_pre_request_hooks(request_data)

        request = request_data.build_request()
        for name, value in self._http_client.headers.items():
            request.headers.setdefault(name, value)

        sent_url = str(request.url)
        response = self._send(request)
        parsed = self._decode(response, model)
        logger.info(f"Fetched {endpoint.route} from {sent_url}")

        if self._settings.post_request_hooks:
            self._run_post_request_hooks(response, parsed)
        return parsed, sent_url

    @staticmethod
    def _common_params(
        query: str | None,
        attributes: AttributeSelection | None,
        filters: FacetFilter | None,
        per_page: int | None,
        page: int | None,
        sort: SortField | None,
    ) -> CommonQueryParams:
        return CommonQueryParams(
            attributes=attributes,
            query=query.replace(" ", "+") if query is not None else None,
            filter=filters,
            per_page=per_page,
            page=page,
            sort=sort,
        )

    def search(
        self,
        query: str | None,
        attributes: AttributeSelection | None = None,
        filters: FacetFilter | None = None,
        per_page: int | None = None,
        page: int | None = None,
        sort: SortField | None = None,
    ) -> tuple[SearchResultResponse, str]:
        """Search across all of loc.gov (``/search/``).

        Args:
            query: Keyword query; spaces are sent as ``+``.
            attributes: Response sections to include or exclude.
            filters: Facet filters such as ``subject:maps``.
            per_page: Number of results per page.
            page: Page number; the first page when omitted.
            sort: Sort order.

        Returns:
            tuple[SearchResultResponse, str]: The results and the requested URL.

        Raises:
            BuildError: If no parameter at all was given.
        """
        endpoint = SearchEndpoint(
            params=self._common_params(query, attributes, filters, per_page, page, sort)
        )
        return self._get(endpoint, SearchResultResponse)

    def get_item(
        self, item_id: str, attributes: ItemAttributes | None = None
    ) -> tuple[ItemResponse, str]:
        """Fetch one item (``/item/{item_id}/``).

        Args:
            item_id: The item identifier, e.g. ``"2014717546"``.
            attributes: Which sections (item, resources, cite_this) to request.
        """
        endpoint = ItemEndpoint(item_id=item_id, params=ItemParams(attributes=attributes))
        return self._get(endpoint, ItemResponse)

    def get_resource(
        self, resource_id: str, attributes: ResourceAttributes | None = None
    ) -> tuple[ResourceResponse, str]:
        """Fetch one digitized resource (``/resource/{resource_id}/``)."""
        endpoint = ResourceEndpoint(
            resource_id=resource_id, params=ResourceParams(attributes=attributes)
        )
        return self._get(endpoint, ResourceResponse)

    def get_format(
        self,
        media_type: MediaType,
        query: str | None = None,
        attributes: AttributeSelection | None = None,
        filters: FacetFilter | None = None,
        per_page: int | None = None,
        page: int | None = None,
        sort: SortField | None = None,
    ) -> tuple[FormatResponse, str]:
        """List items of one original format, e.g. ``MediaType.MAPS`` (``/maps/``)."""
        endpoint = FormatEndpoint(
            media_type=media_type,
            params=self._common_params(query, attributes, filters, per_page, page, sort),
        )
        return self._get(endpoint, FormatResponse)

    def get_collection(
        self,
        name: str,
        query: str | None = None,
        attributes: AttributeSelection | None = None,
        filters: FacetFilter | None = None,
        per_page: int | None = None,
        page: int | None = None,
        sort: SortField | None = None,
    ) -> tuple[CollectionResponse, str]:
        """List the items of one collection (``/collections/{name}/``).

        Args:
            name: The collection name; spaces and underscores become hyphens, so
                ``"civil war maps"`` requests ``/collections/civil-war-maps/``.
        """
        slug = name.replace(" ", "-").replace("_", "-")
        endpoint = CollectionEndpoint(
            name=slug,
            params=self._common_params(query, attributes, filters, per_page, page, sort),
        )
        return self._get(endpoint, CollectionResponse)

    def get_collections(
        self,
        query: str | None = None,
        attributes: AttributeSelection | None = None,
        filters: FacetFilter | None = None,
        per_page: int | None = None,
        page: int | None = None,
        sort: SortField | None = None,
    ) -> tuple[CollectionsResponse, str]:
        """List all digital collections (``/collections/``)."""
        endpoint = CollectionsEndpoint(
            params=self._common_params(query, attributes, filters, per_page, page, sort)
        )
        return self._get(endpoint, CollectionsResponse)

    def close(self) -> None:
        """Close the underlying HTTP client if this instance created it."""
        if self._should_close_client and not self._http_client.is_closed:
            self._http_client.close()
            logger.debug("LocClient internal HTTP client closed.")

    def __enter__(self) -> Self:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
