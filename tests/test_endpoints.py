"""Tests for route models and URL building."""

import pytest
from pydantic import TypeAdapter, ValidationError

from locapi.constants import Format, MediaType, SortField
from locapi.endpoints import (
    CollectionEndpoint,
    CollectionsEndpoint,
    Endpoint,
    FormatEndpoint,
    ItemEndpoint,
    ResourceEndpoint,
    SearchEndpoint,
    build_url,
)
from locapi.exceptions import BuildError
from locapi.params import (
    AttributeSelection,
    CommonQueryParams,
    FacetFilter,
    ItemAttributes,
    ItemParams,
    ResourceAttributes,
    ResourceParams,
)


def test_search_without_parameters_raises():
    with pytest.raises(BuildError):
        build_url(SearchEndpoint())


def test_search_with_only_format_raises():
    with pytest.raises(BuildError):
        SearchEndpoint(params=CommonQueryParams(format=Format.YAML)).to_url()


def test_search_url():
    endpoint = SearchEndpoint(params=CommonQueryParams(query="baseball+cards", per_page=5))
    assert build_url(endpoint) == "https://www.loc.gov/search/?fo=json&&q=baseball+cards&c=5&sp=1"


def test_collection_url():
    endpoint = CollectionEndpoint(
        name="civil-war-maps",
        params=CommonQueryParams(
            attributes=AttributeSelection(include=["pagination", "results"]),
            filter=FacetFilter(filters=["subject:geography"]),
            per_page=10,
            page=1,
            sort=SortField.TITLE_S,
        ),
    )
    assert build_url(endpoint) == (
        "https://www.loc.gov/collections/civil-war-maps/"
        "?fo=json&at=pagination,results&fa=subject:geography&c=10&sp=1&sb=title_s"
    )


def test_collection_routes_hyphenate_spaces_in_query():
    endpoint = CollectionsEndpoint(params=CommonQueryParams(query="civil war"))
    assert build_url(endpoint) == "https://www.loc.gov/collections/?fo=json&&q=civil-war&sp=1"


def test_collections_without_parameters():
    assert CollectionsEndpoint().to_url() == "https://www.loc.gov/collections/?fo=json&&sp=1"


@pytest.mark.parametrize("media_type", list(MediaType))
def test_format_url_without_parameters(media_type):
    url = FormatEndpoint(media_type=media_type).to_url()
    assert url.startswith(f"https://www.loc.gov/{media_type.slug}/?fo=json&")
    assert url.endswith("&sp=1")


def test_format_slugs_are_kebab_case():
    assert FormatEndpoint(media_type=MediaType.FILM_AND_VIDEOS).to_url().startswith(
        "https://www.loc.gov/film-and-videos/"
    )


def test_item_url_with_cite_this_only():
    endpoint = ItemEndpoint(
        item_id="2014717546",
        params=ItemParams(attributes=ItemAttributes(cite_this=True)),
    )
    url = build_url(endpoint)
    assert url == "https://www.loc.gov/item/2014717546/?fo=json&at=cite_this"
    assert url.count("at=") == 1


def test_resource_url():
    endpoint = ResourceEndpoint(
        resource_id="g3701gm.gct00013.ca000001",
        params=ResourceParams(attributes=ResourceAttributes(resource=True, item=True)),
    )
    assert build_url(endpoint) == (
        "https://www.loc.gov/resource/g3701gm.gct00013.ca000001/"
        "?fo=json&at=resource&at=item"
    )


def test_build_url_is_idempotent():
    endpoint = FormatEndpoint(
        media_type=MediaType.MAPS,
        params=CommonQueryParams(query="ohio", filter=FacetFilter(filters=["dates:1800/1899"])),
    )
    assert build_url(endpoint) == build_url(endpoint)


def test_endpoint_union_discriminates_on_route():
    adapter = TypeAdapter(Endpoint)
    endpoint = adapter.validate_python({"route": "item", "item_id": "abc"})
    assert isinstance(endpoint, ItemEndpoint)

    endpoint = adapter.validate_python({"route": "format", "media_type": "notated-music"})
    assert isinstance(endpoint, FormatEndpoint)
    assert endpoint.media_type is MediaType.NOTATED_MUSIC

    with pytest.raises(ValidationError):
        adapter.validate_python({"route": "unknown"})
