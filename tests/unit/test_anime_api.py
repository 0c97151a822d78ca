"""Tests for the anime search API."""

import httpx
import pytest

from shinden.anime.api import AnimeApi
from shinden.anime.mapper import AnimeSearchMapper
from shinden.anime.request import AnimeSearchRequest, SortType
from shinden.core.client import ShindenClient
from shinden.core.exceptions import FetchFailedError, ForbiddenError, NotFoundError
from shinden.http.fetch import AuthenticatedFetcher
from shinden.http.response import FetchResult
from shinden.http.session import InMemorySessionStore
from shinden.scraping.pagination import Pageable, Sort
from shinden.scraping.parser import parse_html


@pytest.fixture
def site(make_row, make_listing):
    """Fake listing: 4 pages, 10 rows each except 3 on the last."""
    requested = []

    def handler(request):
        page = int(request.url.params.get("page", "1"))
        requested.append(request.url)
        count = 3 if page == 4 else 10
        rows = [make_row(media_id=page * 100 + i) for i in range(count)]
        return httpx.Response(200, text=make_listing(rows, current_page=page, last_page=4))

    return handler, requested


@pytest.fixture
def api_for(settings, http_transport):
    def factory(handler):
        fetcher = AuthenticatedFetcher(http_transport(handler), InMemorySessionStore(), settings)
        return AnimeApi(fetcher, AnimeSearchMapper(settings), settings)

    return factory


class TestSearchAnime:
    """Tests for AnimeApi.search_anime."""

    def test_probes_last_page(self, api_for, site):
        """Test the last page is fetched to count the total."""
        handler, requested = site

        page = api_for(handler).search_anime()

        assert [url.params["page"] for url in requested] == ["1", "4"]
        assert page.total_elements == 33
        assert page.total_pages == 4
        assert page.number_of_elements == 10
        assert page.content[0].id == 100

    def test_last_page_requested(self, api_for, site):
        """Test the requested page is reused when it is the last one."""
        handler, requested = site

        page = api_for(handler).search_anime(pageable=Pageable(page_number=4))

        assert len(requested) == 1
        assert page.total_elements == 33
        assert page.is_last

    def test_search_path_and_filters(self, api_for, site):
        """Test the request goes to the listing with filters, page and sort."""
        handler, requested = site
        request = AnimeSearchRequest.for_phrase("bleach")

        api_for(handler).search_anime(request, Pageable.of(4, Sort.by(SortType.EPISODES.asc())))

        url = requested[0]
        assert url.path == "/series"
        assert url.params["search"] == "bleach"
        assert url.params["sort_by"] == "multimedia"
        assert url.params["sort_order"] == "asc"
        assert url.params.get_list("series_type[]") == ["TV", "OVA", "ONA", "Movie", "Special"]

    def test_last_page_read_from_raw_body(self, settings, make_row, make_listing):
        """Test pagination is looked up in the body as served."""

        class ServedFetcher:
            def __init__(self):
                self.requests = []

            def fetch(self, request):
                self.requests.append(request)
                served = make_listing([make_row()], current_page=1, last_page=3)
                return FetchResult.of(parse_html(make_listing([make_row()])), served, 200, {})

        fetcher = ServedFetcher()
        page = AnimeApi(fetcher, AnimeSearchMapper(settings), settings).search_anime()

        assert len(fetcher.requests) == 2
        assert ("page", "3") in fetcher.requests[1].query_params
        assert page.total_elements == 21
        assert page.total_pages == 3

    def test_single_page_listing(self, api_for, make_row, make_listing):
        """Test a listing without pagination."""
        handler = lambda request: httpx.Response(200, text=make_listing([make_row(), make_row(media_id=2)]))

        page = api_for(handler).search_anime()

        assert page.total_elements == 2
        assert not page.has_next

    def test_not_found(self, api_for):
        """Test 404 surfaces as NotFoundError."""
        with pytest.raises(NotFoundError):
            api_for(lambda request: httpx.Response(404)).search_anime()

    def test_forbidden(self, api_for):
        """Test 403 surfaces as ForbiddenError."""
        with pytest.raises(ForbiddenError):
            api_for(lambda request: httpx.Response(403)).search_anime()

    def test_server_error(self, api_for):
        """Test other failures surface as FetchFailedError."""
        with pytest.raises(FetchFailedError) as exc_info:
            api_for(lambda request: httpx.Response(502)).search_anime()

        assert exc_info.value.context["status_code"] == 502
        assert exc_info.value.context["state"] == "bad_gateway"


class TestShindenClient:
    """Tests for client composition."""

    def test_create_and_search(self, settings, http_transport, site):
        """Test the wired client searches through the given transport."""
        handler, _ = site

        with ShindenClient.create(settings, transport=http_transport(handler), configure_logging=False) as client:
            page = client.anime.search_anime()

        assert page.total_elements == 33
        assert client.settings is settings

    def test_close_closes_transport(self, settings):
        """Test leaving the context closes the transport."""

        class RecordingTransport:
            closed = False

            def execute(self, request, cookies):
                raise AssertionError("not expected")

            def close(self):
                self.closed = True

        transport = RecordingTransport()
        with ShindenClient.create(settings, transport=transport, configure_logging=False):
            pass

        assert transport.closed
