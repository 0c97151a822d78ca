"""Tests for the authenticated fetch layer."""

import httpx
import pytest

from shinden.http.fetch import TRANSPORT_ERROR_CODE, TRANSPORT_ERROR_NAME, AuthenticatedFetcher
from shinden.http.request import HttpMethod, HttpRequest
from shinden.http.response import EmptyReason, EntityState, ErrorDetails, FetchResult
from shinden.http.session import InMemorySessionStore


@pytest.fixture
def session():
    return InMemorySessionStore(cookies={"_session": "abc", "remember": "1"})


@pytest.fixture
def fetcher_for(settings, session, http_transport):
    def factory(handler):
        return AuthenticatedFetcher(http_transport(handler), session, settings)

    return factory


class TestAuthenticatedFetcher:
    """Tests for AuthenticatedFetcher."""

    def test_success(self, fetcher_for, settings):
        """Test a 200 response is parsed into a document."""
        fetcher = fetcher_for(lambda request: httpx.Response(200, text="<p class='x'>hello</p>"))

        result = fetcher.fetch(HttpRequest.get(settings.base_url, "/series"))

        assert result.is_present
        assert result.is_ok
        assert result.status_code == 200
        assert result.entity.select_one("p.x").get_text() == "hello"

    def test_session_cookies_attached(self, fetcher_for, settings):
        """Test the current session cookies are sent."""
        seen = {}

        def handler(request):
            seen["cookie"] = request.headers.get("cookie")
            return httpx.Response(200, text="<p></p>")

        fetcher_for(handler).fetch(HttpRequest.get(settings.base_url, "/series"))

        assert seen["cookie"] == "_session=abc; remember=1"

    def test_session_read_per_call(self, fetcher_for, settings, session):
        """Test cookie updates are picked up by the next request."""
        seen = []

        def handler(request):
            seen.append(request.headers.get("cookie"))
            return httpx.Response(200, text="<p></p>")

        fetcher = fetcher_for(handler)
        fetcher.fetch(HttpRequest.get(settings.base_url))
        session.set_cookies({"_session": "new"})
        fetcher.fetch(HttpRequest.get(settings.base_url))

        assert seen == ["_session=abc; remember=1", "_session=new"]

    def test_default_headers(self, fetcher_for, settings):
        """Test the configured browser headers reach the site."""
        seen = {}

        def handler(request):
            seen.update(request.headers)
            return httpx.Response(200, text="<p></p>")

        fetcher_for(handler).fetch(HttpRequest.get(settings.base_url))

        assert seen["user-agent"] == settings.user_agent
        assert seen["accept-language"] == settings.accept_language

    def test_query_and_form(self, fetcher_for, settings):
        """Test repeated query keys and form bodies."""
        seen = []

        def handler(request):
            seen.append((request.method, str(request.url), request.content.decode()))
            return httpx.Response(200, text="<p></p>")

        fetcher = fetcher_for(handler)
        fetcher.fetch(
            HttpRequest.get(settings.base_url, "/series", [("series_type[]", "TV"), ("series_type[]", "OVA")])
        )
        fetcher.fetch(HttpRequest.post_form(settings.base_url, "/main/login", [("username", "kenpachi")]))

        assert seen[0][1] == "https://shinden.test/series?series_type%5B%5D=TV&series_type%5B%5D=OVA"
        assert seen[1][0] == HttpMethod.POST.value
        assert seen[1][2] == "username=kenpachi"

    @pytest.mark.parametrize(
        "status,state",
        [
            (404, EntityState.NOT_FOUND),
            (500, EntityState.INTERNAL_ERROR),
            (401, EntityState.UNAUTHORIZED),
            (502, EntityState.BAD_GATEWAY),
            (400, EntityState.BAD_REQUEST),
            (503, EntityState.GENERIC_ERROR),
            (403, EntityState.GENERIC_ERROR),
        ],
    )
    def test_error_status_is_empty_result(self, fetcher_for, settings, status, state):
        """Test error statuses become typed empty results."""
        fetcher = fetcher_for(lambda request: httpx.Response(status, text="oops"))

        result = fetcher.fetch(HttpRequest.get(settings.base_url, "/series"))

        assert not result.is_present
        assert result.is_failure
        assert result.status_code == status
        assert result.empty_reason.state is state
        assert result.empty_reason.error_details.code == TRANSPORT_ERROR_CODE
        assert result.empty_reason.error_details.error_name == TRANSPORT_ERROR_NAME

    def test_connection_error(self, fetcher_for, settings):
        """Test connection errors fall back to status 400."""

        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        result = fetcher_for(handler).fetch(HttpRequest.get(settings.base_url))

        assert result.status_code == 400
        assert result.empty_reason.state is EntityState.BAD_REQUEST
        assert result.empty_reason.error_details.code == "TRANSPORT_EX"
        assert "connection refused" in result.empty_reason.error_details.message

    def test_timeout(self, fetcher_for, settings):
        """Test timeouts are transport failures, not exceptions."""

        def handler(request):
            raise httpx.ReadTimeout("timed out", request=request)

        result = fetcher_for(handler).fetch(HttpRequest.get(settings.base_url))

        assert result.is_failure
        assert result.status_code == 400

    def test_repeated_cookie_name(self, fetcher_for, settings):
        """Test one cookie name set for two paths still gives a document."""
        headers = [("Set-Cookie", "sid=1; Path=/"), ("Set-Cookie", "sid=2; Path=/series")]
        fetcher = fetcher_for(lambda request: httpx.Response(200, headers=headers, text="<p></p>"))

        result = fetcher.fetch(HttpRequest.get(settings.base_url, "/series"))

        assert result.is_present
        assert result.get_cookie("sid") in {"1", "2"}


class TestFetchResult:
    """Tests for FetchResult."""

    def test_entity_of_empty_result(self):
        """Test reading the document of an empty result."""
        result = FetchResult.empty_ok(204, {})

        assert result.is_ok
        assert not result.is_present
        with pytest.raises(LookupError):
            result.entity

    def test_or_else_handle(self):
        """Test the empty reason is handed to the handler."""
        reason = EmptyReason.not_found(ErrorDetails("Not found", "NF", "gone"))
        result = FetchResult.empty(404, {}, reason)

        assert result.or_else_handle(lambda r: r.error_details.code) == "NF"
        assert result.or_else(None) is None
        assert result.is_not_found

    def test_cookies(self, engine):
        """Test response cookies are exposed."""
        result = FetchResult.of(engine.parse("<p></p>"), "<p></p>", 200, {}, {"token": "t"})

        assert result.get_cookie("token") == "t"
        assert result.get_cookie("missing") is None

    def test_of_requires_document(self):
        """Test a present result needs a document."""
        with pytest.raises(ValueError):
            FetchResult.of(None, "", 200, {})
