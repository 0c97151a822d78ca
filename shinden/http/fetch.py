"""Authenticated fetch: cookies in, parsed document or typed empty result out."""

import time
from http import HTTPStatus

import httpx
from bs4.builder import ParserRejectedMarkup

from shinden.core.config import Settings
from shinden.monitoring.logger import get_logger, log_fetch_event
from shinden.scraping.parser import parse_html

from .request import HttpRequest
from .response import EmptyReason, ErrorDetails, FetchResult
from .session import SessionStore
from .transport import Transport

logger = get_logger(__name__)

TRANSPORT_ERROR_NAME = "Invalid response from server"
TRANSPORT_ERROR_CODE = "TRANSPORT_EX"


class TransportFailure(Exception):
    """Internal signal for a response that cannot become a document."""

    def __init__(self, message: str, status_code: int | None = None, headers: dict[str, str] | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.headers = headers or {}


class AuthenticatedFetcher:
    """Executes requests with the current session cookies attached.

    One blocking round-trip per call, no retries. Every transport problem
    (connection error, timeout, error status, unparseable body) comes back
    as an empty ``FetchResult`` instead of an exception.
    """

    def __init__(self, transport: Transport, session: SessionStore, settings: Settings) -> None:
        self.transport = transport
        self.session = session
        self.settings = settings

    def fetch(self, request: HttpRequest) -> FetchResult:
        """Fetch and parse one page.

        Args:
            request: Request to execute

        Returns:
            FetchResult with the parsed document, or empty with a reason
        """
        start_time = time.time()
        cookies = self.session.get_cookies() or {}

        try:
            raw = self.transport.execute(request, cookies)
            if raw.status_code >= 400:
                raise TransportFailure(
                    f"HTTP error fetching URL. Status={raw.status_code}, URL=[{request.url}]",
                    raw.status_code,
                    raw.headers,
                )
            document = parse_html(raw.text, self.settings.html_parser)
        except (httpx.HTTPError, OSError, ParserRejectedMarkup, UnicodeDecodeError) as e:
            return self._empty(request, None, {}, str(e), start_time)
        except TransportFailure as e:
            return self._empty(request, e.status_code, e.headers, str(e), start_time)

        log_fetch_event(
            url=request.url,
            status_code=raw.status_code,
            duration=time.time() - start_time,
            success=True,
        )
        return FetchResult.of(document, raw.text, raw.status_code, raw.headers, raw.cookies)

    def _empty(
        self,
        request: HttpRequest,
        status_code: int | None,
        headers: dict[str, str],
        message: str,
        start_time: float,
    ) -> FetchResult:
        status = status_code or HTTPStatus.BAD_REQUEST.value
        log_fetch_event(
            url=request.url,
            status_code=status,
            duration=time.time() - start_time,
            success=False,
            reason=message,
        )
        return FetchResult.empty(
            status,
            headers,
            EmptyReason.from_http_status(
                status,
                ErrorDetails(
                    error_name=TRANSPORT_ERROR_NAME,
                    code=TRANSPORT_ERROR_CODE,
                    message=message,
                ),
            ),
        )
