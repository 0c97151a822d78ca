"""HTTP transport built on httpx."""

from dataclasses import dataclass, field
from typing import Protocol

import httpx

from shinden.core.config import Settings

from .request import HttpMethod, HttpRequest


@dataclass(frozen=True)
class RawResponse:
    """Undecoded-by-us response as returned by a transport."""

    text: str
    status_code: int
    headers: dict[str, str] = field(default_factory=dict)
    cookies: dict[str, str] = field(default_factory=dict)


class Transport(Protocol):
    """Performs one request; raises on connection-level failures."""

    def execute(self, request: HttpRequest, cookies: dict[str, str]) -> RawResponse: ...

    def close(self) -> None: ...


class HttpxTransport:
    """Transport on a shared ``httpx.Client``.

    Connection errors and timeouts surface as ``httpx.HTTPError``; HTTP
    error statuses are returned as ordinary responses.
    """

    def __init__(self, settings: Settings, http_transport: httpx.BaseTransport | None = None) -> None:
        self._client = httpx.Client(
            transport=http_transport,
            timeout=settings.request_timeout,
            follow_redirects=settings.follow_redirects,
            headers={
                "User-Agent": settings.user_agent,
                "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
                "Accept-Language": settings.accept_language,
            },
        )

    def execute(self, request: HttpRequest, cookies: dict[str, str]) -> RawResponse:
        """Send one request.

        Response cookies are flattened by name; when the same name is set
        for several paths the last one wins.
        """
        # Cookies go in as a header so the shared client's jar stays untouched
        headers = dict(request.headers)
        if cookies:
            headers["Cookie"] = "; ".join(f"{name}={value}" for name, value in cookies.items())

        if request.method == HttpMethod.POST:
            response = self._client.post(request.url, data=dict(request.form_params), headers=headers)
        else:
            response = self._client.get(request.url, headers=headers)

        return RawResponse(
            text=response.text,
            status_code=response.status_code,
            headers=dict(response.headers),
            cookies={cookie.name: cookie.value for cookie in response.cookies.jar},
        )

    def close(self) -> None:
        self._client.close()
