"""Outgoing request description."""

from dataclasses import dataclass, field
from enum import Enum
from urllib.parse import urlencode


class HttpMethod(str, Enum):
    """HTTP methods used against the site."""

    GET = "GET"
    POST = "POST"


@dataclass(frozen=True)
class HttpRequest:
    """Everything the transport needs to perform one request.

    ``query_params`` is an ordered list of pairs because the site repeats
    keys for multi-valued filters (``series_type[]=TV&series_type[]=OVA``).
    """

    target: str
    path: str = ""
    method: HttpMethod = HttpMethod.GET
    query_params: tuple[tuple[str, str], ...] = ()
    form_params: tuple[tuple[str, str], ...] = ()
    headers: dict[str, str] = field(default_factory=dict)

    @property
    def url(self) -> str:
        """Absolute URL including the query string."""
        url = self.target.rstrip("/")
        if self.path:
            url = f"{url}/{self.path.lstrip('/')}"
        if self.query_params:
            url = f"{url}?{urlencode(self.query_params)}"
        return url

    @classmethod
    def get(
        cls,
        target: str,
        path: str = "",
        query_params: list[tuple[str, str]] | None = None,
        headers: dict[str, str] | None = None,
    ) -> "HttpRequest":
        return cls(
            target=target,
            path=path,
            query_params=tuple(query_params or ()),
            headers=dict(headers or {}),
        )

    @classmethod
    def post_form(
        cls,
        target: str,
        path: str = "",
        form_params: list[tuple[str, str]] | None = None,
        headers: dict[str, str] | None = None,
    ) -> "HttpRequest":
        return cls(
            target=target,
            path=path,
            method=HttpMethod.POST,
            form_params=tuple(form_params or ()),
            headers=dict(headers or {}),
        )
