"""Fetch results: a parsed document or a typed empty result."""

from dataclasses import dataclass, field
from enum import Enum
from http import HTTPStatus
from typing import Callable, TypeVar

from bs4 import BeautifulSoup

T = TypeVar("T")


class EntityState(str, Enum):
    """Why a fetch result carries no document."""

    EMPTY_OK = "empty_ok"
    NOT_FOUND = "not_found"
    INTERNAL_ERROR = "internal_error"
    UNAUTHORIZED = "unauthorized"
    BAD_GATEWAY = "bad_gateway"
    BAD_REQUEST = "bad_request"
    GENERIC_ERROR = "generic_error"


_STATE_BY_STATUS = {
    HTTPStatus.NOT_FOUND: EntityState.NOT_FOUND,
    HTTPStatus.INTERNAL_SERVER_ERROR: EntityState.INTERNAL_ERROR,
    HTTPStatus.UNAUTHORIZED: EntityState.UNAUTHORIZED,
    HTTPStatus.BAD_GATEWAY: EntityState.BAD_GATEWAY,
    HTTPStatus.BAD_REQUEST: EntityState.BAD_REQUEST,
}


@dataclass(frozen=True)
class ErrorDetails:
    """Diagnostic attached to an empty result."""

    error_name: str = ""
    code: str = ""
    message: str = ""


@dataclass(frozen=True)
class EmptyReason:
    """State plus diagnostic of an empty result."""

    state: EntityState
    error_details: ErrorDetails = field(default_factory=ErrorDetails)

    @classmethod
    def ok(cls) -> "EmptyReason":
        return cls(EntityState.EMPTY_OK)

    @classmethod
    def not_found(cls, error_details: ErrorDetails) -> "EmptyReason":
        return cls(EntityState.NOT_FOUND, error_details)

    @classmethod
    def from_http_status(cls, status_code: int, error_details: ErrorDetails) -> "EmptyReason":
        return cls(_STATE_BY_STATUS.get(status_code, EntityState.GENERIC_ERROR), error_details)


@dataclass(frozen=True)
class FetchResult:
    """Outcome of one fetch.

    Either ``document`` is set (the body parsed once) or ``empty_reason``
    says why it is not. Callers branch on ``is_present`` instead of catching
    transport exceptions.
    """

    status_code: int
    headers: dict[str, str] = field(default_factory=dict)
    cookies: dict[str, str] = field(default_factory=dict)
    document: BeautifulSoup | None = None
    text: str | None = None
    empty_reason: EmptyReason | None = None

    @classmethod
    def of(
        cls,
        document: BeautifulSoup,
        text: str,
        status_code: int,
        headers: dict[str, str],
        cookies: dict[str, str] | None = None,
    ) -> "FetchResult":
        if document is None:
            raise ValueError("Document cannot be None")
        return cls(status_code, dict(headers), dict(cookies or {}), document, text)

    @classmethod
    def empty(cls, status_code: int, headers: dict[str, str], reason: EmptyReason) -> "FetchResult":
        return cls(status_code, dict(headers), {}, None, None, reason)

    @classmethod
    def empty_ok(cls, status_code: int, headers: dict[str, str]) -> "FetchResult":
        return cls.empty(status_code, headers, EmptyReason.ok())

    @property
    def is_present(self) -> bool:
        return self.document is not None

    @property
    def is_ok(self) -> bool:
        return self.is_present or self.empty_reason == EmptyReason.ok()

    @property
    def is_failure(self) -> bool:
        return not self.is_ok

    @property
    def is_not_found(self) -> bool:
        return self.has_status(HTTPStatus.NOT_FOUND)

    @property
    def is_forbidden(self) -> bool:
        return self.has_status(HTTPStatus.FORBIDDEN)

    def has_status(self, status: int) -> bool:
        return self.status_code == status

    @property
    def entity(self) -> BeautifulSoup:
        """The parsed document.

        Raises:
            LookupError: If the result is empty
        """
        if self.document is None:
            raise LookupError("Document was not provided in response")
        return self.document

    def or_else(self, other: BeautifulSoup | None) -> BeautifulSoup | None:
        return self.document if self.document is not None else other

    def or_else_handle(self, handler: Callable[[EmptyReason | None], T]) -> BeautifulSoup | T:
        return self.document if self.document is not None else handler(self.empty_reason)

    def get_cookie(self, name: str) -> str | None:
        return self.cookies.get(name)
