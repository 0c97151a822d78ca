"""HTTP module - Requests, transport, authenticated fetch, validation."""

from .fetch import AuthenticatedFetcher
from .request import HttpMethod, HttpRequest
from .response import EmptyReason, EntityState, ErrorDetails, FetchResult
from .session import InMemorySessionStore, SessionStore
from .transport import HttpxTransport, RawResponse, Transport
from .validator import validate_response

__all__ = [
    "AuthenticatedFetcher",
    "EmptyReason",
    "EntityState",
    "ErrorDetails",
    "FetchResult",
    "HttpMethod",
    "HttpRequest",
    "HttpxTransport",
    "InMemorySessionStore",
    "RawResponse",
    "SessionStore",
    "Transport",
    "validate_response",
]
