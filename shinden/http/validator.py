"""Turns fetch results into domain-level HTTP signals."""

from shinden.core.exceptions import ForbiddenError, NotFoundError

from .response import FetchResult


def _reason_message(result: FetchResult) -> str:
    if result.empty_reason is None:
        return f"HTTP {result.status_code}"
    return result.empty_reason.error_details.message or f"HTTP {result.status_code}"


def validate_response(result: FetchResult | None) -> None:
    """Raise for results the caller cannot continue with.

    Args:
        result: Result returned by the fetch layer

    Raises:
        ValueError: If no result was given
        NotFoundError: If the site answered 404
        ForbiddenError: If the site answered 403
    """
    if result is None:
        raise ValueError("FetchResult must not be None.")
    if result.is_not_found:
        raise NotFoundError(_reason_message(result), context={"status_code": result.status_code})
    if result.is_forbidden:
        raise ForbiddenError(_reason_message(result), context={"status_code": result.status_code})
