"""Client exception types."""

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from shinden.scraping.coercion import CoercionError


class ShindenError(Exception):
    """Base exception for all client errors."""

    def __init__(self, message: str, *, context: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.context = context or {}


class PageStructureChangedError(ShindenError):
    """A required field could not be extracted from a scraped page.

    Raised by mappers when the markup no longer matches what they expect.
    ``code`` joins the mapper code and the field code, e.g.
    ``anime.search.title``, so the broken page template can be told apart
    from the log line alone.
    """

    def __init__(
        self,
        mapper_code: str,
        field_code: str,
        coercion: "CoercionError | None" = None,
    ) -> None:
        self.mapper_code = mapper_code
        self.field_code = field_code
        self.code = f"{mapper_code}.{field_code}"
        self.coercion = coercion
        context: dict[str, Any] = {"mapper_code": mapper_code, "field_code": field_code}
        if coercion is not None:
            context["raw_text"] = coercion.raw_text
            context["target_type"] = coercion.target_type
        super().__init__(f"Page structure changed. Error code: {self.code}", context=context)


class NotFoundError(ShindenError):
    """The requested resource does not exist on the site."""


class ForbiddenError(ShindenError):
    """The session is not allowed to access the requested resource."""


class FetchFailedError(ShindenError):
    """A page was needed but the fetch came back empty."""
