"""Document mapping engine shared by all page mappers."""

from bs4 import BeautifulSoup, Tag

from shinden.core.exceptions import PageStructureChangedError
from shinden.monitoring.logger import get_logger

from .coercion import CoercionError, ConverterRegistry
from .parser import Node, parse_html

logger = get_logger(__name__)


class MapperEngine:
    """Entry point for fluent extraction over a parsed document.

    The engine carries everything an extraction needs besides the document:
    the code of the mapper it works for and the converters that mapper
    registered. It keeps no per-document state, so one engine serves any
    number of documents and threads.

    Example:
        >>> engine.on(row).select_first("li.episodes-col").text().to_int().or_raise("episodes")
    """

    def __init__(
        self,
        mapper_code: str,
        converters: ConverterRegistry | None = None,
        html_parser: str = "lxml",
    ) -> None:
        self.mapper_code = mapper_code
        self.converters = converters or ConverterRegistry.with_defaults()
        self.html_parser = html_parser

    def parse(self, document: str | Tag) -> Tag:
        """Parse raw HTML, or pass an already parsed tree through."""
        if isinstance(document, Tag):
            return document
        return parse_html(document, self.html_parser)

    def on(self, document: str | Tag | BeautifulSoup) -> Node:
        """Start a query on an element or a whole document."""
        return Node(self, self.parse(document))

    def structure_error(
        self,
        field_code: str,
        coercion: CoercionError | None = None,
        source: str = "",
    ) -> PageStructureChangedError:
        """Build (and log) the error for a missing required field."""
        error = PageStructureChangedError(self.mapper_code, field_code, coercion)
        logger.bind(mapper_code=self.mapper_code, field_code=field_code).error(
            f"Page structure changed | code={error.code} | source={source}"
            + (f" | {coercion}" if coercion else "")
        )
        return error
