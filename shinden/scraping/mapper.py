"""Base class for page mappers."""

from abc import ABC, abstractmethod
from typing import Callable, Mapping, TypeVar

from bs4 import Tag

from shinden.core.config import Settings
from shinden.core.exceptions import PageStructureChangedError

from .coercion import CoercionError, Converter, ConverterRegistry
from .engine import MapperEngine
from .parser import DOMParser

T = TypeVar("T")


class BaseDocumentMapper(ABC):
    """Turns documents of one page template into typed records.

    Subclasses name themselves with ``mapper_code`` (used in every
    page-structure error they raise) and register the enum resolvers they
    need through ``type_converters``. The engine is built once here and the
    mapper keeps no other state.
    """

    def __init__(self, settings: Settings) -> None:
        converters = ConverterRegistry.with_defaults(
            date_format=settings.date_format,
            date_time_format=settings.date_time_format,
            extra=self.type_converters(),
        )
        self.engine = MapperEngine(self.mapper_code, converters, settings.html_parser)

    @property
    @abstractmethod
    def mapper_code(self) -> str:
        """Short code identifying the page template, e.g. ``anime.search``."""

    def type_converters(self) -> Mapping[type, Converter]:
        """Extra ``type -> converter`` entries for this mapper."""
        return {}

    def exception_for(
        self,
        field_code: str,
        coercion: CoercionError | None = None,
    ) -> PageStructureChangedError:
        """Error for a required field this mapper could not extract."""
        return self.engine.structure_error(field_code, coercion)

    def map_list(
        self,
        document: str | Tag,
        root_selector: str,
        mapper: Callable[[Tag], T],
    ) -> list[T]:
        """Map every element matching ``root_selector`` to a record.

        A page-structure error in any single element aborts the whole page.

        Args:
            document: Raw HTML or parsed tree
            root_selector: Selector of the repeated item element
            mapper: Maps one item element to one record

        Returns:
            Records in document order
        """
        return self.engine.on(document).select(root_selector).map_to(mapper).or_else([])

    def count_items(self, document: str | Tag, root_selector: str) -> int:
        """Count the item elements on a page without mapping them."""
        return DOMParser(document, self.engine.html_parser).count(root_selector)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(mapper_code={self.mapper_code!r})"
