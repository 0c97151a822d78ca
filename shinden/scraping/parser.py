"""DOM parsing and selector queries with BeautifulSoup."""

from typing import TYPE_CHECKING, Any, Callable, Iterator, TypeVar

from bs4 import BeautifulSoup, NavigableString, Tag
from bs4.element import PreformattedString

from .extraction import Extraction

if TYPE_CHECKING:
    from .engine import MapperEngine

T = TypeVar("T")


def parse_html(html: str, parser: str = "lxml") -> BeautifulSoup:
    """Parse HTML content into a document tree.

    Args:
        html: HTML content to parse
        parser: BeautifulSoup tree builder (lxml or html.parser)

    Returns:
        Parsed document
    """
    return BeautifulSoup(html, parser)


class DOMParser:
    """Parsed document with plain CSS lookups.

    For callers that need elements or counts rather than extractions.
    """

    def __init__(self, html: str | Tag, parser: str = "lxml") -> None:
        """Initialize parser with HTML content.

        Args:
            html: HTML content to parse, or an already parsed tree
            parser: BeautifulSoup tree builder
        """
        self.soup = html if isinstance(html, Tag) else parse_html(html, parser)

    def select(self, selector: str) -> list[Tag]:
        """Select elements using CSS selector.

        Args:
            selector: CSS selector

        Returns:
            List of matching elements
        """
        return self.soup.select(selector)

    def select_one(self, selector: str) -> Tag | None:
        """Select single element using CSS selector.

        Args:
            selector: CSS selector

        Returns:
            First matching element or None
        """
        return self.soup.select_one(selector)

    def count(self, selector: str) -> int:
        return len(self.soup.select(selector))


def _collapse(text: str) -> str:
    return " ".join(text.split())


def element_text(element: Tag, keep_new_lines: bool = False) -> str:
    """Visible text of an element and its descendants, whitespace collapsed.

    Args:
        element: Element to read
        keep_new_lines: Turn ``<br>`` into line breaks instead of spaces

    Returns:
        Element text
    """
    if not keep_new_lines:
        return _collapse(element.get_text())

    parts: list[str] = []
    for node in element.descendants:
        if isinstance(node, Tag) and node.name == "br":
            parts.append("\n")
        elif isinstance(node, NavigableString) and not isinstance(node, PreformattedString):
            parts.append(str(node))
    lines = (_collapse(line) for line in "".join(parts).split("\n"))
    return "\n".join(lines).strip()


def element_own_text(element: Tag) -> str:
    """Text of the element's direct text children only."""
    return _collapse(
        "".join(
            str(child)
            for child in element.children
            if isinstance(child, NavigableString) and not isinstance(child, PreformattedString)
        )
    )


def element_attr(element: Tag, name: str) -> str | None:
    """Attribute value, multi-valued attributes joined by a space."""
    value = element.get(name)
    if value is None:
        return None
    if isinstance(value, list):
        return " ".join(value)
    return str(value)


class Node:
    """A resolved query scope: one element, the whole document, or nothing.

    A miss is an ordinary ``Node`` with no scope; reading from it yields
    absent extractions rather than raising.
    """

    def __init__(self, engine: "MapperEngine", scope: Tag | None, path: str = "") -> None:
        self._engine = engine
        self._scope = scope
        self._path = path or ":scope"

    def __repr__(self) -> str:
        return f"Node({self._path}, found={self._scope is not None})"

    @property
    def element(self) -> Tag | None:
        return self._scope

    def _child_path(self, selector: str) -> str:
        return selector if self._path == ":scope" else f"{self._path} {selector}"

    def select_first(self, selector: str) -> "Node":
        """Resolve the first element matching ``selector`` in document order."""
        path = self._child_path(selector)
        if self._scope is None:
            return Node(self._engine, None, path)
        return Node(self._engine, self._scope.select_one(selector), path)

    def select(self, selector: str) -> "Selection":
        """Resolve every element matching ``selector`` in document order."""
        path = self._child_path(selector)
        if self._scope is None:
            return Selection(self._engine, None, path)
        return Selection(self._engine, self._scope.select(selector), path)

    def exists(self) -> bool:
        return self._scope is not None

    def text(self, keep_new_lines: bool = False) -> Extraction[str]:
        value = None
        if self._scope is not None:
            value = element_text(self._scope, keep_new_lines) or None
        return Extraction(self._engine, value, self._path)

    def own_text(self) -> Extraction[str]:
        value = None
        if self._scope is not None:
            value = element_own_text(self._scope) or None
        return Extraction(self._engine, value, f"{self._path}::own-text")

    def attr(self, name: str) -> Extraction[str]:
        value = None
        if self._scope is not None:
            value = (element_attr(self._scope, name) or "").strip() or None
        return Extraction(self._engine, value, f"{self._path}@{name}")


class Selection:
    """Ordered elements matched under a scope.

    ``elements`` is None when the scope itself was missing, which is the only
    case where mapping yields an absent extraction; zero matches under a
    present scope map to an empty list.
    """

    def __init__(self, engine: "MapperEngine", elements: list[Tag] | None, path: str) -> None:
        self._engine = engine
        self._elements = elements
        self._path = path

    def __repr__(self) -> str:
        count = "missing scope" if self._elements is None else len(self._elements)
        return f"Selection({self._path}, {count})"

    def __len__(self) -> int:
        return len(self._elements or [])

    def __iter__(self) -> Iterator[Tag]:
        return iter(self._elements or [])

    def get(self, index: int) -> Node:
        """Node for the element at ``index``, or an empty node when out of range."""
        path = f"{self._path}[{index}]"
        if self._elements is None or not 0 <= index < len(self._elements):
            return Node(self._engine, None, path)
        return Node(self._engine, self._elements[index], path)

    def map_to(self, mapper: Callable[[Tag], T]) -> Extraction[list[T]]:
        """Map every element, keeping document order."""
        if self._elements is None:
            return Extraction(self._engine, None, self._path)
        return Extraction(self._engine, [mapper(element) for element in self._elements], self._path)

    def collect(self, mapper: Callable[[list[Tag]], Any]) -> Extraction[Any]:
        """Map the whole list of elements to one value."""
        if self._elements is None:
            return Extraction(self._engine, None, self._path)
        return Extraction(self._engine, mapper(list(self._elements)), self._path)
