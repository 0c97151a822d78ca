"""Paging parameters, paged results and total-count reconstruction.

The site renders a fixed number of items per listing page and never states
how many items a listing holds. The total is rebuilt from what is at hand:
the requested page and, when the pagination block links to a last page,
that last page fetched separately.
"""

import math
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Generic, Protocol, TypeVar

from bs4 import Tag

from shinden.monitoring.logger import get_logger

logger = get_logger(__name__)

T = TypeVar("T")
U = TypeVar("U")

DEFAULT_PAGE_SIZE = 10

# Number in the last plain <li> before the two trailing "pagination-next"
# items (next, last) that close the pagination list.
LAST_PAGE_PATTERN = re.compile(
    r"<li>[^>]*>(\d+)<[^<]*</li>\s*"
    r"<li\s+class=[\"']pagination-next[\"'][^>]*>(?:[\s\S]*?)</li>\s*"
    r"<li\s+class=[\"']pagination-next[\"'][^>]*>(?:[\s\S]*?)</li>\s*"
    r"</ul>(?![\s\S]*?<li>)"
)


class Direction(str, Enum):
    """Sort direction."""

    ASC = "asc"
    DESC = "desc"


class SortParam(Protocol):
    """Sortable property of a listing, as the site names it in the query."""

    @property
    def sort_parameter(self) -> str: ...

    @property
    def sort_value(self) -> str: ...


@dataclass(frozen=True)
class Order:
    """Sort order on a single property."""

    property: SortParam
    direction: Direction = Direction.ASC


@dataclass(frozen=True)
class Sort:
    """Ordered collection of sort orders."""

    orders: tuple[Order, ...] = ()

    @classmethod
    def by(cls, *orders: Order) -> "Sort":
        return cls(tuple(orders))

    @classmethod
    def unsorted(cls) -> "Sort":
        return cls()

    @property
    def is_sorted(self) -> bool:
        return bool(self.orders)


@dataclass(frozen=True)
class Pageable:
    """Request for one page of a listing.

    Page numbers are 1-based, as on the site.
    """

    page_number: int = 1
    page_size: int = DEFAULT_PAGE_SIZE
    sort: Sort = field(default_factory=Sort.unsorted)

    def __post_init__(self) -> None:
        if self.page_number < 1:
            raise ValueError("Page number must be greater than 0")
        if self.page_size < 1:
            raise ValueError("Page size must be greater than 0")

    @classmethod
    def of(cls, page_number: int, sort: Sort | None = None, page_size: int = DEFAULT_PAGE_SIZE) -> "Pageable":
        return cls(page_number, page_size, sort or Sort.unsorted())

    @property
    def has_previous(self) -> bool:
        return self.page_number > 1

    def with_page(self, page_number: int) -> "Pageable":
        return Pageable(page_number, self.page_size, self.sort)

    def next(self) -> "Pageable":
        return self.with_page(self.page_number + 1)

    def previous_or_first(self) -> "Pageable":
        return self.with_page(self.page_number - 1) if self.has_previous else self.first()

    def first(self) -> "Pageable":
        return self.with_page(1)


@dataclass(frozen=True)
class Page(Generic[T]):
    """One page of mapped records.

    ``total_elements`` is derived, see ``reconstruct_total``.
    """

    content: tuple[T, ...]
    page_number: int
    page_size: int
    total_elements: int

    @classmethod
    def of(cls, content: list[T], pageable: Pageable, total_elements: int) -> "Page[T]":
        return cls(tuple(content), pageable.page_number, pageable.page_size, total_elements)

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_elements / self.page_size)

    @property
    def number_of_elements(self) -> int:
        return len(self.content)

    @property
    def has_content(self) -> bool:
        return bool(self.content)

    @property
    def is_empty(self) -> bool:
        return not self.content

    @property
    def has_next(self) -> bool:
        return self.page_number * self.page_size < self.total_elements

    @property
    def has_previous(self) -> bool:
        return self.page_number > 1

    @property
    def is_first(self) -> bool:
        return self.page_number == 1

    @property
    def is_last(self) -> bool:
        return not self.has_next

    def map(self, converter: Callable[[T], U]) -> "Page[U]":
        return Page(
            tuple(converter(item) for item in self.content),
            self.page_number,
            self.page_size,
            self.total_elements,
        )


@dataclass(frozen=True)
class LastPageProbe:
    """The last page of a listing, fetched separately to count its items."""

    page_number: int
    document: Any  # raw HTML or parsed tree

    def __post_init__(self) -> None:
        if self.page_number < 1:
            raise ValueError("Last page number must be greater than 0")


def reconstruct_total(
    items_on_page: int,
    pageable: Pageable,
    last_page_number: int | None = None,
    items_on_last_page: int | None = None,
) -> int:
    """Compute the total number of items in a listing.

    In priority order:

    1. With the last page known: ``(last - 1) * size + items on last page``.
    2. On page 1 without it: the items on this page.
    3. On a later, empty page: 0.
    4. On a later, non-empty page: ``(page - 1) * size + items on this page``.
       This is exact only when the page is in fact the last one and is a
       lower bound otherwise.

    Args:
        items_on_page: Items mapped from the requested page
        pageable: Requested page
        last_page_number: 1-based index of the last page, if known
        items_on_last_page: Items counted on the last page, if probed

    Returns:
        Total number of items
    """
    if last_page_number is not None and items_on_last_page is not None:
        return (last_page_number - 1) * pageable.page_size + items_on_last_page

    if pageable.page_number == 1:
        return items_on_page

    if items_on_page == 0:
        return 0

    total = (pageable.page_number - 1) * pageable.page_size + items_on_page
    logger.debug(
        f"Total estimated without last page | page={pageable.page_number} | "
        f"items={items_on_page} | lower_bound={total}"
    )
    return total


def find_last_page_number(document: str | Tag, pattern: re.Pattern = LAST_PAGE_PATTERN) -> int | None:
    """Find the index of the last page linked from a listing's pagination.

    Args:
        document: Raw HTML (a parsed tree is serialized first)
        pattern: Regex whose first group captures the last page number

    Returns:
        Last page number, or None when the listing links to no last page
    """
    html = str(document)
    match = pattern.search(html)
    if match is None:
        return None
    return int(match.group(1))
