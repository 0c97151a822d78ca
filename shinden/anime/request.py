"""Search criteria for the ``/series`` listing."""

from dataclasses import dataclass
from datetime import date
from enum import Enum

from shinden.scraping.pagination import Direction, Order, Pageable

from .enums import (
    EPISODE_LENGTH_QUERY_PARAM,
    EPISODES_NUMBER_QUERY_PARAM,
    TITLE_STATUS_QUERY_PARAM,
    TITLE_TYPE_QUERY_PARAM,
    EpisodeLength,
    EpisodesNumber,
    TitleStatus,
    TitleType,
)
from .tags import Tag

QueryParams = list[tuple[str, str]]

SEARCH_DATE_FORMAT = "%Y-%m-%d"


class Letter(str, Enum):
    """First letter of the title; ``HASH`` selects non-letter titles."""

    A = "A"
    B = "B"
    C = "C"
    D = "D"
    E = "E"
    F = "F"
    G = "G"
    H = "H"
    I = "I"  # noqa: E741
    J = "J"
    K = "K"
    L = "L"
    M = "M"
    N = "N"
    O = "O"  # noqa: E741
    P = "P"
    Q = "Q"
    R = "R"
    S = "S"
    T = "T"
    U = "U"
    V = "V"
    W = "W"
    X = "X"
    Y = "Y"
    Z = "Z"
    HASH = "#"


class SearchType(str, Enum):
    """How the search phrase is matched against titles."""

    CONTAINS = "contains"
    EQUALS = "equals"


class TagSearchType(str, Enum):
    """Whether a title must carry all included tags or any of them."""

    ALL = "all"
    AT_LEAST_ONE = "one"


class DatePrecision(str, Enum):
    """Granularity of the airing date filter."""

    YEAR = "1"
    MONTH = "2"
    DAY = "3"


class SortType(str, Enum):
    """Sortable columns of the listing."""

    TITLE = "desc"
    TYPE = "type"
    EPISODES = "multimedia"
    STATUS = "status"
    TOP_RATED = "ranking-rate"

    @property
    def sort_parameter(self) -> str:
        return "sort_by"

    @property
    def sort_value(self) -> str:
        return self.value

    def asc(self) -> Order:
        return Order(self, Direction.ASC)

    def desc(self) -> Order:
        return Order(self, Direction.DESC)


@dataclass(frozen=True)
class AnimeSearchRequest:
    """Filters of the anime search form.

    Empty collections mean "no filter". For title types, statuses, episode
    counts and episode lengths the site expects every option to be sent in
    that case, so ``to_query_params`` expands them. An explicit episode range
    (``episodes_number_from``/``episodes_number_to``) takes precedence over
    ``episodes_numbers``.

    Included and excluded tags may be mixed from any tag catalog.
    """

    letter: Letter | None = None
    search: str | None = None
    search_type: SearchType | None = None
    included_tags: tuple[Tag, ...] = ()
    excluded_tags: tuple[Tag, ...] = ()
    tags_search_type: TagSearchType | None = None
    start_date: date | None = None
    end_date: date | None = None
    date_precision: DatePrecision | None = None
    title_types: tuple[TitleType, ...] = ()
    title_statuses: tuple[TitleStatus, ...] = ()
    episodes_numbers: tuple[EpisodesNumber, ...] = ()
    episode_lengths: tuple[EpisodeLength, ...] = ()
    episodes_number_from: int | None = None
    episodes_number_to: int | None = None
    at_least_one_episode_online: bool = False
    without_titles_on_my_list: bool = False
    without_completed_titles_on_my_list: bool = False

    @classmethod
    def for_phrase(cls, search: str, search_type: SearchType | None = None) -> "AnimeSearchRequest":
        return cls(search=search, search_type=search_type)

    def to_query_params(self) -> QueryParams:
        """Build the query string pairs, in the order the site's form sends them."""
        params: QueryParams = []

        if self.letter is not None:
            params.append(("letter", self.letter.value))
        if self.search is not None:
            params.append(("search", self.search))
        if self.search_type is not None:
            params.append(("type", self.search_type.value))

        tags = self._tags_value()
        if tags is not None:
            params.append(("genres", tags))
        if self.tags_search_type is not None:
            params.append(("genres-type", self.tags_search_type.value))
        elif tags is not None:
            params.append(("genres-type", TagSearchType.ALL.value))

        if self.start_date is not None:
            params.append(("year_from", self.start_date.strftime(SEARCH_DATE_FORMAT)))
        if self.end_date is not None:
            params.append(("year_to", self.end_date.strftime(SEARCH_DATE_FORMAT)))
        if self.date_precision is not None:
            params.append(("start_date_precision", self.date_precision.value))
        elif self.start_date is not None or self.end_date is not None:
            params.append(("start_date_precision", DatePrecision.DAY.value))

        params.extend(_all_or_selected(TITLE_TYPE_QUERY_PARAM, TitleType, self.title_types))
        params.extend(_all_or_selected(TITLE_STATUS_QUERY_PARAM, TitleStatus, self.title_statuses))
        params.extend(self._episodes_number_params())
        params.extend(_all_or_selected(EPISODE_LENGTH_QUERY_PARAM, EpisodeLength, self.episode_lengths))

        if self.at_least_one_episode_online:
            params.append(("one_online", "true"))
        if self.without_titles_on_my_list:
            params.append(("not_on_list", "true"))
        if self.without_completed_titles_on_my_list:
            params.append(("not_saw", "true"))

        return params

    def _tags_value(self) -> str | None:
        # "i5;i22;e51": included tags first, then excluded
        tokens = [f"i{tag.query_value}" for tag in self.included_tags]
        tokens += [f"e{tag.query_value}" for tag in self.excluded_tags]
        return ";".join(tokens) if tokens else None

    def _episodes_number_params(self) -> QueryParams:
        start, end = self.episodes_number_from, self.episodes_number_to
        if start is not None and end is not None:
            return [(EPISODES_NUMBER_QUERY_PARAM, f"{start}_to_{end}")]
        if start is not None:
            return [(EPISODES_NUMBER_QUERY_PARAM, f"over_{start}")]
        if end is not None:
            return [(EPISODES_NUMBER_QUERY_PARAM, f"less_{end}")]
        return _all_or_selected(EPISODES_NUMBER_QUERY_PARAM, EpisodesNumber, self.episodes_numbers)


def _all_or_selected(name: str, options: type[Enum], selected: tuple[Enum, ...]) -> QueryParams:
    values = selected or tuple(options)
    return [(name, value.query_value) for value in values]


def pageable_query_params(pageable: Pageable | None) -> QueryParams:
    """Page number and sort orders as query pairs."""
    if pageable is None:
        return []
    params: QueryParams = [("page", str(pageable.page_number))]
    for order in pageable.sort.orders:
        params.append((order.property.sort_parameter, order.property.sort_value))
        params.append(("sort_order", order.direction.value))
    return params
