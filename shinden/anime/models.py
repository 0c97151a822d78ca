"""Records mapped from anime pages."""

from dataclasses import dataclass, field

from .enums import TitleStatus, TitleType, UrlType
from .tags import Genre


@dataclass(frozen=True)
class Rating:
    """Scores shown next to a title; any of them may be missing."""

    top: float | None = None
    overall: float | None = None
    story: float | None = None
    graphics: float | None = None
    music: float | None = None
    characters: float | None = None


@dataclass(frozen=True)
class AnimeSearchResult:
    """One row of the anime search listing."""

    id: int
    url_type: UrlType
    image_url: str
    title: str
    type: TitleType
    episodes: int
    status: TitleStatus
    genres: tuple[Genre, ...] = ()
    rating: Rating = field(default_factory=Rating)
