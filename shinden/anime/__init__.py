"""Anime module - Search request, listing mapper, API."""

from .api import AnimeApi
from .enums import EpisodeLength, EpisodesNumber, TitleStatus, TitleType, UrlType
from .mapper import AnimeSearchMapper
from .models import AnimeSearchResult, Rating
from .request import AnimeSearchRequest, DatePrecision, Letter, SearchType, SortType, TagSearchType
from .tags import (
    TAG_CATALOGS,
    CharacterType,
    Genre,
    Other,
    PlaceAndTime,
    ProductionType,
    SourceMaterial,
    Tag,
    TargetGroup,
)

__all__ = [
    "AnimeApi",
    "AnimeSearchMapper",
    "AnimeSearchRequest",
    "AnimeSearchResult",
    "CharacterType",
    "DatePrecision",
    "EpisodeLength",
    "EpisodesNumber",
    "Genre",
    "Letter",
    "Other",
    "PlaceAndTime",
    "ProductionType",
    "Rating",
    "SearchType",
    "SortType",
    "SourceMaterial",
    "TAG_CATALOGS",
    "Tag",
    "TagSearchType",
    "TargetGroup",
    "TitleStatus",
    "TitleType",
    "UrlType",
]
