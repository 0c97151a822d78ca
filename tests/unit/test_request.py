"""Tests for anime search query building."""

from datetime import date

from shinden.anime.enums import EpisodeLength, EpisodesNumber, TitleStatus, TitleType
from shinden.anime.request import (
    AnimeSearchRequest,
    DatePrecision,
    Letter,
    SearchType,
    SortType,
    TagSearchType,
    pageable_query_params,
)
from shinden.anime.tags import Genre, Other, PlaceAndTime, SourceMaterial, TargetGroup
from shinden.scraping.pagination import Pageable, Sort


def values(params, name):
    return [value for key, value in params if key == name]


class TestAnimeSearchRequest:
    """Tests for AnimeSearchRequest.to_query_params."""

    def test_empty_request_sends_every_option(self):
        """Test unfiltered lists expand to all options."""
        params = AnimeSearchRequest().to_query_params()

        assert values(params, "series_type[]") == ["TV", "OVA", "ONA", "Movie", "Special"]
        assert values(params, "series_status[]") == [
            "Proposal",
            "Currently Airing",
            "Not yet aired",
            "Finished Airing",
        ]
        assert values(params, "series_number[]") == [e.value for e in EpisodesNumber]
        assert values(params, "series_length[]") == [e.value for e in EpisodeLength]
        assert values(params, "genres") == []
        assert values(params, "one_online") == []

    def test_search_phrase(self):
        """Test phrase, match type and letter."""
        request = AnimeSearchRequest(search="bleach", search_type=SearchType.EQUALS, letter=Letter.B)
        params = request.to_query_params()

        assert params[:3] == [("letter", "B"), ("search", "bleach"), ("type", "equals")]

    def test_for_phrase(self):
        """Test the phrase shortcut."""
        assert AnimeSearchRequest.for_phrase("naruto").search == "naruto"

    def test_tags_default_to_all(self):
        """Test included and excluded tags with the default match mode."""
        request = AnimeSearchRequest(
            included_tags=(Genre.ACTION, Genre.COMEDY),
            excluded_tags=(Genre.HORROR,),
        )
        params = request.to_query_params()

        assert values(params, "genres") == ["i5;i7;e51"]
        assert values(params, "genres-type") == ["all"]

    def test_tags_any(self):
        """Test an explicit tag match mode."""
        request = AnimeSearchRequest(excluded_tags=(Genre.YAOI,), tags_search_type=TagSearchType.AT_LEAST_ONE)
        params = request.to_query_params()

        assert values(params, "genres") == ["e364"]
        assert values(params, "genres-type") == ["one"]

    def test_tags_from_every_catalog(self):
        """Test tags of different catalogs share one filter."""
        request = AnimeSearchRequest(
            included_tags=(Genre.FANTASY, TargetGroup.SEINEN, SourceMaterial.LIGHT_NOVEL),
            excluded_tags=(PlaceAndTime.SPACE, Other.ISEKAI),
        )

        assert values(request.to_query_params(), "genres") == ["i22;i48;i1976;e10;e2376"]

    def test_dates_default_precision(self):
        """Test dates imply day precision."""
        params = AnimeSearchRequest(start_date=date(2004, 10, 5)).to_query_params()

        assert values(params, "year_from") == ["2004-10-05"]
        assert values(params, "year_to") == []
        assert values(params, "start_date_precision") == ["3"]

    def test_dates_explicit_precision(self):
        """Test an explicit date precision."""
        request = AnimeSearchRequest(end_date=date(2010, 1, 1), date_precision=DatePrecision.YEAR)

        assert values(request.to_query_params(), "start_date_precision") == ["1"]

    def test_selected_types_and_statuses(self):
        """Test only the selected options are sent."""
        request = AnimeSearchRequest(
            title_types=(TitleType.MOVIE,),
            title_statuses=(TitleStatus.CURRENTLY_AIRING, TitleStatus.NOT_YET_AIRED),
        )
        params = request.to_query_params()

        assert values(params, "series_type[]") == ["Movie"]
        assert values(params, "series_status[]") == ["Currently Airing", "Not yet aired"]

    def test_episode_range(self):
        """Test explicit episode bounds override brackets."""
        both = AnimeSearchRequest(
            episodes_number_from=12,
            episodes_number_to=24,
            episodes_numbers=(EpisodesNumber.ONLY_1,),
        )

        assert values(both.to_query_params(), "series_number[]") == ["12_to_24"]
        assert values(AnimeSearchRequest(episodes_number_from=50).to_query_params(), "series_number[]") == [
            "over_50"
        ]
        assert values(AnimeSearchRequest(episodes_number_to=3).to_query_params(), "series_number[]") == [
            "less_3"
        ]

    def test_flags(self):
        """Test list flags."""
        request = AnimeSearchRequest(
            at_least_one_episode_online=True,
            without_titles_on_my_list=True,
            without_completed_titles_on_my_list=True,
        )
        params = request.to_query_params()

        assert params[-3:] == [("one_online", "true"), ("not_on_list", "true"), ("not_saw", "true")]


class TestPageableQueryParams:
    """Tests for page and sort parameters."""

    def test_page_only(self):
        """Test an unsorted page."""
        assert pageable_query_params(Pageable(page_number=4)) == [("page", "4")]

    def test_sorted(self):
        """Test sort orders become sort_by/sort_order pairs."""
        pageable = Pageable.of(1, Sort.by(SortType.TOP_RATED.desc(), SortType.TITLE.asc()))

        assert pageable_query_params(pageable) == [
            ("page", "1"),
            ("sort_by", "ranking-rate"),
            ("sort_order", "desc"),
            ("sort_by", "desc"),
            ("sort_order", "asc"),
        ]

    def test_no_pageable(self):
        """Test no page parameters without a pageable."""
        assert pageable_query_params(None) == []
