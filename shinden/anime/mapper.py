"""Mapper for the anime search listing."""

from typing import Mapping

from bs4 import Tag

from shinden.core.config import Settings
from shinden.core.constants import MEDIA_ID_MATCHER, MEDIA_URL_TYPE_MATCHER
from shinden.monitoring.logger import log_mapping_event
from shinden.scraping.coercion import Converter
from shinden.scraping.extraction import Extraction, PatternMatcher
from shinden.scraping.mapper import BaseDocumentMapper
from shinden.scraping.pagination import LastPageProbe, Page, Pageable, reconstruct_total

from .enums import TitleStatus, TitleType, Translate, UrlType
from .models import AnimeSearchResult, Rating
from .tags import Genre

ANIME_SEARCH_RESULT_ROW = "section.anime-list > section > article > ul.div-row"
LI_RATING_COL = "li.ratings-col"
LI_RATE_TOP = "li.rate-top"
TITLE_ANCHOR = "li.desc-col > h3 > a"


class AnimeSearchMapper(BaseDocumentMapper):
    """Maps ``/series`` listing pages to ``AnimeSearchResult`` pages.

    Identity fields (id, title, type, ...) are required and a missing one
    aborts the whole page. Rating scores are optional: unrated titles simply
    have no score block.
    """

    id_matcher: PatternMatcher = MEDIA_ID_MATCHER
    url_type_matcher: PatternMatcher = MEDIA_URL_TYPE_MATCHER

    def __init__(self, settings: Settings, translate: Translate | None = None) -> None:
        self._translate = translate
        super().__init__(settings)

    @property
    def mapper_code(self) -> str:
        return "anime.search"

    def type_converters(self) -> Mapping[type, Converter]:
        return {
            UrlType: UrlType.from_value,
            Genre: Genre.from_value,
            TitleType: TitleType.from_value,
            TitleStatus: TitleStatus.resolver(self._translate),
        }

    def map(
        self,
        document: str | Tag,
        pageable: Pageable,
        last_page: LastPageProbe | None = None,
    ) -> Page[AnimeSearchResult]:
        """Map a listing page and work out the listing's total size.

        Args:
            document: Requested page, raw HTML or parsed tree
            pageable: Requested page number and size
            last_page: Last page of the listing, when it was probed

        Returns:
            Page of search results

        Raises:
            PageStructureChangedError: If any row lacks a required field
        """
        results = self.map_list(document, ANIME_SEARCH_RESULT_ROW, self.map_anime)

        if last_page is not None:
            total = reconstruct_total(
                len(results),
                pageable,
                last_page_number=last_page.page_number,
                items_on_last_page=self.count_items(last_page.document, ANIME_SEARCH_RESULT_ROW),
            )
        else:
            total = reconstruct_total(len(results), pageable)

        log_mapping_event(
            self.mapper_code,
            len(results),
            page=pageable.page_number,
            total_elements=total,
            probed=last_page is not None,
        )
        return Page.of(results, pageable, total)

    def map_anime(self, row: Tag) -> AnimeSearchResult:
        """Map one listing row."""
        node = self.engine.on(row)
        return AnimeSearchResult(
            id=node.select_first(TITLE_ANCHOR).attr("href").pattern(self.id_matcher).to_long().or_raise("id"),
            url_type=node.select_first(TITLE_ANCHOR)
            .attr("href")
            .pattern(self.url_type_matcher)
            .map_to(UrlType)
            .or_raise("url-type"),
            image_url=node.select_first("li.cover-col > a").attr("href").or_raise("image-url"),
            title=node.select_first(TITLE_ANCHOR).text().or_raise("title"),
            genres=tuple(node.select("li.desc-col > ul > li > a").map_to(self.map_genre).or_else([])),
            type=node.select_first("li.title-kind-col").text().map_to(TitleType).or_raise("type"),
            episodes=node.select_first("li.episodes-col").text().to_int().or_raise("episodes"),
            rating=self.map_rating(row),
            status=node.select_first("li.title-status-col").text().map_to(TitleStatus).or_raise("status"),
        )

    def map_rating(self, row: Tag) -> Rating:
        """Map the optional score block of a row."""
        node = self.engine.on(row)
        return Rating(
            top=self._score(node.select_first(LI_RATE_TOP).text().replace("Brak", "")),
            overall=self._score(node.select_first(f"{LI_RATING_COL} div.rating.rating-total span").own_text()),
            story=self._score(node.select_first(f"{LI_RATING_COL} div.rating.rating-story span").own_text()),
            graphics=self._score(
                node.select_first(f"{LI_RATING_COL} div.rating.rating-graphics span").own_text()
            ),
            music=self._score(node.select_first(f"{LI_RATING_COL} div.rating.rating-music span").own_text()),
            characters=self._score(
                node.select_first(f"{LI_RATING_COL} div.rating.rating-titlecahracters span").own_text()
            ),
        )

    def map_genre(self, anchor: Tag) -> Genre:
        return self.engine.on(anchor).attr("href").pattern(self.id_matcher).map_to(Genre).or_raise("genre")

    @staticmethod
    def _score(extraction: Extraction[str]) -> float | None:
        # Scores use a decimal comma, e.g. "7,85"
        return extraction.replace(",", ".").to_float().or_else(None)
