"""Anime search against the ``/series`` listing."""

from shinden.core.config import Settings
from shinden.core.constants import SERIES_PATH
from shinden.core.exceptions import FetchFailedError
from shinden.http.fetch import AuthenticatedFetcher
from shinden.http.request import HttpRequest
from shinden.http.response import FetchResult
from shinden.http.validator import validate_response
from shinden.monitoring.logger import get_logger
from shinden.scraping.pagination import LastPageProbe, Page, Pageable, find_last_page_number

from .mapper import AnimeSearchMapper
from .models import AnimeSearchResult
from .request import AnimeSearchRequest, QueryParams, pageable_query_params

logger = get_logger(__name__)


class AnimeApi:
    """Anime search operations."""

    def __init__(self, fetcher: AuthenticatedFetcher, mapper: AnimeSearchMapper, settings: Settings) -> None:
        """Initialize the API.

        Args:
            fetcher: Fetch layer carrying the session cookies
            mapper: Mapper for listing pages
            settings: Client settings
        """
        self.fetcher = fetcher
        self.mapper = mapper
        self.settings = settings

    def search_anime(
        self,
        request: AnimeSearchRequest | None = None,
        pageable: Pageable | None = None,
    ) -> Page[AnimeSearchResult]:
        """Search anime titles.

        The listing has no total count, so when the requested page links to
        a later last page that page is fetched as well and its items counted.

        Args:
            request: Search filters, none by default
            pageable: Page to fetch, the first one by default

        Returns:
            Page of search results

        Raises:
            NotFoundError: If the site answered 404
            ForbiddenError: If the site answered 403
            FetchFailedError: If the page could not be fetched otherwise
            PageStructureChangedError: If the listing markup changed
        """
        request = request or AnimeSearchRequest()
        pageable = pageable or Pageable(page_size=self.settings.page_size)
        params = request.to_query_params()

        result = self._fetch_page(params, pageable)
        last_page = self._probe_last_page(params, pageable, result)
        return self.mapper.map(result.entity, pageable, last_page)

    def _probe_last_page(
        self,
        params: QueryParams,
        pageable: Pageable,
        result: FetchResult,
    ) -> LastPageProbe | None:
        # Pagination is read from the page as served, not the parsed tree
        last_page_number = find_last_page_number(result.text or "")
        if last_page_number is None:
            return None
        if last_page_number == pageable.page_number:
            return LastPageProbe(last_page_number, result.entity)

        logger.debug(f"Probing last page | requested={pageable.page_number} | last={last_page_number}")
        last_result = self._fetch_page(params, pageable.with_page(last_page_number))
        return LastPageProbe(last_page_number, last_result.entity)

    def _fetch_page(self, params: QueryParams, pageable: Pageable) -> FetchResult:
        result = self.fetcher.fetch(
            HttpRequest.get(
                self.settings.base_url,
                SERIES_PATH,
                query_params=params + pageable_query_params(pageable),
            )
        )
        validate_response(result)
        self._require_document(result)
        return result

    @staticmethod
    def _require_document(result: FetchResult) -> None:
        if not result.is_present:
            reason = result.empty_reason
            raise FetchFailedError(
                reason.error_details.message if reason else f"HTTP {result.status_code}",
                context={
                    "status_code": result.status_code,
                    "state": reason.state.value if reason else None,
                },
            )
