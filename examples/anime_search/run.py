"""Anime search example - Shinden listing.

This example demonstrates:
- Building a search request with filters and sorting
- Walking the paginated listing
- Page-structure errors and typed fetch failures

Usage:
    python -m examples.anime_search.run "Bleach"
"""

import sys

from shinden.anime.request import AnimeSearchRequest, SortType
from shinden.core.client import ShindenClient
from shinden.core.exceptions import ShindenError
from shinden.monitoring.logger import get_logger
from shinden.scraping.pagination import Pageable, Sort

logger = get_logger(__name__)

# Configuration
MAX_PAGES = 3


def run_search(phrase: str) -> int:
    """Search the listing and log the first pages of results.

    Args:
        phrase: Title phrase to search for

    Returns:
        Number of titles seen
    """
    request = AnimeSearchRequest.for_phrase(phrase)
    pageable = Pageable.of(1, Sort.by(SortType.TOP_RATED.desc()))
    seen = 0

    with ShindenClient.create() as client:
        logger.info("=" * 60)
        logger.info(f"Searching anime | phrase={phrase!r}")
        logger.info("=" * 60)

        for _ in range(MAX_PAGES):
            try:
                page = client.anime.search_anime(request, pageable)
            except ShindenError as e:
                logger.error(f"Search stopped: {e} | {e.context}")
                break

            logger.info(
                f"Page {page.page_number}/{page.total_pages} | "
                f"items={page.number_of_elements} | total={page.total_elements}"
            )
            for anime in page.content:
                score = f"{anime.rating.overall:.2f}" if anime.rating.overall is not None else "-"
                logger.info(
                    f"  [{anime.id}] {anime.title[:40]} | {anime.type.value} | "
                    f"{anime.episodes} ep. | {anime.status.value} | {score}"
                )
            seen += page.number_of_elements

            if not page.has_next:
                break
            pageable = pageable.next()

    return seen


if __name__ == "__main__":
    count = run_search(sys.argv[1] if len(sys.argv) > 1 else "Bleach")
    print(f"\nListed {count} titles")
