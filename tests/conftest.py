"""Pytest configuration and fixtures."""

import httpx
import pytest

from shinden.core.config import Settings
from shinden.http.transport import HttpxTransport
from shinden.scraping.engine import MapperEngine
from shinden.scraping.coercion import ConverterRegistry


def anime_row(
    media_id: int = 12434,
    title: str = "Bleach",
    kind: str = "TV",
    episodes: str = "366",
    status: str = "Finished Airing",
    genres: tuple[tuple[int, str], ...] = ((5, "action"), (7, "comedy")),
    top: str | None = "7,85",
    overall: str | None = "8,12",
    story: str | None = "7,90",
    href: str | None = None,
    cover: str | None = None,
) -> str:
    """Build one row of the anime listing."""
    href = href if href is not None else f"/series/{media_id}-{title.lower().replace(' ', '-')}"
    cover = cover if cover is not None else f"/res/images/225x350/{media_id}.jpg"
    title_anchor = f'<h3><a href="{href}">{title}</a></h3>'
    genre_items = "".join(
        f'<li><a href="/genre/{tag_id}-{name}">{name}</a></li>' for tag_id, name in genres
    )
    top_col = f'<li class="rate-top">{top}</li>' if top is not None else ""
    ratings = []
    if overall is not None:
        ratings.append(
            f'<div class="rating rating-total"><span>{overall}<span class="hidden">/10</span></span></div>'
        )
    if story is not None:
        ratings.append(f'<div class="rating rating-story"><span>{story}</span></div>')
    return f"""
        <ul class="div-row">
            <li class="cover-col"><a href="{cover}"><img src="/res/images/100x100/{media_id}.jpg"></a></li>
            <li class="desc-col">
                {title_anchor}
                <ul>{genre_items}</ul>
            </li>
            <li class="title-kind-col">{kind}</li>
            <li class="episodes-col">{episodes}</li>
            <li class="title-status-col">{status}</li>
            {top_col}
            <li class="ratings-col">{"".join(ratings)}</li>
        </ul>
    """


def listing_page(rows: list[str], current_page: int = 1, last_page: int | None = None) -> str:
    """Build a listing page, with a pagination block when ``last_page`` is set."""
    pagination = ""
    if last_page is not None:
        numbers = "".join(
            f'<li><a href="/series?page={number}">{number}</a></li>'
            for number in range(max(1, last_page - 3), last_page + 1)
        )
        pagination = f"""
        <nav class="pagination">
            <ul>
                {numbers}
                <li class="pagination-next"><a href="/series?page={current_page + 1}">&gt;</a></li>
                <li class="pagination-next"><a href="/series?page={last_page}">&gt;&gt;</a></li>
            </ul>
        </nav>
        """
    return f"""
    <html>
    <head><title>Anime - Shinden</title></head>
    <body>
        <section class="anime-list">
            <section>
                <article>
                    {"".join(rows)}
                </article>
            </section>
        </section>
        {pagination}
    </body>
    </html>
    """


@pytest.fixture
def settings():
    """Settings isolated from the environment."""
    return Settings(log_to_file=False, base_url="https://shinden.test")


@pytest.fixture
def engine():
    """Engine with only the built-in converters."""
    return MapperEngine("test.page", ConverterRegistry.with_defaults())


@pytest.fixture
def sample_listing():
    """Listing page with three titles and no pagination."""
    return listing_page(
        [
            anime_row(),
            anime_row(
                media_id=3,
                title="Cowboy Bebop",
                episodes="26",
                genres=((5, "action"), (549, "science-fiction")),
            ),
            anime_row(
                media_id=52991,
                title="Sousou no Frieren",
                kind="TV",
                episodes="28",
                status="Currently Airing",
                genres=(),
                top=None,
                overall=None,
                story=None,
            ),
        ]
    )


@pytest.fixture
def http_transport(settings):
    """Factory for an ``HttpxTransport`` answering from a handler function."""
    transports: list[HttpxTransport] = []

    def factory(handler):
        transport = HttpxTransport(settings, httpx.MockTransport(handler))
        transports.append(transport)
        return transport

    yield factory

    for transport in transports:
        transport.close()


@pytest.fixture
def make_row():
    """Builder for listing rows, see ``anime_row``."""
    return anime_row


@pytest.fixture
def make_listing():
    """Builder for listing pages, see ``listing_page``."""
    return listing_page
