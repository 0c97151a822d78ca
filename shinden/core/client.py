"""Client entry point - wires settings, transport, mappers and APIs."""

from types import TracebackType

from shinden.anime.api import AnimeApi
from shinden.anime.enums import Translate
from shinden.anime.mapper import AnimeSearchMapper
from shinden.http.fetch import AuthenticatedFetcher
from shinden.http.session import InMemorySessionStore, SessionStore
from shinden.http.transport import HttpxTransport, Transport
from shinden.monitoring.logger import get_logger, setup_logging

from .config import Settings, get_settings

logger = get_logger(__name__)


class ShindenClient:
    """Entry point to the site's APIs.

    Build it with ``create``; use it as a context manager so the underlying
    HTTP connection pool is closed::

        with ShindenClient.create() as client:
            page = client.anime.search_anime(AnimeSearchRequest.for_phrase("Bleach"))
    """

    def __init__(
        self,
        settings: Settings,
        session: SessionStore,
        transport: Transport,
        anime: AnimeApi,
    ) -> None:
        self.settings = settings
        self.session = session
        self.transport = transport
        self.anime = anime

    @classmethod
    def create(
        cls,
        settings: Settings | None = None,
        session: SessionStore | None = None,
        transport: Transport | None = None,
        translate: Translate | None = None,
        configure_logging: bool = True,
    ) -> "ShindenClient":
        """Build a client with every dependency wired explicitly.

        Args:
            settings: Client settings, read from the environment by default
            session: Session store, a fresh in-memory one by default
            transport: HTTP transport, an httpx-based one by default
            translate: Translation lookup for localized labels
            configure_logging: Whether to install the client's log sinks

        Returns:
            Ready-to-use client
        """
        settings = settings or get_settings()
        if configure_logging:
            setup_logging(settings)

        session = session if session is not None else InMemorySessionStore()
        transport = transport or HttpxTransport(settings)
        fetcher = AuthenticatedFetcher(transport, session, settings)

        anime = AnimeApi(fetcher, AnimeSearchMapper(settings, translate), settings)

        logger.info(f"Client created | base_url={settings.base_url} | env={settings.app_env.value}")
        return cls(settings, session, transport, anime)

    def close(self) -> None:
        self.transport.close()

    def __enter__(self) -> "ShindenClient":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.close()
