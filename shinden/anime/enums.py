"""Value catalogs shown on anime listing pages.

Each enum knows how the site spells its members and resolves scraped text
back to a member with ``from_value``, raising ``ValueError`` for anything
unknown.
"""

from enum import Enum
from typing import Callable

Translate = Callable[[str], str | None]


class UrlType(str, Enum):
    """First path segment of a media link."""

    SERIES = "series"
    TITLES = "titles"
    CHARACTER = "character"
    STAFF = "staff"
    MANGA = "manga"

    @classmethod
    def from_value(cls, value: str) -> "UrlType":
        for url_type in cls:
            if url_type.value == value:
                return url_type
        raise ValueError(f"Unknown url type: {value}")


class TitleType(str, Enum):
    """Kind of title."""

    TV = "TV"
    OVA = "OVA"
    ONA = "ONA"
    MOVIE = "Movie"
    SPECIAL = "Special"

    @property
    def translation_key(self) -> str:
        return f"title.type.{self.name.lower()}"

    @property
    def query_value(self) -> str:
        return self.value

    @classmethod
    def from_value(cls, value: str) -> "TitleType":
        for title_type in cls:
            if title_type.value == value:
                return title_type
        raise ValueError(f"Unknown title type: {value}")


TITLE_TYPE_QUERY_PARAM = "series_type[]"


class TitleStatus(str, Enum):
    """Airing status of a title."""

    PROPOSAL = "Proposal"
    CURRENTLY_AIRING = "Currently Airing"
    NOT_YET_AIRED = "Not yet aired"
    FINISHED_AIRING = "Finished Airing"

    @property
    def translation_key(self) -> str:
        return _TITLE_STATUS_KEYS[self]

    @property
    def query_value(self) -> str:
        return self.value

    @classmethod
    def from_value(cls, value: str, translate: Translate | None = None) -> "TitleStatus":
        """Resolve the site's status label.

        The English value is tried first; with ``translate`` the localized
        label of each status is tried next.
        """
        for status in cls:
            if status.value == value:
                return status
        if translate is not None:
            for status in cls:
                if translate(status.translation_key) == value:
                    return status
        raise ValueError(f"Unknown title status: {value}")

    @classmethod
    def resolver(cls, translate: Translate | None = None) -> Callable[[str], "TitleStatus"]:
        """``from_value`` bound to a translation lookup."""
        return lambda value: cls.from_value(value, translate)


TITLE_STATUS_QUERY_PARAM = "series_status[]"

_TITLE_STATUS_KEYS = {
    TitleStatus.PROPOSAL: "user.settings.edit.title-status.proposal",
    TitleStatus.CURRENTLY_AIRING: "user.settings.edit.title-status.airing",
    TitleStatus.NOT_YET_AIRED: "user.settings.edit.title-status.not-yet-aired",
    TitleStatus.FINISHED_AIRING: "user.settings.edit.title-status.finished",
}


class EpisodesNumber(str, Enum):
    """Episode count brackets offered by the search form."""

    ONLY_1 = "only_1"
    BETWEEN_2_AND_14 = "2_to_14"
    BETWEEN_15_AND_28 = "15_to_28"
    BETWEEN_29_AND_100 = "29_to_100"
    MORE_THAN_100 = "over_100"

    @property
    def translation_key(self) -> str:
        return "episode.number." + self.name.lower().replace("_", "-")

    @property
    def query_value(self) -> str:
        return self.value


EPISODES_NUMBER_QUERY_PARAM = "series_number[]"


class EpisodeLength(str, Enum):
    """Episode length brackets, in minutes."""

    LESS_THAN_7 = "less_7"
    BETWEEN_7_AND_18 = "7_to_18"
    BETWEEN_19_AND_27 = "19_to_27"
    BETWEEN_28_AND_48 = "28_to_48"
    MORE_THAN_48 = "over_48"

    @property
    def translation_key(self) -> str:
        return "episode.length." + self.name.lower().replace("_", "-") + "-minutes"

    @property
    def query_value(self) -> str:
        return self.value


EPISODE_LENGTH_QUERY_PARAM = "series_length[]"
