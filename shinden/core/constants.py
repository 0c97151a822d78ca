"""Site-wide constants."""

from shinden.scraping.extraction import PatternMatcher

SERIES_PATH = "/series"

# "/series/12345-some-title" -> "12345"; also tag links such as "/genre/5-action"
MEDIA_ID_MATCHER = PatternMatcher.match(r"(?:[^/]*/){2}(\d+)", 1)

# "/series/12345-some-title" -> "series"
MEDIA_URL_TYPE_MATCHER = PatternMatcher.match(r"^/([^/]+)/", 1)
