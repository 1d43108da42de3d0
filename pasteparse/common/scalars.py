"""Scalar parsers and markup string heuristics.

Everything in here is a pure function of its input string. The date,
size and number parsers encode how the paste site renders values; the
heuristics below them encode which part of a label or href carries the
value. Both are coupled to the site's current markup and are the first
place to look when extraction starts returning defaults.
"""

from __future__ import annotations

import logging
import math
import re
from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from pasteparse.common.exceptions import DateFormatException

logger = logging.getLogger(__name__)

# =============================================================================
# Dates
# =============================================================================

# "Thursday 2nd of May 2024 10:05:29 AM CDT"
LONG_DATE_SHAPE = "<Weekday> <day><suffix> of <Month> <year> <hh:mm:ss> <AM|PM> <tz>"
DATE_MARKER = " of"
ORDINAL_SUFFIX_LENGTH = 2
# After the suffix and marker are removed: "Thursday 2 May 2024 10:05:29 AM -0500"
NORMALIZED_DATE_FORMAT = "%A %d %B %Y %I:%M:%S %p %z"
# The site renders every timestamp in US Central daylight time.
TIMEZONE_OFFSETS = {"CDT": "-0500"}


def normalize_date(text: str) -> str:
    """Strip the ordinal suffix and " of" marker and resolve the timezone.

    Raises:
        DateFormatException: If the marker is missing or the suffix
            indices fall outside the string.
    """
    marker = text.find(DATE_MARKER)
    if marker == -1:
        raise DateFormatException(
            text, LONG_DATE_SHAPE, f"missing '{DATE_MARKER.strip()}' marker"
        )

    start = marker - ORDINAL_SUFFIX_LENGTH
    end = marker + len(DATE_MARKER)
    if start < 0:
        raise DateFormatException(
            text, LONG_DATE_SHAPE, "no ordinal suffix before marker"
        )
    if end > len(text):
        raise DateFormatException(text, LONG_DATE_SHAPE, "date string too short")

    normalized = text[:start] + text[end:]
    for abbreviation, offset in TIMEZONE_OFFSETS.items():
        normalized = normalized.replace(abbreviation, offset)
    return normalized


def parse_date(text: str) -> int:
    """Convert a long-form site date into a Unix timestamp.

    Args:
        text: A date such as "Thursday 2nd of May 2024 10:05:29 AM CDT".

    Returns:
        Seconds since the Unix epoch.

    Raises:
        DateFormatException: If the text does not have the expected shape.
    """
    normalized = normalize_date(text)
    try:
        parsed = datetime.strptime(normalized, NORMALIZED_DATE_FORMAT)
    except ValueError as e:
        raise DateFormatException(text, LONG_DATE_SHAPE, str(e)) from e
    return int(parsed.timestamp())


def parse_date_or_epoch(text: str) -> int:
    """Like parse_date, but returns 0 (the epoch) on failure."""
    try:
        return parse_date(text)
    except DateFormatException as e:
        logger.warning("Failed to parse date %r: %s", text, e.reason)
        return 0


def parse_edit_date(title: str) -> int | None:
    """Parse the edit date out of a "<label>: <date>" title attribute.

    The split happens on the first colon, so the colons in the time part
    are preserved. Returns None when there is no colon at all.
    """
    _, sep, date_part = title.partition(":")
    if not sep:
        return None
    return parse_date_or_epoch(date_part.strip())


# =============================================================================
# Sizes and numbers
# =============================================================================

_BYTE_UNITS: dict[str, int] = {
    "": 1,
    "b": 1,
    "byte": 1,
    "bytes": 1,
}
for _power, _prefix in enumerate("kmgtpe", start=1):
    _BYTE_UNITS[_prefix] = 1000**_power
    _BYTE_UNITS[f"{_prefix}b"] = 1000**_power
    _BYTE_UNITS[f"{_prefix}i"] = 1024**_power
    _BYTE_UNITS[f"{_prefix}ib"] = 1024**_power

_SIZE_PATTERN = re.compile(r"^\s*([0-9][0-9,]*(?:\.[0-9]+)?)\s*([a-z]*)\s*$", re.I)
_SIZE_TOKEN = re.compile(
    r"[0-9][0-9,]*(?:\.[0-9]+)?\s*(?:[kmgtpe]i?b|[kmgtpe]i|bytes?|b)\b", re.I
)


def parse_byte_size(text: str) -> int:
    """Parse a human-readable size such as "1.5 KB" into bytes.

    Decimal units (KB, MB, ...) are powers of 1000 and binary units
    (KiB, MiB, ...) powers of 1024; units are case-insensitive and a bare
    number is taken as bytes. Fractional bytes round half up. Returns 0
    when the text is not a size.
    """
    match = _SIZE_PATTERN.match(text)
    if match is None:
        return 0
    number, unit = match.groups()
    multiplier = _BYTE_UNITS.get(unit.lower())
    if multiplier is None:
        return 0
    try:
        value = Decimal(number.replace(",", "")) * multiplier
    except InvalidOperation:
        return 0
    return int(value.quantize(Decimal(1), rounding=ROUND_HALF_UP))


def parse_number(text: str, default: int = 0) -> int:
    """Parse an integer after removing thousands separators and whitespace."""
    cleaned = "".join(text.replace(",", "").split())
    try:
        return int(cleaned)
    except ValueError:
        return default


def parse_optional_number(text: str) -> int | None:
    """Like parse_number, but None when the text is not an integer."""
    cleaned = "".join(text.replace(",", "").split())
    try:
        return int(cleaned)
    except ValueError:
        return None


def parse_float(text: str, default: float = 0.0) -> float:
    """Parse a finite float after removing separators and whitespace."""
    cleaned = "".join(text.replace(",", "").split())
    try:
        value = float(cleaned)
    except ValueError:
        return default
    return value if math.isfinite(value) else default


# =============================================================================
# Markup heuristics
# =============================================================================

SITE_IMAGE_PREFIXES = ("/themes/pastebin/img/", "/cache/img/")
PROXY_IMAGE_PREFIX = "/imgs/"
COMMENT_FOR_MARKER = "This is comment for paste"


def strip_prefix(value: str, prefix: str) -> str:
    """Remove every occurrence of *prefix* (the site's base URL, usually)."""
    if not prefix:
        return value
    return value.replace(prefix, "")


def category_from_label(text: str) -> str | None:
    """Category label text is "<icon text> <category>"; keep the category.

    Splits the trimmed text on the first space. None when there is no space.
    """
    _, sep, category = text.strip().partition(" ")
    if not sep:
        return None
    return category


def size_from_label(text: str) -> int:
    """Find the paste size in the ".left" info label.

    The label holds the format name, the size and the category. The first
    "<number> <byte unit>" token is the size; 0 when there is none.
    """
    match = _SIZE_TOKEN.search(text)
    if match is None:
        return 0
    return parse_byte_size(match.group(0))


def report_id_from_href(href: str) -> str:
    """Report link href "/report/<id>" -> "<id>"."""
    return href.replace("/report/", "")


def format_from_href(href: str) -> str:
    """Archive link href "/archive/<format>" -> "<format>"."""
    return href.replace("/archive/", "")


def paste_id_from_href(href: str) -> str:
    """Paste link href "/<id>" -> "<id>" (every slash is removed)."""
    return href.replace("/", "")


def comment_for_from_href(href: str) -> str | None:
    """Comment link href "/<id>#<anchor>" -> "<id>"; None without an anchor."""
    paste_id, sep, _ = href.replace("/", "").partition("#")
    if not sep:
        return None
    return paste_id


def rewrite_icon_url(src: str) -> str:
    """Re-root site image paths under the image proxy's /imgs/ path."""
    for prefix in SITE_IMAGE_PREFIXES:
        src = src.replace(prefix, PROXY_IMAGE_PREFIX)
    return src
