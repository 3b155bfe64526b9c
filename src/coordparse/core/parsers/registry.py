"""
Coordinate recognition from free text.

The text must contain a single coordinate and nothing else: "47.1, 7.5"
is recognized, "lat:47.1, lon:7.5" is not.

Two numbers may be separated by spaces, commas or slashes. Accepted
notations:

CH1903+ / LV95 and CH1903 / LV03
    With or without thousands separators: "2'600'000 1'200'000",
    "2600000 1200000", "600'000 200'000", "600000 200000"

WGS84
    Decimal: "46.97984 6.60757"
    Degrees: "46.97984° 6.60757°", "46.97984°N 6.60757°E"
    Degrees and minutes: "46°58.7904' 6°36.4542'"
    Degrees, minutes and seconds: "46°58'47.424'' 6°36'27.252''" or with
    a double quote for seconds, with or without cardinal letters
    Google style (any of the above without the symbols)

Military Grid Reference System (MGRS)
    "32TLT 98757 23913"
"""

import logging
import re
from dataclasses import dataclass
from typing import Callable, Iterator, Optional, Tuple

from coordparse.core.config import settings
from coordparse.core.crs.transformer import reproject, resolve_epsg
from coordparse.core.errors import ConfigurationError, CRSError
from coordparse.core.parsers.extractors import (
    degrees_extractor,
    mgrs_extractor,
    numeric_extractor,
)
from coordparse.models.crs import CoordinatePair, DetectedCoordinate, ProjectionLike
from coordparse.utils.logging import log_performance, log_with_context

logger = logging.getLogger(__name__)

Extractor = Callable[[re.Match[str]], Optional[DetectedCoordinate]]

_MIN = r"['′]"
_SEC = r"[\"″'′]"
_SEP = r"\s*[,/]?\s*"

# 47.5 7.5
REGEX_PLAIN_DECIMAL = re.compile(
    r"^(?P<a>-?\d{1,3}[.\d]+)\s*[ ,/]+\s*(?P<b>-?\d{1,3}[.\d]+)$"
)

# 2'600'000 1'200'000
REGEX_METRIC = re.compile(
    r"^(?P<a>\d{1,3}[ '’]?\d{1,3}[ '’]?[\d.]{3,})[ ,./]+"
    r"(?P<b>\d{1,3}[ '’]?\d{1,3}[ '’]?[\d.]{3,})$"
)

# 47.5° 7.5° or 47.5°N 7.5°E
REGEX_DEGREES = re.compile(
    r"^(?P<d1>-?\d{1,3}(?:[.,]\d+)?)\s*°\s*(?P<c1>[NSEW]?)" + _SEP +
    r"(?P<d2>-?\d{1,3}(?:[.,]\d+)?)\s*°\s*(?P<c2>[NSEW]?)$",
    re.IGNORECASE,
)

# 47°31.8' 7°31.8'
REGEX_DEGREES_MINUTES = re.compile(
    r"^(?P<d1>\d{1,3})[° ]+(?P<m1>\d+[.,]?\d*)" + _MIN + r"?\s*(?P<c1>[NSEW]?)" + _SEP +
    r"(?P<d2>\d{1,3})[° ]+(?P<m2>\d+[.,]?\d*)" + _MIN + r"?\s*(?P<c2>[NSEW]?)$",
    re.IGNORECASE,
)

# 47°38'48'' 7°38'48'' or 47°38'48" 7°38'48"
REGEX_DEGREES_MINUTES_SECONDS = re.compile(
    r"^(?P<d1>\d{1,3})[° ]+(?P<m1>\d{1,2})[' ′]+(?P<s1>[\d.]+)" + _SEC + r"{0,2}" + _SEP +
    r"(?P<d2>\d{1,3})[° ]+(?P<m2>[\d.]+)[' ′]+(?P<s2>[\d.]+)" + _SEC + r"{0,2}$",
    re.IGNORECASE,
)

# 47°38'48''N 7°38'48''E or 47°38'48"N 7°38'48"E
REGEX_DEGREES_MINUTES_SECONDS_CARDINAL = re.compile(
    r"^(?P<d1>\d{1,3})[° ]+\s*(?P<m1>\d{1,2})[' ′]+\s*(?P<s1>[\d.]+)" + _SEC + r"*\s*(?P<c1>[NSEW]?)" + _SEP +
    r"(?P<d2>\d{1,3})[° ]+\s*(?P<m2>[\d.]+)[' ′]+\s*(?P<s2>[\d.]+)" + _SEC + r"*\s*(?P<c2>[NSEW]?)$",
    re.IGNORECASE,
)

# 32TLT 98757 23913
REGEX_MILITARY_GRID = re.compile(
    r"^(?P<zone>\d{1,2})\s*[C-HJ-NP-X]\s*[A-HJ-NP-Z]\s*[A-HJ-NP-V](?P<digits>[\d\s]*)$",
    re.IGNORECASE,
)


@dataclass(frozen=True)
class PatternEntry:
    """
    A text pattern and the extractor run when it matches.

    Attributes:
        name: Identifier used in logs
        pattern: Compiled regex matched against the whole normalized text
        extractor: Turns the match into a detected coordinate or None
    """

    name: str
    pattern: re.Pattern[str]
    extractor: Extractor


# Order matters: stricter notations must come before looser ones that
# could also match the same text.
PATTERN_REGISTRY: Tuple[PatternEntry, ...] = (
    PatternEntry("plain_decimal", REGEX_PLAIN_DECIMAL, numeric_extractor),
    PatternEntry("metric", REGEX_METRIC, numeric_extractor),
    PatternEntry("degrees", REGEX_DEGREES, degrees_extractor),
    PatternEntry("degrees_minutes", REGEX_DEGREES_MINUTES, degrees_extractor),
    PatternEntry("degrees_minutes_seconds", REGEX_DEGREES_MINUTES_SECONDS, degrees_extractor),
    PatternEntry(
        "degrees_minutes_seconds_cardinal",
        REGEX_DEGREES_MINUTES_SECONDS_CARDINAL,
        degrees_extractor,
    ),
    PatternEntry("military_grid", REGEX_MILITARY_GRID, mgrs_extractor),
)


def normalize_text(text: str) -> str:
    """Trim the text and turn tabs into spaces."""
    return text.replace("\t", " ").strip()


def iter_candidates(text: str) -> Iterator[Tuple[PatternEntry, DetectedCoordinate]]:
    """
    Yield every pattern that both matches the text and extracts a coordinate.

    Patterns are tried in registry order. A structural match whose
    extractor returns None is skipped and the next pattern is tried.

    Args:
        text: Raw user input

    Yields:
        Tuples of (pattern entry, detected coordinate)
    """
    if not isinstance(text, str):
        return

    normalized = normalize_text(text)
    for entry in PATTERN_REGISTRY:
        match = entry.pattern.match(normalized)
        if match is None:
            continue

        detected = entry.extractor(match)
        if detected is None:
            log_with_context(
                logging.DEBUG,
                f"Pattern {entry.name} matched but extraction failed",
                pattern=entry.name,
                text=normalized,
            )
            continue

        yield entry, detected


def recognize_coordinate(text: str) -> Optional[DetectedCoordinate]:
    """
    Identify the coordinate in the text and its source system.

    Args:
        text: Raw user input

    Returns:
        Detected coordinate in its own system, or None if nothing was found
    """
    for _, detected in iter_candidates(text):
        return detected
    return None


def default_target() -> str:
    """
    Resolve the configured default output projection.

    Returns:
        EPSG identifier from settings.default_target_epsg

    Raises:
        ConfigurationError: If the setting is not an EPSG identifier
    """
    try:
        return resolve_epsg(settings.default_target_epsg)
    except CRSError as e:
        raise ConfigurationError(
            f"Invalid default target projection: {settings.default_target_epsg!r}",
            config_key="default_target_epsg",
            details={"reason": e.message},
        )


@log_performance(log_level=logging.DEBUG)
def coordinate_from_string(
    text: str,
    target: Optional[ProjectionLike] = None,
    decimals: Optional[int] = None,
) -> Optional[CoordinatePair]:
    """
    Extract a coordinate from the text and reproject it.

    Args:
        text: The text in which to find a coordinate
        target: Projection wanted for the output (default:
            settings.default_target_epsg, EPSG:3857)
        decimals: Decimals kept on each axis, rounded half away from zero
            (default: settings.default_decimals, 1)

    Returns:
        Coordinate in the target projection, x/longitude first, or None if
        nothing was found

    Raises:
        CRSError: If target is not an EPSG identifier
        ConfigurationError: If target is omitted and the configured default
            is not an EPSG identifier
    """
    target = resolve_epsg(target) if target is not None else default_target()
    if decimals is None:
        decimals = settings.default_decimals

    for entry, detected in iter_candidates(text):
        try:
            return reproject(detected.coordinate, detected.system, target, decimals)
        except CRSError as e:
            logger.warning(
                f"Pattern {entry.name} gave {detected} but it could not be "
                f"reprojected to {target}: {e.message}"
            )
    return None
