"""Geographic coordinate parsing for free-text gallery titles.

Gallery titles write coordinates in several hand-typed styles, so the
parser walks an ordered table of patterns and returns the first match
that converts to an acceptable pair:

  1. DMS with hemisphere letters  ``(34°30'0''N 112°0'0''W)``
  2. decimal with hemisphere      ``(12.34N, 56.78W)``
  3. plain signed decimal pair    ``(34.5, -112.3)``
  4. any two numbers              ``34 -112``

Order matters: DMS text also contains number pairs that the weaker
decimal patterns would happily match.

Match shapes and conversions
----------------------------
The conversion is chosen by each pattern's ``kind``. For the first three
tiers the kind is exactly what the number of groups in the match implies
(see ``classify_group_count``), so dispatching on either gives the same
result. The fallback shares the hemisphere shape but is range checked,
which keeps dates and stray numbers from turning into coordinates.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import StrEnum

from loguru import logger

from butterfly_gallery.extraction.text import decode_entities
from butterfly_gallery.schemas import GeoCoordinate

LAT_RANGE = (-90.0, 90.0)
LON_RANGE = (-180.0, 180.0)


class PatternKind(StrEnum):
    """Conversion applied to a coordinate match."""

    DMS = "dms"
    HEMISPHERE = "hemisphere"
    PLAIN = "plain"
    FALLBACK = "fallback"


@dataclass(frozen=True)
class CoordinatePattern:
    """One entry in the ordered pattern table."""

    name: str
    regex: re.Pattern[str]
    kind: PatternKind


# =============================================================================
# Pattern table
# =============================================================================

_DEG = r"[°º˚]"
_MIN = r"['’′]"
_SEC = r"(?:''|\"|”|″|’’)"
_D = r"(\d{1,3})"
_M = r"(\d{1,2})"
_S = r"(\d{1,2}(?:\.\d+)?)"
_LOOSE_DMS = (
    _D + r"\s*" + _DEG + r"\s*" + _M + r"\s*" + _MIN + r"\s*" + _S + r"\s*" + _SEC + r"?\s*([NS])"
    r"\s*,?\s*"
    + _D + r"\s*" + _DEG + r"\s*" + _M + r"\s*" + _MIN + r"\s*" + _S + r"\s*" + _SEC + r"?\s*([EW])"
)
_SEP = r"[^\dA-Za-z]"

COORDINATE_PATTERNS: tuple[CoordinatePattern, ...] = (
    CoordinatePattern(
        "dms-paren-quotes",
        re.compile(r"\(" + _D + "°" + _M + "'" + _S + "''([NS])[,\\s]*"
                   + _D + "°" + _M + "'" + _S + "''([EW])\\)"),
        PatternKind.DMS,
    ),
    CoordinatePattern(
        "dms-paren-dquote",
        re.compile(r"\(" + _D + "°" + _M + "'" + _S + '"([NS])[,\\s]*'
                   + _D + "°" + _M + "'" + _S + '"([EW])\\)'),
        PatternKind.DMS,
    ),
    CoordinatePattern(
        "dms-paren-spaced",
        re.compile(r"\(\s*" + _LOOSE_DMS + r"\s*\)"),
        PatternKind.DMS,
    ),
    CoordinatePattern(
        "dms-bare-spaced",
        re.compile(_LOOSE_DMS),
        PatternKind.DMS,
    ),
    CoordinatePattern(
        "dms-any-punctuation",
        re.compile(
            _D + _SEP + "{1,3}" + _M + _SEP + "{1,3}" + _S + _SEP + "{0,3}([NSns])" + _SEP + "{0,3}"
            + _D + _SEP + "{1,3}" + _M + _SEP + "{1,3}" + _S + _SEP + "{0,3}([EWew])"
        ),
        PatternKind.DMS,
    ),
    CoordinatePattern(
        "hemisphere-paren",
        re.compile(r"\(\s*(\d{1,2}\.\d+)\s*°?\s*([NS])\s*,?\s*(\d{1,3}\.\d+)\s*°?\s*([EW])\s*\)"),
        PatternKind.HEMISPHERE,
    ),
    CoordinatePattern(
        "hemisphere-bare",
        re.compile(r"(\d{1,2}\.\d+)\s*°?\s*([NS])\s*,?\s*(\d{1,3}\.\d+)\s*°?\s*([EW])"),
        PatternKind.HEMISPHERE,
    ),
    CoordinatePattern(
        "plain-paren-comma",
        re.compile(r"\(\s*(-?\d+\.\d+)\s*,\s*(-?\d+\.\d+)\s*\)"),
        PatternKind.PLAIN,
    ),
    CoordinatePattern(
        "plain-paren-space",
        re.compile(r"\(\s*(-?\d+\.\d+)\s+(-?\d+\.\d+)\s*\)"),
        PatternKind.PLAIN,
    ),
    CoordinatePattern(
        "plain-bare",
        re.compile(r"(-?\d+\.\d+)\s*[,\s]\s*(-?\d+\.\d+)"),
        PatternKind.PLAIN,
    ),
    CoordinatePattern(
        "any-two-numbers",
        re.compile(
            r"(-?\d+(?:\.\d+)?)\s*°?\s*([NSns])?\s*[,;\s]\s*(-?\d+(?:\.\d+)?)\s*°?\s*([EWew])?"
        ),
        PatternKind.FALLBACK,
    ),
)


def classify_group_count(count: int) -> PatternKind | None:
    """Classify a match by its group count, counting the whole match as group 0.

    8+ groups is DMS, 4-7 is decimal-with-hemisphere, 3 is a plain pair.
    """
    if count >= 8:
        return PatternKind.DMS
    if count >= 4:
        return PatternKind.HEMISPHERE
    if count >= 3:
        return PatternKind.PLAIN
    return None


# =============================================================================
# Conversion
# =============================================================================


def dms_to_decimal(
    degrees: float, minutes: float, seconds: float, hemisphere: str | None = None
) -> float:
    """Convert degrees/minutes/seconds to signed decimal degrees (S and W negate)."""
    value = degrees + minutes / 60 + seconds / 3600
    return -value if _is_negative_hemisphere(hemisphere) else value


def in_range(latitude: float, longitude: float) -> bool:
    return (
        LAT_RANGE[0] <= latitude <= LAT_RANGE[1] and LON_RANGE[0] <= longitude <= LON_RANGE[1]
    )


def _is_negative_hemisphere(hemisphere: str | None) -> bool:
    return (hemisphere or "").upper() in ("S", "W")


def _convert_dms(groups: Sequence[str | None]) -> GeoCoordinate:
    lat_d, lat_m, lat_s, lat_h, lon_d, lon_m, lon_s, lon_h = groups[:8]
    return GeoCoordinate(
        latitude=dms_to_decimal(float(lat_d or 0), float(lat_m or 0), float(lat_s or 0), lat_h),
        longitude=dms_to_decimal(float(lon_d or 0), float(lon_m or 0), float(lon_s or 0), lon_h),
    )


def _convert_hemisphere(groups: Sequence[str | None]) -> GeoCoordinate:
    lat, lat_h, lon, lon_h = groups[:4]
    latitude = float(lat or 0)
    longitude = float(lon or 0)
    return GeoCoordinate(
        latitude=-latitude if _is_negative_hemisphere(lat_h) else latitude,
        longitude=-longitude if _is_negative_hemisphere(lon_h) else longitude,
    )


def _convert_plain(groups: Sequence[str | None]) -> GeoCoordinate | None:
    latitude, longitude = float(groups[0] or 0), float(groups[1] or 0)
    if not in_range(latitude, longitude):
        return None
    return GeoCoordinate(latitude=latitude, longitude=longitude)


def _convert_fallback(groups: Sequence[str | None]) -> GeoCoordinate | None:
    coords = _convert_hemisphere(groups)
    if not in_range(coords.latitude, coords.longitude):
        return None
    return coords


_CONVERTERS: dict[PatternKind, Callable[[Sequence[str | None]], GeoCoordinate | None]] = {
    PatternKind.DMS: _convert_dms,
    PatternKind.HEMISPHERE: _convert_hemisphere,
    PatternKind.PLAIN: _convert_plain,
    PatternKind.FALLBACK: _convert_fallback,
}


# =============================================================================
# Public API
# =============================================================================


def parse_coordinates(text: str | None) -> GeoCoordinate | None:
    """
    Find the first usable coordinate pair in ``text``.

    Entities are decoded before matching. A plain decimal (or fallback)
    match outside valid latitude/longitude bounds is rejected and the
    next pattern is tried.

    Returns:
        The coordinate pair, or None if nothing acceptable was found.
    """
    if not text:
        return None

    decoded = decode_entities(text)
    for pattern in COORDINATE_PATTERNS:
        match = pattern.regex.search(decoded)
        if match is None:
            continue
        coords = _CONVERTERS[pattern.kind](match.groups())
        if coords is None:
            logger.debug("Rejected out-of-range {} match {!r}", pattern.name, match.group(0))
            continue
        return coords
    return None
