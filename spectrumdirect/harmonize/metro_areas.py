"""Metro-area lookup and location cleanup for decoded station records."""

from __future__ import annotations

import logging
import re
from pathlib import Path

import yaml

from spectrumdirect.models.core import Record

logger = logging.getLogger(__name__)

_METRO_AREAS: dict[str, dict] | None = None
_DEFINITIONS_PATH = Path(__file__).parent / "metro_areas.yaml"

# Place name before the address group: "OTTAWA (123 MAIN ST)" → "OTTAWA"
_PLACE_RE = re.compile(r"^(.*)\s+\(")
_PROVINCE_SUFFIX_RE = re.compile(r",?\s+(on|qc)$", re.IGNORECASE)

# "PLACE (address) rest" → "address, PLACE, rest"
_LOCATION_RE = re.compile(r"^(.*?)\s+\((.*?)\)\s*(.*?)$")
_TRAILING_COMMA_RE = re.compile(r",\s+$")
_NEPEAN_RE = re.compile(r"NEA?PEAN")


def _load_metro_areas() -> dict[str, dict]:
    global _METRO_AREAS
    if _METRO_AREAS is not None:
        return _METRO_AREAS

    with open(_DEFINITIONS_PATH) as f:
        _METRO_AREAS = yaml.safe_load(f)
    return _METRO_AREAS


def metro_names() -> list[str]:
    """Names of all known metro areas."""
    return list(_load_metro_areas())


def get_province(metro: str) -> str:
    """Province abbreviation for a metro area ("" if unknown)."""
    entry = _load_metro_areas().get(metro)
    if entry:
        return entry.get("province", "")
    return ""


def find_metro(place: str) -> str | None:
    """Metro area a place name belongs to, matched case-insensitively."""
    lower = place.lower()
    for metro, entry in _load_metro_areas().items():
        if any(lower == p.lower() for p in entry.get("places", [])):
            return metro
    return None


def guess_metro_area(record: Record) -> str:
    """Best guess at the place name of a station ("" if there's none).

    The link station location is usually a plain city name. Some stations
    carry a coded location there instead, in which case the place name in
    front of the station location's address is used.
    """
    link = record.get("Link_Station_Location", "")
    station = record.get("Station_Location", "")

    if link and station.lower().startswith("gatineau"):
        return "Gatineau"

    where = link
    if re.search(r"\d", where) and station:
        m = _PLACE_RE.match(station)
        where = m.group(1) if m else ""

    return _PROVINCE_SUFFIX_RE.sub("", where)


def select_metro(records: list[Record], metro: str) -> list[Record]:
    """Keep the records located in one metro area.

    Records in another known metro area are dropped quietly; records in no
    known metro area are dropped with a warning.
    """
    if metro not in _load_metro_areas():
        raise ValueError(f"Unknown metro area: {metro}")

    selected = []
    for record in records:
        where = guess_metro_area(record)
        if not where:
            continue

        found = find_metro(where)
        if found is None:
            logger.warning("What to do with %s: %s", where, record)
            continue
        if found != metro:
            continue

        selected.append(record)
    return selected


def clean_location(location: str, province: str = "ON") -> str:
    """Reformat a raw station location into "address, place, province"."""
    location = _NEPEAN_RE.sub("Nepean", location, count=1)
    location = location.replace("OTTAWA", "Ottawa", 1)
    location = _LOCATION_RE.sub(r"\2, \1, \3", location, count=1)
    return _TRAILING_COMMA_RE.sub(f", {province}", location)
