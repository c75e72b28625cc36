"""Structured location display and ``/location/...`` route helpers."""

from collections.abc import Mapping
from typing import NamedTuple
from urllib.parse import quote, unquote

LOCATION_SEPARATOR = " > "
LOCATION_ROUTE_ROOT = "/location"


class Breadcrumb(NamedTuple):
    label: str
    path: str


def _field(record, name: str):
    if isinstance(record, Mapping):
        return record.get(name)
    return getattr(record, name, None)


def has_structured_location(record) -> bool:
    return any(_field(record, name) for name in ("country", "state", "city"))


def format_location(record) -> str:
    """
    Country > State > City from whichever levels are set, else the legacy
    free-text location, else "".
    """
    parts = [_field(record, name) for name in ("country", "state", "city")]
    parts = [p for p in parts if p]
    if parts:
        return LOCATION_SEPARATOR.join(parts)
    return _field(record, "location") or ""


def sanitize_location_segment(segment: str | None) -> str:
    if not segment:
        return ""
    return segment.strip()


def encode_location_segment(segment: str) -> str:
    # same escaping as encodeURIComponent
    return quote(segment.strip(), safe="!~*'()")


def decode_location_segment(segment: str) -> str:
    return unquote(segment)


def _present_levels(country: str | None, state: str | None, city: str | None) -> list[str]:
    # descend only while the parent level is present
    levels = []
    for value in (country, state, city):
        if not value:
            break
        levels.append(value)
    return levels


def build_location_route(
    country: str | None = None,
    state: str | None = None,
    city: str | None = None,
) -> str:
    """``build_location_route("India", None, "Rishikesh")`` is ``/location/India``."""
    segments = [LOCATION_ROUTE_ROOT]
    segments.extend(encode_location_segment(level) for level in _present_levels(country, state, city))
    return "/".join(segments)


def build_location_breadcrumbs(
    country: str | None = None,
    state: str | None = None,
    city: str | None = None,
) -> list[Breadcrumb]:
    levels = _present_levels(country, state, city)
    return [Breadcrumb(label=level, path=build_location_route(*levels[: i + 1])) for i, level in enumerate(levels)]


def parse_location_route(path: str) -> tuple[str | None, str | None, str | None]:
    """Inverse of ``build_location_route``: (country, state, city) with None for missing levels."""
    path = path.strip()
    if path != LOCATION_ROUTE_ROOT and not path.startswith(LOCATION_ROUTE_ROOT + "/"):
        raise ValueError(f"not a location route: {path!r}")

    segments = [decode_location_segment(s) for s in path[len(LOCATION_ROUTE_ROOT):].split("/") if s]
    if len(segments) > 3:
        raise ValueError(f"too many location levels in {path!r}")
    segments += [None] * (3 - len(segments))
    return segments[0], segments[1], segments[2]
