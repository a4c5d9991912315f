"""Path matching used by the request router.

``SubstringMatcher`` accepts any path containing the route token, so
``/.netlify/functions/api/bookings`` and ``/api/bookingsXYZ`` both match
``api/bookings``. ``SegmentMatcher`` requires the token's segments to appear
as whole, consecutive path segments.
"""

from __future__ import annotations

from typing import Protocol


class RouteMatcher(Protocol):
    def matches(self, path: str, token: str) -> bool: ...


class SubstringMatcher:
    def matches(self, path: str, token: str) -> bool:
        return token in path


def _segments(value: str) -> list[str]:
    return [part for part in value.split("/") if part]


class SegmentMatcher:
    def matches(self, path: str, token: str) -> bool:
        wanted = _segments(token)
        parts = _segments(path)
        if not wanted:
            return True
        width = len(wanted)
        return any(parts[i : i + width] == wanted for i in range(len(parts) - width + 1))


MATCHERS: dict[str, type] = {
    "substring": SubstringMatcher,
    "segment": SegmentMatcher,
}


def get_matcher(name: str) -> RouteMatcher:
    try:
        return MATCHERS[name.strip().lower()]()
    except KeyError as exc:
        raise ValueError(f"Unknown route matching mode: {name!r}") from exc


def extract_booking_id(path: str) -> int | None:
    """Return the integer segment right after ``bookings``, if any."""
    parts = path.split("/")
    try:
        raw = parts[parts.index("bookings") + 1]
    except (ValueError, IndexError):
        return None
    if not (raw.isascii() and raw.isdigit()):
        return None
    return int(raw)
