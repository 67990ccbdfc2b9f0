"""Validation of the raw stats JSON into typed payload models."""

from __future__ import annotations
from typing import Any, Dict, List, Mapping

from gui.models import CategoryStats, CountedDetails, StatsPayload
from parsing.errors import PayloadFormatError, StatsPayloadError

CATEGORIES = ("sfw", "nsfw")


def _section(raw: Mapping[str, Any], name: str, path: str) -> Mapping[str, Any]:
    value = raw.get(name)
    if not isinstance(value, Mapping):
        raise PayloadFormatError(f"Missing section '{path}.{name}'", context={"path": path})
    return value


def _count(section: Mapping[str, Any], path: str) -> int:
    value = section.get("count")
    if isinstance(value, bool) or value is None:
        raise PayloadFormatError(f"Missing count in '{path}'", context={"path": path})
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError) as e:
        raise PayloadFormatError(f"Invalid count in '{path}': {value!r}") from e


def _counted_details(raw: Mapping[str, Any], name: str, path: str) -> CountedDetails:
    section = _section(raw, name, path)
    details = section.get("details", {})
    # PHP serializes an empty associative array as []
    if isinstance(details, list) and not details:
        details = {}
    if not isinstance(details, Mapping):
        raise PayloadFormatError(f"Details of '{path}.{name}' must be an object")
    parsed: Dict[str, int] = {}
    for key, value in details.items():
        try:
            parsed[str(key)] = int(value)
        except (TypeError, ValueError, OverflowError) as e:
            raise PayloadFormatError(
                f"Invalid value for '{key}' in '{path}.{name}': {value!r}"
            ) from e
    return CountedDetails(count=_count(section, f"{path}.{name}"), details=parsed)


def _category(raw: Mapping[str, Any], name: str) -> CategoryStats:
    cat = _section(raw, name, "stats")
    artists = _section(cat, "artists", name)
    artist_names = artists.get("details", [])
    if not isinstance(artist_names, list):
        raise PayloadFormatError(f"Details of '{name}.artists' must be a list")
    names: List[str] = [str(a) for a in artist_names]
    return CategoryStats(
        artists_count=_count(artists, f"{name}.artists"),
        artists=names,
        commissions=_counted_details(cat, "commissions", name),
        thumbnails=_counted_details(cat, "thumbnails", name),
    )


def parse_stats(raw: Any) -> StatsPayload:
    """Validate the decoded body and return a ``StatsPayload``.

    Raises ``StatsPayloadError`` when the server reports an error, and
    ``PayloadFormatError`` for any structural problem. Nothing partial is
    ever returned.
    """
    if not isinstance(raw, Mapping):
        raise PayloadFormatError("Stats payload must be a JSON object")
    error = raw.get("error")
    if error:
        raise StatsPayloadError(str(error))
    sfw, nsfw = (_category(raw, name) for name in CATEGORIES)
    return StatsPayload(sfw=sfw, nsfw=nsfw)


__all__ = ["parse_stats", "CATEGORIES"]
