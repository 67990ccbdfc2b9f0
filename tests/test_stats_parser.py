import pytest

from parsing.errors import PayloadFormatError, StatsPayloadError
from parsing.stats_parser import parse_stats
from tests.factories import example_raw_stats


def test_parse_valid_payload():
    payload = parse_stats(example_raw_stats())
    assert payload.sfw.artists == ["A"]
    assert payload.nsfw.commissions.count == 30
    assert payload.nsfw.thumbnails.details == {"B": 30}


def test_error_string_is_raised_verbatim():
    with pytest.raises(StatsPayloadError) as exc:
        parse_stats({"error": "Database unreachable (code 7)"})
    assert str(exc.value) == "Database unreachable (code 7)"


def test_error_wins_over_data():
    raw = example_raw_stats()
    raw["error"] = "Maintenance"
    with pytest.raises(StatsPayloadError):
        parse_stats(raw)


def test_missing_category_is_format_error():
    raw = example_raw_stats()
    del raw["nsfw"]
    with pytest.raises(PayloadFormatError):
        parse_stats(raw)


def test_non_object_body_is_format_error():
    with pytest.raises(PayloadFormatError):
        parse_stats(["not", "an", "object"])


def test_invalid_detail_value_is_format_error():
    raw = example_raw_stats()
    raw["sfw"]["commissions"]["details"]["A"] = "many"
    with pytest.raises(PayloadFormatError):
        parse_stats(raw)


def test_empty_details_list_and_string_counts_accepted():
    raw = example_raw_stats()
    raw["nsfw"]["thumbnails"] = {"count": "0", "details": []}
    payload = parse_stats(raw)
    assert payload.nsfw.thumbnails.count == 0
    assert payload.nsfw.thumbnails.details == {}


@pytest.mark.parametrize("field", ["count", "details"])
def test_infinite_numbers_are_format_errors(field):
    raw = example_raw_stats()
    if field == "count":
        raw["sfw"]["commissions"]["count"] = float("inf")
    else:
        raw["sfw"]["commissions"]["details"]["A"] = float("inf")
    with pytest.raises(PayloadFormatError):
        parse_stats(raw)
