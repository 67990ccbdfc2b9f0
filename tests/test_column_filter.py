import pytest

from gui.services.column_filter import ColumnFilterEngine, matches
from gui.services.table_columns import (
    COL_ARTIST,
    COL_COMMISSIONS,
    COL_SFW,
    COL_SHARE_TOTAL,
    column_at,
)
from tests.factories import mixed_rows


def _visible(engine: ColumnFilterEngine, rows) -> list[str]:
    return sorted(r.key for r in rows if not engine.is_row_hidden(r.key))


@pytest.fixture
def rows():
    return mixed_rows()


def test_no_filter_everything_visible(rows):
    engine = ColumnFilterEngine(rows)
    assert engine.filtered_count() == 0
    assert engine.results_label() == ""


def test_identity_column_is_case_insensitive_contains(rows):
    engine = ColumnFilterEngine(rows)
    engine.set_column_filter(COL_ARTIST, "  A ")
    assert _visible(engine, rows) == ["Carol", "alice", "dave"]


def test_numeric_column_is_prefix_of_displayed_text(rows):
    engine = ColumnFilterEngine(rows)
    engine.set_column_filter(COL_COMMISSIONS, "2")
    # "12" contains "2" but does not start with it
    assert _visible(engine, rows) == ["erin"]
    engine.set_column_filter(COL_COMMISSIONS, "1")
    assert _visible(engine, rows) == ["Bob", "alice"]


def test_percentage_column_prefix_matches_display(rows):
    engine = ColumnFilterEngine(rows)
    engine.set_column_filter(COL_SHARE_TOTAL, "9.2")
    assert _visible(engine, rows) == ["Carol", "dave"]


def test_categorical_selection(rows):
    engine = ColumnFilterEngine(rows)
    engine.set_column_filter(COL_SFW, "Yes")
    assert _visible(engine, rows) == ["Carol", "alice", "erin"]
    engine.set_column_filter(COL_SFW, "No")
    assert _visible(engine, rows) == ["Bob", "dave"]
    engine.set_column_filter(COL_SFW, "")
    assert engine.filtered_count() == 0


def test_filters_compose_by_intersection(rows):
    engine = ColumnFilterEngine(rows)
    engine.set_column_filter(COL_ARTIST, "a")
    engine.set_column_filter(COL_SFW, "No")
    assert _visible(engine, rows) == ["dave"]
    assert engine.results_label() == "Search results: 1 results"
    assert engine.hidden_columns("Bob") == frozenset({COL_ARTIST})
    assert engine.hidden_columns("alice") == frozenset({COL_SFW})
    assert engine.hidden_columns("erin") == frozenset({COL_ARTIST, COL_SFW})


def test_clearing_one_column_leaves_others_untouched(rows):
    engine = ColumnFilterEngine(rows)
    engine.set_column_filter(COL_ARTIST, "a")
    engine.set_column_filter(COL_SFW, "No")
    before = {r.key: COL_SFW in engine.hidden_columns(r.key) for r in rows}
    engine.clear_column(COL_ARTIST)
    after = {r.key: COL_SFW in engine.hidden_columns(r.key) for r in rows}
    assert before == after
    assert all(COL_ARTIST not in engine.hidden_columns(r.key) for r in rows)
    assert _visible(engine, rows) == ["Bob", "dave"]
    assert engine.filter_value(COL_ARTIST) == ""


def test_row_visible_iff_every_predicate_passes(rows):
    engine = ColumnFilterEngine(rows)
    filters = {COL_ARTIST: "e", COL_COMMISSIONS: "2", COL_SFW: "Yes"}
    for col, value in filters.items():
        engine.set_column_filter(col, value)
    for r in rows:
        expected = all(
            matches(column_at(c), column_at(c).cell_text(r), v) for c, v in filters.items()
        )
        assert engine.is_row_hidden(r.key) is not expected


def test_unknown_column_rejected(rows):
    engine = ColumnFilterEngine(rows)
    with pytest.raises(IndexError):
        engine.set_column_filter(7, "x")
