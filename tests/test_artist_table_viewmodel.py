"""ArtistTableViewModel: filtering and sorting together on one row set."""

from gui.services.table_columns import (
    COL_ARTIST,
    COL_COMMISSIONS,
    COL_SFW,
    COL_SHARE_TOTAL,
    COL_SHARE_TYPE,
)
from gui.services.artist_rows import build_artist_rows
from gui.viewmodels.artist_table_viewmodel import ArtistTableViewModel
from parsing.stats_parser import parse_stats
from tests.factories import example_raw_stats, mixed_rows


def test_end_to_end_example():
    vm = ArtistTableViewModel(build_artist_rows(parse_stats(example_raw_stats())))
    vm.click_header(COL_COMMISSIONS)
    snap = vm.click_header(COL_COMMISSIONS)
    assert snap.keys() == ["B", "A"]
    snap = vm.apply_filter(COL_ARTIST, "b")
    assert snap.visible_keys() == ["B"]
    assert snap.results_label == "Search results: 1 results"


def test_initial_snapshot():
    snap = ArtistTableViewModel(mixed_rows()).snapshot()
    assert snap.keys() == ["alice", "Bob", "Carol", "dave", "erin"]
    assert snap.results_label == ""
    assert snap.positions == {}
    assert snap.column_visibility == {COL_SHARE_TOTAL: True, COL_SHARE_TYPE: False}
    alice = snap.rows[0]
    assert alice.cells == ("alice", "Yes", "22.22%", "32.43%", "12", "6", "50%")


def test_header_labels_show_direction_and_rank():
    vm = ArtistTableViewModel(mixed_rows())
    vm.click_header(COL_COMMISSIONS)
    vm.click_header(COL_COMMISSIONS)
    snap = vm.click_header(COL_ARTIST)
    assert snap.positions == {COL_COMMISSIONS: 1, COL_ARTIST: 2}
    assert snap.header_labels[COL_COMMISSIONS] == "# Commissions ▼1"
    assert snap.header_labels[COL_ARTIST] == "Artist ▲2"
    assert snap.header_labels[COL_SFW] == "? sfw"
    assert snap.keys() == ["erin", "alice", "Bob", "Carol", "dave"]


def test_three_clicks_return_to_unsorted():
    vm = ArtistTableViewModel(mixed_rows())
    for _ in range(3):
        snap = vm.click_header(COL_COMMISSIONS)
    assert snap.positions == {}
    assert snap.header_labels[COL_COMMISSIONS] == "# Commissions"
    assert snap.keys() == ["alice", "Bob", "Carol", "dave", "erin"]


def test_click_on_categorical_header_changes_nothing():
    vm = ArtistTableViewModel(mixed_rows())
    before = vm.snapshot()
    after = vm.click_header(COL_SFW)
    assert after.keys() == before.keys()
    assert after.positions == {}


def test_categorical_filter_swaps_share_columns():
    vm = ArtistTableViewModel(mixed_rows())
    snap = vm.apply_filter(COL_SFW, "Yes")
    assert snap.column_visibility == {COL_SHARE_TOTAL: False, COL_SHARE_TYPE: True}
    snap = vm.clear_filter(COL_SFW)
    assert snap.column_visibility == {COL_SHARE_TOTAL: True, COL_SHARE_TYPE: False}


def test_other_filters_do_not_touch_column_visibility():
    vm = ArtistTableViewModel(mixed_rows())
    vm.apply_filter(COL_SFW, "No")
    snap = vm.apply_filter(COL_ARTIST, "x")
    assert snap.column_visibility == {COL_SHARE_TOTAL: False, COL_SHARE_TYPE: True}


def test_sorting_keeps_hidden_rows_hidden():
    vm = ArtistTableViewModel(mixed_rows())
    vm.apply_filter(COL_SFW, "Yes")
    vm.click_header(COL_COMMISSIONS)
    snap = vm.click_header(COL_COMMISSIONS)
    assert snap.keys() == ["erin", "Bob", "alice", "Carol", "dave"]
    assert snap.visible_keys() == ["erin", "alice", "Carol"]
    assert snap.results_label == "Search results: 3 results"


def test_filtering_sorted_rows_keeps_order():
    vm = ArtistTableViewModel(mixed_rows())
    vm.click_header(COL_COMMISSIONS)
    ordered = vm.snapshot().keys()
    snap = vm.apply_filter(COL_COMMISSIONS, "1")
    assert snap.keys() == ordered
    assert snap.visible_keys() == ["Bob", "alice"]


def test_stripes_follow_rendered_position():
    vm = ArtistTableViewModel(mixed_rows())
    vm.apply_filter(COL_ARTIST, "a")
    vm.click_header(COL_COMMISSIONS)
    snap = vm.click_header(COL_COMMISSIONS)
    assert [r.stripe for r in snap.rows] == ["even", "odd", "even", "odd", "even"]
    assert snap.rows[0].key == "erin" and snap.rows[0].visible is False
