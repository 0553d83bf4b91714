from __future__ import annotations

import logging

import pytest

from editmatch import DamerauOSA, Levenshtein, Workspace


def test_starts_empty_and_grows_on_demand() -> None:
    workspace = Workspace()
    assert workspace.capacity == 0
    rows = workspace.reserve(5)
    assert workspace.capacity == 5
    assert len(rows) == 1
    assert all(len(row) == 5 for row in rows)


def test_reuses_rows_when_large_enough() -> None:
    workspace = Workspace(2, 10)
    rows = workspace.reserve(4)
    assert workspace.reserve(10) is rows
    assert workspace.capacity == 10


def test_never_shrinks() -> None:
    workspace = Workspace(2)
    workspace.reserve(12)
    workspace.reserve(3)
    assert workspace.capacity == 12
    assert workspace.row_count == 2


def test_logs_growth(caplog) -> None:
    workspace = Workspace()
    with caplog.at_level(logging.DEBUG, logger="editmatch.workspace"):
        workspace.reserve(8)
        workspace.reserve(4)
    growth = [r for r in caplog.records if "Growing workspace" in r.getMessage()]
    assert len(growth) == 1


@pytest.mark.parametrize(("rows", "capacity"), [(0, 1), (1, -1)])
def test_rejects_bad_dimensions(rows, capacity) -> None:
    with pytest.raises(ValueError):
        Workspace(rows, capacity)


def test_engines_size_workspace_to_trimmed_length() -> None:
    engine = Levenshtein()
    assert engine.workspace.capacity == 0
    engine.distance("aaaaax", "b" * 20)
    assert engine.workspace.capacity == 20
    engine.distance("xx" + "ab" + "yy", "xx" + "ba" + "yy")
    assert engine.workspace.capacity == 20


def test_common_affixes_skip_workspace_allocation() -> None:
    engine = Levenshtein()
    assert engine.distance("prefix-body", "prefix-body-and-more") == 9
    assert engine.workspace.capacity == 0


def test_expected_max_length_preallocates() -> None:
    engine = DamerauOSA(32)
    assert engine.workspace.capacity == 32
    assert engine.workspace.row_count == 2
    engine.distance("abc", "acb")
    assert engine.workspace.capacity == 32


def test_stale_workspace_values_do_not_leak_between_calls() -> None:
    engine = DamerauOSA()
    long_a = "abcdefghijklmnopqrstuvwxyz" * 3
    long_b = long_a[::-1]
    engine.distance(long_a, long_b)
    assert engine.distance("ab", "ba") == 1
    assert engine.distance("abc", "cab", 1) == -1
    assert engine.distance("abc", "cab", 2) == 2
