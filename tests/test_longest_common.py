from __future__ import annotations

import pytest

from zfs_savings_matrix.domain.workflows.longest_common import (
    compact_labels,
    prefix,
    suffix,
    trim_prefix,
    trim_suffix,
)


@pytest.mark.parametrize(
    ("labels", "expected"),
    [
        ([], ""),
        (["x"], "x"),
        (["ab", "ac"], "a"),
        (["ab", "cd"], ""),
        (["abc", "abc"], "abc"),
        (["abcd", "ab", "abx"], "ab"),
        (["ab", "", "ab"], ""),
    ],
)
def test_prefix_given_labels_then_returns_longest_common_prefix(
    labels: list[str], expected: str
) -> None:
    assert prefix(labels) == expected


@pytest.mark.parametrize(
    ("labels", "expected"),
    [
        ([], ""),
        (["x"], "x"),
        (["ba", "ca"], "a"),
        (["ab", "cd"], ""),
        (["snap-1.tmp", "snap-22.tmp", "x.tmp"], ".tmp"),
        (["abc", "bc"], "bc"),
        (["", "a"], ""),
    ],
)
def test_suffix_given_labels_then_returns_longest_common_suffix(
    labels: list[str], expected: str
) -> None:
    assert suffix(labels) == expected


def test_prefix_given_labels_then_result_is_maximal() -> None:
    labels = ["daily-2024-03-01", "daily-2024-03-02", "daily-2024-04-11"]
    common = prefix(labels)

    assert common == "daily-2024-0"
    assert all(label.startswith(common) for label in labels)
    longer = labels[0][: len(common) + 1]
    assert not all(label.startswith(longer) for label in labels)


def test_trim_prefix_given_labels_when_prefix_readded_then_reconstructs_input() -> None:
    labels = ["auto-2024-01", "auto-2024-02", "auto-2025-01"]
    common = prefix(labels)

    trimmed = trim_prefix(labels)

    assert trimmed == ["4-01", "4-02", "5-01"]
    assert [common + label for label in trimmed] == labels


def test_trim_suffix_given_labels_when_suffix_readded_then_reconstructs_input() -> None:
    labels = ["a-weekly", "bb-weekly", "ccc-weekly"]
    common = suffix(labels)

    trimmed = trim_suffix(labels)

    assert trimmed == ["a", "bb", "ccc"]
    assert [label + common for label in trimmed] == labels


def test_trim_prefix_given_empty_input_then_returns_empty_list() -> None:
    assert trim_prefix([]) == []
    assert trim_suffix([]) == []


def test_trim_functions_given_non_ascii_labels_then_keep_whole_characters() -> None:
    labels = ["snäp-1", "snäp-2"]

    assert prefix(labels) == "snäp-"
    assert trim_prefix(labels) == ["1", "2"]


def test_compact_labels_given_single_label_then_keeps_it_whole() -> None:
    assert compact_labels(["only"]) == ["only"]
    assert compact_labels([]) == []


def test_compact_labels_given_strip_suffix_when_called_then_trims_both_ends() -> None:
    labels = ["auto-01-daily", "auto-02-daily", "auto-13-daily"]

    assert compact_labels(labels) == ["01-daily", "02-daily", "13-daily"]
    assert compact_labels(labels, strip_suffix=True) == ["01", "02", "13"]
