"""Longest common prefix/suffix of a list of labels.

Snapshot names produced by automatic tools tend to share a long stem
(``zfs-auto-snap_daily-2024-``); stripping it keeps the matrix columns narrow.
"""

from __future__ import annotations

from collections.abc import Sequence


def prefix(labels: Sequence[str]) -> str:
    if not labels:
        return ""
    xfix = labels[0]
    if len(labels) == 1:
        return xfix
    for label in labels[1:]:
        if not xfix or not label:
            return ""
        max_len = min(len(xfix), len(label))
        shared = max_len
        for index in range(max_len):
            if xfix[index] != label[index]:
                shared = index
                break
        xfix = xfix[:shared]
    return xfix


def suffix(labels: Sequence[str]) -> str:
    if not labels:
        return ""
    xfix = labels[0]
    if len(labels) == 1:
        return xfix
    for label in labels[1:]:
        if not xfix or not label:
            return ""
        max_len = min(len(xfix), len(label))
        shared = max_len
        # right to left
        for offset in range(1, max_len + 1):
            if xfix[-offset] != label[-offset]:
                shared = offset - 1
                break
        xfix = xfix[len(xfix) - shared :]
    return xfix


def trim_prefix(labels: Sequence[str]) -> list[str]:
    common = prefix(labels)
    return [label[len(common) :] for label in labels]


def trim_suffix(labels: Sequence[str]) -> list[str]:
    common = suffix(labels)
    return [label[: len(label) - len(common)] for label in labels]


def compact_labels(labels: Sequence[str], strip_suffix: bool = False) -> list[str]:
    """Display form of ``labels``; a lone label is kept whole rather than emptied."""
    if len(labels) < 2:
        return list(labels)
    compacted = trim_prefix(labels)
    if strip_suffix:
        compacted = trim_suffix(compacted)
    return compacted
