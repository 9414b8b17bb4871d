from __future__ import annotations

from collections.abc import Sequence
from typing import ClassVar, final

from tabulate import tabulate

from zfs_savings_matrix.domain.models.savings_matrix import SavingsMatrix


def format_bytes(size_bytes: int) -> str:
    """SI byte size with one decimal below ten units: ``1.2 kB``, ``15 MB``."""
    size = max(0, int(size_bytes))
    if size < 10:
        return f"{size} B"
    units = ("B", "kB", "MB", "GB", "TB", "PB", "EB")
    exponent = 0
    while exponent < len(units) - 1 and size >= 1000 ** (exponent + 1):
        exponent += 1
    scaled = int(size * 10 / 1000**exponent + 0.5) / 10
    if scaled >= 10:
        return f"{scaled:.0f} {units[exponent]}"
    return f"{scaled:.1f} {units[exponent]}"


@final
class MatrixRenderer:
    CORNER: ClassVar[str] = "to\\from"

    def __init__(self, raw: bool = False) -> None:
        self._raw = raw

    def _cell(self, size_bytes: int) -> str:
        if self._raw:
            return str(size_bytes)
        return format_bytes(size_bytes)

    def rows(self, matrix: SavingsMatrix, display_labels: Sequence[str]) -> list[list[str]]:
        labels = matrix.labels
        if len(display_labels) != len(labels):
            raise ValueError(
                f"expected {len(labels)} display labels, got {len(display_labels)}"
            )
        rows: list[list[str]] = []
        for row_index, to_label in enumerate(labels):
            row = [display_labels[row_index]]
            for col_index, from_label in enumerate(labels):
                if row_index < col_index:
                    row.append("")
                    continue
                row.append(self._cell(matrix.get_size(from_label, to_label)))
            rows.append(row)
        return rows

    def render(self, matrix: SavingsMatrix, display_labels: Sequence[str]) -> str:
        if not matrix.labels:
            return f"{self.CORNER}\n"
        headers = [self.CORNER, *display_labels]
        table = tabulate(
            self.rows(matrix, display_labels),
            headers=headers,
            tablefmt="plain",
            colalign=("right",) * len(headers),
            disable_numparse=True,
        )
        return f"{table}\n"
