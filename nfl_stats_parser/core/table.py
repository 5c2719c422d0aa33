"""
Generic table structure handed from the scraper to the normalizer
"""

from dataclasses import dataclass
from typing import List, Sequence, Tuple


@dataclass(frozen=True)
class GenericTable:
    """
    Raw statistics table: ordered rows of string cells

    The first row is the header/label row of the page table.
    """

    rows: Tuple[Tuple[str, ...], ...]

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[str]]) -> "GenericTable":
        """Build table from any sequence of row sequences; None cells become empty strings"""
        return cls(rows=tuple(
            tuple("" if cell is None else str(cell) for cell in row)
            for row in rows
        ))

    @property
    def row_count(self) -> int:
        return len(self.rows)

    @property
    def column_count(self) -> int:
        return len(self.rows[0]) if self.rows else 0

    @property
    def header(self) -> Tuple[str, ...]:
        return self.rows[0] if self.rows else ()

    @property
    def data_rows(self) -> List[Tuple[str, ...]]:
        return list(self.rows[1:])

    def row_widths(self) -> List[int]:
        """Distinct cell counts in table order"""
        widths = []
        for row in self.rows:
            if len(row) not in widths:
                widths.append(len(row))
        return widths
