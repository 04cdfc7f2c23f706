"""
Table Store

In-memory table of string cells: one header plus data rows in file order.
The loader fills a table once and freezes it; after that it is read-only
and can be shared between threads without locking.
"""

from typing import List, Optional, Sequence, Tuple

import pandas as pd

from ..errors import TableFrozenError

Row = Tuple[str, ...]


class Table:
    """
    Header and rows of a delimited text table.

    Rows may be ragged: a row can hold fewer or more cells than the header.
    Column names are resolved to indices by scanning the header on every
    lookup.

    Example:
        >>> table = Table()
        >>> table.set_header(["ItemID", "Price"])
        >>> table.append_row(["101", "49.99"])
        >>> table.column_index("Price")
        1
        >>> table.row_count()
        1
    """

    def __init__(self):
        self._header: Row = ()
        self._rows: List[Row] = []
        self._frozen = False

    @property
    def header(self) -> Row:
        """Column names in file order."""
        return self._header

    @property
    def rows(self) -> Tuple[Row, ...]:
        """Data rows in file order."""
        return tuple(self._rows)

    @property
    def frozen(self) -> bool:
        return self._frozen

    def row(self, index: int) -> Row:
        """Return the data row at a zero-based position."""
        return self._rows[index]

    def set_header(self, cells: Sequence[str]) -> None:
        """
        Set the column names, replacing any previous header.

        Raises:
            TableFrozenError: If the table has been frozen
        """
        self._check_writable()
        self._header = tuple(cells)

    def append_row(self, cells: Sequence[str]) -> None:
        """
        Append a data row after the existing ones.

        Raises:
            TableFrozenError: If the table has been frozen
        """
        self._check_writable()
        self._rows.append(tuple(cells))

    def freeze(self) -> None:
        """Disallow further writes."""
        self._frozen = True

    def column_index(self, name: str) -> Optional[int]:
        """
        Find the position of a column by exact, case-sensitive name.

        Args:
            name: Column name

        Returns:
            Zero-based index of the first header cell equal to name, or None
        """
        for index, column in enumerate(self._header):
            if column == name:
                return index
        return None

    def row_count(self) -> int:
        return len(self._rows)

    def is_empty(self) -> bool:
        return not self._rows

    def to_dataframe(self) -> pd.DataFrame:
        """
        Export the table as a DataFrame of strings.

        No type conversion is applied. Short rows are padded with None; cells
        beyond the header are kept under their positional index as the column
        label.

        Returns:
            DataFrame with one column per header cell (plus overflow columns)
        """
        width = max([len(self._header)] + [len(row) for row in self._rows])
        columns = list(self._header) + list(range(len(self._header), width))
        records = [list(row) + [None] * (width - len(row)) for row in self._rows]
        return pd.DataFrame(records, columns=columns, dtype=object)

    def _check_writable(self) -> None:
        if self._frozen:
            raise TableFrozenError("Table is read-only after loading")

    def __len__(self) -> int:
        return len(self._rows)

    def __repr__(self) -> str:
        return f"Table(columns={len(self._header)}, rows={len(self._rows)})"
