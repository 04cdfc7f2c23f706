"""
Aggregator - Stage 3

Computes total revenue (sum of price x units) over a loaded table:
- Resolves the price and units columns by name on every call
- Converts each row's cells to numbers independently
- Skips rows that cannot be converted and records a warning for each

A missing column is a hard error. Bad rows never abort the scan.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field
from tqdm import tqdm

from ..errors import MissingColumnError
from ..utils.logging_utils import get_logger
from ..utils.parse_utils import ParseResult, parse_float, parse_int
from ..stage1.table import Row, Table

logger = get_logger(__name__)


class RowWarning(BaseModel):
    """A data row that was left out of the total."""

    model_config = ConfigDict(frozen=True)

    row_number: int = Field(description="1-based position among the data rows")
    column: str = Field(description="Column whose cell failed")
    value: Optional[str] = Field(default=None, description="Cell text, None if the cell is absent")
    reason: str

    def __str__(self) -> str:
        return f"Row {self.row_number}: {self.reason}"


class RevenueResult(BaseModel):
    """Total revenue plus the rows that were skipped."""

    total: float = 0.0
    warnings: List[RowWarning] = Field(default_factory=list)
    rows_used: int = 0

    @computed_field
    @property
    def rows_skipped(self) -> int:
        return len(self.warnings)


def format_revenue(total: float) -> str:
    """
    Format the one-line revenue summary.

    Example:
        >>> format_revenue(13348.5)
        'Total Estimated Revenue: $13348.50'
    """
    return f"Total Estimated Revenue: ${total:.2f}"


class RevenueAggregator:
    """
    Stage 3: Aggregator

    Holds only configuration; every call scans the table from scratch, so
    one aggregator can be shared between threads.

    Example:
        >>> aggregator = RevenueAggregator()
        >>> result = aggregator.total_revenue(table)
        >>> print(format_revenue(result.total))
        Total Estimated Revenue: $13348.50
    """

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        """
        Initialize the Aggregator.

        Args:
            config: Configuration dict (the 'analysis' section of pipeline_config.yaml)
        """
        self.config = {
            'price_column': 'Price',
            'units_column': 'UnitsSold',
            'show_progress': False,
        }

        if config:
            self.config.update(config)

    def total_revenue(
        self,
        table: Table,
        price_column: Optional[str] = None,
        units_column: Optional[str] = None
    ) -> RevenueResult:
        """
        Sum price x units over every row that converts cleanly.

        Args:
            table: Loaded table
            price_column: Price column name (default from config: "Price")
            units_column: Units column name (default from config: "UnitsSold")

        Returns:
            RevenueResult with the total (0.0 if no row contributed) and one
            warning per skipped row, in row order

        Raises:
            MissingColumnError: If either column is absent from the header
        """
        if price_column is None:
            price_column = self.config['price_column']
        if units_column is None:
            units_column = self.config['units_column']

        price_idx = table.column_index(price_column)
        units_idx = table.column_index(units_column)

        missing = [
            name for name, idx in ((price_column, price_idx), (units_column, units_idx))
            if idx is None
        ]
        if missing:
            raise MissingColumnError(missing)

        result = RevenueResult()

        rows = tqdm(
            table.rows,
            desc="Computing revenue",
            unit="row",
            disable=not self.config['show_progress']
        )

        for row_number, row in enumerate(rows, start=1):
            price = self._read_cell(row, price_idx, parse_float)
            units = self._read_cell(row, units_idx, parse_int)

            failure = None
            if not price.ok:
                failure = RowWarning(
                    row_number=row_number,
                    column=price_column,
                    value=self._cell(row, price_idx),
                    reason=price.error
                )
            elif not units.ok:
                failure = RowWarning(
                    row_number=row_number,
                    column=units_column,
                    value=self._cell(row, units_idx),
                    reason=units.error
                )

            if failure is not None:
                logger.warning(f"Skipping row {row_number} due to parsing error: {failure.reason}")
                result.warnings.append(failure)
                continue

            result.total += price.value * units.value
            result.rows_used += 1

        logger.debug(
            f"Revenue over {result.rows_used} rows, {result.rows_skipped} skipped: {result.total}"
        )

        return result

    @staticmethod
    def _cell(row: Row, index: int) -> Optional[str]:
        return row[index] if index < len(row) else None

    def _read_cell(self, row: Row, index: int, parser) -> ParseResult:
        """Convert one cell, treating an absent cell as a failure."""
        cell = self._cell(row, index)
        if cell is None:
            return ParseResult(False, error=f"row has {len(row)} cells, no value at column {index + 1}")
        return parser(cell)
