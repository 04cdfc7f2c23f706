"""Revenue pipeline - load a comma-delimited sales table, print it, and total its revenue."""

from .errors import (
    PipelineError,
    LoadError,
    SourceUnreachableError,
    AnalysisError,
    MissingColumnError,
    TableFrozenError,
)
from .stage1 import DELIMITER, parse_row, Table, TableLoader
from .stage2 import TableRenderer
from .stage3 import RevenueAggregator, RevenueResult, RowWarning, format_revenue

__version__ = "0.1.0"
__all__ = [
    # Ingestion
    "DELIMITER",
    "parse_row",
    "Table",
    "TableLoader",
    # Rendering
    "TableRenderer",
    # Analysis
    "RevenueAggregator",
    "RevenueResult",
    "RowWarning",
    "format_revenue",
    # Errors
    "PipelineError",
    "LoadError",
    "SourceUnreachableError",
    "AnalysisError",
    "MissingColumnError",
    "TableFrozenError",
]
