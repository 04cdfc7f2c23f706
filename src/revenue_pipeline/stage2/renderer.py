"""
Renderer - Stage 2

Formats a Table as fixed-width console text. Cells are left-aligned and
padded to the column width; longer cells are printed in full and push the
rest of the line to the right.
"""

import sys
from typing import Any, Dict, List, Optional, Sequence, TextIO

from ..utils.logging_utils import get_logger
from ..stage1.table import Table

logger = get_logger(__name__)

NO_DATA_MESSAGE = "No data loaded."
TITLE = "--- Loaded Data Table ---"


class TableRenderer:
    """
    Stage 2: Renderer

    Example:
        >>> renderer = TableRenderer(config={'column_width': 15})
        >>> print(renderer.render(table))
    """

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        """
        Initialize the Renderer.

        Args:
            config: Configuration dict (the 'renderer' section of pipeline_config.yaml)
        """
        self.config = {
            'column_width': 15,
        }

        if config:
            self.config.update(config)

    def render_lines(self, table: Table) -> List[str]:
        """
        Render a table as a list of text lines.

        A table without data rows renders as a single informational line,
        even if it has a header.

        Args:
            table: Loaded table

        Returns:
            Lines without trailing newlines
        """
        if table.is_empty():
            return [NO_DATA_MESSAGE]

        width = self.config['column_width']

        lines = [TITLE, self.format_cells(table.header)]
        lines.append('-' * (len(table.header) * width))
        for row in table.rows:
            lines.append(self.format_cells(row))

        return lines

    def render(self, table: Table) -> str:
        """Render a table as a single newline-terminated string."""
        return '\n'.join(self.render_lines(table)) + '\n'

    def print_table(self, table: Table, stream: Optional[TextIO] = None) -> None:
        """
        Write the rendered table to a stream.

        Args:
            table: Loaded table
            stream: Output stream (default: sys.stdout)
        """
        out = stream or sys.stdout
        out.write(self.render(table))
        logger.debug(f"Rendered {table.row_count()} rows")

    def format_cells(self, cells: Sequence[str]) -> str:
        """Left-align each cell in a fixed-width slot and join them."""
        width = self.config['column_width']
        return ''.join(f"{cell:<{width}}" for cell in cells)
