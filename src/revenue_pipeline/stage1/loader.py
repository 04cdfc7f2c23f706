"""
Loader - Stage 1

Reads a delimited text source into a Table:
- Skips lines that are exactly empty (whitespace-only lines are data)
- First non-empty line becomes the header
- Every later non-empty line becomes a data row, in source order

Ragged rows pass through unchanged; consumers decide what to do with them.
"""

from pathlib import Path
from typing import Any, Dict, Iterable, Optional, TextIO, Union

from ..errors import SourceUnreachableError
from ..utils.logging_utils import get_logger
from .row_parser import DELIMITER, parse_row
from .table import Table

logger = get_logger(__name__)

Source = Union[str, Path, TextIO]


class TableLoader:
    """
    Stage 1: Loader

    Materializes a whole text source into a frozen Table.

    Attributes:
        config: Configuration dictionary with settings

    Example:
        >>> loader = TableLoader()
        >>> table = loader.load("data.csv")
        >>> print(table.row_count())
        5
    """

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        """
        Initialize the Loader.

        Args:
            config: Configuration dict (the 'data' section of pipeline_config.yaml)
        """
        self.config = {
            'encoding': 'utf-8',
        }

        if config:
            self.config.update(config)

    def load(self, source: Source) -> Table:
        """
        Load a table from a file path or an open text stream.

        Paths are opened and closed here. Streams are read to the end but
        left open for the caller.

        Args:
            source: Path to a delimited text file, or a readable text stream

        Returns:
            Frozen Table (empty header and no rows if the source has no
            non-empty line)

        Raises:
            SourceUnreachableError: If the source cannot be opened or read
                (missing file, undecodable text, closed or failing stream)
        """
        name = self._describe(source)

        try:
            if isinstance(source, (str, Path)):
                with open(source, 'r', encoding=self.config['encoding'], newline=None) as f:
                    table = self._read_lines(f)
            else:
                table = self._read_lines(source)
        except (OSError, ValueError) as e:
            logger.error(f"Failed to open file: {name}")
            raise SourceUnreachableError(name, str(e)) from e

        logger.info(f"Loaded {table.row_count()} data rows from {name}")
        return table

    def _read_lines(self, lines: Iterable[str]) -> Table:
        """Build a table from an iterable of text lines."""
        table = Table()
        is_header = True

        for raw in lines:
            line = raw.rstrip('\r\n')
            if line == '':
                continue

            cells = parse_row(line, DELIMITER)

            if is_header:
                table.set_header(cells)
                is_header = False
            else:
                table.append_row(cells)

        table.freeze()
        return table

    @staticmethod
    def _describe(source: Source) -> str:
        if isinstance(source, (str, Path)):
            return str(source)
        return str(getattr(source, 'name', None) or type(source).__name__)
