"""
Row Parser

Splits one line of delimited text into its cells.

Example:
    "101,Books,,East" -> ["101", "Books", "", "East"]
"""

from typing import List

DELIMITER = ","


def parse_row(line: str, delimiter: str = DELIMITER) -> List[str]:
    """
    Split a line on every occurrence of the delimiter.

    A line with n delimiters always yields n + 1 cells. Cells are returned
    exactly as written: no whitespace trimming and no quote handling, so a
    comma inside quotes still splits the field. The empty string yields a
    single empty cell.

    Args:
        line: One line of text, without its trailing newline
        delimiter: Cell separator (default: ",")

    Returns:
        List of cell strings

    Example:
        >>> parse_row('a,"b,c",d')
        ['a', '"b', 'c"', 'd']
        >>> parse_row("")
        ['']
    """
    return line.split(delimiter)
