"""
Stage 1: Ingestion

Turns delimited text lines into an in-memory Table of string cells.
"""

from .row_parser import DELIMITER, parse_row
from .table import Table
from .loader import TableLoader

__all__ = ['DELIMITER', 'parse_row', 'Table', 'TableLoader']
