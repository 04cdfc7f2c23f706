"""
Utility modules for the revenue pipeline.
Provides common functionality for logging, file I/O, and cell conversion.
"""

from .logging_utils import setup_logger, get_logger
from .file_utils import load_config, save_json, create_demo_file
from .parse_utils import ParseResult, parse_float, parse_int

__all__ = [
    'setup_logger',
    'get_logger',
    'load_config',
    'save_json',
    'create_demo_file',
    'ParseResult',
    'parse_float',
    'parse_int',
]
