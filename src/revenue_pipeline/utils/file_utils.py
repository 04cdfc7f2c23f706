"""
File I/O utilities for the revenue pipeline.
Handles YAML config files, the JSON report and the demo input table.
"""

import json
import yaml
from pathlib import Path
from typing import Any, Dict, List, Union
from .logging_utils import get_logger

logger = get_logger(__name__)

DEMO_HEADER = "ItemID,Category,Price,UnitsSold,Location"

DEMO_ROWS = [
    "101,Electronics,49.99,150,East",
    "102,Books,19.50,300,West",
    "103,Electronics,129.00,80,North",
    "104,Clothing,35.75,220,East",
    "105,Books,15.00,450,South",
]


def load_config(config_path: Union[str, Path]) -> Dict[str, Any]:
    """
    Load YAML configuration file.

    Args:
        config_path: Path to YAML config file

    Returns:
        Configuration dictionary (empty if the file holds no mapping)

    Raises:
        FileNotFoundError: If config file doesn't exist
        yaml.YAMLError: If YAML is malformed

    Example:
        >>> config = load_config("config/pipeline_config.yaml")
        >>> print(config['data']['input_file'])
        data.csv
    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    logger.debug(f"Loading config from: {config_path}")

    with open(config_path, 'r', encoding='utf-8') as f:
        config = yaml.safe_load(f)

    return config or {}


def save_json(
    data: Union[Dict, List],
    file_path: Union[str, Path],
    indent: int = 2
) -> None:
    """
    Save data to JSON file, creating parent directories as needed.

    Args:
        data: Data to save (dict or list)
        file_path: Output file path
        indent: JSON indentation (default: 2)

    Example:
        >>> save_json({"total_revenue": 13348.5}, "output/revenue.json")
    """
    file_path = Path(file_path)
    file_path.parent.mkdir(parents=True, exist_ok=True)

    with open(file_path, 'w', encoding='utf-8') as f:
        json.dump(data, f, indent=indent, default=str)

    logger.info(f"Saved JSON to: {file_path}")


def create_demo_file(
    file_path: Union[str, Path],
    overwrite: bool = False
) -> bool:
    """
    Write the five-row demo sales table if the file does not exist yet.

    This is an explicit setup step for demonstrations; the loader never
    calls it.

    Args:
        file_path: Where the demo table should live
        overwrite: Replace an existing file

    Returns:
        True if the file was written, False if it already existed

    Raises:
        OSError: If the file cannot be written

    Example:
        >>> create_demo_file("data.csv")
        True
        >>> create_demo_file("data.csv")
        False
    """
    file_path = Path(file_path)

    if file_path.exists() and not overwrite:
        logger.info(f"{file_path} already exists, it will not be created")
        return False

    file_path.parent.mkdir(parents=True, exist_ok=True)

    with open(file_path, 'w', encoding='utf-8', newline='\n') as f:
        f.write(DEMO_HEADER + "\n")
        for line in DEMO_ROWS:
            f.write(line + "\n")

    logger.info(f"Created demo file '{file_path}' for demonstration")
    return True
