"""
Configuration Management

Loads pipeline configuration from a YAML file and environment variables and
validates it into a PipelineSettings model.
"""

import copy
import os
from pathlib import Path
from typing import Any, Dict, Optional, Union

from dotenv import load_dotenv
from pydantic import BaseModel, Field

from .utils.file_utils import load_config as load_yaml_config
from .utils.logging_utils import get_logger

logger = get_logger(__name__)

DEFAULT_CONFIG_FILE = Path('config') / 'pipeline_config.yaml'


class DataSettings(BaseModel):
    """Where the input table comes from."""

    input_file: str = Field(default="data.csv", description="Delimited text table to load")
    encoding: str = Field(default="utf-8", description="Text encoding of the input file")
    create_demo_file: bool = Field(
        default=True,
        description="Write the demo table when input_file does not exist"
    )


class RendererSettings(BaseModel):
    column_width: int = Field(default=15, ge=1, description="Fixed width of each printed cell")


class AnalysisSettings(BaseModel):
    price_column: str = Field(default="Price")
    units_column: str = Field(default="UnitsSold")
    show_progress: bool = Field(default=False, description="Show a tqdm bar over the row scan")


class OutputSettings(BaseModel):
    report_path: Optional[str] = Field(default=None, description="JSON revenue report (optional)")
    preview_rows: int = Field(default=5, ge=0, description="Table rows copied into the report")


class LogFileSettings(BaseModel):
    enabled: bool = False
    path: str = "logs/pipeline.log"


class LoggingSettings(BaseModel):
    level: str = "INFO"
    colorize: bool = True
    file: LogFileSettings = Field(default_factory=LogFileSettings)


class PipelineSettings(BaseModel):
    """Validated view of the whole configuration."""

    data: DataSettings = Field(default_factory=DataSettings)
    renderer: RendererSettings = Field(default_factory=RendererSettings)
    analysis: AnalysisSettings = Field(default_factory=AnalysisSettings)
    output: OutputSettings = Field(default_factory=OutputSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


class Config:
    """
    Pipeline configuration manager.

    Loads configuration from:
    1. YAML file (config/pipeline_config.yaml)
    2. Environment variables (.env)
    3. Command-line overrides (through set())

    Example:
        >>> config = Config()
        >>> print(config.get('data.input_file'))
        data.csv
    """

    def __init__(self, config_file: Optional[Union[str, Path]] = None):
        """
        Initialize configuration.

        Args:
            config_file: Path to YAML config file (optional)
        """
        env_path = Path('.env')
        if env_path.exists():
            load_dotenv(env_path)
            logger.debug(f"Loaded environment variables from: {env_path}")

        if config_file is None:
            config_file = DEFAULT_CONFIG_FILE

        self.config: Dict[str, Any] = {}
        if Path(config_file).exists():
            self.config = load_yaml_config(config_file)
            logger.info(f"Loaded config from: {config_file}")
        else:
            logger.warning(f"Config file not found: {config_file}, using defaults")

        self._apply_env_overrides()

    def _apply_env_overrides(self):
        """Apply environment variable overrides to config."""
        if os.getenv('REVENUE_DATA_FILE'):
            self.set('data.input_file', os.getenv('REVENUE_DATA_FILE'))

        if os.getenv('LOG_LEVEL'):
            self.set('logging.level', os.getenv('LOG_LEVEL'))

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value using dot notation.

        Args:
            key: Config key (e.g., 'data.input_file')
            default: Default value if key not found

        Returns:
            Configuration value

        Example:
            >>> config.get('renderer.column_width')
            15
            >>> config.get('nonexistent.key', 'default')
            'default'
        """
        keys = key.split('.')
        value = self.config

        for k in keys:
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default

        return value

    def set(self, key: str, value: Any):
        """
        Set a configuration value using dot notation.

        Args:
            key: Config key (e.g., 'data.input_file')
            value: Value to set
        """
        keys = key.split('.')
        config = self.config

        for k in keys[:-1]:
            if not isinstance(config.get(k), dict):
                config[k] = {}
            config = config[k]

        config[keys[-1]] = value

    def settings(self) -> PipelineSettings:
        """
        Validate the configuration.

        Returns:
            PipelineSettings with defaults filled in

        Raises:
            pydantic.ValidationError: If a value has the wrong type
        """
        return PipelineSettings(**self.config)

    def to_dict(self) -> Dict[str, Any]:
        """
        Get the full configuration as a dictionary.

        Returns:
            Deep copy of the configuration dictionary
        """
        return copy.deepcopy(self.config)


# Global config instance
_global_config = None


def get_config(config_file: Optional[Union[str, Path]] = None) -> Config:
    """
    Get or create the global configuration instance.

    Args:
        config_file: Path to config file (only used on first call)

    Returns:
        Config instance
    """
    global _global_config

    if _global_config is None:
        _global_config = Config(config_file)

    return _global_config


def reset_config() -> None:
    """Drop the global configuration so the next get_config() reloads it."""
    global _global_config
    _global_config = None
