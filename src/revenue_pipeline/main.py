"""
Main Pipeline Orchestrator

Loads the sales table, prints it, and reports total revenue.

Usage:
    # Run with config/pipeline_config.yaml (or defaults)
    revenue-pipeline

    # Read a different table
    revenue-pipeline --input data/sales.csv

    # Use another config file, with debug logging
    revenue-pipeline --config my_config.yaml --verbose
"""

import argparse
import sys
from pathlib import Path
from typing import Any, Dict, Optional, TextIO, Union

from .config import Config, get_config
from .errors import MissingColumnError, SourceUnreachableError
from .utils.logging_utils import setup_logger, get_logger
from .utils.file_utils import create_demo_file, save_json

from .stage1.loader import TableLoader
from .stage1.table import Table
from .stage2.renderer import TableRenderer
from .stage3.aggregator import RevenueAggregator, RevenueResult, format_revenue

logger = get_logger(__name__)

ANALYSIS_TITLE = "--- Analysis Result ---"


class RevenuePipeline:
    """
    Main pipeline orchestrator.

    Runs load, render and analysis in order. Load failures stop the run;
    a missing column only skips the analysis.

    Example:
        >>> pipeline = RevenuePipeline()
        >>> exit_code = pipeline.run()
    """

    def __init__(
        self,
        config_file: Optional[Union[str, Path]] = None,
        config: Optional[Config] = None
    ):
        """
        Initialize the pipeline.

        Args:
            config_file: Path to config file (optional)
            config: Already-built Config (takes precedence over config_file)
        """
        self.config = config or Config(config_file)
        self.settings = self.config.settings()

        log_settings = self.settings.logging
        setup_logger(
            'revenue_pipeline',
            log_file=log_settings.file.path if log_settings.file.enabled else None,
            level=log_settings.level,
            colorize=log_settings.colorize
        )

        self.loader = TableLoader(config={'encoding': self.settings.data.encoding})
        self.renderer = TableRenderer(config=self.settings.renderer.model_dump())
        self.aggregator = RevenueAggregator(config=self.settings.analysis.model_dump())

        logger.debug("Revenue pipeline initialized")

    def run(self, stream: Optional[TextIO] = None) -> int:
        """
        Run the complete pipeline.

        Args:
            stream: Where the table and summary are printed (default: sys.stdout)

        Returns:
            Process exit status (0 on success, 1 if the input could not be read)
        """
        out = stream or sys.stdout

        try:
            table = self.run_load()
        except SourceUnreachableError as e:
            logger.error(str(e))
            return 1

        self.run_render(table, out)
        self.run_analysis(table, out)
        return 0

    def run_load(self) -> Table:
        """
        Provision the demo file if enabled, then load the input table.

        Returns:
            Loaded Table

        Raises:
            SourceUnreachableError: If the input cannot be read
        """
        input_file = Path(self.settings.data.input_file)

        if self.settings.data.create_demo_file:
            try:
                create_demo_file(input_file)
            except OSError as e:
                logger.error(f"Could not create demo file: {e}")

        return self.loader.load(input_file)

    def run_render(self, table: Table, stream: Optional[TextIO] = None) -> None:
        """Print the table."""
        self.renderer.print_table(table, stream)

    def run_analysis(
        self,
        table: Table,
        stream: Optional[TextIO] = None
    ) -> Optional[RevenueResult]:
        """
        Compute and print total revenue.

        Args:
            table: Loaded table
            stream: Output stream (default: sys.stdout)

        Returns:
            RevenueResult, or None if the analysis was skipped
        """
        out = stream or sys.stdout

        if table.is_empty():
            logger.info("Cannot calculate revenue: no data loaded.")
            return None

        try:
            result = self.aggregator.total_revenue(table)
        except MissingColumnError as e:
            logger.error(f"{e}, revenue analysis skipped")
            return None

        if result.warnings:
            logger.info(f"Skipped {result.rows_skipped} of {table.row_count()} rows")

        out.write(f"{ANALYSIS_TITLE}\n{format_revenue(result.total)}\n")

        report_path = self.settings.output.report_path
        if report_path:
            save_json(self.build_report(table, result), report_path)

        return result

    def build_report(self, table: Table, result: RevenueResult) -> Dict[str, Any]:
        """
        Assemble the JSON revenue report.

        The table is exported through pandas so the report carries the
        column labels (overflow cells of long rows get positional labels)
        and a preview of the first rows exactly as loaded.

        Args:
            table: Loaded table
            result: Revenue analysis of that table

        Returns:
            Report dictionary ready for save_json
        """
        df = table.to_dataframe()
        preview = df.head(self.settings.output.preview_rows)

        return {
            'input_file': self.settings.data.input_file,
            'row_count': len(df),
            'columns': [str(column) for column in df.columns],
            'preview': preview.values.tolist(),
            **result.model_dump(),
        }


def main(argv=None) -> int:
    """
    CLI entry point for the pipeline.

    Usage:
        revenue-pipeline
        revenue-pipeline --input data/sales.csv
        revenue-pipeline --config config/pipeline_config.yaml --verbose
    """
    parser = argparse.ArgumentParser(
        description="Print a sales table and its total estimated revenue",
        formatter_class=argparse.RawDescriptionHelpFormatter
    )

    parser.add_argument(
        '--config',
        help='Path to config file (default: config/pipeline_config.yaml)'
    )

    parser.add_argument(
        '--input',
        help='Input table (overrides data.input_file)'
    )

    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Enable verbose logging'
    )

    args = parser.parse_args(argv)

    config = get_config(args.config)

    if args.input:
        config.set('data.input_file', args.input)

    if args.verbose:
        config.set('logging.level', 'DEBUG')

    pipeline = RevenuePipeline(config=config)
    return pipeline.run()


if __name__ == '__main__':
    sys.exit(main())
