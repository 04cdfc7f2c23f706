"""
Hard-error taxonomy for the revenue pipeline.

Structural problems (unreadable source, missing columns) are exceptions.
Bad cells inside individual rows are not: the aggregator reports them as
RowWarning values and keeps scanning.
"""

from typing import List, Sequence


class PipelineError(Exception):
    """Base class for every error raised by the pipeline."""


class LoadError(PipelineError):
    """The input table could not be loaded."""


class SourceUnreachableError(LoadError):
    """
    The text source could not be opened or read.

    Attributes:
        source: Description of the source (path or stream name)
        reason: Underlying error message
    """

    def __init__(self, source: str, reason: str):
        self.source = source
        self.reason = reason
        super().__init__(f"Failed to read {source}: {reason}")


class AnalysisError(PipelineError):
    """The revenue analysis could not be computed."""


class MissingColumnError(AnalysisError):
    """
    One or more required columns are absent from the header.

    Attributes:
        missing: Unresolved column names, in the order they were requested
    """

    def __init__(self, missing: Sequence[str]):
        self.missing: List[str] = list(missing)
        names = ", ".join(f"'{name}'" for name in self.missing)
        super().__init__(f"Could not find column(s) {names} for analysis")


class TableFrozenError(PipelineError):
    """A write was attempted on a table after loading finished."""
