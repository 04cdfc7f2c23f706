"""
Stage 3: Aggregator

Derives total revenue from the loaded table with per-row fault tolerance.
"""

from .aggregator import RevenueAggregator, RevenueResult, RowWarning, format_revenue

__all__ = ['RevenueAggregator', 'RevenueResult', 'RowWarning', 'format_revenue']
