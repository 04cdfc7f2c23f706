"""
Stage 2: Renderer

Prints the loaded table as an aligned console table.
"""

from .renderer import TableRenderer, NO_DATA_MESSAGE

__all__ = ['TableRenderer', 'NO_DATA_MESSAGE']
