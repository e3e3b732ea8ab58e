"""Print sheet module."""

from .builder import PrintSheetBuilder

__all__ = ['PrintSheetBuilder']
