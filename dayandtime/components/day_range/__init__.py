"""
Day range component - calendar day containing an instant.
"""

from .component import day_range

__all__ = ["day_range"]
