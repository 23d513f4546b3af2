"""
Selections - ordered, deduplicated query results
"""

from .selection import Selection

__all__ = ['Selection']
