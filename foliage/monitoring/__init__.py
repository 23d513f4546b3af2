"""
Logging setup and document statistics
"""

from .log_manager import LogManager
from .document_stats import DocumentStats

__all__ = [
    'LogManager',
    'DocumentStats'
]
