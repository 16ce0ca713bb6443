"""Utility modules for hueline.

Provides:
- logger: get_logger for namespaced logging
"""

from hueline.utils.logger import get_logger

__all__ = [
    "get_logger",
]
