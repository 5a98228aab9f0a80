"""Utility modules for dfalex.

Provides:
- logger: get_logger for logging
"""

from dfalex.utils.logger import get_logger

__all__ = ["get_logger"]
