"""Utility functions for logotyper.

This module provides utility functions including:

- Logging setup and configuration
- Edit statistics tracking
"""

from logotyper.utils.logging import (
    EditLogger,
    EditStats,
    configure_logging,
)

__all__ = [
    "EditLogger",
    "EditStats",
    "configure_logging",
]
