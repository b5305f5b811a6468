"""
Shared utilities for the Contest History Dashboard.

This module provides common functions used across multiple modules
to avoid code duplication.
"""

import sys
from pathlib import Path

# Enable both `python src/utils.py` and `python -m src.utils` execution modes.
# This ensures src.config imports work regardless of how the script is invoked.
_project_root = str(Path(__file__).parent.parent)
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

import logging
import math

from src.config import MAX_HANDLE_LENGTH


# --- Logging Setup ---
def setup_logging(name: str | None = None, level: int = logging.INFO) -> logging.Logger:
    """
    Configure and return a logger with consistent formatting.

    Args:
        name: Logger name (usually __name__ from the calling module)
        level: Logging level (default: INFO)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.setLevel(level)
    return logger


# --- Validation ---
def normalize_handle(raw: str | None) -> str:
    """Strip surrounding whitespace from a user-supplied handle ("" for None)."""
    return (raw or "").strip()


def validate_handle(handle: str, max_length: int = MAX_HANDLE_LENGTH) -> None:
    """
    Validate a normalized handle before it is sent upstream.

    Args:
        handle: Handle with surrounding whitespace already removed
        max_length: Maximum allowed length in characters

    Raises:
        ValueError: If the handle is empty or too long
    """
    if not handle:
        raise ValueError("Handle must not be empty")
    if len(handle) > max_length:
        raise ValueError(
            f"Handle too long: {len(handle)} characters. "
            f"Maximum allowed: {max_length}"
        )


# --- Numbers ---
def round_half_up(value: float) -> int:
    """Round to the nearest integer, with .5 going up (-2.5 -> -2, 2.5 -> 3)."""
    return math.floor(value + 0.5)


__all__ = [
    # Logging
    'setup_logging',
    # Validation
    'normalize_handle',
    'validate_handle',
    # Numbers
    'round_half_up',
]
