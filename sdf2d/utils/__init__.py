"""Utility helpers for sdf2d."""

from sdf2d.utils.logging import configure_logging, get_logger

__all__ = ["configure_logging", "get_logger"]
