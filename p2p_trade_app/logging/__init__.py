"""
Logging configuration and utilities for the P2P trade utilities.
"""
from .config import configure_logging, get_logger

__all__ = ["configure_logging", "get_logger"]
