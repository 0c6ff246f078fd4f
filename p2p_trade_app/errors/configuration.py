"""Configuration errors raised when loaded settings fail validation."""

from typing import Any, Optional


class ConfigurationError(Exception):
    """Loaded configuration is invalid and cannot be used."""

    def __init__(self, message: str, errors: Optional[list[Any]] = None):
        super().__init__(message)
        self.errors = errors or []
        self.recoverable = False
