"""
Exceptions Package
"""
from __future__ import annotations


class CustomBaseException(Exception):
    """Base exception"""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class ConfigurationException(CustomBaseException):
    """Error thrown when configuration parameters are not set or cannot be loaded."""

    def __init__(self, config_var, message=None, *, details=None) -> None:
        if not message:
            message = (
                f"The configuration parameter {config_var} has not been set. "
                f"Please set the configuration parameter {config_var} before proceeding."
            )
        super().__init__(message)
        self.config_var = config_var
        self.details = details


class EmptyInputException(CustomBaseException):
    """Error thrown when a distribution is requested for an empty collection of sizes."""

    def __init__(self, message: str = "Cannot compute a distribution without any sizes.") -> None:
        super().__init__(message)


class DegenerateCanvasException(CustomBaseException):
    """Error thrown when a box-plot canvas has no columns to draw on."""

    def __init__(self, canvas_width: int, message: str | None = None) -> None:
        if not message:
            message = f"Canvas width must be at least 1 column, got {canvas_width}."
        super().__init__(message)
        self.canvas_width = canvas_width


class InvalidValueException(CustomBaseException):
    """Error thrown when a byte count is negative or not finite."""

    def __init__(self, value, message: str | None = None) -> None:
        if not message:
            message = f"Expected a finite, non-negative byte count, got {value!r}."
        super().__init__(message)
        self.value = value


class ScanException(CustomBaseException):
    """Error thrown when the scan root cannot be traversed."""

    def __init__(self, path, message: str | None = None) -> None:
        if not message:
            message = f"Scan root {path} does not exist or is not a directory."
        super().__init__(message)
        self.path = path
