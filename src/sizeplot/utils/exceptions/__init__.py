from .exceptions import (
    ConfigurationException,
    CustomBaseException,
    DegenerateCanvasException,
    EmptyInputException,
    InvalidValueException,
    ScanException,
)

__all__ = [
    "ConfigurationException",
    "CustomBaseException",
    "DegenerateCanvasException",
    "EmptyInputException",
    "InvalidValueException",
    "ScanException",
]
