"""Exceptions raised by the bolt weight calculator."""

from typing import Optional


class BoltWeightError(ValueError):
    """Base class for calculator input errors."""


class UnknownSizeError(BoltWeightError):
    """Nominal size has no entry in the dimension table for its standard."""

    def __init__(self, size: str, standard: Optional[str] = None):
        self.size = size
        self.standard = standard
        if standard:
            message = f"Bolt size {size!r} not found for standard {standard}"
        else:
            message = f"Size {size!r} not found"
        super().__init__(message)


class InvalidInputError(BoltWeightError):
    """Input value is out of domain (length, standard family, unit pair...)."""
