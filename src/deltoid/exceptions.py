"""Custom exceptions for deltoid.

Bad numeric input (a NaN component handed to a strict constructor) is
reported by pydantic's ``ValidationError``. The exceptions here cover the
remaining failure kinds, so callers can tell "bad input" apart from
"meaningless for this type".
"""

from __future__ import annotations


class DeltoidError(Exception):
    """Base exception for all deltoid errors."""

    def __init__(self, message: str) -> None:
        """Initialize error with a human-readable message.

        Args:
            message: Human-readable error description.
        """
        self.message = message
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        return self.message


class UnsupportedOperationError(DeltoidError, TypeError):
    """Raised when an operation is not defined for a vector type.

    This is a permanent contract violation rather than an input problem:
    ``Direction`` rejects normalize, scale, add, subtract, floor and ceil
    whatever its components are.
    """

    def __init__(self, operation: str, vector_type: str) -> None:
        """Initialize with the rejected operation.

        Args:
            operation: Name of the rejected operation.
            vector_type: Name of the vector type that rejected it.
        """
        self.operation = operation
        self.vector_type = vector_type
        super().__init__(f"{vector_type} {operation} is meaningless")


class RegionMismatchError(DeltoidError, TypeError):
    """Raised when two regions of different shapes are combined."""

    def __init__(self, first: str, second: str) -> None:
        self.first = first
        self.second = second
        super().__init__(f"Cannot combine {first} with {second}")


class RegionTooLargeError(DeltoidError):
    """Raised when a point enumeration would scan too many grid cells.

    Attributes:
        cell_count: Number of candidate cells in the bounding box
            (``inf`` for unbounded boxes).
        limit: Configured maximum number of cells.
    """

    def __init__(self, message: str, *, cell_count: float, limit: int) -> None:
        self.cell_count = cell_count
        self.limit = limit
        super().__init__(message)

    def _format_message(self) -> str:
        return f"{self.message} (cells={self.cell_count}, limit={self.limit})"
