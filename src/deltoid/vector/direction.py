"""Direction cosines.

A ``Direction`` holds three angles whose squared cosines sum to 1. Rescaling
or combining such triples has no meaning, so ``Direction`` is a plain
``Vector`` rather than an ``ArithmeticVector``; the arithmetic entry points
exist only to fail with ``UnsupportedOperationError``.
"""

from __future__ import annotations

from typing import ClassVar, NoReturn

from pydantic import StrictFloat

from deltoid.exceptions import UnsupportedOperationError
from deltoid.vector.base import Vector


class Direction(Vector, frozen=True):
    """Direction given as the angles ``alpha``, ``beta`` and ``gamma``."""

    INVALID: ClassVar[Direction]
    ORIGIN: ClassVar[Direction]

    alpha: StrictFloat
    beta: StrictFloat
    gamma: StrictFloat

    def manhattan(self) -> float:
        """Return the signed sum of the angles.

        Unlike the other vectors this does not take absolute values.
        """
        return self.alpha + self.beta + self.gamma

    def _unsupported(self, operation: str) -> NoReturn:
        raise UnsupportedOperationError(operation, type(self).__name__)

    def normalize(self, length: float | None = None) -> NoReturn:
        self._unsupported("normalize")

    def scale(self, factor: float) -> NoReturn:
        self._unsupported("scale")

    def add(self, other: Direction) -> NoReturn:
        self._unsupported("add")

    def subtract(self, other: Direction) -> NoReturn:
        self._unsupported("subtract")

    def floor(self) -> NoReturn:
        self._unsupported("floor")

    def ceil(self) -> NoReturn:
        self._unsupported("ceil")


Direction.INVALID = Direction._sentinel()
Direction.ORIGIN = Direction(alpha=0, beta=0, gamma=0)
