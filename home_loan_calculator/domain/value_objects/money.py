"""Loan principal value object."""

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Money:
    """Money value object for a loan principal."""

    amount: float

    def __post_init__(self) -> None:
        """Validate money amount."""
        if not math.isfinite(self.amount):
            raise ValueError("Money amount must be a finite number")
        if self.amount <= 0:
            raise ValueError("Money amount must be positive")

    def __truediv__(self, divisor: float) -> float:
        """Divide money by a scalar."""
        if divisor == 0:
            raise ValueError("Cannot divide by zero")
        return self.amount / divisor

    def __mul__(self, multiplier: float) -> float:
        """Multiply money by a scalar."""
        return self.amount * multiplier
