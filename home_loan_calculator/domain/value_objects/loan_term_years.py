"""Loan term in years value object."""

import math
from dataclasses import dataclass

from home_loan_calculator.domain.value_objects.repayment_frequency import RepaymentFrequency


@dataclass(frozen=True)
class LoanTermYears:
    """Loan term in years value object."""

    years: float

    def __post_init__(self) -> None:
        """Validate loan term."""
        if not math.isfinite(self.years):
            raise ValueError("Loan term must be a finite number")
        if self.years <= 0:
            raise ValueError("Loan term must be positive")

    def payment_count(self, frequency: RepaymentFrequency) -> float:
        """
        Get total number of repayments over the term.

        Fractional terms give a fractional count; it is not rounded.
        """
        return self.years * frequency.payments_per_year
