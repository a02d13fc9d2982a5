"""Annual interest rate value object."""

import math
from dataclasses import dataclass

from home_loan_calculator.domain.value_objects.repayment_frequency import RepaymentFrequency


@dataclass(frozen=True)
class AnnualRate:
    """Annual interest rate value object."""

    percent: float  # As percentage (e.g., 4.5 for 4.5%)

    def __post_init__(self) -> None:
        """Validate annual rate."""
        if not math.isfinite(self.percent):
            raise ValueError("Annual rate must be a finite number")
        if self.percent < 0:
            raise ValueError("Annual rate cannot be negative")

    @property
    def as_decimal(self) -> float:
        """Get rate as decimal (e.g., 0.045 for 4.5%)."""
        return self.percent / 100

    def periodic_rate(self, frequency: RepaymentFrequency) -> float:
        """Get interest rate applied each repayment period."""
        return self.as_decimal / frequency.payments_per_year
