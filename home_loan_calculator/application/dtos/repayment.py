"""Repayment DTOs."""

from enum import Enum
from typing import Optional, Union

from pydantic import ConfigDict

from home_loan_calculator.application.dtos.base import DTO
from home_loan_calculator.domain.value_objects.repayment_frequency import RepaymentFrequency


class ErrorKind(str, Enum):
    """Reason a repayment could not be calculated."""

    INVALID_INPUT = "invalid_input"
    NON_FINITE_RESULT = "non_finite_result"


class RepaymentResult(DTO):
    """Calculated repayment DTO."""

    amount: float
    frequency: RepaymentFrequency
    payments_per_year: int
    payment_count: float
    total_paid: Optional[float] = None  # None when beyond float range
    total_interest: Optional[float] = None

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "amount": 1520.06,
                "frequency": "monthly",
                "payments_per_year": 12,
                "payment_count": 360.0,
                "total_paid": 547221.6,
                "total_interest": 247221.6,
            }
        },
    )

    @property
    def formatted_amount(self) -> str:
        """Get amount with exactly two decimal places (e.g., '833.30')."""
        return f"{self.amount:.2f}"

    @property
    def frequency_label(self) -> str:
        """Get frequency display label (e.g., 'Monthly')."""
        return self.frequency.label


class RepaymentError(DTO):
    """Repayment calculation failure DTO."""

    kind: ErrorKind
    message: str
    field: Optional[str] = None

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "kind": "invalid_input",
                "message": "Please enter valid positive numbers for all fields.",
                "field": "principal",
            }
        },
    )


RepaymentOutcome = Union[RepaymentResult, RepaymentError]
