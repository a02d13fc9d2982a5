"""Calculator form state entity."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from home_loan_calculator.application.dtos.repayment import RepaymentResult


@dataclass
class CalculatorFormState:
    """Current field values, result and error of the repayment form."""

    principal: str = ""
    annual_rate: str = ""
    term_years: str = ""
    frequency: str = "monthly"
    result: Optional["RepaymentResult"] = None
    error: str = ""
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def touch(self) -> None:
        """Update the updated_at timestamp."""
        self.updated_at = datetime.now(timezone.utc)

    def clear_outcome(self) -> None:
        """Forget the previous result and error."""
        self.result = None
        self.error = ""

    def reset(self, default_frequency: str = "monthly") -> None:
        """Restore every field to its default value."""
        self.principal = ""
        self.annual_rate = ""
        self.term_years = ""
        self.frequency = default_frequency
        self.clear_outcome()
        self.touch()
