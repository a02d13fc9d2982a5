"""Repayment frequency value object."""

from enum import Enum


class RepaymentFrequency(str, Enum):
    """How often a repayment falls due."""

    WEEKLY = "weekly"
    FORTNIGHTLY = "fortnightly"
    MONTHLY = "monthly"

    @property
    def payments_per_year(self) -> int:
        """Get number of repayments in one year."""
        return _PAYMENTS_PER_YEAR[self]

    @property
    def label(self) -> str:
        """Get display label (e.g., 'Monthly')."""
        return self.value.capitalize()

    @classmethod
    def parse(cls, value: object) -> "RepaymentFrequency":
        """
        Resolve a frequency selector.

        Args:
            value: A RepaymentFrequency member or its exact lowercase value

        Returns:
            Matching RepaymentFrequency

        Raises:
            ValueError: If value is not one of the recognized frequencies
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            for member in cls:
                if member.value == value:
                    return member
        raise ValueError(f"Unknown repayment frequency: {value!r}")


_PAYMENTS_PER_YEAR = {
    RepaymentFrequency.WEEKLY: 52,
    RepaymentFrequency.FORTNIGHTLY: 26,
    RepaymentFrequency.MONTHLY: 12,
}
