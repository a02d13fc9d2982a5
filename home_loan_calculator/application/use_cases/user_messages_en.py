"""English user-facing messages for the repayment calculator."""


class UserMessagesEN:
    """Centralized English user-facing messages."""

    INVALID_NUMBERS = "Please enter valid positive numbers for all fields."
    INVALID_FREQUENCY = "Invalid repayment frequency selected."
    NON_FINITE_RESULT = (
        "The repayment is too large to calculate. Please check the loan amount, "
        "interest rate and term."
    )

    @staticmethod
    def repayment_display(currency_symbol: str, formatted_amount: str, frequency_label: str) -> str:
        """Generate the estimated repayment line (e.g., '$1520.06 Monthly')."""
        return f"{currency_symbol}{formatted_amount} {frequency_label}"
