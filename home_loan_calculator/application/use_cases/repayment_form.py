"""Repayment form use case."""

from typing import Any, Callable, Optional

from home_loan_calculator.application.dtos.repayment import (
    RepaymentError,
    RepaymentOutcome,
    RepaymentResult,
)
from home_loan_calculator.application.use_cases.calculate_repayment import CalculateRepayment
from home_loan_calculator.application.use_cases.user_messages_en import UserMessagesEN
from home_loan_calculator.domain.entities.calculator_form_state import CalculatorFormState


class RepaymentForm:
    """Use case holding the repayment form fields between user actions."""

    def __init__(
        self,
        calculator: Optional[CalculateRepayment] = None,
        default_frequency: str = "monthly",
        currency_symbol: str = "$",
        debug_mode: bool = False,
        calculation_logger: Optional[Callable[..., None]] = None,
        reset_logger: Optional[Callable[..., None]] = None,
    ) -> None:
        """
        Initialize repayment form.

        Args:
            calculator: Repayment calculator (default: new CalculateRepayment)
            default_frequency: Frequency selected on start and after reset
            currency_symbol: Prefix for the displayed amount
            debug_mode: Include raw field values in calculation logs
            calculation_logger: Optional logger function (frequency, outcome, amount, **kwargs)
            reset_logger: Optional logger function (**kwargs)
        """
        self._calculator = calculator or CalculateRepayment()
        self._default_frequency = default_frequency
        self._currency_symbol = currency_symbol
        self._debug_mode = debug_mode
        self._calculation_logger = calculation_logger
        self._reset_logger = reset_logger
        self._state = CalculatorFormState(frequency=default_frequency)

    @property
    def state(self) -> CalculatorFormState:
        """Get current form state."""
        return self._state

    def set_principal(self, value: str) -> None:
        """Store the loan amount field as typed."""
        self._state.principal = value
        self._state.touch()

    def set_annual_rate(self, value: str) -> None:
        """Store the annual interest rate field as typed."""
        self._state.annual_rate = value
        self._state.touch()

    def set_term_years(self, value: str) -> None:
        """Store the loan term field as typed."""
        self._state.term_years = value
        self._state.touch()

    def set_frequency(self, value: str) -> None:
        """Store the selected repayment frequency."""
        self._state.frequency = value
        self._state.touch()

    def calculate(self) -> RepaymentOutcome:
        """
        Calculate the repayment for the current field values.

        The previous result and error are cleared first, then exactly one of
        them is set from the new outcome.

        Returns:
            RepaymentResult or RepaymentError
        """
        self._state.clear_outcome()

        outcome = self._calculator.compute(
            self._state.principal,
            self._state.annual_rate,
            self._state.term_years,
            self._state.frequency,
        )

        if isinstance(outcome, RepaymentError):
            self._state.error = outcome.message
            self._log_calculation(outcome.kind.value, field=outcome.field)
        else:
            self._state.result = outcome
            self._log_calculation("ok", amount=outcome.amount)

        self._state.touch()
        return outcome

    def reset(self) -> None:
        """Clear every field and restore the default frequency."""
        self._state.reset(default_frequency=self._default_frequency)
        if self._reset_logger:
            self._reset_logger(default_frequency=self._default_frequency)

    def display_text(self) -> Optional[str]:
        """
        Get the estimated repayment line for display.

        Returns:
            Text such as '$1520.06 Monthly', or None when there is nothing to show
        """
        result = self._state.result
        if not isinstance(result, RepaymentResult) or self._state.error:
            return None
        return UserMessagesEN.repayment_display(
            self._currency_symbol, result.formatted_amount, result.frequency_label
        )

    def _log_calculation(self, outcome: str, **kwargs: Any) -> None:
        """
        Log calculation outcome if logger is available.

        Args:
            outcome: 'ok' or the error kind
            **kwargs: Additional log fields
        """
        if not self._calculation_logger:
            return
        if self._debug_mode:
            kwargs["inputs"] = {
                "principal": self._state.principal,
                "annual_rate": self._state.annual_rate,
                "term_years": self._state.term_years,
            }
        self._calculation_logger(self._state.frequency, outcome, **kwargs)
