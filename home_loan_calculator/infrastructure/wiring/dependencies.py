"""Dependency injection factory functions."""

from home_loan_calculator.application.use_cases.calculate_repayment import CalculateRepayment
from home_loan_calculator.application.use_cases.repayment_form import RepaymentForm
from home_loan_calculator.domain.value_objects.repayment_frequency import RepaymentFrequency
from home_loan_calculator.infrastructure.config.settings import settings
from home_loan_calculator.infrastructure.logging.logger import (
    log_form_reset,
    log_repayment_calculation,
)


def create_calculate_repayment() -> CalculateRepayment:
    """
    Factory function to create repayment calculator.

    Returns:
        CalculateRepayment instance
    """
    return CalculateRepayment()


def create_repayment_form() -> RepaymentForm:
    """
    Factory function to create repayment form.

    Returns:
        RepaymentForm instance wired with settings and structured logging

    Raises:
        ValueError: If DEFAULT_FREQUENCY is not a recognized frequency
    """
    try:
        default_frequency = RepaymentFrequency.parse(settings.default_frequency)
    except ValueError as err:
        raise ValueError(
            "DEFAULT_FREQUENCY must be one of: weekly, fortnightly, monthly"
        ) from err

    return RepaymentForm(
        calculator=create_calculate_repayment(),
        default_frequency=default_frequency.value,
        currency_symbol=settings.currency_symbol,
        debug_mode=settings.debug_mode,
        calculation_logger=log_repayment_calculation,
        reset_logger=log_form_reset,
    )
