"""Calculate repayment use case."""

import math
from decimal import ROUND_HALF_UP, Context, Decimal
from typing import Any, Optional, Union

from home_loan_calculator.application.dtos.repayment import (
    ErrorKind,
    RepaymentError,
    RepaymentOutcome,
    RepaymentResult,
)
from home_loan_calculator.application.use_cases.user_messages_en import UserMessagesEN
from home_loan_calculator.domain.value_objects.annual_rate import AnnualRate
from home_loan_calculator.domain.value_objects.loan_term_years import LoanTermYears
from home_loan_calculator.domain.value_objects.money import Money
from home_loan_calculator.domain.value_objects.repayment_frequency import RepaymentFrequency

CENTS = Decimal("0.01")
# Enough digits to quantize any finite float to cents
_ROUNDING_CONTEXT = Context(prec=400)


def parse_number(value: Any) -> float:
    """
    Parse a raw field value into a float.

    Args:
        value: Number or text as typed into the form

    Returns:
        Parsed float (may still be non-finite)

    Raises:
        ValueError: If value is empty, not numeric, or of an unsupported type
    """
    if isinstance(value, bool):
        raise ValueError("Booleans are not numbers")
    if isinstance(value, (int, float, Decimal)):
        try:
            return float(value)
        except OverflowError as err:
            raise ValueError(f"Number out of range: {value!r}") from err
    if isinstance(value, str):
        text = value.strip()
        if not text or "_" in text:
            raise ValueError(f"Not a number: {value!r}")
        return float(text)
    raise ValueError(f"Unsupported value type: {type(value).__name__}")


def round_to_cents(value: float) -> float:
    """Round to two decimal places, exact halves away from zero."""
    quantized = Decimal(repr(value)).quantize(
        CENTS, rounding=ROUND_HALF_UP, context=_ROUNDING_CONTEXT
    )
    return float(quantized)


class CalculateRepayment:
    """Use case for calculating periodic loan repayments."""

    def compute(
        self,
        principal: Any,
        annual_rate_percent: Any,
        term_years: Any,
        frequency: Any,
    ) -> RepaymentOutcome:
        """
        Validate raw inputs and calculate the repayment.

        Never raises: every failure is returned as a RepaymentError.

        Args:
            principal: Loan amount (number or text)
            annual_rate_percent: Annual interest rate in percent (number or text)
            term_years: Loan term in years (number or text)
            frequency: 'weekly', 'fortnightly', 'monthly' or a RepaymentFrequency

        Returns:
            RepaymentResult on success, RepaymentError otherwise
        """
        try:
            loan_amount = Money(parse_number(principal))
        except ValueError:
            return self._invalid_number("principal")
        try:
            annual_rate = AnnualRate(parse_number(annual_rate_percent))
        except ValueError:
            return self._invalid_number("annual_rate_percent")
        try:
            term = LoanTermYears(parse_number(term_years))
        except ValueError:
            return self._invalid_number("term_years")
        try:
            repayment_frequency = RepaymentFrequency.parse(frequency)
        except ValueError:
            return RepaymentError(
                kind=ErrorKind.INVALID_INPUT,
                message=UserMessagesEN.INVALID_FREQUENCY,
                field="frequency",
            )

        try:
            return self.calculate(loan_amount, annual_rate, term, repayment_frequency)
        except OverflowError:
            return RepaymentError(
                kind=ErrorKind.NON_FINITE_RESULT,
                message=UserMessagesEN.NON_FINITE_RESULT,
            )

    def calculate(
        self,
        principal: Money,
        annual_rate: AnnualRate,
        term: LoanTermYears,
        frequency: RepaymentFrequency,
    ) -> RepaymentResult:
        """
        Calculate repayment for already validated inputs.

        Args:
            principal: Loan amount
            annual_rate: Annual interest rate
            term: Loan term
            frequency: Repayment frequency

        Returns:
            Repayment result with amount rounded to cents; totals are None
            when they exceed the float range

        Raises:
            OverflowError: If the repayment itself is not finite
        """
        # M = P * [i(1+i)^n] / [(1+i)^n - 1]
        # evaluated as M = P * i / [1 - (1+i)^-n], which cannot overflow for large n
        periodic_rate = annual_rate.periodic_rate(frequency)
        payment_count = term.payment_count(frequency)

        if periodic_rate == 0:
            payment = principal / payment_count
        else:
            # 1 - (1+i)^-n without rounding 1+i first
            denominator = -math.expm1(-payment_count * math.log1p(periodic_rate))
            if denominator == 0:
                # n * i underflows: straight-line limit
                payment = principal / payment_count
            else:
                payment = principal * (periodic_rate / denominator)

        if not math.isfinite(payment):
            raise OverflowError("Repayment amount is not a finite number")

        total_paid: Optional[float] = None
        total_interest: Optional[float] = None
        raw_total = payment * payment_count
        if math.isfinite(raw_total):
            total_paid = round_to_cents(raw_total)
            total_interest = round_to_cents(raw_total - principal.amount)

        return RepaymentResult(
            amount=round_to_cents(payment),
            frequency=frequency,
            payments_per_year=frequency.payments_per_year,
            payment_count=payment_count,
            total_paid=total_paid,
            total_interest=total_interest,
        )

    def compare_frequencies(
        self,
        principal: Any,
        annual_rate_percent: Any,
        term_years: Any,
    ) -> Union[list[RepaymentResult], RepaymentError]:
        """
        Calculate the same loan for every repayment frequency.

        Args:
            principal: Loan amount (number or text)
            annual_rate_percent: Annual interest rate in percent (number or text)
            term_years: Loan term in years (number or text)

        Returns:
            Results ordered weekly, fortnightly, monthly, or the first error
        """
        results = []
        for frequency in RepaymentFrequency:
            outcome = self.compute(principal, annual_rate_percent, term_years, frequency)
            if isinstance(outcome, RepaymentError):
                return outcome
            results.append(outcome)
        return results

    @staticmethod
    def _invalid_number(field: str) -> RepaymentError:
        return RepaymentError(
            kind=ErrorKind.INVALID_INPUT,
            message=UserMessagesEN.INVALID_NUMBERS,
            field=field,
        )


_calculator = CalculateRepayment()


def compute(
    principal: Any,
    annual_rate_percent: Any,
    term_years: Any,
    frequency: Any,
) -> RepaymentOutcome:
    """Calculate a repayment with the shared stateless calculator."""
    return _calculator.compute(principal, annual_rate_percent, term_years, frequency)
