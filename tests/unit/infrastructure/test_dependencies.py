"""Unit tests for dependency wiring."""

from unittest.mock import patch

import pytest

from home_loan_calculator.application.use_cases.calculate_repayment import CalculateRepayment
from home_loan_calculator.application.use_cases.repayment_form import RepaymentForm
from home_loan_calculator.infrastructure.config.settings import settings
from home_loan_calculator.infrastructure.wiring.dependencies import (
    create_calculate_repayment,
    create_repayment_form,
)


def test_create_calculate_repayment():
    """Test calculator factory."""
    assert isinstance(create_calculate_repayment(), CalculateRepayment)


def test_create_repayment_form_uses_settings():
    """Test form factory applies configured defaults."""
    with patch.object(settings, "default_frequency", "weekly"), patch.object(
        settings, "currency_symbol", "£"
    ):
        form = create_repayment_form()

    assert isinstance(form, RepaymentForm)
    assert form.state.frequency == "weekly"

    form.set_principal("52000")
    form.set_annual_rate("0")
    form.set_term_years("1")
    form.calculate()
    assert form.display_text() == "£1000.00 Weekly"


def test_create_repayment_form_rejects_unknown_default_frequency():
    """Test misconfigured default frequency fails fast."""
    with patch.object(settings, "default_frequency", "daily"):
        with pytest.raises(ValueError, match="DEFAULT_FREQUENCY"):
            create_repayment_form()
