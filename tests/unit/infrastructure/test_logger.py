"""Unit tests for structured logging helpers."""

import logging

from home_loan_calculator.infrastructure.logging.logger import (
    log_event,
    log_form_reset,
    log_repayment_calculation,
)

LOGGER_NAME = "home_loan_calculator"


def test_log_event_formats_key_value_pairs(caplog):
    """Test structured fields are joined as key=value pairs."""
    caplog.set_level(logging.INFO, logger=LOGGER_NAME)

    log_event("form", action="calculate", principal="300000")

    assert caplog.records[-1].getMessage() == (
        "component='form' | action='calculate' | principal='300000'"
    )


def test_log_repayment_calculation_success(caplog):
    """Test successful calculations log at INFO with the amount."""
    caplog.set_level(logging.INFO, logger=LOGGER_NAME)

    log_repayment_calculation("monthly", "ok", amount=1520.06)

    record = caplog.records[-1]
    assert record.levelno == logging.INFO
    assert "component='calculator'" in record.getMessage()
    assert "amount=1520.06" in record.getMessage()


def test_log_repayment_calculation_failure(caplog):
    """Test failed calculations log at WARNING without an amount."""
    caplog.set_level(logging.INFO, logger=LOGGER_NAME)

    log_repayment_calculation("monthly", "invalid_input", field="principal")

    record = caplog.records[-1]
    assert record.levelno == logging.WARNING
    assert "outcome='invalid_input'" in record.getMessage()
    assert "field='principal'" in record.getMessage()
    assert "amount" not in record.getMessage()


def test_log_form_reset(caplog):
    """Test reset events are logged for the form component."""
    caplog.set_level(logging.INFO, logger=LOGGER_NAME)

    log_form_reset(default_frequency="monthly")

    assert caplog.records[-1].getMessage() == (
        "component='form' | action='reset' | default_frequency='monthly'"
    )
