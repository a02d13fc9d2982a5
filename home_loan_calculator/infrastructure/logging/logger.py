"""Structured logger for observability."""

import logging
from typing import Any, Optional

from home_loan_calculator.infrastructure.config.settings import settings

_logger = logging.getLogger("home_loan_calculator")
_logger.setLevel(settings.log_level.upper())

# Create console handler if not exists
if not _logger.handlers:
    handler = logging.StreamHandler()
    formatter = logging.Formatter(
        "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    handler.setFormatter(formatter)
    _logger.addHandler(handler)


def log_event(
    component: str,
    level: int = logging.INFO,
    **kwargs: Any,
) -> None:
    """
    Log structured event.

    Args:
        component: Component name (e.g., 'form', 'calculator')
        level: Log level (default: INFO)
        **kwargs: Additional structured fields to log
    """
    fields = {"component": component}
    fields.update(kwargs)

    # Format as key=value pairs for readability
    log_parts = [f"{k}={v!r}" for k, v in fields.items()]
    _logger.log(level, " | ".join(log_parts))


def log_repayment_calculation(
    frequency: str,
    outcome: str,
    amount: Optional[float] = None,
    **kwargs: Any,
) -> None:
    """
    Log repayment calculation event.

    Args:
        frequency: Selected repayment frequency
        outcome: 'ok' or the error kind
        amount: Calculated repayment, if any
        **kwargs: Additional fields
    """
    fields: dict[str, Any] = {"frequency": frequency, "outcome": outcome}
    if amount is not None:
        fields["amount"] = amount
    fields.update(kwargs)

    level = logging.INFO if outcome == "ok" else logging.WARNING
    log_event(component="calculator", level=level, **fields)


def log_form_reset(**kwargs: Any) -> None:
    """
    Log form reset event.

    Args:
        **kwargs: Additional fields
    """
    log_event(component="form", action="reset", **kwargs)


logger = _logger
