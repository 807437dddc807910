from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
import os

DEFAULT_DATE_FORMAT = "%m/%d/%Y"

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off"}
_LOG_LEVELS = {"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"}


class ReportConfigError(ValueError):
    """Invalid report configuration value."""


class CustomerPolicy(str, Enum):
    """How an order resolves rows that disagree on the customer name."""

    FIRST_SEEN = "first_seen"
    STRICT = "strict"


@dataclass(frozen=True, slots=True)
class ReportConfig:
    """Parsing options for the Line Item Reconciliation Report."""

    date_format: str = DEFAULT_DATE_FORMAT
    customer_policy: CustomerPolicy = CustomerPolicy.FIRST_SEEN
    validate_header: bool = True
    log_level: str = "INFO"


def _parse_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name, "").strip().lower()
    if not raw:
        return default
    if raw in _TRUTHY:
        return True
    if raw in _FALSY:
        return False
    raise ReportConfigError(f"{name} must be a boolean flag, got {raw!r}")


def load_report_config_from_env() -> ReportConfig:
    """Load report parsing config from ARTSPEOPLE_* environment variables."""
    date_format = (
        os.environ.get("ARTSPEOPLE_DATE_FORMAT", "").strip() or DEFAULT_DATE_FORMAT
    )

    policy_value = (
        os.environ.get("ARTSPEOPLE_CUSTOMER_POLICY", CustomerPolicy.FIRST_SEEN.value)
        .strip()
        .lower()
    )
    try:
        customer_policy = CustomerPolicy(policy_value)
    except ValueError as exc:
        raise ReportConfigError(
            "ARTSPEOPLE_CUSTOMER_POLICY must be one of: first_seen, strict"
        ) from exc

    log_level = os.environ.get("ARTSPEOPLE_LOG_LEVEL", "INFO").strip().upper()
    if log_level not in _LOG_LEVELS:
        raise ReportConfigError(
            f"ARTSPEOPLE_LOG_LEVEL must be one of: {', '.join(sorted(_LOG_LEVELS))}"
        )

    return ReportConfig(
        date_format=date_format,
        customer_policy=customer_policy,
        validate_header=_parse_bool("ARTSPEOPLE_VALIDATE_HEADER", True),
        log_level=log_level,
    )
