"""Report registry configuration.

This module defines the engine's starting configuration and its
authorization policy, with environment variable overrides for
deployment tuning.

The submission fee and report capacity given here are only initial
values: once an authority is configured they are changed through the
engine's set_submission_fee() and set_max_reports() operations.

Environment Variables:
- REPORT_REGISTRY_SUBMISSION_FEE: Initial fee per submission (default: 500)
- REPORT_REGISTRY_MAX_REPORTS: Initial report capacity (default: 10000)
- REPORT_REGISTRY_BURN_IDENTITY: Identity that may never become the
  authority (default: SP000000000000000000002Q6VF78)
- REPORT_REGISTRY_ENFORCE_AUTHORITY_CALLER: Require the caller of fee,
  capacity and status changes to be the authority itself (default: false)
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from report_registry.domain.models.registry_state import (
    DEFAULT_MAX_REPORTS,
    DEFAULT_SUBMISSION_FEE,
)
from report_registry.domain.models.report import (
    DEFAULT_MAX_DESCRIPTION_LENGTH,
    DEFAULT_MAX_TITLE_LENGTH,
)

DEFAULT_BURN_IDENTITY = "SP000000000000000000002Q6VF78"

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


def _get_int_env(key: str, default: int) -> int:
    """Get integer environment variable with default.

    Args:
        key: Environment variable name.
        default: Default value if not set or invalid.

    Returns:
        Parsed integer value or default.
    """
    value = os.environ.get(key)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _get_bool_env(key: str, default: bool) -> bool:
    """Get boolean environment variable with default.

    Accepts 1/0, true/false, yes/no and on/off, case-insensitive.
    Anything else falls back to the default.
    """
    value = os.environ.get(key)
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    return default


@dataclass(frozen=True)
class RegistryConfig:
    """Configuration for the report registry engine.

    Attributes:
        initial_submission_fee: Fee charged per submission until the
            authority changes it. Default: 500.
        initial_max_reports: Report capacity until the authority changes
            it. Default: 10,000.
        burn_identity: Reserved identity that set_authority() refuses.
        enforce_authority_caller: When True, set_submission_fee(),
            set_max_reports() and update_status() also require the caller
            to be the configured authority. When False (default) they only
            require that some authority is configured, which treats the
            authority as a separate verifying party.
        max_title_length: Maximum title length in characters. Default: 100.
        max_description_length: Maximum description length in characters.
            Default: 500.
    """

    initial_submission_fee: int = DEFAULT_SUBMISSION_FEE
    initial_max_reports: int = DEFAULT_MAX_REPORTS
    burn_identity: str = DEFAULT_BURN_IDENTITY
    enforce_authority_caller: bool = False
    max_title_length: int = DEFAULT_MAX_TITLE_LENGTH
    max_description_length: int = DEFAULT_MAX_DESCRIPTION_LENGTH

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if self.initial_submission_fee < 0:
            raise ValueError(
                "initial_submission_fee must be non-negative, "
                f"got {self.initial_submission_fee}"
            )
        if self.initial_max_reports < 1:
            raise ValueError(
                f"initial_max_reports must be positive, got {self.initial_max_reports}"
            )
        if not self.burn_identity:
            raise ValueError("burn_identity must not be empty")
        if self.max_title_length < 1:
            raise ValueError(
                f"max_title_length must be positive, got {self.max_title_length}"
            )
        if self.max_description_length < 1:
            raise ValueError(
                "max_description_length must be positive, "
                f"got {self.max_description_length}"
            )

    @classmethod
    def from_environment(cls) -> "RegistryConfig":
        """Create config from environment variables with defaults.

        Environment Variables:
            REPORT_REGISTRY_SUBMISSION_FEE: Initial fee (default: 500)
            REPORT_REGISTRY_MAX_REPORTS: Initial capacity (default: 10000)
            REPORT_REGISTRY_BURN_IDENTITY: Reserved identity
            REPORT_REGISTRY_ENFORCE_AUTHORITY_CALLER: Caller policy (default: false)

        Returns:
            RegistryConfig with values from environment or defaults.
        """
        return cls(
            initial_submission_fee=_get_int_env(
                "REPORT_REGISTRY_SUBMISSION_FEE", DEFAULT_SUBMISSION_FEE
            ),
            initial_max_reports=_get_int_env(
                "REPORT_REGISTRY_MAX_REPORTS", DEFAULT_MAX_REPORTS
            ),
            burn_identity=os.environ.get(
                "REPORT_REGISTRY_BURN_IDENTITY", DEFAULT_BURN_IDENTITY
            ),
            enforce_authority_caller=_get_bool_env(
                "REPORT_REGISTRY_ENFORCE_AUTHORITY_CALLER", False
            ),
        )


# Default production config
DEFAULT_REGISTRY_CONFIG = RegistryConfig()

# Testing config with a small capacity for unit tests
TEST_REGISTRY_CONFIG = RegistryConfig(
    initial_submission_fee=500,
    initial_max_reports=3,
)

# Strict config where only the authority may change fees, capacity and status
STRICT_REGISTRY_CONFIG = RegistryConfig(enforce_authority_caller=True)
