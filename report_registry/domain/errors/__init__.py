"""Domain errors for the report registry.

Provides specific exception classes for different failure scenarios.
All exceptions inherit from RegistryError; rejected operations raise
RegistryOperationError subclasses carrying a RegistryErrorCode.
"""

from report_registry.domain.errors.authority import (
    AuthorityAlreadySetError,
    AuthorityNotVerifiedError,
    NotAuthorizedError,
)
from report_registry.domain.errors.ledger import TransferFailedError
from report_registry.domain.errors.registry import (
    RegistryErrorCode,
    RegistryOperationError,
)
from report_registry.domain.errors.report import (
    CapacityInvalidError,
    InvalidDescriptionError,
    InvalidHashError,
    InvalidStakeError,
    InvalidStatusError,
    InvalidTitleError,
    MaxReportsExceededError,
    ReportAlreadyExistsError,
    ReportNotFoundError,
)

__all__: list[str] = [
    "AuthorityAlreadySetError",
    "AuthorityNotVerifiedError",
    "CapacityInvalidError",
    "InvalidDescriptionError",
    "InvalidHashError",
    "InvalidStakeError",
    "InvalidStatusError",
    "InvalidTitleError",
    "MaxReportsExceededError",
    "NotAuthorizedError",
    "RegistryErrorCode",
    "RegistryOperationError",
    "ReportAlreadyExistsError",
    "ReportNotFoundError",
    "TransferFailedError",
]
