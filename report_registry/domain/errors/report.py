"""Report validation and lookup errors.

Raised by the registry engine when a submission, content edit or
status change is rejected. All of these are raised before any ledger
transfer or state write, so the caller may correct the input and retry.
"""

from __future__ import annotations

from typing import Any

from report_registry.domain.errors.registry import (
    RegistryErrorCode,
    RegistryOperationError,
)


class MaxReportsExceededError(RegistryOperationError):
    """Raised when the registry is at or above its report capacity.

    HTTP Status: 409 Conflict

    Attributes:
        report_count: Reports created so far.
        max_reports: The configured capacity.
    """

    code = RegistryErrorCode.MAX_REPORTS_EXCEEDED
    title = "Max Reports Exceeded"
    http_status = 409

    def __init__(self, report_count: int, max_reports: int) -> None:
        self.report_count = report_count
        self.max_reports = max_reports
        super().__init__(
            f"Registry holds {report_count} reports; capacity is {max_reports}"
        )

    def problem_extensions(self) -> dict[str, Any]:
        return {"report_count": self.report_count, "max_reports": self.max_reports}


class InvalidHashError(RegistryOperationError):
    """Raised when a report hash is empty."""

    code = RegistryErrorCode.INVALID_HASH
    title = "Invalid Hash"

    def __init__(self, message: str = "Report hash must not be empty") -> None:
        super().__init__(message)


class InvalidTitleError(RegistryOperationError):
    """Raised when a title is empty or longer than allowed.

    Attributes:
        length: Length of the rejected title.
        max_length: Maximum permitted length.
    """

    code = RegistryErrorCode.INVALID_TITLE
    title = "Invalid Title"

    def __init__(self, length: int, max_length: int) -> None:
        self.length = length
        self.max_length = max_length
        super().__init__(
            f"Title must be 1..{max_length} characters, got {length}"
        )

    def problem_extensions(self) -> dict[str, Any]:
        return {"length": self.length, "max_length": self.max_length}


class InvalidDescriptionError(RegistryOperationError):
    """Raised when a description is empty or longer than allowed.

    Attributes:
        length: Length of the rejected description.
        max_length: Maximum permitted length.
    """

    code = RegistryErrorCode.INVALID_DESCRIPTION
    title = "Invalid Description"

    def __init__(self, length: int, max_length: int) -> None:
        self.length = length
        self.max_length = max_length
        super().__init__(
            f"Description must be 1..{max_length} characters, got {length}"
        )

    def problem_extensions(self) -> dict[str, Any]:
        return {"length": self.length, "max_length": self.max_length}


class InvalidStakeError(RegistryOperationError):
    """Raised when a stake or fee amount is negative.

    Attributes:
        amount: The rejected amount.
    """

    code = RegistryErrorCode.INVALID_STAKE
    title = "Invalid Stake"

    def __init__(self, amount: int, field_name: str = "stake_amount") -> None:
        self.amount = amount
        self.field_name = field_name
        super().__init__(f"{field_name} must be non-negative, got {amount}")

    def problem_extensions(self) -> dict[str, Any]:
        return {"field": self.field_name, "amount": self.amount}


class CapacityInvalidError(RegistryOperationError):
    """Raised when a report capacity is not a positive integer.

    Attributes:
        max_reports: The rejected capacity.
    """

    code = RegistryErrorCode.CAPACITY_INVALID
    title = "Capacity Invalid"

    def __init__(self, max_reports: int) -> None:
        self.max_reports = max_reports
        super().__init__(f"max_reports must be positive, got {max_reports}")

    def problem_extensions(self) -> dict[str, Any]:
        return {"max_reports": self.max_reports}


class InvalidStatusError(RegistryOperationError):
    """Raised when a status value is not a known report status.

    Attributes:
        status: The rejected status value.
    """

    code = RegistryErrorCode.INVALID_STATUS
    title = "Invalid Status"

    def __init__(self, status: object) -> None:
        self.status = status
        super().__init__(f"Unknown report status: {status!r}")

    def problem_extensions(self) -> dict[str, Any]:
        return {"status": str(self.status)}


class ReportAlreadyExistsError(RegistryOperationError):
    """Raised when a report hash is already registered.

    HTTP Status: 409 Conflict

    Attributes:
        report_hash: The duplicate hash.
        existing_report_id: Id of the report already holding the hash.
    """

    code = RegistryErrorCode.REPORT_ALREADY_EXISTS
    title = "Report Already Exists"
    http_status = 409

    def __init__(self, report_hash: bytes, existing_report_id: int) -> None:
        self.report_hash = report_hash
        self.existing_report_id = existing_report_id
        super().__init__(
            f"Hash {report_hash.hex()} already registered as report "
            f"{existing_report_id}"
        )

    def problem_extensions(self) -> dict[str, Any]:
        return {
            "report_hash": self.report_hash.hex(),
            "existing_report_id": self.existing_report_id,
        }


class ReportNotFoundError(RegistryOperationError):
    """Raised when a report id does not exist.

    HTTP Status: 404 Not Found

    Attributes:
        report_id: The id that was not found.
    """

    code = RegistryErrorCode.REPORT_NOT_FOUND
    title = "Report Not Found"
    http_status = 404

    def __init__(self, report_id: int) -> None:
        self.report_id = report_id
        super().__init__(f"Report {report_id} not found")

    def problem_extensions(self) -> dict[str, Any]:
        return {"report_id": self.report_id}
