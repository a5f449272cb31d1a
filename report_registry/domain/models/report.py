"""Report domain models.

A report is a claim identified by a content hash. Reports are created
by submission, edited by their submitter, classified by the registry
authority, and never deleted.

Status Lifecycle:
    PENDING -> VERIFIED, PENDING -> REJECTED, and every other pairing
    including self-transitions. There is no terminal status; the only
    restriction is membership in ReportStatus.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime
from enum import Enum

from report_registry.domain.errors.report import (
    InvalidDescriptionError,
    InvalidStatusError,
    InvalidTitleError,
)

DEFAULT_MAX_TITLE_LENGTH: int = 100
DEFAULT_MAX_DESCRIPTION_LENGTH: int = 500


class ReportStatus(Enum):
    """Classification assigned to a report by the authority.

    States:
        PENDING: Initial state after submission
        VERIFIED: Authority confirmed the claim
        REJECTED: Authority rejected the claim
    """

    PENDING = "pending"
    VERIFIED = "verified"
    REJECTED = "rejected"

    @classmethod
    def parse(cls, value: ReportStatus | str) -> ReportStatus:
        """Resolve a status from an enum member or its string value.

        Args:
            value: A ReportStatus or one of "pending", "verified", "rejected".

        Returns:
            The matching ReportStatus.

        Raises:
            InvalidStatusError: If value is not a known status.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise InvalidStatusError(value) from None


@dataclass(frozen=True, eq=True)
class Report:
    """A registered report.

    Frozen; edits produce a new instance through with_content() or
    with_status(). submitter, report_hash and stake_amount never change
    after creation.

    Attributes:
        id: Sequential identifier, starting at 0.
        report_hash: Content fingerprint, unique across the registry.
        title: 1..100 characters.
        description: 1..500 characters.
        timestamp: Creation time, refreshed on every edit.
        submitter: Identity that submitted the report.
        status: Current classification.
        stake_amount: Stake declared at submission.
    """

    id: int
    report_hash: bytes
    title: str
    description: str
    timestamp: datetime
    submitter: str
    status: ReportStatus = ReportStatus.PENDING
    stake_amount: int = 0

    def with_content(
        self, title: str, description: str, timestamp: datetime
    ) -> Report:
        """Return a copy with new title and description."""
        return replace(self, title=title, description=description, timestamp=timestamp)

    def with_status(self, status: ReportStatus, timestamp: datetime) -> Report:
        """Return a copy with a new status."""
        return replace(self, status=status, timestamp=timestamp)

    def to_dict(self) -> dict:
        """Serialize to dictionary for events/logging.

        Returns:
            Dictionary with the hash hex-encoded and the timestamp in
            ISO 8601 format.
        """
        return {
            "id": self.id,
            "report_hash": self.report_hash.hex(),
            "title": self.title,
            "description": self.description,
            "timestamp": self.timestamp.isoformat(),
            "submitter": self.submitter,
            "status": self.status.value,
            "stake_amount": self.stake_amount,
        }


@dataclass(frozen=True, eq=True)
class ReportUpdate:
    """Audit record of the latest content edit of a report.

    At most one exists per report; each edit overwrites it.

    Attributes:
        report_id: The edited report.
        updated_title: Title written by the edit.
        updated_description: Description written by the edit.
        update_timestamp: When the edit happened.
        updater: Identity that made the edit.
    """

    report_id: int
    updated_title: str
    updated_description: str
    update_timestamp: datetime
    updater: str

    def to_dict(self) -> dict:
        return {
            "report_id": self.report_id,
            "updated_title": self.updated_title,
            "updated_description": self.updated_description,
            "update_timestamp": self.update_timestamp.isoformat(),
            "updater": self.updater,
        }


def check_title(title: str, max_length: int = DEFAULT_MAX_TITLE_LENGTH) -> None:
    """Validate a report title.

    Raises:
        InvalidTitleError: If title is empty or longer than max_length.
    """
    if not title or len(title) > max_length:
        raise InvalidTitleError(length=len(title or ""), max_length=max_length)


def check_description(
    description: str, max_length: int = DEFAULT_MAX_DESCRIPTION_LENGTH
) -> None:
    """Validate a report description.

    Raises:
        InvalidDescriptionError: If description is empty or longer than max_length.
    """
    if not description or len(description) > max_length:
        raise InvalidDescriptionError(
            length=len(description or ""), max_length=max_length
        )
