"""Registry operation error base and failure codes.

Every rejected registry operation raises a subclass of
RegistryOperationError. Each subclass carries a stable integer code so
callers can branch on the failure kind without matching on messages.

Code numbering follows the registry contract error constants (100-110);
codes from 111 upward were added for failures the contract folded into
other codes.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Any, ClassVar

from report_registry.domain.exceptions import RegistryError


class RegistryErrorCode(IntEnum):
    """Tagged failure codes for registry operations."""

    NOT_AUTHORIZED = 100
    INVALID_HASH = 101
    INVALID_TITLE = 102
    INVALID_DESCRIPTION = 103
    REPORT_ALREADY_EXISTS = 104
    REPORT_NOT_FOUND = 105
    AUTHORITY_NOT_VERIFIED = 107
    INVALID_STAKE = 108
    MAX_REPORTS_EXCEEDED = 109
    INVALID_STATUS = 110
    AUTHORITY_ALREADY_SET = 111
    CAPACITY_INVALID = 112
    TRANSFER_FAILED = 113


class RegistryOperationError(RegistryError):
    """Base error for rejected registry operations.

    Subclasses set ``code``, ``title`` and ``http_status``. The
    ``slug`` is derived from the title and used in the RFC 7807
    ``type`` URN.

    A rejected operation never leaves partial state behind: the
    engine raises these errors before any ledger transfer or write.
    """

    code: ClassVar[RegistryErrorCode]
    title: ClassVar[str]
    http_status: ClassVar[int] = 400

    @property
    def slug(self) -> str:
        return self.title.lower().replace(" ", "-")

    def problem_extensions(self) -> dict[str, Any]:
        """Return error specific fields for the problem document."""
        return {}

    def to_rfc7807_dict(self) -> dict[str, Any]:
        """Serialize to RFC 7807 problem details format.

        Returns:
            Dictionary conforming to RFC 7807 with a ``code`` extension
            holding the registry failure code.
        """
        result: dict[str, Any] = {
            "type": f"urn:report-registry:{self.slug}",
            "title": self.title,
            "status": self.http_status,
            "detail": str(self),
            "code": int(self.code),
        }
        result.update(self.problem_extensions())
        return result
