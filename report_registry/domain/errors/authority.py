"""Authority and caller authorization errors.

The registry has a single authority identity. It is configured once and
gates fee, capacity and status changes. Content edits are gated on the
original submitter instead.
"""

from __future__ import annotations

from typing import Any

from report_registry.domain.errors.registry import (
    RegistryErrorCode,
    RegistryOperationError,
)


class NotAuthorizedError(RegistryOperationError):
    """Raised when a caller or identity is not permitted for an operation.

    Used for three cases:
    - configuring the burn identity as the authority
    - editing a report's content as anyone but its submitter
    - privileged calls by a non-authority caller, when caller
      enforcement is enabled

    HTTP Status: 403 Forbidden

    Attributes:
        identity: The identity that was refused.
        reason: Short description of what was refused.
    """

    code = RegistryErrorCode.NOT_AUTHORIZED
    title = "Not Authorized"
    http_status = 403

    def __init__(self, identity: str, reason: str) -> None:
        """Initialize the error.

        Args:
            identity: The identity that was refused.
            reason: Short description of what was refused.
        """
        self.identity = identity
        self.reason = reason
        super().__init__(f"Identity {identity} not authorized: {reason}")

    def problem_extensions(self) -> dict[str, Any]:
        return {"identity": self.identity}


class AuthorityAlreadySetError(RegistryOperationError):
    """Raised when configuring an authority after one is already set.

    The authority is a one-time bootstrap value. There is no
    reassignment path, which prevents takeover after initialization.

    HTTP Status: 409 Conflict

    Attributes:
        current_authority: The authority already configured.
    """

    code = RegistryErrorCode.AUTHORITY_ALREADY_SET
    title = "Authority Already Set"
    http_status = 409

    def __init__(self, current_authority: str) -> None:
        """Initialize the error.

        Args:
            current_authority: The authority already configured.
        """
        self.current_authority = current_authority
        super().__init__(f"Authority already set to {current_authority}")

    def problem_extensions(self) -> dict[str, Any]:
        return {"current_authority": self.current_authority}


class AuthorityNotVerifiedError(RegistryOperationError):
    """Raised when an operation needs an authority and none is configured.

    HTTP Status: 409 Conflict
    """

    code = RegistryErrorCode.AUTHORITY_NOT_VERIFIED
    title = "Authority Not Verified"
    http_status = 409

    def __init__(self, operation: str) -> None:
        """Initialize the error.

        Args:
            operation: Name of the operation that was refused.
        """
        self.operation = operation
        super().__init__(f"No authority configured; cannot {operation}")

    def problem_extensions(self) -> dict[str, Any]:
        return {"operation": self.operation}
