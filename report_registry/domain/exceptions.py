"""Base exception classes for the report registry domain layer."""


class RegistryError(Exception):
    """Base exception for all domain errors.

    All domain-specific exceptions MUST inherit from this class.
    This enables consistent error handling across the application.

    Subclasses found in report_registry.domain.errors:
    - AuthorityNotVerifiedError
    - ReportAlreadyExistsError
    - ReportNotFoundError
    - TransferFailedError
    """

    def __init__(self, message: str = "") -> None:
        """Initialize the exception with an optional message.

        Args:
            message: Human-readable error description.
        """
        super().__init__(message)
