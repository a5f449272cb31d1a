"""Caller identity stub for development and testing.

This module provides an in-memory implementation of CallerIdentityProtocol
whose current caller is set explicitly by the test or the host process.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

from report_registry.application.ports.caller_identity import CallerIdentityProtocol

DEFAULT_CALLER = "ST1TEST"


class CallerIdentityStub(CallerIdentityProtocol):
    """Settable caller identity.

    Usage:
        identity = CallerIdentityStub("ST1TEST")
        identity.set_caller("ST3FAKE")

        with identity.as_caller("ST2TEST"):
            service.update_status(0, "verified")
        # caller restored to ST3FAKE
    """

    def __init__(self, caller: str = DEFAULT_CALLER) -> None:
        """Initialize with a starting caller.

        Args:
            caller: Identity returned until set_caller() is called.
        """
        self._caller = caller

    def current_caller(self) -> str:
        return self._caller

    def set_caller(self, caller: str) -> None:
        """Replace the current caller."""
        self._caller = caller

    @contextmanager
    def as_caller(self, caller: str) -> Iterator[None]:
        """Temporarily act as another caller, restoring the previous one."""
        previous = self._caller
        self._caller = caller
        try:
            yield
        finally:
            self._caller = previous

    def reset(self) -> None:
        """Restore the default caller for test isolation."""
        self._caller = DEFAULT_CALLER
