"""Caller identity port.

Authentication of callers happens outside the registry. The engine asks
this port who is invoking the current operation and trusts the answer.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class CallerIdentityProtocol(Protocol):
    """Protocol for caller identity adapters.

    The returned identity must stay the same for the duration of one
    registry operation. The engine reads it once per operation.
    """

    def current_caller(self) -> str:
        """Return the identity invoking the current operation."""
        ...
