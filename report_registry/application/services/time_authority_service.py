"""Time Authority Service - system clock with monotonic guarantee.

Production implementation of TimeAuthorityProtocol. Reads the system
clock and never returns a value earlier than one already handed out:
if the wall clock steps backwards (NTP correction, VM migration) the
previous value is returned again and the regression is logged for
investigation.

Report timestamps only need to be non-decreasing. Report ids, not
timestamps, order the registry.
"""

from __future__ import annotations

import threading
from collections.abc import Callable
from datetime import datetime, timezone

from structlog import get_logger

from report_registry.application.ports.time_authority import TimeAuthorityProtocol

logger = get_logger()


def _system_utc_now() -> datetime:
    return datetime.now(timezone.utc)


class TimeAuthorityService(TimeAuthorityProtocol):
    """System clock time authority.

    Attributes:
        _clock: Source of raw wall-clock readings.
        _last: Most recent value returned by now().

    Example:
        >>> service = TimeAuthorityService()
        >>> first = service.now()
        >>> assert service.now() >= first
    """

    def __init__(self, clock: Callable[[], datetime] = _system_utc_now) -> None:
        """Initialize the time authority service.

        Args:
            clock: Callable returning the current wall-clock time. Naive
                datetimes are treated as UTC. Defaults to the system clock.
        """
        self._clock = clock
        self._last: datetime | None = None
        self._lock = threading.Lock()

    def now(self) -> datetime:
        """Return the current UTC time, clamped to be non-decreasing."""
        with self._lock:
            reading = self._clock()
            if reading.tzinfo is None:
                reading = reading.replace(tzinfo=timezone.utc)

            if self._last is not None and reading < self._last:
                logger.warning(
                    "clock_regression_detected",
                    reading=reading.isoformat(),
                    last_issued=self._last.isoformat(),
                    regression_seconds=(self._last - reading).total_seconds(),
                )
                return self._last
            self._last = reading
            return reading
