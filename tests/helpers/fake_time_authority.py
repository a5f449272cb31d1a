"""FakeTimeAuthority - Controllable time authority for deterministic tests.

Usage Patterns:
--------------

1. Frozen Time Pattern:
    >>> fake_time = FakeTimeAuthority(frozen_at=datetime(2026, 1, 15, 10, 0, 0, tzinfo=timezone.utc))
    >>> service = ReportRegistryService(..., time_authority=fake_time)
    >>> # Every report stamped with 2026-01-15T10:00Z until time is advanced

2. Time Advancement Pattern:
    >>> fake_time.advance(seconds=3600)  # 1 hour later
    >>> assert fake_time.now() == datetime(2026, 1, 15, 11, 0, 0, tzinfo=timezone.utc)

3. Pytest Fixture Pattern:
    def test_edit_refreshes_timestamp(registry, fake_time_authority):
        fake_time_authority.advance(seconds=60)
        updated = registry.update_content(0, "NewTitle", "NewDescription")
        assert updated.timestamp == fake_time_authority.now()
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from report_registry.application.ports.time_authority import TimeAuthorityProtocol

DEFAULT_FROZEN_AT = datetime(2026, 1, 1, 0, 0, 0, tzinfo=timezone.utc)


class FakeTimeAuthority(TimeAuthorityProtocol):
    """Controllable time authority for deterministic tests.

    Time never changes unless advanced. Advancing by a negative amount is
    refused so the clock stays non-decreasing like the real one.
    """

    def __init__(self, frozen_at: datetime | None = None) -> None:
        """Initialize the fake time authority.

        Args:
            frozen_at: Optional datetime to freeze time at. Defaults to
                2026-01-01T00:00:00 UTC. Naive datetimes are taken as UTC.
        """
        if frozen_at is None:
            frozen_at = DEFAULT_FROZEN_AT
        if frozen_at.tzinfo is None:
            frozen_at = frozen_at.replace(tzinfo=timezone.utc)
        self._current_time: datetime = frozen_at
        self.calls: int = 0

    def now(self) -> datetime:
        """Return the controlled current time."""
        self.calls += 1
        return self._current_time

    def advance(
        self,
        seconds: float | int | None = None,
        delta: timedelta | None = None,
    ) -> None:
        """Advance time by the specified amount.

        Args:
            seconds: Number of seconds to advance.
            delta: A timedelta to advance by. Takes precedence over seconds.

        Raises:
            ValueError: If neither argument is given or the amount is negative.
        """
        if delta is not None:
            advance_seconds = delta.total_seconds()
        elif seconds is not None:
            advance_seconds = float(seconds)
        else:
            raise ValueError("Must provide either 'seconds' or 'delta' argument")

        if advance_seconds < 0:
            raise ValueError(
                f"Cannot advance time backwards. Got {advance_seconds} seconds."
            )
        self._current_time += timedelta(seconds=advance_seconds)

    def reset(self, to: datetime | None = None) -> None:
        """Reset time to a specific point or the default."""
        if to is None:
            to = DEFAULT_FROZEN_AT
        if to.tzinfo is None:
            to = to.replace(tzinfo=timezone.utc)
        self._current_time = to
        self.calls = 0

    @property
    def current_time(self) -> datetime:
        """Current controlled time, without counting as a call."""
        return self._current_time

    def __repr__(self) -> str:
        return f"FakeTimeAuthority(current_time={self._current_time.isoformat()})"
