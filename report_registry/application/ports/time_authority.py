"""Time Authority Protocol - interface for registry timestamps.

This port defines the contract for obtaining timestamps in the registry.
The registry engine stamps every created or edited report with the value
returned by now(); it never calls datetime.now() directly.

Benefits:
1. **Consistency**: All timestamps come from a single authority
2. **Testability**: Tests inject FakeTimeAuthority for deterministic behavior
3. **Ordering**: Implementations guarantee now() never goes backwards
"""

from abc import ABC, abstractmethod
from datetime import datetime


class TimeAuthorityProtocol(ABC):
    """Abstract interface for time authority.

    Example usage:
        class MyService:
            def __init__(self, time_authority: TimeAuthorityProtocol) -> None:
                self._time = time_authority

            def process(self) -> None:
                now = self._time.now()  # NOT datetime.now()
                ...

    For production:
        Use TimeAuthorityService from report_registry/application/services/

    For testing:
        Use FakeTimeAuthority from tests/helpers/fake_time_authority.py
    """

    @abstractmethod
    def now(self) -> datetime:
        """Return the current time.

        Returns:
            Timezone-aware datetime (UTC). Successive calls never return
            an earlier value than a previous call.
        """
        ...
