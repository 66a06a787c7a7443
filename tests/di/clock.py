"""Mock clock provider for testing."""

from dishka import Scope, provide

from nuoidev.adapter.clock import FrozenClock
from nuoidev.domain.service import Clock
from nuoidev.util.di.infrastructure.clock import ClockProvider


class MockClockProvider(ClockProvider):
    """Mock clock provider using a frozen clock.

    The same FrozenClock instance is exposed as ``Clock`` for services and
    as ``FrozenClock`` so tests can move time forward.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_frozen_clock(self) -> FrozenClock:
        """Provide frozen clock."""
        return FrozenClock()

    @provide(scope=Scope.APP)
    def get_clock(self, frozen_clock: FrozenClock) -> Clock:
        """Expose the frozen clock as the domain clock."""
        return frozen_clock
