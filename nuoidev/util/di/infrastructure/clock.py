"""Clock infrastructure providers."""

from dishka import Scope, provide

from nuoidev.adapter.clock import SystemClock
from nuoidev.domain.service import Clock
from nuoidev.util.di.base import ProviderBase


class ClockProvider(ProviderBase):
    """Clock component base."""

    __mock_component__ = "clock"


class ProdClockProvider(ClockProvider):
    """Production clock provider reading the system time."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_clock(self) -> Clock:
        """Provide system clock."""
        return SystemClock()
