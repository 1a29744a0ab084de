from __future__ import annotations

from typing import Callable, Iterator, List, Optional

from .events import Tick


IntervalListener = Callable[[int], None]


class TickRateChannel:
    """Carries the tick interval from the reducer to the timer.

    Publishing the value already held is suppressed, so listeners only
    hear about real cadence changes.
    """

    def __init__(self, interval: Optional[int] = None) -> None:
        self._interval = interval
        self._listeners: List[IntervalListener] = []

    @property
    def interval(self) -> Optional[int]:
        return self._interval

    def subscribe(self, listener: IntervalListener) -> Callable[[], None]:
        self._listeners.append(listener)
        if self._interval is not None:
            listener(self._interval)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def publish(self, interval: int) -> bool:
        if interval <= 0:
            raise ValueError(f"tick interval must be positive, got {interval}")
        if interval == self._interval:
            return False
        self._interval = int(interval)
        for listener in list(self._listeners):
            listener(self._interval)
        return True


class TickClock:
    """Turns elapsed wall time into ``Tick`` events at the channel's cadence.

    A cadence change restarts the period and the tick counter. ``advance``
    yields lazily so a tick that changes the interval takes effect before
    the next one is produced.
    """

    def __init__(self, channel: TickRateChannel) -> None:
        self.channel = channel
        self._pending_ms = 0
        self._count = 0
        self._unsubscribe = channel.subscribe(self._restart)

    def _restart(self, interval: int) -> None:
        self._pending_ms = 0
        self._count = 0

    def advance(self, elapsed_ms: int) -> Iterator[Tick]:
        interval = self.channel.interval
        if interval is None:
            return
        self._pending_ms += elapsed_ms
        while interval is not None and self._pending_ms >= interval:
            self._pending_ms -= interval
            tick = Tick(self._count)
            self._count += 1
            yield tick
            interval = self.channel.interval

    def close(self) -> None:
        self._unsubscribe()
