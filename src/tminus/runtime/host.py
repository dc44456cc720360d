"""Host: executes effects and feeds messages to the reducer one at a time.

Stands in for the browser. It owns the message queue, the current URL,
the clock and the zone detector. Each message runs to completion
(``update`` plus its effects) before the next one is taken from the queue.
"""

from __future__ import annotations

import logging
import time
from collections import deque
from collections.abc import Callable
from typing import Protocol

from tminus.domain.result import Ok, Result
from tminus.domain.types import Instant, TimeZoneCatalog
from tminus.infrastructure.clock import SystemClock
from tminus.infrastructure.timezones import detect_local_zone
from tminus.runtime.messages import (
    DetectZone,
    Effect,
    Message,
    PushUrl,
    ScheduleTicks,
    Tick,
    UrlChanged,
    ZoneDetected,
    ZoneDetectionFailed,
)
from tminus.runtime.model import Model
from tminus.runtime.update import DEFAULT_TICK_INTERVAL_MS, init, update

logger = logging.getLogger(__name__)


class Clock(Protocol):
    def now_millis(self) -> Instant: ...


ZoneDetector = Callable[[], Result[str]]


class Host:
    """Single-threaded driver for the reducer.

    Parameters:
        catalog: Zone lookup shared with the reducer.
        clock: Source of tick instants (defaults to the system clock).
        detector: One-shot local zone lookup.
        on_url: Called with every URL pushed by the reducer.
        sleep: Pause between ticks, in seconds (injectable for tests).
    """

    def __init__(
        self,
        catalog: TimeZoneCatalog,
        *,
        clock: Clock | None = None,
        detector: ZoneDetector | None = None,
        on_url: Callable[[str], None] | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._catalog = catalog
        self._clock = clock or SystemClock()
        self._detector = detector or (lambda: detect_local_zone(catalog))
        self._on_url = on_url
        self._sleep = sleep
        self._queue: deque[Message] = deque()
        self._model: Model | None = None
        self.url = ""
        self.tick_interval_ms: int | None = None

    @property
    def model(self) -> Model:
        if self._model is None:
            raise RuntimeError("Host.start() has not been called")
        return self._model

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def start(
        self,
        url: str,
        *,
        tick_interval_ms: int = DEFAULT_TICK_INTERVAL_MS,
        detect_zone: bool = True,
    ) -> Model:
        """Initialise the model from *url* and run the startup effects."""
        self.url = url
        self._model, effects = init(
            url,
            self._catalog,
            tick_interval_ms=tick_interval_ms,
            detect_zone=detect_zone,
        )
        self._execute(effects)
        self._drain()
        return self.model

    def send(self, message: Message) -> Model:
        """Deliver *message* and everything it causes; return the settled model."""
        self._queue.append(message)
        self._drain()
        return self.model

    def tick(self) -> Model:
        return self.send(Tick(self._clock.now_millis()))

    def run(
        self,
        *,
        ticks: int | None = None,
        on_frame: Callable[[Model], None] | None = None,
    ) -> Model:
        """Deliver ticks at the scheduled interval.

        Stops after *ticks* ticks, or never when *ticks* is None. Does
        nothing when no tick schedule was requested.
        """
        if self.tick_interval_ms is None:
            return self.model
        delivered = 0
        while ticks is None or delivered < ticks:
            model = self.tick()
            delivered += 1
            if on_frame is not None:
                on_frame(model)
            if ticks is not None and delivered >= ticks:
                break
            self._sleep(self.tick_interval_ms / 1000)
        return self.model

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _drain(self) -> None:
        while self._queue:
            message = self._queue.popleft()
            self._model, effects = update(message, self.model, self._catalog)
            self._execute(effects)

    def _execute(self, effects: list[Effect]) -> None:
        for effect in effects:
            if isinstance(effect, ScheduleTicks):
                self.tick_interval_ms = effect.interval_ms
            elif isinstance(effect, DetectZone):
                self._queue.append(self._detect())
            elif isinstance(effect, PushUrl):
                logger.debug("Pushing URL %s", effect.url)
                self.url = effect.url
                if self._on_url is not None:
                    self._on_url(effect.url)
                self._queue.append(UrlChanged(effect.url))

    def _detect(self) -> Message:
        result = self._detector()
        if isinstance(result, Ok):
            return ZoneDetected(result.value)
        return ZoneDetectionFailed("; ".join(result.errors))
