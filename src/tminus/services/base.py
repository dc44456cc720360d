"""BaseService: shared construction for tminus services.

Every service receives the zone catalog, plus optional clock and zone
detector overrides, and builds a fresh :class:`Host` per operation.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from tminus.runtime.host import Host

if TYPE_CHECKING:
    from tminus.domain.types import TimeZoneCatalog
    from tminus.runtime.host import Clock, ZoneDetector


class BaseService:
    """Base for service-layer classes.

    Usage::

        class CountdownService(BaseService):
            def show(self, url: str) -> ServiceResult:
                host = self._host()
                host.start(url, detect_zone=False)
                ...
    """

    def __init__(
        self,
        catalog: TimeZoneCatalog,
        *,
        clock: Clock | None = None,
        detector: ZoneDetector | None = None,
    ) -> None:
        self._catalog = catalog
        self._clock = clock
        self._detector = detector

    def _host(self) -> Host:
        return Host(self._catalog, clock=self._clock, detector=self._detector)
