"""ZoneService: browse the zone catalog and detect the local zone."""

from __future__ import annotations

from tminus.domain.result import Ok
from tminus.infrastructure.timezones import detect_local_zone
from tminus.services.base import BaseService
from tminus.services.result import ServiceResult, failure


class ZoneService(BaseService):
    def list_zones(self, *, contains: str | None = None) -> ServiceResult:
        """Known zone ids, optionally filtered by a case-insensitive substring."""
        ids = self._catalog.known_ids()
        if contains:
            needle = contains.lower()
            ids = [zone_id for zone_id in ids if needle in zone_id.lower()]
        return ServiceResult(
            ok=True,
            op="list_zones",
            data={"count": len(ids), "items": [{"id": zone_id} for zone_id in ids]},
        )

    def detect(self) -> ServiceResult:
        """The host's zone id, as used when ``add`` is given no zone."""
        detector = self._detector or (lambda: detect_local_zone(self._catalog))
        result = detector()
        if isinstance(result, Ok):
            return ServiceResult(ok=True, op="detect_zone", data={"zone": result.value})
        return failure("detect_zone", "ZONE_NOT_DETECTED", " ".join(result.errors))
