"""Wall clock used by the host to stamp ticks."""

from __future__ import annotations

import time

from tminus.domain.types import Instant


class SystemClock:
    """Current time as epoch milliseconds."""

    def now_millis(self) -> Instant:
        return time.time_ns() // 1_000_000
