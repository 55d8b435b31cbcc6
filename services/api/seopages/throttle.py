# services/api/seopages/throttle.py

from __future__ import annotations

from typing import Optional

class TtlGate:
    """
    Time-to-live gate: should_run(now) is true at most once per ``ttl_seconds``.

    The caller supplies ``now`` (any monotonic float, e.g. time.monotonic()),
    so tests can drive it without sleeping.
    """

    def __init__(self, ttl_seconds: float, last_run_at: Optional[float] = None):
        self.ttl_seconds = float(ttl_seconds)
        self.last_run_at = last_run_at

    def should_run(self, now: float) -> bool:
        if self.last_run_at is not None and now - self.last_run_at < self.ttl_seconds:
            return False
        self.last_run_at = now
        return True

    def reset(self) -> None:
        self.last_run_at = None
