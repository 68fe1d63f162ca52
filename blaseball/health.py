"""
Health monitor: periodic heartbeat, stale-feed watchdog and health.json.
"""
import asyncio
import json
import logging
import time
from collections import Counter
from pathlib import Path
from typing import Any, Optional

from blaseball.config import HEARTBEAT_INTERVAL_S, HEALTH_FILE, STALE_FEED_S

log = logging.getLogger("blaseball.health")


class HealthMonitor:
    def __init__(self, stale_after_s: float = STALE_FEED_S) -> None:
        self._start = time.monotonic()
        self._stale_after_s = stale_after_s
        self._frame_count = 0
        self._last_report_count = 0
        self._last_report_time = time.monotonic()
        self._last_frame_time: float | None = None
        self._updates: Counter = Counter()
        self._errors: Counter = Counter()
        self._ws_state: str = "disconnected"
        self._store_counts: dict[str, int] = {}

    def record_frame(self) -> None:
        self._frame_count += 1
        self._last_frame_time = time.monotonic()

    def record_update(self, kind: str) -> None:
        self._updates[kind] += 1

    def record_error(self, kind: str) -> None:
        self._errors[kind] += 1

    def set_ws_state(self, state: str) -> None:
        self._ws_state = state

    def set_store_counts(self, counts: dict[str, int]) -> None:
        self._store_counts = counts

    def seconds_since_frame(self) -> float:
        since = self._last_frame_time if self._last_frame_time is not None else self._start
        return time.monotonic() - since

    def is_stale(self) -> bool:
        return self._ws_state == "connected" and self.seconds_since_frame() > self._stale_after_s

    def _snapshot(self) -> dict[str, Any]:
        now = time.monotonic()
        elapsed = now - self._last_report_time
        frames = self._frame_count - self._last_report_count
        rate = frames / elapsed if elapsed > 0 else 0.0
        self._last_report_time = now
        self._last_report_count = self._frame_count

        return {
            "uptime_s": round(now - self._start, 1),
            "total_frames": self._frame_count,
            "frames_per_sec": round(rate, 2),
            "seconds_since_frame": round(self.seconds_since_frame(), 1),
            "blaseball_ws": self._ws_state,
            "updates": dict(self._updates),
            "errors": dict(self._errors),
            "store": self._store_counts,
            "timestamp": time.strftime("%Y-%m-%dT%H:%M:%SZ", time.gmtime()),
        }

    def write_report(self, path: Optional[Path] = None) -> dict[str, Any]:
        path = path or HEALTH_FILE
        snap = self._snapshot()
        log.info(
            "heartbeat | up=%ss frames=%d rate=%.1f/s ws=%s updates=%s errors=%s store=%s",
            snap["uptime_s"],
            snap["total_frames"],
            snap["frames_per_sec"],
            snap["blaseball_ws"],
            snap["updates"],
            snap["errors"],
            snap["store"],
        )
        if self.is_stale():
            log.warning("no frames for %.0fs, feed may be stalled", snap["seconds_since_frame"])
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(json.dumps(snap, indent=2))
        except OSError as e:
            log.warning("could not write %s: %s", path, e)
        return snap

    async def run(self) -> None:
        while True:
            self.write_report()
            await asyncio.sleep(HEARTBEAT_INTERVAL_S)
