"""Service diagnostics: per-endpoint request timings, process memory and threads."""

import threading
from dataclasses import dataclass

import psutil
from fastapi import APIRouter

from fincalc.schemas import EndpointTimingOut, PerformanceResponse

router = APIRouter()


@dataclass
class _Timing:
    count: int = 0
    total_ms: float = 0.0
    max_ms: float = 0.0


class EndpointTimings:
    """Request durations per (method, path), fed by the app's timing middleware."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._timings: dict[tuple[str, str], _Timing] = {}

    def record(self, method: str, path: str, duration_ms: float) -> None:
        with self._lock:
            timing = self._timings.setdefault((method, path), _Timing())
            timing.count += 1
            timing.total_ms += duration_ms
            timing.max_ms = max(timing.max_ms, duration_ms)

    def snapshot(self) -> list[EndpointTimingOut]:
        with self._lock:
            items = sorted(self._timings.items(), key=lambda kv: (kv[0][1], kv[0][0]))
            return [
                EndpointTimingOut(
                    method=method,
                    path=path,
                    count=t.count,
                    avg_ms=round(t.total_ms / t.count, 3),
                    max_ms=round(t.max_ms, 3),
                )
                for (method, path), t in items
            ]


timings = EndpointTimings()


@router.get("/performance", response_model=PerformanceResponse)
def performance() -> PerformanceResponse:
    """Timings of the calculator endpoints served so far, plus process RSS and thread count."""
    mem_mb = psutil.Process().memory_info().rss / (1024 * 1024)
    return PerformanceResponse(
        memory_mb=round(mem_mb, 2),
        threads=threading.active_count(),
        endpoints=timings.snapshot(),
    )
