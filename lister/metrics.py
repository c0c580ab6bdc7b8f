"""In-process request metrics collected by the API instrumentation stage."""

import time
from collections import Counter
from dataclasses import dataclass, field
from threading import Lock
from typing import Any


@dataclass
class RequestMetrics:
    """Mutable request counters and timings."""

    requests_total: int = 0
    response_time_total_seconds: float = 0.0
    response_time_max_seconds: float = 0.0
    requests_by_route: Counter = field(default_factory=Counter)
    responses_by_status_class: Counter = field(default_factory=Counter)


class MetricsCollector:
    """Collects request metrics; safe to share across worker threads."""

    def __init__(self):
        self._lock = Lock()
        self._metrics = RequestMetrics()
        self._start_time = time.time()

    def record_request(self, method: str, route: str, status_code: int, response_time_seconds: float) -> None:
        """Record one completed request.

        Args:
            method: HTTP method.
            route: Matched route template, or the raw path when unmatched.
            status_code: Response status code.
            response_time_seconds: Wall-clock handling time.
        """

        with self._lock:
            self._metrics.requests_total += 1
            self._metrics.response_time_total_seconds += response_time_seconds
            self._metrics.response_time_max_seconds = max(
                self._metrics.response_time_max_seconds, response_time_seconds
            )
            self._metrics.requests_by_route[f"{method} {route}"] += 1
            self._metrics.responses_by_status_class[f"{status_code // 100}xx"] += 1

    def get_summary(self) -> dict[str, Any]:
        """Return a JSON-ready snapshot of all metrics."""

        with self._lock:
            average_response_time = (
                self._metrics.response_time_total_seconds / self._metrics.requests_total
                if self._metrics.requests_total
                else 0.0
            )
            return {
                "requests_total": self._metrics.requests_total,
                "average_response_time_ms": average_response_time * 1000,
                "max_response_time_ms": self._metrics.response_time_max_seconds * 1000,
                "requests_by_route": dict(self._metrics.requests_by_route),
                "responses_by_status_class": dict(self._metrics.responses_by_status_class),
                "uptime_seconds": time.time() - self._start_time,
            }

    def reset_metrics(self) -> None:
        """Reset all metrics (useful for testing)."""

        with self._lock:
            self._metrics = RequestMetrics()
            self._start_time = time.time()
