"""Performance monitoring utilities"""
import time
import threading
from functools import wraps
from dataclasses import dataclass, field
from typing import List
import numpy as np


@dataclass
class MatchingMetrics:
    """Latency metrics for ranking requests"""
    total_requests: int = 0
    successful_requests: int = 0
    failed_requests: int = 0
    latencies: List[float] = field(default_factory=list)

    @property
    def avg_latency(self) -> float:
        return float(np.mean(self.latencies)) if self.latencies else 0.0

    @property
    def p95_latency(self) -> float:
        return float(np.percentile(self.latencies, 95)) if self.latencies else 0.0

    @property
    def throughput(self) -> float:
        """Successful requests per minute of measured time"""
        total_time = sum(self.latencies)
        return (self.successful_requests / total_time * 60) if total_time > 0 else 0.0

    def add_request(self, latency: float, success: bool = True):
        """Record a request"""
        self.total_requests += 1
        self.latencies.append(latency)
        if success:
            self.successful_requests += 1
        else:
            self.failed_requests += 1


class PerformanceMonitor:
    """Monitor matching performance"""

    def __init__(self):
        self.metrics = MatchingMetrics()
        self._lock = threading.Lock()

    def record(self, latency: float, success: bool = True):
        with self._lock:
            self.metrics.add_request(latency, success)

    def measure(self, func):
        """Decorator to measure execution time"""
        @wraps(func)
        def wrapper(*args, **kwargs):
            start = time.perf_counter()
            try:
                result = func(*args, **kwargs)
            except Exception:
                self.record(time.perf_counter() - start, False)
                raise
            self.record(time.perf_counter() - start, True)
            return result

        return wrapper

    def reset(self):
        with self._lock:
            self.metrics = MatchingMetrics()

    def get_report(self) -> dict:
        """Generate performance report"""
        with self._lock:
            return {
                "total_requests": self.metrics.total_requests,
                "successful_requests": self.metrics.successful_requests,
                "failed_requests": self.metrics.failed_requests,
                "avg_latency_sec": round(self.metrics.avg_latency, 4),
                "p95_latency_sec": round(self.metrics.p95_latency, 4),
                "throughput_per_min": round(self.metrics.throughput, 0)
            }

# Global monitor instance
monitor = PerformanceMonitor()
