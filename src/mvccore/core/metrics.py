"""
Dispatch Metrics

Counters kept by a core while it broadcasts notifications and recycles
them through its pool.
"""

from datetime import datetime
from typing import Any, Dict


class DispatchMetrics:
    """Metrics tracking for notification dispatch"""

    def __init__(self):
        self.notifications_broadcast = 0
        self.observers_notified = 0
        self.observer_errors = 0
        self.notifications_pooled = 0
        self.notifications_reused = 0
        self.start_time = datetime.now()

    def record_broadcast(self, delivery_count: int):
        """Record one broadcast and the observers it reached"""
        self.notifications_broadcast += 1
        self.observers_notified += delivery_count

    def record_observer_error(self):
        """Record an observer failure absorbed in isolation mode"""
        self.observer_errors += 1

    def record_pooled(self):
        self.notifications_pooled += 1

    def record_reuse(self):
        self.notifications_reused += 1

    def reset(self):
        """Zero every counter and restart the uptime clock"""
        self.__init__()

    def get_summary(self) -> Dict[str, Any]:
        """Get metrics summary"""
        uptime_seconds = (datetime.now() - self.start_time).total_seconds()

        return {
            "uptime_seconds": uptime_seconds,
            "notifications_broadcast": self.notifications_broadcast,
            "observers_notified": self.observers_notified,
            "observer_errors": self.observer_errors,
            "notifications_pooled": self.notifications_pooled,
            "notifications_reused": self.notifications_reused,
            "average_fan_out": (
                self.observers_notified / self.notifications_broadcast
                if self.notifications_broadcast > 0 else 0
            ),
            "reuse_rate": (
                self.notifications_reused / self.notifications_broadcast
                if self.notifications_broadcast > 0 else 0
            )
        }


__all__ = ["DispatchMetrics"]
