"""
Notifications - Pooled Broadcast Messages

📨 Named, Typed Messages:
A notification carries a name, an opaque body and an optional type string
through a single broadcast. Notifications are handed out by a
``NotificationPool`` and go back to it once the broadcast has reached every
observer, so a busy core does not allocate a new object per send.

Key Features:
- Free-list reuse of released notifications
- Release guard so an instance is never pooled twice
- Optional cap on the free-list size (``0`` disables pooling)
"""

import logging
from typing import Any, List, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from ..core.metrics import DispatchMetrics

logger = logging.getLogger(__name__)


class Notification:
    """
    A named message broadcast to interested observers.

    Instances built by a pool return to it on ``dispose()``. Instances built
    directly can still be disposed, they are simply not reused.
    """

    __slots__ = ("_name", "_body", "_type", "_released", "_pool")

    def __init__(
        self,
        name: str,
        body: Any = None,
        type: Optional[str] = None,
        pool: Optional["NotificationPool"] = None
    ):
        self._name = name
        self._body = body
        self._type = type
        self._released = False
        self._pool = pool

    @property
    def name(self) -> Optional[str]:
        return self._name

    @property
    def body(self) -> Any:
        return self._body

    @body.setter
    def body(self, body: Any):
        self._body = body

    @property
    def type(self) -> Optional[str]:
        return self._type

    @type.setter
    def type(self, value: Optional[str]):
        self._type = value

    @property
    def released(self) -> bool:
        """True once the notification has been disposed and not yet reissued"""
        return self._released

    def dispose(self):
        """
        Clear the notification and hand it back to its pool.

        Calling this a second time is a no-op: a released notification is
        never pushed onto the free-list twice.
        """
        if self._released:
            return

        self._released = True
        self._name = None
        self._body = None
        self._type = None

        if self._pool is not None:
            self._pool.release(self)

    def __str__(self) -> str:
        body = "None" if self._body is None else str(self._body)
        note_type = "None" if self._type is None else self._type
        return f"Notification Name: {self._name}\nBody: {body}\nType: {note_type}"

    def __repr__(self) -> str:
        return (
            f"Notification(name={self._name!r}, body={self._body!r}, "
            f"type={self._type!r}, released={self._released})"
        )


class NotificationPool:
    """
    Free-list of released notifications for one core.

    Args:
        max_size: Largest number of idle notifications kept. ``None`` keeps
            every released notification, ``0`` turns pooling off.
        metrics: Optional metrics sink recording reuse and release counts.
    """

    def __init__(
        self,
        max_size: Optional[int] = None,
        metrics: Optional["DispatchMetrics"] = None
    ):
        if max_size is not None and max_size < 0:
            raise ValueError(f"max_size must be >= 0 or None, got {max_size}")

        self.max_size = max_size
        self.metrics = metrics
        self._free: List[Notification] = []

    def allocate(self, name: str, body: Any = None, type: Optional[str] = None) -> Notification:
        """Hand out a notification, reusing a released one when available"""
        if self._free:
            notification = self._free.pop()
            notification._name = name
            notification._body = body
            notification._type = type
            if self.metrics:
                self.metrics.record_reuse()
        else:
            notification = Notification(name, body, type, pool=self)

        notification._released = False
        return notification

    def release(self, notification: Notification):
        """Put a disposed notification back on the free-list"""
        if notification._pool is not self:
            raise ValueError("Notification belongs to a different pool")
        if not notification.released:
            raise ValueError("Only disposed notifications can be released to the pool")
        if notification in self:
            return

        if self.max_size is not None and len(self._free) >= self.max_size:
            return

        self._free.append(notification)
        if self.metrics:
            self.metrics.record_pooled()

    def clear(self):
        """Drop every idle notification"""
        dropped = len(self._free)
        self._free.clear()
        if dropped:
            logger.debug(f"Dropped {dropped} pooled notifications")

    def __len__(self) -> int:
        return len(self._free)

    def __contains__(self, notification: Notification) -> bool:
        return any(item is notification for item in self._free)


__all__ = ["Notification", "NotificationPool"]
