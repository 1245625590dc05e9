"""
Observer Pattern - Notifications and Observers

📨 Publish/Subscribe Building Blocks:
- Notification: named, typed message carried through one broadcast
- NotificationPool: free-list that recycles released notifications
- Observer: (callback, context) pair registered under a notification name
"""

from .notification import Notification, NotificationPool
from .observer import Observer, NotifyMethod

__all__ = ["Notification", "NotificationPool", "Observer", "NotifyMethod"]
