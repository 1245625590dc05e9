"""
View - Observer Registry and Broadcast Engine

🚀 Synchronous Fan-Out:
The View owns the observer map (notification name → ordered observers) and
the mediator map (mediator name → mediator). Broadcasting looks up the
observers for a name and calls each one, in registration order, before
returning.

Key Features:
- Snapshot iteration so observers added or removed during a broadcast only
  affect later broadcasts
- One shared observer per mediator across all of its interests
- Empty observer lists are deleted, never left behind
- Optional per-observer error isolation
"""

import logging
from typing import Any, Dict, List, Optional

from ..exceptions import MultitonError
from ..interfaces import MediatorInterface
from ..observer.notification import Notification, NotificationPool
from ..observer.observer import Observer
from .metrics import DispatchMetrics

logger = logging.getLogger(__name__)


class View:
    """
    Observer and mediator registry for one core.

    Only one View may exist per core key; constructing a second one raises
    ``MultitonError``. Use ``View.get_instance`` to fetch or lazily create it
    and ``View.remove_view`` to tear it down.
    """

    _instances: Dict[str, "View"] = {}

    def __init__(
        self,
        key: str,
        pool: Optional[NotificationPool] = None,
        isolate_observer_errors: bool = False,
        metrics: Optional[DispatchMetrics] = None
    ):
        if key in View._instances:
            raise MultitonError("View", key)

        self.key = key
        self.pool = pool if pool is not None else NotificationPool()
        self.isolate_observer_errors = isolate_observer_errors
        self.metrics = metrics

        self._observer_map: Dict[str, List[Observer]] = {}
        self._mediator_map: Dict[str, MediatorInterface] = {}

        View._instances[key] = self
        self.initialize_view()

    def initialize_view(self):
        """Hook for subclasses, called once at the end of construction"""
        pass

    # Observers

    def register_observer(self, notification_name: str, observer: Observer) -> Observer:
        """
        Append ``observer`` to the list for ``notification_name``.

        No deduplication is done. The observer is returned so it can be
        passed back to ``remove_observer`` as a handle.
        """
        observers = self._observer_map.get(notification_name)
        if observers is not None:
            observers.append(observer)
        else:
            self._observer_map[notification_name] = [observer]
        return observer

    def remove_observer(self, notification_name: str, notify_context: Any):
        """
        Remove the most recently registered observer whose context is
        ``notify_context`` (or which is ``notify_context`` itself).
        """
        observers = self._observer_map.get(notification_name)
        if observers is None:
            logger.debug(f"No observers registered for '{notification_name}' in core '{self.key}'")
            return

        for i in range(len(observers) - 1, -1, -1):
            observer = observers[i]
            if observer is notify_context or observer.compare_notify_context(notify_context):
                del observers[i]
                break

        if not observers:
            del self._observer_map[notification_name]

    def has_observers(self, notification_name: str) -> bool:
        return notification_name in self._observer_map

    def observer_count(self, notification_name: str) -> int:
        return len(self._observer_map.get(notification_name, ()))

    def notify_observers(self, notification: Notification):
        """
        Broadcast ``notification`` to every observer registered for its name.

        The observer list is copied first, so changes made by the observers
        themselves do not alter this broadcast. The notification is disposed
        afterwards, including when an observer raises.
        """
        name = notification.name
        body = notification.body
        note_type = notification.type
        delivered = 0

        try:
            observers_ref = self._observer_map.get(name)
            if observers_ref:
                observers = list(observers_ref)
                for observer in observers:
                    if self.isolate_observer_errors:
                        try:
                            observer.notify_observer(name, body, note_type)
                        except Exception:
                            logger.exception(f"Observer {observer!r} failed handling '{name}'")
                            if self.metrics:
                                self.metrics.record_observer_error()
                            continue
                    else:
                        observer.notify_observer(name, body, note_type)
                    delivered += 1
        finally:
            if self.metrics:
                self.metrics.record_broadcast(delivered)
            notification.dispose()

    # Mediators

    def register_mediator(self, mediator: MediatorInterface):
        """
        Register ``mediator`` and subscribe it to its notification interests.

        A mediator name that is already registered is left untouched;
        call ``remove_mediator`` first to replace it.
        """
        name = mediator.name
        if name in self._mediator_map:
            logger.debug(f"Mediator '{name}' already registered in core '{self.key}', ignoring")
            return

        if hasattr(mediator, "initialize_notifier"):
            mediator.initialize_notifier(self.key)

        self._mediator_map[name] = mediator

        interests = mediator.list_notification_interests()
        if interests:
            observer = Observer(mediator.handle_notification, mediator)
            for interest in interests:
                self.register_observer(interest, observer)

        logger.debug(f"Registered mediator '{name}' for {list(interests)} in core '{self.key}'")
        mediator.on_register()

    def retrieve_mediator(self, mediator_name: str) -> Optional[MediatorInterface]:
        return self._mediator_map.get(mediator_name)

    def remove_mediator(self, mediator_name: str) -> Optional[MediatorInterface]:
        """Unsubscribe and remove a mediator, returning it or ``None``"""
        mediator = self._mediator_map.get(mediator_name)
        if mediator is None:
            return None

        for interest in reversed(list(mediator.list_notification_interests())):
            self.remove_observer(interest, mediator)

        del self._mediator_map[mediator_name]
        logger.debug(f"Removed mediator '{mediator_name}' from core '{self.key}'")
        mediator.on_remove()
        return mediator

    def has_mediator(self, mediator_name: str) -> bool:
        return mediator_name in self._mediator_map

    # Core lifecycle

    @classmethod
    def get_instance(cls, key: str, **kwargs) -> "View":
        """Return the View for ``key``, constructing it on first use"""
        view = View._instances.get(key)
        if view is None:
            view = cls(key, **kwargs)
        elif kwargs:
            logger.warning(
                f"View for core '{key}' already exists, ignoring settings {sorted(kwargs)}"
            )
        return view

    @staticmethod
    def has_view(key: str) -> bool:
        return key in View._instances

    @staticmethod
    def remove_view(key: str):
        """Forget the View for ``key``"""
        View._instances.pop(key, None)


__all__ = ["View"]
