"""
Controller - Command Routing

🎯 Notification → Command:
The Controller remembers which command factory handles which notification
name. For every name it controls it registers exactly one observer with the
View; that observer builds a fresh command per notification and runs it.

Re-registering a command for a name only swaps the factory. The observer is
created once, lazily, the first time the name is mapped.
"""

import logging
from typing import Any, Dict, Optional, Union

from ..exceptions import MultitonError
from ..interfaces import CommandFactory
from ..observer.notification import Notification, NotificationPool
from ..observer.observer import Observer
from .view import View

logger = logging.getLogger(__name__)


class Controller:
    """
    Command registry for one core.

    Args:
        key: Core key this controller belongs to
        view: View to subscribe with; defaults to the core's View
        pool: Pool the command notifications are taken from; defaults to
            the View's pool
    """

    _instances: Dict[str, "Controller"] = {}

    def __init__(
        self,
        key: str,
        view: Optional[View] = None,
        pool: Optional[NotificationPool] = None
    ):
        if key in Controller._instances:
            raise MultitonError("Controller", key)

        self.key = key
        self._view = view
        self._pool = pool
        self._command_map: Dict[str, CommandFactory] = {}

        Controller._instances[key] = self
        self.initialize_controller()

    def initialize_controller(self):
        """
        Bind the controller to its View.

        Subclasses using a custom View should override this and assign
        ``self._view`` before registering commands.
        """
        if self._view is None:
            self._view = View.get_instance(self.key)
        if self._pool is None:
            self._pool = self._view.pool

    @property
    def view(self) -> View:
        return self._view

    def execute_command(
        self,
        notification: Union[Notification, str],
        body: Any = None,
        type: Optional[str] = None
    ):
        """
        Run the command mapped to a notification, if any.

        Called by the View with ``(name, body, type)``; a ready
        ``Notification`` may also be passed directly. When no command is
        mapped any more, nothing happens.
        """
        if isinstance(notification, Notification):
            name = notification.name
            owned = False
        else:
            name = notification
            owned = True

        factory = self._command_map.get(name)
        if factory is None:
            return

        command = factory()
        if hasattr(command, "initialize_notifier"):
            command.initialize_notifier(self.key)

        if owned:
            notification = self._pool.allocate(name, body, type)
        try:
            command.execute(notification)
        finally:
            if owned:
                notification.dispose()

    def register_command(self, notification_name: str, command_factory: CommandFactory):
        """
        Map ``notification_name`` to ``command_factory``.

        ``command_factory`` is any zero-argument callable returning a
        command, typically the command class itself.
        """
        if not callable(command_factory):
            raise TypeError(f"Command factory for '{notification_name}' must be callable")

        if notification_name not in self._command_map:
            self._view.register_observer(notification_name, Observer(self.execute_command, self))

        self._command_map[notification_name] = command_factory
        logger.debug(f"Registered command for '{notification_name}' in core '{self.key}'")

    def has_command(self, notification_name: str) -> bool:
        return notification_name in self._command_map

    def remove_command(self, notification_name: str):
        """Drop the mapping and the controller's observer for ``notification_name``"""
        if self.has_command(notification_name):
            self._view.remove_observer(notification_name, self)
            del self._command_map[notification_name]
            logger.debug(f"Removed command for '{notification_name}' from core '{self.key}'")

    @classmethod
    def get_instance(cls, key: str, **kwargs) -> "Controller":
        controller = Controller._instances.get(key)
        if controller is None:
            controller = cls(key, **kwargs)
        elif kwargs:
            logger.warning(
                f"Controller for core '{key}' already exists, ignoring settings {sorted(kwargs)}"
            )
        return controller

    @staticmethod
    def has_controller(key: str) -> bool:
        return key in Controller._instances

    @staticmethod
    def remove_controller(key: str):
        Controller._instances.pop(key, None)


__all__ = ["Controller"]
