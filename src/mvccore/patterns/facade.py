"""
Facade - Single Entry Point to a Core

🧭 One Object, Three Registries:
A Facade owns the Model, View, Controller and notification pool of one core
and exposes their operations under a single API. Cores are named by a key:
constructing a second Facade for a live key is a programming error, and
``Facade.remove_core`` is the explicit teardown.

Example:
    facade = Facade.get_instance("editor")
    facade.register_command(STARTUP, StartupCommand)
    facade.send_notification(STARTUP, app_window)
"""

import logging
from typing import Any, Dict, Optional

from ..core.controller import Controller
from ..core.metrics import DispatchMetrics
from ..core.model import Model
from ..core.view import View
from ..exceptions import MultitonError
from ..infrastructure.configuration import CoreConfig, get_config
from ..interfaces import CommandFactory, MediatorInterface, ProxyInterface
from ..observer.notification import Notification, NotificationPool

logger = logging.getLogger(__name__)

DEFAULT_KEY = "default"


class Facade:
    """
    Composes Model, View and Controller for one core.

    Subclass and override ``initialize_controller`` (calling ``super()``
    first) to register startup commands, or the other ``initialize_*``
    hooks to plug in custom registries.

    Args:
        key: Core key, unique among live cores
        config: Core settings; defaults to the global configuration
    """

    _instances: Dict[str, "Facade"] = {}

    def __init__(self, key: str = DEFAULT_KEY, config: Optional[CoreConfig] = None):
        if key in Facade._instances:
            raise MultitonError("Facade", key)

        self.key = key
        self.config = config or get_config()
        self.metrics: Optional[DispatchMetrics] = DispatchMetrics() if self.config.enable_metrics else None
        self._pool = NotificationPool(max_size=self.config.notification_pool_size, metrics=self.metrics)

        self._model: Optional[Model] = None
        self._view: Optional[View] = None
        self._controller: Optional[Controller] = None

        # Registries that already existed for this key survive a failed start
        created = [
            remove for exists, remove in (
                (Model.has_model(key), Model.remove_model),
                (View.has_view(key), View.remove_view),
                (Controller.has_controller(key), Controller.remove_controller),
            )
            if not exists
        ]

        Facade._instances[key] = self
        try:
            self.initialize_facade()
        except Exception:
            Facade._instances.pop(key, None)
            for remove in created:
                remove(key)
            self._pool.clear()
            logger.error(f"Core '{key}' failed to initialize")
            raise

        logger.info(f"Core '{key}' initialized")

    def initialize_facade(self):
        """Build the core actors; called once by the constructor"""
        self.initialize_model()
        self.initialize_view()
        self.initialize_controller()

    def initialize_model(self):
        if self._model is None:
            self._model = Model.get_instance(self.key)

    def initialize_view(self):
        if self._view is None:
            self._view = View.get_instance(
                self.key,
                pool=self._pool,
                isolate_observer_errors=self.config.isolate_observer_errors,
                metrics=self.metrics
            )

    def initialize_controller(self):
        if self._controller is None:
            self._controller = Controller.get_instance(self.key, view=self._view, pool=self._pool)

    @property
    def model(self) -> Model:
        return self._model

    @property
    def view(self) -> View:
        return self._view

    @property
    def controller(self) -> Controller:
        return self._controller

    @property
    def pool(self) -> NotificationPool:
        return self._pool

    # Commands

    def register_command(self, notification_name: str, command_factory: CommandFactory):
        self._controller.register_command(notification_name, command_factory)

    def remove_command(self, notification_name: str):
        self._controller.remove_command(notification_name)

    def has_command(self, notification_name: str) -> bool:
        return self._controller.has_command(notification_name)

    # Proxies

    def register_proxy(self, proxy: ProxyInterface):
        self._model.register_proxy(proxy)

    def retrieve_proxy(self, proxy_name: str) -> Optional[ProxyInterface]:
        return self._model.retrieve_proxy(proxy_name)

    def remove_proxy(self, proxy_name: str) -> Optional[ProxyInterface]:
        return self._model.remove_proxy(proxy_name)

    def has_proxy(self, proxy_name: str) -> bool:
        return self._model.has_proxy(proxy_name)

    # Mediators

    def register_mediator(self, mediator: MediatorInterface):
        self._view.register_mediator(mediator)

    def retrieve_mediator(self, mediator_name: str) -> Optional[MediatorInterface]:
        return self._view.retrieve_mediator(mediator_name)

    def remove_mediator(self, mediator_name: str) -> Optional[MediatorInterface]:
        return self._view.remove_mediator(mediator_name)

    def has_mediator(self, mediator_name: str) -> bool:
        return self._view.has_mediator(mediator_name)

    # Notifications

    def notify_observers(self, notification: Notification):
        """
        Broadcast an already built notification.

        Prefer ``send_notification``, which takes the notification from the
        core's pool.
        """
        self._view.notify_observers(notification)

    def send_notification(self, name: str, body: Any = None, type: Optional[str] = None):
        """Create and broadcast a notification"""
        self.notify_observers(self._pool.allocate(name, body, type))

    # Core lifecycle

    @classmethod
    def get_instance(cls, key: str = DEFAULT_KEY, config: Optional[CoreConfig] = None) -> "Facade":
        """Return the Facade for ``key``, constructing it on first use"""
        facade = Facade._instances.get(key)
        if facade is None:
            facade = cls(key, config)
        return facade

    @staticmethod
    def retrieve_core(key: str) -> Optional["Facade"]:
        return Facade._instances.get(key)

    @staticmethod
    def has_core(key: str) -> bool:
        return key in Facade._instances

    @staticmethod
    def remove_core(key: str):
        """Tear down the core for ``key`` and all of its registries"""
        facade = Facade._instances.pop(key, None)

        Model.remove_model(key)
        View.remove_view(key)
        Controller.remove_controller(key)

        if facade is not None:
            facade._pool.clear()
            logger.info(f"Core '{key}' removed")

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(key={self.key!r})"


__all__ = ["Facade", "DEFAULT_KEY"]
