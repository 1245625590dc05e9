"""
mvccore - Name-Keyed Notification Dispatch

⭐ MODEL, VIEW, CONTROLLER AROUND ONE BROADCAST LOOP ⭐

mvccore decouples three cooperating registries inside an event-driven
application and lets them talk only through named notifications:

💾 Model       - proxies holding application data, by name
🪟 View        - observers, mediators and the synchronous broadcast loop
🎯 Controller  - command factories run on matching notifications
🧭 Facade      - one entry point per core, owning the three registries

Quick Start:
    from mvccore import Facade, Mediator, SimpleCommand

    class Greeter(Mediator):
        NAME = "greeter"

        def list_notification_interests(self):
            return ["hello"]

        def handle_notification(self, name, body=None, type=None):
            print(f"hello, {body}")

    facade = Facade.get_instance("demo")
    facade.register_mediator(Greeter())
    facade.send_notification("hello", "world")

Delivery is in-process and synchronous: every observer currently registered
for a name runs once, in registration order, before ``send_notification``
returns.
"""

from .exceptions import CoreError, MultitonError, NotifierError
from .interfaces import (
    NotifierInterface, CommandInterface, MediatorInterface, ProxyInterface, CommandFactory
)
from .observer import Notification, NotificationPool, Observer
from .core import View, Model, Controller, DispatchMetrics
from .patterns import (
    Facade, DEFAULT_KEY, Notifier, SimpleCommand, MacroCommand, Mediator, Proxy
)
from .infrastructure import (
    CoreConfig, Environment, LoggingConfig, get_config, set_config, configure_logging
)

__version__ = "0.1.0"

__all__ = [
    # Errors
    "CoreError",
    "MultitonError",
    "NotifierError",

    # Interfaces
    "NotifierInterface",
    "CommandInterface",
    "MediatorInterface",
    "ProxyInterface",
    "CommandFactory",

    # Observer pattern
    "Notification",
    "NotificationPool",
    "Observer",

    # Core actors
    "View",
    "Model",
    "Controller",
    "DispatchMetrics",

    # Application building blocks
    "Facade",
    "DEFAULT_KEY",
    "Notifier",
    "SimpleCommand",
    "MacroCommand",
    "Mediator",
    "Proxy",

    # Configuration
    "CoreConfig",
    "Environment",
    "LoggingConfig",
    "get_config",
    "set_config",
    "configure_logging",
]
