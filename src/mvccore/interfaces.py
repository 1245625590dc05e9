"""
Core Interfaces - Capability Contracts

🧩 What the Registries Expect:
The View, Model and Controller never inspect concrete classes. They only rely
on the capabilities declared here, so application code may either subclass
the base implementations in ``mvccore.patterns`` or bring its own objects
exposing the same members.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, List, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .observer.notification import Notification


class NotifierInterface(ABC):
    """Anything able to send notifications through a core"""

    @abstractmethod
    def initialize_notifier(self, key: str):
        """Attach the notifier to the core registered under ``key``"""
        pass

    @abstractmethod
    def send_notification(self, name: str, body: Any = None, type: Optional[str] = None):
        """Create and broadcast a notification"""
        pass


class CommandInterface(NotifierInterface):
    """A handler instantiated fresh for each matching notification"""

    @abstractmethod
    def execute(self, notification: "Notification"):
        """Run the use case triggered by ``notification``"""
        pass


class MediatorInterface(NotifierInterface):
    """Bridges a view component to the notification system"""

    @property
    @abstractmethod
    def name(self) -> str:
        pass

    @abstractmethod
    def list_notification_interests(self) -> List[str]:
        """Names of the notifications this mediator wants to receive"""
        pass

    @abstractmethod
    def handle_notification(self, name: str, body: Any = None, type: Optional[str] = None):
        pass

    @abstractmethod
    def on_register(self):
        pass

    @abstractmethod
    def on_remove(self):
        pass


class ProxyInterface(NotifierInterface):
    """Holds model data, registered with the Model by name"""

    @property
    @abstractmethod
    def name(self) -> str:
        pass

    @abstractmethod
    def on_register(self):
        pass

    @abstractmethod
    def on_remove(self):
        pass


CommandFactory = Callable[[], CommandInterface]

__all__ = [
    "NotifierInterface", "CommandInterface", "MediatorInterface",
    "ProxyInterface", "CommandFactory"
]
