"""
Notifier - Send Notifications Through a Core

Commands, mediators and proxies all need to broadcast. A notifier only keeps
the key of the core it belongs to and looks its Facade up on demand, so it
can be constructed before the core is known and attached later by the
registry that takes it in.
"""

from typing import Any, Optional, TYPE_CHECKING

from ..exceptions import NotifierError
from ..interfaces import NotifierInterface

if TYPE_CHECKING:
    from .facade import Facade


class Notifier(NotifierInterface):
    """Base class giving ``send_notification`` to core participants"""

    def __init__(self):
        self._multiton_key: Optional[str] = None

    def initialize_notifier(self, key: str):
        """
        Attach to the core registered under ``key``.

        Called by the Model, View and Controller when they take the object
        in; application code rarely needs to call it directly.
        """
        self._multiton_key = key

    @property
    def multiton_key(self) -> Optional[str]:
        return self._multiton_key

    @property
    def facade(self) -> "Facade":
        if self._multiton_key is None:
            raise NotifierError(
                f"{self.__class__.__name__} is not attached to a core; "
                "register it or call initialize_notifier() first"
            )

        from .facade import Facade
        facade = Facade.retrieve_core(self._multiton_key)
        if facade is None:
            raise NotifierError(f"Core '{self._multiton_key}' does not exist or was removed")
        return facade

    def send_notification(self, name: str, body: Any = None, type: Optional[str] = None):
        """Create and broadcast a notification through this notifier's core"""
        self.facade.send_notification(name, body, type)


__all__ = ["Notifier"]
