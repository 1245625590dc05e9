"""
Mediator - View Component Bridge

A mediator wraps one view component, listens to the notifications named by
``list_notification_interests`` and reacts in ``handle_notification``.
Subclasses usually override those two methods and leave the lifecycle
hooks empty.
"""

from typing import Any, List, Optional

from ..interfaces import MediatorInterface
from .notifier import Notifier


class Mediator(Notifier, MediatorInterface):
    """Base mediator implementation"""

    NAME = "Mediator"

    def __init__(self, mediator_name: Optional[str] = None, view_component: Any = None):
        super().__init__()
        self._mediator_name = mediator_name if mediator_name is not None else self.NAME
        self._view_component = view_component

    @property
    def name(self) -> str:
        return self._mediator_name

    @property
    def view_component(self) -> Any:
        return self._view_component

    @view_component.setter
    def view_component(self, view_component: Any):
        self._view_component = view_component

    def list_notification_interests(self) -> List[str]:
        return []

    def handle_notification(self, name: str, body: Any = None, type: Optional[str] = None):
        pass

    def on_register(self):
        """Called by the View once the mediator is registered"""
        pass

    def on_remove(self):
        """Called by the View once the mediator is removed"""
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self._mediator_name!r})"


__all__ = ["Mediator"]
