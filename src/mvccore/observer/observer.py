"""
Observer - Callback and Context Binding

An observer pairs the callable to run when a notification fires with the
object that owns it. The owner ("notify context") is the key used to find
and remove the observer later.
"""

from typing import Any, Callable, Optional

NotifyMethod = Callable[[str, Any, Optional[str]], None]


class Observer:
    """
    Encapsulates an interested object's notification callback.

    ``notify_method`` is usually a bound method of ``notify_context``, so it
    already carries its receiver. The context is kept separately for
    identity comparison on removal.
    """

    __slots__ = ("_notify", "_context")

    def __init__(self, notify_method: NotifyMethod, notify_context: Any):
        self._notify = notify_method
        self._context = notify_context

    @property
    def notify_method(self) -> NotifyMethod:
        return self._notify

    @notify_method.setter
    def notify_method(self, notify_method: NotifyMethod):
        self._notify = notify_method

    @property
    def notify_context(self) -> Any:
        return self._context

    @notify_context.setter
    def notify_context(self, notify_context: Any):
        self._context = notify_context

    def notify_observer(self, name: str, body: Any = None, type: Optional[str] = None):
        """Invoke the callback with the notification's name, body and type"""
        self._notify(name, body, type)

    def compare_notify_context(self, obj: Any) -> bool:
        """True when ``obj`` is this observer's context (identity, not equality)"""
        return obj is self._context

    def __repr__(self) -> str:
        return f"Observer(notify={self._notify!r}, context={self._context!r})"


__all__ = ["Observer", "NotifyMethod"]
