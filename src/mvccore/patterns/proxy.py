"""
Proxy - Named Model Data

A proxy owns a piece of model data, exposes methods to change it and
usually sends a notification when it does.
"""

from typing import Any, Optional

from ..interfaces import ProxyInterface
from .notifier import Notifier


class Proxy(Notifier, ProxyInterface):
    """Base proxy implementation"""

    NAME = "Proxy"

    def __init__(self, proxy_name: Optional[str] = None, data: Any = None):
        super().__init__()
        self._proxy_name = proxy_name if proxy_name is not None else self.NAME
        self._data = data

    @property
    def name(self) -> str:
        return self._proxy_name

    @property
    def data(self) -> Any:
        return self._data

    @data.setter
    def data(self, data: Any):
        self._data = data

    def on_register(self):
        """Called by the Model once the proxy is registered"""
        pass

    def on_remove(self):
        """Called by the Model once the proxy is removed"""
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self._proxy_name!r})"


__all__ = ["Proxy"]
