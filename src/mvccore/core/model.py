"""
Model - Proxy Registry

Keeps the proxies of one core by name. Registering a proxy under a name
that is already taken replaces the previous proxy; the mediator registry
refuses such re-registrations instead, and that difference is kept on
purpose for compatibility.
"""

import logging
from typing import Dict, Optional

from ..exceptions import MultitonError
from ..interfaces import ProxyInterface

logger = logging.getLogger(__name__)


class Model:
    """Proxy registry for one core"""

    _instances: Dict[str, "Model"] = {}

    def __init__(self, key: str):
        if key in Model._instances:
            raise MultitonError("Model", key)

        self.key = key
        self._proxy_map: Dict[str, ProxyInterface] = {}

        Model._instances[key] = self
        self.initialize_model()

    def initialize_model(self):
        """Hook for subclasses, called once at the end of construction"""
        pass

    def register_proxy(self, proxy: ProxyInterface):
        """Store ``proxy`` under its name, overwriting any previous entry"""
        if hasattr(proxy, "initialize_notifier"):
            proxy.initialize_notifier(self.key)

        previous = self._proxy_map.get(proxy.name)
        if previous is not None and previous is not proxy:
            logger.debug(f"Proxy '{proxy.name}' replaced in core '{self.key}'")

        self._proxy_map[proxy.name] = proxy
        proxy.on_register()

    def retrieve_proxy(self, proxy_name: str) -> Optional[ProxyInterface]:
        return self._proxy_map.get(proxy_name)

    def has_proxy(self, proxy_name: str) -> bool:
        return proxy_name in self._proxy_map

    def remove_proxy(self, proxy_name: str) -> Optional[ProxyInterface]:
        """Remove a proxy, returning it or ``None`` when nothing was registered"""
        proxy = self._proxy_map.pop(proxy_name, None)
        if proxy is not None:
            logger.debug(f"Removed proxy '{proxy_name}' from core '{self.key}'")
            proxy.on_remove()
        return proxy

    @classmethod
    def get_instance(cls, key: str) -> "Model":
        model = Model._instances.get(key)
        if model is None:
            model = cls(key)
        return model

    @staticmethod
    def has_model(key: str) -> bool:
        return key in Model._instances

    @staticmethod
    def remove_model(key: str):
        Model._instances.pop(key, None)


__all__ = ["Model"]
