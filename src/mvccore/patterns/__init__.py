"""
Patterns - Base Implementations for Application Code

🧱 Building Blocks:
- Facade: entry point owning one core
- Notifier: ``send_notification`` for core participants
- SimpleCommand / MacroCommand: notification handlers
- Mediator: view component bridge
- Proxy: named model data
"""

from .notifier import Notifier
from .facade import Facade, DEFAULT_KEY
from .command import SimpleCommand, MacroCommand
from .mediator import Mediator
from .proxy import Proxy

__all__ = [
    "Notifier", "Facade", "DEFAULT_KEY",
    "SimpleCommand", "MacroCommand", "Mediator", "Proxy"
]
