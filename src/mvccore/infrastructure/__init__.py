"""
Infrastructure - Configuration and Logging

🔧 Ambient Services:
- CoreConfig: validated settings shared by every core
- configure_logging: handler setup for the library logger
"""

from .configuration import (
    CoreConfig, Environment, LoggingConfig,
    set_config, get_config, reset_config, configure_from_dict
)
from .logging_setup import configure_logging

__all__ = [
    "CoreConfig", "Environment", "LoggingConfig",
    "set_config", "get_config", "reset_config", "configure_from_dict",
    "configure_logging"
]
