"""
Core Exceptions

Error taxonomy for the dispatch core. Missing registry entries are not
errors (lookups return ``None``), so the hierarchy stays small.
"""


class CoreError(Exception):
    """Base exception for dispatch core errors"""
    pass


class MultitonError(CoreError):
    """Raised when a registry is constructed twice for the same core key"""

    def __init__(self, component: str, key: str):
        self.component = component
        self.key = key
        super().__init__(f"{component} instance for core '{key}' already constructed")


class NotifierError(CoreError):
    """Raised when a notifier is used before it is attached to a core"""
    pass


__all__ = ["CoreError", "MultitonError", "NotifierError"]
