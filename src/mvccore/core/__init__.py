"""
Core Actors - View, Model and Controller

🎯 The Three Registries:
- View: observers, mediators and the broadcast loop
- Model: proxies by name
- Controller: command factories by notification name

Each registry exists once per core key.
"""

from .view import View
from .model import Model
from .controller import Controller
from .metrics import DispatchMetrics

__all__ = ["View", "Model", "Controller", "DispatchMetrics"]
