"""
Managers for the runtime side of a widget tree.

- WidgetTree: owns installed widgets and routes events to them
- WidgetRegistry: maps config type keys to widget classes
"""

from .registry import WidgetRegistry, registry
from .tree import WidgetTree

__all__ = [
    "WidgetTree",
    "WidgetRegistry",
    "registry",
]
