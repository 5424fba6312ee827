"""
wirekit - Retained-mode widgets that render to markup and react to events
"""

__version__ = "0.1.0"

from .managers import WidgetRegistry, WidgetTree
from .utils import (
    CallbackObserver,
    Change,
    Event,
    Keydown,
    Listener,
    Observer,
    ObserverDataError,
    StaticObserver,
    Undefined,
    Update,
)
from .widgets import CheckBox, CheckBoxBuilder, Widget

__all__ = [
    "Event",
    "Update",
    "Change",
    "Keydown",
    "Undefined",
    "Listener",
    "Observer",
    "StaticObserver",
    "CallbackObserver",
    "ObserverDataError",
    "Widget",
    "CheckBox",
    "CheckBoxBuilder",
    "WidgetTree",
    "WidgetRegistry",
]
