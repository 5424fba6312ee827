"""
Event values, capabilities and errors shared by every widget.
"""

from .errors import (
    ConfigurationError,
    DuplicateWidgetError,
    EventDecodeError,
    ObserverDataError,
    ReentrantDispatchError,
    WirekitError,
)
from .event import Change, Event, Keydown, Undefined, Update
from .listener import Listener
from .observer import CallbackObserver, Observer, StaticObserver

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
    "WirekitError",
    "ObserverDataError",
    "EventDecodeError",
    "ConfigurationError",
    "DuplicateWidgetError",
    "ReentrantDispatchError",
]
