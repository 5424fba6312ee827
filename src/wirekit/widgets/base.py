"""
Base class for all widget types.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Mapping

from wirekit.utils.errors import ObserverDataError
from wirekit.utils.event import Event

logger = logging.getLogger(__name__)


class Widget(ABC):
    """
    Base class for all wirekit widgets.

    A widget is a long-lived object that renders its state to markup,
    reacts to events delivered by the runtime and refreshes itself from
    an optional observer.

    Class Attributes:
        widget_type: Unique identifier for this widget type (e.g., "checkbox")

    Dispatch rules every implementation follows in trigger():
        - Update -> on_update()
        - Change whose source equals name -> local mutation, then listener
        - anything else -> no-op

    Example:
        >>> class Label(Widget):
        ...     widget_type = "label"
        ...
        ...     def eval(self):
        ...         return f"<span>{self.name}</span>"
        ...
        ...     def trigger(self, event):
        ...         pass
        ...
        ...     def on_update(self):
        ...         pass
        ...
        ...     @classmethod
        ...     def from_config(cls, config):
        ...         return cls(config["name"])
    """

    # Widget type identifier (must be unique)
    widget_type: str = None

    def __init__(self, name: str):
        """
        Initialize the widget.

        Args:
            name: Identity key used for event routing and markup addressing

        Raises:
            ValueError: If widget_type is not defined or name is empty
        """
        if not self.widget_type:
            raise ValueError(f"{self.__class__.__name__} must define widget_type")
        if not isinstance(name, str) or not name:
            raise ValueError(f"{self.__class__.__name__} requires a non-empty name")

        self._name = name

    @property
    def name(self) -> str:
        """Identity key, fixed at construction."""
        return self._name

    @abstractmethod
    def eval(self) -> str:
        """
        Render the current state to markup.

        Must not mutate state; identical state gives identical output.

        Returns:
            Complete markup string for this widget
        """
        pass

    @abstractmethod
    def trigger(self, event: Event) -> None:
        """
        Apply an event to the widget.

        Args:
            event: Event delivered by the runtime
        """
        pass

    @abstractmethod
    def on_update(self) -> None:
        """
        Overwrite tracked fields from the observer snapshot.

        No-op without an observer.

        Raises:
            ObserverDataError: If the snapshot is missing a key or a value
                does not parse; state is left unchanged
        """
        pass

    @classmethod
    @abstractmethod
    def from_config(cls, config: Mapping[str, Any]) -> "Widget":
        """
        Build a widget from a declarative config entry.

        Args:
            config: Widget entry from the YAML configuration

        Raises:
            ConfigurationError: If the entry is invalid
        """
        pass

    def _require_field(self, snapshot: Any, key: str) -> str:
        """
        Fetch a required string field from an observer snapshot.

        Raises:
            ObserverDataError: If the snapshot is not a mapping, the key is
                missing or its value is not a string
        """
        if not isinstance(snapshot, Mapping):
            raise ObserverDataError(
                self.name, None, f"snapshot must be a mapping, got {type(snapshot).__name__}"
            )
        if key not in snapshot:
            raise ObserverDataError(self.name, key, "missing from snapshot")

        value = snapshot[key]
        if not isinstance(value, str):
            raise ObserverDataError(self.name, key, f"expected a string, got {type(value).__name__}")
        return value

    def _parse_bool(self, value: str, key: str) -> bool:
        """Parse the literal strings "true" and "false"."""
        if value == "true":
            return True
        if value == "false":
            return False
        raise ObserverDataError(self.name, key, f"cannot parse {value!r} as a boolean")

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<{self.__class__.__name__}(type={self.widget_type}, name={self.name!r})>"
