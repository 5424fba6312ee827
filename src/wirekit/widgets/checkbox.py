"""
Checkbox widget: a togglable box with a label.
"""

import html
import logging
from dataclasses import dataclass, replace
from typing import Any, Mapping, Optional

from wirekit.utils.errors import ConfigurationError
from wirekit.utils.event import Change, Event, Update
from wirekit.utils.listener import Listener
from wirekit.utils.observer import Observer

from .base import Widget

logger = logging.getLogger(__name__)

DEFAULT_TEXT = "CheckBox"
STRETCH = "stretch"


@dataclass(frozen=True)
class CheckBoxBuilder:
    """
    Immutable checkbox configuration.

    Every setter returns a new builder, so partial configurations can be
    shared and setter order never matters. build() creates the widget.

    Example:
        >>> checkbox = (
        ...     CheckBox.new("my_checkbox")
        ...     .text("Toggle me !")
        ...     .checked(True)
        ...     .build()
        ... )
    """

    name: str
    is_checked: bool = False
    label: str = DEFAULT_TEXT
    listener_: Optional[Listener] = None
    observer_: Optional[Observer] = None
    stretch_: str = ""

    def checked(self, checked: bool) -> "CheckBoxBuilder":
        """
        Set the initial checked flag.

        Raises:
            TypeError: If checked is not a bool
        """
        if not isinstance(checked, bool):
            raise TypeError(f"checked must be a bool, got {type(checked).__name__}")
        return replace(self, is_checked=checked)

    def text(self, text: str) -> "CheckBoxBuilder":
        """Set the label."""
        return replace(self, label=text)

    def listener(self, listener: Listener) -> "CheckBoxBuilder":
        """Set the listener."""
        return replace(self, listener_=listener)

    def observer(self, observer: Observer) -> "CheckBoxBuilder":
        """Set the observer."""
        return replace(self, observer_=observer)

    def stretch(self) -> "CheckBoxBuilder":
        """Let the checkbox fill the available width."""
        return replace(self, stretch_=STRETCH)

    def build(self) -> "CheckBox":
        return CheckBox(
            self.name,
            checked=self.is_checked,
            text=self.label,
            listener=self.listener_,
            observer=self.observer_,
            stretch=self.stretch_,
        )


class CheckBox(Widget):
    """
    A togglable checkbox with a label.

    Configuration:
        name: Identity key (required)
        text: Label, defaults to "CheckBox"
        checked: Initial state, defaults to false
        stretch: Fill the available width, defaults to false

    Styling:
        class = checkbox [stretch]
        class = checkbox-outer [checked]
        class = checkbox-inner [checked]

    Events:
        mousedown -> Change(source=name, value="")

    Observer fields:
        text: any string
        checked: "true" or "false"

    Examples:
        widgets:
          - type: checkbox
            name: notifications
            text: "Enable notifications"
            checked: true
    """

    widget_type = "checkbox"

    def __init__(
        self,
        name: str,
        checked: bool = False,
        text: str = DEFAULT_TEXT,
        listener: Optional[Listener] = None,
        observer: Optional[Observer] = None,
        stretch: str = "",
    ):
        super().__init__(name)
        self._checked = checked
        self._text = text
        self._listener = listener
        self._observer = observer
        self._stretch = stretch

    @classmethod
    def new(cls, name: str) -> CheckBoxBuilder:
        """Start a builder with default values."""
        return CheckBoxBuilder(name)

    @classmethod
    def from_config(cls, config: Mapping[str, Any]) -> "CheckBox":
        """
        Build a checkbox from a config entry.

        Listeners and observers are wired in code, not in YAML.

        Raises:
            ConfigurationError: If a field has the wrong type
        """
        name = config.get("name")
        if not isinstance(name, str) or not name:
            raise ConfigurationError("Checkbox requires a non-empty string 'name'")

        builder = cls.new(name)

        if "text" in config:
            if not isinstance(config["text"], str):
                raise ConfigurationError(f"Checkbox '{name}': 'text' must be a string")
            builder = builder.text(config["text"])

        if "checked" in config:
            if not isinstance(config["checked"], bool):
                raise ConfigurationError(f"Checkbox '{name}': 'checked' must be a boolean")
            builder = builder.checked(config["checked"])

        if "stretch" in config:
            if not isinstance(config["stretch"], bool):
                raise ConfigurationError(f"Checkbox '{name}': 'stretch' must be a boolean")
            if config["stretch"]:
                builder = builder.stretch()

        return builder.build()

    @property
    def checked(self) -> bool:
        return self._checked

    @property
    def text(self) -> str:
        return self._text

    @property
    def listener(self) -> Optional[Listener]:
        return self._listener

    @property
    def observer(self) -> Optional[Observer]:
        return self._observer

    @property
    def stretch(self) -> str:
        return self._stretch

    def eval(self) -> str:
        """Return the HTML representation."""
        checked = " checked" if self._checked else ""
        stretch = f" {html.escape(self._stretch, quote=True)}" if self._stretch else ""
        onmousedown = html.escape(Event.change_js(self.name, ""), quote=True)
        return (
            f'<div class="checkbox{stretch}" onmousedown="{onmousedown}">'
            f'<div class="checkbox-outer{checked}"><div class="checkbox-inner{checked}"></div></div>'
            f"<label>{html.escape(self._text, quote=False)}</label>"
            f"</div>"
        )

    def trigger(self, event: Event) -> None:
        """
        Update -> on_update()
        Change for this checkbox -> toggle, then listener.on_change(value)
        """
        if isinstance(event, Update):
            self.on_update()
        elif isinstance(event, Change):
            if event.source != self.name:
                return
            self._checked = not self._checked
            logger.debug(f"Checkbox '{self.name}' toggled to {self._checked}")
            if self._listener is not None:
                self._listener.on_change(event.value)

    def on_update(self) -> None:
        """Set text and checked from the observer snapshot."""
        if self._observer is None:
            return

        snapshot = self._observer.observe()
        text = self._require_field(snapshot, "text")
        checked = self._parse_bool(self._require_field(snapshot, "checked"), "checked")

        self._text = text
        self._checked = checked
        logger.debug(f"Checkbox '{self.name}' refreshed: checked={checked}")
