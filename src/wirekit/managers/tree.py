"""
Widget tree: the runtime-side owner of installed widgets.

This module routes events to widgets, collects refresh failures and
concatenates rendered markup.
"""

import logging
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional

from wirekit.utils.errors import (
    ConfigurationError,
    DuplicateWidgetError,
    ObserverDataError,
    ReentrantDispatchError,
    WirekitError,
)
from wirekit.utils.event import Event, Update
from wirekit.widgets.base import Widget

from .registry import WidgetRegistry, registry as default_registry

logger = logging.getLogger(__name__)


class WidgetTree:
    """
    Owns a set of uniquely named widgets.

    Responsibilities:
    - Reject duplicate names so Change routing is unambiguous
    - Deliver every event to every widget, in install order
    - Decide what happens when an observer snapshot is bad
    - Render the whole tree

    Dispatch is synchronous and not reentrant: a listener or observer that
    calls back into dispatch() gets a ReentrantDispatchError.
    """

    def __init__(self, widgets: Optional[Iterable[Widget]] = None, fail_fast: bool = False):
        """
        Initialize the tree.

        Args:
            widgets: Widgets to install, in order
            fail_fast: Propagate ObserverDataError from dispatch() instead of
                logging and collecting it

        Raises:
            DuplicateWidgetError: If two widgets share a name
        """
        self.fail_fast = fail_fast
        self._widgets: Dict[str, Widget] = {}
        self._dispatching = False

        for widget in widgets or ():
            self.add(widget)

    @classmethod
    def from_config(
        cls, config: Mapping[str, Any], registry: Optional[WidgetRegistry] = None
    ) -> "WidgetTree":
        """
        Build a tree from a loaded configuration.

        Args:
            config: Configuration as returned by ConfigLoader.load()
            registry: Widget registry to resolve types (defaults to the
                global one, auto-discovered on first use)

        Returns:
            Populated WidgetTree

        Raises:
            ConfigurationError: If a widget type is unknown or an entry is invalid
        """
        if registry is None:
            registry = default_registry
            if not registry.list_widgets():
                registry.auto_discover()

        settings = config.get("settings") or {}
        fail_fast = settings.get("fail_fast", False)
        if not isinstance(fail_fast, bool):
            raise ConfigurationError("'settings.fail_fast' must be a boolean")
        tree = cls(fail_fast=fail_fast)

        for entry in config.get("widgets", []):
            widget_type = entry.get("type")
            widget_class = registry.get_widget_class(widget_type)
            if widget_class is None:
                raise ConfigurationError(f"Unknown widget type: {widget_type}")
            tree.add(widget_class.from_config(entry))

        logger.info(f"Built widget tree with {len(tree)} widget(s)")
        return tree

    def add(self, widget: Widget) -> None:
        """
        Install a widget.

        Raises:
            TypeError: If widget is not a Widget
            DuplicateWidgetError: If the name is already installed
        """
        if not isinstance(widget, Widget):
            raise TypeError(f"{widget!r} is not a Widget")
        if widget.name in self._widgets:
            raise DuplicateWidgetError(widget.name)

        self._widgets[widget.name] = widget
        logger.debug(f"Installed {widget.widget_type} widget '{widget.name}'")

    def get(self, name: str) -> Optional[Widget]:
        """Get an installed widget by name."""
        return self._widgets.get(name)

    def names(self) -> List[str]:
        """Names of installed widgets, in install order."""
        return list(self._widgets.keys())

    def __len__(self) -> int:
        return len(self._widgets)

    def __iter__(self) -> Iterator[Widget]:
        return iter(list(self._widgets.values()))

    def __contains__(self, name: object) -> bool:
        return name in self._widgets

    def dispatch(self, event: Event) -> Dict[str, WirekitError]:
        """
        Deliver an event to every widget.

        Args:
            event: Event to deliver

        Returns:
            {widget_name: error} for widgets whose observer data was rejected;
            those widgets keep their previous state

        Raises:
            ReentrantDispatchError: If called while a dispatch is running
            ObserverDataError: If fail_fast is set and a snapshot is rejected
        """
        if self._dispatching:
            raise ReentrantDispatchError(f"Cannot dispatch {event!r} while another dispatch is running")

        failures: Dict[str, WirekitError] = {}
        self._dispatching = True
        try:
            for widget in list(self._widgets.values()):
                try:
                    widget.trigger(event)
                except ObserverDataError as e:
                    if self.fail_fast:
                        raise
                    logger.error(f"Dropped update for widget '{widget.name}': {e}")
                    failures[widget.name] = e
        finally:
            self._dispatching = False

        return failures

    def update(self) -> Dict[str, WirekitError]:
        """Refresh every widget from its observer."""
        return self.dispatch(Update())

    def handle_payload(self, payload: Mapping[str, Any]) -> Dict[str, WirekitError]:
        """
        Decode a runtime payload and dispatch it.

        Raises:
            EventDecodeError: If the payload is malformed
        """
        return self.dispatch(Event.from_dict(payload))

    def render(self) -> str:
        """Concatenated markup of every widget, in install order."""
        return "".join(widget.eval() for widget in self._widgets.values())

    def render_widget(self, name: str) -> Optional[str]:
        """
        Render a single widget.

        Returns:
            Markup, or None if no widget has that name
        """
        widget = self._widgets.get(name)
        if widget is None:
            return None
        return widget.eval()

    def clear(self) -> None:
        """Tear down the tree, dropping every widget."""
        if self._dispatching:
            raise ReentrantDispatchError("Cannot clear the tree during dispatch")
        self._widgets.clear()
        logger.debug("Cleared all widgets")
