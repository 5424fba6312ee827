"""
Exception hierarchy for wirekit.

Routing mismatches, unknown event variants and missing listeners/observers
are not errors and never raise.
"""

from typing import Optional


class WirekitError(Exception):
    """Base exception for all wirekit-specific errors."""

    pass


class ObserverDataError(WirekitError):
    """
    Raised when an observer snapshot cannot be applied to a widget.

    Covers a missing required key, a value that fails its parse rule,
    and a snapshot that is not a mapping at all. The widget that raised
    it keeps its prior state.

    Attributes:
        widget: Name of the widget that rejected the snapshot
        field: Offending snapshot key (None when the snapshot itself is bad)
        reason: Human readable description
    """

    def __init__(self, widget: str, field: Optional[str], reason: str):
        self.widget = widget
        self.field = field
        self.reason = reason
        if field is None:
            message = f"Observer data for widget '{widget}': {reason}"
        else:
            message = f"Observer data for widget '{widget}', field '{field}': {reason}"
        super().__init__(message)


class EventDecodeError(WirekitError):
    """Raised when a runtime payload cannot be turned into an Event."""

    pass


class ConfigurationError(WirekitError):
    """Raised when there's an issue with widget or tree configuration."""

    pass


class DuplicateWidgetError(ConfigurationError):
    """Raised when two widgets in one tree share a name."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Widget name already in use: {name}")


class ReentrantDispatchError(WirekitError):
    """Raised when a listener or observer re-enters a dispatch in progress."""

    pass
