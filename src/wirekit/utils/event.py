"""
Event values delivered to widgets by the runtime.
"""

import json
import logging
from dataclasses import dataclass
from typing import Any, Mapping

from .errors import EventDecodeError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Event:
    """
    Base class for every event variant.

    Events are immutable and compare by value. Widgets dispatch on the
    concrete variant and ignore the ones they do not know.

    Example:
        >>> Event.from_dict({"type": "change", "source": "cb1", "value": ""})
        Change(source='cb1', value='')
    """

    @staticmethod
    def from_dict(payload: Mapping[str, Any]) -> "Event":
        """
        Build an event from a runtime payload.

        Args:
            payload: Mapping with a ``type`` key plus the variant fields

        Returns:
            The matching Event variant, or Undefined for unknown types

        Raises:
            EventDecodeError: If the payload is not a mapping or a known
                variant is missing a required field
        """
        if not isinstance(payload, Mapping):
            raise EventDecodeError(f"Event payload must be a mapping, got {type(payload).__name__}")

        event_type = str(payload.get("type", "")).lower()

        if event_type == "update":
            return Update()

        if event_type == "change":
            source = payload.get("source")
            if not isinstance(source, str):
                raise EventDecodeError("Change event requires a string 'source'")
            value = payload.get("value")
            if value is None:
                value = ""
            if not isinstance(value, str):
                raise EventDecodeError("Change event 'value' must be a string")
            return Change(source=source, value=value)

        if event_type == "keydown":
            key = payload.get("key")
            if not isinstance(key, str):
                raise EventDecodeError("Keydown event requires a string 'key'")
            return Keydown(key=key)

        logger.debug(f"Unrecognized event type: {event_type!r}")
        return Undefined()

    @staticmethod
    def change_js(source: str, value: str) -> str:
        """
        JavaScript that makes the runtime deliver ``Change(source, value)``.

        Embedded by widgets in their interaction attributes. The payload is
        JSON so it decodes back through from_dict().

        Args:
            source: Name of the widget the change targets
            value: Payload forwarded to the listener

        Returns:
            Unescaped JavaScript snippet
        """
        payload = json.dumps({"type": "change", "source": source, "value": value})
        return f"emit({payload})"


@dataclass(frozen=True)
class Update(Event):
    """Broadcast refresh: widgets pull a fresh snapshot from their observer."""


@dataclass(frozen=True)
class Change(Event):
    """Interaction addressed to the widget whose name equals ``source``."""

    source: str
    value: str = ""


@dataclass(frozen=True)
class Keydown(Event):
    """Key pressed while the view had focus."""

    key: str


@dataclass(frozen=True)
class Undefined(Event):
    """Payload the runtime could not classify."""
