"""
Widget system: stateful elements that render to markup and react to events.

Every widget implements the same contract:
- eval(): render current state
- trigger(event): react to an event from the runtime
- on_update(): refresh state from an observer

This module provides the base widget and the bundled widget types.
"""

from .base import Widget
from .checkbox import CheckBox, CheckBoxBuilder

__all__ = ["Widget", "CheckBox", "CheckBoxBuilder"]
