"""
Observer capability: where a widget pulls external state from.
"""

from abc import ABC, abstractmethod
from typing import Callable, Dict, Mapping


class Observer(ABC):
    """
    Source of state snapshots for a widget.

    observe() is called synchronously from the widget's on_update() and
    must not re-enter that widget. The returned mapping holds string
    values; each widget documents the keys it needs and how they parse.
    """

    @abstractmethod
    def observe(self) -> Mapping[str, str]:
        """
        Return a snapshot of named fields.

        Returns:
            Mapping of field name to string value
        """
        pass


class StaticObserver(Observer):
    """Observer over a dict the host keeps up to date."""

    def __init__(self, snapshot: Dict[str, str]):
        self.snapshot = snapshot

    def observe(self) -> Mapping[str, str]:
        return dict(self.snapshot)


class CallbackObserver(Observer):
    """Observer delegating to a callable, e.g. a bound method on a model."""

    def __init__(self, callback: Callable[[], Mapping[str, str]]):
        self._callback = callback

    def observe(self) -> Mapping[str, str]:
        return self._callback()
