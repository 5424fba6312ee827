"""
Listener capability: what a widget calls when the user acts on it.
"""


class Listener:
    """
    Base class for user-interaction callbacks.

    Both hooks are no-ops, so implementations override only the ones
    their widget fires. A widget owns at most one listener; exceptions
    raised here propagate out of the widget's trigger() untouched.

    Listeners must not call back into the widget that invoked them.
    Applications that need to reach shared state should hold a
    non-owning handle to it (an id, or an injected callable).

    Example:
        >>> class PrintListener(Listener):
        ...     def on_change(self, value):
        ...         print(f"changed: {value!r}")
    """

    def on_click(self) -> None:
        """Called when the widget's primary interaction fires with no payload."""
        return None

    def on_change(self, value: str) -> None:
        """
        Called after the widget changed state because of the user.

        Args:
            value: Value carried by the Change event, unmodified
        """
        return None
