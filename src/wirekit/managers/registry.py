"""
Registry for discovering widget types by their config key.
"""

import logging
from typing import Dict, Optional, Type

from wirekit.widgets.base import Widget

logger = logging.getLogger(__name__)


class WidgetRegistry:
    """Registry for all available widget types"""

    def __init__(self):
        """Initialize empty registry."""
        self._widgets: Dict[str, Type[Widget]] = {}

    def register(self, widget_class: type) -> None:
        """
        Register a widget class.

        Args:
            widget_class: Widget class to register

        Raises:
            TypeError: If widget_class doesn't inherit from Widget
            ValueError: If widget_type is not defined
        """
        if not isinstance(widget_class, type) or not issubclass(widget_class, Widget):
            raise TypeError(f"{widget_class} must inherit from Widget")

        widget_type = widget_class.widget_type
        if not widget_type:
            raise ValueError(f"{widget_class.__name__} must define widget_type class attribute")

        if widget_type in self._widgets:
            logger.warning(f"Overwriting existing widget type: {widget_type}")

        self._widgets[widget_type] = widget_class
        logger.debug(f"Registered widget type: {widget_type}")

    def get_widget_class(self, widget_type: str) -> Optional[Type[Widget]]:
        """
        Get widget class by type.

        Returns:
            Widget class or None if not found
        """
        return self._widgets.get(widget_type)

    def list_widgets(self) -> list:
        """List all registered widget types"""
        return list(self._widgets.keys())

    def auto_discover(self) -> None:
        """Auto-discover and register all widget modules."""
        import importlib
        import inspect
        import pkgutil

        import wirekit.widgets as widgets_pkg

        for _importer, modname, _ispkg in pkgutil.iter_modules(widgets_pkg.__path__):
            if modname in ["base", "__init__"]:
                continue

            try:
                module = importlib.import_module(f"wirekit.widgets.{modname}")
            except ImportError as e:
                logger.error(f"Failed to load widget module {modname}: {e}")
                continue

            for attr_name in dir(module):
                attr = getattr(module, attr_name)
                if (
                    isinstance(attr, type)
                    and issubclass(attr, Widget)
                    and attr is not Widget
                    and not inspect.isabstract(attr)
                    and attr.widget_type
                    and self._widgets.get(attr.widget_type) is not attr
                ):
                    self.register(attr)
                    logger.info(f"Auto-registered widget: {attr.widget_type}")


# Global registry instance
registry = WidgetRegistry()
