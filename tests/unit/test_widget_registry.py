"""
Tests for WidgetRegistry.
"""

import unittest

from wirekit.managers.registry import WidgetRegistry
from wirekit.widgets.base import Widget
from wirekit.widgets.checkbox import CheckBox


class MockWidget(Widget):
    """Mock widget for testing."""

    widget_type = "mock"

    def eval(self):
        return f"<span>{self.name}</span>"

    def trigger(self, event):
        pass

    def on_update(self):
        pass

    @classmethod
    def from_config(cls, config):
        return cls(config["name"])


class UntypedWidget(MockWidget):
    """Widget without a type key."""

    widget_type = None


class InvalidWidget:
    """Invalid widget that doesn't inherit from Widget."""

    widget_type = "invalid"


class TestWidgetRegistry(unittest.TestCase):
    """Test WidgetRegistry functionality."""

    def setUp(self):
        """Set up test fixtures."""
        self.registry = WidgetRegistry()

    def test_register_valid_widget(self):
        """Test registering a valid widget."""
        self.registry.register(MockWidget)
        self.assertIn("mock", self.registry.list_widgets())
        self.assertEqual(self.registry.get_widget_class("mock"), MockWidget)

    def test_register_invalid_widget(self):
        """Test that registering invalid widget raises TypeError."""
        with self.assertRaises(TypeError):
            self.registry.register(InvalidWidget)

    def test_register_instance_rejected(self):
        """Test that registering an instance raises TypeError."""
        with self.assertRaises(TypeError):
            self.registry.register(MockWidget("a"))

    def test_register_untyped_widget(self):
        """Test that a widget without widget_type raises ValueError."""
        with self.assertRaises(ValueError):
            self.registry.register(UntypedWidget)

    def test_register_duplicate_widget(self):
        """Test registering duplicate widget type logs a warning."""
        self.registry.register(MockWidget)
        with self.assertLogs("wirekit.managers.registry", level="WARNING") as logs:
            self.registry.register(MockWidget)
        self.assertIn("Overwriting existing widget type: mock", logs.output[0])
        self.assertEqual(self.registry.get_widget_class("mock"), MockWidget)

    def test_get_nonexistent_widget(self):
        """Test getting a widget that doesn't exist."""
        self.assertIsNone(self.registry.get_widget_class("nonexistent"))

    def test_list_widgets_empty(self):
        """Test listing widgets when registry is empty."""
        self.assertEqual(self.registry.list_widgets(), [])

    def test_auto_discover_finds_checkbox(self):
        """Test auto-discovery registers bundled widgets."""
        self.registry.auto_discover()
        self.assertIs(self.registry.get_widget_class("checkbox"), CheckBox)

    def test_auto_discover_is_idempotent(self):
        """Test running auto-discovery twice keeps one entry per type."""
        self.registry.auto_discover()
        self.registry.auto_discover()
        self.assertEqual(self.registry.list_widgets().count("checkbox"), 1)


class TestWidgetBase(unittest.TestCase):
    """Test Widget base class functionality."""

    def test_missing_widget_type(self):
        """Test instantiating a widget without widget_type fails."""
        with self.assertRaises(ValueError):
            UntypedWidget("a")

    def test_abstract_methods_required(self):
        """Test a widget must implement the whole contract."""

        class Partial(Widget):
            widget_type = "partial"

            def eval(self):
                return ""

        with self.assertRaises(TypeError):
            Partial("a")

    def test_repr(self):
        """Test repr includes type and name."""
        self.assertEqual(repr(MockWidget("a")), "<MockWidget(type=mock, name='a')>")


if __name__ == "__main__":
    unittest.main()
