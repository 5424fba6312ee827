"""
Pytest configuration and fixtures
"""

import pytest
import yaml
from unittest.mock import Mock

from wirekit.utils.listener import Listener
from wirekit.utils.observer import StaticObserver


class RecordingListener(Listener):
    """Listener that remembers every call"""

    def __init__(self):
        self.changes = []
        self.clicks = 0

    def on_click(self):
        self.clicks += 1

    def on_change(self, value):
        self.changes.append(value)


@pytest.fixture
def sample_config():
    """Sample widget tree configuration for testing"""
    return {
        "settings": {
            "fail_fast": False
        },
        "widgets": [
            {
                "type": "checkbox",
                "name": "notifications",
                "text": "Enable notifications",
                "checked": True
            },
            {
                "type": "checkbox",
                "name": "dark_mode",
                "text": "Dark mode",
                "stretch": True
            }
        ]
    }


@pytest.fixture
def config_file(tmp_path, sample_config):
    """Create a temporary config file"""
    config_path = tmp_path / "test_config.yaml"
    with open(config_path, 'w') as f:
        yaml.dump(sample_config, f)
    return config_path


@pytest.fixture
def recording_listener():
    """Listener that records on_change values"""
    return RecordingListener()


@pytest.fixture
def mock_listener():
    """Mock listener"""
    return Mock(spec=Listener)


@pytest.fixture
def yes_observer():
    """Observer returning a checked snapshot"""
    return StaticObserver({"text": "Yes", "checked": "true"})
