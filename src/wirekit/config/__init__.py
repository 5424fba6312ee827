"""
YAML configuration for widget trees.
"""

from .loader import ConfigLoader

__all__ = ["ConfigLoader"]
