"""Status line generator for window-manager bars: components, configuration and update loop."""

__version__ = "1.0"