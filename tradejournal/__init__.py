"""Trading journal analytics and position sizing."""

__version__ = "0.1.0"
