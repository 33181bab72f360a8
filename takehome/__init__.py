"""Take Home - after-tax take-home pay estimates."""

__version__ = "0.3.0"
