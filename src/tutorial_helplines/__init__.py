"""Generate game mod helpLines and localization files from Markdown tutorials."""

__version__ = "1.0.0"
