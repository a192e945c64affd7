"""Local web control panel for headless Linux hosts."""

__version__ = "1.0.0"
