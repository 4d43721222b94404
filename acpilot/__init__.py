"""Auto-mode decision engine for split-system air conditioners."""

__version__ = "0.4.0"
