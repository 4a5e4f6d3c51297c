"""Page Object layer for back office UI regression tests."""

__version__ = "0.1.0"
