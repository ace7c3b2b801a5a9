"""Building blocks for end-to-end test suites: flags, configuration and feature definitions."""

__version__ = "0.1.0"
__all__ = ["envconf", "features", "flags", "types"]