"""Kometa Studio - edit Kometa configs without losing unknown keys or leaking secrets."""

__version__ = "0.1.0"
