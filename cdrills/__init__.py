"""Small numeric and decision drills, with a command-line entry point."""

__version__ = "0.1.0"

__all__ = ["basics", "decisions", "integers", "cli"]