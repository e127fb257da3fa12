"""Terminal output helpers."""

from cli.display.console import console, print_settings

__all__ = ["console", "print_settings"]
