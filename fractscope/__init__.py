"""Interactive escape-time fractal viewer with supporting text and buffer helpers."""

__version__ = "1.0.0"

__all__ = [
    "app",
    "buffers",
    "chars",
    "colors",
    "fdio",
    "formatting",
    "linked",
    "search",
    "sets",
    "textops",
    "view",
]