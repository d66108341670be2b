"""Minimal full-screen terminal text editor."""

__all__ = [
    "adapters",
    "buffer",
    "display",
    "errors",
    "runtime",
    "session",
]

__version__ = "0.1.0"
