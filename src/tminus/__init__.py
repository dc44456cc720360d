"""tminus: live countdowns to events, stored entirely in a URL query string."""

__version__ = "0.1.0"
