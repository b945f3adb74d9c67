"""Command line interface for the Astrology API node."""

from .app import app, main

__all__ = ["app", "main"]
