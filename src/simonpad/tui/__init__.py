"""Textual terminal UI."""

from .app import SimonPadApp

__all__ = ["SimonPadApp"]
