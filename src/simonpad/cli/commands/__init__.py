"""CLI commands for simonpad."""

from .audio import audio_group
from .config import config_group
from .score import score_group
from .serve import serve

__all__ = ["audio_group", "config_group", "score_group", "serve"]
