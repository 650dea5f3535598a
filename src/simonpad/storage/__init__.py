"""High score storage."""

from .score_store import JsonScoreStore, MemoryScoreStore

__all__ = ["JsonScoreStore", "MemoryScoreStore"]
