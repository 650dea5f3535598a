"""High score persistence."""

import logging
from pathlib import Path

from simonpad.exceptions import ConfigurationError, ScoreStorageError
from simonpad.model_manager import PydanticPersistence
from simonpad.models import HIGH_SCORE_KEY, HighScoreRecord

logger = logging.getLogger(__name__)


class MemoryScoreStore:
    """ScoreStore that lives only as long as the process."""

    def __init__(self, value: int = 0):
        self._value = value

    def load(self) -> int:
        return self._value

    def save(self, value: int) -> None:
        self._value = value


class JsonScoreStore:
    """
    ScoreStore backed by a small JSON key-value file.

    The file holds `{"simon_highscore": "<int>"}` plus any other keys that
    were already there. Storage is best-effort: a missing or unparsable
    file reads as 0, and when the file cannot be written the score is
    kept in memory for the rest of the session.
    """

    def __init__(self, path: Path):
        self.path = path
        self._record = HighScoreRecord()
        self._memory = MemoryScoreStore()
        self.degraded = False

    def load(self) -> int:
        """Read the stored high score (0 if absent or unreadable)."""
        if self.degraded:
            return self._memory.load()
        try:
            self._record = PydanticPersistence.load_json(self.path, HighScoreRecord)
        except FileNotFoundError:
            logger.debug(f"No high score file at {self.path}")
            self._record = HighScoreRecord()
        except ConfigurationError as e:
            logger.warning(f"Ignoring unreadable high score file: {e.technical_message or e}")
            self._record = HighScoreRecord()
        except OSError as e:
            self._degrade(ScoreStorageError(str(self.path), "read", str(e)))
            return self._memory.load()

        self._memory.save(self._record.value)
        return self._record.value

    def save(self, value: int) -> None:
        """Persist `value` as the high score; never raises."""
        self._memory.save(value)
        if self.degraded:
            return

        record = self._record.model_dump()
        record[HIGH_SCORE_KEY] = str(value)
        self._record = HighScoreRecord.model_validate(record)
        try:
            PydanticPersistence.save_json(self._record, self.path, backup=False)
        except (OSError, ConfigurationError) as e:
            self._degrade(ScoreStorageError(str(self.path), "write", str(e)))
            return
        logger.debug(f"Saved high score {value} to {self.path}")

    def reset(self) -> None:
        """Set the stored high score back to 0."""
        self.save(0)

    def _degrade(self, error: ScoreStorageError) -> None:
        logger.warning(error.get_full_message())
        self.degraded = True
