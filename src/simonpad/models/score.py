"""Persisted high score record."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

HIGH_SCORE_KEY = "simon_highscore"


class HighScoreRecord(BaseModel):
    """
    Key-value layout of the storage file.

    The high score is kept as a string under a single named key, the same
    shape a browser's localStorage would hold. Unknown keys are preserved
    so the file can be shared with other settings.
    """

    model_config = ConfigDict(extra="allow")

    simon_highscore: str = Field(
        default="0", pattern=r"^\d+$", description="High score as a non-negative integer string"
    )

    @field_validator("simon_highscore", mode="before")
    @classmethod
    def accept_integer(cls, v):
        """Older files may store the score as a JSON number."""
        if isinstance(v, int) and not isinstance(v, bool) and v >= 0:
            return str(v)
        return v

    @property
    def value(self) -> int:
        """High score as an integer."""
        return int(self.simon_highscore)

    @classmethod
    def from_value(cls, value: int) -> "HighScoreRecord":
        """Create a record for an integer score."""
        if value < 0:
            raise ValueError("High score cannot be negative")
        return cls(simon_highscore=str(value))
