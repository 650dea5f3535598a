"""Application configuration model."""

from pathlib import Path

from pydantic import BaseModel, Field, field_serializer, model_validator

from simonpad.model_manager.persistence import PydanticPersistence

from .enums import PadColor

DEFAULT_HOME = Path.home() / ".simonpad"
DEFAULT_CONFIG_PATH = DEFAULT_HOME / "config.json"


class PacingConfig(BaseModel):
    """Presentation speed curve (all values in milliseconds).

    The base delay shrinks with the sequence length and each later step
    in a sequence is played slightly faster than the previous one.
    """

    base_delay_ms: int = Field(default=500, gt=0, description="Step delay for an empty sequence")
    level_step_ms: int = Field(default=8, ge=0, description="Base delay reduction per level")
    base_floor_ms: int = Field(default=160, gt=0, description="Lowest base delay")
    position_step_ms: int = Field(default=8, ge=0, description="Delay reduction per step within a sequence")
    min_step_delay_ms: int = Field(default=140, gt=0, description="Lowest delay between two steps")
    min_flash_ms: int = Field(default=120, gt=0, description="Lowest pad flash duration")


class ServerConfig(BaseModel):
    """Static file server settings."""

    host: str = Field(default="127.0.0.1", description="Interface to bind")
    port: int = Field(default=3000, ge=0, le=65535, description="TCP port")
    root: Path = Field(default_factory=Path.cwd, description="Directory served as the site root")
    entry_document: str = Field(default="game.html", description="Document served for '/'")

    @field_serializer("root")
    def serialize_path(self, path: Path) -> str:
        """Serialize Path to string."""
        return str(path)


def _default_key_map() -> dict[str, PadColor]:
    return {
        "a": PadColor.GREEN,
        "s": PadColor.RED,
        "d": PadColor.YELLOW,
        "f": PadColor.BLUE,
    }


class GameConfig(BaseModel):
    """Application configuration and settings."""

    # Timing
    debounce_ms: int = Field(
        default=100, ge=0, description="Inputs closer than this to the last accepted one are dropped"
    )
    lead_in_ms: int = Field(
        default=350, ge=0, description="Pause between pressing start and the first presented step"
    )
    round_delay_ms: int = Field(
        default=450, ge=0, description="Pause between a completed round and the next presentation"
    )
    pacing: PacingConfig = Field(default_factory=PacingConfig, description="Presentation pacing")

    # Input
    key_map: dict[str, PadColor] = Field(
        default_factory=_default_key_map, description="Keyboard key to pad mapping"
    )
    start_keys: list[str] = Field(
        default_factory=lambda: ["space", "enter"], description="Keys that start a game"
    )

    # Audio
    muted: bool = Field(default=False, description="Start with audio muted")
    sounds_dir: Path | None = Field(
        default=None,
        description="Directory holding piano-<color>.wav samples (None = synthesized tones)",
    )
    audio_device: int | None = Field(
        default=None, description="Audio output device ID (None = system default)"
    )

    # Persistence
    storage_path: Path = Field(
        default_factory=lambda: DEFAULT_HOME / "storage.json",
        description="Key-value file holding the high score",
    )

    # Static server
    server: ServerConfig = Field(default_factory=ServerConfig, description="Static file server")

    @model_validator(mode="after")
    def check_keys_disjoint(self) -> "GameConfig":
        """A key cannot both start the game and press a pad."""
        overlap = set(self.key_map) & set(self.start_keys)
        if overlap:
            raise ValueError(f"Keys used both as pad and start keys: {sorted(overlap)}")
        return self

    @field_serializer("sounds_dir", "storage_path")
    def serialize_path(self, path: Path | None) -> str | None:
        """Serialize Path to string."""
        return str(path) if path is not None else None

    @classmethod
    def load_or_default(cls, path: Path | None = None) -> "GameConfig":
        """
        Load config from file or return default.

        Args:
            path: Path to config file. If None, uses ~/.simonpad/config.json.

        Raises:
            ConfigFileInvalidError: If config file has invalid JSON syntax
            ConfigValidationError: If config values fail validation
        """
        return PydanticPersistence.load_json_or_default(path or DEFAULT_CONFIG_PATH, cls)

    def save(self, path: Path | None = None) -> None:
        """Save config to file."""
        PydanticPersistence.save_json(self, path or DEFAULT_CONFIG_PATH)
