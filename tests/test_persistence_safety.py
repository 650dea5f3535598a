"""Tests for persistence safety features (backups, atomic writes, corruption handling)."""

import json
from pathlib import Path

import pytest
from pydantic import BaseModel, Field

from simonpad.exceptions import ConfigFileInvalidError, ConfigValidationError
from simonpad.model_manager.persistence import PydanticPersistence


class SampleModel(BaseModel):
    """Simple model for testing."""

    name: str = "test"
    value: int = Field(default=42, ge=0)


class TestPersistenceSafety:
    """Test safety features of PydanticPersistence."""

    def test_save_creates_backup(self, tmp_path: Path):
        """Test that save_json creates a .bak file before overwriting."""
        path = tmp_path / "config.json"

        PydanticPersistence.save_json(SampleModel(name="original", value=1), path, backup=False)
        PydanticPersistence.save_json(SampleModel(name="modified", value=2), path, backup=True)

        backup_path = path.with_suffix(".json.bak")
        assert backup_path.exists()
        assert PydanticPersistence.load_json(backup_path, SampleModel).name == "original"
        assert PydanticPersistence.load_json(path, SampleModel).name == "modified"

    def test_save_without_backup(self, tmp_path: Path):
        """Test that backup can be disabled."""
        path = tmp_path / "config.json"

        PydanticPersistence.save_json(SampleModel(name="original"), path, backup=False)
        PydanticPersistence.save_json(SampleModel(name="modified"), path, backup=False)

        assert not path.with_suffix(".json.bak").exists()

    def test_atomic_write_cleans_up_temp_file(self, tmp_path: Path):
        """Test that temporary file is cleaned up after successful write."""
        path = tmp_path / "config.json"

        PydanticPersistence.save_json(SampleModel(value=123), path)

        assert not path.with_suffix(".json.tmp").exists()
        assert json.loads(path.read_text(encoding="utf-8")) == {"name": "test", "value": 123}

    def test_load_missing_file(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            PydanticPersistence.load_json(tmp_path / "missing.json", SampleModel)

    def test_load_corrupted_file(self, tmp_path: Path):
        path = tmp_path / "config.json"
        path.write_text('{"name": "x",}', encoding="utf-8")

        with pytest.raises(ConfigFileInvalidError):
            PydanticPersistence.load_json(path, SampleModel)

    def test_load_empty_file(self, tmp_path: Path):
        path = tmp_path / "config.json"
        path.write_text("  \n", encoding="utf-8")

        with pytest.raises(ConfigFileInvalidError):
            PydanticPersistence.load_json(path, SampleModel)

    def test_load_non_utf8_file(self, tmp_path: Path):
        path = tmp_path / "config.json"
        path.write_bytes(b"\xff\xfe{}")

        with pytest.raises(ConfigFileInvalidError) as exc_info:
            PydanticPersistence.load_json(path, SampleModel)
        assert "UTF-8" in exc_info.value.parse_error

    def test_load_invalid_value(self, tmp_path: Path):
        path = tmp_path / "config.json"
        path.write_text('{"value": -5}', encoding="utf-8")

        with pytest.raises(ConfigValidationError) as exc_info:
            PydanticPersistence.load_json(path, SampleModel)
        assert "value" in exc_info.value.user_message

    def test_load_json_or_default_missing_file(self, tmp_path: Path):
        loaded = PydanticPersistence.load_json_or_default(tmp_path / "missing.json", SampleModel)
        assert loaded == SampleModel()
        assert not (tmp_path / "missing.json").exists()

    def test_load_json_or_default_with_factory(self, tmp_path: Path):
        loaded = PydanticPersistence.load_json_or_default(
            tmp_path / "missing.json", SampleModel, lambda: SampleModel(name="custom")
        )
        assert loaded.name == "custom"

    def test_load_json_or_default_corrupted_file_raises(self, tmp_path: Path):
        path = tmp_path / "config.json"
        path.write_text("{broken", encoding="utf-8")

        with pytest.raises(ConfigFileInvalidError):
            PydanticPersistence.load_json_or_default(path, SampleModel)

    def test_save_creates_parent_directories(self, tmp_path: Path):
        path = tmp_path / "a" / "b" / "config.json"
        PydanticPersistence.save_json(SampleModel(), path)
        assert path.exists()
