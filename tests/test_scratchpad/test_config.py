"""Unit tests for scratchpad.config."""

import textwrap
import tomllib
from pathlib import Path

import pytest

from scratchpad.config import DEFAULT_CURSOR, ScratchpadConfig, load_config


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv("SCRATCHPAD_DIR", raising=False)
    monkeypatch.delenv("SCRATCHPAD_LOG_LEVEL", raising=False)


class TestDefaults:
    def test_missing_file_gives_defaults(self, tmp_path: Path):
        config = load_config(tmp_path)
        assert config.notes_dir == tmp_path / ".scratchpad"
        assert config.initial_content == "# "
        assert config.cursor == DEFAULT_CURSOR
        assert config.log_level == "WARNING"

    def test_from_dict_flat(self, tmp_path: Path):
        config = ScratchpadConfig.from_dict(tmp_path, {"notes_subdir": "pad"})
        assert config.notes_dir == tmp_path / "pad"


class TestTomlFile:
    def test_reads_scratchpad_section(self, tmp_path: Path):
        (tmp_path / "scratchpad.toml").write_text(
            textwrap.dedent("""\
                [scratchpad]
                notes_subdir    = "notes/pad"
                initial_content = "# \\n"
                cursor          = [1, 0]
                log_level       = "DEBUG"
                unknown_key     = true
            """),
            encoding="utf-8",
        )
        config = load_config(tmp_path)
        assert config.notes_dir == tmp_path / "notes" / "pad"
        assert config.initial_content == "# \n"
        assert config.cursor == (1, 0)
        assert config.log_level == "DEBUG"

    def test_explicit_path(self, tmp_path: Path):
        custom = tmp_path / "elsewhere.toml"
        custom.write_text('[scratchpad]\nnotes_subdir = "other"\n', encoding="utf-8")
        assert load_config(tmp_path, custom).notes_subdir == "other"

    def test_malformed_file_raises(self, tmp_path: Path):
        (tmp_path / "scratchpad.toml").write_text("[scratchpad\n", encoding="utf-8")
        with pytest.raises(tomllib.TOMLDecodeError):
            load_config(tmp_path)


class TestOverrides:
    def test_env_overrides_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        (tmp_path / "scratchpad.toml").write_text('[scratchpad]\nnotes_subdir = "file"\n', encoding="utf-8")
        monkeypatch.setenv("SCRATCHPAD_DIR", "env")
        monkeypatch.setenv("SCRATCHPAD_LOG_LEVEL", "INFO")
        config = load_config(tmp_path)
        assert config.notes_subdir == "env"
        assert config.log_level == "INFO"

    def test_kwargs_override_env(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("SCRATCHPAD_DIR", "env")
        config = load_config(tmp_path, notes_subdir="kwarg", log_level="ERROR")
        assert config.notes_subdir == "kwarg"
        assert config.log_level == "ERROR"
