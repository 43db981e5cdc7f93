# tests/test_settings.py

import os
import logging
from pathlib import Path

import pytest

from pagekit.core.settings import Settings, load_settings, settings_path

from plugins.core_hljs.contracts import LibraryVariant
from plugins.core_hljs.themes import HljsTheme


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    for name in list(os.environ):
        if name.upper().startswith("PAGEKIT"):
            monkeypatch.delenv(name)


def write_settings(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "settings.yaml"
    path.write_text(text, encoding="utf-8")
    return path


class TestLoadSettings:

    def test_reads_yaml_file(self, tmp_path: Path):
        path = write_settings(tmp_path, "hljs:\n  library: common\n  tabsize: 8\nlogging:\n  level: warning\n")

        settings = load_settings(path)

        assert isinstance(settings, Settings)
        assert settings.hljs.library is LibraryVariant.COMMON
        assert settings.hljs.theme is HljsTheme.DEFAULT
        assert settings.hljs.tabsize == 8
        assert settings.logging.level == "WARNING"

    def test_missing_file_gives_defaults(self, tmp_path: Path):
        settings = load_settings(tmp_path / "nope.yaml")

        assert settings.hljs.library is LibraryVariant.CORE
        assert settings.hljs.tabsize == 4
        assert settings.logging.level is None

    @pytest.mark.parametrize("text", ["", "hljs:\nlogging:\n"])
    def test_empty_file_or_sections_give_defaults(self, tmp_path: Path, text: str):
        settings = load_settings(write_settings(tmp_path, text))

        assert settings.hljs.theme is HljsTheme.DEFAULT
        assert settings.logging.level is None

    def test_path_from_environment(self, tmp_path: Path, monkeypatch):
        path = write_settings(tmp_path, "hljs:\n  theme: zenburn\n")
        monkeypatch.setenv("PAGEKIT_SETTINGS", str(path))

        assert settings_path() == path
        assert load_settings().hljs.theme is HljsTheme.ZENBURN

    def test_environment_overrides_file(self, tmp_path: Path, monkeypatch):
        path = write_settings(tmp_path, "hljs:\n  library: common\n  theme: zenburn\n  tabsize: 4\n")
        monkeypatch.setenv("PAGEKIT__HLJS__THEME", "dracula")
        monkeypatch.setenv("PAGEKIT__HLJS__TABSIZE", "2")
        monkeypatch.setenv("PAGEKIT__LOGGING__LEVEL", "debug")
        monkeypatch.setenv("UNRELATED", "x")

        settings = load_settings(path)

        assert settings.hljs.theme is HljsTheme.DRACULA
        assert settings.hljs.tabsize == 2
        assert settings.hljs.library is LibraryVariant.COMMON
        assert settings.logging.level == "DEBUG"

    def test_invalid_values_fall_back_with_warning(self, tmp_path: Path, caplog):
        path = write_settings(tmp_path, "hljs:\n  library: turbo\n  theme: neon-unicorn\n  tabsize: wide\n")

        with caplog.at_level(logging.WARNING):
            settings = load_settings(path)

        assert settings.hljs.library is LibraryVariant.CORE
        assert settings.hljs.theme is HljsTheme.DEFAULT
        assert settings.hljs.tabsize == 4
        assert "Unrecognized 'turbo' HighlightJS library" in caplog.text


def test_keyword_arguments_win_over_environment(monkeypatch):
    monkeypatch.setenv("PAGEKIT__HLJS__THEME", "dracula")

    settings = Settings(hljs={"theme": "monokai"})

    assert settings.hljs.theme is HljsTheme.MONOKAI


def test_model_validate_ignores_environment(monkeypatch):
    monkeypatch.setenv("PAGEKIT__HLJS__THEME", "dracula")

    settings = Settings.model_validate({"hljs": {"library": "common"}})

    assert settings.hljs.library is LibraryVariant.COMMON
    assert settings.hljs.theme is HljsTheme.DEFAULT
