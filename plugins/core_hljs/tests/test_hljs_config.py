# plugins/core_hljs/tests/test_hljs_config.py

import logging

import pytest
from pydantic import ValidationError

from pagekit.core.settings import Settings

from plugins.core_hljs.config import HljsSettings
from plugins.core_hljs.contracts import LibraryVariant
from plugins.core_hljs.themes import HljsTheme


def test_defaults():
    config = Settings.model_validate({}).hljs

    assert config.library is LibraryVariant.CORE
    assert config.theme is HljsTheme.DEFAULT
    assert config.tabsize == 4
    assert config.tab_replace == "    "


def test_recognized_values():
    config = Settings.model_validate({"hljs": {"library": "Common", "theme": "zenburn", "tabsize": 8}}).hljs

    assert config.library is LibraryVariant.COMMON
    assert config.theme is HljsTheme.ZENBURN
    assert config.tabsize == 8


def test_unknown_library_falls_back_to_core(caplog):
    with caplog.at_level(logging.WARNING):
        config = HljsSettings(library="turbo")

    assert config.library is LibraryVariant.CORE
    assert "Unrecognized 'turbo' HighlightJS library" in caplog.text


def test_unknown_theme_falls_back_to_default(caplog):
    with caplog.at_level(logging.WARNING):
        config = HljsSettings(theme="neon-unicorn")

    assert config.theme is HljsTheme.DEFAULT
    assert "Unrecognized theme 'neon-unicorn'" in caplog.text


@pytest.mark.parametrize("tabsize", [0, -2, "wide", None, True, 2.5])
def test_invalid_tabsize_falls_back(tabsize, caplog):
    with caplog.at_level(logging.WARNING):
        config = HljsSettings(tabsize=tabsize)

    assert config.tabsize == 4
    assert "Invalid tab size" in caplog.text


def test_numeric_string_tabsize():
    assert HljsSettings(tabsize="2").tabsize == 2


def test_settings_are_frozen():
    config = HljsSettings()
    with pytest.raises(ValidationError):
        config.tabsize = 2
