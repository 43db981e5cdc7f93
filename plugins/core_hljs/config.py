# plugins/core_hljs/config.py
"""
Settings of the ``[hljs]`` section (``Settings.hljs``).

    hljs:
      library: common   # "core" (default) or "common"
      theme: zenburn    # kebab-case theme name, default "default"
      tabsize: 8        # spaces per tab character, default 4

Unrecognized values never fail: a warning is logged and the default is used.
"""
import logging
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

from .contracts import LibraryVariant
from .themes import HljsTheme, lookup_theme

logger = logging.getLogger(__name__)

DEFAULT_TABSIZE = 4


class HljsSettings(BaseModel):
    model_config = ConfigDict(frozen=True)

    library: LibraryVariant = LibraryVariant.CORE
    theme: HljsTheme = HljsTheme.DEFAULT
    tabsize: int = DEFAULT_TABSIZE

    @field_validator('library', mode='before')
    @classmethod
    def fallback_library(cls, v: Any) -> LibraryVariant:
        if isinstance(v, LibraryVariant):
            return v
        try:
            return LibraryVariant(str(v).strip().lower())
        except ValueError:
            logger.warning(f"Unrecognized '{v}' HighlightJS library, 'core' is assumed")
            return LibraryVariant.CORE

    @field_validator('theme', mode='before')
    @classmethod
    def fallback_theme(cls, v: Any) -> HljsTheme:
        theme = lookup_theme(v)
        if theme is None:
            logger.warning(f"Unrecognized theme '{v}' for HighlightJS, 'default' is assumed")
            return HljsTheme.default()
        return theme

    @field_validator('tabsize', mode='before')
    @classmethod
    def fallback_tabsize(cls, v: Any) -> int:
        tabsize = 0
        if isinstance(v, int) and not isinstance(v, bool):
            tabsize = v
        elif isinstance(v, str) and v.strip().isdigit():
            tabsize = int(v)
        if tabsize < 1:
            logger.warning(f"Invalid tab size '{v}' for HighlightJS, {DEFAULT_TABSIZE} is assumed")
            return DEFAULT_TABSIZE
        return tabsize

    @property
    def tab_replace(self) -> str:
        return " " * self.tabsize

