# plugins/core_hljs/preferences.py

from typing import Optional, Set, Union

from pydantic import BaseModel, Field

from pagekit.core.context import Context

from .contracts import LibraryVariant
from .languages import HljsLang
from .themes import HljsTheme


class HljsPreferences(BaseModel):
    """
    Highlighting preferences accumulated while one page is built.

    Lives on the render context (``Context.extension``) and is read once by
    the asset resolver after the body has been prepared.
    """
    languages: Set[HljsLang] = Field(default_factory=set)
    theme: Optional[HljsTheme] = None
    forced_variant: Optional[LibraryVariant] = None
    disabled: bool = False

    def enable_language(self, language: HljsLang) -> None:
        self.languages.add(language)

    def set_theme(self, theme: HljsTheme) -> None:
        # Last writer wins.
        self.theme = theme

    def force_variant(self, variant: LibraryVariant) -> None:
        self.forced_variant = variant

    def disable(self) -> None:
        # Monotonic: nothing re-enables highlighting for this request.
        self.disabled = True


def get_preferences(cx: Context) -> HljsPreferences:
    return cx.extension(HljsPreferences)


def enable_language(cx: Context, language: Union[HljsLang, str]) -> None:
    """Enable a language for this page. At least one is needed to load the library."""
    if not isinstance(language, HljsLang):
        language = HljsLang.from_name(language)
    get_preferences(cx).enable_language(language)


def set_theme(cx: Context, theme: Union[HljsTheme, str]) -> None:
    """Theme used by every snippet of this page."""
    if not isinstance(theme, HljsTheme):
        theme = HljsTheme.from_name(theme)
    get_preferences(cx).set_theme(theme)


def force_variant(cx: Context, variant: Union[LibraryVariant, str]) -> None:
    """Use this library variant regardless of the ``hljs.library`` setting."""
    get_preferences(cx).force_variant(LibraryVariant(variant))


def disable(cx: Context) -> None:
    """No highlight.js assets at all for this page."""
    get_preferences(cx).disable()
