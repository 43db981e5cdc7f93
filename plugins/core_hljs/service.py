# plugins/core_hljs/service.py

import logging
from typing import Union

from pagekit.core.context import Context

from . import preferences
from .config import HljsSettings
from .contracts import AssetManifest, LibraryVariant
from .languages import HljsLang
from .resolver import apply_manifest, resolve_assets
from .themes import HljsTheme

logger = logging.getLogger(__name__)


class HighlightJS:
    """
    Public API of the plugin, registered in the container as ``hljs``.

    Every call writes into the preferences of the given render context and
    returns the service, so calls can be chained:

        hljs.enable_language(HljsLang.RUST, cx).set_theme(HljsTheme.ZENBURN, cx)
    """
    def __init__(self, settings: HljsSettings):
        self.settings = settings

    def enable_language(self, language: Union[HljsLang, str], cx: Context) -> "HighlightJS":
        preferences.enable_language(cx, language)
        return self

    def set_theme(self, theme: Union[HljsTheme, str], cx: Context) -> "HighlightJS":
        preferences.set_theme(cx, theme)
        return self

    def disable_hljs(self, cx: Context) -> "HighlightJS":
        preferences.disable(cx)
        return self

    def force_core_lib(self, cx: Context) -> "HighlightJS":
        """Load core.min.js plus only the languages enabled on this page."""
        preferences.force_variant(cx, LibraryVariant.CORE)
        return self

    def force_common_lib(self, cx: Context) -> "HighlightJS":
        """
        Load the common bundle (about 40 languages in one file). Snippets in a
        language outside the bundle are left unhighlighted.
        """
        preferences.force_variant(cx, LibraryVariant.COMMON)
        return self

    def manifest(self, cx: Context) -> AssetManifest:
        return resolve_assets(preferences.get_preferences(cx), self.settings)

    def add_assets(self, cx: Context) -> AssetManifest:
        manifest = self.manifest(cx)
        if manifest.is_empty:
            logger.debug("No HighlightJS assets needed for this page.")
        else:
            apply_manifest(manifest, cx)
        return manifest
