# plugins/core_hljs/resolver.py
"""
Per-page highlight.js asset resolution.

``resolve_assets`` is a pure function of the page's preferences and the
``[hljs]`` settings, so resolving an unchanged page twice yields identical
manifests. Nothing here raises: catalog misses are logged and skipped.
"""
import logging
from typing import Iterable, List

from pagekit.core.assets import HeadScript, JavaScript, JavaScriptMode, StyleSheet
from pagekit.core.context import Context

from .config import HljsSettings
from .constants import HLJS_COMMON_SCRIPT, HLJS_CORE_SCRIPT, HLJS_HEAD_SCRIPT, HLJS_VERSION
from .contracts import AssetManifest, LibraryVariant
from .languages import HljsLang, lookup_language
from .preferences import HljsPreferences
from .themes import HljsTheme, lookup_theme

logger = logging.getLogger(__name__)


def _script(path: str) -> JavaScript:
    return JavaScript(path=path, version=HLJS_VERSION, mode=JavaScriptMode.NORMAL)


def _resolve_languages(requested: Iterable) -> List[HljsLang]:
    resolved = set()
    for item in requested:
        language = lookup_language(item)
        if language is None:
            logger.warning(f"Unknown HighlightJS language '{item}' skipped")
            continue
        resolved.add(language)
    return sorted(resolved, key=lambda language: language.value)


def _resolve_theme(prefs: HljsPreferences, config: HljsSettings) -> HljsTheme:
    if prefs.theme is None:
        return config.theme
    theme = lookup_theme(prefs.theme)
    if theme is None:
        logger.warning(f"Unknown HighlightJS theme '{prefs.theme}', '{config.theme.value}' is used")
        return config.theme
    return theme


def config_script(tabsize: int) -> HeadScript:
    """Inline configuration run after the runtime: no autodetection, tabs as spaces."""
    code = (
        "\n"
        "    hljs.configure({\n"
        f"        tabReplace: '{' ' * tabsize}',\n"
        "        languages: [],\n"
        "    });\n"
        "    hljs.highlightAll();\n"
    )
    return HeadScript(name=HLJS_HEAD_SCRIPT, code=code)


def resolve_assets(prefs: HljsPreferences, config: HljsSettings) -> AssetManifest:
    """Compute the assets one page needs to highlight its snippets."""
    if prefs.disabled:
        return AssetManifest()

    # Loading is demand driven: no snippet, no library.
    if not prefs.languages:
        return AssetManifest()

    variant = prefs.forced_variant or config.library
    languages = _resolve_languages(prefs.languages)

    if variant == LibraryVariant.CORE:
        javascripts = [_script(HLJS_CORE_SCRIPT)]
        javascripts += [_script(language.url) for language in languages]
    else:
        javascripts = [_script(HLJS_COMMON_SCRIPT)]
        missing = [language.value for language in languages if not language.in_common_bundle]
        if missing:
            logger.info(
                f"Languages not included in the common HighlightJS library will not be highlighted: {', '.join(missing)}"
            )

    theme = _resolve_theme(prefs, config)

    return AssetManifest(
        javascripts=javascripts,
        head_scripts=[config_script(config.tabsize)],
        stylesheets=[StyleSheet(path=theme.url, version=HLJS_VERSION)],
    )


def apply_manifest(manifest: AssetManifest, cx: Context) -> None:
    """Append a resolved manifest to the page's assets."""
    for javascript in manifest.javascripts:
        cx.add_javascript(javascript)
    for head_script in manifest.head_scripts:
        cx.add_head_script(head_script)
    for stylesheet in manifest.stylesheets:
        cx.add_stylesheet(stylesheet)
