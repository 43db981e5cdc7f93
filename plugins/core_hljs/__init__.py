# plugins/core_hljs/__init__.py
"""
Code snippets highlighted in the browser with highlight.js.

Pages add ``Snippet`` components; once the body is prepared this plugin
resolves which highlight.js files the page needs and appends them to the
page assets (``after_prepare_body`` hook, priority 99). To alter the
highlighting from that same hook, e.g. to pick a theme, register with a
lower priority (the default 10 is fine).
"""
import logging
from pathlib import Path
from typing import List

from pagekit.core.contracts import (
    Container,
    HookManager,
    HOOK_AFTER_PREPARE_BODY,
    HOOK_APP_STARTUP_COMPLETE,
    HOOK_COLLECT_STATIC_MOUNTS,
)
from pagekit.core.page import Page
from pagekit.core.static import StaticMount

from .component import Snippet
from .config import HljsSettings
from .constants import HLJS_HOOK_PRIORITY, HLJS_PREFIX, HLJS_VERSION
from .contracts import AssetManifest, LibraryVariant
from .languages import HljsLang
from .service import HighlightJS
from .themes import HljsTheme

logger = logging.getLogger(__name__)

PLUGIN_DIR = Path(__file__).parent
STATIC_DIR = PLUGIN_DIR / "static"

# Runtime script of each library variant, relative to STATIC_DIR
RUNTIME_FILES = {
    LibraryVariant.CORE: "js/core.min.js",
    LibraryVariant.COMMON: "js/highlight.min.js",
}

__all__ = [
    "AssetManifest",
    "HighlightJS",
    "HljsLang",
    "HljsSettings",
    "HljsTheme",
    "LibraryVariant",
    "Snippet",
    "HLJS_VERSION",
    "register_plugin",
]

# --- Service factories ---

def _create_hljs_settings(container: Container) -> HljsSettings:
    return container.resolve("settings").hljs

def _create_hljs(container: Container) -> HighlightJS:
    return HighlightJS(container.resolve("hljs_settings"))


# --- Hook implementations ---

async def add_hljs_assets(page: Page, container: Container) -> Page:
    """after_prepare_body: resolve and append this page's highlight.js assets."""
    hljs: HighlightJS = container.resolve("hljs")
    hljs.add_assets(page.context)
    return page

async def provide_static_mount(mounts: List[StaticMount]) -> List[StaticMount]:
    mounts.append(StaticMount(prefix=HLJS_PREFIX, directory=STATIC_DIR, name="hljs"))
    logger.debug(f"Provided HighlightJS static files under '{HLJS_PREFIX}'.")
    return mounts

async def check_static_files(container: Container) -> None:
    """app_startup_complete: warn when the configured runtime script is not installed."""
    settings: HljsSettings = container.resolve("hljs_settings")
    runtime = STATIC_DIR / RUNTIME_FILES[settings.library]
    if not runtime.is_file():
        logger.warning(
            f"HighlightJS runtime '{runtime}' is missing: copy the highlight.js {HLJS_VERSION} "
            f"files into '{STATIC_DIR}', pages will not be highlighted until then."
        )


# --- Main registration function ---
def register_plugin(container: Container, hook_manager: HookManager):
    logger.info("--> Registering [core_hljs] plugin...")

    container.register("hljs_settings", _create_hljs_settings, singleton=True)
    container.register("hljs", _create_hljs, singleton=True)

    hook_manager.add_implementation(
        HOOK_AFTER_PREPARE_BODY,
        add_hljs_assets,
        priority=HLJS_HOOK_PRIORITY,
        plugin_name="core_hljs"
    )
    hook_manager.add_implementation(HOOK_COLLECT_STATIC_MOUNTS, provide_static_mount, plugin_name="core_hljs")
    hook_manager.add_implementation(HOOK_APP_STARTUP_COMPLETE, check_static_files, plugin_name="core_hljs")

    logger.info("Plugin [core_hljs] registered.")
