# plugins/hljs_sample/__init__.py
import logging
from typing import List

from fastapi import APIRouter

from pagekit.core.contracts import (
    Container,
    HookManager,
    HOOK_AFTER_PREPARE_BODY,
    HOOK_COLLECT_API_ROUTERS,
)
from pagekit.core.page import Page

from plugins.core_hljs import HighlightJS, HljsTheme

logger = logging.getLogger(__name__)


async def provide_api_router(routers: List[APIRouter]) -> List[APIRouter]:
    from .router import sample_router
    routers.append(sample_router)
    logger.debug("Provided HighlightJS sample router.")
    return routers


async def use_sunburst_theme(page: Page, container: Container) -> Page:
    """Runs before the core_hljs asset hook (priority 99), so the theme applies."""
    hljs: HighlightJS = container.resolve("hljs")
    hljs.set_theme(HljsTheme.SUNBURST, page.context)
    return page


def register_plugin(container: Container, hook_manager: HookManager):
    logger.info("--> Registering [hljs_sample] plugin...")

    hook_manager.add_implementation(HOOK_COLLECT_API_ROUTERS, provide_api_router, plugin_name="hljs_sample")
    hook_manager.add_implementation(HOOK_AFTER_PREPARE_BODY, use_sunburst_theme, plugin_name="hljs_sample")

    logger.info("Plugin [hljs_sample] registered.")
