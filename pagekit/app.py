# pagekit/app.py
import logging
from contextlib import asynccontextmanager
from typing import List, Optional

from fastapi import FastAPI, APIRouter
from fastapi.staticfiles import StaticFiles

from pagekit.container import Container
from pagekit.core.contracts import (
    HOOK_APP_STARTUP_COMPLETE,
    HOOK_COLLECT_API_ROUTERS,
    HOOK_COLLECT_STATIC_MOUNTS,
)
from pagekit.core.hooks import HookManager
from pagekit.core.loader import PluginLoader
from pagekit.core.settings import Settings, load_settings
from pagekit.core.static import StaticMount

logger = logging.getLogger(__name__)


def _mount_static(app: FastAPI, mounts: List[StaticMount]) -> None:
    for mount in mounts:
        app.mount(
            mount.prefix,
            StaticFiles(directory=str(mount.directory), check_dir=False),
            name=mount.name,
        )
        logger.debug(f"Mounted static files: prefix='{mount.prefix}', directory='{mount.directory}'")


def build_lifespan(settings: Optional[Settings] = None, plugins_package: str = "plugins"):
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # --- Startup ---
        container = Container()
        hook_manager = HookManager(container)

        # 1. Platform services
        container.register("container", lambda: container)
        container.register("hook_manager", lambda: hook_manager)
        resolved_settings = settings if settings is not None else load_settings()
        container.register("settings", lambda: resolved_settings)

        # 2. Plugins register their services and hooks synchronously
        loader = PluginLoader(container, hook_manager, package=plugins_package)
        loader.load_plugins()

        logger.info("--- Assembling FastAPI application ---")
        app.state.container = container
        hook_manager.add_shared_context("app", app)

        # 3. Routes and static files contributed by plugins
        routers: List[APIRouter] = await hook_manager.filter(HOOK_COLLECT_API_ROUTERS, [])
        if routers:
            logger.info(f"Collected {len(routers)} router(s) from plugins.")
            for router in routers:
                app.include_router(router)
                logger.debug(f"Added router: prefix='{router.prefix}', tags={router.tags}")
        else:
            logger.warning("No API routers collected from plugins.")

        mounts: List[StaticMount] = await hook_manager.filter(HOOK_COLLECT_STATIC_MOUNTS, [])
        _mount_static(app, mounts)

        await hook_manager.trigger(HOOK_APP_STARTUP_COMPLETE)

        logger.info("--- pagekit is ready ---")
        yield
        # --- Shutdown ---
        logger.info("--- pagekit is shutting down ---")

    return lifespan


def create_app(settings: Optional[Settings] = None, plugins_package: str = "plugins") -> FastAPI:
    """Application factory. Without explicit settings they are loaded at startup."""
    return FastAPI(
        title="pagekit",
        version="0.3.0",
        lifespan=build_lifespan(settings, plugins_package),
    )
