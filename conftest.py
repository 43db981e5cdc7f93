# conftest.py

import pytest
import pytest_asyncio
from typing import Any, AsyncGenerator, Dict

from fastapi import FastAPI
from httpx import AsyncClient, ASGITransport
from asgi_lifespan import LifespanManager

from pagekit.app import create_app
from pagekit.container import Container
from pagekit.core.settings import Settings
from pagekit.core.hooks import HookManager


# --- 1. Platform fixtures ---

@pytest.fixture
def container() -> Container:
    container = Container()
    container.register("container", lambda: container)
    return container


@pytest.fixture
def hook_manager(container: Container) -> HookManager:
    hook_manager = HookManager(container)
    container.register("hook_manager", lambda: hook_manager)
    return hook_manager


# --- 2. Application fixtures (end-to-end) ---

@pytest.fixture
def app_settings() -> Dict[str, Any]:
    """Settings handed to the application; override in a test module to change them."""
    return {"hljs": {"library": "core", "theme": "default", "tabsize": 4}}


@pytest.fixture
def app(app_settings: Dict[str, Any]) -> FastAPI:
    # model_validate skips the environment and settings file sources
    return create_app(settings=Settings.model_validate(app_settings))


@pytest_asyncio.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """
    AsyncClient bound to an application whose lifespan (plugin loading,
    router and static mounts) has run.
    """
    async with LifespanManager(app) as manager:
        transport = ASGITransport(app=manager.app)
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            yield ac
