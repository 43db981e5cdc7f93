# pagekit/core/contracts.py

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Any, Callable, TypeVar

# --- 1. Core service interfaces and type aliases ---

# Data type threaded through a filter hook chain
T = TypeVar('T')

# Standard signature of a plugin's registration function
PluginRegisterFunc = Callable[['Container', 'HookManager'], None]

# Plugins depend on these interfaces, never on the concrete implementations.
class Container(ABC):
    @abstractmethod
    def register(self, name: str, factory: Callable, singleton: bool = True) -> None: raise NotImplementedError
    @abstractmethod
    def resolve(self, name: str) -> Any: raise NotImplementedError

class HookManager(ABC):
    @abstractmethod
    def add_implementation(self, hook_name: str, implementation: Callable, priority: int = 10, plugin_name: str = "<unknown>"): raise NotImplementedError
    @abstractmethod
    async def trigger(self, hook_name: str, **kwargs: Any) -> None: raise NotImplementedError
    @abstractmethod
    async def filter(self, hook_name: str, data: T, **kwargs: Any) -> T: raise NotImplementedError


# --- 2. Platform hook names ---
# Fired by the application lifespan (see pagekit/app.py).
HOOK_COLLECT_API_ROUTERS = "collect_api_routers"
HOOK_COLLECT_STATIC_MOUNTS = "collect_static_mounts"
HOOK_APP_STARTUP_COMPLETE = "app_startup_complete"

# Fired by Page.render() once all regions are prepared, before serialization.
# Filter hook: implementations receive the page and must return it.
HOOK_AFTER_PREPARE_BODY = "after_prepare_body"
