# pagekit/core/hooks.py
import asyncio
import logging
import inspect
from collections import defaultdict
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Awaitable, TypeVar, Optional

from pagekit.core.contracts import HookManager as HookManagerInterface, Container

logger = logging.getLogger(__name__)

T = TypeVar('T')

# Generic signature of a hook implementation
HookCallable = Callable[..., Awaitable[Any]]

@dataclass(order=True)
class HookImplementation:
    """A hook implementation plus its ordering metadata."""
    priority: int
    # Registration sequence keeps equal priorities in registration order.
    sequence: int
    func: HookCallable = field(compare=False)
    plugin_name: str = field(compare=False, default="<unknown>")

class HookManager(HookManagerInterface):
    """
    Central, context-aware registry and dispatcher for every hook implementation.
    Shared services are injected into implementations by parameter name.
    """
    def __init__(self, container: Optional[Container] = None):
        self._hooks: Dict[str, List[HookImplementation]] = defaultdict(list)
        self._sequence = 0
        self._shared_context: Dict[str, Any] = {
            "container": container,
            "hook_manager": self
        }
        logger.info("HookManager initialized and context-aware.")

    def add_shared_context(self, name: str, service: Any) -> None:
        """Expose one more shared service to every hook implementation."""
        if name in self._shared_context:
            logger.warning(f"Overwriting shared context for hooks: '{name}'")
        self._shared_context[name] = service

    def _prepare_hook_args(
        self,
        func: HookCallable,
        call_context: Dict[str, Any],
        positional_data: Optional[Any] = None,
        has_positional: bool = False
    ) -> tuple[list, dict]:
        """Build the arguments for one implementation from the call context."""
        params = inspect.signature(func).parameters

        hook_args = []
        if has_positional:
            # Filter data always goes into the first parameter.
            hook_args.append(positional_data)

        accepts_var_kwargs = any(p.kind == p.VAR_KEYWORD for p in params.values())
        positional_names = [
            p.name for p in params.values()
            if p.kind in (p.POSITIONAL_ONLY, p.POSITIONAL_OR_KEYWORD)
        ][:len(hook_args)]

        hook_kwargs = {}
        for name, value in call_context.items():
            if name in positional_names:
                continue
            param = params.get(name)
            if param is not None and param.kind in (param.POSITIONAL_OR_KEYWORD, param.KEYWORD_ONLY):
                hook_kwargs[name] = value
            elif param is None and accepts_var_kwargs:
                hook_kwargs[name] = value

        return hook_args, hook_kwargs

    def add_implementation(
        self,
        hook_name: str,
        implementation: HookCallable,
        priority: int = 10,
        plugin_name: str = "<core>"
    ):
        """Register an implementation. Lower priorities run first."""
        if not inspect.iscoroutinefunction(implementation):
            raise TypeError(f"Hook implementation for '{hook_name}' must be an async function.")

        self._sequence += 1
        hook_impl = HookImplementation(
            priority=priority,
            sequence=self._sequence,
            func=implementation,
            plugin_name=plugin_name
        )
        self._hooks[hook_name].append(hook_impl)
        self._hooks[hook_name].sort()
        logger.debug(f"Registered hook '{hook_name}' from plugin '{plugin_name}' with priority {priority}.")

    async def trigger(self, hook_name: str, **kwargs: Any) -> None:
        """
        Fire a notification hook. Implementations run concurrently and
        their return values are ignored.
        """
        if hook_name not in self._hooks:
            return

        call_context = {**self._shared_context, **kwargs}

        implementations = list(self._hooks[hook_name])
        scheduled = []
        tasks = []
        for impl in implementations:
            try:
                _, prepared_kwargs = self._prepare_hook_args(impl.func, call_context)
                tasks.append(impl.func(**prepared_kwargs))
                scheduled.append(impl)
            except Exception as e:
                logger.error(
                    f"Error preparing args for NOTIFICATION hook '{hook_name}' from plugin '{impl.plugin_name}': {e}",
                    exc_info=e
                )

        results = await asyncio.gather(*tasks, return_exceptions=True)

        for impl, result in zip(scheduled, results):
            if isinstance(result, Exception):
                logger.error(
                    f"Error in NOTIFICATION hook '{hook_name}' from plugin '{impl.plugin_name}': {result}",
                    exc_info=result
                )

    async def filter(self, hook_name: str, data: T, **kwargs: Any) -> T:
        """
        Fire a filter hook: implementations run one after another in priority
        order, each receiving the previous result.
        """
        if hook_name not in self._hooks:
            return data

        call_context = {**self._shared_context, **kwargs}
        current_data = data

        for impl in list(self._hooks[hook_name]):
            try:
                prepared_args, prepared_kwargs = self._prepare_hook_args(
                    impl.func, call_context, positional_data=current_data, has_positional=True
                )
                current_data = await impl.func(*prepared_args, **prepared_kwargs)
            except Exception as e:
                logger.error(
                    f"Error in FILTER hook '{hook_name}' from plugin '{impl.plugin_name}'. Skipping. Error: {e}",
                    exc_info=e
                )

        return current_data

