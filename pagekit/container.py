# pagekit/container.py

import inspect
import logging
import threading
from dataclasses import dataclass
from typing import Any, Callable, Dict, List

from pagekit.core.contracts import Container as ContainerInterface

logger = logging.getLogger(__name__)


def _accepts_container(factory: Callable) -> bool:
    """True when the factory declares a positional parameter for the container."""
    try:
        params = inspect.signature(factory).parameters.values()
    except (TypeError, ValueError):
        # no introspectable signature (some builtins): called without arguments
        return False
    return any(
        p.kind in (p.POSITIONAL_ONLY, p.POSITIONAL_OR_KEYWORD, p.VAR_POSITIONAL)
        for p in params
    )


@dataclass(frozen=True)
class _Registration:
    factory: Callable
    singleton: bool
    takes_container: bool

    def build(self, container: "Container") -> Any:
        if self.takes_container:
            return self.factory(container)
        return self.factory()


class Container(ContainerInterface):
    """
    Service registry of the application.

    A factory is called with the container when it declares a positional
    parameter, and without arguments otherwise. Its arity is read once, at
    registration. Singletons are built once, under a re-entrant lock, so a
    factory can resolve its own dependencies.
    """
    def __init__(self):
        self._registrations: Dict[str, _Registration] = {}
        self._instances: Dict[str, Any] = {}
        self._lock = threading.RLock()
        self._local = threading.local()

    def _resolving(self) -> List[str]:
        # Names being resolved by the current thread, outermost first.
        stack = getattr(self._local, "stack", None)
        if stack is None:
            stack = self._local.stack = []
        return stack

    def register(self, name: str, factory: Callable, singleton: bool = True) -> None:
        if name in self._registrations:
            logger.warning(f"Overwriting service registration for '{name}'")
        self._registrations[name] = _Registration(
            factory=factory,
            singleton=singleton,
            takes_container=_accepts_container(factory),
        )
        self._instances.pop(name, None)

    def resolve(self, name: str) -> Any:
        registration = self._registrations.get(name)
        if registration is None:
            raise ValueError(f"Service '{name}' not found in container.")
        if registration.singleton and name in self._instances:
            return self._instances[name]

        stack = self._resolving()
        if name in stack:
            raise RuntimeError(f"Circular dependency detected: {' -> '.join(stack + [name])}")

        stack.append(name)
        try:
            if not registration.singleton:
                return registration.build(self)
            with self._lock:
                if name not in self._instances:
                    self._instances[name] = registration.build(self)
                    logger.debug(f"Built singleton service '{name}'.")
                return self._instances[name]
        finally:
            stack.pop()
