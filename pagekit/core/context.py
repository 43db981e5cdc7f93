# pagekit/core/context.py

from typing import Any, Dict, Optional, Type, TypeVar

from starlette.requests import Request

from pagekit.core.assets import Assets, HeadScript, JavaScript, StyleSheet

E = TypeVar('E')


class Context:
    """
    Render context of one page. Created with the page and discarded with it;
    never shared between requests.
    """
    def __init__(self, request: Optional[Request] = None):
        self.request = request
        self._params: Dict[str, Any] = {}
        self._extensions: Dict[type, Any] = {}
        self.stylesheets: Assets[StyleSheet] = Assets()
        self.javascripts: Assets[JavaScript] = Assets()
        self.head_scripts: Assets[HeadScript] = Assets()

    # --- Typed per-request state ---

    def extension(self, cls: Type[E]) -> E:
        """
        Per-request state owned by a plugin, keyed by its type. The instance
        is created with ``cls()`` on first access.
        """
        state = self._extensions.get(cls)
        if state is None:
            state = cls()
            self._extensions[cls] = state
        return state

    def has_extension(self, cls: type) -> bool:
        return cls in self._extensions

    # --- Untyped parameters ---

    def get_param(self, key: str, default: Any = None) -> Any:
        return self._params.get(key, default)

    def set_param(self, key: str, value: Any) -> None:
        self._params[key] = value

    # --- Assets ---

    def add_stylesheet(self, stylesheet: StyleSheet) -> bool:
        return self.stylesheets.add(stylesheet)

    def add_javascript(self, javascript: JavaScript) -> bool:
        return self.javascripts.add(javascript)

    def add_head_script(self, head_script: HeadScript) -> bool:
        return self.head_scripts.add(head_script)
