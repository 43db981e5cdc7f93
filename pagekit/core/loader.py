# pagekit/core/loader.py

import json
import logging
import importlib
import importlib.resources
from typing import List, Dict

from pagekit.core.contracts import Container, HookManager, PluginRegisterFunc

logger = logging.getLogger(__name__)

DEFAULT_PRIORITY = 100


class PluginLoader:
    def __init__(self, container: Container, hook_manager: HookManager, package: str = "plugins"):
        self._container = container
        self._hook_manager = hook_manager
        self._package = package

    def load_plugins(self) -> List[Dict]:
        """Discover, order and register every plugin. Returns the loaded plugin infos."""
        # print: the logging plugin has not configured anything yet
        print("\n--- pagekit plugins: loading ---")

        all_plugins = self._discover_plugins()
        if not all_plugins:
            print("Warning: no plugins discovered.")
            print("--- pagekit plugins: done ---\n")
            return []

        sorted_plugins = sorted(
            all_plugins,
            key=lambda p: (p['manifest'].get('priority', DEFAULT_PRIORITY), p['name'])
        )

        print("Plugin load order:")
        for i, p_info in enumerate(sorted_plugins):
            print(f"  {i+1}. {p_info['name']} (priority: {p_info['manifest'].get('priority', DEFAULT_PRIORITY)})")

        self._register_plugins(sorted_plugins)

        logger.info("All plugins loaded and registered.")
        print("--- pagekit plugins: done ---\n")
        return sorted_plugins

    def _discover_plugins(self) -> List[Dict]:
        """Scan the plugins package for sub-packages shipping a manifest.json."""
        discovered = []
        try:
            plugins_package_path = importlib.resources.files(self._package)
        except ModuleNotFoundError:
            return discovered

        for plugin_path in plugins_package_path.iterdir():
            if not plugin_path.is_dir() or plugin_path.name.startswith(('__', '.')):
                continue

            manifest_path = plugin_path / "manifest.json"
            if not manifest_path.is_file():
                continue

            try:
                manifest = json.loads(manifest_path.read_text(encoding='utf-8'))
            except json.JSONDecodeError as e:
                logger.warning(f"Skipping plugin '{plugin_path.name}': invalid manifest.json ({e})")
                continue

            if not manifest.get('enabled', True):
                logger.info(f"Plugin '{plugin_path.name}' is disabled by its manifest.")
                continue

            discovered.append({
                "name": manifest.get('name', plugin_path.name),
                "manifest": manifest,
                "import_path": f"{self._package}.{plugin_path.name}"
            })

        return discovered

    def _register_plugins(self, plugins: List[Dict]):
        """Import each plugin in order and call its register_plugin()."""
        for plugin_info in plugins:
            plugin_name = plugin_info['name']
            import_path = plugin_info['import_path']

            try:
                plugin_module = importlib.import_module(import_path)
                register_func: PluginRegisterFunc = getattr(plugin_module, "register_plugin")
                register_func(self._container, self._hook_manager)
            except Exception as e:
                logger.critical(f"Failed to load plugin '{plugin_name}' ({import_path})", exc_info=e)
                # A broken plugin may leave its dependents half-registered: stop here.
                raise RuntimeError(f"Failed to load plugin {plugin_name}") from e
