# plugins/core_logging/__init__.py
import os
import yaml
import logging
import logging.config
from pathlib import Path

from pagekit.core.contracts import Container, HookManager
from pagekit.core.settings import Settings

PLUGIN_DIR = Path(__file__).parent

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def _level_override(container: Container) -> str | None:
    # LOG_LEVEL from the environment wins over the [logging] settings section.
    env_log_level = os.getenv("LOG_LEVEL")
    if env_log_level and env_log_level.upper() in LOG_LEVELS:
        return env_log_level.upper()

    try:
        settings: Settings = container.resolve("settings")
    except ValueError:
        return None
    level = settings.logging.level
    return level if level in LOG_LEVELS else None


def register_plugin(container: Container, hook_manager: HookManager):
    """Entry point of the core_logging plugin."""
    print("--> Registering [core_logging] plugin...")

    config_path = PLUGIN_DIR / "logging_config.yaml"
    with open(config_path, 'r', encoding='utf-8') as f:
        logging_config = yaml.safe_load(f)

    log_level_override = _level_override(container)
    if log_level_override:
        logging_config['root']['level'] = log_level_override

    logging.config.dictConfig(logging_config)

    logger = logging.getLogger(__name__)
    logger.info("Plugin [core_logging] registered.")
