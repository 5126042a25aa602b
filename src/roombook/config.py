from __future__ import annotations

import importlib
import logging
import os
from typing import Optional, Type

from dotenv import load_dotenv

from roombook.base_config import RoomBookConfig
from roombook.exceptions import ConfigurationError


DEFAULT_CONFIG_CLASS = "roombook.config.EnvironmentRoomBookConfig"
CONFIG_ENV_KEY = "ROOMBOOK_CONFIG"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

load_dotenv()

logger = logging.getLogger(__name__)


def _import_config_class(path: str) -> Type[RoomBookConfig]:
    try:
        module_path, class_name = path.rsplit(".", 1)
    except ValueError as exc:
        raise ConfigurationError(f"Invalid config path '{path}'") from exc

    try:
        module = importlib.import_module(module_path)
    except ImportError as exc:
        raise ConfigurationError(f"Could not import module '{module_path}'") from exc

    try:
        cls = getattr(module, class_name)
    except AttributeError as exc:
        raise ConfigurationError(f"Config class '{class_name}' not found in '{module_path}'") from exc

    if not isinstance(cls, type) or not issubclass(cls, RoomBookConfig):
        raise ConfigurationError(f"{path} is not a subclass of RoomBookConfig")

    return cls


class EnvironmentRoomBookConfig(RoomBookConfig):
    """Default configuration that reads from environment variables."""

    def __init__(self) -> None:
        self._env = os.environ

    def get_hotel_display_name(self) -> str:
        return self._env.get("HOTEL_NAME", "RoomBook Hotel")

    def get_currency_symbol(self) -> str:
        return self._env.get("CURRENCY_SYMBOL", "$")

    def get_log_level(self) -> str:
        level = self._env.get("LOG_LEVEL", "INFO").upper()
        if level not in _LOG_LEVELS:
            logger.warning(f"Invalid LOG_LEVEL '{level}', falling back to INFO")
            return "INFO"
        return level


_CONFIG: Optional[RoomBookConfig] = None


def get_config() -> RoomBookConfig:
    global _CONFIG
    if _CONFIG is None:
        class_path = os.getenv(CONFIG_ENV_KEY, DEFAULT_CONFIG_CLASS)
        cls = _import_config_class(class_path)
        _CONFIG = cls()
    return _CONFIG


def set_config(config: Optional[RoomBookConfig]) -> None:
    global _CONFIG
    _CONFIG = config
