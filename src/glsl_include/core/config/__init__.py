"""Configuration loading for glsl-include."""
from .manager import PROJECT_CONFIG_NAMES, ConfigManager, get_setting

__all__ = ["ConfigManager", "get_setting", "PROJECT_CONFIG_NAMES"]
