"""Configuration adapters."""

from station_locator.adapters.config.app_config import AppConfig

__all__ = ["AppConfig"]
