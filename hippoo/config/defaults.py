from __future__ import annotations

from hippoo.config.schema import AppConfig


def default_config() -> AppConfig:
    return AppConfig()
