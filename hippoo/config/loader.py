from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from result import Err, Ok, Result

from hippoo.config.defaults import default_config
from hippoo.config.schema import AppConfig

CONFIG_PATH = "~/.config/hippoo/config.json"


def _read_settings(path: Path) -> Result[dict[str, Any], str]:
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        return Err(f"Failed reading config at {path}: {exc}.")
    if not isinstance(payload, dict):
        return Err(f"Config at {path} must be a JSON object.")
    return Ok(payload)


def load_config(path: str | Path | None = None) -> Result[AppConfig, str]:
    """Load settings from *path* (default ``~/.config/hippoo/config.json``).

    A missing file means defaults. Unreadable JSON, a non-object document or a
    non-numeric integer setting come back as ``Err`` with a message.
    """
    resolved = Path(path or CONFIG_PATH).expanduser()
    if not resolved.exists():
        return Ok(default_config())

    settings = _read_settings(resolved)
    if isinstance(settings, Err):
        return settings
    try:
        return Ok(AppConfig.from_dict(settings.ok_value, default_config()))
    except (TypeError, ValueError) as exc:
        return Err(f"Invalid setting in config at {resolved}: {exc}.")


def sample_config_json() -> str:
    return json.dumps(default_config().to_dict(), indent=2)
