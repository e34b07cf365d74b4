from __future__ import annotations

from dataclasses import dataclass
from typing import Any

DEFAULT_API_URL = "https://bundlephobia.com/api/size"

# config key -> (attribute, floor). Floors apply on load and to CLI overrides.
_INT_SETTINGS: dict[str, tuple[str, int]] = {
    "timeoutSeconds": ("timeout_seconds", 1),
    "retryAttempts": ("retry_attempts", 1),
    "retryWaitSeconds": ("retry_wait_seconds", 0),
    "fetchWorkers": ("fetch_workers", 1),
}
_FLOORS: dict[str, int] = {attr: floor for attr, floor in _INT_SETTINGS.values()}


def clamp_field(value: int, field_name: str) -> int:
    """Raise *value* to the floor of *field_name*; unknown fields pass through."""
    return max(_FLOORS.get(field_name, value), value)


@dataclass(slots=True)
class AppConfig:
    api_url: str = DEFAULT_API_URL
    timeout_seconds: int = 30
    retry_attempts: int = 3
    retry_wait_seconds: int = 1
    fetch_workers: int = 4
    log_level: str = "WARNING"

    def to_dict(self) -> dict[str, Any]:
        return {
            "apiUrl": self.api_url,
            "timeoutSeconds": self.timeout_seconds,
            "retryAttempts": self.retry_attempts,
            "retryWaitSeconds": self.retry_wait_seconds,
            "fetchWorkers": self.fetch_workers,
            "logLevel": self.log_level,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any], defaults: AppConfig) -> AppConfig:
        """Overlay *data* on *defaults*. Raises ``ValueError``/``TypeError`` on non-numeric settings."""
        ints = {
            attr: clamp_field(int(data.get(key, getattr(defaults, attr))), attr)
            for key, (attr, _) in _INT_SETTINGS.items()
        }
        return cls(
            api_url=str(data.get("apiUrl", defaults.api_url)),
            log_level=str(data.get("logLevel", defaults.log_level)).upper(),
            **ints,
        )
