from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional
import os


@dataclass(frozen=True)
class Settings:
    # Upper bound on cursor steps taken by the general split path.
    max_split_steps: int = int(os.getenv("FLEXTIME_MAX_SPLIT_STEPS", "100000"))
    default_kernel: str = os.getenv("FLEXTIME_DEFAULT_KERNEL", "default").strip()
    log_level: str = os.getenv("FLEXTIME_LOG_LEVEL", "WARNING").strip()

    def __post_init__(self) -> None:
        if self.max_split_steps <= 0:
            raise ValueError("max_split_steps must be positive")

    def tweak(self, **kwargs) -> "Settings":
        return replace(self, **kwargs)


_settings: Optional[Settings] = None

def get_settings() -> Settings:
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings

def set_settings(settings: Settings) -> None:
    global _settings
    _settings = settings
