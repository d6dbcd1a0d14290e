import os
from dataclasses import dataclass
from typing import Optional

from .errors import ConfigError

DEFAULT_BASE_URL = "http://todos.demo.rootpath.io"


@dataclass(frozen=True)
class Settings:
    base_url: str = DEFAULT_BASE_URL
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ: Optional[dict] = None) -> "Settings":
        env = os.environ if environ is None else environ
        base_url = env.get("TODO_API_BASE_URL", DEFAULT_BASE_URL).strip()
        if not base_url:
            raise ConfigError("TODO_API_BASE_URL is set but empty")
        log_level = env.get("TODO_CLIENT_LOG_LEVEL", "INFO").strip().upper() or "INFO"
        return cls(base_url=base_url, log_level=log_level)
