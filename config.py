import os
from dataclasses import dataclass, field
from typing import List, Optional


DEFAULT_CORS_ORIGINS = ["http://localhost:3001"]

_FALSY = {"0", "false", "no", "off", ""}


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() not in _FALSY


def _env_list(name: str, default: List[str]) -> List[str]:
    raw = os.getenv(name)
    if raw is None:
        return list(default)
    return [item.strip() for item in raw.split(",") if item.strip()]


@dataclass(frozen=True)
class Settings:
    host: str = "0.0.0.0"
    port: int = 3000
    cors_origins: List[str] = field(default_factory=lambda: list(DEFAULT_CORS_ORIGINS))
    log_level: str = "INFO"
    log_dir: Optional[str] = None
    seed: bool = True

    @classmethod
    def from_env(cls) -> "Settings":
        raw_port = os.getenv("PORT", "3000")
        try:
            port = int(raw_port)
        except ValueError:
            raise ValueError(f"PORT must be an integer, got {raw_port!r}")
        if not 0 < port < 65536:
            raise ValueError(f"PORT out of range: {port}")

        return cls(
            host=os.getenv("HOST", "0.0.0.0"),
            port=port,
            cors_origins=_env_list("CORS_ORIGINS", DEFAULT_CORS_ORIGINS),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            log_dir=os.getenv("LOG_DIR") or None,
            seed=_env_bool("CATALOG_SEED", True),
        )
