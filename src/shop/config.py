"""Runtime settings read from the environment.

A ``.env`` file in the working directory is loaded first, so local
setups can keep their secret out of the shell profile.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv


class ConfigurationError(Exception):
    """Required configuration is missing or malformed."""


@dataclass(frozen=True)
class Settings:
    data_dir: Path = Path("data")
    jwt_secret: str = ""
    token_ttl_days: int = 7
    host: str = "127.0.0.1"
    port: int = 5000
    log_level: str = "INFO"
    password_iterations: int = 600_000

    @staticmethod
    def from_env(environ: Mapping[str, str] | None = None) -> Settings:
        if environ is None:
            load_dotenv()
            environ = os.environ

        return Settings(
            data_dir=Path(environ.get("SHOP_DATA_DIR", "data")),
            jwt_secret=environ.get("SHOP_JWT_SECRET", ""),
            token_ttl_days=_int(environ, "SHOP_TOKEN_TTL_DAYS", 7),
            host=environ.get("SHOP_HOST", "127.0.0.1"),
            port=_int(environ, "SHOP_PORT", 5000),
            log_level=environ.get("SHOP_LOG_LEVEL", "INFO").upper(),
            password_iterations=_int(environ, "SHOP_PASSWORD_ITERATIONS", 600_000),
        )

    def require_jwt_secret(self) -> str:
        if not self.jwt_secret:
            raise ConfigurationError("SHOP_JWT_SECRET is missing")
        return self.jwt_secret


def _int(environ: Mapping[str, str], key: str, default: int) -> int:
    raw = environ.get(key)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ConfigurationError(f"{key} must be an integer, got {raw!r}") from exc
