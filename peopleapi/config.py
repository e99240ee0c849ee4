"""Application configuration read from the environment."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field

from sqlalchemy.engine import URL


@dataclass(frozen=True)
class DBConfig:
    """Database connection settings."""

    host: str = ""
    port: str = ""
    user: str = ""
    password: str = ""
    name: str = ""
    driver: str = "postgresql"

    def url(self) -> str:
        """Return the database URL for these settings."""
        return URL.create(
            self.driver,
            username=self.user or None,
            password=self.password or None,
            host=self.host or None,
            port=int(self.port) if self.port else None,
            database=self.name or None,
        ).render_as_string(hide_password=False)


@dataclass(frozen=True)
class Config:
    """Server configuration."""

    port: str = ""
    db: DBConfig = field(default_factory=DBConfig)


def load_config(environ: Mapping[str, str] | None = None) -> Config:
    """Build the configuration from environment variables."""
    env = os.environ if environ is None else environ
    return Config(
        port=env.get("PORT", ""),
        db=DBConfig(
            host=env.get("DB_HOST", ""),
            port=env.get("DB_PORT", ""),
            user=env.get("DB_USER", ""),
            password=env.get("DB_PASSWORD", ""),
            name=env.get("DB_NAME", ""),
            driver=env.get("DB_DRIVER", "postgresql"),
        ),
    )