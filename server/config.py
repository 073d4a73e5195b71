"""Validated server settings loaded from the environment."""

from __future__ import annotations

import os
from typing import Mapping, Optional

from pydantic import BaseModel, Field, field_validator

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ServerSettings(BaseModel):
    host: str = Field("0.0.0.0", description="Interface the HTTP server binds to.")
    port: int = Field(3000, ge=1, le=65535, description="TCP port for HTTP and WebSocket traffic.")
    log_level: str = Field("INFO", description="Root logging level.")
    static_dir: str = Field("public", description="Directory of static client files, served when present.")
    shuffle_seed: Optional[int] = Field(None, description="Fixed seed for reproducible deals.")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        normalized = value.upper()
        if normalized not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {value!r}")
        return normalized


def load_settings(environ: Optional[Mapping[str, str]] = None) -> ServerSettings:
    env = os.environ if environ is None else environ
    values: dict[str, object] = {}
    for key, field_name in (
        ("HOST", "host"),
        ("PORT", "port"),
        ("LOG_LEVEL", "log_level"),
        ("STATIC_DIR", "static_dir"),
        ("SHUFFLE_SEED", "shuffle_seed"),
    ):
        if env.get(key):
            values[field_name] = env[key]
    return ServerSettings(**values)
