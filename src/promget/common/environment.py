# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Environment-driven settings for promget.

Every setting can be overridden with an environment variable built from the
group prefix and the field name, e.g. `PROMGET_HTTP_TIMEOUT=5`.

Usage::

    from promget.common.environment import Environment

    timeout = Environment.HTTP.TIMEOUT
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class _HTTPSettings(BaseSettings):
    """HTTP client settings used by the scrape transport."""

    model_config = SettingsConfigDict(
        env_prefix="PROMGET_HTTP_",
        case_sensitive=False,
        extra="ignore",
    )

    TIMEOUT: float | None = Field(
        default=30.0,
        gt=0,
        description="Total timeout in seconds for a single scrape request. None disables it.",
    )
    CONNECT_TIMEOUT: float | None = Field(
        default=10.0,
        gt=0,
        description="Timeout in seconds for establishing the connection.",
    )
    CONNECTION_LIMIT: int = Field(
        default=100,
        ge=0,
        description="Maximum number of concurrent connections per connector (0 = unlimited).",
    )
    TTL_DNS_CACHE: int = Field(
        default=300,
        ge=0,
        description="Time to live in seconds for cached DNS entries.",
    )
    KEEPALIVE_TIMEOUT: float = Field(
        default=30.0,
        ge=0,
        description="Seconds an idle keep-alive connection is kept open.",
    )


class _LoggingSettings(BaseSettings):
    """Console logging settings used by the CLI."""

    model_config = SettingsConfigDict(
        env_prefix="PROMGET_LOGGING_",
        case_sensitive=False,
        extra="ignore",
    )

    LEVEL: str = Field(default="INFO", description="Default log level.")
    MAX_CONSOLE_MESSAGE_LENGTH: int = Field(
        default=1000,
        ge=1,
        description="Messages longer than this are truncated on the console.",
    )


class _Environment:
    """Container for all settings groups, loaded once at import time."""

    def __init__(self) -> None:
        self.HTTP = _HTTPSettings()
        self.LOGGING = _LoggingSettings()


Environment = _Environment()
