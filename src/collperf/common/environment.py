# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Process-level tunables read from environment variables.

These are knobs that are rarely changed per run and therefore are not exposed
as CLI options. Each group has its own prefix, e.g. COLLPERF_ENGINE_*.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class _EngineSettings(BaseSettings):
    """Profiling engine tunables."""

    model_config = SettingsConfigDict(env_prefix="COLLPERF_ENGINE_")

    RENDEZVOUS_TIMEOUT: float = Field(
        300.0,
        gt=0,
        description="Default seconds to wait for all tasks to join the process group.",
    )
    BARRIER_BEFORE_TIMING: bool = Field(
        True,
        description="Run a barrier on the replica group before each timed measurement.",
    )


class _LoggingSettings(BaseSettings):
    """Console logging tunables."""

    model_config = SettingsConfigDict(env_prefix="COLLPERF_LOGGING_")

    RICH_TRACEBACKS: bool = Field(
        True,
        description="Render exception tracebacks with rich.",
    )
    SHOW_PATH: bool = Field(
        False,
        description="Show the source file and line of each log record.",
    )


class _Environment(BaseSettings):
    """All environment-driven settings, grouped by subsystem."""

    ENGINE: _EngineSettings = Field(default_factory=_EngineSettings)
    LOGGING: _LoggingSettings = Field(default_factory=_LoggingSettings)


Environment = _Environment()
