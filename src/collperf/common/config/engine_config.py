# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from typing import Annotated, Literal

from pydantic import Field

from collperf.common.config.base_config import BaseConfig
from collperf.common.config.cli_parameter import CLIParameter
from collperf.common.config.config_defaults import EngineDefaults
from collperf.common.config.groups import Groups
from collperf.common.enums import CommBackend, EngineType

DTypeName = Literal["float32", "float16", "bfloat16", "float64", "int32", "int8", "uint8"]


class EngineConfig(BaseConfig):
    """Settings handed to the profiling engine."""

    _CLI_GROUP = Groups.ENGINE

    engine_type: Annotated[
        EngineType,
        Field(description="Profiling engine implementation to run the collectives with."),
        CLIParameter(
            name=("--engine",),
            group=_CLI_GROUP,
        ),
    ] = EngineDefaults.ENGINE_TYPE

    backend: Annotated[
        CommBackend,
        Field(
            description="Communication backend. 'auto' picks nccl when CUDA devices are "
            "available and gloo otherwise.",
        ),
        CLIParameter(
            name=("--backend",),
            group=_CLI_GROUP,
        ),
    ] = EngineDefaults.BACKEND

    dtype: Annotated[
        DTypeName,
        Field(description="Element type of the buffers exchanged by the collectives."),
        CLIParameter(
            name=("--dtype",),
            group=_CLI_GROUP,
        ),
    ] = EngineDefaults.DTYPE

    warmup_iterations: Annotated[
        int,
        Field(
            ge=0,
            description="Untimed iterations run before each measurement.",
        ),
        CLIParameter(
            name=("--warmup-iterations",),
            group=_CLI_GROUP,
        ),
    ] = EngineDefaults.WARMUP_ITERATIONS

    iterations: Annotated[
        int,
        Field(
            ge=1,
            description="Timed iterations per measurement. The reported runtime is the mean.",
        ),
        CLIParameter(
            name=("--iterations",),
            group=_CLI_GROUP,
        ),
    ] = EngineDefaults.ITERATIONS

    rendezvous_timeout: Annotated[
        float | None,
        Field(
            gt=0,
            description="Seconds to wait for every task to join. "
            "Defaults to COLLPERF_ENGINE_RENDEZVOUS_TIMEOUT.",
        ),
        CLIParameter(
            name=("--rendezvous-timeout",),
            group=_CLI_GROUP,
        ),
    ] = None
