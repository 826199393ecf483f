# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from dataclasses import dataclass

from collperf.common.constants import OUTPUT_STDOUT
from collperf.common.enums import CommBackend, EngineType, LogLevel


@dataclass(frozen=True)
class UserDefaults:
    NUM_NODES = 1
    TASK_ID = 0
    COORDINATOR_ADDRESS = "127.0.0.1:1234"
    OUTPUT = OUTPUT_STDOUT
    DRY_RUN = False


@dataclass(frozen=True)
class EngineDefaults:
    ENGINE_TYPE = EngineType.TORCH
    BACKEND = CommBackend.AUTO
    DTYPE = "float32"
    WARMUP_ITERATIONS = 5
    ITERATIONS = 20


@dataclass(frozen=True)
class ServiceDefaults:
    LOG_LEVEL = LogLevel.INFO
    VERBOSE = False
