# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from enum import Enum


class CollectiveType(str, Enum):
    """Collective operations that can be profiled."""

    ALL_REDUCE = "ALL_REDUCE"
    ALL_GATHER = "ALL_GATHER"
    REDUCE_SCATTER = "REDUCE_SCATTER"
    ALL_TO_ALL = "ALL_TO_ALL"

    def __str__(self) -> str:
        return self.value


class EngineType(str, Enum):
    """Profiling engine implementations."""

    TORCH = "torch"

    def __str__(self) -> str:
        return self.value


class CommBackend(str, Enum):
    """torch.distributed backend used by the torch engine."""

    AUTO = "auto"
    NCCL = "nccl"
    GLOO = "gloo"

    def __str__(self) -> str:
        return self.value


class LogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"

    def __str__(self) -> str:
        return self.value
