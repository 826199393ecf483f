# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collperf.common.config import RunConfig
    from collperf.profile.models import ProfileTable


@runtime_checkable
class ProfilingEngineProtocol(Protocol):
    """Runs the configured collectives across all tasks and measures them.

    Implementations block until every (topology, collective, size) combination
    has been measured, and raise EngineError on any device, network or runtime
    failure. Rendezvous with peer tasks at run_config.coordinator_address is
    the engine's responsibility.
    """

    def compute(self, run_config: RunConfig) -> ProfileTable: ...
