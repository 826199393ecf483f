# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from collperf.common.config import EngineConfig
from collperf.common.enums import EngineType
from collperf.common.exceptions import ConfigError
from collperf.engine.protocols import ProfilingEngineProtocol


def create_engine(engine_config: EngineConfig) -> ProfilingEngineProtocol:
    """Instantiate the engine selected by engine_config.engine_type."""
    if engine_config.engine_type == EngineType.TORCH:
        from collperf.engine.torch_engine import TorchCollectiveEngine

        return TorchCollectiveEngine(engine_config)

    raise ConfigError(f"Unsupported engine type: {engine_config.engine_type}")
