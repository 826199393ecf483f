# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from collperf.common.config.base_config import BaseConfig
from collperf.common.config.cli_parameter import CLIParameter
from collperf.common.config.engine_config import EngineConfig
from collperf.common.config.groups import Groups
from collperf.common.config.run_config import RunConfig
from collperf.common.config.service_config import ServiceConfig
from collperf.common.config.user_config import UserConfig

__all__ = [
    "BaseConfig",
    "CLIParameter",
    "EngineConfig",
    "Groups",
    "RunConfig",
    "ServiceConfig",
    "UserConfig",
]
