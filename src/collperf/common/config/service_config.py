# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from typing import Annotated

from pydantic import Field

from collperf.common.config.base_config import BaseConfig
from collperf.common.config.cli_parameter import CLIParameter
from collperf.common.config.config_defaults import ServiceDefaults
from collperf.common.config.groups import Groups
from collperf.common.enums import LogLevel


class ServiceConfig(BaseConfig):
    """Process-wide settings that do not affect what is measured."""

    _CLI_GROUP = Groups.LOGGING

    log_level: Annotated[
        LogLevel,
        Field(description="Minimum level of log records written to stderr."),
        CLIParameter(
            name=("--log-level",),
            group=_CLI_GROUP,
        ),
    ] = ServiceDefaults.LOG_LEVEL

    verbose: Annotated[
        bool,
        Field(description="Equivalent to --log-level DEBUG."),
        CLIParameter(
            name=("--verbose", "-v"),
            group=_CLI_GROUP,
            negative="",
        ),
    ] = ServiceDefaults.VERBOSE
