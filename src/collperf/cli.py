# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Command line interface for collperf."""

from typing import Annotated

from cyclopts import App, Parameter
from rich.console import Console

from collperf import __version__
from collperf.cli_utils import exit_on_error
from collperf.common.config import EngineConfig, ServiceConfig, UserConfig

USAGE = """
Runs the given collectives over a sweep of message sizes and replica group
topologies on the available hardware and records their throughput. The
resulting table can be used to build a derating curve.

Example, two tasks of one device each on one host:

    collperf --num-nodes 2 --task-id 0 --collectives ALL_REDUCE \\
        --tensor-size-bytes-spec 'start=1024,stop=2147483648,factor=2' \\
        --collective-devices-spec '[1,2]<=[2]' &
    collperf --num-nodes 2 --task-id 1 --collectives ALL_REDUCE \\
        --tensor-size-bytes-spec 'start=1024,stop=2147483648,factor=2' \\
        --collective-devices-spec '[1,2]<=[2]'

Every task must use the same options apart from --task-id. Task 0 prints the
table, or appends it to --output when that is a .json or .msgpack file.
"""

app = App(
    name="collperf",
    help=USAGE,
    version=__version__,
    error_console=Console(stderr=True),
)


@app.default
def profile(
    user_config: Annotated[UserConfig | None, Parameter(name="*")] = None,
    engine_config: Annotated[EngineConfig | None, Parameter(name="*")] = None,
    service_config: Annotated[ServiceConfig | None, Parameter(name="*")] = None,
) -> None:
    """Generate a collective performance table."""
    with exit_on_error(title="Error Running collperf"):
        from collperf.cli_runner import initialize, run_profile

        initialize(service_config or ServiceConfig())
        run_profile(user_config or UserConfig(), engine_config or EngineConfig())


app.command(profile, name="profile")
