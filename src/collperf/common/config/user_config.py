# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from typing import Annotated

from pydantic import Field

from collperf.common.config.base_config import BaseConfig
from collperf.common.config.cli_parameter import CLIParameter
from collperf.common.config.config_defaults import UserDefaults
from collperf.common.config.groups import Groups


class UserConfig(BaseConfig):
    """Raw, unparsed options that describe one profiling run.

    The spec strings are kept verbatim here; they are parsed and validated into
    a RunConfig by `collperf.cli_runner.build_run_config`.
    """

    num_nodes: Annotated[
        int,
        Field(
            ge=1,
            description="Number of cooperating processes across the distributed system.",
        ),
        CLIParameter(
            name=("--num-nodes", "--num_nodes"),
            group=Groups.DISTRIBUTED,
        ),
    ] = UserDefaults.NUM_NODES

    task_id: Annotated[
        int,
        Field(
            ge=0,
            description="Identifier of this process, in [0, num_nodes). "
            "Must be unique across the distributed system.",
        ),
        CLIParameter(
            name=("--task-id", "--task_id"),
            group=Groups.DISTRIBUTED,
        ),
    ] = UserDefaults.TASK_ID

    coordinator_address: Annotated[
        str,
        Field(
            description="Coordinator address in host:port format, shared by every task. "
            "For example: 127.0.0.1:1234.",
        ),
        CLIParameter(
            name=("--coordinator-address", "--coordinator_address"),
            group=Groups.DISTRIBUTED,
        ),
    ] = UserDefaults.COORDINATOR_ADDRESS

    collectives: Annotated[
        str | None,
        Field(
            description="Comma separated list of collectives to generate the perf table for. "
            "Allowed values: ALL_REDUCE, ALL_GATHER, REDUCE_SCATTER, ALL_TO_ALL. "
            "Unknown names are skipped with a warning.",
        ),
        CLIParameter(
            name=("--collectives",),
            group=Groups.SWEEP,
        ),
    ] = None

    tensor_size_bytes_spec: Annotated[
        str | None,
        Field(
            description="Spec for a sweep over transfer sizes in bytes. Keys: start, stop, factor, step. "
            "Example: start=1,stop=8,factor=2 generates {1,2,4,8}; "
            "start=1024,stop=4096,step=1024 generates {1024,2048,3072,4096}.",
        ),
        CLIParameter(
            name=("--tensor-size-bytes-spec", "--tensor_size_bytes_spec"),
            group=Groups.SWEEP,
        ),
    ] = None

    collective_devices_spec: Annotated[
        str | None,
        Field(
            description="';' separated list of replica group specifications in iota format, "
            "e.g. '[1,8]<=[8]' or '[1,8]<=[8];[2,4]<=[4,2]T(1,0)'.",
        ),
        CLIParameter(
            name=("--collective-devices-spec", "--collective_devices_spec"),
            group=Groups.SWEEP,
        ),
    ] = None

    output: Annotated[
        str,
        Field(
            description="Where to write the performance table. 'stdout' prints it to the console. "
            "A path ending in .json or .msgpack is created, or appended to if it already exists.",
        ),
        CLIParameter(
            name=("--output", "-o"),
            group=Groups.OUTPUT,
        ),
    ] = UserDefaults.OUTPUT

    dry_run: Annotated[
        bool,
        Field(
            description="Parse and validate the configuration, log the planned sweep and exit "
            "without contacting peers or running collectives.",
        ),
        CLIParameter(
            name=("--dry-run",),
            group=Groups.OUTPUT,
            negative="",
        ),
    ] = UserDefaults.DRY_RUN
