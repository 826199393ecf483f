# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Validated, immutable configuration consumed by the profiling engine."""

import re
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from collperf.common.config.engine_config import EngineConfig
from collperf.common.constants import OUTPUT_STDOUT, PROFILE_TABLE_EXTENSIONS
from collperf.common.enums import CollectiveType
from collperf.sweep.step_spec import StepSpec
from collperf.topology.iota import IotaReplicaGroupList

_ADDRESS_RE = re.compile(r"^(?P<host>\[[0-9A-Fa-f:.]+\]|[A-Za-z0-9_.\-]+):(?P<port>\d{1,5})$")


class RunConfig(BaseModel):
    """Everything a profiling engine needs for one run.

    Built once per process by `collperf.cli_runner.build_run_config` and never
    modified afterwards.

    Attributes:
        num_nodes: Number of cooperating processes.
        task_id: This process's identifier, in [0, num_nodes).
        coordinator_address: host:port every task rendezvouses at.
        collective_types: Collectives to profile, in order.
        tensor_size_bytes_spec: Sweep over message sizes in bytes.
        replica_groups_list: Replica group topologies to profile, in order.
        output: "stdout" or a .json / .msgpack file path.
        engine: Engine settings.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    num_nodes: int = Field(ge=1)
    task_id: int = Field(ge=0)
    coordinator_address: str
    collective_types: tuple[CollectiveType, ...] = Field(min_length=1)
    tensor_size_bytes_spec: StepSpec
    replica_groups_list: tuple[IotaReplicaGroupList, ...] = Field(min_length=1)
    output: str = OUTPUT_STDOUT
    engine: EngineConfig = Field(default_factory=EngineConfig)

    @field_validator("coordinator_address")
    @classmethod
    def validate_coordinator_address(cls, v: str) -> str:
        match = _ADDRESS_RE.match(v.strip())
        if match is None:
            raise ValueError(
                f"Invalid coordinator address '{v}'. Expected host:port, e.g. 127.0.0.1:1234."
            )
        port = int(match.group("port"))
        if not 1 <= port <= 65535:
            raise ValueError(
                f"Invalid coordinator address '{v}': port {port} is outside 1-65535."
            )
        return v.strip()

    @field_validator("output")
    @classmethod
    def validate_output(cls, v: str) -> str:
        if v == OUTPUT_STDOUT:
            return v
        if Path(v).suffix.lower() not in PROFILE_TABLE_EXTENSIONS:
            raise ValueError(
                f"Invalid output '{v}'. Use '{OUTPUT_STDOUT}' or a file path ending in "
                f"{' or '.join(PROFILE_TABLE_EXTENSIONS)}."
            )
        return v

    @model_validator(mode="after")
    def validate_task_id(self) -> "RunConfig":
        if self.task_id >= self.num_nodes:
            raise ValueError(
                f"Invalid task id {self.task_id}: must be in [0, {self.num_nodes}) "
                f"for --num-nodes {self.num_nodes}."
            )
        return self

    @property
    def is_stdout(self) -> bool:
        return self.output == OUTPUT_STDOUT

    @property
    def tensor_sizes(self) -> list[int]:
        return self.tensor_size_bytes_spec.to_list()

    @property
    def num_sizes(self) -> int:
        return self.tensor_size_bytes_spec.num_sizes

    @property
    def num_measurements(self) -> int:
        """Number of (topology, collective, size) combinations in the sweep."""
        return (
            len(self.replica_groups_list)
            * len(self.collective_types)
            * self.num_sizes
        )
