# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Profile table produced by a profiling engine."""

from pydantic import BaseModel, ConfigDict, Field

from collperf.common.enums import CollectiveType


class ProfileEntry(BaseModel):
    """Measured performance of one collective at one size on one topology."""

    collective: CollectiveType = Field(description="Collective operation that was measured")
    replica_groups: str = Field(description="Replica groups in canonical iota form")
    num_replica_groups: int = Field(ge=1, description="Number of replica groups")
    group_size: int = Field(ge=1, description="Devices participating in each group")
    tensor_size_bytes: int = Field(ge=1, description="Bytes of the full buffer exchanged")
    dtype: str = Field(description="Element type of the exchanged buffer")
    runtime_ns: float = Field(ge=0, description="Mean runtime of one collective call")
    network_throughput_bytes_per_sec: float = Field(
        ge=0, description="Algorithm bandwidth: tensor_size_bytes / runtime"
    )
    bus_bandwidth_bytes_per_sec: float = Field(
        ge=0, description="Algorithm bandwidth scaled by the collective's bus factor"
    )


class ProfileTable(BaseModel):
    """Profile entries grouped by device description (e.g. GPU model)."""

    model_config = ConfigDict(extra="forbid")

    entries: dict[str, list[ProfileEntry]] = Field(default_factory=dict)

    def add(self, device: str, entry: ProfileEntry) -> None:
        self.entries.setdefault(device, []).append(entry)

    def merge(self, other: "ProfileTable") -> "ProfileTable":
        """Append every entry of other to this table, per device. Returns self."""
        for device, device_entries in other.entries.items():
            self.entries.setdefault(device, []).extend(device_entries)
        return self

    @property
    def num_entries(self) -> int:
        return sum(len(device_entries) for device_entries in self.entries.values())
