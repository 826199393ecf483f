# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

import pytest

from collperf.common.config import EngineConfig, ServiceConfig, UserConfig
from collperf.common.enums import CollectiveType
from collperf.profile.models import ProfileEntry, ProfileTable


def make_entry(
    collective: CollectiveType = CollectiveType.ALL_REDUCE,
    tensor_size_bytes: int = 1024,
    runtime_ns: float = 2_000.0,
    replica_groups: str = "[1,8]<=[8]",
    group_size: int = 8,
) -> ProfileEntry:
    """Create a ProfileEntry with sensible defaults for testing."""
    throughput = tensor_size_bytes * 1e9 / runtime_ns
    return ProfileEntry(
        collective=collective,
        replica_groups=replica_groups,
        num_replica_groups=1,
        group_size=group_size,
        tensor_size_bytes=tensor_size_bytes,
        dtype="float32",
        runtime_ns=runtime_ns,
        network_throughput_bytes_per_sec=throughput,
        bus_bandwidth_bytes_per_sec=throughput * 1.75,
    )


@pytest.fixture
def user_config() -> UserConfig:
    return UserConfig(
        num_nodes=1,
        task_id=0,
        coordinator_address="127.0.0.1:29500",
        collectives="ALL_REDUCE,ALL_GATHER",
        tensor_size_bytes_spec="start=1024,stop=4096,factor=2",
        collective_devices_spec="[1,1]<=[1]",
    )


@pytest.fixture
def engine_config() -> EngineConfig:
    return EngineConfig(warmup_iterations=1, iterations=2)


@pytest.fixture
def service_config() -> ServiceConfig:
    return ServiceConfig()


@pytest.fixture
def sample_table() -> ProfileTable:
    table = ProfileTable()
    table.add("NVIDIA H100 80GB HBM3", make_entry(tensor_size_bytes=1024))
    table.add("NVIDIA H100 80GB HBM3", make_entry(tensor_size_bytes=2048))
    table.add(
        "NVIDIA H100 80GB HBM3",
        make_entry(collective=CollectiveType.ALL_GATHER, tensor_size_bytes=1024),
    )
    return table


@pytest.fixture
def entry_factory():
    """Factory for ProfileEntry objects, see make_entry."""
    return make_entry
