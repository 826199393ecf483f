# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Profiling engine built on torch.distributed.

Each task is one rank and drives one device, so the device ids in a replica
group list are global ranks and must be smaller than num_nodes. Launch one
process per device, all pointed at the same coordinator address:

    collperf --num-nodes 8 --task-id $RANK --collectives ALL_REDUCE \\
        --tensor-size-bytes-spec start=1024,stop=1073741824,factor=2 \\
        --collective-devices-spec '[1,8]<=[8];[2,4]<=[8]'
"""

from __future__ import annotations

import logging
import os
import platform
import time
from collections.abc import Callable
from datetime import timedelta
from typing import TYPE_CHECKING, Any

from collperf.common.config import EngineConfig, RunConfig
from collperf.common.enums import CollectiveType, CommBackend
from collperf.common.environment import Environment
from collperf.common.exceptions import EngineError
from collperf.engine.bandwidth import (
    BufferSizes,
    buffer_sizes,
    bus_factor,
    holds_one_element_per_rank,
    throughput_bytes_per_sec,
)
from collperf.profile.models import ProfileEntry, ProfileTable
from collperf.topology.iota import IotaReplicaGroupList

if TYPE_CHECKING:
    import torch

logger = logging.getLogger(__name__)

__all__ = [
    "TorchCollectiveEngine",
]

_BYTE_DTYPE = "uint8"


def _import_torch() -> tuple[Any, Any]:
    try:
        import torch
        import torch.distributed as dist
    except ImportError as e:
        raise EngineError(
            "The torch engine requires PyTorch. Install it with: pip install 'collperf[torch]'"
        ) from e
    if not dist.is_available():
        raise EngineError("torch.distributed is not available in this PyTorch build.")
    return torch, dist


class TorchCollectiveEngine:
    """Measures collectives with torch.distributed process groups."""

    def __init__(self, engine_config: EngineConfig) -> None:
        self.engine_config = engine_config
        self._torch, self._dist = _import_torch()
        self.backend = self._resolve_backend()
        self.dtype = getattr(self._torch, engine_config.dtype)
        self.itemsize = self._torch.tensor([], dtype=self.dtype).element_size()

    def _resolve_backend(self) -> str:
        if self.engine_config.backend == CommBackend.AUTO:
            return "nccl" if self._torch.cuda.is_available() else "gloo"
        return self.engine_config.backend.value

    def _select_device(self, task_id: int) -> torch.device:
        if self.backend != "nccl":
            return self._torch.device("cpu")
        if not self._torch.cuda.is_available():
            raise EngineError("The nccl backend requires CUDA devices, but none are visible.")
        local_rank = int(
            os.environ.get("LOCAL_RANK", task_id % self._torch.cuda.device_count())
        )
        device = self._torch.device("cuda", local_rank)
        self._torch.cuda.set_device(device)
        return device

    def _device_description(self, device: torch.device) -> str:
        if device.type == "cuda":
            return self._torch.cuda.get_device_name(device)
        return f"cpu-{platform.machine() or 'unknown'}"

    def compute(self, run_config: RunConfig) -> ProfileTable:
        """Join the process group, run the full sweep and return the table.

        Raises:
            EngineError: If rendezvous, group creation or any collective fails.
        """
        device = self._select_device(run_config.task_id)
        timeout = self.engine_config.rendezvous_timeout or Environment.ENGINE.RENDEZVOUS_TIMEOUT

        logger.info(
            f"Task {run_config.task_id}/{run_config.num_nodes} joining "
            f"{run_config.coordinator_address} (backend={self.backend}, device={device})"
        )
        try:
            self._dist.init_process_group(
                backend=self.backend,
                init_method=f"tcp://{run_config.coordinator_address}",
                world_size=run_config.num_nodes,
                rank=run_config.task_id,
                timeout=timedelta(seconds=timeout),
            )
        except (RuntimeError, ValueError, OSError) as e:
            raise EngineError(
                f"Failed to join the process group at {run_config.coordinator_address}: {e}"
            ) from e

        try:
            return self._compute_table(run_config, device)
        except (RuntimeError, ValueError, OSError) as e:
            raise EngineError(f"Collective execution failed: {e}") from e
        finally:
            self._dist.destroy_process_group()

    def _compute_table(self, run_config: RunConfig, device: torch.device) -> ProfileTable:
        table = ProfileTable()
        device_name = self._device_description(device)
        world_size = self._dist.get_world_size()
        sizes = run_config.tensor_sizes
        total = run_config.num_measurements
        index = 0

        for replica_groups in run_config.replica_groups_list:
            if replica_groups.num_devices > world_size:
                raise EngineError(
                    f"Replica groups {replica_groups} span {replica_groups.num_devices} devices "
                    f"but only {world_size} tasks joined; each task drives one device."
                )
            subgroup, _ = self._dist.new_subgroups_by_enumeration(
                replica_groups.to_groups(), backend=self.backend
            )

            for collective in run_config.collective_types:
                measured: set[int] = set()
                for size_bytes in sizes:
                    index += 1
                    dtype_name, sizing = self._size_buffers(
                        collective, size_bytes, replica_groups.num_devices_per_group
                    )
                    # Skips are identical on every rank.
                    if sizing.nbytes in measured:
                        logger.warning(
                            f"[{index}/{total}] Skipping {collective} {replica_groups} "
                            f"{size_bytes} B: rounds to {sizing.nbytes} B, which was already measured"
                        )
                        continue
                    measured.add(sizing.nbytes)

                    local_ns = (
                        self._time_collective(collective, sizing, dtype_name, subgroup, device)
                        if subgroup is not None
                        else 0.0
                    )
                    runtime_ns = self._max_across_ranks(local_ns, device)
                    entry = self._make_entry(
                        collective, replica_groups, sizing, dtype_name, runtime_ns
                    )
                    table.add(device_name, entry)
                    logger.info(
                        f"[{index}/{total}] {collective} {replica_groups} "
                        f"{entry.tensor_size_bytes} B ({dtype_name}): {runtime_ns / 1e3:,.2f} us, "
                        f"{entry.network_throughput_bytes_per_sec / 1e9:,.3f} GB/s"
                    )

        return table

    def _size_buffers(
        self, collective: CollectiveType, size_bytes: int, group_size: int
    ) -> tuple[str, BufferSizes]:
        """Pick the element type and buffer sizes for one measurement.

        Sizes too small for one element of the configured dtype per rank are
        measured with bytes instead, so the recorded size matches the request.
        """
        if holds_one_element_per_rank(collective, size_bytes, self.itemsize, group_size):
            dtype_name, itemsize = self.engine_config.dtype, self.itemsize
        else:
            dtype_name, itemsize = _BYTE_DTYPE, 1
        return dtype_name, buffer_sizes(collective, size_bytes, itemsize, group_size)

    def _make_entry(
        self,
        collective: CollectiveType,
        replica_groups: IotaReplicaGroupList,
        sizing: BufferSizes,
        dtype_name: str,
        runtime_ns: float,
    ) -> ProfileEntry:
        algbw = throughput_bytes_per_sec(sizing.nbytes, runtime_ns)
        return ProfileEntry(
            collective=collective,
            replica_groups=str(replica_groups),
            num_replica_groups=replica_groups.num_replica_groups,
            group_size=replica_groups.num_devices_per_group,
            tensor_size_bytes=sizing.nbytes,
            dtype=dtype_name,
            runtime_ns=runtime_ns,
            network_throughput_bytes_per_sec=algbw,
            bus_bandwidth_bytes_per_sec=algbw
            * bus_factor(collective, replica_groups.num_devices_per_group),
        )

    def _make_op(
        self,
        collective: CollectiveType,
        sizing: BufferSizes,
        dtype_name: str,
        group: Any,
        device: torch.device,
    ) -> Callable[[], None]:
        torch, dist = self._torch, self._dist
        dtype = getattr(torch, dtype_name)
        send = torch.zeros(sizing.input_elements, dtype=dtype, device=device)
        recv = torch.zeros(sizing.output_elements, dtype=dtype, device=device)
        group_size = dist.get_world_size(group)

        if collective == CollectiveType.ALL_REDUCE:
            return lambda: dist.all_reduce(send, group=group)
        if collective == CollectiveType.ALL_GATHER:
            if self.backend == "gloo":
                chunks = list(recv.chunk(group_size))
                return lambda: dist.all_gather(chunks, send, group=group)
            return lambda: dist.all_gather_into_tensor(recv, send, group=group)
        if collective == CollectiveType.REDUCE_SCATTER:
            return lambda: dist.reduce_scatter_tensor(recv, send, group=group)
        if collective == CollectiveType.ALL_TO_ALL:
            return lambda: dist.all_to_all_single(recv, send, group=group)
        raise EngineError(f"Collective {collective} is not supported by the torch engine.")

    def _synchronize(self, device: torch.device) -> None:
        if device.type == "cuda":
            self._torch.cuda.synchronize(device)

    def _time_collective(
        self,
        collective: CollectiveType,
        sizing: BufferSizes,
        dtype_name: str,
        group: Any,
        device: torch.device,
    ) -> float:
        """Return the mean wall time of one call in nanoseconds, on this rank."""
        op = self._make_op(collective, sizing, dtype_name, group, device)

        for _ in range(self.engine_config.warmup_iterations):
            op()
        self._synchronize(device)
        if Environment.ENGINE.BARRIER_BEFORE_TIMING:
            self._dist.barrier(group=group)

        start_ns = time.perf_counter_ns()
        for _ in range(self.engine_config.iterations):
            op()
        self._synchronize(device)
        return (time.perf_counter_ns() - start_ns) / self.engine_config.iterations

    def _max_across_ranks(self, value: float, device: torch.device) -> float:
        """The slowest rank bounds a collective, so report the max over all ranks."""
        tensor = self._torch.tensor([value], dtype=self._torch.float64, device=device)
        self._dist.all_reduce(tensor, op=self._dist.ReduceOp.MAX)
        return float(tensor.item())
