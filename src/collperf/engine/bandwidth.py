# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Buffer sizing and bandwidth arithmetic shared by profiling engines."""

from dataclasses import dataclass

from collperf.common.constants import NANOS_PER_SECOND
from collperf.common.enums import CollectiveType

# Collectives whose buffers are split evenly across the group.
SHARDED_COLLECTIVES = frozenset(
    {
        CollectiveType.ALL_GATHER,
        CollectiveType.REDUCE_SCATTER,
        CollectiveType.ALL_TO_ALL,
    }
)


@dataclass(frozen=True, slots=True)
class BufferSizes:
    """Element counts of a collective's input and output buffers.

    Attributes:
        input_elements: Elements each rank sends.
        output_elements: Elements each rank receives.
        itemsize: Bytes per element.
    """

    input_elements: int
    output_elements: int
    itemsize: int

    @property
    def nbytes(self) -> int:
        """Bytes of the full (unsharded) buffer."""
        return max(self.input_elements, self.output_elements) * self.itemsize


def buffer_sizes(
    collective: CollectiveType, size_bytes: int, itemsize: int, group_size: int
) -> BufferSizes:
    """Size the buffers for one collective call.

    size_bytes is the size of the full buffer: the all-reduce buffer, the
    all-gather output, the reduce-scatter input or the all-to-all buffer. It
    is truncated to whole elements, and for sharded collectives to a whole
    number of elements per rank, with at least one element per rank.
    """
    count = max(1, size_bytes // itemsize)
    if collective in SHARDED_COLLECTIVES:
        count = max(group_size, count - count % group_size)

    if collective == CollectiveType.ALL_GATHER:
        return BufferSizes(count // group_size, count, itemsize)
    if collective == CollectiveType.REDUCE_SCATTER:
        return BufferSizes(count, count // group_size, itemsize)
    return BufferSizes(count, count, itemsize)


def holds_one_element_per_rank(
    collective: CollectiveType, size_bytes: int, itemsize: int, group_size: int
) -> bool:
    """Whether size_bytes fits at least one element per rank without rounding up."""
    shards = group_size if collective in SHARDED_COLLECTIVES else 1
    return size_bytes >= itemsize * shards


def bus_factor(collective: CollectiveType, group_size: int) -> float:
    """Correction from algorithm bandwidth to bus bandwidth (nccl-tests convention)."""
    if group_size <= 1:
        return 0.0
    if collective == CollectiveType.ALL_REDUCE:
        return 2.0 * (group_size - 1) / group_size
    return (group_size - 1) / group_size


def throughput_bytes_per_sec(nbytes: int, runtime_ns: float) -> float:
    if runtime_ns <= 0:
        return 0.0
    return nbytes * NANOS_PER_SECOND / runtime_ns
