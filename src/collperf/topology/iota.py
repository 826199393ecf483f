# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Iota replica group lists.

An iota replica group list describes how devices are partitioned into
replica groups without enumerating them. ``[G,S]<=[d0,...,dn]T(p0,...,pn)``
means: lay out device ids ``0 .. G*S-1`` in an array of shape
``[d0,...,dn]``, transpose it by ``(p0,...,pn)`` and read it back as ``G``
groups of ``S`` devices. The transpose is optional.

    [1,8]<=[8]          -> [[0, 1, 2, 3, 4, 5, 6, 7]]
    [2,4]<=[4,2]T(1,0)  -> [[0, 2, 4, 6], [1, 3, 5, 7]]
"""

import math
import re

import numpy as np
from pydantic import BaseModel, ConfigDict

from collperf.common.exceptions import ConfigError, ParseError

__all__ = [
    "IotaReplicaGroupList",
    "parse_device_group",
    "parse_device_groups",
]

_INT_LIST = r"\s*\d+\s*(?:,\s*\d+\s*)*"
_IOTA_RE = re.compile(
    rf"^\s*\[(?P<dims>{_INT_LIST})\]\s*<=\s*\[(?P<reshape>{_INT_LIST})\]"
    rf"\s*(?:T\s*\((?P<perm>{_INT_LIST})\))?\s*$"
)


def _ints(text: str) -> tuple[int, ...]:
    return tuple(int(part) for part in text.split(","))


class IotaReplicaGroupList(BaseModel):
    """Replica groups described as a transposed iota.

    Attributes:
        num_replica_groups: Number of groups (G).
        num_devices_per_group: Devices in each group (S).
        reshape_dims: Shape the iota over G*S devices is laid out in.
        transpose_perm: Permutation applied to reshape_dims before regrouping.
    """

    model_config = ConfigDict(frozen=True)

    num_replica_groups: int
    num_devices_per_group: int
    reshape_dims: tuple[int, ...]
    transpose_perm: tuple[int, ...]

    @property
    def num_devices(self) -> int:
        return self.num_replica_groups * self.num_devices_per_group

    @property
    def has_transpose(self) -> bool:
        return self.transpose_perm != tuple(range(len(self.reshape_dims)))

    def to_groups(self) -> list[list[int]]:
        """Expand into explicit replica groups of device ids."""
        iota = np.arange(self.num_devices, dtype=np.int64)
        grouped = (
            iota.reshape(self.reshape_dims)
            .transpose(self.transpose_perm)
            .reshape(self.num_replica_groups, self.num_devices_per_group)
        )
        return grouped.tolist()

    def __str__(self) -> str:
        dims = f"[{self.num_replica_groups},{self.num_devices_per_group}]"
        if not self.has_transpose:
            return f"{dims}<=[{self.num_devices}]"
        reshape = ",".join(str(d) for d in self.reshape_dims)
        perm = ",".join(str(p) for p in self.transpose_perm)
        return f"{dims}<=[{reshape}]T({perm})"


def parse_device_group(unparsed: str) -> IotaReplicaGroupList:
    """Parse one iota replica group descriptor.

    Raises:
        ParseError: If the text is not a valid iota replica group list. Explicit
            group lists such as ``{{0,1},{2,3}}`` are not supported.
    """
    if "{" in unparsed:
        raise ParseError(
            f"Cannot parse device group '{unparsed}': explicit replica group lists are "
            "not supported, use the iota form, e.g. [2,4]<=[8]."
        )

    match = _IOTA_RE.match(unparsed)
    if match is None:
        raise ParseError(
            f"Cannot parse device group '{unparsed}': expected [G,S]<=[dims] with an "
            "optional T(perm), e.g. [1,8]<=[8] or [2,4]<=[4,2]T(1,0)."
        )

    dims = _ints(match.group("dims"))
    reshape_dims = _ints(match.group("reshape"))
    perm_text = match.group("perm")
    transpose_perm = _ints(perm_text) if perm_text is not None else None

    if len(dims) != 2:
        raise ParseError(
            f"Cannot parse device group '{unparsed}': expected exactly two dimensions "
            f"[num_groups,group_size], got {len(dims)}."
        )
    if any(d < 1 for d in dims + reshape_dims):
        raise ParseError(f"Cannot parse device group '{unparsed}': dimensions must be >= 1.")

    num_groups, group_size = dims
    num_devices = num_groups * group_size
    reshape_size = math.prod(reshape_dims)

    if transpose_perm is not None:
        if sorted(transpose_perm) != list(range(len(reshape_dims))):
            raise ParseError(
                f"Cannot parse device group '{unparsed}': T{transpose_perm} is not a "
                f"permutation of the {len(reshape_dims)} reshape dimensions."
            )
        if reshape_size != num_devices:
            raise ParseError(
                f"Cannot parse device group '{unparsed}': reshape dimensions cover "
                f"{reshape_size} devices but {num_groups}x{group_size} groups need {num_devices}."
            )
    elif reshape_size != num_devices:
        # Without a transpose, reshape dims may name only the minor dimensions.
        if num_devices % reshape_size != 0:
            raise ParseError(
                f"Cannot parse device group '{unparsed}': reshape dimensions cover "
                f"{reshape_size} devices, which does not divide {num_devices}."
            )
        reshape_dims = (num_devices // reshape_size, *reshape_dims)

    if transpose_perm is None:
        transpose_perm = tuple(range(len(reshape_dims)))

    return IotaReplicaGroupList(
        num_replica_groups=num_groups,
        num_devices_per_group=group_size,
        reshape_dims=reshape_dims,
        transpose_perm=transpose_perm,
    )


def parse_device_groups(unparsed: str | None) -> list[IotaReplicaGroupList]:
    """Parse a ';' separated list of iota replica group descriptors, in order.

    Raises:
        ConfigError: If the list is empty.
        ParseError: If any descriptor fails to parse.
    """
    if unparsed is None or not unparsed.strip():
        raise ConfigError(
            "Collective devices spec is empty; expected at least one replica group "
            "list such as [1,8]<=[8]."
        )
    return [parse_device_group(token) for token in unparsed.split(";")]
