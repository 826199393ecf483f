# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from collperf.topology.iota import (
    IotaReplicaGroupList,
    parse_device_group,
    parse_device_groups,
)

__all__ = ["IotaReplicaGroupList", "parse_device_group", "parse_device_groups"]
