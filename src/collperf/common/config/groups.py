# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from cyclopts import Group


class Groups:
    """Help-panel groups for the CLI, in display order."""

    DISTRIBUTED = Group.create_ordered("Distributed")
    SWEEP = Group.create_ordered("Sweep")
    OUTPUT = Group.create_ordered("Output")
    ENGINE = Group.create_ordered("Engine")
    LOGGING = Group.create_ordered("Logging")
