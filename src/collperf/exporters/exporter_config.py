# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Configuration for profile table exporters."""

from dataclasses import dataclass

from collperf.profile.models import ProfileTable


@dataclass(slots=True)
class ProfileTableExporterConfig:
    """Configuration for profile table exporters.

    Attributes:
        table: ProfileTable to export
        output: "stdout" or the destination file path
    """

    table: ProfileTable
    output: str
