# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Exporters that persist or print profile tables."""

from collperf.exporters.exporter_config import ProfileTableExporterConfig
from collperf.exporters.profile_table_base_exporter import ProfileTableBaseExporter
from collperf.exporters.profile_table_console_exporter import (
    ProfileTableConsoleExporter,
)
from collperf.exporters.profile_table_json_exporter import ProfileTableJsonExporter
from collperf.exporters.profile_table_msgpack_exporter import (
    ProfileTableMsgpackExporter,
)
from collperf.exporters.registry import create_file_exporter

__all__ = [
    "ProfileTableBaseExporter",
    "ProfileTableConsoleExporter",
    "ProfileTableExporterConfig",
    "ProfileTableJsonExporter",
    "ProfileTableMsgpackExporter",
    "create_file_exporter",
]
