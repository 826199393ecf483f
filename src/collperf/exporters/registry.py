# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from pathlib import Path

from collperf.common.constants import JSON_EXTENSION, MSGPACK_EXTENSION
from collperf.common.exceptions import ConfigError
from collperf.exporters.exporter_config import ProfileTableExporterConfig
from collperf.exporters.profile_table_base_exporter import ProfileTableBaseExporter
from collperf.exporters.profile_table_json_exporter import ProfileTableJsonExporter
from collperf.exporters.profile_table_msgpack_exporter import (
    ProfileTableMsgpackExporter,
)

_EXPORTERS_BY_EXTENSION: dict[str, type[ProfileTableBaseExporter]] = {
    JSON_EXTENSION: ProfileTableJsonExporter,
    MSGPACK_EXTENSION: ProfileTableMsgpackExporter,
}


def create_file_exporter(config: ProfileTableExporterConfig) -> ProfileTableBaseExporter:
    """Pick the file exporter matching the output path's extension."""
    suffix = Path(config.output).suffix.lower()
    exporter_cls = _EXPORTERS_BY_EXTENSION.get(suffix)
    if exporter_cls is None:
        raise ConfigError(
            f"No profile table exporter for '{config.output}'. "
            f"Supported extensions: {', '.join(_EXPORTERS_BY_EXTENSION)}."
        )
    return exporter_cls(config)
