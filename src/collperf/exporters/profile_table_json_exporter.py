# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""JSON exporter for profile tables."""

import orjson

from collperf.exporters.profile_table_base_exporter import ProfileTableBaseExporter
from collperf.profile.models import ProfileTable


class ProfileTableJsonExporter(ProfileTableBaseExporter):
    """Exports a profile table as indented JSON.

    Output structure:
    {
        "entries": {
            "NVIDIA H100 80GB HBM3": [
                {"collective": "ALL_REDUCE", "replica_groups": "[1,8]<=[8]", ...},
                ...
            ]
        }
    }
    """

    def _encode(self, table: ProfileTable) -> bytes:
        return orjson.dumps(table.model_dump(mode="json"), option=orjson.OPT_INDENT_2)

    def _decode(self, content: bytes) -> ProfileTable:
        return ProfileTable.model_validate(orjson.loads(content))
