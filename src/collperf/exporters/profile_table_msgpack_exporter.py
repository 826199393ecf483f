# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Binary (msgpack) exporter for profile tables."""

import msgspec

from collperf.exporters.profile_table_base_exporter import ProfileTableBaseExporter
from collperf.profile.models import ProfileTable


class ProfileTableMsgpackExporter(ProfileTableBaseExporter):
    """Exports a profile table as msgpack, with the same layout as the JSON export."""

    def _encode(self, table: ProfileTable) -> bytes:
        return msgspec.msgpack.encode(table.model_dump(mode="json"))

    def _decode(self, content: bytes) -> ProfileTable:
        try:
            data = msgspec.msgpack.decode(content)
        except msgspec.DecodeError as e:
            raise ValueError(str(e)) from e
        return ProfileTable.model_validate(data)
