# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Base class for exporters that persist a profile table to a file."""

import asyncio
import logging
from abc import ABC, abstractmethod
from pathlib import Path

from collperf.common.exceptions import ExportError
from collperf.exporters.exporter_config import ProfileTableExporterConfig
from collperf.profile.models import ProfileTable

logger = logging.getLogger(__name__)


class ProfileTableBaseExporter(ABC):
    """Writes a profile table to a file, appending to an existing table.

    If the destination already holds a table in the same format, the new
    entries are merged into it per device. Otherwise the file (and its parent
    directories) is created. A destination that exists but cannot be decoded
    is an error; it is never overwritten.
    """

    def __init__(self, config: ProfileTableExporterConfig) -> None:
        self._table = config.table
        self._path = Path(config.output)

    @property
    def path(self) -> Path:
        return self._path

    @abstractmethod
    def _encode(self, table: ProfileTable) -> bytes:
        """Serialize the table to the file format."""

    @abstractmethod
    def _decode(self, content: bytes) -> ProfileTable:
        """Deserialize a table previously written by _encode.

        Raises:
            ValueError: If the content is not a valid table.
        """

    def _load_existing(self) -> ProfileTable | None:
        if not self._path.exists():
            return None
        try:
            content = self._path.read_bytes()
        except OSError as e:
            raise ExportError(f"Cannot read existing profile table {self._path}: {e}") from e
        if not content.strip():
            return None
        try:
            return self._decode(content)
        except ValueError as e:
            raise ExportError(
                f"Existing file {self._path} is not a readable profile table; "
                f"refusing to overwrite it: {e}"
            ) from e

    def _write(self) -> int:
        existing = self._load_existing()
        table = self._table
        if existing is not None:
            logger.info(
                f"Appending {table.num_entries} entries to {existing.num_entries} "
                f"existing entries in {self._path}"
            )
            table = existing.merge(table)
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_bytes(self._encode(table))
        except OSError as e:
            raise ExportError(f"Cannot write profile table to {self._path}: {e}") from e
        return table.num_entries

    async def export(self) -> Path:
        """Merge and write the table off the event loop.

        Returns:
            Path the table was written to.
        """
        num_entries = await asyncio.to_thread(self._write)
        logger.debug(f"Wrote {num_entries} entries to {self._path}")
        return self._path
