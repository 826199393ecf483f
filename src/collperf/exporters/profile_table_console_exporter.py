# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.table import Table

from collperf.common.constants import BYTES_PER_GB
from collperf.exporters.exporter_config import ProfileTableExporterConfig

if TYPE_CHECKING:
    from rich.console import Console


class ProfileTableConsoleExporter:
    """Prints a profile table to the console, one rich table per device."""

    def __init__(self, config: ProfileTableExporterConfig) -> None:
        self._table = config.table

    def get_renderables(self) -> list[Table]:
        renderables = []
        for device, entries in self._table.entries.items():
            table = Table(title=f"Collective performance: {device}", title_justify="left")
            table.add_column("Collective", style="cyan", no_wrap=True)
            table.add_column("Replica groups", no_wrap=True)
            table.add_column("Size (B)", justify="right")
            table.add_column("Dtype")
            table.add_column("Runtime (us)", justify="right")
            table.add_column("Algbw (GB/s)", justify="right", style="green")
            table.add_column("Busbw (GB/s)", justify="right", style="green")
            for entry in entries:
                table.add_row(
                    entry.collective.value,
                    entry.replica_groups,
                    f"{entry.tensor_size_bytes:,}",
                    entry.dtype,
                    f"{entry.runtime_ns / 1e3:,.2f}",
                    f"{entry.network_throughput_bytes_per_sec / BYTES_PER_GB:,.3f}",
                    f"{entry.bus_bandwidth_bytes_per_sec / BYTES_PER_GB:,.3f}",
                )
            renderables.append(table)
        return renderables

    async def export(self, console: Console) -> None:
        renderables = self.get_renderables()
        if not renderables:
            console.print("[yellow]Profile table is empty[/yellow]")
            return
        for renderable in renderables:
            console.print(renderable)
