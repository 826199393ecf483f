# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

import asyncio
import logging
from pathlib import Path

from pydantic import ValidationError

from collperf.collectives import parse_collectives
from collperf.common.config import EngineConfig, RunConfig, ServiceConfig, UserConfig
from collperf.common.exceptions import ConfigError
from collperf.common.logging import setup_rich_logging
from collperf.engine.protocols import ProfilingEngineProtocol
from collperf.profile.models import ProfileTable
from collperf.sweep.step_spec import parse_step_spec
from collperf.topology.iota import parse_device_groups

logger = logging.getLogger(__name__)


def initialize(service_config: ServiceConfig) -> None:
    """Process-wide setup done once at startup, before any run."""
    setup_rich_logging(service_config)


def _format_validation_error(error: ValidationError) -> str:
    messages = []
    for detail in error.errors():
        message = detail["msg"].removeprefix("Value error, ")
        location = ".".join(str(part) for part in detail["loc"])
        messages.append(f"{location}: {message}" if location else message)
    return "\n".join(messages)


def build_run_config(
    user_config: UserConfig, engine_config: EngineConfig | None = None
) -> RunConfig:
    """Parse the raw option strings into a validated RunConfig.

    Raises:
        ParseError: If a spec string is malformed.
        ConfigError: If the options parse but are not a valid run.
    """
    collective_types = parse_collectives(user_config.collectives)
    tensor_size_bytes_spec = parse_step_spec(user_config.tensor_size_bytes_spec)
    replica_groups_list = parse_device_groups(user_config.collective_devices_spec)

    try:
        return RunConfig(
            num_nodes=user_config.num_nodes,
            task_id=user_config.task_id,
            coordinator_address=user_config.coordinator_address,
            collective_types=tuple(collective_types),
            tensor_size_bytes_spec=tensor_size_bytes_spec,
            replica_groups_list=tuple(replica_groups_list),
            output=user_config.output,
            engine=engine_config or EngineConfig(),
        )
    except ValidationError as e:
        raise ConfigError(_format_validation_error(e)) from e


def _log_run_banner(run_config: RunConfig) -> None:
    logger.info("=" * 80)
    logger.info("Collective Performance Table Generation")
    logger.info(
        f"  Task: {run_config.task_id} of {run_config.num_nodes} "
        f"(coordinator {run_config.coordinator_address})"
    )
    logger.info(f"  Collectives: {', '.join(c.value for c in run_config.collective_types)}")
    logger.info(
        f"  Tensor sizes (bytes): {run_config.tensor_size_bytes_spec} "
        f"-> {run_config.num_sizes} sizes"
    )
    logger.info(
        f"  Replica groups: {'; '.join(str(g) for g in run_config.replica_groups_list)}"
    )
    logger.info(f"  Output: {run_config.output}")
    logger.info("=" * 80)


def _log_planned_sweep(run_config: RunConfig) -> None:
    logger.info(f"Dry run: {run_config.num_measurements} measurements planned")
    for replica_groups in run_config.replica_groups_list:
        logger.info(f"  {replica_groups} -> {replica_groups.to_groups()}")
    logger.info(f"  Sizes: {run_config.tensor_sizes}")


def export_profile_table(table: ProfileTable, run_config: RunConfig) -> Path | None:
    """Print the table or write it to the run's output file.

    Returns:
        The file written to, or None when printed to the console.
    """
    from rich.console import Console

    from collperf.exporters import (
        ProfileTableConsoleExporter,
        ProfileTableExporterConfig,
        create_file_exporter,
    )

    exporter_config = ProfileTableExporterConfig(table=table, output=run_config.output)
    if run_config.is_stdout:
        asyncio.run(ProfileTableConsoleExporter(exporter_config).export(Console()))
        return None

    path = asyncio.run(create_file_exporter(exporter_config).export())
    logger.info(f"Profile table written to: {path}")
    return path


def run_profile(
    user_config: UserConfig,
    engine_config: EngineConfig | None = None,
    engine: ProfilingEngineProtocol | None = None,
) -> ProfileTable | None:
    """Build the run configuration, profile it and persist the table.

    Args:
        user_config: Raw options of this run.
        engine_config: Engine settings; defaults are used when omitted.
        engine: Engine to use instead of the one named by engine_config.

    Returns:
        The computed profile table, or None for a dry run.

    Raises:
        ParseError, ConfigError: On invalid options, before any peer is contacted.
        EngineError: If the engine fails. There are no retries.
        ExportError: If the table cannot be written.
    """
    run_config = build_run_config(user_config, engine_config)
    _log_run_banner(run_config)

    if user_config.dry_run:
        _log_planned_sweep(run_config)
        return None

    if engine is None:
        from collperf.engine.factory import create_engine

        engine = create_engine(run_config.engine)

    try:
        table = engine.compute(run_config)
    except Exception:
        logger.error("Profiling engine failed")
        raise

    logger.info(f"Profiled {table.num_entries} measurements")

    if run_config.task_id != 0:
        logger.info(f"Task 0 writes the profile table; task {run_config.task_id} is done")
        return table

    export_profile_table(table, run_config)
    return table
