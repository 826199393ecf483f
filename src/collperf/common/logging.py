# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

import logging

from rich.console import Console
from rich.logging import RichHandler

from collperf.common.config.service_config import ServiceConfig
from collperf.common.environment import Environment

_HANDLER_NAME = "collperf-rich"


def setup_rich_logging(service_config: ServiceConfig) -> None:
    """Route collperf log records to a rich handler on stderr.

    Safe to call more than once: an existing collperf handler is replaced, so
    repeated launches in one process (e.g. tests) do not duplicate output.
    """
    level = logging.DEBUG if service_config.verbose else service_config.log_level.value

    root_logger = logging.getLogger("collperf")
    for handler in list(root_logger.handlers):
        if handler.get_name() == _HANDLER_NAME:
            root_logger.removeHandler(handler)

    handler = RichHandler(
        console=Console(stderr=True),
        rich_tracebacks=Environment.LOGGING.RICH_TRACEBACKS,
        show_path=Environment.LOGGING.SHOW_PATH,
        log_time_format="%H:%M:%S",
    )
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter("%(message)s"))

    root_logger.addHandler(handler)
    root_logger.setLevel(level)
