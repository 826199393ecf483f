# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from typing import NoReturn

from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from collperf.common.exceptions import CollPerfError

logger = logging.getLogger(__name__)


def raise_startup_error_and_exit(
    message: str, title: str = "Error", exit_code: int = 1
) -> NoReturn:
    """Print an error panel to stderr and exit the process."""
    console = Console(stderr=True)
    console.print(
        Panel(Text(message), title=title, title_align="left", border_style="red")
    )
    sys.exit(exit_code)


@contextmanager
def exit_on_error(title: str = "collperf Error") -> Iterator[None]:
    """Turn any error escaping the block into an error panel and exit status 1.

    Known collperf errors are reported by message only; anything else is also
    logged with its traceback.
    """
    try:
        yield
    except CollPerfError as e:
        raise_startup_error_and_exit(str(e), title=f"{title}: {type(e).__name__}")
    except Exception as e:
        logger.exception("Unexpected error")
        raise_startup_error_and_exit(f"{type(e).__name__}: {e}", title=title)
