# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Lookup of collective operation names given on the command line."""

import logging

from collperf.common.enums import CollectiveType
from collperf.common.exceptions import ConfigError

logger = logging.getLogger(__name__)

__all__ = [
    "COLLECTIVE_TYPES",
    "parse_collectives",
]

COLLECTIVE_TYPES: dict[str, CollectiveType] = {
    collective.value: collective for collective in CollectiveType
}


def parse_collectives(unparsed: str | None) -> list[CollectiveType]:
    """Map a comma separated list of names to collective types.

    Names are case-sensitive. Unknown names are skipped rather than rejected;
    each one is logged as a warning. Order and duplicates are preserved.

    Raises:
        ConfigError: If the input is empty or no known collective remains.
    """
    if unparsed is None or not unparsed.strip():
        raise ConfigError(
            "No collectives given; expected a comma separated list such as ALL_REDUCE,ALL_GATHER."
        )

    types: list[CollectiveType] = []
    for token in unparsed.split(","):
        name = token.strip()
        collective = COLLECTIVE_TYPES.get(name)
        if collective is None:
            logger.warning(f"Skipping unknown collective '{name}'")
            continue
        types.append(collective)

    if not types:
        raise ConfigError(
            f"None of the collectives in '{unparsed}' are known. "
            f"Allowed values: {', '.join(COLLECTIVE_TYPES)}."
        )
    return types
