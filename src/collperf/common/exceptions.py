# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Exception hierarchy for collperf.

Every error raised on purpose by collperf derives from CollPerfError, so the
CLI can turn any of them into a clean exit with a non-zero status.
"""


class CollPerfError(Exception):
    """Base class for all collperf errors."""


class ParseError(CollPerfError):
    """A raw option string is malformed (missing delimiter, non-numeric value, unknown key)."""


class ConfigError(CollPerfError):
    """An option parses, but its value is semantically invalid."""


class EngineError(CollPerfError):
    """The profiling engine failed while rendezvousing or running collectives."""


class ExportError(CollPerfError):
    """The profile table could not be read from or written to its destination."""
