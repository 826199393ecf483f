# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""collperf - Collective Communication Performance Table Generator."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("collperf")
except PackageNotFoundError:
    __version__ = "unknown"
