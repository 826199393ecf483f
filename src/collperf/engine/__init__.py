# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from collperf.engine.factory import create_engine
from collperf.engine.protocols import ProfilingEngineProtocol

__all__ = ["ProfilingEngineProtocol", "create_engine"]
