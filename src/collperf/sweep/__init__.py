# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from collperf.sweep.step_spec import StepSpec, parse_step_spec

__all__ = ["StepSpec", "parse_step_spec"]
