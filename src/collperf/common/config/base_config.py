# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from pydantic import BaseModel, ConfigDict


class BaseConfig(BaseModel):
    """Base class for all user-facing configuration models.

    Unknown fields are rejected so that a misspelled option never silently
    falls back to its default.
    """

    model_config = ConfigDict(
        extra="forbid",
        use_enum_values=False,
        validate_default=True,
    )
