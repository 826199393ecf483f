# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from cyclopts import Parameter


def CLIParameter(**kwargs) -> Parameter:  # noqa: N802
    """Build the cyclopts Parameter used by config fields.

    Environment-variable hints are hidden because options are only read from
    the command line; everything else is passed through to cyclopts.
    """
    kwargs.setdefault("show_env_var", False)
    return Parameter(**kwargs)
