# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

OUTPUT_STDOUT = "stdout"
"""Output sentinel meaning 'print the profile table to the console'."""

JSON_EXTENSION = ".json"
MSGPACK_EXTENSION = ".msgpack"
PROFILE_TABLE_EXTENSIONS = (JSON_EXTENSION, MSGPACK_EXTENSION)

NANOS_PER_SECOND = 1_000_000_000
BYTES_PER_GB = 1_000_000_000
