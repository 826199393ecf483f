# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""Tests for the collperf command line."""

from unittest.mock import Mock, patch

import pytest

from collperf.cli import app
from collperf.common.config import EngineConfig, ServiceConfig, UserConfig
from collperf.common.enums import CommBackend, LogLevel
from collperf.common.exceptions import ConfigError

ARGS = [
    "--num-nodes",
    "2",
    "--task-id",
    "1",
    "--coordinator-address",
    "10.0.0.1:29500",
    "--collectives",
    "ALL_REDUCE,ALL_GATHER",
    "--tensor-size-bytes-spec",
    "start=1024,stop=2147483648,factor=2",
    "--collective-devices-spec",
    "[1,8]<=[8];[2,4]<=[4]",
]


@patch("collperf.cli_runner.initialize")
@patch("collperf.cli_runner.run_profile")
class TestProfileCommand:
    def test_options_are_passed_to_runner(self, mock_run: Mock, mock_init: Mock):
        app(ARGS)

        mock_run.assert_called_once()
        user_config, engine_config = mock_run.call_args.args
        assert isinstance(user_config, UserConfig)
        assert user_config.num_nodes == 2
        assert user_config.task_id == 1
        assert user_config.coordinator_address == "10.0.0.1:29500"
        assert user_config.collectives == "ALL_REDUCE,ALL_GATHER"
        assert user_config.tensor_size_bytes_spec == "start=1024,stop=2147483648,factor=2"
        assert user_config.collective_devices_spec == "[1,8]<=[8];[2,4]<=[4]"
        assert user_config.output == "stdout"
        assert user_config.dry_run is False
        assert engine_config == EngineConfig()

    def test_profile_subcommand_matches_default(self, mock_run: Mock, mock_init: Mock):
        app(["profile", *ARGS])

        user_config, _ = mock_run.call_args.args
        assert user_config.collectives == "ALL_REDUCE,ALL_GATHER"

    def test_underscore_option_names(self, mock_run: Mock, mock_init: Mock):
        app(["--num_nodes", "4", "--task_id", "3", "--collectives", "ALL_TO_ALL"])

        user_config, _ = mock_run.call_args.args
        assert user_config.num_nodes == 4
        assert user_config.task_id == 3

    def test_engine_and_service_options(self, mock_run: Mock, mock_init: Mock):
        app(
            [
                *ARGS,
                "--backend",
                "gloo",
                "--iterations",
                "3",
                "--log-level",
                "DEBUG",
                "--dry-run",
                "-o",
                "table.json",
            ]
        )

        user_config, engine_config = mock_run.call_args.args
        assert user_config.dry_run is True
        assert user_config.output == "table.json"
        assert engine_config.backend == CommBackend.GLOO
        assert engine_config.iterations == 3
        [service_config] = mock_init.call_args.args
        assert isinstance(service_config, ServiceConfig)
        assert service_config.log_level == LogLevel.DEBUG

    def test_runner_error_exits_with_status_one(self, mock_run: Mock, mock_init: Mock, capsys):
        mock_run.side_effect = ConfigError("Invalid task id 3")

        with pytest.raises(SystemExit) as exc_info:
            app(ARGS)

        assert exc_info.value.code == 1
        assert "Invalid task id 3" in capsys.readouterr().err


class TestInvalidOptions:
    @pytest.mark.parametrize(
        "extra_args",
        [
            ["--num-nodes", "0"],
            ["--task-id", "-1"],
            ["--backend", "mpi"],
        ],
    )
    @patch("collperf.cli_runner.run_profile")
    def test_rejected_options_report_on_stderr(self, mock_run: Mock, extra_args, capsys):
        with pytest.raises(SystemExit) as exc_info:
            app([*ARGS[4:], *extra_args])

        assert exc_info.value.code != 0
        captured = capsys.readouterr()
        assert captured.err.strip()
        assert captured.out == ""
        mock_run.assert_not_called()
