# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""Tests for cli_runner.py"""

import logging
from unittest.mock import Mock, patch

import msgspec
import orjson
import pytest

from collperf.cli_runner import build_run_config, run_profile
from collperf.common.config import EngineConfig, RunConfig, UserConfig
from collperf.common.enums import CollectiveType
from collperf.common.exceptions import ConfigError, EngineError, ParseError
from collperf.profile.models import ProfileTable


class FakeEngine:
    """Engine that returns a canned table and records what it was asked to run."""

    def __init__(self, table: ProfileTable | None = None, error: Exception | None = None):
        self.table = table or ProfileTable()
        self.error = error
        self.run_configs: list[RunConfig] = []

    def compute(self, run_config: RunConfig) -> ProfileTable:
        self.run_configs.append(run_config)
        if self.error is not None:
            raise self.error
        return self.table


class TestBuildRunConfig:
    def test_builds_from_raw_options(self, user_config: UserConfig, engine_config: EngineConfig):
        run_config = build_run_config(user_config, engine_config)

        assert run_config.collective_types == (
            CollectiveType.ALL_REDUCE,
            CollectiveType.ALL_GATHER,
        )
        assert run_config.tensor_sizes == [1024, 2048, 4096]
        assert [str(g) for g in run_config.replica_groups_list] == ["[1,1]<=[1]"]
        assert run_config.coordinator_address == "127.0.0.1:29500"
        assert run_config.engine is engine_config

    def test_is_deterministic(self, user_config: UserConfig):
        assert build_run_config(user_config) == build_run_config(user_config)

    def test_default_engine_config(self, user_config: UserConfig):
        assert build_run_config(user_config).engine == EngineConfig()

    def test_task_id_out_of_range_raises_config_error(self, user_config: UserConfig):
        user_config.num_nodes = 2
        user_config.task_id = 2

        with pytest.raises(ConfigError, match="Invalid task id 2"):
            build_run_config(user_config)

    def test_bad_address_raises_config_error(self, user_config: UserConfig):
        user_config.coordinator_address = "localhost"

        with pytest.raises(ConfigError, match="coordinator_address"):
            build_run_config(user_config)

    def test_bad_output_raises_config_error(self, user_config: UserConfig):
        user_config.output = "table.csv"

        with pytest.raises(ConfigError, match="Invalid output"):
            build_run_config(user_config)

    @pytest.mark.parametrize(
        "field,value,error",
        [
            ("tensor_size_bytes_spec", "start1024", ParseError),
            ("tensor_size_bytes_spec", None, ParseError),
            ("tensor_size_bytes_spec", "start=8,stop=4,factor=2", ConfigError),
            ("collective_devices_spec", "{{0,1}}", ParseError),
            ("collective_devices_spec", None, ConfigError),
            ("collectives", "BOGUS", ConfigError),
            ("collectives", None, ConfigError),
        ],
    )
    def test_invalid_spec_strings(self, user_config: UserConfig, field, value, error):
        setattr(user_config, field, value)

        with pytest.raises(error):
            build_run_config(user_config)


class TestRunProfile:
    def test_dry_run_does_not_run_engine(self, user_config: UserConfig, caplog):
        user_config.dry_run = True
        engine = FakeEngine()

        with caplog.at_level(logging.INFO, logger="collperf"):
            result = run_profile(user_config, engine=engine)

        assert result is None
        assert engine.run_configs == []
        assert "Dry run: 6 measurements planned" in caplog.text
        assert "[1,1]<=[1] -> [[0]]" in caplog.text

    def test_invalid_options_fail_before_engine_runs(self, user_config: UserConfig):
        user_config.tensor_size_bytes_spec = "start=abc"
        engine = FakeEngine()

        with pytest.raises(ParseError):
            run_profile(user_config, engine=engine)

        assert engine.run_configs == []

    def test_engine_receives_run_config(
        self, user_config: UserConfig, engine_config: EngineConfig, sample_table, capsys
    ):
        engine = FakeEngine(sample_table)

        result = run_profile(user_config, engine_config, engine=engine)

        assert result is sample_table
        [run_config] = engine.run_configs
        assert run_config == build_run_config(user_config, engine_config)

    def test_stdout_output_prints_table(self, user_config: UserConfig, sample_table, capsys):
        run_profile(user_config, engine=FakeEngine(sample_table))

        out = capsys.readouterr().out
        assert "Collective performance" in out
        assert "ALL_REDUCE" in out

    def test_file_output_is_written(self, user_config: UserConfig, sample_table, tmp_path):
        output = tmp_path / "table.json"
        user_config.output = str(output)

        run_profile(user_config, engine=FakeEngine(sample_table))

        table = ProfileTable.model_validate(orjson.loads(output.read_bytes()))
        assert table == sample_table

    def test_file_output_appends_across_runs(
        self, user_config: UserConfig, sample_table, tmp_path
    ):
        output = tmp_path / "table.msgpack"
        user_config.output = str(output)

        run_profile(user_config, engine=FakeEngine(sample_table.model_copy(deep=True)))
        run_profile(user_config, engine=FakeEngine(sample_table.model_copy(deep=True)))

        data = msgspec.msgpack.decode(output.read_bytes())
        assert ProfileTable.model_validate(data).num_entries == 2 * sample_table.num_entries

    def test_only_task_zero_writes_output(
        self, user_config: UserConfig, sample_table, tmp_path, caplog
    ):
        output = tmp_path / "table.json"
        user_config.output = str(output)
        user_config.num_nodes = 2
        user_config.task_id = 1

        with caplog.at_level(logging.INFO, logger="collperf"):
            result = run_profile(user_config, engine=FakeEngine(sample_table))

        assert result is sample_table
        assert not output.exists()
        assert "task 1 is done" in caplog.text

    def test_engine_error_propagates(self, user_config: UserConfig, tmp_path):
        output = tmp_path / "table.json"
        user_config.output = str(output)
        engine = FakeEngine(error=EngineError("rendezvous timed out"))

        with pytest.raises(EngineError, match="rendezvous timed out"):
            run_profile(user_config, engine=engine)

        assert not output.exists()

    @patch("collperf.engine.factory.create_engine")
    def test_engine_created_from_engine_config(
        self, mock_create: Mock, user_config: UserConfig, engine_config: EngineConfig, sample_table
    ):
        mock_create.return_value = FakeEngine(sample_table)

        run_profile(user_config, engine_config)

        mock_create.assert_called_once_with(engine_config)
