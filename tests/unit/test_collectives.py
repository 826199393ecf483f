# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

import logging

import pytest

from collperf.collectives import COLLECTIVE_TYPES, parse_collectives
from collperf.common.enums import CollectiveType
from collperf.common.exceptions import ConfigError


class TestParseCollectives:
    def test_every_collective_type_is_registered(self):
        assert set(COLLECTIVE_TYPES.values()) == set(CollectiveType)

    def test_known_names_in_order(self):
        assert parse_collectives("ALL_GATHER,ALL_REDUCE") == [
            CollectiveType.ALL_GATHER,
            CollectiveType.ALL_REDUCE,
        ]

    def test_all_four_collectives(self):
        result = parse_collectives("ALL_REDUCE, ALL_GATHER, REDUCE_SCATTER, ALL_TO_ALL")

        assert result == list(CollectiveType)

    def test_duplicates_are_kept(self):
        assert parse_collectives("ALL_REDUCE,ALL_REDUCE") == [
            CollectiveType.ALL_REDUCE,
            CollectiveType.ALL_REDUCE,
        ]

    def test_unknown_names_are_skipped_with_warning(self, caplog):
        with caplog.at_level(logging.WARNING, logger="collperf.collectives"):
            result = parse_collectives("ALL_REDUCE,BOGUS,ALL_GATHER")

        assert result == [CollectiveType.ALL_REDUCE, CollectiveType.ALL_GATHER]
        assert "Skipping unknown collective 'BOGUS'" in caplog.text

    def test_names_are_case_sensitive(self, caplog):
        with caplog.at_level(logging.WARNING, logger="collperf.collectives"):
            result = parse_collectives("all_reduce,ALL_TO_ALL")

        assert result == [CollectiveType.ALL_TO_ALL]
        assert "all_reduce" in caplog.text

    def test_only_unknown_names_raises(self):
        with pytest.raises(ConfigError, match="None of the collectives"):
            parse_collectives("BOGUS")

    @pytest.mark.parametrize("unparsed", [None, "", " "])
    def test_empty_input_raises(self, unparsed):
        with pytest.raises(ConfigError, match="No collectives given"):
            parse_collectives(unparsed)
