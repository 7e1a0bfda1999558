# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

import pytest

from promget.common.enums import MetricType
from promget.parsing.filters import MetricFilter

SERVICE_A = {"short": "service_a", "boundary": "backend"}
SERVICE_B = {"short": "service_b", "boundary": "frontend"}


class TestMetricFilterConstruction:
    def test_empty_filter(self):
        metric_filter = MetricFilter()

        assert metric_filter.is_empty
        assert metric_filter.matches("anything", MetricType.UNKNOWN, {})

    def test_add_methods_accumulate(self):
        metric_filter = MetricFilter().add_names("a").add_names("b", "c")

        assert metric_filter.names == ["a", "b", "c"]
        assert not metric_filter.is_empty

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("gauge", MetricType.GAUGE),
            ("COUNTER", MetricType.COUNTER),
            (MetricType.SUMMARY, MetricType.SUMMARY),
            ("unknown", MetricType.UNKNOWN),
            ("Unknown", MetricType.UNKNOWN),
        ],
    )  # fmt: skip
    def test_types_are_coerced(self, value, expected):
        assert MetricFilter(types=[value]).types == [expected]

    @pytest.mark.parametrize("value", ["gaueg", "untyped", ""])
    def test_unknown_type_names_are_rejected(self, value):
        metric_filter = MetricFilter()

        with pytest.raises(ValueError, match="Unknown metric type"):
            metric_filter.add_types(value)

        assert metric_filter.types == []

    def test_plain_string_label_value_is_single_value(self):
        metric_filter = MetricFilter(label_sets=[{"short": "service_a"}])

        assert metric_filter.label_sets == [{"short": ["service_a"]}]

    def test_copy_is_independent(self):
        original = MetricFilter(names=["a"], label_sets=[{"k": ["v"]}])
        clone = original.copy()
        clone.add_names("b")
        clone.label_sets[0]["k"].append("w")

        assert original.names == ["a"]
        assert original.label_sets == [{"k": ["v"]}]

    def test_repr(self):
        assert "names=['a']" in repr(MetricFilter(names=["a"]))


class TestMetricFilterMatching:
    """Test OR/AND semantics of each filter dimension."""

    def test_names_are_or_ed(self):
        metric_filter = MetricFilter(names=["a", "b"])

        assert metric_filter.matches("a", MetricType.UNKNOWN, {})
        assert metric_filter.matches("b", MetricType.UNKNOWN, {})
        assert not metric_filter.matches("c", MetricType.UNKNOWN, {})

    def test_types_are_or_ed(self):
        metric_filter = MetricFilter(types=[MetricType.GAUGE, MetricType.SUMMARY])

        assert metric_filter.matches("x", MetricType.GAUGE, {})
        assert metric_filter.matches("x", MetricType.SUMMARY, {})
        assert not metric_filter.matches("x", MetricType.COUNTER, {})
        assert not metric_filter.matches("x", MetricType.UNKNOWN, {})

    def test_unknown_type_filter_selects_undeclared_samples(self):
        metric_filter = MetricFilter(types=[MetricType.UNKNOWN])

        assert metric_filter.matches("x", MetricType.UNKNOWN, {})
        assert not metric_filter.matches("x", MetricType.GAUGE, {})

    def test_label_keys_are_and_ed(self):
        metric_filter = MetricFilter(
            label_sets=[{"short": ["service_a", "service_b"], "boundary": ["backend"]}]
        )

        assert metric_filter.matches_labels(SERVICE_A)
        assert not metric_filter.matches_labels(SERVICE_B)

    def test_label_sets_are_or_ed(self):
        metric_filter = MetricFilter(
            label_sets=[{"short": ["service_a"]}, {"boundary": ["frontend"]}]
        )

        assert metric_filter.matches_labels(SERVICE_A)
        assert metric_filter.matches_labels(SERVICE_B)
        assert not metric_filter.matches_labels(
            {"short": "service_c", "boundary": "backend"}
        )

    def test_missing_label_key_fails(self):
        metric_filter = MetricFilter(label_sets=[{"zone": ["us-east"]}])

        assert not metric_filter.matches_labels(SERVICE_A)
        assert not metric_filter.matches_labels({})

    def test_empty_label_set_matches_everything(self):
        metric_filter = MetricFilter(label_sets=[{}])

        assert metric_filter.matches_labels({})
        assert metric_filter.matches_labels(SERVICE_A)

    def test_all_dimensions_must_pass(self):
        metric_filter = MetricFilter(
            names=["server_up"],
            types=[MetricType.UNKNOWN],
            label_sets=[{"boundary": ["backend"]}],
        )

        assert metric_filter.matches("server_up", MetricType.UNKNOWN, SERVICE_A)
        assert not metric_filter.matches("server_down", MetricType.UNKNOWN, SERVICE_A)
        assert not metric_filter.matches("server_up", MetricType.GAUGE, SERVICE_A)
        assert not metric_filter.matches("server_up", MetricType.UNKNOWN, SERVICE_B)
