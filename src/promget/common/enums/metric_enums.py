# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
from typing import Any

from typing_extensions import Self

from promget.common.enums.base_enums import CaseInsensitiveStrEnum


class MetricType(CaseInsensitiveStrEnum):
    """Metric type tags recognised in `# TYPE` comments.

    Member order matters: when a type declaration contains more than one tag,
    the tag declared last in this enum wins.
    """

    COUNTER = "COUNTER"
    """Counter: A cumulative metric that represents a single monotonically increasing counter."""

    GAUGE = "GAUGE"
    """Gauge: A metric that represents a single numerical value that can arbitrarily go up and down."""

    HISTOGRAM = "HISTOGRAM"
    """Histogram: Samples observations and counts them in configurable buckets."""

    SUMMARY = "SUMMARY"
    """Summary: Similar to histogram, samples observations and provides quantiles."""

    UNKNOWN = "UNKNOWN"
    """Unknown: No type declared, a stale declaration, or an unrecognised type token."""

    @classmethod
    def _missing_(cls, value: Any) -> Self:
        """Case-insensitive lookup that falls back to MetricType.UNKNOWN."""
        return super()._missing_(value) or cls.UNKNOWN

    @classmethod
    def known_types(cls) -> tuple["MetricType", ...]:
        """The tags that can be detected in a type declaration, in scan order."""
        return (cls.COUNTER, cls.GAUGE, cls.HISTOGRAM, cls.SUMMARY)
