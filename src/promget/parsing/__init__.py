# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from promget.parsing.accumulator import MetricAccumulator
from promget.parsing.exposition_parser import iter_lines, parse_exposition
from promget.parsing.filters import LabelSet, MetricFilter
from promget.parsing.line_classifier import (
    HELP_PREFIX,
    TYPE_PREFIX,
    LineKind,
    classify_line,
)
from promget.parsing.metadata_tracker import (
    MetadataTracker,
    ResolvedMetadata,
    detect_metric_type,
)
from promget.parsing.sample_parser import (
    ParsedSample,
    parse_labels,
    parse_sample_line,
    parse_value,
)

__all__ = [
    "HELP_PREFIX",
    "LabelSet",
    "LineKind",
    "MetadataTracker",
    "MetricAccumulator",
    "MetricFilter",
    "ParsedSample",
    "ResolvedMetadata",
    "TYPE_PREFIX",
    "classify_line",
    "detect_metric_type",
    "iter_lines",
    "parse_exposition",
    "parse_labels",
    "parse_sample_line",
    "parse_value",
]
