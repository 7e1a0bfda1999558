# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Single pass parser for the Prometheus text exposition format.

Lines are classified, HELP/TYPE comments are carried forward onto the samples
they describe, every sample is run through the configured filters and the
survivors are grouped into metrics, all in one scan of the document.
"""

from collections.abc import Iterator

from promget.common.models import Metric
from promget.common.promget_logger import PromGetLogger
from promget.parsing.accumulator import MetricAccumulator
from promget.parsing.filters import MetricFilter
from promget.parsing.line_classifier import (
    HELP_PREFIX,
    TYPE_PREFIX,
    LineKind,
    classify_line,
)
from promget.parsing.metadata_tracker import MetadataTracker
from promget.parsing.sample_parser import parse_sample_line

_logger = PromGetLogger(__name__)


def iter_lines(text: str) -> Iterator[str]:
    """Yield the lines of `text`, split on `\n` with a trailing `\r` removed."""
    for line in text.split("\n"):
        yield line.removesuffix("\r")


def parse_exposition(
    text: str, metric_filter: MetricFilter | None = None
) -> list[Metric]:
    """Parse exposition text into metrics, keeping only samples passing the filter.

    Args:
        text: The complete exposition document.
        metric_filter: Filters applied to each sample. None accepts everything.

    Returns:
        list[Metric]: Metrics in document order.

    Raises:
        FormatError: If a sample line does not follow the sample grammar.
        ValueParseError: If a sample value is not a floating point literal.
    """
    metric_filter = metric_filter or MetricFilter()
    tracker = MetadataTracker()
    accumulator = MetricAccumulator()
    num_samples = 0
    num_dropped = 0

    for line_number, line in enumerate(iter_lines(text), start=1):
        match classify_line(line):
            case LineKind.BLANK:
                continue
            case LineKind.HELP_COMMENT:
                tracker.observe_help(line[len(HELP_PREFIX) :])
            case LineKind.TYPE_COMMENT:
                tracker.observe_type(line[len(TYPE_PREFIX) :])
            case LineKind.SAMPLE:
                sample = parse_sample_line(line, line_number)
                metadata = tracker.resolve(sample.name)
                num_samples += 1
                if not metric_filter.matches(sample.name, metadata.type, sample.labels):
                    num_dropped += 1
                    continue
                accumulator.add(sample, metadata)

    _logger.debug(
        lambda: f"Parsed {num_samples} samples into {len(accumulator)} metrics "
        f"({num_dropped} samples filtered out)"
    )
    return accumulator.build()
