# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Fetch, parse and filter Prometheus text exposition metrics."""

from promget.client import Client
from promget.common.enums import MetricType
from promget.common.exceptions import (
    BodyReadError,
    EndpointMissingError,
    FormatError,
    ParseError,
    PromGetError,
    TransportError,
    ValueParseError,
)
from promget.common.models import ErrorDetails, LabelValuePair, Metric, Result
from promget.parsing import MetricFilter, parse_exposition

__all__ = [
    "BodyReadError",
    "Client",
    "EndpointMissingError",
    "ErrorDetails",
    "FormatError",
    "LabelValuePair",
    "Metric",
    "MetricFilter",
    "MetricType",
    "ParseError",
    "PromGetError",
    "Result",
    "TransportError",
    "ValueParseError",
    "parse_exposition",
]
