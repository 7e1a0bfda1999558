# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Carry-forward of HELP and TYPE comments onto the samples they describe."""

from dataclasses import dataclass

from promget.common.enums import MetricType


def detect_metric_type(declaration: str) -> MetricType:
    """Detect the metric type named in a TYPE declaration.

    The upper-cased declaration is searched for each known tag in enum order;
    a later match overwrites an earlier one.
    """
    upper = declaration.upper()
    detected = MetricType.UNKNOWN
    for metric_type in MetricType.known_types():
        if metric_type.value in upper:
            detected = metric_type
    return detected


@dataclass(frozen=True, slots=True)
class ResolvedMetadata:
    """Metadata in effect for one sample."""

    help: str = ""
    type: MetricType = MetricType.UNKNOWN
    type_raw: str = ""


class MetadataTracker:
    """Holds the most recent HELP and TYPE declarations.

    A declaration only applies to samples whose name it starts with. As soon
    as a sample with a different name is seen, the declaration is dropped so
    it cannot leak onto unrelated metrics.
    """

    def __init__(self) -> None:
        self._pending_help = ""
        self._pending_type_raw = ""
        self._pending_type = MetricType.UNKNOWN

    def observe_help(self, declaration: str) -> None:
        """Store a HELP declaration (`<name> <help text>`)."""
        self._pending_help = declaration

    def observe_type(self, declaration: str) -> None:
        """Store a TYPE declaration (`<name> <type>`)."""
        self._pending_type_raw = declaration
        self._pending_type = detect_metric_type(declaration)

    def resolve(self, name: str) -> ResolvedMetadata:
        """Return the metadata for a sample named `name`, clearing stale declarations."""
        if not self._pending_help.startswith(name):
            self._pending_help = ""
        if not self._pending_type_raw.startswith(name):
            self._pending_type_raw = ""
            self._pending_type = MetricType.UNKNOWN

        return ResolvedMetadata(
            help=_strip_subject(self._pending_help, name),
            type=self._pending_type,
            type_raw=_strip_subject(self._pending_type_raw, name),
        )


def _strip_subject(declaration: str, name: str) -> str:
    return declaration.removeprefix(f"{name} ")
