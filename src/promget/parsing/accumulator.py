# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
from dataclasses import dataclass, field

from promget.common.enums import MetricType
from promget.common.models import LabelValuePair, Metric
from promget.parsing.metadata_tracker import ResolvedMetadata
from promget.parsing.sample_parser import ParsedSample


@dataclass(slots=True)
class _MetricDraft:
    name: str
    help: str
    type: MetricType
    type_raw: str
    values: list[LabelValuePair] = field(default_factory=list)

    def build(self) -> Metric:
        return Metric(
            name=self.name,
            help=self.help,
            type=self.type,
            type_raw=self.type_raw,
            values=self.values,
        )


class MetricAccumulator:
    """Groups admitted samples into metrics by immediate adjacency.

    A sample whose name differs from the previously admitted sample starts a
    new metric; otherwise it is appended to the last one. Two separate runs of
    the same name therefore produce two metrics.
    """

    def __init__(self) -> None:
        self._drafts: list[_MetricDraft] = []
        self._last_name: str | None = None

    def add(self, sample: ParsedSample, metadata: ResolvedMetadata) -> None:
        pair = LabelValuePair(labels=sample.labels, value=sample.value)
        if sample.name != self._last_name:
            self._last_name = sample.name
            self._drafts.append(
                _MetricDraft(
                    name=sample.name,
                    help=metadata.help,
                    type=metadata.type,
                    type_raw=metadata.type_raw,
                    values=[pair],
                )
            )
            return
        self._drafts[-1].values.append(pair)

    def __len__(self) -> int:
        return len(self._drafts)

    def build(self) -> list[Metric]:
        return [draft.build() for draft in self._drafts]
