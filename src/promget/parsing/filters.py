# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Sample filters by metric name, metric type and label sets."""

from collections.abc import Iterable, Mapping

from typing_extensions import Self

from promget.common.enums import MetricType

LabelSet = Mapping[str, Iterable[str] | str]
"""Label key to accepted values. A plain string is a single accepted value."""


class MetricFilter:
    """Cumulative filter configuration evaluated against every parsed sample.

    Semantics:
        - names: a sample passes if its name is one of them (OR).
        - types: a sample passes if its effective type is one of them (OR).
        - label sets: a sample passes if it matches ANY set; it matches a set
          if, for EVERY key of the set, the sample has the key and its value
          is one of the accepted values.

    An empty dimension accepts everything.
    """

    def __init__(
        self,
        names: Iterable[str] | None = None,
        types: Iterable[MetricType | str] | None = None,
        label_sets: Iterable[LabelSet] | None = None,
    ) -> None:
        self.names: list[str] = []
        self.types: list[MetricType] = []
        self.label_sets: list[dict[str, list[str]]] = []
        self.add_names(*(names or ()))
        self.add_types(*(types or ()))
        self.add_label_sets(*(label_sets or ()))

    def add_names(self, *names: str) -> Self:
        self.names.extend(names)
        return self

    def add_types(self, *types: MetricType | str) -> Self:
        """Add accepted types, given as members or case-insensitive member values.

        Raises:
            ValueError: If a string names no metric type.
        """
        for metric_type in types:
            resolved = MetricType(metric_type)
            is_unknown_tag = str(metric_type).upper() == MetricType.UNKNOWN.value
            if resolved is MetricType.UNKNOWN and not is_unknown_tag:
                valid = ", ".join(member.value for member in MetricType)
                raise ValueError(
                    f"Unknown metric type {metric_type!r}, expected one of: {valid}"
                )
            self.types.append(resolved)
        return self

    def add_label_sets(self, *label_sets: LabelSet) -> Self:
        for label_set in label_sets:
            self.label_sets.append(
                {
                    key: [values] if isinstance(values, str) else list(values)
                    for key, values in label_set.items()
                }
            )
        return self

    @property
    def is_empty(self) -> bool:
        return not (self.names or self.types or self.label_sets)

    def matches(
        self, name: str, metric_type: MetricType, labels: Mapping[str, str]
    ) -> bool:
        """Return True if a sample passes every active filter dimension.

        Dimensions are checked in order name, type, labels and the first
        failing one short-circuits the rest.
        """
        if self.names and name not in self.names:
            return False
        if self.types and metric_type not in self.types:
            return False
        if self.label_sets and not self.matches_labels(labels):
            return False
        return True

    def matches_labels(self, labels: Mapping[str, str]) -> bool:
        return any(
            all(
                key in labels and labels[key] in accepted
                for key, accepted in label_set.items()
            )
            for label_set in self.label_sets
        )

    def copy(self) -> "MetricFilter":
        return MetricFilter(self.names, self.types, self.label_sets)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(names={self.names!r}, types={self.types!r}, "
            f"label_sets={self.label_sets!r})"
        )
