# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

import orjson
from pydantic import Field

from promget.common.enums import MetricType
from promget.common.exceptions import PromGetError
from promget.common.models.base_models import PromGetBaseModel
from promget.common.models.error_models import ErrorDetails


class LabelValuePair(PromGetBaseModel):
    """One sample of a metric: its label set and value."""

    labels: dict[str, str] = Field(
        default_factory=dict,
        description="Label key to label value. Empty when the sample has no label block. "
        "Validation copies the mapping, so each pair owns its labels.",
    )
    value: float = Field(..., description="The sample value.")


class Metric(PromGetBaseModel):
    """A run of consecutive samples sharing one metric name, with its metadata."""

    name: str = Field(..., min_length=1, description="The metric name.")
    help: str = Field(
        default="",
        description="Help text from the matching HELP comment. Empty if absent or stale.",
    )
    type: MetricType = Field(
        default=MetricType.UNKNOWN,
        description="Type detected from the matching TYPE comment.",
    )
    type_raw: str = Field(
        default="",
        description="The literal type token as declared. Empty if absent or stale.",
    )
    values: tuple[LabelValuePair, ...] = Field(
        default=(),
        description="Samples in the order they appear in the document.",
    )


class Result(PromGetBaseModel):
    """Outcome of a single scrape: status, error and the surviving metrics.

    On error `metrics` is always empty; no partial results are returned.
    Metric and sample sequences are tuples so a built result cannot be
    extended or reordered.
    """

    status: int = Field(
        default=0,
        description="HTTP response status code. 0 if the request never completed.",
    )
    error: ErrorDetails | None = Field(
        default=None, description="The error that aborted the scrape, if any."
    )
    metrics: tuple[Metric, ...] = Field(
        default=(), description="Metrics surviving the configured filters."
    )
    exception: PromGetError | None = Field(
        default=None,
        exclude=True,
        repr=False,
        description="The original exception behind `error`.",
    )

    @classmethod
    def from_exception(cls, e: PromGetError, status: int = 0) -> "Result":
        return cls(
            status=status,
            error=ErrorDetails.from_exception(e, code=status or None),
            exception=e,
        )

    @property
    def ok(self) -> bool:
        return self.error is None

    def raise_for_error(self) -> None:
        """Raise the exception that aborted the scrape, if any."""
        if self.exception is not None:
            raise self.exception

    def to_json_bytes(self) -> bytes:
        return orjson.dumps(self.model_dump(mode="json"), option=orjson.OPT_INDENT_2)
