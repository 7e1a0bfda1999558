# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
from pydantic import Field

from promget.common.models.base_models import PromGetBaseModel


class ErrorDetails(PromGetBaseModel):
    """Serializable description of an error that aborted a scrape."""

    code: int | None = Field(
        default=None,
        description="The HTTP status code already obtained when the error occurred, if any.",
    )
    type: str | None = Field(
        default=None,
        description="The type of the error, usually the exception class name.",
    )
    message: str = Field(..., description="The human readable error message.")

    @classmethod
    def from_exception(cls, e: BaseException, code: int | None = None) -> "ErrorDetails":
        """Create an error details object from an exception."""
        return cls(code=code, type=e.__class__.__name__, message=str(e))

    def __str__(self) -> str:
        return f"{self.type}: {self.message}" if self.type else self.message
