# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Prefix based classification of exposition lines."""

from promget.common.enums import CaseInsensitiveStrEnum

HELP_PREFIX = "# HELP "
TYPE_PREFIX = "# TYPE "


class LineKind(CaseInsensitiveStrEnum):
    """Kinds of lines in a text exposition document."""

    BLANK = "blank"
    HELP_COMMENT = "help_comment"
    TYPE_COMMENT = "type_comment"
    SAMPLE = "sample"


def classify_line(line: str) -> LineKind:
    """Classify a single line of exposition text.

    Comment markers are matched case-sensitively and only at the very start of
    the line. Any other line, including other `#` comments, is a sample.
    """
    if not line.strip():
        return LineKind.BLANK
    if line.startswith(HELP_PREFIX):
        return LineKind.HELP_COMMENT
    if line.startswith(TYPE_PREFIX):
        return LineKind.TYPE_COMMENT
    return LineKind.SAMPLE
