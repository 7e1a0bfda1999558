# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Decoding of sample lines.

A sample line has the shape::

    name{key="value",key="value"} 1.5e-3
    name 42

where `name` matches `[a-zA-Z_:][a-zA-Z0-9_:]*`, the brace block is
optional and directly follows the name, exactly one space separates the
value, and the value token only contains characters from `[0-9e.+-]`.
"""

import math
import string
from dataclasses import dataclass, field

from promget.common.exceptions import FormatError, ValueParseError

NAME_FIRST_CHARS = frozenset(string.ascii_letters + "_:")
NAME_CHARS = NAME_FIRST_CHARS | frozenset(string.digits)
VALUE_CHARS = frozenset(string.digits + "e.+-")


@dataclass(slots=True)
class ParsedSample:
    """Decoded content of one sample line."""

    name: str
    labels: dict[str, str] = field(default_factory=dict)
    value: float = 0.0


def parse_sample_line(line: str, line_number: int = 0) -> ParsedSample:
    """Parse a sample line into its name, labels and value.

    Args:
        line: The raw line, without the line terminator.
        line_number: 1-based position of the line, used in error messages.

    Raises:
        FormatError: If the line does not follow the sample grammar.
        ValueParseError: If the value token is not a floating point literal.
    """
    name_end = _scan_name(line)
    if name_end == 0:
        raise FormatError(
            line_number, line, "metric name must match [a-zA-Z_:][a-zA-Z0-9_:]*"
        )
    name = line[:name_end]
    rest = line[name_end:]

    label_block = ""
    if rest.startswith("{"):
        close = rest.find("}")
        if close == -1:
            raise FormatError(line_number, line, "unterminated label block")
        label_block = rest[1:close]
        rest = rest[close + 1 :]

    if not rest.startswith(" "):
        raise FormatError(line_number, line, "expected a single space before the value")

    value_token = rest[1:]
    if not VALUE_CHARS.issuperset(value_token):
        raise FormatError(
            line_number, line, "value may only contain characters from [0-9e.+-]"
        )

    value = parse_value(value_token, line_number, line)
    labels = parse_labels(label_block, line_number, line)
    return ParsedSample(name=name, labels=labels, value=value)


def parse_value(token: str, line_number: int = 0, line: str = "") -> float:
    """Parse a value token as a finite 64-bit float (decimal or scientific notation).

    Literals outside the float64 range are rejected rather than read as infinity.
    """
    try:
        value = float(token)
    except ValueError as e:
        raise ValueParseError(line_number, line or token, token) from e
    if math.isinf(value):
        raise ValueParseError(line_number, line or token, token)
    return value


def parse_labels(block: str, line_number: int = 0, line: str = "") -> dict[str, str]:
    """Decode the content of a label block into a mapping.

    Items are split on `,` and then on `=`; double quotes are removed from
    the value. Escaped quotes and commas inside values are not supported.

    Raises:
        FormatError: If an item is not a `key=value` pair.
    """
    labels: dict[str, str] = {}
    if not block:
        return labels

    for item in block.split(","):
        parts = item.split("=")
        if len(parts) < 2:
            raise FormatError(
                line_number, line or block, f"label {item!r} is not a key=value pair"
            )
        labels[parts[0]] = parts[1].replace('"', "")
    return labels


def _scan_name(line: str) -> int:
    """Return the end index of the metric name at the start of the line (0 if none)."""
    if not line or line[0] not in NAME_FIRST_CHARS:
        return 0
    end = 1
    while end < len(line) and line[end] in NAME_CHARS:
        end += 1
    return end
