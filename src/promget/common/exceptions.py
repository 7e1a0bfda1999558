# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0


class PromGetError(Exception):
    """Base class for all exceptions raised by promget."""

    def __str__(self) -> str:
        """Return the string representation of the exception with the class name."""
        return super().__str__()


class EndpointMissingError(PromGetError):
    """Exception raised when a request is executed before an endpoint was configured."""

    def __init__(self, message: str = "missing endpoint specification") -> None:
        super().__init__(message)


class TransportError(PromGetError):
    """Exception raised when the HTTP request fails (DNS, connection, timeout)."""

    def __init__(self, url: str, original_exception: Exception) -> None:
        self.url = url
        self.original_exception = original_exception
        super().__init__(f"Request to {url} failed: {original_exception!r}")


class BodyReadError(PromGetError):
    """Exception raised when the response body could not be fully read."""

    def __init__(self, url: str, status: int, original_exception: Exception) -> None:
        self.url = url
        self.status = status
        self.original_exception = original_exception
        super().__init__(
            f"Failed to read response body from {url} (status {status}): {original_exception!r}"
        )


class ParseError(PromGetError):
    """Base class for errors raised while scanning an exposition document."""

    def __init__(self, message: str, line_number: int, line: str) -> None:
        self.line_number = line_number
        self.line = line
        super().__init__(f"line {line_number}: {message}")


class FormatError(ParseError):
    """Exception raised when a sample line does not match the sample grammar."""

    def __init__(self, line_number: int, line: str, reason: str) -> None:
        self.reason = reason
        super().__init__(
            f"invalid format detected {line!r} ({reason})", line_number, line
        )


class ValueParseError(ParseError):
    """Exception raised when a sample value is not a valid floating point literal."""

    def __init__(self, line_number: int, line: str, value: str) -> None:
        self.value = value
        super().__init__(
            f"invalid sample value {value!r} in {line!r}", line_number, line
        )
