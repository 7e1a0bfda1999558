# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Logger wrapper with lazy message evaluation and a TRACE level."""

import logging
from collections.abc import Callable
from typing import Any

_TRACE = logging.DEBUG - 5
logging.addLevelName(_TRACE, "TRACE")

MessageT = str | Callable[[], str]


class PromGetLogger:
    """Thin wrapper around :class:`logging.Logger`.

    Messages may be passed as callables so that expensive f-strings are only
    built when the level is enabled::

        _logger.debug(lambda: f"Parsed {len(metrics)} metrics")
    """

    def __init__(self, logger_name: str) -> None:
        self.logger_name = logger_name
        self._logger = logging.getLogger(logger_name)

    @property
    def is_trace_enabled(self) -> bool:
        return self._logger.isEnabledFor(_TRACE)

    def log(self, level: int, msg: MessageT, *args: Any, **kwargs: Any) -> None:
        if not self._logger.isEnabledFor(level):
            return
        if callable(msg):
            msg = msg()
        # Report the caller of the wrapper, not the wrapper itself.
        kwargs.setdefault("stacklevel", 3)
        self._logger.log(level, msg, *args, **kwargs)

    def trace(self, msg: MessageT, *args: Any, **kwargs: Any) -> None:
        self.log(_TRACE, msg, *args, **kwargs)

    def debug(self, msg: MessageT, *args: Any, **kwargs: Any) -> None:
        self.log(logging.DEBUG, msg, *args, **kwargs)

    def info(self, msg: MessageT, *args: Any, **kwargs: Any) -> None:
        self.log(logging.INFO, msg, *args, **kwargs)

    def warning(self, msg: MessageT, *args: Any, **kwargs: Any) -> None:
        self.log(logging.WARNING, msg, *args, **kwargs)

    def error(self, msg: MessageT, *args: Any, **kwargs: Any) -> None:
        self.log(logging.ERROR, msg, *args, **kwargs)
