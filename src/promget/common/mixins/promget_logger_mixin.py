# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
from typing import Any

from promget.common.promget_logger import MessageT, PromGetLogger


class PromGetLoggerMixin:
    """Mixin that gives a class its own PromGetLogger and shortcut log methods.

    Args:
        logger_name: Name of the logger. Defaults to the class name.
    """

    def __init__(self, logger_name: str | None = None, **kwargs) -> None:
        self.logger = PromGetLogger(logger_name or self.__class__.__name__)
        super().__init__(**kwargs)

    def trace(self, msg: MessageT, *args: Any, **kwargs: Any) -> None:
        kwargs.setdefault("stacklevel", 4)
        self.logger.trace(msg, *args, **kwargs)

    def debug(self, msg: MessageT, *args: Any, **kwargs: Any) -> None:
        kwargs.setdefault("stacklevel", 4)
        self.logger.debug(msg, *args, **kwargs)

    def info(self, msg: MessageT, *args: Any, **kwargs: Any) -> None:
        kwargs.setdefault("stacklevel", 4)
        self.logger.info(msg, *args, **kwargs)

    def warning(self, msg: MessageT, *args: Any, **kwargs: Any) -> None:
        kwargs.setdefault("stacklevel", 4)
        self.logger.warning(msg, *args, **kwargs)

    def error(self, msg: MessageT, *args: Any, **kwargs: Any) -> None:
        kwargs.setdefault("stacklevel", 4)
        self.logger.error(msg, *args, **kwargs)
