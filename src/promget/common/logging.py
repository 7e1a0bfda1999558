# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Rich console and file logging for the promget command line.

The library itself never installs handlers; callers (and the CLI) opt in with
:func:`setup_rich_logging`.

Usage::

    from promget.common.logging import setup_rich_logging

    setup_rich_logging("DEBUG")
"""

import logging
import re
from datetime import datetime
from pathlib import Path

from rich.console import Console, ConsoleRenderable, Group
from rich.highlighter import RegexHighlighter
from rich.logging import RichHandler
from rich.text import Span, Text
from rich.traceback import Traceback

from promget.common.environment import Environment
from promget.common.promget_logger import PromGetLogger

_logger = PromGetLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_rich_logging(
    level: str | int | None = None,
    console: Console | None = None,
    log_file: Path | None = None,
) -> None:
    """Set up rich logging on the root logger.

    Args:
        level: Log level name or number. Defaults to `PROMGET_LOGGING_LEVEL`.
        console: Console to render to. Defaults to a stderr console.
        log_file: Optional file that additionally receives every record.
    """
    level = level or Environment.LOGGING.LEVEL
    if isinstance(level, str):
        level = level.upper()
    logging.root.setLevel(level)

    # Remove all existing handlers to avoid duplicate logs
    for existing_handler in logging.root.handlers[:]:
        logging.root.removeHandler(existing_handler)

    rich_handler = CustomRichHandler(
        rich_tracebacks=True,
        show_path=False,
        console=console or Console(stderr=True),
        show_time=False,
        show_level=False,
        tracebacks_show_locals=False,
    )
    rich_handler.setLevel(level)
    logging.root.addHandler(rich_handler)

    if log_file is not None:
        logging.root.addHandler(create_file_handler(log_file, level))

    _logger.debug(lambda: f"Logging initialized with level: {level}")


def create_file_handler(log_file: Path, level: str | int) -> logging.FileHandler:
    """Configure a file handler for logging."""
    log_file.parent.mkdir(parents=True, exist_ok=True)

    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setLevel(level)
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
    return file_handler


class LogHighlighter(RegexHighlighter):
    """Lightweight highlighter for log messages.

    Highlights URLs, numbers, quoted strings, booleans and key=value pairs
    using a single combined regex.
    """

    base_style = "repr."

    _MEGA_PATTERN = re.compile(
        r"(?P<url>(?:https?|file)://[^\s\]\)'\"]+)"  # URLs
        r"|(?P<number>(?<![.\w])-?\d+\.?\d*(?:(?:e[+-]?\d+)|(?:ms|s))?\b)"  # Numbers
        r"|(?P<str>\"[^\"]*\"|'[^']*')"  # Quoted strings
        r"|\b(?P<bool_true>True)\b|\b(?P<bool_false>False)\b|\b(?P<none>None)\b"  # Booleans
        r"|(?P<brace>[\[\](){}])"  # Brackets
        r"|\b(?P<attrib_name>\w+)=(?P<attrib_value>[^\s,=\[\](){}]+)?"  # key=value
    )  # fmt: skip

    highlights = [_MEGA_PATTERN]

    def highlight(self, text: Text) -> None:
        """Apply syntax highlighting to text in place."""
        plain = text.plain
        append_span = text._spans.append
        prefix = self.base_style

        for match in self._MEGA_PATTERN.finditer(plain):
            for name, value in match.groupdict().items():
                if value is not None:
                    start, end = match.span(name)
                    if start != -1:
                        append_span(Span(start, end, f"{prefix}{name}"))


class CustomRichHandler(RichHandler):
    """Rich logging handler with a compact single-line format.

    Example Output::

        12:26:52.092 INFO     Scraped http://localhost:9100/metrics status=200 (promget.client:88)
    """

    LOG_LEVEL_STYLES = {
        "TRACE": "dim",
        "DEBUG": "dim",
        "INFO": "cyan",
        "WARNING": "yellow",
        "ERROR": "red",
        "CRITICAL": "bold red",
    }

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.highlighter = LogHighlighter()

    def render(
        self,
        *,
        record: logging.LogRecord,
        traceback: Traceback | None,
        message_renderable: ConsoleRenderable,
    ) -> ConsoleRenderable:
        """Render a log record as `HH:MM:SS.mmm LEVEL message (logger:lineno)`."""
        timestamp = datetime.fromtimestamp(record.created).strftime("%H:%M:%S.%f")[:-3]
        level_style = self.LOG_LEVEL_STYLES.get(record.levelname, "white")
        message = record.getMessage()[: Environment.LOGGING.MAX_CONSOLE_MESSAGE_LENGTH]

        highlighted_msg = Text(message)
        self.highlighter.highlight(highlighted_msg)

        formatted_log = Text.assemble(
            Text(f"{timestamp} ", style="log.time"),
            Text(f"{record.levelname:<8} ", style=level_style),
            highlighted_msg,
            Text(f" ({record.name}:{record.lineno})", style="dim italic"),
        )
        return Group(formatted_log, traceback) if traceback else formatted_log
