# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
import sys
from collections.abc import Iterator
from contextlib import contextmanager

from rich.console import Console
from rich.panel import Panel

from promget.common.exceptions import PromGetError


@contextmanager
def exit_on_error(title: str = "Error", console: Console | None = None) -> Iterator[None]:
    """Print expected errors in a panel and exit with status 1 instead of a traceback."""
    try:
        yield
    except (PromGetError, ValueError) as e:
        console = console or Console(stderr=True)
        console.print(
            Panel(str(e), title=title, title_align="left", border_style="red")
        )
        sys.exit(1)
