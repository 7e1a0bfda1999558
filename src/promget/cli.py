# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Main CLI entry point for promget."""

import sys
from collections.abc import Sequence
from typing import Annotated

from cyclopts import App, Parameter
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from promget.cli_utils import exit_on_error
from promget.client import Client
from promget.common.enums import CaseInsensitiveStrEnum, MetricType
from promget.common.logging import setup_rich_logging
from promget.common.models import Metric, Result

app = App(
    name="promget",
    help="Fetch a Prometheus text exposition endpoint and print the filtered metrics.",
)


class OutputFormat(CaseInsensitiveStrEnum):
    TABLE = "table"
    JSON = "json"


@app.default
def scrape(
    url: str,
    *,
    name: Annotated[list[str] | None, Parameter(name=["--name", "-n"])] = None,
    metric_type: Annotated[
        list[MetricType] | None, Parameter(name=["--type", "-t"])
    ] = None,
    label: Annotated[list[str] | None, Parameter(name=["--label", "-l"])] = None,
    header: Annotated[list[str] | None, Parameter(name=["--header", "-H"])] = None,
    timeout: float | None = None,
    output_format: Annotated[
        OutputFormat, Parameter(name=["--format", "-f"])
    ] = OutputFormat.TABLE,
    log_level: str | None = None,
) -> None:
    """Scrape a metrics endpoint once.

    Args:
        url: Endpoint to request, e.g. http://localhost:9100/metrics.
        name: Keep only metrics with this name. Repeat to accept several names.
        metric_type: Keep only metrics of this type. Repeat to accept several types.
        label: Label filter set such as `short=a|b,boundary=backend`. Keys are
            AND-ed, `|` separated values are OR-ed, repeated sets are OR-ed.
        header: Extra request header such as `"Authorization: Bearer TOKEN"`.
        timeout: Total request timeout in seconds.
        output_format: Print a table or the JSON encoded result.
        log_level: Console log level (TRACE, DEBUG, INFO, WARNING, ERROR).
    """
    with exit_on_error(title="Error Scraping Endpoint"):
        setup_rich_logging(log_level)

        client = Client().endpoint(url)
        client.filter_by_name(*(name or ()))
        client.filter_by_type(*(metric_type or ()))
        client.filter_by_label(*(parse_label_filter(spec) for spec in label or ()))
        client.headers(dict(parse_header(spec) for spec in header or ()))
        if timeout is not None:
            client.timeout(timeout)

        result = client.do_sync()
        print_result(result, output_format)
        result.raise_for_error()


def parse_label_filter(spec: str) -> dict[str, list[str]]:
    """Parse `key=v1|v2,key2=v3` into a label filter set.

    Raises:
        ValueError: If an item is not a `key=value` pair.
    """
    label_set: dict[str, list[str]] = {}
    for item in spec.split(","):
        key, sep, values = item.partition("=")
        key = key.strip()
        if not sep or not key:
            raise ValueError(
                f"Invalid label filter {spec!r}: expected key=value[|value...][,key=value...]"
            )
        label_set.setdefault(key, []).extend(values.split("|"))
    return label_set


def parse_header(spec: str) -> tuple[str, str]:
    """Parse `Name: value` into a header pair."""
    header_name, sep, value = spec.partition(":")
    if not sep or not header_name.strip():
        raise ValueError(f"Invalid header {spec!r}: expected 'Name: value'")
    return header_name.strip(), value.strip()


def print_result(
    result: Result,
    output_format: OutputFormat = OutputFormat.TABLE,
    console: Console | None = None,
) -> None:
    if output_format == OutputFormat.JSON:
        sys.stdout.write(result.to_json_bytes().decode() + "\n")
        return
    if result.ok:
        (console or Console()).print(build_metrics_table(result.metrics))


def build_metrics_table(metrics: Sequence[Metric]) -> Table:
    """Build a Rich table with one row per sample."""
    table = Table(title="Metrics")
    table.add_column("Metric", style="cyan", no_wrap=True)
    table.add_column("Type", style="magenta")
    table.add_column("Help", style="dim")
    table.add_column("Labels")
    table.add_column("Value", justify="right", style="green")

    for metric in metrics:
        for index, pair in enumerate(metric.values):
            labels = ",".join(f'{k}="{v}"' for k, v in sorted(pair.labels.items()))
            value = f"{pair.value:g}"
            if index == 0:
                table.add_row(
                    escape(metric.name),
                    str(metric.type),
                    escape(metric.help),
                    escape(labels),
                    value,
                )
            else:
                table.add_row("", "", "", escape(labels), value)

    return table


def main() -> None:
    app()
