# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Builder style client that scrapes one endpoint and filters the result.

Usage::

    result = await (
        Client()
        .endpoint("http://localhost:9100/metrics")
        .filter_by_type(MetricType.GAUGE)
        .filter_by_label({"boundary": ["backend"]})
        .do()
    )
    result.raise_for_error()
"""

import asyncio
from collections.abc import Mapping

import aiohttp
from typing_extensions import Self

from promget.common.environment import Environment
from promget.common.enums import MetricType
from promget.common.exceptions import (
    BodyReadError,
    EndpointMissingError,
    PromGetError,
)
from promget.common.mixins import PromGetLoggerMixin
from promget.common.models import Result
from promget.parsing import LabelSet, MetricFilter, parse_exposition
from promget.transports import AioHttpClient


class Client(PromGetLoggerMixin):
    """Request configuration and execution for a single metrics endpoint.

    Every configuration method returns the client itself so calls can be
    chained. Filter methods are cumulative: repeated calls extend the filters
    configured so far.
    """

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._endpoint = ""
        self._session: aiohttp.ClientSession | None = None
        self._headers: dict[str, str] = {}
        self._timeout: float | None = Environment.HTTP.TIMEOUT
        self._connect_timeout: float | None = Environment.HTTP.CONNECT_TIMEOUT
        self._timeout_set = False
        self._filter = MetricFilter()

    @property
    def metric_filter(self) -> MetricFilter:
        """The filters configured so far."""
        return self._filter

    def endpoint(self, endpoint: str) -> Self:
        """Endpoint that will be requested, e.g. `http://localhost:8080/metrics`."""
        self._endpoint = endpoint
        return self

    def http_session(self, session: aiohttp.ClientSession) -> Self:
        """Use the given session to perform the request (e.g. with authentication).

        The caller owns the session and is responsible for closing it.
        """
        self._session = session
        return self

    def headers(self, headers: Mapping[str, str] | None = None, **kwargs: str) -> Self:
        """Add request headers. Later values override earlier ones."""
        self._headers.update(headers or {})
        self._headers.update(kwargs)
        return self

    def timeout(self, total: float | None, connect: float | None = None) -> Self:
        """Set the request timeouts in seconds. None disables a timeout.

        Without this call a session given to :meth:`http_session` keeps its own
        timeout; with it, these timeouts replace the session's.
        """
        self._timeout = total
        self._timeout_set = True
        if connect is not None:
            self._connect_timeout = connect
        return self

    def filter_by_name(self, *names: str) -> Self:
        """Keep only metrics with one of the given names."""
        self._filter.add_names(*names)
        return self

    def filter_by_type(self, *types: MetricType | str) -> Self:
        """Keep only metrics with one of the given types.

        Raises:
            ValueError: If a string names no metric type.
        """
        self._filter.add_types(*types)
        return self

    def filter_by_label(self, *label_sets: LabelSet) -> Self:
        """Keep only samples matching at least one of the given label sets.

        Within a set every key must be present with one of its accepted values.
        """
        self._filter.add_label_sets(*label_sets)
        return self

    async def do(self) -> Result:
        """Execute the request and apply the configured filters.

        Errors never raise; they are returned on the Result without any metrics.
        Cancelling the awaiting task cancels the request.
        """
        if not self._endpoint:
            return self._failed(EndpointMissingError())

        status = 0
        try:
            async with AioHttpClient(
                timeout=self._timeout,
                connect_timeout=self._connect_timeout,
                session=self._session,
                override_session_timeout=self._timeout_set,
            ) as http_client:
                response = await http_client.get_request(
                    self._endpoint, headers=self._headers
                )
            status = response.status
            metrics = parse_exposition(response.text, self._filter)
        except BodyReadError as e:
            return self._failed(e, e.status)
        except PromGetError as e:
            return self._failed(e, status)

        self.debug(
            lambda: f"Scraped {self._endpoint} (status {status}): {len(metrics)} metrics"
        )
        return Result(status=status, metrics=metrics)

    def do_sync(self) -> Result:
        """Run :meth:`do` in a new event loop and return its result."""
        return asyncio.run(self.do())

    def _failed(self, e: PromGetError, status: int = 0) -> Result:
        self.error(f"Failed to scrape {self._endpoint or '<no endpoint>'}: {e}")
        return Result.from_exception(e, status=status)
