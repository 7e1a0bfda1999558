# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
import asyncio
import time
from dataclasses import dataclass
from types import TracebackType
from typing import Any

import aiohttp
from typing_extensions import Self

from promget.common.exceptions import BodyReadError, TransportError
from promget.common.mixins import PromGetLoggerMixin
from promget.transports.http_defaults import AioHttpDefaults

NANOS_PER_SECOND = 1_000_000_000


@dataclass(frozen=True, slots=True)
class FetchResponse:
    """Status and decoded body of a completed GET request."""

    status: int
    text: str
    content_type: str = ""
    latency_ns: int = 0


class AioHttpClient(PromGetLoggerMixin):
    """HTTP client that performs a single GET per call using aiohttp.

    A caller supplied `session` is used as-is and never closed by this client,
    which makes it the place to configure authentication, TLS or proxies. Its
    own timeout stays in effect unless `override_session_timeout` is set.
    Otherwise a session backed by a private TCP connector is created per
    request and the connector is closed by :meth:`close`.
    """

    def __init__(
        self,
        timeout: float | None = None,
        connect_timeout: float | None = None,
        session: aiohttp.ClientSession | None = None,
        tcp_kwargs: dict[str, Any] | None = None,
        override_session_timeout: bool = False,
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self.timeout = aiohttp.ClientTimeout(total=timeout, connect=connect_timeout)
        self.session = session
        self.override_session_timeout = override_session_timeout
        self.tcp_kwargs = tcp_kwargs or {}
        self.tcp_connector: aiohttp.TCPConnector | None = None

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the private connector, if one was created."""
        if self.tcp_connector:
            await self.tcp_connector.close()
            self.tcp_connector = None

    async def get_request(
        self, url: str, headers: dict[str, str] | None = None, **kwargs: Any
    ) -> FetchResponse:
        """Send a GET request and return its status and body text.

        Any status code is accepted; the body of error responses is returned too.

        Raises:
            TransportError: If the request fails before a response is received.
            BodyReadError: If the response body cannot be fully read.
            asyncio.CancelledError: If the calling task is cancelled.
        """
        self.debug(lambda: f"Sending GET request to {url}")
        start_perf_ns = time.perf_counter_ns()

        if self.session is not None:
            return await self._get(self.session, url, headers, start_perf_ns, **kwargs)

        if self.tcp_connector is None:
            self.tcp_connector = create_tcp_connector(**self.tcp_kwargs)
        async with aiohttp.ClientSession(
            connector=self.tcp_connector,
            timeout=self.timeout,
            connector_owner=False,
        ) as session:
            return await self._get(session, url, headers, start_perf_ns, **kwargs)

    async def _get(
        self,
        session: aiohttp.ClientSession,
        url: str,
        headers: dict[str, str] | None,
        start_perf_ns: int,
        **kwargs: Any,
    ) -> FetchResponse:
        if self.session is not None and self.override_session_timeout:
            kwargs.setdefault("timeout", self.timeout)

        try:
            async with session.get(url, headers=headers, **kwargs) as response:
                status = response.status
                try:
                    body = await response.read()
                except (aiohttp.ClientError, asyncio.TimeoutError) as e:
                    self.error(f"Error reading response body from {url}: {e!r}")
                    raise BodyReadError(url, status, e) from e

                latency_ns = time.perf_counter_ns() - start_perf_ns
                self.debug(
                    lambda: f"GET request to {url} completed with status {status} "
                    f"in {latency_ns / NANOS_PER_SECOND} seconds"
                )
                return FetchResponse(
                    status=status,
                    text=body.decode("utf-8", errors="replace"),
                    content_type=response.content_type,
                    latency_ns=latency_ns,
                )
        except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as e:
            self.error(f"Error in aiohttp request: {e!r}")
            raise TransportError(url, e) from e


def create_tcp_connector(**kwargs) -> aiohttp.TCPConnector:
    """Create a new connector from AioHttpDefaults, overridden by `kwargs`."""
    default_kwargs: dict[str, Any] = AioHttpDefaults.get_default_kwargs()
    default_kwargs.update(kwargs)
    return aiohttp.TCPConnector(**default_kwargs)
