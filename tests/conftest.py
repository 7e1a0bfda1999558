# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""
Shared test configuration and fixtures for all test types.
"""

import asyncio
import logging
from collections.abc import AsyncIterator, Awaitable, Callable
from dataclasses import dataclass, field

import pytest
import pytest_asyncio
from aiohttp import web
from aiohttp.test_utils import TestServer

from tests.harness import REFERENCE_METRICS


@pytest.fixture
def reference_metrics() -> str:
    """Exposition document shared by parser and client tests."""
    return REFERENCE_METRICS


@pytest.fixture
def restore_root_logger():
    """Restore root logger handlers and level changed by setup_rich_logging."""
    handlers = logging.root.handlers[:]
    level = logging.root.level
    yield
    for handler in logging.root.handlers[:]:
        logging.root.removeHandler(handler)
        if handler not in handlers:
            handler.close()
    for handler in handlers:
        logging.root.addHandler(handler)
    logging.root.setLevel(level)


@dataclass
class FakeMetricsEndpoint:
    """Local HTTP endpoint serving a fixed exposition document."""

    url: str
    received_headers: list[dict[str, str]] = field(default_factory=list)


StartEndpointFn = Callable[..., Awaitable[FakeMetricsEndpoint]]


@pytest_asyncio.fixture
async def start_metrics_endpoint() -> AsyncIterator[StartEndpointFn]:
    """Factory fixture starting aiohttp servers that serve `/metrics`.

    Usage:
        endpoint = await start_metrics_endpoint(body, status=200, delay=0.0)
    """
    servers: list[TestServer] = []

    async def _start(
        body: str = REFERENCE_METRICS, status: int = 200, delay: float = 0.0
    ) -> FakeMetricsEndpoint:
        endpoint = FakeMetricsEndpoint(url="")

        async def handler(request: web.Request) -> web.Response:
            endpoint.received_headers.append(dict(request.headers))
            if delay:
                await asyncio.sleep(delay)
            return web.Response(text=body, status=status, content_type="text/plain")

        app = web.Application()
        app.router.add_get("/metrics", handler)
        server = TestServer(app)
        await server.start_server()
        servers.append(server)
        endpoint.url = str(server.make_url("/metrics"))
        return endpoint

    yield _start

    for server in servers:
        await server.close()
