# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from promget.transports.aiohttp_client import (
    AioHttpClient,
    FetchResponse,
    create_tcp_connector,
)
from promget.transports.http_defaults import AioHttpDefaults

__all__ = ["AioHttpClient", "AioHttpDefaults", "FetchResponse", "create_tcp_connector"]
