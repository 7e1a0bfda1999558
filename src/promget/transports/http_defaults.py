# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
import socket
from typing import Any

from promget.common.environment import Environment


class AioHttpDefaults:
    """Default keyword arguments for aiohttp.TCPConnector.

    Settings backed by `Environment.HTTP` are read on every call, so a
    replaced settings object applies to connectors created afterwards.
    """

    LIMIT_PER_HOST = 0  # 0 will set to LIMIT
    USE_DNS_CACHE = True
    FORCE_CLOSE = False
    HAPPY_EYEBALLS_DELAY = None  # disabled
    SOCKET_FAMILY = socket.AF_UNSPEC  # IPv4 and IPv6

    @classmethod
    def get_default_kwargs(cls) -> dict[str, Any]:
        http = Environment.HTTP
        return {
            "limit": http.CONNECTION_LIMIT,
            "limit_per_host": cls.LIMIT_PER_HOST,
            "ttl_dns_cache": http.TTL_DNS_CACHE,
            "use_dns_cache": cls.USE_DNS_CACHE,
            "force_close": cls.FORCE_CLOSE,
            "keepalive_timeout": http.KEEPALIVE_TIMEOUT,
            "happy_eyeballs_delay": cls.HAPPY_EYEBALLS_DELAY,
            "family": cls.SOCKET_FAMILY,
        }
