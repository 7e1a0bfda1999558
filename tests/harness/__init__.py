# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from tests.harness.ports import unused_port
from tests.harness.reference_data import (
    EMPTY,
    GC_DURATION,
    GC_DURATION_COUNT,
    GO_INFO,
    GOROUTINES,
    REFERENCE_METRICS,
    REFERENCE_RESULT,
    SERVER_UP,
)

__all__ = [
    "EMPTY",
    "GC_DURATION",
    "GC_DURATION_COUNT",
    "GOROUTINES",
    "GO_INFO",
    "REFERENCE_METRICS",
    "REFERENCE_RESULT",
    "SERVER_UP",
    "unused_port",
]
