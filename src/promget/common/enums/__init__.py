# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from promget.common.enums.base_enums import CaseInsensitiveStrEnum
from promget.common.enums.metric_enums import MetricType

__all__ = ["CaseInsensitiveStrEnum", "MetricType"]
