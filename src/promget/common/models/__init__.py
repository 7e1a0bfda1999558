# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from promget.common.models.base_models import PromGetBaseModel
from promget.common.models.error_models import ErrorDetails
from promget.common.models.metric_models import LabelValuePair, Metric, Result

__all__ = [
    "ErrorDetails",
    "LabelValuePair",
    "Metric",
    "PromGetBaseModel",
    "Result",
]
