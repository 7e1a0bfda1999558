# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from promget.common.mixins.promget_logger_mixin import PromGetLoggerMixin

__all__ = ["PromGetLoggerMixin"]
