# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Account registration and bearer-token sign-in service."""

__version__ = "0.1.0"
