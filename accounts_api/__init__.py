# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""User-account service: registration, JWT cookie sessions and profiles."""

__version__ = "1.0.0"
