# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Common constants for the Web API client.

This module contains shared protocol constants used across the package.
"""

__all__ = []
