# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Core infrastructure components for the Web API client.

This module contains the foundational components including authentication,
configuration, HTTP transport, and error handling.
"""

from .config import WebApiConfig
from .errors import (
    XrmWebApiError,
    ValidationError,
    HttpError,
    MalformedResponseError,
    TransportError,
)

__all__ = [
    "WebApiConfig",
    "XrmWebApiError",
    "ValidationError",
    "HttpError",
    "MalformedResponseError",
    "TransportError",
]
