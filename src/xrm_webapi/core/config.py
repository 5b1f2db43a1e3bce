# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class WebApiConfig:
    """
    Configuration settings for Web API client operations.

    :param api_version: Web API version segment appended to the base URL (default: ``"v9.2"``).
    :type api_version: str
    :param vendor_namespace: Namespace prefix for bound/unbound actions and bound functions
        (default: ``"Microsoft.Dynamics.CRM"``).
    :type vendor_namespace: str
    :param http_timeout: Request timeout in seconds (default: method-dependent).
    :type http_timeout: float or None
    :param max_workers: Worker threads used to run operations concurrently (default: executor default).
    :type max_workers: int or None
    :param legacy_update_property_key: When True, ``update_property`` serializes its body under the
        literal key ``"name"`` instead of the attribute's own name. Only enable this when talking to
        endpoints that were built around that wire shape.
    :type legacy_update_property_key: bool
    :param enable_logging: Whether to apply ``log_level`` to the SDK logger (default: False).
    :type enable_logging: bool
    :param log_level: Level name applied to the SDK logger when logging is enabled.
    :type log_level: str
    :param logger_name: Name of the SDK logger.
    :type logger_name: str
    """

    api_version: str = "v9.2"
    vendor_namespace: str = "Microsoft.Dynamics.CRM"

    # HTTP configuration
    http_timeout: Optional[float] = None
    max_workers: Optional[int] = None

    # Wire compatibility
    legacy_update_property_key: bool = False

    # Logging configuration
    enable_logging: bool = False
    log_level: str = "WARNING"
    logger_name: str = "xrm_webapi"

    @classmethod
    def from_env(cls) -> "WebApiConfig":
        """
        Create a configuration instance with default settings.

        :return: Configuration instance with default values.
        :rtype: ~xrm_webapi.core.config.WebApiConfig
        """
        # Environment-free defaults
        return cls(
            api_version="v9.2",
            vendor_namespace="Microsoft.Dynamics.CRM",
            http_timeout=None,  # Will use method-dependent defaults in _HttpClient
            max_workers=None,  # Will use ThreadPoolExecutor defaults
            legacy_update_property_key=False,
        )
