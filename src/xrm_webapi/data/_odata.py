# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Low-level Web API client.

:class:`_ODataClient` builds each request with
:func:`~xrm_webapi.data._request._build_request` (``_prepare``), then resolves the
service root, sends the request through the HTTP transport and resolves the
response with :func:`~xrm_webapi.data._response._resolve_response` (``_send``).
Every call performs exactly one HTTP exchange; transport failures surface as
:class:`~xrm_webapi.core.errors.TransportError`.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Optional, Union

import requests

from ..common.constants import HEADER_AUTHORIZATION
from ..core._auth import _AuthManager
from ..core._error_codes import (
    TRANSPORT_CONNECTION,
    TRANSPORT_FAILURE,
    TRANSPORT_TIMEOUT,
    VALIDATION_BASE_URL_MISSING,
)
from ..core._http import _HttpClient
from ..core.config import WebApiConfig
from ..core.errors import TransportError, ValidationError
from ..models.operation import OperationDescriptor, OperationKind
from ._request import _PreparedRequest, _build_request
from ._response import _resolve_response

BaseUrl = Union[str, Callable[[], str]]


class _ODataClient:
    """Web API client: record CRUD, property updates, actions and functions."""

    def __init__(
        self,
        auth: Optional[_AuthManager],
        base_url: BaseUrl,
        config: Optional[WebApiConfig] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.auth = auth
        if isinstance(base_url, str):
            base_url = base_url.rstrip("/")
            if not base_url:
                raise ValueError("base_url is required.")
        elif not callable(base_url):
            raise TypeError("base_url must be a string or a callable returning a string.")
        self._base_url = base_url
        self.config = config or WebApiConfig.from_env()
        self._http = _HttpClient(timeout=self.config.http_timeout, session=session)
        self._logger = logging.getLogger(self.config.logger_name)
        if self.config.enable_logging:
            level = logging.getLevelName(self.config.log_level.upper())
            if not isinstance(level, int):
                raise ValueError(f"Unknown log_level {self.config.log_level!r}.")
            self._logger.setLevel(level)

    # ----------------------------- Plumbing -----------------------------
    def _resolve_base_url(self) -> str:
        """Return the base URL for this call; providers are invoked every time."""
        value = self._base_url() if callable(self._base_url) else self._base_url
        value = (value or "").rstrip("/")
        if not value:
            raise ValidationError("base_url provider returned an empty value.", subcode=VALIDATION_BASE_URL_MISSING)
        return value

    def _service_root(self, base_url: str) -> str:
        return f"{base_url}/api/data/{self.config.api_version}"

    def _auth_headers(self, base_url: str) -> Dict[str, str]:
        if self.auth is None:
            return {}
        token = self.auth._acquire_token(f"{base_url}/.default").access_token
        return {HEADER_AUTHORIZATION: f"Bearer {token}"}

    def _request(self, method: str, url: str, **kwargs: Any) -> requests.Response:
        """Send one request, converting transport failures to :class:`TransportError`."""
        self._logger.debug("%s %s", method, url)
        try:
            r = self._http._request(method, url, **kwargs)
        except requests.exceptions.Timeout as exc:
            self._logger.warning("%s %s timed out: %s", method, url, exc)
            raise TransportError(
                f"{method} {url} timed out: {exc}", subcode=TRANSPORT_TIMEOUT, is_transient=True
            ) from exc
        except requests.exceptions.ConnectionError as exc:
            self._logger.warning("%s %s connection failed: %s", method, url, exc)
            raise TransportError(
                f"{method} {url} connection failed: {exc}", subcode=TRANSPORT_CONNECTION, is_transient=True
            ) from exc
        except requests.exceptions.RequestException as exc:
            self._logger.warning("%s %s failed: %s", method, url, exc)
            raise TransportError(f"{method} {url} failed: {exc}", subcode=TRANSPORT_FAILURE) from exc
        level = logging.WARNING if r.status_code >= 400 else logging.DEBUG
        self._logger.log(level, "%s %s -> %s", method, url, r.status_code)
        return r

    def _prepare(self, desc: OperationDescriptor) -> _PreparedRequest:
        """Build the request for ``desc``. The result no longer references caller-owned objects."""
        self._logger.debug("Preparing %s", desc.to_dict())
        return _build_request(
            desc,
            vendor_namespace=self.config.vendor_namespace,
            legacy_update_property_key=self.config.legacy_update_property_key,
        )

    def _send(self, kind: OperationKind, prepared: _PreparedRequest) -> Any:
        """Send a prepared request and resolve the response for an operation of ``kind``."""
        base_url = self._resolve_base_url()
        url = f"{self._service_root(base_url)}/{prepared.path}"
        headers = dict(prepared.headers)
        headers.update(self._auth_headers(base_url))
        kwargs: Dict[str, Any] = {"headers": headers}
        if prepared.body is not None:
            kwargs["data"] = prepared.body.encode("utf-8")
        r = self._request(prepared.method, url, **kwargs)
        return _resolve_response(kind, r.status_code, r.text, r.headers)

    def _execute(self, desc: OperationDescriptor) -> Any:
        """Build, send and resolve one operation on the calling thread."""
        return self._send(desc.kind, self._prepare(desc))

    def close(self) -> None:
        self._http.close()
