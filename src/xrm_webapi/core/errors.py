# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Structured error types raised by the Web API client.

Every failure of a submitted operation surfaces through its future as one of:

- :class:`HttpError`: the server answered with a non-success status and a structured ``error`` body.
- :class:`MalformedResponseError`: the response could not be interpreted (unparseable body,
  missing entity-location header on create).
- :class:`TransportError`: the exchange never completed (timeout, connection failure).
- :class:`ValidationError`: the request could not be built from the supplied arguments.
"""

from __future__ import annotations

import datetime as _dt
from typing import Any, Dict, Optional


class XrmWebApiError(Exception):
    """Base structured error for the Web API client."""

    def __init__(
        self,
        message: str,
        *,
        code: str,
        subcode: Optional[str] = None,
        status_code: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None,
        source: Optional[str] = None,
        is_transient: bool = False,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.subcode = subcode
        self.status_code = status_code
        self.details = details or {}
        self.source = source or "client"
        self.is_transient = is_transient
        self.timestamp = _dt.datetime.now(_dt.timezone.utc).isoformat().replace("+00:00", "Z")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "message": self.message,
            "code": self.code,
            "subcode": self.subcode,
            "status_code": self.status_code,
            "details": self.details,
            "source": self.source,
            "is_transient": self.is_transient,
            "timestamp": self.timestamp,
        }

    def __repr__(self) -> str:  # pragma: no cover
        return f"{self.__class__.__name__}(code={self.code!r}, subcode={self.subcode!r}, message={self.message!r})"


class ValidationError(XrmWebApiError):
    def __init__(self, message: str, *, subcode: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, code="validation_error", subcode=subcode, details=details, source="client")


class HttpError(XrmWebApiError):
    """
    Protocol error returned by the server.

    :param error: The ``error`` object from the response body, exactly as the server sent it.
        Typically contains at least ``code`` and ``message``.
    :type error: dict
    """

    def __init__(
        self,
        message: str,
        status_code: int,
        error: Optional[Dict[str, Any]] = None,
        is_transient: bool = False,
        subcode: Optional[str] = None,
        request_id: Optional[str] = None,
        retry_after: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.error: Dict[str, Any] = error if error is not None else {}
        self.service_error_code: Optional[str] = self.error.get("code") if isinstance(self.error, dict) else None
        d = details or {}
        if self.service_error_code is not None:
            d["service_error_code"] = self.service_error_code
        if request_id is not None:
            d["request_id"] = request_id
        if retry_after is not None:
            d["retry_after"] = retry_after
        super().__init__(
            message,
            code="http_error",
            subcode=subcode,
            status_code=status_code,
            details=d,
            source="server",
            is_transient=is_transient,
        )


class MalformedResponseError(XrmWebApiError):
    def __init__(
        self,
        message: str,
        *,
        status_code: Optional[int] = None,
        subcode: Optional[str] = None,
        body_excerpt: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        d = details or {}
        if body_excerpt is not None:
            d["body_excerpt"] = body_excerpt
        super().__init__(
            message,
            code="malformed_response",
            subcode=subcode,
            status_code=status_code,
            details=d,
            source="client",
        )


class TransportError(XrmWebApiError):
    def __init__(
        self,
        message: str,
        *,
        subcode: Optional[str] = None,
        is_transient: bool = False,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message,
            code="transport_error",
            subcode=subcode,
            details=details,
            source="client",
            is_transient=is_transient,
        )


__all__ = [
    "XrmWebApiError",
    "ValidationError",
    "HttpError",
    "MalformedResponseError",
    "TransportError",
]
