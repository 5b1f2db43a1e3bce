# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Response resolution for Web API operations.

Maps a completed exchange (status code, body text, headers) to the value an
operation returns, or raises the matching structured error:

- ``200``: the parsed JSON body.
- ``204``: the ``OData-EntityId`` header for create, ``None`` for everything else.
- any other status: :class:`~xrm_webapi.core.errors.HttpError` carrying the body's ``error`` object.

A body that cannot be parsed raises :class:`~xrm_webapi.core.errors.MalformedResponseError`.
"""

from __future__ import annotations

import json
from typing import Any, Mapping, Optional

from ..common.constants import HEADER_ODATA_ENTITY_ID
from ..core._error_codes import (
    RESPONSE_BODY_NOT_JSON,
    RESPONSE_ENTITY_ID_MISSING,
    _http_subcode,
    _is_transient_status,
)
from ..core.errors import HttpError, MalformedResponseError
from ..models.operation import OperationKind

_BODY_EXCERPT_LIMIT = 200


def _header(headers: Optional[Mapping[str, str]], name: str) -> Optional[str]:
    """Case-insensitive header lookup that works for plain dicts too."""
    if not headers:
        return None
    value = headers.get(name)
    if value is not None:
        return value
    lname = name.lower()
    for k, v in headers.items():
        if isinstance(k, str) and k.lower() == lname:
            return v
    return None


def _excerpt(text: Optional[str]) -> str:
    return (text or "")[:_BODY_EXCERPT_LIMIT]


def _parse_json(status_code: int, text: Optional[str]) -> Any:
    try:
        return json.loads(text or "")
    except ValueError as exc:
        raise MalformedResponseError(
            f"Response body for status {status_code} is not valid JSON: {exc}",
            status_code=status_code,
            subcode=RESPONSE_BODY_NOT_JSON,
            body_excerpt=_excerpt(text),
        ) from exc


def _resolve_response(
    kind: OperationKind,
    status_code: int,
    text: Optional[str],
    headers: Optional[Mapping[str, str]] = None,
) -> Any:
    """
    Turn a completed exchange into the operation's value.

    :param kind: Kind of the operation that produced the response.
    :type kind: ~xrm_webapi.models.operation.OperationKind
    :param status_code: HTTP status code.
    :type status_code: int
    :param text: Response body as text.
    :type text: str or None
    :param headers: Response headers.
    :type headers: Mapping[str, str] or None
    :return: Parsed JSON (200), entity-location string (204 on create) or ``None`` (other 204).
    :raises ~xrm_webapi.core.errors.HttpError: On any other status.
    :raises ~xrm_webapi.core.errors.MalformedResponseError: If the body cannot be parsed, or a
        create response lacks the ``OData-EntityId`` header.
    """
    if status_code == 200:
        return _parse_json(status_code, text)

    if status_code == 204:
        if kind is OperationKind.CREATE:
            location = _header(headers, HEADER_ODATA_ENTITY_ID)
            if not location:
                header_keys = ", ".join(sorted(headers.keys())) if headers else ""
                raise MalformedResponseError(
                    f"Create response missing {HEADER_ODATA_ENTITY_ID} header. Headers: {header_keys}",
                    status_code=status_code,
                    subcode=RESPONSE_ENTITY_ID_MISSING,
                )
            return location
        return None

    payload = _parse_json(status_code, text)
    error = payload.get("error") if isinstance(payload, dict) else None
    if not isinstance(error, dict):
        error = {}
    message = error.get("message") or f"HTTP {status_code}"

    retry_after: Optional[int] = None
    ra = _header(headers, "Retry-After")
    if ra:
        try:
            retry_after = int(ra)
        except (ValueError, TypeError):
            retry_after = None

    raise HttpError(
        message,
        status_code=status_code,
        error=error,
        is_transient=_is_transient_status(status_code),
        subcode=_http_subcode(status_code),
        request_id=_header(headers, "x-ms-service-request-id"),
        retry_after=retry_after,
    )
