# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

import json

import pytest

from xrm_webapi.core._error_codes import (
    RESPONSE_BODY_NOT_JSON,
    RESPONSE_ENTITY_ID_MISSING,
)
from xrm_webapi.core.errors import HttpError, MalformedResponseError
from xrm_webapi.data._response import _resolve_response
from xrm_webapi.models.operation import OperationKind

ENTITY_URL = "https://org.example.com/api/data/v9.2/accounts(11111111-2222-3333-4444-555555555555)"


def test_200_returns_parsed_body_for_every_kind():
    body = {"value": [{"name": "A"}]}
    for kind in OperationKind:
        assert _resolve_response(kind, 200, json.dumps(body), {}) == body


def test_204_on_create_returns_entity_id_header():
    result = _resolve_response(OperationKind.CREATE, 204, "", {"OData-EntityId": ENTITY_URL})
    assert result == ENTITY_URL


def test_204_on_create_header_lookup_is_case_insensitive():
    result = _resolve_response(OperationKind.CREATE, 204, "", {"odata-entityid": ENTITY_URL})
    assert result == ENTITY_URL


def test_204_on_create_without_header_is_malformed():
    with pytest.raises(MalformedResponseError) as ei:
        _resolve_response(OperationKind.CREATE, 204, "", {"Content-Length": "0"})
    assert ei.value.subcode == RESPONSE_ENTITY_ID_MISSING
    assert ei.value.status_code == 204


@pytest.mark.parametrize(
    "kind",
    [
        OperationKind.UPDATE,
        OperationKind.UPDATE_PROPERTY,
        OperationKind.DELETE,
        OperationKind.DELETE_PROPERTY,
        OperationKind.BOUND_ACTION,
        OperationKind.UNBOUND_ACTION,
        OperationKind.BOUND_FUNCTION,
        OperationKind.UNBOUND_FUNCTION,
        OperationKind.RETRIEVE,
    ],
)
def test_204_on_other_kinds_returns_none(kind):
    assert _resolve_response(kind, 204, "", {"OData-EntityId": ENTITY_URL}) is None


def test_error_status_raises_with_unmodified_error_object():
    error = {"code": "0x80040217", "message": "account With Id = x Does Not Exist", "innererror": {"type": "X"}}
    with pytest.raises(HttpError) as ei:
        _resolve_response(OperationKind.RETRIEVE, 404, json.dumps({"error": error}), {})
    exc = ei.value
    assert exc.error == error
    assert exc.message == error["message"]
    assert exc.status_code == 404
    assert exc.subcode == "http_404"
    assert exc.service_error_code == "0x80040217"
    assert exc.is_transient is False


def test_429_is_transient_with_retry_after():
    with pytest.raises(HttpError) as ei:
        _resolve_response(
            OperationKind.RETRIEVE_MULTIPLE,
            429,
            json.dumps({"error": {"code": "0x80072322", "message": "Throttled"}}),
            {"Retry-After": "7"},
        )
    err = ei.value.to_dict()
    assert err["is_transient"] is True
    assert err["subcode"] == "http_429"
    assert err["details"]["retry_after"] == 7


def test_unmapped_status_subcode_fallback():
    with pytest.raises(HttpError) as ei:
        _resolve_response(OperationKind.DELETE, 418, json.dumps({"error": {"message": "Teapot"}}), {})
    assert ei.value.subcode == "http_418"


def test_error_body_without_error_field():
    with pytest.raises(HttpError) as ei:
        _resolve_response(OperationKind.DELETE, 500, json.dumps({"unexpected": True}), {})
    assert ei.value.error == {}
    assert ei.value.message == "HTTP 500"


def test_201_is_treated_as_error_status():
    with pytest.raises(HttpError):
        _resolve_response(OperationKind.CREATE, 201, json.dumps({"error": {"code": "c", "message": "m"}}), {})


def test_unparseable_error_body_is_malformed_not_protocol_error():
    with pytest.raises(MalformedResponseError) as ei:
        _resolve_response(OperationKind.RETRIEVE, 500, "Internal failure XYZ stack truncated", {})
    exc = ei.value
    assert not isinstance(exc, HttpError)
    assert exc.code == "malformed_response"
    assert exc.subcode == RESPONSE_BODY_NOT_JSON
    assert exc.status_code == 500
    assert "XYZ stack" in exc.details["body_excerpt"]


def test_unparseable_success_body_is_malformed():
    with pytest.raises(MalformedResponseError) as ei:
        _resolve_response(OperationKind.RETRIEVE, 200, "<html>", {})
    assert ei.value.status_code == 200
    assert isinstance(ei.value.__cause__, ValueError)


def test_empty_200_body_is_malformed():
    with pytest.raises(MalformedResponseError):
        _resolve_response(OperationKind.UNBOUND_ACTION, 200, "", {})
