# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

# Status codes worth surfacing as transient to the caller (no retries happen here)
TRANSIENT_STATUS = {429, 502, 503, 504}

# Validation subcodes
VALIDATION_INVALID_GUID = "validation_invalid_guid"
VALIDATION_ENTITY_SET_MISSING = "validation_entity_set_missing"
VALIDATION_OPERATION_NAME_MISSING = "validation_operation_name_missing"
VALIDATION_INVALID_PAGE_SIZE = "validation_invalid_page_size"
VALIDATION_UNSUPPORTED_RECORD_TYPE = "validation_unsupported_record_type"
VALIDATION_BODY_NOT_SERIALIZABLE = "validation_body_not_serializable"
VALIDATION_BASE_URL_MISSING = "validation_base_url_missing"

# Malformed response subcodes
RESPONSE_BODY_NOT_JSON = "response_body_not_json"
RESPONSE_ENTITY_ID_MISSING = "response_entity_id_missing"

# Transport subcodes
TRANSPORT_TIMEOUT = "transport_timeout"
TRANSPORT_CONNECTION = "transport_connection"
TRANSPORT_FAILURE = "transport_failure"


def _http_subcode(status: int) -> str:
    """Subcode for an error response, ``http_<status>``."""
    return f"http_{status}"


def _is_transient_status(status: int) -> bool:
    return status in TRANSIENT_STATUS
