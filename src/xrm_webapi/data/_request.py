# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Request construction for Web API operations.

Pure functions that turn an :class:`~xrm_webapi.models.operation.OperationDescriptor`
into a :class:`_PreparedRequest`: HTTP method, resource path relative to the
service root (including any query string), headers, and the serialized body.
Nothing here touches the network.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

from ..common.constants import (
    CONTENT_TYPE_JSON,
    CONTENT_TYPE_JSON_UTF8,
    DEFAULT_VENDOR_NAMESPACE,
    HEADER_ACCEPT,
    HEADER_CONTENT_TYPE,
    HEADER_ODATA_MAX_VERSION,
    HEADER_ODATA_VERSION,
    HEADER_PREFER,
    ODATA_VERSION,
)
from ..core._error_codes import (
    VALIDATION_BODY_NOT_SERIALIZABLE,
    VALIDATION_ENTITY_SET_MISSING,
    VALIDATION_INVALID_PAGE_SIZE,
    VALIDATION_OPERATION_NAME_MISSING,
    VALIDATION_UNSUPPORTED_RECORD_TYPE,
)
from ..core.errors import ValidationError
from ..models.entity import Attribute, Entity
from ..models.function_input import FunctionInput
from ..models.guid import Guid
from ..models.operation import FunctionInputLike, OperationDescriptor, OperationKind
from ._prefer import _compose_prefer_header

_METHODS: Dict[OperationKind, str] = {
    OperationKind.RETRIEVE: "GET",
    OperationKind.RETRIEVE_MULTIPLE: "GET",
    OperationKind.BOUND_FUNCTION: "GET",
    OperationKind.UNBOUND_FUNCTION: "GET",
    OperationKind.CREATE: "POST",
    OperationKind.BOUND_ACTION: "POST",
    OperationKind.UNBOUND_ACTION: "POST",
    OperationKind.UPDATE: "PATCH",
    OperationKind.UPDATE_PROPERTY: "PUT",
    OperationKind.DELETE: "DELETE",
    OperationKind.DELETE_PROPERTY: "DELETE",
}


@dataclass(frozen=True)
class _PreparedRequest:
    """A fully built request, ready to be joined to the service root and sent."""

    method: str
    path: str
    headers: Dict[str, str] = field(default_factory=dict)
    body: Optional[str] = None


def _base_headers() -> Dict[str, str]:
    """Headers sent with every request."""
    return {
        HEADER_ACCEPT: CONTENT_TYPE_JSON,
        HEADER_CONTENT_TYPE: CONTENT_TYPE_JSON_UTF8,
        HEADER_ODATA_MAX_VERSION: ODATA_VERSION,
        HEADER_ODATA_VERSION: ODATA_VERSION,
    }


def _normalize_query_string(query_string: Optional[str]) -> str:
    """Return ``query_string`` with a leading ``?``; empty or ``None`` yields ``""``."""
    if not query_string:
        return ""
    if query_string.startswith("?"):
        return query_string
    return f"?{query_string}"


def _format_literal(value: Any) -> str:
    """Render a Python value as written in a function parameter list (no quoting or escaping)."""
    if value is True:
        return "true"
    if value is False:
        return "false"
    if value is None:
        return "null"
    return str(value)


def _coerce_function_input(item: FunctionInputLike) -> FunctionInput:
    if isinstance(item, FunctionInput):
        return item
    if isinstance(item, Mapping):
        if not item.get("name"):
            raise ValidationError("Function input mapping requires a 'name'.")
        return FunctionInput(name=item["name"], value=item.get("value"), alias=item.get("alias"))
    raise ValidationError(f"Unsupported function input type: {type(item).__name__}")


def _encode_function_inputs(inputs: Optional[Sequence[FunctionInputLike]]) -> Tuple[str, str]:
    """
    Encode function parameters.

    :return: ``(parameter_list, alias_block)``. ``parameter_list`` includes the surrounding
        parentheses, e.g. ``(Count=5,Target=@p1)``; ``alias_block`` is ``""`` or starts with
        ``?``, e.g. ``?@p1='abc'``.
    """
    params: List[str] = []
    aliases: List[str] = []
    for item in inputs or ():
        fi = _coerce_function_input(item)
        if fi.alias:
            params.append(f"{fi.name}=@{fi.alias}")
            aliases.append(f"@{fi.alias}={_format_literal(fi.value)}")
        else:
            params.append(f"{fi.name}={_format_literal(fi.value)}")
    alias_block = "?" + "&".join(aliases) if aliases else ""
    return "(" + ",".join(params) + ")", alias_block


def _record_body(record: Any) -> Dict[str, Any]:
    if isinstance(record, Entity):
        return record.to_dict()
    if isinstance(record, Mapping):
        return dict(record)
    if record is None:
        return {}
    raise ValidationError(
        f"record must be an Entity or a mapping, got {type(record).__name__}",
        subcode=VALIDATION_UNSUPPORTED_RECORD_TYPE,
    )


def _require_entity_set(desc: OperationDescriptor) -> str:
    es = (desc.entity_set or "").strip()
    if not es:
        raise ValidationError(
            f"entity_set is required for {desc.kind.value}",
            subcode=VALIDATION_ENTITY_SET_MISSING,
        )
    return es


def _require_operation_name(desc: OperationDescriptor) -> str:
    name = (desc.operation_name or "").strip()
    if not name:
        raise ValidationError(
            f"operation_name is required for {desc.kind.value}",
            subcode=VALIDATION_OPERATION_NAME_MISSING,
        )
    return name


def _require_attribute(desc: OperationDescriptor) -> Attribute:
    if not isinstance(desc.attribute, Attribute):
        raise ValidationError(f"attribute is required for {desc.kind.value}")
    return desc.attribute


def _positive_page_size(value: Any) -> int:
    try:
        size = int(value)
    except (TypeError, ValueError) as exc:
        raise ValidationError(
            f"max_page_size must be a positive integer, got {value!r}",
            subcode=VALIDATION_INVALID_PAGE_SIZE,
        ) from exc
    if isinstance(value, bool) or size <= 0:
        raise ValidationError(
            f"max_page_size must be a positive integer, got {value!r}",
            subcode=VALIDATION_INVALID_PAGE_SIZE,
        )
    return size


def _build_path(desc: OperationDescriptor, vendor_namespace: str) -> str:
    kind = desc.kind

    if kind is OperationKind.UNBOUND_ACTION:
        return f"{vendor_namespace}.{_require_operation_name(desc)}"
    if kind is OperationKind.UNBOUND_FUNCTION:
        params, aliases = _encode_function_inputs(desc.function_inputs)
        return f"{_require_operation_name(desc)}{params}{aliases}"

    entity_set = _require_entity_set(desc)
    if kind is OperationKind.RETRIEVE_MULTIPLE:
        return entity_set + _normalize_query_string(desc.query_string)
    if kind is OperationKind.CREATE:
        return entity_set

    record_path = f"{entity_set}({Guid.coerce(desc.id).value})"
    if kind is OperationKind.RETRIEVE:
        return record_path + _normalize_query_string(desc.query_string)
    if kind in (OperationKind.UPDATE, OperationKind.UPDATE_PROPERTY, OperationKind.DELETE):
        return record_path
    if kind is OperationKind.DELETE_PROPERTY:
        return f"{record_path}/{_require_attribute(desc).name}"
    if kind is OperationKind.BOUND_ACTION:
        return f"{record_path}/{vendor_namespace}.{_require_operation_name(desc)}"
    if kind is OperationKind.BOUND_FUNCTION:
        params, aliases = _encode_function_inputs(desc.function_inputs)
        return f"{record_path}/{vendor_namespace}.{_require_operation_name(desc)}{params}{aliases}"
    raise ValidationError(f"Unsupported operation kind: {kind!r}")


def _dumps(payload: Any) -> str:
    try:
        return json.dumps(payload)
    except (TypeError, ValueError) as exc:
        raise ValidationError(
            f"Request body is not JSON-serializable: {exc}",
            subcode=VALIDATION_BODY_NOT_SERIALIZABLE,
        ) from exc


def _build_body(desc: OperationDescriptor, legacy_update_property_key: bool) -> Optional[str]:
    kind = desc.kind
    if kind in (OperationKind.CREATE, OperationKind.UPDATE):
        return _dumps(_record_body(desc.record))
    if kind is OperationKind.UPDATE_PROPERTY:
        attr = _require_attribute(desc)
        key = "name" if legacy_update_property_key else attr.name
        return _dumps({key: attr.value})
    if kind.is_action and desc.action_inputs is not None:
        return _dumps(desc.action_inputs)
    return None


def _build_request(
    desc: OperationDescriptor,
    *,
    vendor_namespace: str = DEFAULT_VENDOR_NAMESPACE,
    legacy_update_property_key: bool = False,
) -> _PreparedRequest:
    """
    Build the HTTP request for one operation.

    :param desc: Operation to build.
    :type desc: ~xrm_webapi.models.operation.OperationDescriptor
    :param vendor_namespace: Namespace qualifying action names and bound function names.
    :type vendor_namespace: str
    :param legacy_update_property_key: Serialize ``update_property`` bodies under the literal
        key ``"name"``.
    :type legacy_update_property_key: bool
    :return: Method, relative path (with query string), headers and body.
    :rtype: _PreparedRequest
    :raises ~xrm_webapi.core.errors.ValidationError: If a field the kind needs is missing or malformed.
    """
    method = _METHODS[desc.kind]
    path = _build_path(desc, vendor_namespace)
    headers = _base_headers()

    if desc.kind.is_read:
        page_size = desc.max_page_size if desc.kind is OperationKind.RETRIEVE_MULTIPLE else None
        if page_size is not None:
            page_size = _positive_page_size(page_size)
        prefer = _compose_prefer_header(
            desc.include_formatted_values,
            desc.include_lookup_logical_names,
            desc.include_associated_navigation_properties,
            page_size,
        )
        if prefer:
            headers[HEADER_PREFER] = prefer

    body = _build_body(desc, legacy_update_property_key)
    return _PreparedRequest(method=method, path=path, headers=headers, body=body)
