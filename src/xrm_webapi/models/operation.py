# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Operation descriptor: one logical Web API call, discriminated by kind.

A descriptor carries every parameter any operation might need; each kind reads
only the fields it uses and ignores the rest.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Sequence, Union

from .entity import Attribute, Entity
from .function_input import FunctionInput
from .guid import Guid

RecordPayload = Union[Entity, Mapping[str, Any]]
FunctionInputLike = Union[FunctionInput, Mapping[str, Any]]


class OperationKind(str, Enum):
    """Kinds of operation understood by the request builder."""

    RETRIEVE = "retrieve"
    RETRIEVE_MULTIPLE = "retrieve_multiple"
    CREATE = "create"
    UPDATE = "update"
    UPDATE_PROPERTY = "update_property"
    DELETE = "delete"
    DELETE_PROPERTY = "delete_property"
    BOUND_ACTION = "bound_action"
    UNBOUND_ACTION = "unbound_action"
    BOUND_FUNCTION = "bound_function"
    UNBOUND_FUNCTION = "unbound_function"

    @property
    def is_read(self) -> bool:
        return self in (OperationKind.RETRIEVE, OperationKind.RETRIEVE_MULTIPLE)

    @property
    def is_action(self) -> bool:
        return self in (OperationKind.BOUND_ACTION, OperationKind.UNBOUND_ACTION)


@dataclass(frozen=True)
class OperationDescriptor:
    """
    Describes one logical call.

    :param kind: Operation kind.
    :type kind: ~xrm_webapi.models.operation.OperationKind
    :param entity_set: Entity set (plural collection name), e.g. ``"accounts"``. Unused by unbound operations.
    :type entity_set: str or None
    :param id: Target record id for bound operations.
    :type id: ~xrm_webapi.models.guid.Guid or str or None
    :param query_string: Raw OData query string for retrieve / retrieve_multiple. A leading ``?`` is added if missing.
    :type query_string: str or None
    :param include_formatted_values: Request formatted-value annotations (reads only).
    :param include_lookup_logical_names: Request lookup logical-name annotations (reads only).
    :param include_associated_navigation_properties: Request associated navigation property annotations (reads only).
    :param max_page_size: ``odata.maxpagesize`` hint (retrieve_multiple only).
    :type max_page_size: int or None
    :param record: Payload for create / update.
    :type record: ~xrm_webapi.models.entity.Entity or dict or None
    :param attribute: Attribute for update_property / delete_property.
    :type attribute: ~xrm_webapi.models.entity.Attribute or None
    :param operation_name: Action or function name, without namespace.
    :type operation_name: str or None
    :param action_inputs: Raw JSON-serializable action parameters.
    :type action_inputs: Any
    :param function_inputs: Ordered function parameters.
    :type function_inputs: list of ~xrm_webapi.models.function_input.FunctionInput or None
    """

    kind: OperationKind
    entity_set: Optional[str] = None
    id: Optional[Union[Guid, str]] = None
    query_string: Optional[str] = None
    include_formatted_values: bool = False
    include_lookup_logical_names: bool = False
    include_associated_navigation_properties: bool = False
    max_page_size: Optional[int] = None
    record: Optional[RecordPayload] = None
    attribute: Optional[Attribute] = None
    operation_name: Optional[str] = None
    action_inputs: Any = None
    function_inputs: Optional[Sequence[FunctionInputLike]] = None

    def to_dict(self) -> Dict[str, Any]:
        """Compact representation used in log records."""
        out: Dict[str, Any] = {"kind": self.kind.value}
        if self.entity_set:
            out["entity_set"] = self.entity_set
        if self.id is not None:
            out["id"] = str(self.id)
        if self.operation_name:
            out["operation_name"] = self.operation_name
        return out


__all__ = ["OperationKind", "OperationDescriptor", "RecordPayload", "FunctionInputLike"]
