# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""Action and function invocation namespace."""

from __future__ import annotations

from concurrent.futures import Future
from typing import Any, Optional, Sequence, Union, TYPE_CHECKING

from ..models.guid import Guid
from ..models.operation import FunctionInputLike, OperationDescriptor, OperationKind

if TYPE_CHECKING:
    from ..client import WebApiClient


class ActionOperations:
    """
    Server-defined actions and functions.

    Accessed via ``client.actions``. Action names and bound function names are
    qualified with the configured vendor namespace (``Microsoft.Dynamics.CRM`` by
    default); unbound function names are sent as given.

    Every method returns a :class:`concurrent.futures.Future` resolving to the parsed
    response body, or ``None`` when the server returns no content.

    Example::

        me = client.actions.unbound_function("WhoAmI").result()
        print(me["UserId"])

        client.actions.bound_action(
            "opportunities", opp_id, "WinOpportunity",
            {"Status": 3, "OpportunityClose": {"subject": "Won"}},
        ).result()

        client.actions.unbound_function(
            "RetrieveTotalRecordCount",
            [FunctionInput("EntityNames", "['account']", alias="p1")],
        ).result()
    """

    def __init__(self, client: "WebApiClient") -> None:
        self._client = client

    def bound_action(
        self,
        entity_set: str,
        id: Union[Guid, str],
        action_name: str,
        inputs: Any = None,
    ) -> "Future[Any]":
        """
        Execute an action bound to a record (``POST {set}({id})/{namespace}.{action}``).

        :param inputs: Action parameters, serialized as the JSON body. No body is sent when ``None``.
        :type inputs: Any
        """
        return self._client._submit(
            OperationDescriptor(
                OperationKind.BOUND_ACTION,
                entity_set=entity_set,
                id=id,
                operation_name=action_name,
                action_inputs=inputs,
            )
        )

    def unbound_action(self, action_name: str, inputs: Any = None) -> "Future[Any]":
        """Execute an unbound action (``POST {namespace}.{action}``)."""
        return self._client._submit(
            OperationDescriptor(OperationKind.UNBOUND_ACTION, operation_name=action_name, action_inputs=inputs)
        )

    def bound_function(
        self,
        entity_set: str,
        id: Union[Guid, str],
        function_name: str,
        inputs: Optional[Sequence[FunctionInputLike]] = None,
    ) -> "Future[Any]":
        """
        Execute a function bound to a record (``GET {set}({id})/{namespace}.{function}(...)``).

        :param inputs: Ordered parameters; aliased parameters are passed as ``@alias`` query parameters.
        :type inputs: list of ~xrm_webapi.models.function_input.FunctionInput or dict
        """
        return self._client._submit(
            OperationDescriptor(
                OperationKind.BOUND_FUNCTION,
                entity_set=entity_set,
                id=id,
                operation_name=function_name,
                function_inputs=inputs,
            )
        )

    def unbound_function(
        self,
        function_name: str,
        inputs: Optional[Sequence[FunctionInputLike]] = None,
    ) -> "Future[Any]":
        """Execute an unbound function (``GET {function}(...)``)."""
        return self._client._submit(
            OperationDescriptor(OperationKind.UNBOUND_FUNCTION, operation_name=function_name, function_inputs=inputs)
        )


__all__ = ["ActionOperations"]
