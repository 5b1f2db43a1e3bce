# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""Record CRUD operations namespace."""

from __future__ import annotations

from concurrent.futures import Future
from typing import Any, Dict, Optional, Union, TYPE_CHECKING

from ..models.entity import Attribute
from ..models.guid import Guid
from ..models.operation import OperationDescriptor, OperationKind, RecordPayload
from ..utils._pandas import page_to_dataframe

if TYPE_CHECKING:
    import pandas as pd

    from ..client import WebApiClient


def _page_descriptor(
    entity_set: str,
    query_string: Optional[str],
    include_formatted_values: bool,
    include_lookup_logical_names: bool,
    include_associated_navigation_properties: bool,
    max_page_size: Optional[int],
) -> OperationDescriptor:
    return OperationDescriptor(
        OperationKind.RETRIEVE_MULTIPLE,
        entity_set=entity_set,
        query_string=query_string,
        include_formatted_values=include_formatted_values,
        include_lookup_logical_names=include_lookup_logical_names,
        include_associated_navigation_properties=include_associated_navigation_properties,
        max_page_size=max_page_size,
    )


class RecordOperations:
    """
    Record CRUD operations.

    Accessed via ``client.records``. Every method returns a
    :class:`concurrent.futures.Future` that resolves once with the operation's value
    or with the error that ended it.

    Example::

        location = client.records.create("accounts", {"name": "Contoso"}).result()

        account = client.records.retrieve(
            "accounts", account_id, "$select=name,revenue", include_formatted_values=True
        ).result()

        client.records.update("accounts", account_id, {"telephone1": "555-0100"}).result()
        client.records.delete("accounts", account_id).result()
    """

    def __init__(self, client: "WebApiClient") -> None:
        """
        Initialize RecordOperations.

        :param client: Parent WebApiClient instance.
        :type client: WebApiClient
        """
        self._client = client

    def retrieve(
        self,
        entity_set: str,
        id: Union[Guid, str],
        query_string: Optional[str] = None,
        include_formatted_values: bool = False,
        include_lookup_logical_names: bool = False,
        include_associated_navigation_properties: bool = False,
    ) -> "Future[Dict[str, Any]]":
        """
        Retrieve a single record.

        :param entity_set: Entity set name, e.g. ``"accounts"``.
        :type entity_set: str
        :param id: Record id.
        :type id: ~xrm_webapi.models.guid.Guid or str
        :param query_string: OData query options such as ``"$select=name"``. A leading ``?`` is optional.
        :type query_string: str or None
        :param include_formatted_values: Include formatted-value annotations.
        :type include_formatted_values: bool
        :param include_lookup_logical_names: Include lookup logical-name annotations.
        :type include_lookup_logical_names: bool
        :param include_associated_navigation_properties: Include associated navigation property annotations.
        :type include_associated_navigation_properties: bool
        :return: Future resolving to the record as a dict.
        :rtype: concurrent.futures.Future
        """
        return self._client._submit(
            OperationDescriptor(
                OperationKind.RETRIEVE,
                entity_set=entity_set,
                id=id,
                query_string=query_string,
                include_formatted_values=include_formatted_values,
                include_lookup_logical_names=include_lookup_logical_names,
                include_associated_navigation_properties=include_associated_navigation_properties,
            )
        )

    def retrieve_multiple(
        self,
        entity_set: str,
        query_string: Optional[str] = None,
        include_formatted_values: bool = False,
        include_lookup_logical_names: bool = False,
        include_associated_navigation_properties: bool = False,
        max_page_size: Optional[int] = None,
    ) -> "Future[Dict[str, Any]]":
        """
        Retrieve one page of records from an entity set.

        The server's response is returned as-is; records are under ``"value"`` and a further
        page, if any, is announced by ``"@odata.nextLink"``. Paging is not followed.

        :param entity_set: Entity set name.
        :type entity_set: str
        :param query_string: OData query options, e.g. ``"$filter=statecode eq 0"``.
        :type query_string: str or None
        :param max_page_size: Records per page (``odata.maxpagesize``).
        :type max_page_size: int or None
        :return: Future resolving to the response body.
        :rtype: concurrent.futures.Future
        """
        return self._client._submit(
            _page_descriptor(
                entity_set,
                query_string,
                include_formatted_values,
                include_lookup_logical_names,
                include_associated_navigation_properties,
                max_page_size,
            )
        )

    def retrieve_multiple_dataframe(
        self,
        entity_set: str,
        query_string: Optional[str] = None,
        include_formatted_values: bool = False,
        include_lookup_logical_names: bool = False,
        include_associated_navigation_properties: bool = False,
        max_page_size: Optional[int] = None,
    ) -> "Future[pd.DataFrame]":
        """
        Like :meth:`retrieve_multiple`, resolving to a :class:`pandas.DataFrame` of the page.

        OData annotation columns (keys containing ``@``) are dropped unless at least one
        annotation flag was requested.
        """
        keep_annotations = bool(
            include_formatted_values or include_lookup_logical_names or include_associated_navigation_properties
        )
        return self._client._submit(
            _page_descriptor(
                entity_set,
                query_string,
                include_formatted_values,
                include_lookup_logical_names,
                include_associated_navigation_properties,
                max_page_size,
            ),
            then=lambda page: page_to_dataframe(page, keep_annotations=keep_annotations),
        )

    def create(self, entity_set: str, record: RecordPayload) -> "Future[str]":
        """
        Create a record.

        :param entity_set: Entity set name.
        :type entity_set: str
        :param record: Column values as an :class:`~xrm_webapi.models.entity.Entity` or a dict.
        :type record: ~xrm_webapi.models.entity.Entity or dict
        :return: Future resolving to the new record's ``OData-EntityId`` URL,
            e.g. ``https://org.crm.dynamics.com/api/data/v9.2/accounts(<guid>)``.
        :rtype: concurrent.futures.Future
        """
        return self._client._submit(OperationDescriptor(OperationKind.CREATE, entity_set=entity_set, record=record))

    def update(self, entity_set: str, id: Union[Guid, str], record: RecordPayload) -> "Future[None]":
        """Update columns of an existing record (``PATCH``). Resolves to ``None``."""
        return self._client._submit(
            OperationDescriptor(OperationKind.UPDATE, entity_set=entity_set, id=id, record=record)
        )

    def update_property(self, entity_set: str, id: Union[Guid, str], attribute: Attribute) -> "Future[None]":
        """
        Replace a single column value (``PUT``). Resolves to ``None``.

        The body is ``{attribute.name: attribute.value}``. With
        ``WebApiConfig(legacy_update_property_key=True)`` it is ``{"name": attribute.value}`` instead.
        """
        return self._client._submit(
            OperationDescriptor(OperationKind.UPDATE_PROPERTY, entity_set=entity_set, id=id, attribute=attribute)
        )

    def delete(self, entity_set: str, id: Union[Guid, str]) -> "Future[None]":
        """
        Delete a record. Resolves to ``None``.

        Deleting a record that no longer exists resolves with the server's error; it is not suppressed.
        """
        return self._client._submit(OperationDescriptor(OperationKind.DELETE, entity_set=entity_set, id=id))

    def delete_property(self, entity_set: str, id: Union[Guid, str], attribute: Attribute) -> "Future[None]":
        """Clear a single column value (``DELETE {set}({id})/{column}``). Resolves to ``None``."""
        return self._client._submit(
            OperationDescriptor(OperationKind.DELETE_PROPERTY, entity_set=entity_set, id=id, attribute=attribute)
        )


__all__ = ["RecordOperations"]
