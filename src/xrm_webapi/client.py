# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

from __future__ import annotations

import threading
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Any, Callable, Optional, TypeVar

import requests

from azure.core.credentials import TokenCredential

from .core._auth import _AuthManager
from .core.config import WebApiConfig
from .core.errors import XrmWebApiError
from .data._odata import BaseUrl, _ODataClient
from .models.operation import OperationDescriptor
from .operations.actions import ActionOperations
from .operations.records import RecordOperations

T = TypeVar("T")


class WebApiClient:
    """
    Client for the Dataverse / Dynamics 365 Web API.

    Every operation sends exactly one HTTP request and returns a
    :class:`concurrent.futures.Future` that resolves once: with the operation's value,
    or with the structured error that ended it
    (:class:`~xrm_webapi.core.errors.HttpError`,
    :class:`~xrm_webapi.core.errors.MalformedResponseError`,
    :class:`~xrm_webapi.core.errors.TransportError` or
    :class:`~xrm_webapi.core.errors.ValidationError`). Nothing is retried.

    Operations are organized under namespaces:

    - ``client.records``: retrieve, retrieve_multiple, create, update, update_property,
      delete, delete_property
    - ``client.actions``: bound_action, unbound_action, bound_function, unbound_function

    **Context Manager Support (Recommended)**:
        Using the client as a context manager pools connections through a shared
        ``requests.Session`` and shuts the worker pool down on exit::

            with WebApiClient(base_url, credential) as client:
                location = client.records.create("accounts", {"name": "Contoso"}).result()

    :param base_url: Organization URL such as ``"https://org.crm.dynamics.com"``, or a
        zero-argument callable returning it. A callable is invoked once per operation.
        Trailing slashes are removed.
    :type base_url: str or Callable[[], str]
    :param credential: Optional Azure Identity credential. When given, requests carry a bearer
        token for ``{base_url}/.default``. When omitted, authentication must already be
        present on the transport (for example cookies on a caller-provided session).
    :type credential: ~azure.core.credentials.TokenCredential or None
    :param config: Optional configuration. Defaults to :meth:`WebApiConfig.from_env`.
    :type config: ~xrm_webapi.core.config.WebApiConfig or None
    :param session: Optional caller-owned ``requests.Session``. It is used for every request
        and is not closed by the client.
    :type session: requests.Session or None

    :raises ValueError: If ``base_url`` is an empty string.

    Example::

        from azure.identity import InteractiveBrowserCredential
        from xrm_webapi.client import WebApiClient

        with WebApiClient("https://org.crm.dynamics.com", InteractiveBrowserCredential()) as client:
            me = client.actions.unbound_function("WhoAmI").result()
            page = client.records.retrieve_multiple(
                "accounts", "$select=name", include_formatted_values=True, max_page_size=50
            ).result()
    """

    def __init__(
        self,
        base_url: BaseUrl,
        credential: Optional[TokenCredential] = None,
        config: Optional[WebApiConfig] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.auth: Optional[_AuthManager] = _AuthManager(credential) if credential is not None else None
        if isinstance(base_url, str):
            base_url = base_url.rstrip("/")
            if not base_url:
                raise ValueError("base_url is required.")
        self._base_url = base_url
        self._config = config or WebApiConfig.from_env()
        self._odata: Optional[_ODataClient] = None
        self._session: Optional[requests.Session] = session
        self._owns_session: bool = False
        self._executor: Optional[ThreadPoolExecutor] = None
        self._lock = threading.RLock()

        # Initialize operation namespaces
        self.records = RecordOperations(self)
        self.actions = ActionOperations(self)

    def __enter__(self) -> "WebApiClient":
        """
        Enter the context manager.

        Creates an HTTP session for connection pooling unless one was supplied.

        :return: The client instance.
        :rtype: WebApiClient
        """
        if self._session is None:
            self._session = requests.Session()
            self._owns_session = True
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Exit the context manager; see :meth:`close`. Exceptions are not suppressed."""
        self.close()

    def close(self) -> None:
        """
        Release resources.

        Waits for submitted operations to finish, then shuts down the worker pool and
        closes the HTTP session if the client created it. Safe to call multiple times.
        """
        with self._lock:
            executor, self._executor = self._executor, None
            odata, self._odata = self._odata, None
            session = self._session if self._owns_session else None
            if session is not None:
                self._session = None
                self._owns_session = False
        if executor is not None:
            executor.shutdown(wait=True)
        if odata is not None and session is not None:
            odata.close()
        if session is not None:
            session.close()

    def _get_odata(self) -> _ODataClient:
        """
        Get or create the internal OData client instance.

        :return: The lazily-initialized low-level client used to perform HTTP requests.
        :rtype: ~xrm_webapi.data._odata._ODataClient
        """
        with self._lock:
            if self._odata is None:
                self._odata = _ODataClient(
                    self.auth,
                    self._base_url,
                    self._config,
                    session=self._session,
                )
            return self._odata

    def _submit(
        self,
        descriptor: OperationDescriptor,
        then: Optional[Callable[[Any], T]] = None,
    ) -> "Future[Any]":
        """
        Build the request for ``descriptor`` now and send it on the worker pool.

        The request is fixed before this returns, so later changes to the caller's
        payload objects do not reach the wire. Build failures are delivered through
        the returned future.

        :param then: Optional function applied to the resolved value on the worker.
        """
        with self._lock:
            od = self._get_odata()
            try:
                prepared = od._prepare(descriptor)
            except XrmWebApiError as exc:
                failed: "Future[Any]" = Future()
                failed.set_exception(exc)
                return failed
            if self._executor is None:
                self._executor = ThreadPoolExecutor(
                    max_workers=self._config.max_workers,
                    thread_name_prefix="xrm-webapi",
                )
            kind = descriptor.kind

            def run() -> Any:
                value = od._send(kind, prepared)
                return then(value) if then is not None else value

            return self._executor.submit(run)

    def execute(self, descriptor: OperationDescriptor) -> "Future[Any]":
        """
        Submit a hand-built operation.

        :param descriptor: Operation to run.
        :type descriptor: ~xrm_webapi.models.operation.OperationDescriptor
        :return: Future resolving to the operation's value.
        :rtype: concurrent.futures.Future

        Example::

            from xrm_webapi.models.operation import OperationDescriptor, OperationKind

            fut = client.execute(
                OperationDescriptor(OperationKind.RETRIEVE, entity_set="accounts", id=account_id)
            )
        """
        return self._submit(descriptor)


__all__ = ["WebApiClient"]
