# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""Unit tests for WebApiClient context manager support."""

import unittest
from unittest.mock import MagicMock

import requests
from azure.core.credentials import TokenCredential

from xrm_webapi.client import WebApiClient
from tests.unit._helpers import TestableClient


class TestContextManager(unittest.TestCase):
    """Test context manager support on WebApiClient."""

    def setUp(self):
        self.mock_credential = MagicMock(spec=TokenCredential)
        self.base_url = "https://example.crm.dynamics.com"

    def test_enter_creates_session(self):
        client = WebApiClient(self.base_url, self.mock_credential)
        self.assertIsNone(client._session)

        result = client.__enter__()

        self.assertIsInstance(client._session, requests.Session)
        self.assertTrue(client._owns_session)
        self.assertIs(result, client)
        client.close()

    def test_exit_closes_session(self):
        client = WebApiClient(self.base_url, self.mock_credential)
        client.__enter__()

        mock_session = MagicMock(spec=requests.Session)
        client._session = mock_session
        client._owns_session = True

        client.__exit__(None, None, None)

        mock_session.close.assert_called_once()
        self.assertIsNone(client._session)
        self.assertFalse(client._owns_session)

    def test_context_manager_protocol(self):
        with WebApiClient(self.base_url, self.mock_credential) as client:
            self.assertIsInstance(client, WebApiClient)
            self.assertIsInstance(client._session, requests.Session)

        self.assertIsNone(client._session)

    def test_session_passed_to_odata_client(self):
        with WebApiClient(self.base_url, self.mock_credential) as client:
            od = client._get_odata()
            self.assertIs(od._http._session, client._session)

    def test_caller_session_not_closed(self):
        session = MagicMock(spec=requests.Session)
        with WebApiClient(self.base_url, session=session) as client:
            self.assertIs(client._session, session)
            self.assertFalse(client._owns_session)
            client._get_odata()
        session.close.assert_not_called()

    def test_close_shuts_down_executor(self):
        client = WebApiClient(self.base_url)
        client._odata = TestableClient([(204, {}, None)])
        client.records.delete("accounts", "00000000-0000-0000-0000-000000000001").result(timeout=5)
        self.assertIsNotNone(client._executor)

        client.close()

        self.assertIsNone(client._executor)
        self.assertIsNone(client._odata)

    def test_close_is_idempotent(self):
        client = WebApiClient(self.base_url)
        client.close()
        client.close()

    def test_exception_in_context_not_suppressed(self):
        with self.assertRaises(RuntimeError):
            with WebApiClient(self.base_url):
                raise RuntimeError("boom")

    def test_non_credential_rejected(self):
        with self.assertRaises(TypeError):
            WebApiClient(self.base_url, credential="token")
