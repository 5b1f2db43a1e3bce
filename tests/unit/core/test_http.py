# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

from unittest.mock import MagicMock, Mock, patch

import pytest
import requests

from xrm_webapi.core._http import _HttpClient


class TestHttpClient:
    """_HttpClient sends exactly one request per call."""

    @patch("requests.request")
    def test_get_default_timeout(self, mock_request):
        mock_request.return_value = Mock(status_code=200)
        _HttpClient()._request("GET", "https://test.example.com")
        assert mock_request.call_args.kwargs["timeout"] == 10

    @pytest.mark.parametrize("method", ["POST", "delete"])
    @patch("requests.request")
    def test_post_delete_default_timeout(self, mock_request, method):
        _HttpClient()._request(method, "https://test.example.com")
        assert mock_request.call_args.kwargs["timeout"] == 120

    @patch("requests.request")
    def test_configured_timeout_wins(self, mock_request):
        _HttpClient(timeout=3)._request("POST", "https://test.example.com")
        assert mock_request.call_args.kwargs["timeout"] == 3

    @patch("requests.request")
    def test_explicit_timeout_kept(self, mock_request):
        _HttpClient(timeout=3)._request("GET", "https://test.example.com", timeout=1)
        assert mock_request.call_args.kwargs["timeout"] == 1

    @patch("requests.request")
    def test_network_error_is_not_retried(self, mock_request):
        mock_request.side_effect = requests.exceptions.ConnectionError("Network error")
        with pytest.raises(requests.exceptions.ConnectionError):
            _HttpClient()._request("GET", "https://test.example.com")
        assert mock_request.call_count == 1

    @patch("requests.request")
    def test_transient_status_is_returned_not_retried(self, mock_request):
        mock_request.return_value = Mock(status_code=503, headers={})
        r = _HttpClient()._request("GET", "https://test.example.com")
        assert r.status_code == 503
        assert mock_request.call_count == 1

    def test_session_used_when_provided(self):
        session = MagicMock(spec=requests.Session)
        client = _HttpClient(session=session)
        client._request("PATCH", "https://test.example.com", data=b"{}")
        session.request.assert_called_once()
        args, kwargs = session.request.call_args
        assert args == ("PATCH", "https://test.example.com")
        assert kwargs["data"] == b"{}"

    def test_close_closes_session_once(self):
        session = MagicMock(spec=requests.Session)
        client = _HttpClient(session=session)
        client.close()
        client.close()
        session.close.assert_called_once()
