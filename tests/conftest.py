# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Shared pytest fixtures and configuration for Web API client tests.
"""

import pytest

from xrm_webapi.core.config import WebApiConfig


@pytest.fixture
def test_config():
    """Test configuration with safe defaults."""
    return WebApiConfig(http_timeout=5, max_workers=2)


@pytest.fixture
def sample_base_url():
    """Standard test base URL."""
    return "https://org.example.com"


@pytest.fixture
def sample_record():
    """Sample record payload for testing."""
    return {
        "name": "Test Account",
        "telephone1": "555-0100",
        "websiteurl": "https://example.com",
    }


@pytest.fixture
def sample_guid():
    """Sample GUID for testing."""
    return "11111111-2222-3333-4444-555555555555"
