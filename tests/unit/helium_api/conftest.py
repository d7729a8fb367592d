"""Shared fixtures for helium_api tests."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest

from helium_api.transactions import TransactionLister
from helium_api.transport import ApiResponse


@pytest.fixture
def mock_transport():
    transport = MagicMock()
    transport.get = AsyncMock(return_value=ApiResponse(data=[]))
    transport.post = AsyncMock(return_value=ApiResponse(data={"hash": "txn hash"}))
    return transport


@pytest.fixture
def lister(mock_transport):
    return TransactionLister(mock_transport)
