"""Tests for helium_api client."""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from helium_api.client import HeliumClient, HeliumConfig, ensure_http_url
from helium_api.config import ConfigurationError
from helium_api.models.context import Account, Block, Hotspot, Validator
from helium_api.models.transaction import PaymentV1
from helium_api.transactions import ScopedTransactions, TransactionLister
from helium_api.transport import ApiResponse, HttpTransport
from tests.helpers.helium_records import payment_record


class TestHeliumConfig:
    def test_defaults(self):
        config = HeliumConfig()
        assert config.base_url == "https://api.helium.io/v1"
        assert config.request_timeout_seconds == 30
        assert config.connect_timeout_seconds == 10
        assert config.network_max_retries == 3
        assert config.network_backoff_base_seconds == 1.0
        assert config.network_backoff_max_seconds == 30.0
        assert config.trust_env is False

    def test_rejects_non_http_base_url(self):
        with pytest.raises(ConfigurationError):
            HeliumConfig(base_url="ftp://api.helium.io")

    def test_rejects_zero_retries(self):
        with pytest.raises(ConfigurationError):
            HeliumConfig(network_max_retries=0)

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("HELIUM_API_BASE_URL", "https://staging.helium.io/v1")
        monkeypatch.setenv("HELIUM_API_MAX_RETRIES", "5")
        monkeypatch.setenv("HELIUM_API_REQUEST_TIMEOUT_SECONDS", "12.5")
        monkeypatch.setenv("HELIUM_API_TRUST_ENV", "yes")

        config = HeliumConfig.from_env()

        assert config.base_url == "https://staging.helium.io/v1"
        assert config.network_max_retries == 5
        assert config.request_timeout_seconds == 12.5
        assert config.trust_env is True
        assert config.connect_timeout_seconds == 10

    def test_from_env_malformed(self, monkeypatch):
        monkeypatch.setenv("HELIUM_API_MAX_RETRIES", "many")

        with pytest.raises(ConfigurationError):
            HeliumConfig.from_env()


def test_ensure_http_url_missing_netloc():
    with pytest.raises(ConfigurationError):
        ensure_http_url("https://")


class TestHeliumClient:
    def test_init_builds_components(self):
        client = HeliumClient()

        assert isinstance(client.transactions, TransactionLister)
        assert isinstance(client._transport, HttpTransport)
        assert client.config == HeliumConfig()

    def test_context_helpers(self):
        assert HeliumClient.block(12345) == Block(height=12345)
        assert HeliumClient.block("fake-hash") == Block(hash="fake-hash")
        assert HeliumClient.account("a") == Account("a")
        assert HeliumClient.hotspot("h") == Hotspot("h")
        assert HeliumClient.validator("v") == Validator("v")

    @pytest.mark.asyncio
    async def test_activity_lists_through_transport(self):
        transport = MagicMock()
        transport.get = AsyncMock(
            return_value=ApiResponse(data=[payment_record("fake-hash-1", 10000), payment_record("fake-hash-2", 20000)])
        )
        client = HeliumClient(transport=transport)

        scoped = client.activity(client.account("my-address"))
        paginator = await scoped.list(filter_types=["payment_v1"])
        payments = await paginator.take(2)

        assert isinstance(scoped, ScopedTransactions)
        assert all(isinstance(payment, PaymentV1) for payment in payments)
        assert [payment.amount for payment in payments] == [10000, 20000]
        transport.get.assert_awaited_once_with("/accounts/my-address/activity", {"cursor": None, "filter_types": "payment_v1"})

    @pytest.mark.asyncio
    async def test_context_manager_opens_and_closes_session(self):
        client = HeliumClient()

        with patch.object(client._session_manager, "ensure_session", new=AsyncMock()) as ensure, patch.object(
            client._session_manager, "close", new=AsyncMock()
        ) as close:
            async with client as entered:
                assert entered is client
                ensure.assert_awaited_once()
            close.assert_awaited_once()
