"""Shared test fixtures for dnssync tests."""

from pathlib import Path
from unittest.mock import MagicMock

import pytest
from typer.testing import CliRunner

from dnssync.errors import TransportError
from dnssync.providers.address.base import AddressProvider, AddressProviderChain
from dnssync.providers.dns.base import DNSProvider

SETTINGS_VARIABLES = [
    "CLOUDFLARE_API_TOKEN",
    "MONITORED_DOMAINS",
    "CHECK_INTERVAL",
    "DEBUG",
    "IP_SERVICES",
    "REQUEST_TIMEOUT",
]


@pytest.fixture(autouse=True)
def clean_env(tmp_path: Path, monkeypatch) -> None:
    """Isolate tests from the real environment and any .env file."""
    for variable in SETTINGS_VARIABLES:
        monkeypatch.delenv(variable, raising=False)
    monkeypatch.chdir(tmp_path)


# ============================================================================
# CLI Fixtures
# ============================================================================


@pytest.fixture
def runner() -> CliRunner:
    """Provide a Typer CLI test runner."""
    return CliRunner()


@pytest.fixture
def configured_env(monkeypatch) -> None:
    """Set the required environment variables."""
    monkeypatch.setenv("CLOUDFLARE_API_TOKEN", "test-token")
    monkeypatch.setenv("MONITORED_DOMAINS", "example.com, *.example.com")


# ============================================================================
# Address Provider Fixtures
# ============================================================================


class StaticAddressProvider(AddressProvider):
    """Address provider returning a fixed answer, or failing."""

    def __init__(self, address: str | None = None, fail: bool = False, name: str = "static"):
        self.address = address
        self.fail = fail
        self._name = name
        self.calls = 0

    @property
    def name(self) -> str:
        return self._name

    def get_address(self) -> str | None:
        self.calls += 1
        if self.fail:
            raise TransportError(f"{self._name} is down")
        return self.address


@pytest.fixture
def static_provider():
    """Build address providers with fixed answers."""
    return StaticAddressProvider


@pytest.fixture
def address_chain():
    """Build an address chain from a single static address."""

    def make(address: str | None = "2.2.2.2", fail: bool = False) -> AddressProviderChain:
        return AddressProviderChain([StaticAddressProvider(address, fail=fail)])

    return make


# ============================================================================
# DNS Provider Fixtures
# ============================================================================


@pytest.fixture
def zone_records() -> list[dict]:
    """Records of the example.com zone, with provider metadata."""
    return [
        {
            "id": "rec-apex",
            "zone_id": "zone-1",
            "name": "example.com",
            "type": "A",
            "content": "1.1.1.1",
            "ttl": 1,
            "proxied": True,
        },
        {
            "id": "rec-wildcard",
            "zone_id": "zone-1",
            "name": "*.example.com",
            "type": "A",
            "content": "1.1.1.1",
            "ttl": 300,
            "proxied": False,
        },
        {
            "id": "rec-mx",
            "zone_id": "zone-1",
            "name": "example.com",
            "type": "MX",
            "content": "mail.example.com",
            "ttl": 3600,
            "priority": 10,
        },
    ]


@pytest.fixture
def mock_provider(zone_records) -> MagicMock:
    """A DNS provider holding the example.com zone."""
    provider = MagicMock(spec=DNSProvider)
    provider.get_zone_id.side_effect = lambda root: "zone-1" if root == "example.com" else None
    provider.list_records.return_value = zone_records
    provider.replace_record.side_effect = lambda zone_id, record: record
    return provider
