"""Tests for public IP address providers."""

from unittest.mock import MagicMock, patch

import httpx
import pytest

from dnssync.errors import AllProvidersFailedError, TransportError
from dnssync.providers.address import AddressProviderChain, HTTPAddressProvider, first_success


def json_response(data) -> MagicMock:
    response = MagicMock(status_code=200)
    response.json.return_value = data
    return response


def status_error(url: str, status_code: int) -> httpx.HTTPStatusError:
    request = httpx.Request("GET", url)
    response = httpx.Response(status_code, request=request)
    return httpx.HTTPStatusError("error", request=request, response=response)


class TestHTTPAddressProvider:
    """Tests for HTTPAddressProvider.get_address()."""

    @pytest.mark.parametrize(
        "data",
        [
            {"ip": "203.0.113.7"},
            {"address": "203.0.113.7"},
            {"query": "203.0.113.7", "status": "success"},
            {"ip_addr": "203.0.113.7"},
        ],
    )
    def test_known_fields(self, data):
        """Test the address is read from any of the known fields."""
        with patch("httpx.get", return_value=json_response(data)):
            provider = HTTPAddressProvider("https://ip.example.net/json")

            assert provider.get_address() == "203.0.113.7"

    def test_field_priority(self):
        """Test "ip" wins over the other fields."""
        data = {"query": "198.51.100.1", "ip": "203.0.113.7"}
        with patch("httpx.get", return_value=json_response(data)):
            assert HTTPAddressProvider("https://ip.example.net").get_address() == "203.0.113.7"

    def test_missing_field(self):
        """Test a response without a known field yields None."""
        with patch("httpx.get", return_value=json_response({"country": "NL"})):
            assert HTTPAddressProvider("https://ip.example.net").get_address() is None

    def test_uses_timeout(self):
        """Test each request is bounded by the configured timeout."""
        with patch("httpx.get", return_value=json_response({"ip": "1.2.3.4"})) as mock_get:
            HTTPAddressProvider("https://ip.example.net", timeout=2.5).get_address()

            assert mock_get.call_args[1]["timeout"] == 2.5

    def test_request_error(self):
        """Test transport failures become TransportError."""
        with patch("httpx.get", side_effect=httpx.RequestError("Connection failed")):
            with pytest.raises(TransportError):
                HTTPAddressProvider("https://ip.example.net").get_address()

    def test_status_error(self):
        """Test HTTP error responses become TransportError."""
        url = "https://ip.example.net"
        response = MagicMock()
        response.raise_for_status.side_effect = status_error(url, 503)

        with patch("httpx.get", return_value=response):
            with pytest.raises(TransportError) as exc_info:
                HTTPAddressProvider(url).get_address()

        assert exc_info.value.status_code == 503

    def test_invalid_json(self):
        """Test a non-JSON body becomes TransportError."""
        response = MagicMock()
        response.json.side_effect = ValueError("not json")

        with patch("httpx.get", return_value=response):
            with pytest.raises(TransportError):
                HTTPAddressProvider("https://ip.example.net").get_address()

    def test_invalid_url(self):
        """Test a malformed service URL becomes TransportError."""
        with patch("httpx.get", side_effect=httpx.InvalidURL("Invalid URL")):
            with pytest.raises(TransportError):
                HTTPAddressProvider("https://bad host").get_address()


class TestFirstSuccess:
    """Tests for the first_success() combinator."""

    def test_first_provider_wins(self, static_provider):
        """Test later providers are not called after a success."""
        first = static_provider("1.1.1.1", name="first")
        second = static_provider("2.2.2.2", name="second")

        assert first_success([first, second]) == "1.1.1.1"
        assert second.calls == 0

    def test_skips_failures(self, static_provider):
        """Test failing and empty providers are skipped, each tried once."""
        down = static_provider(fail=True, name="down")
        empty = static_provider(None, name="empty")
        good = static_provider("3.3.3.3", name="good")
        errors = []

        address = first_success([down, empty, good], on_error=lambda p, e: errors.append(p.name))

        assert address == "3.3.3.3"
        assert errors == ["down", "empty"]
        assert down.calls == 1
        assert empty.calls == 1

    def test_all_fail(self, static_provider):
        """Test an aggregate error lists every failed provider."""
        providers = [
            static_provider(fail=True, name="a"),
            static_provider("", name="b"),
        ]

        with pytest.raises(AllProvidersFailedError) as exc_info:
            first_success(providers)

        assert [name for name, _ in exc_info.value.failures] == ["a", "b"]

    def test_no_providers(self):
        """Test an empty chain fails."""
        with pytest.raises(AllProvidersFailedError):
            first_success([])


class TestAddressProviderChain:
    """Tests for AddressProviderChain."""

    def test_from_urls_keeps_order(self):
        """Test the chain builds HTTP providers in the given order."""
        chain = AddressProviderChain.from_urls(["https://a.test", "https://b.test"], timeout=3)

        assert [p.name for p in chain.providers] == ["https://a.test", "https://b.test"]
        assert all(p.timeout == 3 for p in chain.providers)

    def test_resolve_falls_back(self):
        """Test resolve() falls back to the next URL when one fails."""
        responses = {
            "https://a.test": httpx.ConnectError("refused"),
            "https://b.test": json_response({"ip": "10.0.0.1"}),
        }

        def fake_get(url, **kwargs):
            result = responses[url]
            if isinstance(result, Exception):
                raise result
            return result

        chain = AddressProviderChain.from_urls(["https://a.test", "https://b.test"])
        with patch("httpx.get", side_effect=fake_get) as mock_get:
            assert chain.resolve() == "10.0.0.1"
            assert mock_get.call_count == 2

    def test_resolve_skips_invalid_url(self):
        """Test a malformed URL does not stop the remaining services being tried."""

        def fake_get(url, **kwargs):
            if url == "https://bad host":
                raise httpx.InvalidURL("Invalid non-printable ASCII character in URL")
            return json_response({"ip": "10.0.0.2"})

        chain = AddressProviderChain.from_urls(["https://bad host", "https://good.test"])
        with patch("httpx.get", side_effect=fake_get):
            assert chain.resolve() == "10.0.0.2"
