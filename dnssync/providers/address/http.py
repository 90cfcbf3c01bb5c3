"""Public IP lookup through JSON web services."""

from collections.abc import Sequence
from typing import Any

import httpx

from dnssync.errors import TransportError
from dnssync.providers.address.base import AddressProvider

# Services disagree on the key holding the address (ifconfig.me uses ip_addr)
ADDRESS_FIELDS = ("ip", "address", "query", "ip_addr")


class HTTPAddressProvider(AddressProvider):
    """Address provider backed by a JSON HTTP endpoint."""

    def __init__(
        self,
        url: str,
        fields: Sequence[str] = ADDRESS_FIELDS,
        timeout: float = 5.0,
    ):
        """Initialize the provider.

        Args:
            url: Service URL returning a JSON object
            fields: Keys that may hold the address, checked in order
            timeout: Request timeout in seconds
        """
        self.url = url
        self.fields = tuple(fields)
        self.timeout = timeout

    @property
    def name(self) -> str:
        return self.url

    def _extract(self, data: Any) -> str | None:
        if not isinstance(data, dict):
            return None
        for field in self.fields:
            value = data.get(field)
            if isinstance(value, str) and value.strip():
                return value.strip()
        return None

    def get_address(self) -> str | None:
        try:
            response = httpx.get(
                self.url,
                headers={"Accept": "application/json"},
                timeout=self.timeout,
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise TransportError(
                f"{self.url} returned HTTP {e.response.status_code}",
                status_code=e.response.status_code,
            ) from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise TransportError(f"Request to {self.url} failed: {e}") from e

        try:
            data = response.json()
        except ValueError as e:
            raise TransportError(f"{self.url} did not return JSON") from e

        return self._extract(data)
