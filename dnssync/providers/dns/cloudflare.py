"""Cloudflare DNS provider implementation."""

from typing import Any

import httpx

from dnssync.errors import AuthError, TransportError
from dnssync.providers.dns.base import DNSProvider

AUTH_STATUS_CODES = (401, 403)


class CloudflareProvider(DNSProvider):
    """DNS provider implementation for the Cloudflare API v4."""

    BASE_URL = "https://api.cloudflare.com/client/v4"
    PER_PAGE = 100

    def __init__(self, token: str, timeout: float = 30.0):
        """Initialize Cloudflare provider.

        Args:
            token: Cloudflare API token
            timeout: Timeout in seconds for each API call
        """
        self.token = token
        self.client = httpx.Client(
            base_url=self.BASE_URL,
            headers={
                "Authorization": f"Bearer {token}",
                "Accept": "application/json",
                "Content-Type": "application/json",
            },
            timeout=timeout,
        )

    def _request(
        self,
        method: str,
        path: str,
        params: dict[str, Any] | None = None,
        json: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Send an API request and unwrap the response envelope."""
        try:
            response = self.client.request(method, path, params=params, json=json)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            if status in AUTH_STATUS_CODES:
                raise AuthError(
                    "Authentication error: please check your Cloudflare API token",
                    status_code=status,
                ) from e
            raise TransportError(
                f"Cloudflare API {method} {path} returned HTTP {status}",
                status_code=status,
            ) from e
        except httpx.HTTPError as e:
            raise TransportError(f"Cloudflare API {method} {path} failed: {e}") from e

        try:
            data = response.json()
        except ValueError as e:
            raise TransportError(f"Cloudflare API {method} {path} did not return JSON") from e

        if not isinstance(data, dict):
            raise TransportError(f"Cloudflare API {method} {path} returned an unexpected body")

        if not data.get("success", True):
            messages = "; ".join(
                error.get("message", str(error)) for error in data.get("errors", [])
            )
            raise TransportError(f"Cloudflare API error: {messages or 'unknown error'}")

        return data

    def get_zone_id(self, root_domain: str) -> str | None:
        """Get the zone ID for a root domain."""
        data = self._request("GET", "/zones", params={"name": root_domain})
        zones = data.get("result") or []
        if not zones:
            return None

        zone = zones[0]
        if not isinstance(zone, dict) or not zone.get("id"):
            raise TransportError(f"Cloudflare API returned a zone without id for {root_domain}")
        return zone["id"]

    def list_records(self, zone_id: str) -> list[dict[str, Any]]:
        """List all DNS records in a zone, following pagination."""
        records = []
        page = 1

        while True:
            data = self._request(
                "GET",
                f"/zones/{zone_id}/dns_records",
                params={"match": "all", "per_page": self.PER_PAGE, "page": page},
            )
            records.extend(data.get("result") or [])

            total_pages = (data.get("result_info") or {}).get("total_pages", 1)
            if page >= total_pages:
                break
            page += 1

        return records

    def replace_record(self, zone_id: str, record: dict[str, Any]) -> dict[str, Any]:
        """Replace a DNS record with a full PUT."""
        data = self._request(
            "PUT",
            f"/zones/{zone_id}/dns_records/{record['id']}",
            json=record,
        )
        return data.get("result") or record
