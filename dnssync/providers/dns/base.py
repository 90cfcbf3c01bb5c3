"""Abstract base class for DNS providers."""

from abc import ABC, abstractmethod
from typing import Any


class DNSProvider(ABC):
    """Abstract DNS provider interface.

    Records are plain dictionaries exactly as the provider returns them, so
    that provider-managed fields survive a replace untouched.
    """

    @abstractmethod
    def get_zone_id(self, root_domain: str) -> str | None:
        """Look up the zone for a root domain.

        Args:
            root_domain: The registrable domain (e.g. "example.co.uk")

        Returns:
            The provider's opaque zone ID, or None if there is no such zone
        """
        pass

    @abstractmethod
    def list_records(self, zone_id: str) -> list[dict[str, Any]]:
        """List every DNS record in a zone, in provider order.

        Args:
            zone_id: The zone ID returned by get_zone_id()

        Returns:
            List of record dictionaries with at least: id, type, name, content
        """
        pass

    @abstractmethod
    def replace_record(self, zone_id: str, record: dict[str, Any]) -> dict[str, Any]:
        """Replace a record with the given full body, keyed by record["id"].

        Args:
            zone_id: The zone the record belongs to
            record: The complete record to store

        Returns:
            The record as stored by the provider
        """
        pass
