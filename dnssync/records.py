"""Selecting and updating the DNS records that belong to a monitored domain."""

from dataclasses import dataclass
from typing import Any

from dnssync.domains import WILDCARD_LABEL, classify
from dnssync.errors import (
    NoRecordsInZoneError,
    RecordNotFoundError,
    ZoneNotFoundError,
)
from dnssync.providers.dns.base import DNSProvider

RECORD_TYPE = "A"
WILDCARD_PREFIX = f"{WILDCARD_LABEL}."

MATCH_EXACT = "exact"
MATCH_WILDCARD = "wildcard"
MATCH_BULK = "bulk"


@dataclass
class ResolutionResult:
    """The record, or bulk set of records, a domain resolved to."""

    zone_id: str
    record: dict[str, Any] | None = None
    records: list[dict[str, Any]] | None = None
    match: str = MATCH_EXACT

    def __post_init__(self) -> None:
        if (self.record is None) == (self.records is None):
            raise ValueError("Exactly one of record or records must be set")
        if self.records is not None:
            self.match = MATCH_BULK

    @property
    def is_bulk(self) -> bool:
        return self.records is not None

    @property
    def targets(self) -> list[dict[str, Any]]:
        """Records to reconcile, in provider order."""
        if self.records is not None:
            return list(self.records)
        return [self.record]


def _is_a_record(record: dict[str, Any]) -> bool:
    return record.get("type") == RECORD_TYPE


def find_exact(domain: str, records: list[dict[str, Any]]) -> dict[str, Any] | None:
    """Find the A record named exactly like the domain."""
    for record in records:
        if record.get("name") == domain and _is_a_record(record):
            return record
    return None


def find_wildcard(domain: str, records: list[dict[str, Any]]) -> dict[str, Any] | None:
    """Find a "*." A record whose suffix covers the domain."""
    for record in records:
        name = record.get("name") or ""
        if not name.startswith(WILDCARD_PREFIX) or not _is_a_record(record):
            continue
        suffix = name[len(WILDCARD_PREFIX):]
        if domain.endswith(f".{suffix}"):
            return record
    return None


class RecordResolver:
    """Finds the provider records that represent a monitored domain."""

    def __init__(self, provider: DNSProvider):
        self.provider = provider

    def resolve(self, domain: str) -> ResolutionResult:
        """Resolve a domain to its A record(s).

        Selection order, first match wins:
            1. An A record named exactly like the domain
            2. A "*." A record whose suffix covers the domain
            3. Every A record in the zone (bulk update)

        Args:
            domain: The monitored domain, possibly starting with "*."

        Raises:
            DomainParseError: If the domain cannot be parsed
            ZoneNotFoundError: If there is no zone for the root domain
            NoRecordsInZoneError: If the zone is empty
            RecordNotFoundError: If the zone has no A records
            AuthError, TransportError: On provider failures
        """
        parsed = classify(domain)

        zone_id = self.provider.get_zone_id(parsed.root_domain)
        if not zone_id:
            raise ZoneNotFoundError(domain, parsed.root_domain)

        records = self.provider.list_records(zone_id)
        if not records:
            raise NoRecordsInZoneError(domain, parsed.root_domain)

        record = find_exact(domain, records)
        if record is not None:
            return ResolutionResult(zone_id=zone_id, record=record, match=MATCH_EXACT)

        record = find_wildcard(domain, records)
        if record is not None:
            return ResolutionResult(zone_id=zone_id, record=record, match=MATCH_WILDCARD)

        # No dedicated record: keep every A record of the zone current. This
        # also applies to plain names without a record of their own.
        a_records = [r for r in records if _is_a_record(r)]
        if not a_records:
            raise RecordNotFoundError(domain)
        return ResolutionResult(zone_id=zone_id, records=a_records)


class RecordUpdater:
    """Changes the content of a record while keeping every other field."""

    def __init__(self, provider: DNSProvider):
        self.provider = provider

    def update(self, zone_id: str, record: dict[str, Any], content: str) -> dict[str, Any]:
        """Point a record at new content.

        The full record is sent back with only ``content`` replaced, so
        provider-managed settings such as proxied and ttl are preserved.
        The caller's record is left unmodified.

        Raises:
            AuthError, TransportError: If the provider rejects the update
        """
        body = {**record, "content": content}
        return self.provider.replace_record(zone_id, body)
