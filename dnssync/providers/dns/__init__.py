"""DNS provider implementations."""

from dnssync.providers.dns.base import DNSProvider
from dnssync.providers.dns.cloudflare import CloudflareProvider

__all__ = ["CloudflareProvider", "DNSProvider"]
