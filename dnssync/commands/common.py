"""Helpers shared by the CLI commands."""

import typer
from rich.console import Console

from dnssync.config import Settings, load_settings, require_settings, split_domains
from dnssync.domains import classify
from dnssync.errors import ConfigMissingError, DomainParseError
from dnssync.providers.address import AddressProviderChain
from dnssync.providers.dns import CloudflareProvider

console = Console()


def get_settings(require_domains: bool = True) -> Settings:
    """Load settings, exiting if a required variable is missing."""
    settings = load_settings()

    try:
        if require_domains:
            require_settings(settings)
        elif not settings.cloudflare_api_token:
            raise ConfigMissingError("CLOUDFLARE_API_TOKEN")
    except ConfigMissingError as e:
        console.print(f"[red]✗[/red] {e.variable} is not set")
        console.print(f"  Set {e.variable} in the environment or in .env")
        raise typer.Exit(1)

    return settings


def get_dns_provider(settings: Settings) -> CloudflareProvider:
    """Get the Cloudflare provider for the configured token."""
    return CloudflareProvider(
        token=settings.cloudflare_api_token,
        timeout=settings.request_timeout,
    )


def get_address_chain(settings: Settings) -> AddressProviderChain:
    """Get the public IP services in priority order."""
    return AddressProviderChain.from_urls(
        settings.ip_service_urls, timeout=settings.request_timeout
    )


def get_monitored_domains(settings: Settings) -> list[str]:
    """Build the monitored domain list, dropping empty and invalid entries."""
    entries, empty = split_domains(settings.monitored_domains or "")

    if empty:
        console.print(
            f"[yellow]![/yellow] Skipping {empty} empty domain "
            f"{'entry' if empty == 1 else 'entries'} in MONITORED_DOMAINS"
        )

    domains = []
    for domain in entries:
        try:
            classify(domain)
        except DomainParseError as e:
            console.print(f"[red]✗[/red] Invalid domain: {domain} ({e.reason})")
            continue
        domains.append(domain)
        console.print(f"[green]✓[/green] Monitoring domain: [bold]{domain}[/bold]")

    return domains
