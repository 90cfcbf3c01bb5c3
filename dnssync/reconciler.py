"""Polling loop that keeps monitored domains pointed at the public IP."""

import threading
from dataclasses import dataclass, field
from typing import Any

from rich.console import Console
from rich.markup import escape

from dnssync.config import format_interval
from dnssync.errors import AllProvidersFailedError, AuthError
from dnssync.providers.address.base import AddressProvider, AddressProviderChain
from dnssync.records import RecordResolver, RecordUpdater

console = Console()


@dataclass(frozen=True)
class SyncState:
    """State carried from one cycle to the next."""

    public_ip: str = ""  # Last address the domains were reconciled against


@dataclass
class CycleReport:
    """Outcome of a single reconciliation cycle."""

    public_ip: str | None = None
    changed: bool = False
    updated: list[str] = field(default_factory=list)
    unchanged: list[str] = field(default_factory=list)
    failed: dict[str, str] = field(default_factory=dict)
    error: str | None = None


class Reconciler:
    """Compares monitored records against the public IP and fixes drift."""

    def __init__(
        self,
        domains: list[str],
        addresses: AddressProviderChain,
        resolver: RecordResolver,
        updater: RecordUpdater,
        verbose: bool = False,
    ):
        self.domains = list(domains)
        self.addresses = addresses
        self.resolver = resolver
        self.updater = updater
        self.verbose = verbose

    def _print_details(self) -> None:
        if self.verbose:
            console.print_exception()

    def _report_error(self, e: Exception, context: str) -> None:
        if isinstance(e, AuthError):
            console.print(
                "[red]✗[/red] Authentication error: please check your "
                "CLOUDFLARE_API_TOKEN"
            )
        console.print(f"[red]✗[/red] {escape(context)}: {escape(str(e))}")
        self._print_details()

    def _on_address_error(self, provider: AddressProvider, e: Exception) -> None:
        console.print(
            f"[yellow]![/yellow] Failed to fetch IP address from {provider.name}, "
            "trying next service"
        )
        self._print_details()

    def fetch_public_ip(self) -> str:
        """Resolve the public IP through the provider chain.

        Raises:
            AllProvidersFailedError: If every service failed
        """
        address = self.addresses.resolve(on_error=self._on_address_error)
        console.print(f"[green]✓[/green] Public IP address: [cyan]{address}[/cyan]")
        return address

    def _sync_record(
        self, zone_id: str, record: dict[str, Any], public_ip: str, report: CycleReport
    ) -> None:
        name = record.get("name", record.get("id"))
        current = record.get("content")

        if current == public_ip:
            console.print(f"  [dim]●[/dim] {name} already points to {public_ip}")
            report.unchanged.append(name)
            return

        console.print(f"  Updating {name}: {current} → {public_ip}")
        self.updater.update(zone_id, record, public_ip)
        console.print(f"  [green]✓[/green] {name} updated")
        report.updated.append(name)

    def sync_domain(self, domain: str, public_ip: str, report: CycleReport) -> None:
        """Reconcile one domain; failures are reported, never raised."""
        console.print(f"[bold]Processing {domain}[/bold]")

        try:
            result = self.resolver.resolve(domain)
        except Exception as e:
            self._report_error(e, f"Error fetching Cloudflare record for {domain}")
            report.failed[domain] = str(e)
            return

        if result.is_bulk:
            console.print(
                f"  [magenta]{domain} has no DNS record of its own, "
                f"checking all {len(result.records)} A records in its zone[/magenta]"
            )

        errors = []
        for record in result.targets:
            try:
                self._sync_record(result.zone_id, record, public_ip, report)
            except Exception as e:
                self._report_error(
                    e, f"Error updating Cloudflare record {record.get('name')}"
                )
                errors.append(f"{record.get('name')}: {e}")

        if errors:
            report.failed[domain] = "; ".join(errors)

    def run_cycle(self, state: SyncState) -> tuple[SyncState, CycleReport]:
        """Run one reconciliation cycle.

        Args:
            state: State from the previous cycle

        Returns:
            The state for the next cycle and a report of what happened
        """
        report = CycleReport()

        try:
            public_ip = self.fetch_public_ip()
        except AllProvidersFailedError as e:
            self._report_error(e, "Could not determine public IP")
            report.error = str(e)
            return state, report

        report.public_ip = public_ip
        if public_ip == state.public_ip:
            console.print("[green]✓[/green] Public IP has not changed, no update required")
            return state, report

        report.changed = True
        for domain in self.domains:
            self.sync_domain(domain, public_ip, report)

        if report.failed:
            console.print(
                f"[yellow]![/yellow] Finished with errors for: {', '.join(report.failed)}"
            )
        else:
            console.print("[green]✓[/green] All domains verified")

        return SyncState(public_ip=public_ip), report

    def run_forever(
        self,
        interval: int,
        stop_event: threading.Event | None = None,
        state: SyncState | None = None,
    ) -> SyncState:
        """Run cycles every ``interval`` seconds until ``stop_event`` is set."""
        stop_event = stop_event or threading.Event()
        state = state or SyncState()

        while not stop_event.is_set():
            try:
                state, _ = self.run_cycle(state)
            except Exception as e:
                self._report_error(e, "Unexpected error during sync")

            console.print(f"[dim]Next check in {format_interval(interval)}[/dim]")
            stop_event.wait(interval)

        return state
