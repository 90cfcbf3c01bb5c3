"""Sync command: keep monitored domains pointed at the public IP."""

import signal
import threading

import typer
from rich.console import Console

from dnssync.commands.common import (
    get_address_chain,
    get_dns_provider,
    get_monitored_domains,
    get_settings,
)
from dnssync.config import format_interval
from dnssync.reconciler import Reconciler, SyncState
from dnssync.records import RecordResolver, RecordUpdater

console = Console()


def _install_signal_handlers(stop_event: threading.Event) -> None:
    def handler(signum, frame) -> None:
        console.print(f"[yellow]![/yellow] Received signal {signum}, shutting down")
        stop_event.set()

    signal.signal(signal.SIGINT, handler)
    signal.signal(signal.SIGTERM, handler)


def run(
    once: bool = typer.Option(False, "--once", help="Run a single check and exit"),
    interval: int | None = typer.Option(
        None, "--interval", "-i", min=1, help="Seconds between checks (overrides CHECK_INTERVAL)"
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Print full error details (same as DEBUG=true)"
    ),
) -> None:
    """Check the public IP and update DNS records whenever it changes."""
    settings = get_settings()
    domains = get_monitored_domains(settings)
    if not domains:
        console.print("[red]✗[/red] No valid domains to monitor")
        raise typer.Exit(1)

    provider = get_dns_provider(settings)
    reconciler = Reconciler(
        domains=domains,
        addresses=get_address_chain(settings),
        resolver=RecordResolver(provider),
        updater=RecordUpdater(provider),
        verbose=verbose or settings.debug,
    )

    if once:
        _, report = reconciler.run_cycle(SyncState())
        if report.error or report.failed:
            raise typer.Exit(1)
        return

    check_interval = interval or settings.check_interval
    console.print(f"Checking every {format_interval(check_interval)}")

    stop_event = threading.Event()
    _install_signal_handlers(stop_event)
    reconciler.run_forever(check_interval, stop_event=stop_event)
