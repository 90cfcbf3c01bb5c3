"""Public IP command."""

import typer
from rich.console import Console

from dnssync.commands.common import get_address_chain
from dnssync.config import load_settings
from dnssync.errors import AllProvidersFailedError

console = Console()


def show() -> None:
    """Show the current public IP address."""
    chain = get_address_chain(load_settings())

    def on_error(provider, e) -> None:
        console.print(f"[yellow]![/yellow] {provider.name}: {e}")

    try:
        address = chain.resolve(on_error=on_error)
    except AllProvidersFailedError as e:
        console.print(f"[red]✗[/red] {e}")
        raise typer.Exit(1)

    console.print(address)
