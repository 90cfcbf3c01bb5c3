"""Record inspection commands."""

import typer
from rich.console import Console
from rich.table import Table

from dnssync.commands.common import get_dns_provider, get_settings
from dnssync.errors import AuthError, DNSSyncError
from dnssync.records import RecordResolver

app = typer.Typer()
console = Console()


@app.command()
def show(domain: str = typer.Argument(..., help="Domain to resolve, e.g. *.example.com")) -> None:
    """Show the DNS record(s) a domain resolves to."""
    settings = get_settings(require_domains=False)
    resolver = RecordResolver(get_dns_provider(settings))

    try:
        result = resolver.resolve(domain.strip())
    except AuthError:
        console.print("[red]✗[/red] Authentication error: please check your CLOUDFLARE_API_TOKEN")
        raise typer.Exit(1)
    except DNSSyncError as e:
        console.print(f"[red]✗[/red] {e}")
        raise typer.Exit(1)

    console.print(f"[bold]{domain}[/bold] ({result.match} match, zone {result.zone_id})")

    table = Table()
    table.add_column("Name")
    table.add_column("Type")
    table.add_column("Content")
    table.add_column("TTL")
    table.add_column("Proxied")

    for record in result.targets:
        table.add_row(
            record.get("name", "-"),
            record.get("type", "-"),
            record.get("content", "-"),
            str(record.get("ttl", "-")),
            str(record.get("proxied", "-")),
        )

    console.print(table)
