"""CLI entry point for dnssync."""

import typer
from rich.console import Console

from dnssync import __version__
from dnssync.commands import ip, records, sync

app = typer.Typer(
    name="dnssync",
    help="Keep Cloudflare A records in sync with this machine's public IP.",
    no_args_is_help=True,
)
console = Console()

app.add_typer(records.app, name="records", help="Inspect DNS records")
app.command(name="run")(sync.run)
app.command(name="ip")(ip.show)


@app.command()
def version() -> None:
    """Show the dnssync version."""
    console.print(f"dnssync v{__version__}")


@app.callback()
def main() -> None:
    """dnssync - Cloudflare DNS auto sync."""
    pass


if __name__ == "__main__":
    app()
