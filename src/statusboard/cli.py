"""Statusboard CLI entry point."""

from __future__ import annotations

import json
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

app = typer.Typer(
    name="statusboard",
    help="Statusboard: group PagerDuty services into a status dashboard",
    no_args_is_help=True,
)
console = Console()

_STATUS_STYLES = {
    "critical": "red",
    "warning": "yellow",
    "active": "green",
    "maintenance": "blue",
    "disabled": "dim",
}


@app.command()
def groups(
    records: Path = typer.Argument(help="JSON file of raw service records"),
    subdomain: str | None = typer.Option(None, "--subdomain", "-s", help="PagerDuty subdomain for links"),
    as_json: bool = typer.Option(False, "--json", help="Print groups as JSON"),
    path: Path | None = typer.Option(None, "--path", "-p", help="Path to .statusboard.yaml"),
) -> None:
    """Build dashboard groups from a file of service records."""
    from statusboard.config.loader import load_config
    from statusboard.config.models import StatusboardConfig
    from statusboard.dashboard.pipeline import DashboardPipeline
    from statusboard.dashboard.records import load_records

    try:
        config = load_config(path=path)
    except FileNotFoundError as exc:
        if path is not None or subdomain is None:
            console.print(f"[red]{exc}[/red]")
            raise typer.Exit(1)
        config = StatusboardConfig()
    except ValueError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(1)

    try:
        raw_records = load_records(records)
        result = DashboardPipeline(config, subdomain=subdomain).run(raw_records)
    except (FileNotFoundError, ValueError) as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(1)

    if as_json:
        typer.echo(json.dumps([g.to_dict() for g in result], indent=2))
        return

    table = Table(title="Dashboard Groups")
    table.add_column("Group", style="bold")
    table.add_column("Status")
    table.add_column("Failures", justify="right")
    table.add_column("Services")
    table.add_column("Depends on")

    for group in result:
        style = _STATUS_STYLES.get(group.status or "", "red")
        members = ", ".join(s.proper_name for s in group.members) or "—"
        deps = ", ".join(d.name for d in group.dependencies) or "—"
        table.add_row(
            group.name,
            f"[{style}]{group.status}[/{style}]",
            str(group.number_failures),
            members,
            deps,
        )

    console.print(table)


@app.command()
def serve(
    host: str = typer.Option("0.0.0.0", help="Bind host"),
    port: int = typer.Option(8000, help="Bind port"),
) -> None:
    """Start the Statusboard API server."""
    import uvicorn

    console.print(f"[bold]Statusboard[/bold] starting on http://{host}:{port}")
    uvicorn.run("statusboard.api.app:create_app", host=host, port=port, reload=False, factory=True)


config_app = typer.Typer(name="config", help="Configuration commands")
app.add_typer(config_app)


@config_app.command("validate")
def config_validate(
    path: Path | None = typer.Option(None, "--path", "-p", help="Path to .statusboard.yaml"),
) -> None:
    """Validate configuration file."""
    import yaml

    from statusboard.config.loader import load_config

    try:
        config = load_config(path=path)
        console.print("[green]✓[/green] YAML parses correctly")
        console.print("[green]✓[/green] Pydantic validation passes")
    except FileNotFoundError as exc:
        console.print(f"[red]✗ {exc}[/red]")
        raise typer.Exit(1)
    except yaml.YAMLError as exc:
        console.print(f"[red]✗ YAML parsing failed: {exc}[/red]")
        raise typer.Exit(1)
    except ValueError as exc:
        console.print(f"[red]✗ {exc}[/red]")
        raise typer.Exit(1)

    subdomain = config.pagerduty.subdomain
    if not subdomain:
        console.print("[red]✗ pagerduty.subdomain is empty[/red]")
        raise typer.Exit(1)
    console.print(f"[green]✓[/green] PagerDuty subdomain '{subdomain}' is valid")
    console.print("\n[green bold]Configuration is valid.[/green bold]")


@config_app.command("show")
def config_show(
    path: Path | None = typer.Option(None, "--path", "-p", help="Path to .statusboard.yaml"),
) -> None:
    """Print resolved configuration."""
    from statusboard.config.loader import load_config

    try:
        config = load_config(path=path)
    except (FileNotFoundError, ValueError) as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(1)

    console.print(f"[bold]Statusboard[/bold] {config.statusboard.name} v{config.statusboard.version}\n")
    console.print("[bold]PagerDuty:[/bold]")
    console.print(f"  Subdomain: {config.pagerduty.subdomain or '(unset)'}")
    console.print(f"  Links: https://{config.pagerduty.subdomain or '<subdomain>'}.pagerduty.com/...\n")
    console.print("[bold]Auth:[/bold]")
    console.print(f"  API key: {'configured' if config.auth.api_key else 'disabled'}")


def main() -> None:
    app()
