# src/model_catalog/cli.py
"""Command line entry point: inspect the model lists the catalog resolves."""

from __future__ import annotations

import asyncio
import json
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from model_catalog.config.defaults import DEFAULT_LOG_LEVEL
from model_catalog.config.env_vars import EnvVar, get_env
from model_catalog.config.logging import setup_logging
from model_catalog.config.settings import CatalogSettings
from model_catalog.errors import UnknownProviderError
from model_catalog.model_management.adapters import registered_adapters
from model_catalog.model_management.models import ResolveOptions
from model_catalog.model_management.service import ModelService

app = typer.Typer(add_completion=False, help="Resolve LLM provider model lists.")
console = Console()


def _print_models(results: dict[str, list[str]], as_json: bool) -> None:
    if as_json:
        typer.echo(json.dumps(results, indent=2))
        return

    table = Table(title="Resolved models")
    table.add_column("Endpoint", style="cyan")
    table.add_column("Count", justify="right")
    table.add_column("Models")
    for label, models in results.items():
        table.add_row(label, str(len(models)), ", ".join(models))
    console.print(table)


@app.command("list")
def list_models(
    provider: Optional[str] = typer.Argument(
        None, help="Provider name (all endpoints when omitted)"
    ),
    user: Optional[str] = typer.Option(None, "--user", "-u", help="User id"),
    azure: bool = typer.Option(False, "--azure", help="Azure endpoint"),
    plugins: bool = typer.Option(False, "--plugins", help="Plugins endpoint"),
    assistants: bool = typer.Option(False, "--assistants", help="Assistants endpoint"),
    as_json: bool = typer.Option(False, "--json", help="Print JSON"),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Enable debug logging"),
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        help="Set log level (default: MODEL_CATALOG_LOG_LEVEL or WARNING)",
    ),
) -> None:
    """Resolve and print model lists."""
    level = log_level or get_env(EnvVar.LOG_LEVEL) or DEFAULT_LOG_LEVEL
    try:
        setup_logging(level=level, verbose=verbose)
    except ValueError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(code=1)
    service = ModelService(CatalogSettings.from_env())

    if provider is None:
        results = asyncio.run(service.get_models_config(user=user))
    else:
        options = ResolveOptions(
            user=user, azure=azure, plugins=plugins, assistants=assistants
        )
        try:
            models = asyncio.run(service.get_models(provider, options))
        except UnknownProviderError as e:
            console.print(f"[red]Error:[/red] {e}")
            available = ", ".join(a.name for a in registered_adapters())
            console.print(f"[yellow]Available providers:[/yellow] {available}")
            raise typer.Exit(code=1)
        results = {service.resolver(provider).provider: models}

    _print_models(results, as_json)


@app.command("providers")
def list_providers() -> None:
    """Show known providers and how their lists are resolved."""
    table = Table(title="Providers")
    table.add_column("Provider", style="cyan")
    table.add_column("Discovery")
    table.add_column("Base URL")
    table.add_column("Key variable")
    table.add_column("Override variable")
    for adapter in registered_adapters():
        table.add_row(
            adapter.name,
            "yes" if adapter.supports_discovery else "static",
            adapter.canonical_base_url or "-",
            adapter.api_key_env_var.value if adapter.api_key_env_var else "-",
            adapter.override_var.value if adapter.override_var else "-",
        )
    console.print(table)


def main() -> None:
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
