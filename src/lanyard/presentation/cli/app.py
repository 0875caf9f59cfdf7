"""Lanyard CLI application using Typer.

This module provides command-line utilities for the Lanyard backend:
running one enrichment against the configured services, checking which
generation model the resolver would fall back to, and serving the API.
"""

import asyncio
from typing import Optional

import typer
import uvicorn
from rich.console import Console
from rich.table import Table

from lanyard.domain.enrichment import (
    EnrichmentRequest,
    GenerationProviderError,
    NoCapableModelFoundError,
)
from lanyard.domain.shared import DomainException
from lanyard.presentation.api.dependencies import (
    get_enrichment_service,
    get_generation_provider,
    get_model_cache,
    get_model_resolver,
    get_search_provider,
)
from lanyard_config.settings import get_settings

app = typer.Typer(
    name="lanyard",
    help="Lanyard - attendee identity resolution and profile enrichment CLI",
    no_args_is_help=True,
)
console = Console()


@app.command("enrich")
def enrich(
    name: str = typer.Argument(..., help="Full name of the person"),
    job_title: Optional[str] = typer.Option(None, "--job-title"),
    company: Optional[str] = typer.Option(None, "--company"),
    linkedin_url: Optional[str] = typer.Option(None, "--linkedin-url"),
    about: Optional[str] = typer.Option(None, "--about"),
) -> None:
    """Run one enrichment against the configured search and generation services."""
    generation = get_generation_provider()
    resolver = get_model_resolver(generation, get_model_cache())
    service = get_enrichment_service(get_search_provider(), generation, resolver)
    request = EnrichmentRequest(
        name=name,
        job_title=job_title,
        company=company,
        linkedin_url=linkedin_url,
        about=about,
    )

    try:
        outcome = asyncio.run(service.enrich(request))
    except DomainException as e:
        console.print(f"[red]Error:[/red] {e.message} ({e.code.value})")
        raise typer.Exit(code=1) from e

    console.print(f"\n[bold green]{request.name}[/bold green]")
    for bullet in outcome.result.summary:
        console.print(f"  • {bullet}")
    console.print(
        f"\n[cyan]Tags:[/cyan] {', '.join(outcome.result.industry_tags)}",
    )

    table = Table(show_header=False, box=None)
    table.add_row("Model", outcome.model_used)
    table.add_row("Fallback model", "yes" if outcome.fallback_model_used else "no")
    table.add_row("Recovered by", outcome.recovered_by.value)
    table.add_row("Sources found", str(outcome.result.sources_found))
    if outcome.search_error:
        table.add_row("Search error", outcome.search_error)
    console.print(table)


@app.command("models")
def models() -> None:
    """Show the generation model the resolver would fall back to."""
    settings = get_settings()
    generation = get_generation_provider()
    if not generation.is_configured:
        console.print("[red]GEMINI_API_KEY is not set[/red]")
        raise typer.Exit(code=1)

    resolver = get_model_resolver(generation, get_model_cache())
    console.print(f"Preferred model: [cyan]{settings.gemini_model}[/cyan]")
    try:
        fallback = asyncio.run(resolver.resolve_fallback_model())
    except (GenerationProviderError, NoCapableModelFoundError) as e:
        console.print(f"[red]Could not resolve a fallback model:[/red] {e}")
        raise typer.Exit(code=1) from e

    console.print(f"Fallback model:  [green]{fallback}[/green]")


@app.command("serve")
def serve(
    host: Optional[str] = typer.Option(None, help="Bind address"),
    port: Optional[int] = typer.Option(None, help="Bind port"),
    reload: bool = typer.Option(False, help="Reload on code changes"),
) -> None:
    """Run the API with uvicorn."""
    settings = get_settings()
    uvicorn.run(
        "lanyard.presentation.api.app:app",
        host=host or settings.api_host,
        port=port or settings.api_port,
        reload=reload,
    )


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()
