"""
Ranch Manager CLI.

Command-line interface for database setup, sample data and running the
server.
"""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from ranch_shared.config.settings import settings
from ranch_shared.infrastructure.providers import DatabaseConfig, DatabaseProvider

app = typer.Typer(
    name="ranch-manager",
    help="Ranch Manager CLI",
    add_completion=False,
)
console = Console()


# =============================================================================
# Database Commands
# =============================================================================

@app.command()
def init_db():
    """Create missing tables and the document upload directory."""
    from ranch_api.core.lifespan import init_database

    config = DatabaseConfig.from_settings(settings)
    console.print(f"[blue]Initializing {config.type} database: {config.masked_url()}[/blue]")

    try:
        init_database()
        console.print("[green]✓ Tables created/verified[/green]")
        Path(settings.upload_path).mkdir(parents=True, exist_ok=True)
        console.print(f"[green]✓ Upload directory: {settings.upload_path}[/green]")
    except Exception as e:
        console.print(f"[red]✗ Database initialization failed: {e}[/red]")
        raise typer.Exit(1)
    finally:
        DatabaseProvider.reset()


@app.command()
def seed(
    user_id: str = typer.Option(..., "--user-id", "-u", help="Owner of the sample records"),
    force: bool = typer.Option(False, "--force", "-f", help="Seed even if the user has data"),
):
    """Seed sample livestock, finance and operations data for one user."""
    from ranch_api.core.lifespan import init_database
    from ranch_api.seed import has_data, seed as seed_user

    if settings.is_production and not force:
        console.print("[red]Cannot seed production without --force[/red]")
        raise typer.Exit(1)

    try:
        adapter = init_database()
        with adapter.transaction() as db:
            if has_data(db, user_id) and not force:
                console.print("[yellow]User already has data, skipping (use --force)[/yellow]")
                return
            counts = seed_user(db, user_id)
    except Exception as e:
        console.print(f"[red]✗ Seeding failed, nothing was written: {e}[/red]")
        raise typer.Exit(1)
    finally:
        DatabaseProvider.reset()

    table = Table(title="Seeded records")
    table.add_column("Entity", style="cyan")
    table.add_column("Rows", style="green", justify="right")
    for entity, count in counts.items():
        table.add_row(entity, str(count))
    console.print(table)


# =============================================================================
# Configuration Commands
# =============================================================================

@app.command()
def check_config():
    """Show the effective configuration and production readiness."""
    config = DatabaseConfig.from_settings(settings)

    table = Table(title="Configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")

    table.add_row("Environment", settings.environment)
    table.add_row("Debug", str(settings.debug))
    table.add_row("Database type", config.type)
    table.add_row("Database URL", config.masked_url())
    table.add_row("Port", str(settings.port))
    table.add_row("Upload path", settings.upload_path)
    table.add_row("Rate limit", settings.rate_limit if settings.rate_limit_enabled else "disabled")
    table.add_row("Allowed origins", settings.allowed_origins or "(development defaults)")
    console.print(table)

    errors = settings.validate_production_secrets()
    if errors:
        for error in errors:
            console.print(f"[red]✗ {error}[/red]")
        raise typer.Exit(1)
    console.print("[green]✓ Configuration OK[/green]")


@app.command()
def token(
    user_id: str = typer.Argument(..., help="Subject claim of the token"),
    email: Optional[str] = typer.Option(None, help="Email claim"),
    ttl: int = typer.Option(3600, help="Lifetime in seconds"),
):
    """Mint a development bearer token signed with the local secret."""
    from ranch_shared.security.auth import sign_jwt

    if settings.is_production:
        console.print("[red]Development tokens are disabled in production[/red]")
        raise typer.Exit(1)

    payload = {"sub": user_id}
    if email:
        payload["email"] = email
    typer.echo(sign_jwt(payload, ttl_seconds=ttl))


# =============================================================================
# Server
# =============================================================================

@app.command()
def serve(
    host: str = typer.Option("0.0.0.0", help="Bind address"),
    port: Optional[int] = typer.Option(None, help="Port (defaults to PORT setting)"),
    reload: bool = typer.Option(False, "--reload", help="Auto-reload on code changes"),
):
    """Validate the database configuration, then run the API server."""
    import uvicorn

    config = DatabaseConfig.from_settings(settings)
    try:
        DatabaseProvider.initialize(config).ping()
    except Exception as e:
        console.print(f"[red]✗ Database unavailable ({config.type}): {e}[/red]")
        raise typer.Exit(1)
    finally:
        DatabaseProvider.reset()

    port = port or settings.port
    console.print(f"[green]Starting Ranch Manager API on {host}:{port}[/green]")
    uvicorn.run("ranch_api.main:app", host=host, port=port, reload=reload)


if __name__ == "__main__":
    app()
