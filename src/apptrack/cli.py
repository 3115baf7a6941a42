"""Typer CLI entry point for the application tracker."""

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from apptrack.config import load_config

app = typer.Typer(
    name="apptrack",
    help="Apptrack — Job Application Tracker",
    no_args_is_help=True,
)
console = Console()

STATUS_STYLES = {
    "Applied": "blue",
    "Interviewing": "yellow",
    "Offer": "bold green",
    "Rejected": "red",
}


def _get_config():
    return load_config()


def _get_store():
    from apptrack.store import build_store

    return build_store(_get_config().storage)


def _print_values(title: str, values: list[str]):
    if not values:
        console.print(f"[yellow]No {title.lower()} recorded.[/yellow]")
        return
    for value in values:
        console.print(f"  {value}")
    console.print(f"[dim]{len(values)} {title.lower()}[/dim]")


@app.command()
def init():
    """Create the applications sheet and check that it can be read."""
    store = _get_store()
    if store.initialize():
        console.print("[green]Sheet initialized.[/green]")
    else:
        console.print("Sheet already initialized.")
    console.print(f"Candidates: {', '.join(store.list_candidates()) or '—'}")


@app.command()
def candidates():
    """List distinct candidate names."""
    _print_values("Candidates", _get_store().list_candidates())


@app.command()
def companies():
    """List distinct companies."""
    _print_values("Companies", _get_store().list_companies())


@app.command()
def titles():
    """List distinct job titles."""
    _print_values("Job titles", _get_store().list_job_titles())


@app.command(name="list")
def list_cmd(
    candidate: str | None = typer.Option(None, "--candidate", "-c", help="Only this candidate (exact match)"),
):
    """List applications in the order they were saved."""
    applications = _get_store().list_applications(candidate)

    if not applications:
        console.print("[yellow]No applications found.[/yellow]")
        return

    table = Table(title=f"Applications ({len(applications)} results)")
    table.add_column("Candidate", style="bold", max_width=20)
    table.add_column("Company", max_width=20)
    table.add_column("Job Title", max_width=30)
    table.add_column("Applied", width=10)
    table.add_column("Who Applied", max_width=15)
    table.add_column("Status", width=12)

    for a in applications:
        table.add_row(
            a.candidate,
            a.company,
            a.job_title,
            a.date_applied,
            a.who_applied,
            Text(a.status, style=STATUS_STYLES.get(a.status, "")),
        )

    console.print(table)


@app.command()
def add(
    candidate: str = typer.Option(..., "--candidate", "-c", help="Candidate name"),
    company: str | None = typer.Option(None, "--company"),
    job_title: str | None = typer.Option(None, "--job-title", "-t"),
    who_applied: str | None = typer.Option(None, "--who-applied"),
    jd_link: str | None = typer.Option(None, "--jd-link"),
    job_description: str | None = typer.Option(None, "--job-description"),
    date_applied: str | None = typer.Option(None, "--date", help="YYYY-MM-DD (default: today)"),
    resume_summary: str | None = typer.Option(None, "--resume-summary"),
    status: str | None = typer.Option(None, "--status", "-s", help="Default: Applied"),
):
    """Save a new application."""
    from apptrack.models import ApplicationInput

    data = ApplicationInput(
        candidate=candidate,
        company=company,
        job_title=job_title,
        who_applied=who_applied,
        jd_link=jd_link,
        job_description=job_description,
        date_applied=date_applied,
        resume_summary=resume_summary,
        status=status,
    )
    result = _get_store().save_application(data)
    console.print(f"[green]{result.message}[/green]")


@app.command()
def status(
    candidate: str = typer.Argument(help="Candidate name"),
    company: str = typer.Argument(help="Company"),
    job_title: str = typer.Argument(help="Job title"),
    new_status: str = typer.Argument(help="New status, e.g. Interviewing"),
):
    """Update the status of an application."""
    result = _get_store().update_status(candidate, company, job_title, new_status)
    if not result.success:
        console.print(f"[red]{result.error}:[/red] {candidate} @ {company} ({job_title})")
        raise typer.Exit(1)

    console.print(f"[bold]{job_title}[/bold] @ {company} for {candidate}: → [green]{new_status}[/green]")


@app.command()
def serve(
    host: str = typer.Option(None, "--host", "-h", help="Bind host (default: from config)"),
    port: int = typer.Option(None, "--port", "-p", help="Bind port (default: from config)"),
    reload: bool = typer.Option(False, "--reload", help="Enable auto-reload for development"),
):
    """Start the JSON API server."""
    import uvicorn

    config = _get_config()
    bind_host = host or config.web.host
    bind_port = port or config.web.port

    console.print("[bold]Starting application tracker API[/bold]")
    console.print(f"  http://{bind_host}:{bind_port}/exec")
    console.print(f"  Storage: {config.storage.backend}")

    uvicorn.run(
        "apptrack.web.app:create_app",
        host=bind_host,
        port=bind_port,
        reload=reload or config.web.reload,
        log_level=config.web.log_level,
        factory=True,
    )


@app.command(name="config")
def config_cmd():
    """Show current configuration."""
    config = _get_config()
    console.print(Panel(str(config.model_dump_json(indent=2)), title="Configuration"))


if __name__ == "__main__":
    app()
