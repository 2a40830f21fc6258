"""
Resume Ingest Command Line Interface

Provides CLI commands for parsing resumes through the task coordinator,
inspecting persisted parse tasks, and database setup.
"""

import json
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

app = typer.Typer(
    name="resume-ingest",
    help="Resume ingestion and structured extraction CLI",
    add_completion=False,
)
console = Console()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log at DEBUG level"),
):
    """Configure logging before any command runs."""
    from resume_ingest.utils.logger import setup_logging

    setup_logging(level="DEBUG" if verbose else None)


@app.command()
def version():
    """Show application version."""
    from resume_ingest import __version__, __app_name__

    console.print(f"[bold blue]{__app_name__}[/bold blue] version [green]{__version__}[/green]")


@app.command()
def info():
    """Show system information and configuration."""
    from resume_ingest.nlp.extractors import ExtractorRegistry
    from resume_ingest.utils.config import get_settings

    settings = get_settings()

    table = Table(title="Resume Ingest Configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")

    table.add_row("Environment", settings.environment)
    table.add_row("Debug Mode", str(settings.debug))
    table.add_row("Task Store", settings.store)
    table.add_row("Database Host", settings.database.host)
    table.add_row("Database Name", settings.database.name)
    table.add_row("Workers", str(settings.workers.max_workers))
    table.add_row("Queue Size", str(settings.workers.queue_size))
    table.add_row("Max File Size", f"{settings.workers.max_file_size_mb} MB")
    table.add_row("Parser Version", settings.parser_version)
    table.add_row("File Types", ", ".join(ExtractorRegistry.default().supported_types()))
    table.add_row("Log Level", settings.logging.level)

    console.print(table)


@app.command()
def init_db():
    """Initialize the database with required indexes."""
    from resume_ingest.data.database import get_database_manager

    console.print("[yellow]Initializing database...[/yellow]")

    db_manager = get_database_manager()

    console.print("  Checking database connection...")
    if not db_manager.check_connection():
        console.print("[red]Error: Could not connect to MongoDB.[/red]")
        console.print("[dim]Make sure MongoDB is running and connection settings are correct.[/dim]")
        raise typer.Exit(1)

    console.print("  [green]✓[/green] Connected to MongoDB")

    try:
        console.print("  Creating indexes...")
        db_manager.ensure_indexes()
        console.print("  [green]✓[/green] Indexes created")
    except Exception as e:
        console.print(f"[red]Error initializing database: {e}[/red]")
        raise typer.Exit(1)

    console.print("\n[green]Database initialized successfully![/green]")


@app.command()
def parse(
    file: Path = typer.Argument(..., help="Path to the resume file"),
    file_type: Optional[str] = typer.Option(
        None, "--type", "-t", help="File type tag (defaults to the file extension)"
    ),
    user_id: str = typer.Option("cli", "--user", "-u", help="Owning user ID"),
    resume_id: Optional[str] = typer.Option(None, "--resume", "-r", help="Resume ID"),
    clean: bool = typer.Option(False, "--clean-text", help="Normalize whitespace before extraction"),
    skip: Optional[list[str]] = typer.Option(None, "--skip", "-s", help="Section to skip (repeatable)"),
    as_json: bool = typer.Option(False, "--json", help="Print the task as JSON"),
):
    """Parse a resume file and print the structured result."""
    from pydantic import ValidationError

    from resume_ingest.core import TaskCoordinator, wait_for_task
    from resume_ingest.data.models import ParseOptions, TaskStatus, new_id
    from resume_ingest.data.repositories import get_task_store
    from resume_ingest.errors import IngestError

    tag = file_type or file.suffix
    if not tag:
        console.print("[red]Error: Cannot infer the file type; pass --type.[/red]")
        raise typer.Exit(1)

    try:
        options = ParseOptions(clean_text=clean, skip_sections=skip or ())
    except ValidationError as e:
        console.print(f"[red]Error: {e.errors()[0]['msg']}[/red]")
        raise typer.Exit(1)

    with TaskCoordinator(get_task_store()) as coordinator:
        try:
            task = coordinator.submit(file, tag, resume_id or new_id(), user_id, options)
        except IngestError as e:
            console.print(f"[red]Error ({e.kind.value}): {e.message}[/red]")
            raise typer.Exit(1)

        with console.status(f"Parsing {file.name}..."):
            task = wait_for_task(coordinator, task.id)

    if as_json:
        console.print_json(json.dumps(task.model_dump(mode="json")))
    else:
        _print_task(task)

    if task.status != TaskStatus.COMPLETED:
        raise typer.Exit(1)


@app.command()
def status(
    task_id: str = typer.Argument(..., help="Parse task ID"),
    as_json: bool = typer.Option(False, "--json", help="Print the task as JSON"),
):
    """Show a persisted parse task."""
    from resume_ingest.errors import TaskNotFoundError

    store = _mongo_store()
    try:
        task = store.get_task(task_id)
    except TaskNotFoundError as e:
        console.print(f"[red]Error: {e.message}[/red]")
        raise typer.Exit(1)

    if as_json:
        console.print_json(json.dumps(task.model_dump(mode="json")))
    else:
        _print_task(task)


@app.command()
def list_tasks(
    user_id: str = typer.Argument(..., help="Owning user ID"),
    limit: int = typer.Option(20, "--limit", "-l", help="Maximum number of tasks to show"),
    offset: int = typer.Option(0, "--offset", "-o", help="Number of tasks to skip"),
):
    """List a user's parse tasks, newest first."""
    store = _mongo_store()
    tasks = store.list_tasks_by_user(user_id, limit=limit, offset=offset)

    if not tasks:
        console.print("[yellow]No parse tasks found.[/yellow]")
        return

    table = Table(title=f"Parse Tasks for {user_id} ({len(tasks)})")
    table.add_column("ID", style="dim")
    table.add_column("Resume", style="cyan")
    table.add_column("Type")
    table.add_column("Status")
    table.add_column("Progress", justify="right")
    table.add_column("Confidence", justify="right")
    table.add_column("Created")

    for task in tasks:
        confidence = str(task.result.metadata.confidence_score) if task.result else "-"
        table.add_row(
            task.id,
            task.resume_id,
            task.file_type,
            _status_markup(task.status),
            f"{task.progress}%",
            confidence,
            task.created_at.strftime("%Y-%m-%d %H:%M"),
        )

    console.print(table)


def _mongo_store():
    from resume_ingest.data.database import get_database_manager
    from resume_ingest.data.repositories import MongoTaskStore

    db_manager = get_database_manager()
    if not db_manager.check_connection():
        console.print("[red]Error: Could not connect to MongoDB. Run 'init-db' first.[/red]")
        raise typer.Exit(1)
    return MongoTaskStore(db_manager)


def _status_markup(status: str) -> str:
    colors = {
        "pending": "yellow",
        "processing": "blue",
        "completed": "green",
        "failed": "red",
    }
    color = colors.get(status, "white")
    return f"[{color}]{status}[/{color}]"


def _print_task(task) -> None:
    console.print(f"\n[bold]Task[/bold] {task.id}  {_status_markup(task.status)}  ({task.progress}%)")
    console.print(f"  File: {task.file_path} [dim]({task.file_type})[/dim]")

    if task.error_message:
        console.print(f"  [red]Error:[/red] {task.error_message}")

    content = task.result
    if content is None:
        return

    meta = content.metadata
    console.print(
        f"  Confidence: [bold]{meta.confidence_score}[/bold]/100  "
        f"Pages: {meta.page_count or '-'}  Duration: {meta.parse_duration_ms}ms  "
        f"Parser: {meta.parser_version}"
    )

    info = content.personal_info
    if info:
        console.print("\n[bold cyan]Personal Info[/bold cyan]")
        for label, value in (("Name", info.name), ("Email", info.email), ("Phone", info.phone)):
            if value:
                console.print(f"  {label}: {value}")

    if content.education:
        console.print("\n[bold cyan]Education[/bold cyan]")
        for edu in content.education:
            console.print(f"  • {edu.school or '-'}  {edu.degree or ''}  {edu.major or ''}")

    if content.experience:
        console.print("\n[bold cyan]Experience[/bold cyan]")
        for exp in content.experience:
            console.print(f"  • {exp.company or '-'}  {exp.position or ''}")

    if content.projects:
        console.print("\n[bold cyan]Projects[/bold cyan]")
        for project in content.projects:
            console.print(f"  • {project.name}  {project.role or ''}")

    if content.skills and content.skills.categories:
        console.print("\n[bold cyan]Skills[/bold cyan]")
        for category in content.skills.categories:
            names = ", ".join(skill.name for skill in category.skills)
            console.print(f"  {category.category}: {names}")

    for warning in meta.warnings:
        console.print(f"  [yellow]Warning:[/yellow] {warning}")


if __name__ == "__main__":
    app()
