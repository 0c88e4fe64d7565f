"""CLI interface for the Sales Coach."""

import json
import os

import typer
from rich.console import Console
from rich.markdown import Markdown
from rich.panel import Panel
from rich.prompt import Prompt
from rich.table import Table

from ....config.logging import setup_logging
from ....config.settings import settings
from ....core.domain import ChatMessage, CoachMode
from ...common.exception_handler import format_exception_json

app = typer.Typer(
    name="sales-coach",
    help="Sales Coach - AI sales training grounded in your training library",
    add_completion=False,
)

console = Console()

# Shows full JSON error details
DEBUG_MODE = os.getenv("DEBUG", "false").lower() == "true"


def handle_cli_error(exc: Exception) -> None:
    """Display an error as JSON in debug mode, or as a short message otherwise."""
    error_data = format_exception_json(exc, include_trace=DEBUG_MODE)

    if DEBUG_MODE:
        console.print(
            Panel(
                json.dumps(error_data, indent=2),
                title="[bold red]Error Details[/]",
                border_style="red",
            )
        )
        return

    error_code = error_data["error"].get("code", "UNKNOWN")
    console.print(f"\n[red]Error [{error_code}]:[/] {error_data['error']['message']}")
    console.print(f"[dim]Type: {error_data['error']['type']}[/]")

    location = error_data.get("location", {})
    if location:
        loc_str = f"{location.get('file', '?')}:{location.get('line', '?')} in {location.get('method', '?')}"
        console.print(f"[dim]Location: {loc_str}[/]")

    console.print("[dim]Set DEBUG=true for full details[/]")


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging")) -> None:
    setup_logging("DEBUG" if verbose else settings.log_level, json_format=settings.log_json)


@app.command()
def chat(
    practice: bool = typer.Option(False, "--practice", help="Role-play a prospect instead"),
) -> None:
    """Start an interactive session with the sales coach."""
    from ....composition.container import get_coach

    mode = CoachMode.PRACTICE if practice else CoachMode.CHAT
    console.print(
        Panel.fit(
            "[bold blue]Sales Coach[/]\n"
            "[dim]Short, direct advice grounded in your training material[/]\n\n"
            "Examples:\n"
            "- How do I handle price objections?\n"
            "- Give me three discovery questions for a CFO\n"
            "- What's a good closing line for a renewal?\n\n"
            "[dim]Type 'quit' or 'exit' to leave[/]",
            title="Practice mode" if practice else "Welcome",
            border_style="blue",
        )
    )

    coach = get_coach()
    history: list[ChatMessage] = []

    while True:
        query = Prompt.ask("\n[bold cyan]You[/]")

        if query.lower() in ("quit", "exit", "q"):
            console.print("[dim]Go close some deals.[/]")
            break

        if not query.strip():
            continue

        try:
            with console.status("[bold green]Thinking...[/]"):
                response = coach.respond(query, history=history, mode=mode)
        except Exception as exc:
            handle_cli_error(exc)
            continue

        console.print()
        console.print(Panel(Markdown(response.text), title="[bold blue]Coach[/]", border_style="blue"))
        if response.documents:
            titles = ", ".join(doc.title for doc in response.documents)
            console.print(f"[dim]References: {titles}[/]")

        history.append(ChatMessage(role="user", content=query))
        history.append(ChatMessage(role="model", content=response.text))


@app.command()
def ask(question: str = typer.Argument(..., help="Question for the coach")) -> None:
    """Ask a single question and print the answer."""
    from ....composition.container import get_coach

    try:
        response = get_coach().respond(question)
    except Exception as exc:
        handle_cli_error(exc)
        raise typer.Exit(1)

    console.print(Markdown(response.text))


@app.command()
def select(
    query: str = typer.Argument(..., help="Query to match against the training library"),
    limit: int = typer.Option(3, "--limit", "-n", help="Maximum documents to return"),
) -> None:
    """Show which training documents would be used for a query."""
    from ....composition.container import get_selector
    from ....core.services.key_terms import extract_key_terms

    console.print(f"[dim]Key terms: {', '.join(extract_key_terms(query)) or '(none)'}[/]")
    result = get_selector().select_relevant_documents(query, limit)

    if not result.documents:
        console.print("[yellow]No relevant training documents found.[/]")
        return

    table = Table(title="Relevant documents")
    table.add_column("Score", justify="right", style="green")
    table.add_column("ID", style="cyan")
    table.add_column("Title")
    table.add_column("Category", style="magenta")
    for doc in result.documents:
        table.add_row(str(doc.relevance_score), doc.id, doc.title, doc.category)

    console.print(table)
    console.print(f"Categories: {', '.join(result.categories)}")


@app.command()
def documents(
    category: str = typer.Option(None, "--category", "-c", help="Filter by category"),
    query: str = typer.Option(None, "--query", "-q", help="Filter by text"),
) -> None:
    """List the training library."""
    from ....composition.container import get_library

    try:
        summaries = get_library().list_documents(category=category, query=query)
    except Exception as exc:
        handle_cli_error(exc)
        raise typer.Exit(1)

    table = Table(title=f"Training documents ({len(summaries)})")
    table.add_column("ID", style="cyan")
    table.add_column("Title")
    table.add_column("Category", style="magenta")
    table.add_column("Source", style="dim")
    for summary in summaries:
        table.add_row(summary.id, summary.title, summary.category, summary.source)

    console.print(table)


@app.command()
def show(document_id: str = typer.Argument(..., help="Document id")) -> None:
    """Print one training document."""
    from ....composition.container import get_library

    try:
        document = get_library().get_document(document_id)
    except Exception as exc:
        handle_cli_error(exc)
        raise typer.Exit(1)

    console.print(
        Panel(
            document.content,
            title=f"[bold]{document.title}[/] [dim]({document.category})[/]",
            border_style="blue",
        )
    )


@app.command()
def refresh() -> None:
    """Reprocess the PDFs in the training directory."""
    from ....composition.container import get_library

    settings.ensure_directories()
    try:
        with console.status("[bold green]Processing training PDFs...[/]"):
            count = get_library().refresh()
    except Exception as exc:
        handle_cli_error(exc)
        raise typer.Exit(1)

    console.print(f"[green]Processed {count} training documents from {settings.training_dir}[/]")


@app.command("seed-mock")
def seed_mock() -> None:
    """Replace the library with placeholder documents for local testing."""
    from ....composition.container import get_library

    created = get_library().create_mock_documents()
    console.print(f"[green]Saved {len(created)} mock training documents[/]")


@app.command()
def serve(
    host: str = typer.Option("0.0.0.0", help="Host to bind"),
    port: int = typer.Option(8000, help="Port to listen on"),
    reload: bool = typer.Option(False, help="Auto-reload on code changes"),
) -> None:
    """Run the HTTP API."""
    import uvicorn

    uvicorn.run("sales_coach.adapters.inbound.api.main:app", host=host, port=port, reload=reload)


if __name__ == "__main__":
    app()
