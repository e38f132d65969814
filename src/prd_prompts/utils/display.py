"""Display utilities for the command line interface."""
from typing import List

from rich.console import Console
from rich.markdown import Markdown
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from .types import TemplateInfo

# Messages and prompts go to stderr; documents and listings go to stdout
console = Console(stderr=True)
output = Console()


def format_as_markdown(text: str) -> Markdown:
    """Format template text as markdown."""
    return Markdown(text)


def display_document(text: str) -> None:
    """Display template text as formatted markdown on stdout."""
    output.print(format_as_markdown(text))


def display_banner(title: str) -> None:
    """Display a banner with the title."""
    console.print(Panel(f"[bold]{escape(title)}[/bold]", border_style="blue"))


def display_templates(templates: List[TemplateInfo]) -> None:
    """Display available templates as a table on stdout."""
    table = Table(title="Available Templates")
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Title")
    table.add_column("Placeholders", justify="right")
    for info in templates:
        table.add_row(escape(info["name"]), escape(info["title"]), str(len(info["placeholders"])))
    output.print(table)


def ask_user(prompt: str) -> str:
    """Ask user for input, returning the answer exactly as typed."""
    return console.input(f"[bold cyan]{escape(prompt)}[/bold cyan]: ")


def display_error(message: str) -> None:
    """Display an error message."""
    console.print(f"[bold red]✗[/bold red] {escape(message)}")


def display_warning(message: str) -> None:
    """Display a warning message."""
    console.print(f"[bold yellow]⚠[/bold yellow] {escape(message)}")


def display_info(message: str) -> None:
    """Display an informational message."""
    console.print(f"[bold blue]ℹ[/bold blue] {escape(message)}")
