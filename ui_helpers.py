import os
import json
from typing import List, Any, Dict
from rich.console import Console
from rich.table import Table
from rich.panel import Panel

from config import settings

# Environment variable controlling the CLI output mode
# Allowed values: 'plain' (default), 'json', 'rich'
OUTPUT_MODE_ENV = "LIB_CLI_OUTPUT"

_console = Console()

def set_output_mode(mode: str) -> None:
    mode = (mode or "").lower().strip()
    if mode in {"plain", "json", "rich"}:
        os.environ[OUTPUT_MODE_ENV] = mode

def get_output_mode() -> str:
    return os.environ.get(OUTPUT_MODE_ENV, settings.default_output_mode).lower()

def print_message(text: str) -> None:
    """Print a status line; json mode wraps it in an object."""
    if get_output_mode() == "json":
        print(json.dumps({"message": text}, ensure_ascii=False))
    else:
        print(text)

def print_book_list(books: List[Any], title: str = "Books") -> None:
    """Print books according to the current output mode.
    - plain: one str(book) per line, or 'No books found.'
    - json: JSON array of book mappings
    - rich: Rich table
    """
    mode = get_output_mode()

    if not books:
        print_message("No books found.")
        return

    if mode == "json":
        print(json.dumps([b.to_dict() for b in books], ensure_ascii=False))
    elif mode == "rich":
        table = Table(title=f"📚 {title}", show_lines=True, header_style="bold cyan")
        table.add_column("ISBN", style="magenta", no_wrap=True)
        table.add_column("Title", style="white")
        table.add_column("Author", style="white")
        table.add_column("Year", justify="right")
        table.add_column("Price", justify="right")
        for b in books:
            table.add_row(b.isbn, b.title, b.author.name, str(b.year), f"{b.price:.2f}")
        _console.print(table)
    else:
        for b in books:
            print(str(b))

def print_loan_list(loans: List[Any], title: str = "Loans") -> None:
    mode = get_output_mode()

    if not loans:
        print_message("No loans found.")
        return

    if mode == "json":
        print(json.dumps([l.to_dict() for l in loans], ensure_ascii=False))
    elif mode == "rich":
        table = Table(title=title, header_style="bold cyan")
        table.add_column("ISBN", style="magenta", no_wrap=True)
        table.add_column("Member")
        table.add_column("From")
        table.add_column("Due")
        table.add_column("Status")
        for l in loans:
            table.add_row(l.isbn, l.member_id, l.start_date, l.due_date, l.status)
        _console.print(table)
    else:
        for l in loans:
            print(str(l))

def print_stats_result(stats: Dict[str, Any]) -> None:
    """Print library statistics according to the current output mode."""
    mode = get_output_mode()

    if not stats:
        print("No statistics available.")
        return

    if mode == "json":
        print(json.dumps(stats, ensure_ascii=False))
    elif mode == "rich":
        content = "\n".join(f"[bold]{k.replace('_', ' ').title()}:[/] {v}" for k, v in stats.items())
        _console.print(Panel.fit(content, title="📊 Stats", border_style="blue"))
    else:
        for k, v in stats.items():
            print(f"{k.replace('_', ' ').title()}: {v}")
