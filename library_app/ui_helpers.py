import os
import json
from typing import List
from rich.console import Console
from rich.table import Table

from library_app.book import Book
from library_app.member import Member

# Environment variable to control CLI output mode
# Allowed values: 'plain' (default), 'json', 'rich'
OUTPUT_MODE_ENV = "LIB_CLI_OUTPUT"

_console = Console()

def set_output_mode(mode: str) -> None:
    mode = (mode or "").lower().strip()
    if mode in {"plain", "json", "rich"}:
        os.environ[OUTPUT_MODE_ENV] = mode

def get_output_mode() -> str:
    return os.environ.get(OUTPUT_MODE_ENV, "plain").lower()

def print_book_list(books: List[Book], title: str = "📚 Books") -> None:
    """Print books according to the current output mode.
    - plain: one `Book[...]` line per book, or 'No books.'
    - json: JSON array of book records
    - rich: Rich table
    """
    mode = get_output_mode()

    if not books:
        print("No books.")
        return

    if mode == "json":
        print(json.dumps([b.to_dict() for b in books], ensure_ascii=False))
    elif mode == "rich":
        table = Table(title=title, show_lines=True, header_style="bold cyan")
        table.add_column("ID", style="magenta", no_wrap=True)
        table.add_column("Title", style="white")
        table.add_column("Author", style="white")
        table.add_column("Available", justify="right")
        for b in books:
            table.add_row(b.book_id, b.title, b.author, f"{b.available_copies}/{b.total_copies}")
        _console.print(table)
    else:
        for b in books:
            print(b)

def print_member_list(members: List[Member], title: str = "👥 Members") -> None:
    """Print members according to the current output mode."""
    mode = get_output_mode()

    if not members:
        print("No members.")
        return

    if mode == "json":
        print(json.dumps([m.to_dict() for m in members], ensure_ascii=False))
    elif mode == "rich":
        table = Table(title=title, show_lines=True, header_style="bold cyan")
        table.add_column("ID", style="magenta", no_wrap=True)
        table.add_column("Name", style="white")
        table.add_column("Books issued", style="white")
        for m in members:
            table.add_row(m.member_id, m.name, ", ".join(m.issued_books) or "-")
        _console.print(table)
    else:
        for m in members:
            print(m)
