import logging
import sys
from typing import Optional

import typer
from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.prompt import IntPrompt, Prompt
from rich.table import Table

from library_app.book import Book
from library_app.config import settings
from library_app.library import Library
from library_app.member import Member
from library_app.ui_helpers import print_book_list, print_member_list, set_output_mode

logging.basicConfig(level=getattr(logging, settings.log_level, logging.WARNING))
logger = logging.getLogger(__name__)

console = Console()


def open_library() -> Library:
    """Build a Library from the configured paths and load the saved state."""
    lib = Library(settings.books_file, settings.members_file, settings.log_file)
    results = lib.load_state()
    for name, result in results.items():
        if not result.ok:
            logger.info(f"Starting with empty {name}: {result.status.value}")
    return lib


# --- Typer CLI application ---
app = typer.Typer(help="City library book and member tracker")

@app.callback()
def _global_options(
    output: Optional[str] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output format: plain | json | rich (default: plain)",
    )
):
    """Global CLI options (e.g. output mode)."""
    if output:
        set_output_mode(output)

@app.command("add-book")
def cli_add_book(book_id: str, title: str, author: str, copies: int):
    """Add a book with a number of copies."""
    lib = open_library()
    try:
        book = Book(book_id, title, author, copies)
    except ValueError as e:
        print(f"Error: {e}")
        return
    if lib.add_book(book):
        lib.save_state()
        print("Book added.")
    else:
        print("Book ID already exists.")

@app.command("add-member")
def cli_add_member(member_id: str, name: str):
    """Register a new member."""
    lib = open_library()
    if lib.add_member(Member(member_id, name)):
        lib.save_state()
        print("Member added.")
    else:
        print("Member ID already exists.")

@app.command("issue")
def cli_issue(member_id: str, book_id: str):
    """Issue a book to a member."""
    lib = open_library()
    if lib.issue_book(member_id, book_id):
        lib.save_state()
        print("Issued.")
    else:
        print("Issue failed.")

@app.command("return")
def cli_return(member_id: str, book_id: str):
    """Return a book a member holds."""
    lib = open_library()
    if lib.return_book(member_id, book_id):
        lib.save_state()
        print("Returned.")
    else:
        print("Return failed.")

@app.command("list-books")
def cli_list_books():
    """Show all books."""
    print_book_list(open_library().list_books())

@app.command("list-members")
def cli_list_members():
    """Show all members."""
    print_member_list(open_library().list_members())

@app.command("sort-books")
def cli_sort_books():
    """Show books sorted by title."""
    print_book_list(open_library().sort_books(), title="📚 Books by title")

@app.command("sort-members")
def cli_sort_members():
    """Show members sorted by name."""
    print_member_list(open_library().sort_members(), title="👥 Members by name")


# --- Interactive menu ---
def _report(ok: bool, success: str, failure: str) -> None:
    if ok:
        console.print(f"[green]✔ {success}[/]")
    else:
        console.print(f"[red]✘ {failure}[/]")

def run_menu(lib: Optional[Library] = None) -> None:
    """Interactive menu for the library CLI. Option 9 saves and exits."""
    lib = lib or open_library()

    def render_menu() -> None:
        menu_items = [
            ("1", "Add Book"),
            ("2", "Add Member"),
            ("3", "Issue Book"),
            ("4", "Return Book"),
            ("5", "Show All Books"),
            ("6", "Show All Members"),
            ("7", "Sort Books (by Title)"),
            ("8", "Sort Members (by Name)"),
            ("9", "Save & Exit"),
        ]

        table = Table.grid(padding=(0, 2))
        table.add_column(justify="right", style="bold cyan", width=4)
        table.add_column(justify="left", style="white")
        for key, label in menu_items:
            table.add_row(f"[reverse]{key}[/]", label)

        console.print(Panel(table, title=settings.app_name, border_style="cyan", box=box.HEAVY, padding=(1, 2)))

    while True:
        render_menu()
        choice = Prompt.ask("➤ Enter choice").strip()

        if choice == "1":
            book_id = Prompt.ask("Book ID")
            title = Prompt.ask("Title")
            author = Prompt.ask("Author")
            copies = IntPrompt.ask("Total copies")
            try:
                book = Book(book_id, title, author, copies)
            except ValueError as e:
                console.print(f"[red]✘ {e}[/]")
            else:
                _report(lib.add_book(book), "Book added.", "Book ID already exists.")
        elif choice == "2":
            member_id = Prompt.ask("Member ID")
            name = Prompt.ask("Name")
            _report(lib.add_member(Member(member_id, name)), "Member added.", "Member ID already exists.")
        elif choice == "3":
            member_id = Prompt.ask("Member ID")
            book_id = Prompt.ask("Book ID")
            _report(lib.issue_book(member_id, book_id), "Issued.", "Issue failed.")
        elif choice == "4":
            member_id = Prompt.ask("Member ID")
            book_id = Prompt.ask("Book ID")
            _report(lib.return_book(member_id, book_id), "Returned.", "Return failed.")
        elif choice == "5":
            lib.print_books()
        elif choice == "6":
            lib.print_members()
        elif choice == "7":
            print_book_list(lib.sort_books())
        elif choice == "8":
            print_member_list(lib.sort_members())
        elif choice == "9":
            lib.save_state()
            console.print("[green]✔ Saved. Exiting...[/]")
            break
        else:
            console.print("[yellow]Invalid choice.[/]")
        print()

def main() -> None:
    """Console entry point: subcommands go to typer, no arguments opens the menu."""
    if len(sys.argv) > 1:
        app()
    else:
        run_menu()

if __name__ == "__main__":
    main()
