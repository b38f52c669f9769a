import os
import json
from typing import List, Any
from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.markup import escape
from rich import box

from library_system.config import settings

# Environment variable to control CLI output mode
# İzin verilen değerler: 'plain' (default), 'json', 'rich'
OUTPUT_MODE_ENV = "LIB_CLI_OUTPUT"
OUTPUT_MODES = {"plain", "json", "rich"}

MENU_TITLE = "===== LIBRARY MANAGEMENT SYSTEM ====="
MENU_ITEMS = [
    ("1", "Add a Book"),
    ("2", "View All Books"),
    ("3", "Issue a Book"),
    ("4", "Return a Book"),
    ("5", "Exit"),
]

_console = Console()

def get_output_mode() -> str:
    mode = os.environ.get(OUTPUT_MODE_ENV, settings.output_mode).lower().strip()
    return mode if mode in OUTPUT_MODES else "plain"

def print_menu() -> None:
    """Print the main menu. The choice prompt itself is issued by the reader."""
    if get_output_mode() == "rich":
        table = Table.grid(padding=(0, 2))
        table.add_column(justify="right", style="bold cyan", width=4)
        table.add_column(justify="left", style="white")
        for key, label in MENU_ITEMS:
            table.add_row(f"{key}.", label)
        _console.print()
        _console.print(Panel(table, title=settings.app_name, border_style="cyan", box=box.HEAVY))
        return

    print()
    print(MENU_TITLE)
    for key, label in MENU_ITEMS:
        print(f"{key}. {label}")

def print_message(text: str, style: str = "white") -> None:
    if get_output_mode() == "rich":
        _console.print(f"[{style}]{escape(text)}[/]")
    else:
        print(text)

def print_book_added(book: Any) -> None:
    mode = get_output_mode()
    if mode == "json":
        print(json.dumps({"added": book.to_dict()}, ensure_ascii=False))
    else:
        print_message(f"Book added successfully: {book}", style="green")

def print_list_result(books: List[Any]) -> None:
    """Kitap listesini mevcut çıktı moduna göre yazdır.
    - plain: '--- List of Books ---' then one 'ID: .. | Title: ..' line per book
    - json: JSON dizisi olarak id, title, author, issued, status
    - rich: Rich tablosu
    """
    mode = get_output_mode()

    if not books:
        print_message("No books in the library.", style="yellow")
        return

    if mode == "json":
        print(json.dumps([b.to_dict() for b in books], ensure_ascii=False))
    elif mode == "rich":
        table = Table(title="📚 Books", show_lines=True, header_style="bold cyan")
        table.add_column("ID", style="magenta", no_wrap=True, justify="right")
        table.add_column("Title", style="white")
        table.add_column("Author", style="white")
        table.add_column("Status", no_wrap=True)
        for b in books:
            status_style = "red" if b.issued else "green"
            table.add_row(str(b.id), escape(b.title), escape(b.author), f"[{status_style}]{b.status}[/]")
        _console.print(table)
    else:
        print("\n--- List of Books ---")
        for b in books:
            print(b)
