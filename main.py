import logging
from typing import Optional

import typer

from author import Author
from book import Book
from config import settings
from library import Library
from member import Member
from ui_helpers import set_output_mode, print_message, print_book_list, print_loan_list, print_stats_result
from validators import ValidationError

APP_NAME = settings.app_name

# --- Typer CLI application ---
app = typer.Typer(help=APP_NAME)

@app.callback()
def _global_options(
    output: Optional[str] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output format: plain | json | rich (default: plain)",
    )
):
    """Global CLI options (output mode, logging)."""
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.WARNING),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
    if output:
        set_output_mode(output)

def build_demo_library() -> Library:
    """The sample catalog: two Vazov novels and one member."""
    lib = Library()
    vazov = Author("Ivan Vazov", 1850)
    lib.add_book(Book("Pod igoto", vazov, 1894, 25.50, "ISBN-001"))
    lib.add_book(Book("Nema zemya", vazov, 1900, 18.90, "ISBN-002"))
    lib.add_member(Member("Petar Petrov", "M001", 2023))
    return lib

def _yes_no(value: bool) -> str:
    return "true" if value else "false"

@app.command("demo")
def cli_demo(
    start: str = typer.Option("2025-11-03", "--start", help="Loan start date (YYYY-MM-DD)"),
    due: str = typer.Option("2025-11-17", "--due", help="Loan due date (YYYY-MM-DD)"),
    author: str = typer.Option("Vazov", "--author", "-a", help="Author name fragment to search for"),
    today: Optional[str] = typer.Option(None, "--today", help="Date for the overdue report (YYYY-MM-DD)"),
):
    """Walk through a checkout and return on a small sample catalog."""
    try:
        lib = build_demo_library()
        print_message(str(lib))

        if lib.loan_book("ISBN-001", "M001", start, due):
            print_message("Loan created.")

        print_message(f"Available ISBN-001? {_yes_no(lib.is_book_available('ISBN-001'))}")

        # report while the loan is still out
        report_date = today or settings.demo_today
        print_message(f"Overdue loans on {report_date}:")
        print_loan_list(lib.overdue_loans(report_date), title="Overdue loans")

        lib.return_book("ISBN-001", "M001")
        print_message(f"Available ISBN-001? {_yes_no(lib.is_book_available('ISBN-001'))}")
    except ValidationError as e:
        print(f"Error: {e}")
        raise typer.Exit(code=1)

    print_book_list(lib.find_by_author(author), title=f"Books by '{author}'")

    print_message(f"Total books created: {Book.total_books()}")

@app.command("stats")
def cli_stats():
    """Show statistics for the sample catalog with one active loan."""
    lib = build_demo_library()
    lib.loan_book("ISBN-001", "M001", "2025-11-03", "2025-11-17")
    print_stats_result(lib.get_statistics())

@app.command("version")
def cli_version():
    """Show the application name and version."""
    print(f"{settings.app_name} {settings.app_version}")


if __name__ == "__main__":
    app()
