import json

from typer.testing import CliRunner

from main import app, build_demo_library
from book import Book

runner = CliRunner()


def test_demo_plain_output():
    result = runner.invoke(app, ["demo"])
    assert result.exit_code == 0
    lines = result.stdout.splitlines()
    assert lines[0] == "Library: 2 books, 1 members, 0 active loans"
    assert "Loan created." in lines
    assert "Available ISBN-001? false" in lines
    assert "Available ISBN-001? true" in lines
    assert lines.index("Available ISBN-001? false") < lines.index("Available ISBN-001? true")
    assert "Pod igoto by Ivan Vazov (1894) - 25.500000 lv. ISBN: ISBN-001" in lines
    assert "Nema zemya by Ivan Vazov (1900) - 18.900000 lv. ISBN: ISBN-002" in lines
    assert lines[-1].startswith("Total books created: ")

def test_demo_counter_reflects_new_books():
    before = Book.total_books()
    result = runner.invoke(app, ["demo"])
    assert result.exit_code == 0
    assert result.stdout.splitlines()[-1] == f"Total books created: {before + 2}"

def test_demo_unknown_author():
    result = runner.invoke(app, ["demo", "--author", "Botev"])
    assert result.exit_code == 0
    assert "No books found." in result.stdout

def test_demo_invalid_dates():
    result = runner.invoke(app, ["demo", "--start", "2025-11-17", "--due", "2025-11-03"])
    assert result.exit_code == 1
    assert "Error: Due date cannot be earlier than start date" in result.stdout

def test_demo_json_output():
    result = runner.invoke(app, ["--output", "json", "demo"])
    assert result.exit_code == 0
    payloads = [json.loads(line) for line in result.stdout.splitlines()]
    books = next(p for p in payloads if isinstance(p, list) and p and "title" in p[0])
    assert [b["isbn"] for b in books] == ["ISBN-001", "ISBN-002"]
    assert {"message": "Loan created."} in payloads

def test_demo_json_output_with_empty_lists():
    result = runner.invoke(app, ["-o", "json", "demo", "--author", "Botev", "--today", "2025-11-01"])
    assert result.exit_code == 0
    payloads = [json.loads(line) for line in result.stdout.splitlines()]
    assert {"message": "No books found."} in payloads
    assert {"message": "No loans found."} in payloads

def test_demo_overdue_report_shows_active_loan():
    result = runner.invoke(app, ["demo", "--today", "2030-01-01"])
    assert result.exit_code == 0
    lines = result.stdout.splitlines()
    report = lines.index("Overdue loans on 2030-01-01:")
    assert lines[report + 1] == "Loan: ISBN-001 to M001, from 2025-11-03 to 2025-11-17 (active)"
    assert report < lines.index("Available ISBN-001? true")

def test_demo_overdue_report_empty_before_due_date():
    result = runner.invoke(app, ["demo", "--today", "2025-11-17"])
    assert result.exit_code == 0
    lines = result.stdout.splitlines()
    assert lines[lines.index("Overdue loans on 2025-11-17:") + 1] == "No loans found."

def test_demo_rich_output():
    result = runner.invoke(app, ["-o", "rich", "demo"])
    assert result.exit_code == 0
    assert "Total books created" in result.stdout

def test_stats_plain():
    result = runner.invoke(app, ["stats"])
    assert result.exit_code == 0
    assert "Total Books: 2" in result.stdout
    assert "Active Loans: 1" in result.stdout

def test_version():
    result = runner.invoke(app, ["version"])
    assert result.exit_code == 0
    assert result.stdout.strip() != ""

def test_build_demo_library():
    lib = build_demo_library()
    assert str(lib) == "Library: 2 books, 1 members, 0 active loans"
    assert lib.find_member("M001").name == "Petar Petrov"
