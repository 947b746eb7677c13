import pytest

from author import Author
from book import Book
from library import Library
from member import Member
from ui_helpers import OUTPUT_MODE_ENV


@pytest.fixture(autouse=True)
def plain_output(monkeypatch):
    # Each test starts in plain mode regardless of the caller's environment
    monkeypatch.setenv(OUTPUT_MODE_ENV, "plain")


@pytest.fixture
def author():
    return Author("Ivan Vazov", 1850)


@pytest.fixture
def book(author):
    return Book("Pod igoto", author, 1894, 25.50, "ISBN-001")


@pytest.fixture
def member():
    return Member("Petar Petrov", "M001", 2023)


@pytest.fixture
def lib(book, member):
    lib = Library()
    lib.add_book(book)
    lib.add_member(member)
    return lib
