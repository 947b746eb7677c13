from __future__ import annotations

import copy
import threading

from author import Author
from validators import PriceValidator, YearValidator


class Book:
    """A single title held by the library.

    Every construction, through ``Book(...)`` or ``Book.unknown()``, bumps a
    process-wide counter readable with ``Book.total_books()``. Copies made with
    the ``copy`` module do not run ``__init__`` and are not counted. Books
    compare by value and are unhashable because price and year can change.
    """

    _total_books = 0
    _counter_lock = threading.Lock()

    def __init__(self, title: str, author: Author, year: int, price: float, isbn: str) -> None:
        self._title = title
        self._author = copy.copy(author)
        # year is checked before price
        self.year = year
        self.price = price
        self._isbn = isbn
        Book._register_creation()

    @classmethod
    def unknown(cls) -> Book:
        """Placeholder book; skips validation but is still counted."""
        book = cls.__new__(cls)
        book._title = "Unknown"
        book._author = Author.unknown()
        book._year = 2000
        book._price = 0.0
        book._isbn = "Unknown"
        Book._register_creation()
        return book

    @classmethod
    def _register_creation(cls) -> None:
        with Book._counter_lock:
            Book._total_books += 1

    @staticmethod
    def total_books() -> int:
        return Book._total_books

    @property
    def title(self) -> str:
        return self._title

    @property
    def author(self) -> Author:
        return copy.copy(self._author)

    @property
    def year(self) -> int:
        return self._year

    @year.setter
    def year(self, year: int) -> None:
        self._year = YearValidator.validate_publication_year(year)

    @property
    def price(self) -> float:
        return self._price

    @price.setter
    def price(self, price: float) -> None:
        self._price = PriceValidator.validate_price(price)

    @property
    def isbn(self) -> str:
        return self._isbn

    __hash__ = None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Book):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self) -> str:
        return f"Book(title={self._title!r}, isbn={self._isbn!r})"

    def __str__(self) -> str:
        return (f"{self._title} by {self._author.name} ({self._year}) - "
                f"{self._price:.6f} lv. ISBN: {self._isbn}")

    def to_dict(self) -> dict:
        return {
            "title": self._title,
            "author": self._author.to_dict(),
            "year": self._year,
            "price": self._price,
            "isbn": self._isbn,
        }
