from __future__ import annotations

from validators import DateValidator


class Loan:
    """A borrowing transaction between a member and a book.

    Dates are ``YYYY-MM-DD`` strings; because the format is fixed-width and
    zero-padded, string comparison gives chronological order.
    """

    def __init__(self, isbn: str, member_id: str, start_date: str, due_date: str) -> None:
        DateValidator.validate_order(start_date, due_date)
        self._isbn = isbn
        self._member_id = member_id
        self._start_date = start_date
        self._due_date = due_date
        self._returned = False

    @property
    def isbn(self) -> str:
        return self._isbn

    @property
    def member_id(self) -> str:
        return self._member_id

    @property
    def start_date(self) -> str:
        return self._start_date

    @property
    def due_date(self) -> str:
        return self._due_date

    def mark_returned(self) -> None:
        self._returned = True

    def is_returned(self) -> bool:
        return self._returned

    def is_overdue(self, today: str) -> bool:
        """Return True if the loan is still out and ``today`` is past the due date."""
        return not self._returned and today > self._due_date

    @property
    def status(self) -> str:
        return "returned" if self._returned else "active"

    def __repr__(self) -> str:
        return f"Loan(isbn={self._isbn!r}, member_id={self._member_id!r}, status={self.status!r})"

    def __str__(self) -> str:
        return (f"Loan: {self._isbn} to {self._member_id}, "
                f"from {self._start_date} to {self._due_date} ({self.status})")

    def to_dict(self) -> dict:
        return {
            "isbn": self._isbn,
            "member_id": self._member_id,
            "start_date": self._start_date,
            "due_date": self._due_date,
            "returned": self._returned,
        }
