import copy
import logging
import threading
from typing import Any, Dict, List, Optional

from book import Book
from loan import Loan
from member import Member

logger = logging.getLogger(__name__)


class Library:
    """Owns the books, members and loans, and is the only place loans change.

    All three collections are append-only. Books and members are stored as
    copies and handed back as copies, so callers never share state with the
    library.
    """

    def __init__(self) -> None:
        self._books: List[Book] = []
        self._members: List[Member] = []
        self._loans: List[Loan] = []
        self._lock = threading.RLock()

    # ------------------------- Core operations ------------------------- #
    def add_book(self, book: Book) -> None:
        """Register a book. Duplicate ISBNs are accepted."""
        with self._lock:
            self._books.append(copy.copy(book))
        logger.debug(f"Book added: {book.isbn}")

    def add_member(self, member: Member) -> None:
        """Register a member. Duplicate IDs are accepted."""
        with self._lock:
            self._members.append(copy.copy(member))
        logger.debug(f"Member added: {member.member_id}")

    def has_book(self, isbn: str) -> bool:
        return any(b.isbn == isbn for b in self._books)

    def is_book_available(self, isbn: str) -> bool:
        """True unless an active loan exists for this ISBN, even for unknown ISBNs."""
        return not any(l.isbn == isbn and not l.is_returned() for l in self._loans)

    def loan_book(self, isbn: str, member_id: str, start_date: str, due_date: str) -> bool:
        """Lend a book to a member.

        Returns False without changing anything when the book is not in the
        catalog or is already on loan. The member ID is not looked up.
        A due date earlier than the start date raises ``ValidationError``.
        """
        with self._lock:
            if not self.has_book(isbn) or not self.is_book_available(isbn):
                logger.warning(f"Loan refused: {isbn} is missing or already on loan")
                return False
            loan = Loan(isbn, member_id, start_date, due_date)
            self._loans.append(loan)
        logger.info(f"Loan created: {isbn} to {member_id} until {due_date}")
        return True

    def return_book(self, isbn: str, member_id: str) -> bool:
        """Close the first active loan matching both ISBN and member."""
        with self._lock:
            for loan in self._loans:
                if loan.isbn == isbn and loan.member_id == member_id and not loan.is_returned():
                    loan.mark_returned()
                    logger.info(f"Loan returned: {isbn} by {member_id}")
                    return True
        logger.warning(f"Return refused: no active loan of {isbn} for {member_id}")
        return False

    def find_by_author(self, author_name: str) -> List[Book]:
        """Books whose author name contains ``author_name`` (case-sensitive)."""
        return [copy.copy(b) for b in self._books if author_name in b.author.name]

    # ------------------------- Queries ------------------------- #
    def list_books(self) -> List[Book]:
        return [copy.copy(b) for b in self._books]

    def list_members(self) -> List[Member]:
        return [copy.copy(m) for m in self._members]

    def list_loans(self) -> List[Loan]:
        return [copy.copy(l) for l in self._loans]

    def find_book(self, isbn: str) -> Optional[Book]:
        for book in self._books:
            if book.isbn == isbn:
                return copy.copy(book)
        return None

    def find_member(self, member_id: str) -> Optional[Member]:
        for member in self._members:
            if member.member_id == member_id:
                return copy.copy(member)
        return None

    def active_loans(self) -> List[Loan]:
        return [copy.copy(l) for l in self._loans if not l.is_returned()]

    def overdue_loans(self, today: str) -> List[Loan]:
        return [copy.copy(l) for l in self._loans if l.is_overdue(today)]

    def get_statistics(self) -> Dict[str, Any]:
        """Get library statistics."""
        return {
            "total_books": len(self._books),
            "total_members": len(self._members),
            "active_loans": sum(1 for l in self._loans if not l.is_returned()),
            "total_loans": len(self._loans),
            "unique_authors": len({b.author.name for b in self._books}),
        }

    def __str__(self) -> str:
        active = sum(1 for l in self._loans if not l.is_returned())
        return f"Library: {len(self._books)} books, {len(self._members)} members, {active} active loans"
