from typing import Optional


AUTHOR_MIN_BIRTH_YEAR = 1850
AUTHOR_MAX_BIRTH_YEAR = 2025
BOOK_MIN_YEAR = 1500
BOOK_MAX_YEAR = 2025


class ValidationError(ValueError):
    """Raised when an entity is constructed or updated with invalid data."""


class YearValidator:
    """Inclusive year range checks shared by authors and books."""

    @staticmethod
    def in_range(year: int, low: int, high: int) -> bool:
        return low <= year <= high

    @staticmethod
    def validate_birth_year(year: int) -> int:
        if not YearValidator.in_range(year, AUTHOR_MIN_BIRTH_YEAR, AUTHOR_MAX_BIRTH_YEAR):
            raise ValidationError("Birth year out of range")
        return year

    @staticmethod
    def validate_publication_year(year: int) -> int:
        if not YearValidator.in_range(year, BOOK_MIN_YEAR, BOOK_MAX_YEAR):
            raise ValidationError("Year out of range")
        return year


class TextValidator:

    @staticmethod
    def validate_member_id(member_id: Optional[str]) -> str:
        if not member_id:
            raise ValidationError("Member ID cannot be empty")
        return member_id


class PriceValidator:

    @staticmethod
    def validate_price(price: float) -> float:
        if price < 0:
            raise ValidationError("Price cannot be negative")
        return price


class DateValidator:
    """ISO ``YYYY-MM-DD`` dates compare correctly as plain strings."""

    @staticmethod
    def validate_order(start_date: str, due_date: str) -> None:
        if due_date < start_date:
            raise ValidationError("Due date cannot be earlier than start date")
