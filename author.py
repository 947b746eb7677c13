from __future__ import annotations

from validators import YearValidator


class Author:
    """The writer of a book. Only the birth year can change after construction.

    Compared by value; instances are mutable and therefore unhashable.
    """

    def __init__(self, name: str, birth_year: int) -> None:
        self._name = name
        self.birth_year = birth_year

    @classmethod
    def unknown(cls) -> Author:
        """Placeholder author; skips validation."""
        author = cls.__new__(cls)
        author._name = "Unknown"
        author._birth_year = 1900
        return author

    @property
    def name(self) -> str:
        return self._name

    @property
    def birth_year(self) -> int:
        return self._birth_year

    @birth_year.setter
    def birth_year(self, year: int) -> None:
        self._birth_year = YearValidator.validate_birth_year(year)

    __hash__ = None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Author):
            return NotImplemented
        return (self._name, self._birth_year) == (other._name, other._birth_year)

    def __repr__(self) -> str:
        return f"Author(name={self._name!r}, birth_year={self._birth_year!r})"

    def __str__(self) -> str:
        return f"{self._name} ({self._birth_year})"

    def to_dict(self) -> dict:
        return {"name": self._name, "birth_year": self._birth_year}
