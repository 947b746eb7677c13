from __future__ import annotations

from validators import TextValidator


class Member:
    """A library patron. Immutable, compared and hashed by value."""

    def __init__(self, name: str, member_id: str, year_joined: int) -> None:
        self._name = name
        self._member_id = TextValidator.validate_member_id(member_id)
        self._year_joined = year_joined

    @classmethod
    def unknown(cls) -> Member:
        member = cls.__new__(cls)
        member._name = "Unknown"
        member._member_id = "Unknown"
        member._year_joined = 2000
        return member

    @property
    def name(self) -> str:
        return self._name

    @property
    def member_id(self) -> str:
        return self._member_id

    @property
    def year_joined(self) -> int:
        return self._year_joined

    def __hash__(self) -> int:
        return hash((self._name, self._member_id, self._year_joined))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Member):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self) -> str:
        return f"Member(name={self._name!r}, member_id={self._member_id!r})"

    def __str__(self) -> str:
        return f"{self._name} (ID: {self._member_id}, Joined: {self._year_joined})"

    def to_dict(self) -> dict:
        return {"name": self._name, "member_id": self._member_id, "year_joined": self._year_joined}
