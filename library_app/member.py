from __future__ import annotations

from typing import List, Optional

MAX_ISSUED_BOOKS = 5


class Member:
    """A library member and the ids of the books they currently hold."""

    def __init__(self, member_id: str, name: str, issued_books: Optional[List[str]] = None) -> None:
        self._member_id = member_id
        self.name = name
        self.issued_books: List[str] = list(issued_books or [])

    @property
    def member_id(self) -> str:
        return self._member_id

    def borrow(self, book_id: str) -> bool:
        # No duplicate check: the same id may be held twice.
        if len(self.issued_books) >= MAX_ISSUED_BOOKS:
            return False
        self.issued_books.append(book_id)
        return True

    def give_back(self, book_id: str) -> bool:
        try:
            self.issued_books.remove(book_id)
        except ValueError:
            return False
        return True

    @staticmethod
    def sort_key(member: "Member") -> str:
        return member.name.lower()

    def __str__(self) -> str:
        return f"Member[{self.member_id}] {self.name} | Books issued: {len(self.issued_books)}"

    def __repr__(self) -> str:  # pragma: no cover - debugging aid
        return f"Member({self.member_id!r}, {self.name!r}, {self.issued_books!r})"

    def to_dict(self) -> dict:
        return {"id": self.member_id, "name": self.name, "issued_books": list(self.issued_books)}

    @staticmethod
    def from_dict(data: dict) -> "Member":
        for key in ("id", "name"):
            if not isinstance(data[key], str):
                raise TypeError(f"Member field '{key}' must be a string")
        issued = data.get("issued_books", [])
        if not isinstance(issued, list) or not all(isinstance(b, str) for b in issued):
            raise TypeError("Member field 'issued_books' must be a list of strings")
        if len(issued) > MAX_ISSUED_BOOKS:
            raise ValueError(f"Member {data['id']} holds more than {MAX_ISSUED_BOOKS} books")
        return Member(member_id=data["id"], name=data["name"], issued_books=issued)
