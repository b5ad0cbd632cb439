from __future__ import annotations


class Book:
    """A catalogue entry with a fixed number of copies."""

    def __init__(self, book_id: str, title: str, author: str, total_copies: int) -> None:
        if total_copies < 0:
            raise ValueError(f"Book {book_id} cannot have {total_copies} copies")
        self._book_id = book_id
        self.title = title
        self.author = author
        self._total_copies = total_copies
        self.available_copies = total_copies

    @property
    def book_id(self) -> str:
        return self._book_id

    @property
    def total_copies(self) -> int:
        return self._total_copies

    def issue(self) -> bool:
        """Take one copy off the shelf. Returns False when none are left."""
        if self.available_copies > 0:
            self.available_copies -= 1
            return True
        return False

    def receive(self) -> bool:
        """Put one copy back. Returns False if every copy is already in."""
        if self.available_copies < self._total_copies:
            self.available_copies += 1
            return True
        return False

    def __lt__(self, other: "Book") -> bool:
        # Display ordering only: case-insensitive title.
        return self.title.lower() < other.title.lower()

    def __str__(self) -> str:
        return (
            f'Book[{self.book_id}] "{self.title}" by {self.author} | '
            f"{self.available_copies}/{self.total_copies} available"
        )

    def __repr__(self) -> str:  # pragma: no cover - debugging aid
        return f"Book({self.book_id!r}, {self.title!r}, {self.author!r}, {self.total_copies!r})"

    def to_dict(self) -> dict:
        return {
            "id": self.book_id,
            "title": self.title,
            "author": self.author,
            "total": self.total_copies,
            "available": self.available_copies,
        }

    @staticmethod
    def from_dict(data: dict) -> "Book":
        for key in ("id", "title", "author"):
            if not isinstance(data[key], str):
                raise TypeError(f"Book field '{key}' must be a string")
        total = data["total"]
        available = data["available"]
        # bool is an int subclass; reject it explicitly
        for key, value in (("total", total), ("available", available)):
            if not isinstance(value, int) or isinstance(value, bool):
                raise TypeError(f"Book field '{key}' must be an integer")
        if total < 0 or not 0 <= available <= total:
            raise ValueError(f"Book {data['id']} has inconsistent copy counts {available}/{total}")

        book = Book(book_id=data["id"], title=data["title"], author=data["author"], total_copies=total)
        book.available_copies = available
        return book
