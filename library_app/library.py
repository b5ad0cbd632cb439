import logging
from typing import Callable, Dict, List, Optional, TextIO, TypeVar

from library_app.book import Book
from library_app.config import settings
from library_app.member import Member
from library_app.storage import JsonStore, StorageResult, StorageStatus
from library_app.transaction_log import TransactionLog

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Library:
    """Owns the book and member registries, their persistence and the transaction log."""

    def __init__(
        self,
        books_file: Optional[str] = None,
        members_file: Optional[str] = None,
        log_file: Optional[str] = None,
        transaction_log: Optional[TransactionLog] = None,
    ) -> None:
        # Explicit paths win; anything omitted comes from settings.
        self.books_store = JsonStore(books_file or settings.books_file)
        self.members_store = JsonStore(members_file or settings.members_file)
        self.transaction_log = transaction_log or TransactionLog(log_file or settings.log_file)

        self.books: Dict[str, Book] = {}
        self.members: Dict[str, Member] = {}

    # ------------------------- Core operations ------------------------- #
    def add_book(self, book: Book) -> bool:
        """Register a book. Returns False if its id is already taken."""
        if book.book_id in self.books:
            return False
        self.books[book.book_id] = book
        self._log(f"Added Book: {book}")
        return True

    def add_member(self, member: Member) -> bool:
        """Register a member. Returns False if its id is already taken."""
        if member.member_id in self.members:
            return False
        self.members[member.member_id] = member
        self._log(f"Added Member: {member}")
        return True

    def issue_book(self, member_id: str, book_id: str) -> bool:
        member = self.members.get(member_id)
        book = self.books.get(book_id)

        if member is None or book is None:
            return False
        if not book.issue():
            return False
        if not member.borrow(book_id):
            # Member is at the cap: undo the decrement.
            book.receive()
            return False

        self._log(f"Issued: Book {book_id} to Member {member_id}")
        return True

    def return_book(self, member_id: str, book_id: str) -> bool:
        member = self.members.get(member_id)
        book = self.books.get(book_id)

        if member is None or book is None:
            return False
        if not member.give_back(book_id):
            return False

        book.receive()
        self._log(f"Returned: Book {book_id} by Member {member_id}")
        return True

    # ------------------------- Queries ------------------------- #
    def find_book(self, book_id: str) -> Optional[Book]:
        return self.books.get(book_id)

    def find_member(self, member_id: str) -> Optional[Member]:
        return self.members.get(member_id)

    def list_books(self) -> List[Book]:
        return list(self.books.values())

    def list_members(self) -> List[Member]:
        return list(self.members.values())

    def sort_books(self) -> List[Book]:
        """Books ordered by title, ignoring case. The registry is left as is."""
        return sorted(self.books.values())

    def sort_members(self) -> List[Member]:
        """Members ordered by name, ignoring case. The registry is left as is."""
        return sorted(self.members.values(), key=Member.sort_key)

    def print_books(self, file: Optional[TextIO] = None) -> None:
        if not self.books:
            print("No books.", file=file)
            return
        for book in self.books.values():
            print(book, file=file)

    def print_members(self, file: Optional[TextIO] = None) -> None:
        if not self.members:
            print("No members.", file=file)
            return
        for member in self.members.values():
            print(member, file=file)

    # ------------------------- Persistence ------------------------- #
    def save_state(self) -> Dict[str, StorageResult]:
        """Write both registries to disk. Failures are reported, never raised."""
        results = {
            "books": self.books_store.save({bid: b.to_dict() for bid, b in self.books.items()}),
            "members": self.members_store.save({mid: m.to_dict() for mid, m in self.members.items()}),
        }
        self._log("State Saved")
        return results

    def load_state(self) -> Dict[str, StorageResult]:
        """Read both registries from disk.

        A registry whose file is missing or unusable keeps its current
        (initially empty) contents; nothing is raised.
        """
        books_result = self._load_mapping(self.books_store, Book.from_dict)
        if books_result.ok:
            self.books = books_result.data

        members_result = self._load_mapping(self.members_store, Member.from_dict)
        if members_result.ok:
            self.members = members_result.data

        return {"books": books_result, "members": members_result}

    @staticmethod
    def _load_mapping(store: JsonStore, factory: Callable[[dict], T]) -> StorageResult:
        result = store.load()
        if not result.ok:
            return result

        mapping: Dict[str, T] = {}
        try:
            for key, item in result.data.items():
                if not isinstance(item, dict):
                    raise TypeError(f"entry {key!r} is not an object")
                if item.get("id") != key:
                    raise ValueError(f"entry {key!r} carries id {item.get('id')!r}")
                mapping[key] = factory(item)
        except (KeyError, TypeError, ValueError) as e:
            logger.warning(f"Discarding {store.path}: {e!r}")
            return StorageResult(StorageStatus.CORRUPT, repr(e))

        return StorageResult(StorageStatus.OK, data=mapping)

    # ------------------------- Utilities ------------------------- #
    def _log(self, message: str) -> None:
        self.transaction_log.write(message)
