import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from library_system.book import BookRecord

logger = logging.getLogger(__name__)


class Outcome(Enum):
    SUCCESS = "success"
    NOT_FOUND = "not_found"
    ALREADY_ISSUED = "already_issued"
    NOT_ISSUED = "not_issued"


@dataclass(frozen=True)
class TransitionResult:
    """Outcome of an issue/return request.

    ``book`` is None only when the id was not found.
    """

    outcome: Outcome
    book_id: int
    book: Optional[BookRecord] = None

    @property
    def ok(self) -> bool:
        return self.outcome is Outcome.SUCCESS

    @property
    def title(self) -> Optional[str]:
        return self.book.title if self.book else None


class Library:
    """Manages the in-memory collection of books and their issue status."""

    def __init__(self) -> None:
        self.books: List[BookRecord] = []
        self._next_id = 1

    def __len__(self) -> int:
        return len(self.books)

    # ------------------------- Core operations ------------------------- #
    def add_book(self, title: str, author: str) -> BookRecord:
        """Create a record with the next sequential id and append it."""
        if not isinstance(title, str) or not isinstance(author, str):
            raise TypeError("title and author must be strings")

        book = BookRecord(self._next_id, title, author)
        self._next_id += 1
        self.books.append(book)
        logger.info(f"Book added: id={book.id}, title={book.title!r}")
        return book

    def list_books(self) -> List[BookRecord]:
        """All books in insertion order; an empty list means no books."""
        return list(self.books)

    def issue_book(self, book_id: int) -> TransitionResult:
        book = self.find_book(book_id)
        if book is None:
            logger.debug(f"Issue rejected: id={book_id} not found")
            return TransitionResult(Outcome.NOT_FOUND, book_id)
        if book.issued:
            logger.debug(f"Issue rejected: id={book_id} already issued")
            return TransitionResult(Outcome.ALREADY_ISSUED, book_id, book)

        book.issued = True
        logger.info(f"Book issued: id={book_id}")
        return TransitionResult(Outcome.SUCCESS, book_id, book)

    def return_book(self, book_id: int) -> TransitionResult:
        book = self.find_book(book_id)
        if book is None:
            logger.debug(f"Return rejected: id={book_id} not found")
            return TransitionResult(Outcome.NOT_FOUND, book_id)
        if not book.issued:
            logger.debug(f"Return rejected: id={book_id} was not issued")
            return TransitionResult(Outcome.NOT_ISSUED, book_id, book)

        book.issued = False
        logger.info(f"Book returned: id={book_id}")
        return TransitionResult(Outcome.SUCCESS, book_id, book)

    def find_book(self, book_id: int) -> Optional[BookRecord]:
        for book in self.books:
            if book.id == book_id:
                return book
        return None
