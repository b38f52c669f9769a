from __future__ import annotations


class BookRecord:
    """Represents a single book held by the library."""

    def __init__(self, book_id: int, title: str, author: str, issued: bool = False) -> None:
        self._id = book_id
        self.title = title
        self.author = author
        self.issued = issued

    @property
    def id(self) -> int:
        return self._id

    @property
    def status(self) -> str:
        return "Issued" if self.issued else "Available"

    def __str__(self) -> str:
        return f"ID: {self.id} | Title: {self.title} | Author: {self.author} | Status: {self.status}"

    def __repr__(self) -> str:  # pragma: no cover - debugging aid
        return f"BookRecord(id={self.id!r}, title={self.title!r}, author={self.author!r}, issued={self.issued!r})"

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "author": self.author,
            "issued": self.issued,
            "status": self.status,
        }
