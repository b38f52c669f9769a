"""Text-menu loop that mediates between the user and the Library.

Every user mistake (bad menu choice, bad id, unknown id, wrong status)
ends up as a printed message; the loop only stops on option 5 or when
the input stream runs out.
"""
import logging
from enum import Enum
from typing import Callable, Optional

from library_system.library import Library, Outcome, TransitionResult
from library_system.utils.ui_helpers import (
    print_book_added,
    print_list_result,
    print_menu,
    print_message,
)
from library_system.utils.validators import MENU_FIRST, MENU_LAST, NumberParser

logger = logging.getLogger(__name__)

CHOICE_PROMPT = "Enter your choice: "
TITLE_PROMPT = "Enter book title: "
AUTHOR_PROMPT = "Enter book author: "
ISSUE_PROMPT = "Enter the ID of the book to issue: "
RETURN_PROMPT = "Enter the ID of the book to return: "

INVALID_CHOICE = f"Invalid choice. Please enter a number between {MENU_FIRST} and {MENU_LAST}."
INVALID_ID = "Invalid ID format."
GOODBYE = "Exiting... Thank you for using the Library Management System."


class ShellState(Enum):
    MENU_PROMPT = "menu_prompt"
    AWAIT_CHOICE = "await_choice"
    DISPATCH = "dispatch"
    EXIT = "exit"


class EndOfInput(Exception):
    """Raised internally when the reader has no more lines."""


class LibraryShell:
    """Interactive menu over a Library.

    ``reader`` is called with a prompt and must return one line without
    its terminator; it defaults to the builtin ``input``.
    """

    def __init__(self, library: Optional[Library] = None, reader: Callable[[str], str] = input) -> None:
        self.library = library if library is not None else Library()
        self._reader = reader
        self.state = ShellState.MENU_PROMPT
        self._choice: Optional[int] = None

    def run(self) -> None:
        while self.state is not ShellState.EXIT:
            try:
                self.step()
            except EndOfInput:
                logger.info("Input stream closed, leaving the menu")
                self.state = ShellState.EXIT

    def step(self) -> None:
        """Advance the state machine by one transition."""
        if self.state is ShellState.MENU_PROMPT:
            print_menu()
            self.state = ShellState.AWAIT_CHOICE
        elif self.state is ShellState.AWAIT_CHOICE:
            raw = self._read(CHOICE_PROMPT)
            self._choice = NumberParser.parse_int(raw)
            if self._choice is None:
                logger.debug(f"Invalid menu choice: {raw!r}")
                print_message(INVALID_CHOICE, style="yellow")
                self.state = ShellState.MENU_PROMPT
            else:
                self.state = ShellState.DISPATCH
        elif self.state is ShellState.DISPATCH:
            self.state = self.dispatch(self._choice)

    def dispatch(self, choice: Optional[int]) -> ShellState:
        if choice == 1:
            self.add_book()
        elif choice == 2:
            print_list_result(self.library.list_books())
        elif choice == 3:
            self.issue_book()
        elif choice == 4:
            self.return_book()
        elif choice == 5:
            print_message(GOODBYE, style="green")
            return ShellState.EXIT
        else:
            logger.debug(f"Menu choice out of range: {choice}")
            print_message(INVALID_CHOICE, style="yellow")
        return ShellState.MENU_PROMPT

    # ------------------------- Menu actions ------------------------- #
    def add_book(self) -> None:
        title = self._read(TITLE_PROMPT)
        author = self._read(AUTHOR_PROMPT)
        book = self.library.add_book(title, author)
        print_book_added(book)

    def issue_book(self) -> None:
        book_id = self._read_id(ISSUE_PROMPT)
        if book_id is None:
            print_message(INVALID_ID, style="red")
            return
        result = self.library.issue_book(book_id)
        print_message(describe_issue(result), style="green" if result.ok else "yellow")

    def return_book(self) -> None:
        book_id = self._read_id(RETURN_PROMPT)
        if book_id is None:
            print_message(INVALID_ID, style="red")
            return
        result = self.library.return_book(book_id)
        print_message(describe_return(result), style="green" if result.ok else "yellow")

    # ------------------------- Input helpers ------------------------- #
    def _read(self, prompt: str) -> str:
        try:
            return self._reader(prompt)
        except EOFError as e:
            raise EndOfInput() from e
        except UnicodeDecodeError as e:
            logger.warning(f"Input line could not be decoded, ignoring it: {e}")
            return ""

    def _read_id(self, prompt: str) -> Optional[int]:
        raw = self._read(prompt)
        book_id = NumberParser.parse_int(raw)
        if book_id is None:
            logger.debug(f"Invalid book id: {raw!r}")
        return book_id


def describe_issue(result: TransitionResult) -> str:
    if result.outcome is Outcome.NOT_FOUND:
        return f"Book with ID {result.book_id} not found."
    if result.outcome is Outcome.ALREADY_ISSUED:
        return f'Book "{result.title}" is already issued.'
    return f'Book "{result.title}" issued successfully.'


def describe_return(result: TransitionResult) -> str:
    if result.outcome is Outcome.NOT_FOUND:
        return f"Book with ID {result.book_id} not found."
    if result.outcome is Outcome.NOT_ISSUED:
        return f'Book "{result.title}" was not issued.'
    return f'Book "{result.title}" returned successfully.'
