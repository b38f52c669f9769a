import re
from typing import Optional

MENU_FIRST = 1
MENU_LAST = 5

# ASCII digits only; rejects "1_0" and non-Latin digit forms that int() would accept
INTEGER_TOKEN = re.compile(r"[+-]?[0-9]+")


class NumberParser:
    """Turns one line of user input into an integer, or None.

    Only the first whitespace-separated token is looked at; the rest of
    the line is discarded along with it.
    """

    @staticmethod
    def first_token(raw: Optional[str]) -> str:
        if raw is None:
            return ""
        parts = raw.split()
        return parts[0] if parts else ""

    @staticmethod
    def parse_int(raw: Optional[str]) -> Optional[int]:
        token = NumberParser.first_token(raw)
        if not INTEGER_TOKEN.fullmatch(token):
            return None
        return int(token)
