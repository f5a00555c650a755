"""Shell-like scanner for splitting a command line into argument tokens."""

from enum import Enum, auto
from typing import Iterator, NamedTuple, Optional

from .source import CharSource, SourceLike

ESCAPE_CHAR = "\\"
OPTION_CHAR = "-"
QUOTE_CHARS = "`'\""
SYMBOL_CHARS = "|><#{(["

BRACKETS = {
    "{": "}",
    "[": "]",
    "(": ")",
}

NO_DELIMITER = 0

# str.isspace() also accepts the information separators, which are not white space
NOT_SPACE = "\x1c\x1d\x1e\x1f"


def is_space(c: str) -> bool:
    """Return True if c is a Unicode white space character."""
    return c.isspace() and c not in NOT_SPACE


def _trim(s: str) -> str:
    start, end = 0, len(s)
    while start < end and is_space(s[start]):
        start += 1
    while end > start and is_space(s[end - 1]):
        end -= 1
    return s[start:end]


class State(Enum):
    """Scanner state while reading a single token."""

    START = auto()  # Skipping leading spaces
    BARE_WORD = auto()  # Unquoted word, ends on whitespace
    QUOTED = auto()  # Inside a quoted string
    BRACKETED = auto()  # Inside a balanced bracket group


class Token(NamedTuple):
    """A token and the code point of the character that terminated it."""

    text: str
    delim: int = NO_DELIMITER


class Scanner:
    """
    Split input into shell-like tokens, one token per next_token() call.

    Rules:
    - Whitespace separates tokens
    - Backquotes (`), single quotes (') and double quotes (") group tokens
    - Backslash (\\) escapes the next character
    - Quotes are removed from tokens
    - A token starting with {, [ or ( runs until the matching bracket,
      brackets included
    - A token starting with |, >, <, or # takes the rest of the input as is
    """

    def __init__(self, source: SourceLike):
        self._in = CharSource(source)

    def __iter__(self) -> Iterator[Token]:
        while True:
            token = self.next_token()
            if token is None:
                return
            yield token

    def next_token(self) -> Optional[Token]:
        """
        Read the next token from the input.

        Returns:
            The token and its delimiter, or None when the input is exhausted
        """
        buf: list[str] = []
        state = State.START
        escape = False
        quote: Optional[str] = None
        brackets: list[str] = []  # stack of pending closing brackets
        delim = NO_DELIMITER

        while True:
            c = self._in.read()
            if not c:
                # Unterminated quotes and brackets are closed silently
                if buf:
                    return Token("".join(buf), NO_DELIMITER)
                return None

            # If escaping, just add the character
            if escape:
                escape = False
                buf.append(c)
                continue

            if c == ESCAPE_CHAR:
                escape = True
                if state is State.START:
                    state = State.BARE_WORD
                continue

            if state is State.START:
                # Skip leading spaces
                if is_space(c):
                    continue

                if c in QUOTE_CHARS:
                    quote = c
                    state = State.QUOTED
                    continue

                if c in BRACKETS:
                    # The delimiter of a bracket group is the opening bracket
                    delim = ord(c)
                    brackets.append(BRACKETS[c])
                    buf.append(c)
                    state = State.BRACKETED
                    continue

                if c in SYMBOL_CHARS:
                    # A symbol takes all the remaining characters
                    buf.append(c)
                    buf.append(self._in.read_rest())
                    return Token("".join(buf), NO_DELIMITER)

                state = State.BARE_WORD

            if state is State.BARE_WORD:
                if is_space(c):
                    return Token("".join(buf), ord(c))

                if c in QUOTE_CHARS:
                    quote = c
                    state = State.QUOTED
                    continue

                buf.append(c)

            elif state is State.QUOTED:
                # Close quote and terminate
                if c == quote:
                    return Token("".join(buf), ord(c))

                buf.append(c)

            else:
                buf.append(c)

                if quote is not None:
                    if c == quote:
                        quote = None
                elif c == brackets[-1]:
                    brackets.pop()
                    if not brackets:
                        return Token("".join(buf), delim)
                elif c in QUOTE_CHARS:
                    quote = c
                elif c in BRACKETS:
                    brackets.append(BRACKETS[c])

    def all_tokens(self) -> list[str]:
        """Return all the remaining tokens."""
        tokens, _ = self._get_tokens(0)
        return tokens

    def first_n_tokens(self, n: int) -> tuple[list[str], str]:
        """
        Return at most n tokens and the rest of the input.

        Args:
            n: Maximum number of tokens; n <= 0 reads all of them

        Returns:
            The tokens and the untokenized remainder, stripped of surrounding
            whitespace
        """
        return self._get_tokens(n)

    def option_tokens(self) -> tuple[list[str], str]:
        """
        Return the leading option tokens (tokens starting with "-").

        Scanning stops at the first token that is not an option; the input
        from that point on is returned untokenized and stripped.
        """
        tokens: list[str] = []

        while True:
            c = self._in.read()
            if not c:
                return tokens, ""

            # Skip spaces until the next token
            if is_space(c):
                continue

            self._in.unread()
            if c != OPTION_CHAR:
                return tokens, _trim(self._in.read_rest())

            token = self.next_token()
            tokens.append(token.text)

    def _get_tokens(self, limit: int) -> tuple[list[str], str]:
        tokens: list[str] = []

        while limit <= 0 or len(tokens) < limit:
            token = self.next_token()
            if token is None:
                return tokens, ""
            tokens.append(token.text)

        return tokens, _trim(self._in.read_rest())


def split(line: str) -> list[str]:
    """
    Split a line into tokens, handling quotes, escapes and brackets.

    Args:
        line: The line to split

    Returns:
        List of parsed tokens
    """
    return Scanner(line).all_tokens()


def split_n(line: str, n: int) -> tuple[list[str], str]:
    """Split at most n tokens from a line and return them with the rest of the line."""
    return Scanner(line).first_n_tokens(n)


def split_options(line: str) -> tuple[list[str], str]:
    """Split the leading options from a line and return them with the rest of the line."""
    return Scanner(line).option_tokens()
