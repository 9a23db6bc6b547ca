from typing import Any, Callable


class Cursor(object):
    """
    Position inside the statement text.
    Parsers move the position forward, the text itself is never copied.
    """
    text: str
    pos: int

    def __init__(self, text: str, pos: int = 0):
        self.text = text
        self.pos = pos

    def peek(self, offset: int = 0) -> str:
        index = self.pos + offset
        if index < len(self.text):
            return self.text[index]
        return ""

    def take(self, length: int) -> str:
        return self.text[self.pos:self.pos + length]

    def startswith(self, prefix: str) -> bool:
        return self.text.startswith(prefix, self.pos)

    def advance(self, length: int) -> 'Cursor':
        return Cursor(self.text, self.pos + length)

    def rest(self) -> str:
        return self.text[self.pos:]

    def __len__(self):
        return len(self.text) - self.pos

    def __repr__(self):
        return f"Cursor({self.rest()[:40]!r})"


def as_cursor(input: str | Cursor) -> Cursor:
    if isinstance(input, Cursor):
        return input
    return Cursor(input)


class ParseResult(object):
    """
    Outcome of a grammar function.
    Success carries the unconsumed remainder and the parsed value,
    Failure carries the input the failing parser was called with.
    """
    cursor: Cursor

    def __init__(self, remaining: str | Cursor):
        self.cursor = as_cursor(remaining)

    @property
    def remaining(self) -> str:
        return self.cursor.rest()

    def __bool__(self):
        return isinstance(self, Success)


class Success(ParseResult):
    value: Any

    def __init__(self, remaining: str | Cursor, value: Any):
        super().__init__(remaining)
        self.value = value

    def __iter__(self):
        return iter((self.remaining, self.value))

    def __repr__(self):
        return f"Success({self.remaining!r}, {self.value!r})"

    def __eq__(self, other):
        if not isinstance(other, Success):
            return False
        return self.remaining == other.remaining and self.value == other.value

    def __hash__(self):
        return hash((self.remaining, repr(self.value)))


class Failure(ParseResult):

    def __repr__(self):
        return f"Failure({self.remaining!r})"

    def __eq__(self, other):
        if not isinstance(other, Failure):
            return False
        return self.remaining == other.remaining

    def __hash__(self):
        return hash(self.remaining)


Parser = Callable[[str | Cursor], ParseResult]
