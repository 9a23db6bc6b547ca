from typing import Any, Callable

from ddl_scripter.parse_result import Cursor, ParseResult, Success, Failure, Parser, as_cursor

ESCAPED_CHARS = {
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "\\": "\\",
    "/": "/",
    "\"": "\"",
    "'": "'",
}
QUOTE_CHARS = "'\""
RAW_CONTROL_CHARS = "\n\r\t"


def is_identifier_char(c: str) -> bool:
    return c.isalnum() or c == "_"


def is_digit_char(c: str) -> bool:
    return c != "" and "0" <= c <= "9"


def keyword(text: str) -> Parser:
    """
    Case-insensitive match of text, ASCII letters only.
    A keyword ending in a word character must not be followed by another word character,
    so KEY does not match the start of KEYS.
    """
    length = len(text)
    lowered = text.lower()
    needs_boundary = is_identifier_char(text[-1])

    def parse(input: str | Cursor) -> ParseResult:
        cursor = as_cursor(input)
        prefix = cursor.take(length)
        if len(prefix) != length or not prefix.isascii() or prefix.lower() != lowered:
            return Failure(cursor)
        if needs_boundary and is_identifier_char(cursor.peek(length)):
            return Failure(cursor)
        return Success(cursor.advance(length), prefix)

    return parse


def keywords(*texts: str) -> Parser:
    """ Several keywords separated by whitespace, e.g. keywords("NOT", "NULL") """
    parsers = []
    for i, text in enumerate(texts):
        if i > 0:
            parsers.append(whitespace1)
        parsers.append(keyword(text))
    return map_result(sequence(*parsers), lambda values: " ".join(values[::2]).upper())


def char(c: str) -> Parser:
    def parse(input: str | Cursor) -> ParseResult:
        cursor = as_cursor(input)
        if cursor.startswith(c):
            return Success(cursor.advance(len(c)), c)
        return Failure(cursor)

    return parse


def whitespace_length(cursor: Cursor) -> int:
    end = 0
    while cursor.peek(end).isspace():
        end += 1
    return end


def whitespace0(input: str | Cursor) -> ParseResult:
    cursor = as_cursor(input)
    end = whitespace_length(cursor)
    return Success(cursor.advance(end), cursor.take(end))


def whitespace1(input: str | Cursor) -> ParseResult:
    cursor = as_cursor(input)
    end = whitespace_length(cursor)
    if end == 0:
        return Failure(cursor)
    return Success(cursor.advance(end), cursor.take(end))


def unsigned_integer(input: str | Cursor) -> ParseResult:
    cursor = as_cursor(input)
    end = 0
    while is_digit_char(cursor.peek(end)):
        end += 1
    if end == 0:
        return Failure(cursor)
    return Success(cursor.advance(end), int(cursor.take(end)))


def identifier(input: str | Cursor) -> ParseResult:
    """
    identifier ::= ['`'] <word_char> [<word_char> ...] ['`']
    The backticks are stripped from the value.
    """
    cursor = as_cursor(input)
    start = 1 if cursor.startswith("`") else 0

    end = start
    while is_identifier_char(cursor.peek(end)):
        end += 1
    if end == start:
        return Failure(cursor)

    name = cursor.advance(start).take(end - start)
    if cursor.peek(end) == "`":
        end += 1
    return Success(cursor.advance(end), name)


def quoted_string(input: str | Cursor) -> ParseResult:
    """
    quoted_string ::= <quote> [<normal_char> | '\\' <escape_char> ...] <quote>
    quote is ' or " and the closing quote must match the opening one.
    An unescaped quote of either kind, a raw newline/tab or an unknown escape fails the string.
    """
    cursor = as_cursor(input)
    quote = cursor.peek()
    if quote == "" or quote not in QUOTE_CHARS:
        return Failure(cursor)

    chars: list[str] = []
    index = 1
    while index < len(cursor):
        c = cursor.peek(index)
        if c == quote:
            return Success(cursor.advance(index + 1), "".join(chars))
        elif c == "\\":
            escaped = cursor.peek(index + 1)
            if escaped == "" or escaped not in ESCAPED_CHARS:
                return Failure(cursor)
            chars.append(ESCAPED_CHARS[escaped])
            index += 2
        elif c in QUOTE_CHARS or c in RAW_CONTROL_CHARS:
            return Failure(cursor)
        else:
            chars.append(c)
            index += 1

    return Failure(cursor)


def optional(parser: Parser) -> Parser:
    """ Never fails: an absent match is Success(input, None) """

    def parse(input: str | Cursor) -> ParseResult:
        cursor = as_cursor(input)
        result = parser(cursor)
        if result:
            return result
        return Success(cursor, None)

    return parse


def alternative(*parsers: Parser) -> Parser:
    """ First parser that succeeds wins """

    def parse(input: str | Cursor) -> ParseResult:
        cursor = as_cursor(input)
        for parser in parsers:
            result = parser(cursor)
            if result:
                return result
        return Failure(cursor)

    return parse


def sequence(*parsers: Parser) -> Parser:
    """ All parsers in order, value is the tuple of their values """

    def parse(input: str | Cursor) -> ParseResult:
        cursor = as_cursor(input)
        values = []
        rest = cursor
        for parser in parsers:
            result = parser(rest)
            if not result:
                return Failure(cursor)
            rest = result.cursor
            values.append(result.value)
        return Success(rest, tuple(values))

    return parse


def preceded(first: Parser, second: Parser) -> Parser:
    return map_result(sequence(first, second), lambda values: values[1])


def map_result(parser: Parser, func: Callable[[Any], Any]) -> Parser:
    def parse(input: str | Cursor) -> ParseResult:
        result = parser(input)
        if not result:
            return result
        return Success(result.cursor, func(result.value))

    return parse


def many1(parser: Parser) -> Parser:
    """ One or more matches, stops on failure or when nothing was consumed """

    def parse(input: str | Cursor) -> ParseResult:
        cursor = as_cursor(input)
        values = []
        rest = cursor
        while True:
            result = parser(rest)
            if not result or result.cursor.pos == rest.pos:
                break
            values.append(result.value)
            rest = result.cursor
        if len(values) == 0:
            return Failure(cursor)
        return Success(rest, values)

    return parse
