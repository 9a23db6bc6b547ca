from ddl_scripter.database_objects import DataType, DataTypeKind
from ddl_scripter.ddl_lexer import keyword, keywords, char, identifier, unsigned_integer, whitespace0, whitespace1, \
    optional, alternative, sequence, preceded, map_result
from ddl_scripter.parse_result import Cursor, ParseResult, Success, Failure, as_cursor

# longest first, "int" must be tried after the other members of the family
INT_KEYWORDS = [
    ("bigint", DataTypeKind.BigInt),
    ("smallint", DataTypeKind.SmallInt),
    ("tinyint", DataTypeKind.TinyInt),
    ("int", DataTypeKind.Int),
]

MAX_DECIMAL_PRECISION = 255
MAX_TYPE_WIDTH = 2 ** 32 - 1

# int_size ::= '(' <integer> ')'
type_int_size = map_result(
    sequence(whitespace0, char("("), whitespace0, unsigned_integer, whitespace0, char(")")),
    lambda values: values[3])

type_int_modifier = preceded(whitespace1, alternative(keyword("unsigned"), keyword("zerofill")))

type_charset = preceded(whitespace1, preceded(alternative(keywords("character", "set"), keyword("charset")),
                                              preceded(whitespace1, identifier)))

# collate ::= 'COLLATE' <identifier>
type_collate = preceded(whitespace1, preceded(keyword("collate"), preceded(whitespace1, identifier)))


def type_some_int(input: str | Cursor) -> ParseResult:
    """
    some_int ::= 'BIGINT' | 'SMALLINT' | 'TINYINT' | 'INT' [<int_size>] ['UNSIGNED'] ['ZEROFILL']
    Width and modifiers are consumed and dropped.
    """
    cursor = as_cursor(input)
    for name, kind in INT_KEYWORDS:
        result = keyword(name)(cursor)
        if result:
            rest = optional(type_int_size)(result.cursor).cursor
            rest = optional(type_int_modifier)(rest).cursor
            rest = optional(type_int_modifier)(rest).cursor
            return Success(rest, DataType(kind))
    return Failure(cursor)


def type_varchar(input: str | Cursor) -> ParseResult:
    """ varchar ::= 'VARCHAR' <int_size> [<charset>] [<collate>], width fits in 32 bits """
    cursor = as_cursor(input)
    result = sequence(keyword("varchar"), type_int_size, optional(type_charset), optional(type_collate))(cursor)
    if not result:
        return result
    width = result.value[1]
    if width > MAX_TYPE_WIDTH:
        return Failure(cursor)
    return Success(result.cursor, DataType(DataTypeKind.VarChar, width))


def type_datetime(input: str | Cursor) -> ParseResult:
    """ datetime ::= 'DATETIME' [<int_size>], precision 0 when absent """
    cursor = as_cursor(input)
    result = sequence(keyword("datetime"), optional(type_int_size))(cursor)
    if not result:
        return result
    precision = result.value[1] if result.value[1] is not None else 0
    if precision > MAX_TYPE_WIDTH:
        return Failure(cursor)
    return Success(result.cursor, DataType(DataTypeKind.DateTime, precision))


def type_decimal(input: str | Cursor) -> ParseResult:
    """ decimal ::= 'DECIMAL' '(' <precision> [',' <scale>] ')', scale is dropped """
    cursor = as_cursor(input)
    result = sequence(keyword("decimal"), whitespace0, char("("), whitespace0, unsigned_integer,
                      optional(sequence(whitespace0, char(","), whitespace0, unsigned_integer)),
                      whitespace0, char(")"))(cursor)
    if not result:
        return result
    precision = result.value[4]
    if precision > MAX_DECIMAL_PRECISION:
        return Failure(cursor)
    return Success(result.cursor, DataType(DataTypeKind.Decimal, precision))


def type_text(input: str | Cursor) -> ParseResult:
    """ text ::= 'TEXT' | 'BIGTEXT' [<charset>] [<collate>] """
    result = alternative(map_result(keyword("text"), lambda _: DataTypeKind.Text),
                         map_result(keyword("bigtext"), lambda _: DataTypeKind.BigText))(input)
    if not result:
        return result
    rest = optional(type_charset)(result.cursor).cursor
    rest = optional(type_collate)(rest).cursor
    return Success(rest, DataType(result.value))


def parse_data_type(input: str | Cursor, extended_types: bool = False) -> ParseResult:
    """
    data_type ::= <some_int> | <varchar> | <datetime> | <decimal>
    With extended_types the text family is tried last.
    """
    parsers = [type_some_int, type_varchar, type_datetime, type_decimal]
    if extended_types:
        parsers.append(type_text)
    return alternative(*parsers)(input)
