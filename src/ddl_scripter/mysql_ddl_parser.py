import os.path
from typing import List

from ddl_scripter.common import clean_script, split_statements, strip_leading_comments, read_file, get_fullname, \
    get_filename
from ddl_scripter.config import DEFAULT_OPTIONS
from ddl_scripter.data_types import parse_data_type, type_int_size
from ddl_scripter.database_objects import Column, DatatypeException, Database, DdlParseException, \
    DefaultValue, DefaultValueKind, Index, IndexKind, Line, TableOption, TableSchema
from ddl_scripter.ddl_lexer import keyword, keywords, char, identifier, quoted_string, unsigned_integer, whitespace0, \
    whitespace1, optional, alternative, sequence, preceded, map_result, many1
from ddl_scripter.logger import setup_logger
from ddl_scripter.options import Options
from ddl_scripter.parse_result import Cursor, ParseResult, Success, Failure, as_cursor

logger = setup_logger("ddl_parser")

# default values

null_clause = preceded(whitespace1, alternative(keywords("not", "null"), keyword("null")))

current_timestamp = sequence(keyword("current_timestamp"), optional(type_int_size))

on_update_clause = sequence(whitespace1, keywords("on", "update"), whitespace1, current_timestamp)


def default_int(input: str | Cursor) -> ParseResult:
    return map_result(sequence(keyword("default"), whitespace1, unsigned_integer),
                      lambda values: DefaultValue(DefaultValueKind.Int, values[2]))(input)


def default_str(input: str | Cursor) -> ParseResult:
    return map_result(sequence(keyword("default"), whitespace1, quoted_string),
                      lambda values: DefaultValue(DefaultValueKind.Str, values[2]))(input)


def default_null(input: str | Cursor) -> ParseResult:
    return map_result(keywords("default", "null"), lambda _: DefaultValue(DefaultValueKind.Null))(input)


def default_current_timestamp(input: str | Cursor) -> ParseResult:
    result = sequence(keyword("default"), whitespace1, current_timestamp, optional(on_update_clause))(input)
    if not result:
        return result
    if result.value[3] is not None:
        return Success(result.cursor, DefaultValue(DefaultValueKind.CurrentTimestampOnUpdate))
    return Success(result.cursor, DefaultValue(DefaultValueKind.CurrentTimestamp))


def auto_increment(input: str | Cursor) -> ParseResult:
    return map_result(keyword("auto_increment"), lambda _: DefaultValue(DefaultValueKind.AutoIncrement))(input)


def parse_default_literal(input: str | Cursor) -> ParseResult:
    """
    default_literal ::= 'DEFAULT' <integer> | 'DEFAULT' <quoted_string> | 'DEFAULT' 'NULL'
                      | 'DEFAULT' 'CURRENT_TIMESTAMP' ['ON' 'UPDATE' 'CURRENT_TIMESTAMP'] | 'AUTO_INCREMENT'
    The value is the alternative that matched.
    """
    return preceded(whitespace1, alternative(default_int, default_str, default_null, default_current_timestamp,
                                             auto_increment))(input)


def parse_default_clause(input: str | Cursor) -> ParseResult:
    """
    default_clause ::= ['NOT' 'NULL' | 'NULL'] [<default_literal>]
    Never fails. Any matched default literal is reported as Null, no literal at all as NoDefault.
    """
    rest = optional(null_clause)(input).cursor
    result = parse_default_literal(rest)
    if result:
        return Success(result.cursor, DefaultValue(DefaultValueKind.Null))
    return Success(rest, DefaultValue(DefaultValueKind.NoDefault))


# columns

comment_clause = preceded(whitespace1, preceded(keyword("comment"), preceded(whitespace0, quoted_string)))


def line_terminator(input: str | Cursor) -> ParseResult:
    """ ',' or, for the last body line, the closing parenthesis which is left in place """
    cursor = as_cursor(input)
    result = char(",")(cursor)
    if result:
        return result
    if cursor.startswith(")"):
        return Success(cursor, None)
    return Failure(cursor)


def parse_column_definition(input: str | Cursor, extended_types: bool = False) -> ParseResult:
    """
    column_definition ::= <identifier> <data_type> <default_clause> ['COMMENT' <quoted_string>] ','
    """
    result = sequence(whitespace0, identifier, whitespace1,
                      lambda rest: parse_data_type(rest, extended_types=extended_types),
                      parse_default_clause, optional(comment_clause),
                      whitespace0, line_terminator, whitespace0)(input)
    if not result:
        return result

    name = result.value[1]
    data_type = result.value[3]
    comment = result.value[5]
    return Success(result.cursor, Column(name, data_type, comment if comment is not None else ""))


# indexes

index_prefix = alternative(map_result(keyword("primary"), lambda _: IndexKind.Primary),
                           map_result(keyword("unique"), lambda _: IndexKind.Unique))

index_column = sequence(whitespace0, identifier, optional(type_int_size),
                        optional(preceded(whitespace1, alternative(keyword("asc"), keyword("desc")))),
                        whitespace0, optional(char(",")))

index_column_list = map_result(sequence(char("("), many1(index_column), whitespace0, char(")")),
                               lambda values: [column[1] for column in values[1]])

index_using = preceded(whitespace1, preceded(keyword("using"), preceded(whitespace1, alternative(keyword("btree"),
                                                                                                keyword("hash")))))


def parse_index_definition(input: str | Cursor) -> ParseResult:
    """
    index_definition ::= ['PRIMARY' | 'UNIQUE'] 'KEY' | 'INDEX' [<identifier>] '(' <identifier> [',' ...] ')'
                         ['USING' 'BTREE' | 'HASH'] [',']
    A missing PRIMARY/UNIQUE prefix gives a Normal index.
    """
    result = sequence(whitespace0,
                      optional(sequence(index_prefix, whitespace1)),
                      alternative(keyword("key"), keyword("index")),
                      whitespace0,
                      optional(identifier),
                      whitespace0,
                      index_column_list,
                      optional(index_using),
                      whitespace0, optional(char(",")), whitespace0)(input)
    if not result:
        return result

    prefix = result.value[1]
    kind = prefix[0] if prefix is not None else IndexKind.Normal
    name = result.value[4] if result.value[4] is not None else ""
    using_type = result.value[7].upper() if result.value[7] is not None else None
    return Success(result.cursor, Index(name, kind, result.value[6], using_type))


def parse_body_line(input: str | Cursor, extended_types: bool = False) -> ParseResult:
    """ index first, so a KEY line is never read as a column called key """
    result = parse_index_definition(input)
    if result:
        return result
    return parse_column_definition(input, extended_types=extended_types)


# table options

def option_value(name_parser, value_parser=identifier):
    """ <name> ['='] <value> """
    return map_result(sequence(name_parser, whitespace0, optional(char("=")), whitespace0, value_parser),
                      lambda values: values[4])


default_prefix = optional(sequence(keyword("default"), whitespace1))

engine_option = option_value(keyword("engine"))
charset_option = option_value(preceded(default_prefix, alternative(keywords("character", "set"), keyword("charset"))))
collate_option = option_value(preceded(default_prefix, keyword("collate")))
comment_option = option_value(keyword("comment"), quoted_string)

# only accepted in relaxed mode, values are dropped
auto_increment_option = option_value(keyword("auto_increment"), unsigned_integer)
row_format_option = option_value(keyword("row_format"))


def parse_table_options(input: str | Cursor) -> ParseResult:
    """
    table_options ::= 'ENGINE' ['='] <identifier> ['DEFAULT'] 'CHARSET' | 'CHARACTER SET' ['='] <identifier>
                      ['DEFAULT'] 'COLLATE' ['='] <identifier> 'COMMENT' ['='] <quoted_string>
    All four are required, in this order.
    """
    result = sequence(whitespace0, engine_option, whitespace1, charset_option, whitespace1, collate_option,
                      whitespace1, comment_option)(input)
    if not result:
        return result
    return Success(result.cursor, TableOption(result.value[1], result.value[3], result.value[5], result.value[7]))


def parse_table_options_relaxed(input: str | Cursor) -> ParseResult:
    """
    Same options in any order, any of them may be missing. AUTO_INCREMENT and ROW_FORMAT are skipped.
    Never fails.
    """
    named_option = alternative(map_result(engine_option, lambda value: ("engine", value)),
                               map_result(charset_option, lambda value: ("charset", value)),
                               map_result(collate_option, lambda value: ("collate", value)),
                               map_result(comment_option, lambda value: ("comment", value)),
                               map_result(auto_increment_option, lambda _: None),
                               map_result(row_format_option, lambda _: None))
    values = {}
    rest = as_cursor(input)
    while True:
        result = preceded(whitespace0, named_option)(rest)
        if not result:
            break
        if result.value is not None:
            values[result.value[0]] = result.value[1]
        rest = result.cursor

    return Success(rest, TableOption(**values))


# statement

def parse_create_table(input: str | Cursor, relaxed_table_options: bool = False,
                       extended_types: bool = False) -> ParseResult:
    """
    create_table ::= 'CREATE' 'TABLE' ['IF' 'NOT' 'EXISTS'] <identifier> '(' <body_line> [<body_line> ...] ')'
                     <table_options>
    Value is the tuple (table_name, lines, options). A Failure carries the input of the step that failed.
    """
    rest = whitespace0(input).cursor

    result = keyword("create")(rest)
    if not result:
        return result

    result = sequence(whitespace1, optional(sequence(keyword("temporary"), whitespace1)),
                      keyword("table"), whitespace1)(result.cursor)
    if not result:
        return result

    rest = optional(sequence(keywords("if", "not", "exists"), whitespace1))(result.cursor).cursor

    result = identifier(rest)
    if not result:
        return result
    table_name = result.value

    result = sequence(whitespace0, char("("), whitespace0)(result.cursor)
    if not result:
        return result

    lines: List[Line] = []
    rest = result.cursor
    while True:
        result = parse_body_line(rest, extended_types=extended_types)
        if not result:
            break
        lines.append(result.value)
        rest = result.cursor

    if len(lines) == 0:
        return Failure(rest)

    result = sequence(whitespace0, char(")"))(rest)
    if not result:
        return result

    if relaxed_table_options:
        result = parse_table_options_relaxed(result.cursor)
    else:
        result = parse_table_options(result.cursor)
    if not result:
        return result

    return Success(result.cursor, (table_name, lines, result.value))


def project_schema(table_name: str, lines: List[Line], options: TableOption) -> TableSchema:
    """ keeps the column lines, in order """
    columns: List[Column] = []
    for line in lines:
        if isinstance(line, Column):
            columns.append(line)
        elif isinstance(line, Index):
            continue
        else:
            raise DatatypeException(f"Unknown body line {line!r}")
    return TableSchema(table_name, columns, options)


def parse_table_schema(input: str | Cursor, relaxed_table_options: bool = False,
                       extended_types: bool = False) -> ParseResult:
    result = parse_create_table(input, relaxed_table_options=relaxed_table_options, extended_types=extended_types)
    if not result:
        return result
    table_name, lines, options = result.value
    return Success(result.cursor, project_schema(table_name, lines, options))


def is_create_table(statement: str) -> bool:
    return bool(sequence(whitespace0, keyword("create"), whitespace1,
                         optional(sequence(keyword("temporary"), whitespace1)), keyword("table"))(statement))


class MySqlDdlParser(object):
    """
    create_table ::= 'CREATE' ['TEMPORARY'] 'TABLE' ['IF' 'NOT' 'EXISTS'] <identifier> '(' <body_line> [...] ')' <table_options>
    body_line ::= <index_definition> | <column_definition>
    index_definition ::= ['PRIMARY' | 'UNIQUE'] 'KEY' [<identifier>] '(' <identifier> [',' ...] ')' ['USING' 'BTREE' | 'HASH'] [',']
    column_definition ::= <identifier> <data_type> ['NOT' 'NULL' | 'NULL'] [<default>] ['COMMENT' <quoted_string>] ','
    data_type ::= <int_type> [(<size>)] ['UNSIGNED'] | 'VARCHAR' (<size>) ['COLLATE' <identifier>] | 'DATETIME' [(<precision>)] | 'DECIMAL' (<precision>)
    default ::= 'DEFAULT' <integer> | 'DEFAULT' <quoted_string> | 'DEFAULT' 'NULL' | 'DEFAULT' 'CURRENT_TIMESTAMP' ['ON' 'UPDATE' 'CURRENT_TIMESTAMP'] | 'AUTO_INCREMENT'
    table_options ::= 'ENGINE' ['='] <identifier> ['DEFAULT'] 'CHARSET' ['='] <identifier> ['DEFAULT'] 'COLLATE' ['='] <identifier> 'COMMENT' ['='] <quoted_string>
    identifier ::= ['`'] <literal> ['`']
    quoted_string ::= '\'' | '"' <literal> '\'' | '"'
    """
    options: Options
    relaxed_table_options: bool
    extended_types: bool

    def __init__(self, options: Options = None):
        self.options = options if options is not None else Options(DEFAULT_OPTIONS)
        self.relaxed_table_options = self.options.flag("relaxed-table-options")
        self.extended_types = self.options.flag("extended-types")

    def parse(self, sql: str) -> TableSchema:
        """
        Parses one CREATE TABLE statement. A trailing ; and whitespace are tolerated.
        :raises DdlParseException: with the unparsed remainder
        """
        result = parse_table_schema(sql, relaxed_table_options=self.relaxed_table_options,
                                    extended_types=self.extended_types)
        if not result:
            logger.debug(f"Statement failed near {result.remaining[:40]!r}")
            raise DdlParseException(result.remaining)

        rest = result.remaining.strip()
        if rest.startswith(";"):
            rest = rest[1:].strip()
        if rest != "":
            logger.debug(f"Unexpected text after statement {rest[:40]!r}")
            raise DdlParseException(rest)

        return result.value

    def parse_script(self, script: str, name: str = "") -> Database:
        """
        Parses every CREATE TABLE statement of a script, other statements are skipped
        """
        database = Database(name)
        for statement in split_statements(clean_script(script)):
            statement = strip_leading_comments(statement)
            if not is_create_table(statement):
                logger.warning(f"Skipping statement {statement[:40]!r}")
                continue
            database.tables.append(self.parse(statement))

        logger.info(f"Parsed {len(database.tables)} tables")
        return database

    def parse_file(self, path: str) -> Database:
        if not os.path.exists(get_fullname(path)):
            raise FileNotFoundError(f"DDL file not found: {path}")

        logger.info(f"Parsing ddl file {path}")
        return self.parse_script(read_file(path), name=get_filename(path))
