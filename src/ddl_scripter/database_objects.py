from enum import Enum
from typing import List, Union


class DataException(Exception):
    ...


class DatatypeException(DataException):
    ...


class DdlParseException(DataException):
    """
    Raised when a statement cannot be parsed.
    Only the unparsed remainder is known, never the reason.
    """
    remaining: str

    def __init__(self, remaining: str):
        super().__init__(f"Could not parse ddl near: {remaining[:40]!r}")
        self.remaining = remaining


class DataTypeKind:
    ...


class DataTypeKind(Enum):
    TinyInt = 1
    SmallInt = 2
    Int = 3
    BigInt = 4
    VarChar = 5
    DateTime = 6
    Text = 7
    BigText = 8
    Decimal = 9
    Unknown = 10

    @classmethod
    def get_kind(cls, value: str) -> DataTypeKind:
        value = value.lower()
        for kind in DataTypeKind:
            if kind.name.lower() == value:
                return kind
        raise DatatypeException(f"Unknown data type {value}")

    def __str__(self):
        return self.name.upper()


class DataType(object):
    """
    Column data type.
    size holds the width for VarChar and the precision for DateTime and Decimal, 0 otherwise.
    """
    kind: DataTypeKind
    size: int

    def __init__(self, kind: DataTypeKind = DataTypeKind.Unknown, size: int = 0):
        self.kind = kind
        self.size = size

    def __str__(self):
        if self.kind in (DataTypeKind.VarChar, DataTypeKind.DateTime, DataTypeKind.Decimal):
            return f"{str(self.kind)}({self.size})"
        return str(self.kind)

    def __repr__(self):
        return f"DataType({self.kind.name}, {self.size})"

    def __eq__(self, other):
        if not isinstance(other, DataType):
            return False
        return self.kind == other.kind and self.size == other.size

    def __hash__(self):
        return hash((self.kind, self.size))


class DefaultValueKind(Enum):
    NoDefault = 1
    Null = 2
    Int = 3
    Str = 4
    CurrentTimestamp = 5
    CurrentTimestampOnUpdate = 6
    AutoIncrement = 7
    Unknown = 8


class DefaultValue(object):
    """
    Default value of a column. value is only set for Int and Str.
    """
    kind: DefaultValueKind
    value: int | str | None

    def __init__(self, kind: DefaultValueKind = DefaultValueKind.NoDefault, value: int | str | None = None):
        self.kind = kind
        self.value = value

    def __str__(self):
        if self.value is None:
            return self.kind.name
        return f"{self.kind.name}({self.value})"

    def __repr__(self):
        return f"DefaultValue({self.kind.name}, {self.value!r})"

    def __eq__(self, other):
        if not isinstance(other, DefaultValue):
            return False
        return self.kind == other.kind and self.value == other.value

    def __hash__(self):
        return hash((self.kind, self.value))


class Column(object):
    """
    Column of a table. The default value is parsed but not kept here.
    """
    name: str
    type: DataType
    comment: str

    def __init__(self, name: str = "", type: DataType = None, comment: str = ""):
        self.name = name
        self.type = type if type is not None else DataType()
        self.comment = comment

    def __str__(self):
        return f"{self.name} {self.type}{' COMMENT ' + repr(self.comment) if self.comment else ''}"

    def __repr__(self):
        return f"Column({self.name!r}, {self.type!r}, {self.comment!r})"

    def __eq__(self, other):
        if not isinstance(other, Column):
            return False
        return self.name == other.name and self.type == other.type and self.comment == other.comment

    def __hash__(self):
        return hash((self.name, self.type, self.comment))


class IndexKind:
    ...


class IndexKind(Enum):
    Undefined = 0
    Primary = 1
    Unique = 2
    Normal = 3

    @classmethod
    def get_kind(cls, value: str) -> IndexKind:
        value = value.lower()
        if value == "undefined":
            return IndexKind.Undefined
        elif value == "primary" or value == "primary key":
            return IndexKind.Primary
        elif value == "unique" or value == "unique key":
            return IndexKind.Unique
        elif value == "normal" or value == "key" or value == "index":
            return IndexKind.Normal
        else:
            raise DatatypeException(f"Unknown index kind {value}")

    def __str__(self):
        return self.name


class Index(object):
    """
    Key declared inside the table body: PRIMARY KEY, UNIQUE KEY or plain KEY
    """
    name: str
    using_type: str | None
    kind: IndexKind
    column_names: List[str]

    def __init__(self, name: str = "", kind: IndexKind = IndexKind.Undefined, column_names: List[str] = None,
                 using_type: str | None = None):
        self.name = name
        self.kind = kind
        self.column_names: List[str] = column_names if column_names is not None else []
        self.using_type = using_type

    def __str__(self):
        return f"{str(self.kind)} {self.name} ({','.join(self.column_names)})" \
               f"{' USING ' + self.using_type if self.using_type else ''}"

    def __repr__(self):
        return f"Index({self.name!r}, {self.kind.name}, {self.column_names!r}, {self.using_type!r})"

    def __eq__(self, other):
        if not isinstance(other, Index):
            return False
        return (self.name == other.name and self.kind == other.kind and self.column_names == other.column_names
                and self.using_type == other.using_type)

    def __hash__(self):
        return hash((self.name, self.kind, tuple(self.column_names), self.using_type))


Line = Union[Column, Index]
"""
One body line of a CREATE TABLE statement, in declaration order
"""


class TableOption(object):
    engine: str
    charset: str
    collate: str
    comment: str

    def __init__(self, engine: str = "", charset: str = "", collate: str = "", comment: str = ""):
        self.engine = engine
        self.charset = charset
        self.collate = collate
        self.comment = comment

    def __str__(self):
        return f"ENGINE={self.engine} CHARSET={self.charset} COLLATE={self.collate} COMMENT={self.comment!r}"

    def __repr__(self):
        return f"TableOption({self.engine!r}, {self.charset!r}, {self.collate!r}, {self.comment!r})"

    def __eq__(self, other):
        if not isinstance(other, TableOption):
            return False
        return (self.engine == other.engine and self.charset == other.charset and self.collate == other.collate
                and self.comment == other.comment)

    def __hash__(self):
        return hash((self.engine, self.charset, self.collate, self.comment))


class TableSchema(object):
    """
    Parsed table: name, columns in declaration order and table options.
    Index lines are not part of the schema.
    """
    table_name: str
    columns: List[Column]
    options: TableOption

    def __init__(self, table_name: str = "", columns: List[Column] = None, options: TableOption = None):
        self.table_name = table_name
        self.columns: List[Column] = columns if columns is not None else []
        self.options = options if options is not None else TableOption()

    def find_column(self, name: str) -> Column:
        found_columns = [c for c in self.columns if c.name.lower() == name.lower()]
        if len(found_columns) > 0:
            return found_columns[0]
        else:
            raise DataException(f"Could not find column {name}")

    def __str__(self):
        return f"{self.table_name} ({len(self.columns)} columns) {self.options}"

    def __repr__(self):
        return f"TableSchema({self.table_name!r}, {self.columns!r}, {self.options!r})"

    def __eq__(self, other):
        if not isinstance(other, TableSchema):
            return False
        return self.table_name == other.table_name and self.columns == other.columns and self.options == other.options

    def __hash__(self):
        return hash((self.table_name, tuple(self.columns), self.options))


class Database(object):
    """
    All tables parsed from one ddl script
    """
    name: str
    tables: List[TableSchema]

    def __init__(self, name: str = "", tables: List[TableSchema] = None):
        self.name = name
        self.tables: List[TableSchema] = tables if tables is not None else []

    def get_table(self, name: str) -> TableSchema | None:
        result = [table for table in self.tables if table.table_name.lower() == name.lower()]
        if len(result) > 0:
            return result[0]
        return None

    def __eq__(self, other):
        if not isinstance(other, Database):
            return False
        return self.name == other.name and self.tables == other.tables

    def __hash__(self):
        return hash((self.name, tuple(self.tables)))
