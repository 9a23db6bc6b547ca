from sb_serializer import Naming, HardSerializer

from ddl_scripter.common import write_file
from ddl_scripter.config import DICTIONARY_FILENAME, BIG_DICTIONARY_FILENAME
from ddl_scripter.database_objects import Database

naming = Naming(DICTIONARY_FILENAME, BIG_DICTIONARY_FILENAME)
serializer = HardSerializer(naming=naming)


def export_schema(database: Database) -> str:
    return serializer.serialize(database, True)


def write_schema(database: Database, schema_file: str):
    write_file(schema_file, export_schema(database))
