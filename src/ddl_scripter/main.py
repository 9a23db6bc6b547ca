import argparse
import sys

from ddl_scripter.config import DEFAULT_OPTIONS
from ddl_scripter.database_objects import DataException
from ddl_scripter.mysql_ddl_parser import MySqlDdlParser
from ddl_scripter.options import Options
from ddl_scripter.serialization import write_schema


def main(argv: list[str] = None) -> int:
    parser = argparse.ArgumentParser(description="DDL Scripter")
    parser.add_argument('--ddl-file',
                        help='MySQL ddl script',
                        dest='ddl_file',
                        required=True)
    parser.add_argument('--schema-file',
                        help='Schema file',
                        dest='schema_file')
    parser.add_argument('--options',
                        help='Parser options, e.g. relaxed-table-options=True;extended-types=True',
                        dest='options',
                        default=DEFAULT_OPTIONS)
    parser.add_argument('--operation',
                        help='Operation',
                        type=str.lower,
                        required=True,
                        choices=['parse-ddl', 'export-schema'])

    args = parser.parse_args(argv)
    if args.operation == "export-schema" and not args.schema_file:
        parser.error("--schema-file is required for export-schema")

    ddl_parser = MySqlDdlParser(Options(args.options))

    print("Parsing ddl....")
    try:
        database = ddl_parser.parse_file(args.ddl_file)
    except (DataException, FileNotFoundError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.operation == "parse-ddl":
        for table in database.tables:
            print(table)
            for column in table.columns:
                print(f"\t{column}")

    elif args.operation == "export-schema":
        print("Writing schema....")
        write_schema(database, args.schema_file)

    return 0


if __name__ == "__main__":
    sys.exit(main())
