import unittest

from ddl_scripter.database_objects import Column, DataType, DataTypeKind, DefaultValue, DefaultValueKind
from ddl_scripter.mysql_ddl_parser import parse_default_clause, parse_default_literal, parse_column_definition
from ddl_scripter.parse_result import Success, Failure


class TestDefaultClause(unittest.TestCase):

    def setUp(self):
        ...

    def test_default_is_reported_as_null(self):
        # every matched DEFAULT alternative collapses to Null, the literal itself is not kept
        self.assertEqual(parse_default_clause(" not null default 2"),
                         Success("", DefaultValue(DefaultValueKind.Null)))
        self.assertEqual(parse_default_clause(" DEFAULT 'abc'"), Success("", DefaultValue(DefaultValueKind.Null)))
        self.assertEqual(parse_default_clause(" NOT NULL AUTO_INCREMENT"),
                         Success("", DefaultValue(DefaultValueKind.Null)))
        self.assertEqual(parse_default_clause(" DEFAULT CURRENT_TIMESTAMP ON UPDATE CURRENT_TIMESTAMP"),
                         Success("", DefaultValue(DefaultValueKind.Null)))

    def test_no_default(self):
        self.assertEqual(parse_default_clause(" NOT NULL"), Success("", DefaultValue(DefaultValueKind.NoDefault)))
        self.assertEqual(parse_default_clause(" NULL,"), Success(",", DefaultValue(DefaultValueKind.NoDefault)))
        self.assertEqual(parse_default_clause(" NOT NULL COMMENT 'x'"),
                         Success(" COMMENT 'x'", DefaultValue(DefaultValueKind.NoDefault)))
        self.assertEqual(parse_default_clause(""), Success("", DefaultValue(DefaultValueKind.NoDefault)))

    def test_default_literal(self):
        self.assertEqual(parse_default_literal(" default 2"), Success("", DefaultValue(DefaultValueKind.Int, 2)))
        self.assertEqual(parse_default_literal(" DEFAULT 'abc'"),
                         Success("", DefaultValue(DefaultValueKind.Str, "abc")))
        self.assertEqual(parse_default_literal(" DEFAULT \"\""), Success("", DefaultValue(DefaultValueKind.Str, "")))
        self.assertEqual(parse_default_literal(" DEFAULT NULL"), Success("", DefaultValue(DefaultValueKind.Null)))
        self.assertEqual(parse_default_literal(" AUTO_INCREMENT COMMENT 'id'"),
                         Success(" COMMENT 'id'", DefaultValue(DefaultValueKind.AutoIncrement)))

    def test_default_current_timestamp(self):
        self.assertEqual(parse_default_literal(" DEFAULT CURRENT_TIMESTAMP"),
                         Success("", DefaultValue(DefaultValueKind.CurrentTimestamp)))
        self.assertEqual(parse_default_literal(" DEFAULT CURRENT_TIMESTAMP(3) ON UPDATE CURRENT_TIMESTAMP(3)"),
                         Success("", DefaultValue(DefaultValueKind.CurrentTimestampOnUpdate)))
        self.assertEqual(parse_default_literal(" default current_timestamp on update current_timestamp,"),
                         Success(",", DefaultValue(DefaultValueKind.CurrentTimestampOnUpdate)))

    def test_default_literal_failure(self):
        self.assertEqual(parse_default_literal(" COMMENT 'x'"), Failure(" COMMENT 'x'"))
        self.assertEqual(parse_default_literal(" DEFAULT"), Failure(" DEFAULT"))


class TestColumnDefinition(unittest.TestCase):

    def setUp(self):
        ...

    def test_column_with_comment(self):
        self.assertEqual(parse_column_definition("  `id` bigint NOT NULL COMMENT '主键',\n  PRIMARY KEY (`id`)"),
                         Success("PRIMARY KEY (`id`)", Column("id", DataType(DataTypeKind.BigInt), "主键")))

    def test_column_with_collate(self):
        self.assertEqual(
            parse_column_definition("`user_name` varchar(50) COLLATE utf8mb4_bin DEFAULT NULL COMMENT '用户名',\n"),
            Success("", Column("user_name", DataType(DataTypeKind.VarChar, 50), "用户名")))

    def test_column_datetime(self):
        self.assertEqual(parse_column_definition("`created_at` datetime(3) DEFAULT NULL COMMENT '创建时间',"),
                         Success("", Column("created_at", DataType(DataTypeKind.DateTime, 3), "创建时间")))

    def test_column_without_comment(self):
        self.assertEqual(parse_column_definition("id INT NOT NULL,\n    cv1"),
                         Success("cv1", Column("id", DataType(DataTypeKind.Int), "")))
        self.assertEqual(parse_column_definition("cv1 VARCHAR(20) DEFAULT \"\","),
                         Success("", Column("cv1", DataType(DataTypeKind.VarChar, 20))))

    def test_column_double_quoted_comment(self):
        self.assertEqual(parse_column_definition("id int not null default 1 comment \"主键\","),
                         Success("", Column("id", DataType(DataTypeKind.Int), "主键")))

    def test_auto_increment_column(self):
        self.assertEqual(
            parse_column_definition("`id` bigint(20) unsigned NOT NULL AUTO_INCREMENT COMMENT 'id',"),
            Success("", Column("id", DataType(DataTypeKind.BigInt), "id")))

    def test_last_column(self):
        self.assertEqual(parse_column_definition("cv2 INT\n)"), Success(")", Column("cv2", DataType(DataTypeKind.Int))))

    def test_missing_comma(self):
        self.assertEqual(parse_column_definition("cv2 INT cv3 INT,"), Failure("cv2 INT cv3 INT,"))

    def test_unsupported_type(self):
        self.assertFalse(parse_column_definition("`status` enum('a','b') NOT NULL,"))
        self.assertFalse(parse_column_definition("tt TIMESTAMP DEFAULT CURRENT_TIMESTAMP,"))
        self.assertFalse(parse_column_definition("`body` text COMMENT 'x',"))

    def test_text_column_with_extended_types(self):
        self.assertEqual(parse_column_definition("`body` text COMMENT 'x',", extended_types=True),
                         Success("", Column("body", DataType(DataTypeKind.Text), "x")))

    def test_no_partial_column(self):
        self.assertEqual(parse_column_definition("`id` bigint COMMENT 'unterminated,"),
                         Failure("`id` bigint COMMENT 'unterminated,"))
