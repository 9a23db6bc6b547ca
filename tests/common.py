DEMO_TABLE_USER = """CREATE TABLE `demo_table_user` (
  `id` bigint NOT NULL COMMENT '主键',
  PRIMARY KEY (`id`) USING BTREE
) ENGINE=InnoDB DEFAULT CHARSET=utf8mb4 COLLATE=utf8mb4_bin COMMENT='demo'"""

DEMO_ORDER = """CREATE TABLE IF NOT EXISTS `demo_order` (
  `id` bigint(20) unsigned NOT NULL AUTO_INCREMENT COMMENT 'id',
  `user_id` bigint(20) NOT NULL DEFAULT '0' COMMENT 'user',
  `order_no` varchar(64) CHARACTER SET utf8mb4 COLLATE utf8mb4_bin NOT NULL DEFAULT '' COMMENT 'order no',
  `amount` decimal(10,2) NOT NULL DEFAULT '0.00' COMMENT 'amount',
  `status` tinyint(4) NOT NULL DEFAULT 1 COMMENT 'status',
  `created_at` datetime(3) NOT NULL DEFAULT CURRENT_TIMESTAMP(3) COMMENT 'created',
  `updated_at` datetime NOT NULL DEFAULT CURRENT_TIMESTAMP ON UPDATE CURRENT_TIMESTAMP COMMENT 'updated',
  PRIMARY KEY (`id`),
  UNIQUE KEY `uk_order_no` (`order_no`) USING BTREE,
  KEY `idx_user_id` (`user_id`, `created_at`)
) ENGINE=InnoDB DEFAULT CHARSET=utf8mb4 COLLATE=utf8mb4_bin COMMENT='orders; one per checkout'"""

PARSE_T = """CREATE TABLE parse_t(
    id INT NOT NULL,
    cv1 VARCHAR(20) DEFAULT "",
    dayweek SMALLINT,
    cv2 INT,
    PRIMARY KEY(id)
) ENGINE=innodb DEFAULT CHARSET=utf8mb4;"""

MYSQL_DUMP = f"""-- MySQL dump 10.13  Distrib 8.0.32
#
/*!40101 SET NAMES utf8mb4 */;

DROP TABLE IF EXISTS `demo_table_user`;
{DEMO_TABLE_USER};

-- orders
{DEMO_ORDER};

INSERT INTO `demo_table_user` VALUES (1);
"""
