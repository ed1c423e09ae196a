"""
数据库连接和管理模块
所有业务状态保存在单个 DuckDB 连接中（默认内存库），由 DatabaseManager 独占
"""

import logging
import threading
from contextlib import contextmanager
from typing import Any, Dict, Generator, List, Optional

import duckdb

from .exceptions import DatabaseError
from ..config.settings import settings

logger = logging.getLogger(__name__)

# 完整的表结构定义
SCHEMA_SQL = r"""
CREATE SEQUENCE IF NOT EXISTS users_id_seq;
CREATE TABLE IF NOT EXISTS users (
  id INTEGER DEFAULT nextval('users_id_seq') PRIMARY KEY,
  role TEXT CHECK(role IN ('user','admin')) NOT NULL DEFAULT 'user',
  name TEXT NOT NULL,
  email TEXT NOT NULL,
  password TEXT NOT NULL,
  phone TEXT,
  dietary_preferences TEXT DEFAULT '[]',
  allergies TEXT DEFAULT '[]',
  created_at TIMESTAMP DEFAULT now()
);

CREATE SEQUENCE IF NOT EXISTS meals_id_seq;
CREATE TABLE IF NOT EXISTS meals (
  meal_id INTEGER DEFAULT nextval('meals_id_seq') PRIMARY KEY,
  name TEXT NOT NULL,
  description TEXT DEFAULT '',
  price DOUBLE NOT NULL,
  calories INTEGER DEFAULT 0,
  protein INTEGER DEFAULT 0,
  carbs INTEGER DEFAULT 0,
  fats INTEGER DEFAULT 0,
  image TEXT DEFAULT '',
  tags TEXT DEFAULT '[]',
  ingredients TEXT DEFAULT '[]',
  category TEXT CHECK(category IN ('Regular','Bronze','Premium')) NOT NULL,
  in_stock BOOLEAN DEFAULT TRUE,
  add_ons TEXT DEFAULT '[]',
  created_at TIMESTAMP DEFAULT now()
);

CREATE TABLE IF NOT EXISTS cart_items (
  user_id INTEGER NOT NULL,
  cart_id TEXT NOT NULL,
  meal_json TEXT NOT NULL,
  customization_json TEXT NOT NULL,
  quantity INTEGER NOT NULL,
  final_price DOUBLE NOT NULL,
  position INTEGER NOT NULL,
  PRIMARY KEY (user_id, cart_id)
);

CREATE SEQUENCE IF NOT EXISTS orders_id_seq;
CREATE TABLE IF NOT EXISTS orders (
  order_id INTEGER DEFAULT nextval('orders_id_seq') PRIMARY KEY,
  user_id INTEGER,
  customer_name TEXT,
  items_json TEXT NOT NULL,
  total DOUBLE NOT NULL,
  status TEXT CHECK(status IN ('Processing','Preparing','Delivered','Cancelled')) NOT NULL,
  payment_method TEXT,
  shipping_address TEXT,
  currency TEXT CHECK(currency IN ('GHS','USD')) NOT NULL,
  is_subscription BOOLEAN DEFAULT FALSE,
  created_at TIMESTAMP DEFAULT now()
);

CREATE INDEX IF NOT EXISTS idx_orders_user ON orders(user_id);

CREATE SEQUENCE IF NOT EXISTS appointments_id_seq;
CREATE TABLE IF NOT EXISTS appointments (
  appointment_id INTEGER DEFAULT nextval('appointments_id_seq') PRIMARY KEY,
  user_id INTEGER,
  user_name TEXT,
  service_name TEXT NOT NULL,
  date TEXT NOT NULL,
  time TEXT NOT NULL,
  status TEXT CHECK(status IN ('Pending','Confirmed','Completed','Cancelled')) NOT NULL,
  notes TEXT,
  created_at TIMESTAMP DEFAULT now()
);

CREATE INDEX IF NOT EXISTS idx_appointments_user ON appointments(user_id);

CREATE SEQUENCE IF NOT EXISTS stories_id_seq;
CREATE TABLE IF NOT EXISTS stories (
  story_id INTEGER DEFAULT nextval('stories_id_seq') PRIMARY KEY,
  user_id INTEGER,
  author_name TEXT NOT NULL,
  content TEXT NOT NULL,
  rating INTEGER CHECK(rating BETWEEN 1 AND 5) NOT NULL,
  approved BOOLEAN DEFAULT FALSE,
  date TEXT NOT NULL,
  image TEXT,
  role TEXT CHECK(role IN ('user','admin')) NOT NULL,
  created_at TIMESTAMP DEFAULT now()
);

CREATE SEQUENCE IF NOT EXISTS status_history_id_seq;
CREATE TABLE IF NOT EXISTS status_history (
  history_id INTEGER DEFAULT nextval('status_history_id_seq') PRIMARY KEY,
  entity_type TEXT CHECK(entity_type IN ('order','appointment')) NOT NULL,
  entity_id INTEGER NOT NULL,
  status TEXT NOT NULL,
  note TEXT,
  created_at TIMESTAMP NOT NULL
);

CREATE INDEX IF NOT EXISTS idx_history_entity ON status_history(entity_type, entity_id);

CREATE TABLE IF NOT EXISTS preferences (
  user_id INTEGER PRIMARY KEY,
  language TEXT NOT NULL,
  currency TEXT NOT NULL
);
"""


class DatabaseManager:
    """数据库管理器，封装所有数据库操作"""

    def __init__(self, db_path: Optional[str] = None):
        self._connection: Optional[duckdb.DuckDBPyConnection] = None
        self._lock = threading.RLock()
        self.db_path = db_path or self._get_db_path_from_settings()

    def _get_db_path_from_settings(self) -> str:
        """从设置中获取数据库路径"""
        db_url = settings.database_url
        if db_url.startswith("duckdb://"):
            return db_url.replace("duckdb://", "", 1)
        return db_url

    @property
    def connection(self) -> duckdb.DuckDBPyConnection:
        """获取数据库连接（首次访问时建表）"""
        with self._lock:
            if self._connection is None:
                self._connection = duckdb.connect(self.db_path)
                self._init_schema()
            return self._connection

    def get_connection(self) -> duckdb.DuckDBPyConnection:
        return self.connection

    def _init_schema(self):
        """初始化数据库表结构"""
        try:
            self._connection.execute(SCHEMA_SQL)
        except duckdb.Error as e:
            raise DatabaseError(f"Failed to initialize schema: {e}")

    def init_database(self):
        """初始化数据库"""
        self.get_connection()
        logger.info("Database ready at %s", self.db_path)

    def reset(self):
        """关闭连接，下次访问时重新建库（内存库即清空全部数据）"""
        with self._lock:
            if self._connection is not None:
                self._connection.close()
            self._connection = None

    @contextmanager
    def transaction(self) -> Generator[duckdb.DuckDBPyConnection, None, None]:
        """
        数据库事务上下文管理器
        持有进程锁，保证一组语句原子执行
        """
        with self._lock:
            conn = self.connection
            conn.execute("BEGIN")
            try:
                yield conn
                conn.execute("COMMIT")
            except Exception:
                conn.execute("ROLLBACK")
                raise

    def execute_query(self, query: str, params: Optional[list] = None) -> list:
        """执行查询并返回结果"""
        with self._lock:
            try:
                return self.connection.execute(query, params or []).fetchall()
            except duckdb.Error as e:
                raise DatabaseError(f"Query execution failed: {e}")

    def execute_one(self, query: str, params: Optional[list] = None) -> Optional[tuple]:
        """执行查询并返回单条结果"""
        with self._lock:
            try:
                return self.connection.execute(query, params or []).fetchone()
            except duckdb.Error as e:
                raise DatabaseError(f"Query execution failed: {e}")

    def fetch_dicts(self, query: str, params: Optional[list] = None) -> List[Dict[str, Any]]:
        """执行查询并以列名为键返回字典列表"""
        with self._lock:
            try:
                cursor = self.connection.execute(query, params or [])
                columns = [col[0] for col in cursor.description]
                return [dict(zip(columns, row)) for row in cursor.fetchall()]
            except duckdb.Error as e:
                raise DatabaseError(f"Query execution failed: {e}")


# 全局数据库管理器实例
db_manager = DatabaseManager()
