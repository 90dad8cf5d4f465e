from __future__ import annotations

import re
from contextlib import contextmanager
from typing import Any, Dict, List, Mapping, Optional, Sequence

import mysql.connector

from ..core.exceptions import BackendError
from .connection import DatabaseConnection

_IDENTIFIER = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")

# MySQL server/client error numbers grouped into the codes callers branch on.
_ERRNO_CODES = {
    1062: "duplicate",  # ER_DUP_ENTRY
    1451: "constraint",  # ER_ROW_IS_REFERENCED_2
    1452: "constraint",  # ER_NO_REFERENCED_ROW_2
    3819: "constraint",  # ER_CHECK_CONSTRAINT_VIOLATED
    1044: "permission_denied",  # ER_DBACCESS_DENIED_ERROR
    1045: "permission_denied",  # ER_ACCESS_DENIED_ERROR
    1142: "permission_denied",  # ER_TABLEACCESS_DENIED_ERROR
    1146: "not_found",  # ER_NO_SUCH_TABLE
    2002: "connection",
    2003: "connection",
    2005: "connection",
    2006: "connection",
    2013: "connection",
}


def translate_error(exc: mysql.connector.Error) -> BackendError:
    errno = getattr(exc, "errno", None)
    code = _ERRNO_CODES.get(errno or -1, "unknown")
    message = getattr(exc, "msg", None) or str(exc)
    return BackendError(code, message, errno=errno)


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
    try:
        conn = conn_factory.connect()
    except mysql.connector.Error as e:
        raise translate_error(e) from e
    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
    except mysql.connector.Error as e:
        conn.rollback()
        raise translate_error(e) from e
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def fetchone(cur) -> Optional[Dict[str, Any]]:
    row = cur.fetchone()
    return row if row else None


def fetchall(cur) -> List[Dict[str, Any]]:
    rows = cur.fetchall()
    return list(rows or [])


def quote_identifier(name: str) -> str:
    if not _IDENTIFIER.match(name):
        raise ValueError(f"Invalid SQL identifier: {name!r}")
    return f"`{name}`"


class MySQLTable:
    """Row-level CRUD on one table keyed by an auto-increment id.

    Column names come from code (model ``to_row``), never from request input.
    """

    def __init__(self, conn_factory: DatabaseConnection, table: str, *, id_column: str = "id"):
        self._conn_factory = conn_factory
        self._table = quote_identifier(table)
        self._id_column = quote_identifier(id_column)

    @staticmethod
    def _where(criteria: Mapping[str, Any]) -> tuple[str, list[Any]]:
        clauses: list[str] = []
        params: list[Any] = []
        for col, value in criteria.items():
            clauses.append(f"{quote_identifier(col)}=%s")
            params.append(value)
        return " AND ".join(clauses) or "1=1", params

    def select(
        self,
        *,
        where: Optional[Mapping[str, Any]] = None,
        order_by: Optional[str] = None,
        descending: bool = False,
        limit: Optional[int] = None,
        columns: Sequence[str] = (),
    ) -> List[Dict[str, Any]]:
        cols = ", ".join(quote_identifier(c) for c in columns) if columns else "*"
        clause, params = self._where(where or {})
        sql = f"SELECT {cols} FROM {self._table} WHERE {clause}"
        if order_by:
            sql += f" ORDER BY {quote_identifier(order_by)} {'DESC' if descending else 'ASC'}"
        if limit is not None:
            sql += " LIMIT %s"
            params.append(int(limit))
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(sql, tuple(params))
            return fetchall(cur)

    def get(self, record_id: int) -> Optional[Dict[str, Any]]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT * FROM {self._table} WHERE {self._id_column}=%s", (int(record_id),))
            return fetchone(cur)

    def insert(self, values: Mapping[str, Any]) -> int:
        cols = ", ".join(quote_identifier(c) for c in values)
        placeholders = ", ".join(["%s"] * len(values))
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"INSERT INTO {self._table}({cols}) VALUES({placeholders})",
                tuple(values.values()),
            )
            return int(cur.lastrowid)

    def update(
        self,
        record_id: int,
        values: Mapping[str, Any],
        *,
        where: Optional[Mapping[str, Any]] = None,
    ) -> int:
        """Update one row; ``where`` adds guard conditions. Returns affected rows."""
        assignments = ", ".join(f"{quote_identifier(c)}=%s" for c in values)
        clause, params = self._where(where or {})
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"UPDATE {self._table} SET {assignments} WHERE {self._id_column}=%s AND {clause}",
                tuple(list(values.values()) + [int(record_id)] + params),
            )
            return int(cur.rowcount)

    def delete(self, record_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"DELETE FROM {self._table} WHERE {self._id_column}=%s", (int(record_id),))
            return cur.rowcount > 0
