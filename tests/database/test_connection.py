from __future__ import annotations

from mysql.connector.constants import ClientFlag

from bfp_personnel.database import connection
from bfp_personnel.database.connection import DBConfig, DatabaseConnection


def test_connect_counts_matched_rows(monkeypatch):
    captured = {}

    def fake_connect(**kwargs):
        captured.update(kwargs)
        return object()

    monkeypatch.setattr(connection.mysql.connector, "connect", fake_connect)
    conn = DatabaseConnection(DBConfig(host="db", port=3306, user="bfp", password="secret", database="bfp"))

    conn.connect()

    assert ClientFlag.FOUND_ROWS in captured["client_flags"]
    assert captured["database"] == "bfp"
