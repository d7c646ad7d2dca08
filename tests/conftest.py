"""
Pytest configuration and fixtures
"""
import sqlite3

import pytest

ENV_VARS = [
    "DB_URL", "DB_TOKEN", "LOCAL_DB_PATH", "SOURCE_TABLE", "TABLE_PREFIX",
    "SAMPLE_LIMIT", "ID_COLUMN", "QUOTE_CHARS", "SINGLE_TRANSACTION", "LOG_LEVEL",
]

LINKS_DDL = "CREATE TABLE `tana_links` (id INTEGER PRIMARY KEY, url TEXT)"


@pytest.fixture
def make_source_db(tmp_path):
    """
    Factory creating a SQLite file that stands in for the remote database.
    Returns the file path.
    """
    def _make(create_sql=LINKS_DDL, rows=(), insert_sql=None, name="source.db"):
        path = tmp_path / name
        conn = sqlite3.connect(path)
        try:
            conn.execute(create_sql)
            if rows:
                conn.executemany(insert_sql or "INSERT INTO tana_links (url) VALUES (?)", rows)
            conn.commit()
        finally:
            conn.close()
        return path

    return _make


@pytest.fixture
def remote_config():
    def _config(source_path):
        return {'url': f"file:{source_path}", 'auth_token': "test-token"}

    return _config


@pytest.fixture
def sample_config(tmp_path):
    return {
        'local_db_path': str(tmp_path / "sample.db"),
        'source_table': "tana_links",
        'table_prefix': "tana_",
        'sample_limit': 200,
        'id_column': "id",
        'quote_chars': "`",
        'single_transaction': False,
    }


def read_local(path, sql):
    conn = sqlite3.connect(path)
    try:
        return conn.execute(sql).fetchall()
    finally:
        conn.close()
