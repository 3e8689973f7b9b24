from __future__ import annotations

import logging
import re
import uuid
from pathlib import Path
from typing import Iterable

from werkzeug.security import generate_password_hash

from .connection import DBConfig, DatabaseConnection

logger = logging.getLogger(__name__)


def _strip_create_db_and_use(sql: str) -> str:
    # Keep schema.sql compatible regardless of DB name.
    sql = re.sub(r"(?im)^\s*CREATE\s+DATABASE\b.*?;\s*$", "", sql)
    sql = re.sub(r"(?im)^\s*USE\b.*?;\s*$", "", sql)
    return sql


def _iter_sql_statements(sql: str) -> Iterable[str]:
    # Minimal SQL splitter for schema/seed files (handles ';' inside quotes).
    buf: list[str] = []
    in_single = False
    in_double = False
    escape = False

    for ch in sql:
        if escape:
            buf.append(ch)
            escape = False
            continue

        if ch == "\\":
            buf.append(ch)
            escape = True
            continue

        if ch == "'" and not in_double:
            in_single = not in_single
        elif ch == '"' and not in_single:
            in_double = not in_double
        elif ch == ";" and not in_single and not in_double:
            stmt = "".join(buf).strip()
            buf.clear()
            if stmt and not _is_comment_only(stmt):
                yield stmt
            continue

        buf.append(ch)

    tail = "".join(buf).strip()
    if tail and not _is_comment_only(tail):
        yield tail


def _is_comment_only(stmt: str) -> bool:
    return all(not line.strip() or line.strip().startswith("--") for line in stmt.splitlines())


def _connection(db_config: dict) -> DatabaseConnection:
    # Bootstrap runs outside the app container, so no singleton here.
    return DatabaseConnection(DBConfig.from_dict(db_config))


def ensure_database_exists(db_config: dict) -> None:
    factory = _connection(db_config)
    conn = factory.connect(with_database=False)
    try:
        cur = conn.cursor()
        cur.execute(
            f"CREATE DATABASE IF NOT EXISTS `{factory.config.database}` "
            "CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci;"
        )
        conn.commit()
    finally:
        conn.close()


def _apply_sql_file(db_config: dict, path: str | Path) -> int:
    sql = _strip_create_db_and_use(Path(path).read_text(encoding="utf-8"))
    conn = _connection(db_config).connect()
    count = 0
    try:
        cur = conn.cursor()
        for stmt in _iter_sql_statements(sql):
            cur.execute(stmt)
            count += 1
        conn.commit()
    finally:
        conn.close()
    return count


def apply_schema(db_config: dict, *, schema_path: str | Path) -> None:
    ensure_database_exists(db_config)
    count = _apply_sql_file(db_config, schema_path)
    logger.info("Applied %s (%d statements)", Path(schema_path).name, count)


def apply_seed_sql(db_config: dict, *, seed_path: str | Path) -> None:
    count = _apply_sql_file(db_config, seed_path)
    logger.info("Applied %s (%d statements)", Path(seed_path).name, count)


def ensure_demo_profiles(db_config: dict) -> None:
    """Create or refresh the demo logins with real password hashes."""
    conn = _connection(db_config).connect()
    try:
        cur = conn.cursor(dictionary=True)

        def upsert_profile(username: str, email: str, full_name: str, password: str, role: str, job_title: str) -> None:
            password_hash = generate_password_hash(password)
            cur.execute("SELECT id FROM profiles WHERE username=%s", (username,))
            existing = cur.fetchone()
            if existing:
                cur.execute(
                    """
                    UPDATE profiles
                    SET email=%s, full_name=%s, password_hash=%s, role=%s, job_title=%s, is_active=1
                    WHERE username=%s
                    """,
                    (email, full_name, password_hash, role, job_title, username),
                )
            else:
                cur.execute(
                    """
                    INSERT INTO profiles (id, username, email, full_name, password_hash, role, job_title)
                    VALUES (%s, %s, %s, %s, %s, %s, %s)
                    """,
                    (str(uuid.uuid4()), username, email, full_name, password_hash, role, job_title),
                )

        upsert_profile("admin", "admin@example.com", "Admin Demo", "admin123", "Administrator", "Operations")
        upsert_profile("andika", "andika@example.com", "Andika Pratama", "staff123", "Inhouse", "Marketing")

        conn.commit()
    finally:
        conn.close()


def list_tables(db_config: dict) -> list[str]:
    conn = _connection(db_config).connect()
    try:
        cur = conn.cursor()
        cur.execute("SHOW TABLES")
        return [row[0] for row in cur.fetchall()]
    finally:
        conn.close()
