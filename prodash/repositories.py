from __future__ import annotations

import json
from decimal import Decimal
from uuid import uuid4

from sqlalchemy import text as sql_text

from prodash.db import get_sessionmaker
from prodash.dates import utc_now_iso
from prodash.db_init import (
    USERS_TABLE,
    SESSIONS_TABLE,
    TASKS_TABLE,
    JOBS_TABLE,
    PROJECTS_TABLE,
    HABITS_TABLE,
    BUDGET_TABLE,
    CHAT_TABLE,
)

BASE_COLUMNS = ["id", "user_id", "created_at", "updated_at"]


def _new_id() -> str:
    return uuid4().hex


def _encode_json(value) -> str:
    return json.dumps(list(value or []), ensure_ascii=False)


def _decode_json(raw) -> list:
    if not raw:
        return []
    try:
        payload = json.loads(raw)
    except (TypeError, ValueError):
        return []
    return payload if isinstance(payload, list) else []


class Repository:
    """Owner-scoped CRUD over one table.

    ``json_fields`` map an API field to a TEXT column holding a JSON list and
    ``decimal_fields`` are stored as text so the entered precision survives.
    """

    def __init__(
        self,
        table: str,
        fields: list[str],
        json_fields: dict[str, str] | None = None,
        decimal_fields: tuple[str, ...] = (),
    ):
        self.table = table
        self.fields = list(fields)
        self.json_fields = dict(json_fields or {})
        self.decimal_fields = tuple(decimal_fields)

    @property
    def select_columns(self) -> list[str]:
        columns = []
        for field in self.fields:
            columns.append(self.json_fields.get(field, field))
        return BASE_COLUMNS + columns

    def _to_row(self, payload: dict) -> dict:
        row = {}
        for field in self.fields:
            if field not in payload:
                continue
            value = payload[field]
            if field in self.json_fields:
                row[self.json_fields[field]] = _encode_json(value)
            elif field in self.decimal_fields and value is not None:
                row[field] = str(value)
            elif hasattr(value, "isoformat"):
                row[field] = value.isoformat()
            else:
                row[field] = value
        return row

    def _from_row(self, row) -> dict:
        payload = dict(row)
        for field, column in self.json_fields.items():
            payload[field] = _decode_json(payload.pop(column, None))
        for field in self.decimal_fields:
            value = payload.get(field)
            if value is not None:
                payload[field] = Decimal(str(value))
        return payload

    async def list_by_owner(self, user_id: str, newest_first: bool = True) -> list[dict]:
        direction = "DESC" if newest_first else "ASC"
        session_factory = get_sessionmaker()
        async with session_factory() as session:
            rows = (await session.execute(
                sql_text(
                    f"""
                    SELECT {', '.join(self.select_columns)}
                    FROM {self.table}
                    WHERE user_id = :user_id
                    ORDER BY created_at {direction}
                    """
                ),
                {"user_id": user_id},
            )).mappings().all()
        return [self._from_row(row) for row in rows]

    async def get(self, user_id: str, doc_id: str) -> dict:
        session_factory = get_sessionmaker()
        async with session_factory() as session:
            row = (await session.execute(
                sql_text(
                    f"SELECT {', '.join(self.select_columns)} FROM {self.table} "
                    "WHERE id = :id AND user_id = :user_id"
                ),
                {"id": doc_id, "user_id": user_id},
            )).mappings().fetchone()
        if not row:
            raise LookupError(f"{self.table} document not found")
        return self._from_row(row)

    async def create(self, user_id: str, fields: dict) -> dict:
        now = utc_now_iso()
        row = self._to_row(fields)
        row.update({"id": _new_id(), "user_id": user_id, "created_at": now, "updated_at": now})
        columns = list(row.keys())
        session_factory = get_sessionmaker()
        async with session_factory() as session:
            await session.execute(
                sql_text(
                    f"INSERT INTO {self.table} ({', '.join(columns)}) "
                    f"VALUES ({', '.join(f':{col}' for col in columns)})"
                ),
                row,
            )
            await session.commit()
        return await self.get(user_id, row["id"])

    async def update(self, user_id: str, doc_id: str, patch: dict) -> dict:
        row = self._to_row(patch)
        if not row:
            return await self.get(user_id, doc_id)
        row["updated_at"] = utc_now_iso()
        assignments = ", ".join(f"{col} = :{col}" for col in row.keys())
        session_factory = get_sessionmaker()
        async with session_factory() as session:
            result = await session.execute(
                sql_text(
                    f"UPDATE {self.table} SET {assignments} "
                    "WHERE id = :_id AND user_id = :_user_id"
                ),
                {**row, "_id": doc_id, "_user_id": user_id},
            )
            await session.commit()
        if result.rowcount == 0:
            raise LookupError(f"{self.table} document not found")
        return await self.get(user_id, doc_id)

    async def delete(self, user_id: str, doc_id: str) -> None:
        session_factory = get_sessionmaker()
        async with session_factory() as session:
            result = await session.execute(
                sql_text(f"DELETE FROM {self.table} WHERE id = :id AND user_id = :user_id"),
                {"id": doc_id, "user_id": user_id},
            )
            await session.commit()
        if result.rowcount == 0:
            raise LookupError(f"{self.table} document not found")

    async def delete_by_owner(self, user_id: str) -> int:
        session_factory = get_sessionmaker()
        async with session_factory() as session:
            result = await session.execute(
                sql_text(f"DELETE FROM {self.table} WHERE user_id = :user_id"),
                {"user_id": user_id},
            )
            await session.commit()
        return int(result.rowcount or 0)


tasks = Repository(TASKS_TABLE, ["title", "description", "priority", "status", "due_date", "project_id"])
jobs = Repository(JOBS_TABLE, ["company", "role", "status", "notes", "date_applied"])
projects = Repository(PROJECTS_TABLE, ["name", "description", "status", "progress"])
habits = Repository(
    HABITS_TABLE,
    ["name", "description", "completed_dates", "streak"],
    json_fields={"completed_dates": "completed_dates_json"},
)
budget_entries = Repository(
    BUDGET_TABLE,
    ["amount", "category", "type", "date", "description"],
    decimal_fields=("amount",),
)
chat_messages = Repository(CHAT_TABLE, ["role", "content"])


USER_COLUMNS = ["id", "name", "email", "password_hash", "labels_json", "created_at"]


def _normalize_user_row(row) -> dict:
    if not row:
        return {}
    payload = dict(row)
    payload["labels"] = _decode_json(payload.pop("labels_json", None))
    return payload


async def get_user_by_email(email: str) -> dict | None:
    session_factory = get_sessionmaker()
    async with session_factory() as session:
        row = (await session.execute(
            sql_text(f"SELECT {', '.join(USER_COLUMNS)} FROM {USERS_TABLE} WHERE email = :email"),
            {"email": email},
        )).mappings().fetchone()
    return _normalize_user_row(row) if row else None


async def get_user(user_id: str) -> dict | None:
    session_factory = get_sessionmaker()
    async with session_factory() as session:
        row = (await session.execute(
            sql_text(f"SELECT {', '.join(USER_COLUMNS)} FROM {USERS_TABLE} WHERE id = :id"),
            {"id": user_id},
        )).mappings().fetchone()
    return _normalize_user_row(row) if row else None


async def create_user(name: str, email: str, password_hash: str, labels: list[str]) -> dict:
    payload = {
        "id": _new_id(),
        "name": name,
        "email": email,
        "password_hash": password_hash,
        "labels_json": _encode_json(labels),
        "created_at": utc_now_iso(),
    }
    session_factory = get_sessionmaker()
    async with session_factory() as session:
        await session.execute(
            sql_text(
                f"INSERT INTO {USERS_TABLE} ({', '.join(USER_COLUMNS)}) "
                f"VALUES ({', '.join(f':{col}' for col in USER_COLUMNS)})"
            ),
            payload,
        )
        await session.commit()
    return _normalize_user_row(payload)


async def list_users() -> list[dict]:
    session_factory = get_sessionmaker()
    async with session_factory() as session:
        rows = (await session.execute(
            sql_text(f"SELECT {', '.join(USER_COLUMNS)} FROM {USERS_TABLE} ORDER BY created_at DESC")
        )).mappings().all()
    return [_normalize_user_row(row) for row in rows]


async def create_session(session_id: str, user_id: str, expires_at: str) -> None:
    session_factory = get_sessionmaker()
    async with session_factory() as session:
        await session.execute(
            sql_text(
                f"INSERT INTO {SESSIONS_TABLE} (id, user_id, created_at, expires_at) "
                "VALUES (:id, :user_id, :created_at, :expires_at)"
            ),
            {"id": session_id, "user_id": user_id, "created_at": utc_now_iso(), "expires_at": expires_at},
        )
        await session.commit()


async def get_session_user(session_id: str, now_iso: str) -> dict | None:
    session_factory = get_sessionmaker()
    columns = ", ".join(f"u.{col}" for col in USER_COLUMNS)
    async with session_factory() as session:
        row = (await session.execute(
            sql_text(
                f"""
                SELECT {columns}
                FROM {SESSIONS_TABLE} s
                JOIN {USERS_TABLE} u ON u.id = s.user_id
                WHERE s.id = :session_id
                  AND s.expires_at > :now
                """
            ),
            {"session_id": session_id, "now": now_iso},
        )).mappings().fetchone()
    return _normalize_user_row(row) if row else None


async def delete_session(session_id: str) -> None:
    session_factory = get_sessionmaker()
    async with session_factory() as session:
        await session.execute(
            sql_text(f"DELETE FROM {SESSIONS_TABLE} WHERE id = :id"),
            {"id": session_id},
        )
        await session.commit()
