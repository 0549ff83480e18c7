# -*- coding: utf-8 -*-
"""Owner-scoped persistence for log collections (SQLite).

Every statement carries a ``user_id`` predicate, so an entry owned by one
user can never be read or deleted through another user's id.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Dict, Generic, List, Optional, Sequence, Type, TypeVar
from uuid import uuid4

from pydantic import BaseModel

from .app_db import db_conn
from .config import settings
from .dates import DateRange, to_storage, utc_now
from .errors import NotFoundError, validate_payload

logger = logging.getLogger(__name__)

EntryT = TypeVar("EntryT", bound=BaseModel)

_META_FIELDS = ("id", "user_id", "created_at", "updated_at")


class LogStore(Generic[EntryT]):
    def __init__(
        self,
        *,
        table: str,
        create_model: Type[BaseModel],
        entry_model: Type[EntryT],
        default_limit: int = 50,
        label: str = "Entry",
    ) -> None:
        self.table = table
        self.create_model = create_model
        self.entry_model = entry_model
        self.default_limit = default_limit
        self.label = label
        self.columns: Sequence[str] = tuple(create_model.model_fields.keys())

    def _row_to_entry(self, row: Any) -> EntryT:
        return self.entry_model.model_validate(dict(row))

    @staticmethod
    def _to_column(value: Any) -> Any:
        if isinstance(value, datetime):
            return to_storage(value)
        return value

    def create(self, user_id: str, fields: Any) -> EntryT:
        data = validate_payload(self.create_model, fields)
        entry_id = str(uuid4())
        now = to_storage(utc_now())
        values: Dict[str, Any] = {name: self._to_column(getattr(data, name)) for name in self.columns}
        values.update(id=entry_id, user_id=user_id, created_at=now, updated_at=now)

        # Built from the stored text first: a row that would not read back is never written.
        entry = validate_payload(self.entry_model, values)

        names = list(_META_FIELDS) + list(self.columns)
        placeholders = ", ".join("?" for _ in names)
        with db_conn(settings.app_db_path) as conn:
            conn.execute(
                f"INSERT INTO {self.table} ({', '.join(names)}) VALUES ({placeholders})",
                tuple(values[n] for n in names),
            )
        logger.info("Created %s %s for user %s", self.table, entry_id, user_id)
        return entry

    def find_by_user_and_range(
        self,
        user_id: str,
        date_range: Optional[DateRange] = None,
        limit: Optional[int] = None,
    ) -> List[EntryT]:
        """Owned entries inside the inclusive range, newest first."""
        clauses = ["user_id = ?"]
        params: List[Any] = [user_id]
        if date_range is not None and date_range.start is not None:
            clauses.append("date >= ?")
            params.append(to_storage(date_range.start))
        if date_range is not None and date_range.end is not None:
            clauses.append("date <= ?")
            params.append(to_storage(date_range.end))
        params.append(int(limit if limit is not None else self.default_limit))

        with db_conn(settings.app_db_path) as conn:
            rows = conn.execute(
                f"SELECT * FROM {self.table} WHERE {' AND '.join(clauses)} "
                "ORDER BY date DESC, created_at DESC LIMIT ?",
                tuple(params),
            ).fetchall()
        return [self._row_to_entry(r) for r in rows]

    def find_one_owned(self, entry_id: str, user_id: str) -> EntryT:
        with db_conn(settings.app_db_path) as conn:
            row = conn.execute(
                f"SELECT * FROM {self.table} WHERE id = ? AND user_id = ?",
                (entry_id, user_id),
            ).fetchone()
        if not row:
            raise NotFoundError(f"{self.label} not found")
        return self._row_to_entry(row)

    def delete_owned(self, entry_id: str, user_id: str) -> None:
        # Single statement: the ownership check and the delete cannot interleave.
        with db_conn(settings.app_db_path) as conn:
            cur = conn.execute(
                f"DELETE FROM {self.table} WHERE id = ? AND user_id = ?",
                (entry_id, user_id),
            )
            deleted = cur.rowcount
        if not deleted:
            raise NotFoundError(f"{self.label} not found")
        logger.info("Deleted %s %s for user %s", self.table, entry_id, user_id)
