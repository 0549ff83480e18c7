# -*- coding: utf-8 -*-
"""Progress domain: SQLite storage."""

from __future__ import annotations

from ..log_store import LogStore
from .models import ProgressEntry, ProgressRecord

progress_store: LogStore[ProgressEntry] = LogStore(
    table="progress_entries",
    create_model=ProgressRecord,
    entry_model=ProgressEntry,
    default_limit=90,
    label="Entry",
)
