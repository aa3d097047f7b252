"""
Full-table reads for the three dashboard tables.

Outcomes at this boundary are kept distinct: a list of rows (possibly empty)
or a ``QueryFailedError``. Deciding that an empty table is a failure belongs
to the adapters.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Sequence

import pandas as pd

from config import AppConfig
from data import queries
from data.connection import SqlClient, get_sql_client
from data.errors import QueryFailedError
from data.queries import TABLE_COLUMNS, Table
from logging_utils import log_event

logger = logging.getLogger(__name__)

Row = Dict[str, Any]


def normalize_rows(df: pd.DataFrame, columns: Sequence[str]) -> List[Row]:
    """
    Project ``df`` onto ``columns`` in source order.

    Column names match case-insensitively; missing columns and SQL NULL/NaN
    both come back as ``None``.
    """
    if df is None or len(df) == 0:
        return []

    by_lower = {str(c).lower(): c for c in df.columns}
    frame = pd.DataFrame(index=df.index)
    for col in columns:
        src = col if col in df.columns else by_lower.get(col.lower())
        frame[col] = df[src] if src is not None else None

    frame = frame.astype(object)
    frame = frame.where(frame.notna(), None)
    return frame.to_dict(orient="records")


class TableAccessor:
    def __init__(self, cfg: AppConfig, client: SqlClient | None = None):
        self.cfg = cfg
        self._client = client or get_sql_client(cfg)

    def fetch_rows(self, table: Table) -> List[Row]:
        """Read every row of ``table``. Raises ``QueryFailedError`` on backend errors."""
        log_event(logger, logging.INFO, "table_read_started", table=table.value)
        try:
            df = self._read(table)
        except Exception as e:
            log_event(
                logger,
                logging.ERROR,
                "table_read_failed",
                table=table.value,
                error=f"{type(e).__name__}: {e}",
            )
            raise QueryFailedError(table.value, e) from e

        rows = normalize_rows(df, TABLE_COLUMNS[table])
        log_event(logger, logging.INFO, "table_read_succeeded", table=table.value, rows=len(rows))
        return rows

    def _read(self, table: Table) -> pd.DataFrame:
        return self._client.query(queries.q_full_table(self.cfg, table))


def get_table_accessor(cfg: AppConfig) -> TableAccessor:
    return TableAccessor(cfg)
