from __future__ import annotations

from enum import Enum
from typing import Dict, Tuple

from config import AppConfig


class Table(Enum):
    MONTHLY_COMPARISON = "monthly_comparison"
    SALES_DATA = "sales_data"
    PRODUCT_DATA = "product_data"


# Columns each widget reads; anything else the table carries is ignored.
TABLE_COLUMNS: Dict[Table, Tuple[str, ...]] = {
    Table.MONTHLY_COMPARISON: ("id", "Month", "Last_year", "This_year"),
    Table.SALES_DATA: ("id", "date", "web_sales", "offline_sales"),
    Table.PRODUCT_DATA: ("id", "Product", "sold_amount", "unit_price", "revenue", "rating"),
}


def q_full_table(cfg: AppConfig, table: Table) -> str:
    # full read: no filter, no ordering, no limit
    return f"""
    SELECT *
    FROM {cfg.fq_schema}.{table.value}
    """
