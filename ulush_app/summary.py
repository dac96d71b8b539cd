# ulush_app/summary.py
"""
Per-category revenue totals and shares.

``summarize`` is recomputed from scratch on every rerun; nothing here keeps
state. Rows come out ordered by subtotal, largest first, with equal
subtotals ordered by category label.
"""
import math
from dataclasses import dataclass, field
from typing import Dict, Iterable, List

import pandas as pd

from .models import Product, coerce_number


@dataclass
class CategoryShare:
    category: str
    subtotal: float
    share: float


@dataclass
class Summary:
    total: float = 0
    rows: List[CategoryShare] = field(default_factory=list)

    @property
    def empty(self) -> bool:
        return not self.rows


def summarize(products: Iterable[Product]) -> Summary:
    sums: Dict[str, float] = {}
    total = 0
    for p in products:
        line = coerce_number(p.qty) * coerce_number(p.price)
        total += line
        if not p.category:
            continue
        sums[p.category] = sums.get(p.category, 0) + line
    rows = [
        CategoryShare(cat, s, (s / total) * 100 if 0 < total < math.inf else 0)
        for cat, s in sums.items()
    ]
    rows.sort(key=lambda r: (-r.subtotal, r.category))
    return Summary(total, rows)


def fmt_pct(n: float) -> str:
    if not isinstance(n, (int, float)) or not math.isfinite(n):
        return "0%"
    val = f"{math.floor(n * 100 + 0.5) / 100:.2f}".rstrip("0").rstrip(".")
    return f"{'0' if val == '-0' else val}%"


def format_number(value: float) -> str:
    # "2200.5" -> "2 200.5"; at most three fraction digits
    if isinstance(value, (int, float)) and not isinstance(value, bool) and math.isinf(value):
        return "∞" if value > 0 else "-∞"
    value = coerce_number(value)
    s = f"{value:,.3f}".rstrip("0").rstrip(".")
    if s in ("-0", ""):
        s = "0"
    return s.replace(",", " ")


# ---------- tabular exports ----------
def products_frame(products: Iterable[Product]) -> pd.DataFrame:
    rows = [
        {"#": i + 1, "name": p.name, "qty": p.qty, "price": p.price,
         "total": p.line_total, "category": p.category}
        for i, p in enumerate(products)
    ]
    return pd.DataFrame(rows, columns=["#", "name", "qty", "price", "total", "category"])


def summary_frame(summary: Summary) -> pd.DataFrame:
    df = pd.DataFrame(
        [{"category": r.category, "subtotal": r.subtotal, "share_pct": round(r.share, 2)}
         for r in summary.rows],
        columns=["category", "subtotal", "share_pct"],
    )
    return df


def to_csv_bytes(df: pd.DataFrame) -> bytes:
    return df.to_csv(index=False).encode("utf-8-sig")
