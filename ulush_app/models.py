# ulush_app/models.py
"""
Product record and the numeric coercion used at every input boundary.

Products are persisted as plain dicts
``{"id", "name", "qty", "price", "category"}``; ``from_dict`` tolerates
missing keys so older or hand-edited snapshots still load.
"""
import math
from dataclasses import dataclass, asdict
from typing import Any, Dict, Iterable, List

FIELDS = ("id", "name", "qty", "price", "category")


def coerce_number(value: Any) -> float:
    """Numbers pass through, numeric strings are parsed, everything else is 0."""
    if value is None or isinstance(value, bool):
        return 0
    if isinstance(value, (int, float)):
        n = value
    else:
        try:
            n = float(str(value).replace(",", ".").strip())
        except ValueError:
            return 0
    if not math.isfinite(n):
        return 0
    return n


def non_negative(value: Any) -> float:
    return max(coerce_number(value), 0)


@dataclass
class Product:
    id: str
    name: str = ""
    qty: float = 0
    price: float = 0
    category: str = ""

    @property
    def line_total(self) -> float:
        return coerce_number(self.qty) * coerce_number(self.price)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @staticmethod
    def from_dict(d: Dict[str, Any]) -> "Product":
        return Product(
            id=str(d.get("id", "") or ""),
            name=str(d.get("name", "") or ""),
            qty=non_negative(d.get("qty", 0)),
            price=non_negative(d.get("price", 0)),
            category=str(d.get("category", "") or ""),
        )


def products_to_raw(products: Iterable[Product]) -> List[Dict[str, Any]]:
    return [p.to_dict() for p in products]


def products_from_raw(data: Any) -> List[Product]:
    if not isinstance(data, list):
        raise ValueError("product snapshot must be a list")
    return [Product.from_dict(d) for d in data if isinstance(d, dict)]


def categories_from_raw(data: Any) -> List[str]:
    if not isinstance(data, list):
        raise ValueError("category snapshot must be a list")
    out: List[str] = []
    # labels are kept verbatim so stored product categories still match
    for c in data:
        if isinstance(c, str) and c and c not in out:
            out.append(c)
    return out
