
import uuid
from typing import List, Tuple
from .models import Product

def make_unique_pid(existing: set) -> str:
    while True:
        new_id = str(uuid.uuid4())
        if new_id not in existing:
            return new_id

def fix_duplicate_product_ids(products: List[Product]) -> Tuple[bool, int]:
    seen = set(); changed = False; cnt = 0
    for prod in products:
        pid = str(prod.id or "").strip()
        if not pid or pid in seen:
            prod.id = make_unique_pid(seen | {p.id for p in products}); changed = True; cnt += 1
        seen.add(prod.id)
    return changed, cnt
