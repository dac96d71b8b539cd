# ulush_app/store.py
import logging
from typing import Callable, List, Optional

from .config import PRODUCTS_KEY, CATEGORIES_KEY, DEFAULT_CATEGORIES, RESET_PROMPT
from .ids import make_unique_pid, fix_duplicate_product_ids
from .models import (Product, FIELDS, non_negative, products_to_raw,
                     products_from_raw, categories_from_raw)
from .storage import KeyValueStorage, StorageResult

logger = logging.getLogger(__name__)

Confirm = Callable[[str], bool]


def default_categories() -> List[str]:
    return list(DEFAULT_CATEGORIES)


def default_products() -> List[Product]:
    return [
        Product(id=make_unique_pid(set()), name="Telefon", qty=10, price=200, category="Xitoy"),
        Product(id=make_unique_pid(set()), name="Non", qty=20, price=10, category="O'zbekiston"),
    ]


def _deny(prompt: str) -> bool:
    return False


class ProductStore:
    """
    Session state: the ordered product list and the category set.

    Every mutation writes the collection it touched back to ``storage``.
    Write failures never propagate; the outcome of the most recent write is
    kept on ``last_save`` and failed ones are collected in ``errors``.
    ``confirm`` is asked before a reset and defaults to refusing.
    """

    def __init__(self, storage: KeyValueStorage, products: Optional[List[Product]] = None,
                 categories: Optional[List[str]] = None, confirm: Optional[Confirm] = None):
        self.storage = storage
        self.products: List[Product] = list(products or [])
        self.categories: List[str] = list(categories or [])
        self.confirm: Confirm = confirm or _deny
        self.last_save: Optional[StorageResult] = None
        self.errors: List[Exception] = []

    @classmethod
    def load(cls, storage: KeyValueStorage, confirm: Optional[Confirm] = None) -> "ProductStore":
        errors = []
        res = storage.load(CATEGORIES_KEY, None)
        categories = default_categories()
        if res.error:
            errors.append(res.error)
        elif res.value is not None:
            try:
                categories = categories_from_raw(res.value)
            except ValueError as e:
                logger.warning("Ignoring stored categories: %s", e); errors.append(e)

        res = storage.load(PRODUCTS_KEY, None)
        products = None
        if res.error:
            errors.append(res.error)
        elif res.value is not None:
            try:
                products = products_from_raw(res.value)
            except ValueError as e:
                logger.warning("Ignoring stored products: %s", e); errors.append(e)
        if products is None:
            products = default_products()

        store = cls(storage, products, categories, confirm)
        store.errors.extend(errors)
        changed, cnt = fix_duplicate_product_ids(store.products)
        if changed:
            logger.warning("Repaired %d duplicate product ids", cnt)
            store._save_products()
        return store

    # ---------- persistence ----------
    def _save(self, key, value):
        res = self.storage.save(key, value)
        self.last_save = res
        if res.error:
            self.errors.append(res.error)
        return res

    def _save_products(self):
        return self._save(PRODUCTS_KEY, products_to_raw(self.products))

    def _save_categories(self):
        return self._save(CATEGORIES_KEY, list(self.categories))

    # ---------- products ----------
    def get(self, pid: str) -> Optional[Product]:
        return next((p for p in self.products if p.id == pid), None)

    def add(self) -> Product:
        p = Product(
            id=make_unique_pid({x.id for x in self.products}),
            category=self.categories[0] if self.categories else "",
        )
        self.products.append(p)
        self._save_products()
        return p

    def remove(self, pid: str) -> bool:
        remain = [p for p in self.products if p.id != pid]
        if len(remain) == len(self.products):
            return False
        self.products = remain
        self._save_products()
        return True

    def update(self, pid: str, **patch) -> bool:
        unknown = set(patch) - set(FIELDS)
        if unknown:
            raise TypeError(f"unknown product field(s): {', '.join(sorted(unknown))}")
        if "id" in patch:
            raise TypeError("product id cannot be changed")
        p = self.get(pid)
        if p is None:
            return False
        for k, v in patch.items():
            if k in ("qty", "price"):
                v = non_negative(v)
            elif v is None:
                v = ""
            else:
                v = str(v)
            setattr(p, k, v)
        self._save_products()
        return True

    # ---------- categories ----------
    def add_category(self, label: str) -> bool:
        trimmed = (label or "").strip()
        if not trimmed or trimmed in self.categories:
            return False
        self.categories.append(trimmed)
        self._save_categories()
        logger.info("Added category %r", trimmed)
        return True

    # ---------- reset ----------
    def reset(self) -> bool:
        if not self.confirm(RESET_PROMPT):
            return False
        self.products = []
        self.categories = default_categories()
        self._save_products()
        self._save_categories()
        logger.info("Reset products and categories")
        return True
