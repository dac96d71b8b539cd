# tests/conftest.py
import os, tempfile

# must happen before ulush_app.config is imported
os.environ["ULUSH_DATA_DIR"] = tempfile.mkdtemp(prefix="ulush-test-")

import pytest
from ulush_app.models import Product
from ulush_app.storage import MemoryStorage
from ulush_app.store import ProductStore


def make_product(pid, qty=0, price=0, category="", name=""):
    return Product(id=pid, name=name, qty=qty, price=price, category=category)


@pytest.fixture
def storage():
    return MemoryStorage()


@pytest.fixture
def store(storage):
    return ProductStore(storage, [], ["A", "B"])
