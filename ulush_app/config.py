
import os, logging
from dotenv import load_dotenv
try:
    import streamlit as st
    _SECRETS = dict(st.secrets) if hasattr(st, "secrets") else {}
except Exception:
    _SECRETS = {}
def _get(name, default=None):
    return _SECRETS.get(name, os.getenv(name, default))
load_dotenv(override=True)
PAGE_TITLE = _get("ULUSH_PAGE_TITLE", "Mahsulotlar ulushi hisoblagich")
DATA_DIR = _get("ULUSH_DATA_DIR")
PRODUCTS_KEY = _get("ULUSH_PRODUCTS_KEY", "app.products")
CATEGORIES_KEY = _get("ULUSH_CATEGORIES_KEY", "app.categories")
LOG_LEVEL = str(_get("ULUSH_LOG_LEVEL", "INFO")).upper()
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
DEFAULT_CATEGORIES = ["Xitoy", "O'zbekiston"]
RESET_PROMPT = "Barchasini tozalaysizmi?"

def configure_logging():
    root = logging.getLogger()
    if root.handlers:
        root.setLevel(LOG_LEVEL)
        return
    logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)
