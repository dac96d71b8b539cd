
from pathlib import Path
from .config import DATA_DIR as _DATA_DIR_CFG

BASE_DIR = Path(__file__).resolve().parent.parent
DATA_DIR = Path(_DATA_DIR_CFG) if _DATA_DIR_CFG else BASE_DIR / "data"

def ensure_dir(p: Path):
    p.mkdir(parents=True, exist_ok=True)
    return p
