# ulush_app/report_pdf.py
import io
from datetime import datetime
from pathlib import Path
from typing import Iterable, Optional

from reportlab.lib.pagesizes import A4
from reportlab.lib.units import mm
from reportlab.pdfgen import canvas
from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFont

from .models import Product
from .summary import Summary, fmt_pct, format_number

TITLE = "Kategoriya bo'yicha natija"

# ---------- Font handling (non-Latin-1 safe) ----------
FONT_REG = "Helvetica"
FONT_BOLD = "Helvetica-Bold"

def _try_register_font(name_hint: str, file_candidates):
    for fp in file_candidates:
        p = Path(fp)
        if p.is_file():
            try:
                pdfmetrics.registerFont(TTFont(name_hint, str(p)))
                return name_hint
            except Exception:
                pass
    return None

def _ensure_fonts():
    global FONT_REG, FONT_BOLD
    # drop DejaVu (or any TTF with the same names) into assets/fonts to use it
    reg = _try_register_font("UL_Regular", [
        "assets/fonts/DejaVuSans.ttf",
        "/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf",
    ])
    bld = _try_register_font("UL_Bold", [
        "assets/fonts/DejaVuSans-Bold.ttf",
        "/usr/share/fonts/truetype/dejavu/DejaVuSans-Bold.ttf",
    ])
    if reg:
        FONT_REG = reg
        FONT_BOLD = bld or reg

def _clip(text, font_name, size, max_w):
    text = str(text or "")
    if pdfmetrics.stringWidth(text, font_name, size) <= max_w:
        return text
    while text and pdfmetrics.stringWidth(text + "…", font_name, size) > max_w:
        text = text[:-1]
    return text + "…"

def build_summary_pdf(summary: Summary, products: Optional[Iterable[Product]] = None,
                      created: Optional[datetime] = None) -> bytes:
    _ensure_fonts()
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=A4)
    w, h = A4
    left, right = 15*mm, w - 15*mm
    bar_w = 60*mm

    def new_page():
        c.showPage()
        return h - 20*mm

    y = h - 20*mm
    c.setFont(FONT_BOLD, 16)
    c.drawString(left, y, TITLE)
    y -= 8*mm
    c.setFont(FONT_REG, 10)
    c.drawString(left, y, f"Sana: {(created or datetime.now()).strftime('%Y-%m-%d %H:%M')}")
    y -= 5*mm
    c.drawString(left, y, f"Jami summa: {format_number(summary.total)}")
    y -= 4*mm
    c.line(left, y, right, y)
    y -= 8*mm

    if summary.empty:
        c.setFont(FONT_REG, 10)
        c.drawString(left, y, "Hali natija yo'q.")
        y -= 8*mm
    for r in summary.rows:
        if y < 25*mm:
            y = new_page()
        c.setFont(FONT_BOLD, 10)
        c.drawString(left, y, _clip(r.category, FONT_BOLD, 10, 55*mm))
        c.setFont(FONT_REG, 10)
        c.drawRightString(left + 95*mm, y, format_number(r.subtotal))
        c.drawRightString(left + 115*mm, y, fmt_pct(r.share))
        # share bar
        bx = right - bar_w
        c.rect(bx, y - 1, bar_w, 3*mm, stroke=1, fill=0)
        c.rect(bx, y - 1, bar_w * max(0, min(100, r.share)) / 100, 3*mm, stroke=0, fill=1)
        y -= 7*mm

    if products is not None:
        products = list(products)
        y -= 4*mm
        if y < 40*mm:
            y = new_page()
        c.setFont(FONT_BOLD, 12)
        c.drawString(left, y, "Mahsulotlar")
        y -= 7*mm
        cols = [("#", 0), ("Nomi", 10*mm), ("Soni", 85*mm), ("Narxi", 110*mm),
                ("Summa", 140*mm), ("Kategoriya", 145*mm)]
        c.setFont(FONT_BOLD, 9)
        for label, dx in cols:
            if label in ("Soni", "Narxi", "Summa"):
                c.drawRightString(left + dx, y, label)
            else:
                c.drawString(left + dx, y, label)
        y -= 5*mm
        c.setFont(FONT_REG, 9)
        for i, p in enumerate(products, 1):
            if y < 20*mm:
                y = new_page(); c.setFont(FONT_REG, 9)
            c.drawString(left, y, str(i))
            c.drawString(left + 10*mm, y, _clip(p.name, FONT_REG, 9, 55*mm))
            c.drawRightString(left + 85*mm, y, format_number(p.qty))
            c.drawRightString(left + 110*mm, y, format_number(p.price))
            c.drawRightString(left + 140*mm, y, format_number(p.line_total))
            c.drawString(left + 145*mm, y, _clip(p.category, FONT_REG, 9, right - left - 145*mm))
            y -= 5*mm

    c.showPage()
    c.save()
    return buf.getvalue()
