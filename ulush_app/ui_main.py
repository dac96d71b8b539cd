# ulush_app/ui_main.py
from datetime import datetime

import streamlit as st

from .config import PAGE_TITLE, RESET_PROMPT
from .paths import DATA_DIR
from .storage import JsonFileStorage
from .store import ProductStore
from .summary import (summarize, fmt_pct, format_number, products_frame,
                      summary_frame, to_csv_bytes)
from .report_pdf import build_summary_pdf

# -----------------------
# Helpers
# -----------------------
def _session_confirm(prompt: str, state=None) -> bool:
    # set by the reset dialog right before it calls store.reset(); consumed once
    state = st.session_state if state is None else state
    return bool(state.pop("reset_confirmed", False))

def get_store() -> ProductStore:
    if "store" not in st.session_state:
        st.session_state.store = ProductStore.load(JsonFileStorage(DATA_DIR), confirm=_session_confirm)
    return st.session_state.store

def _on_text(store: ProductStore, pid: str, field: str, key: str):
    store.update(pid, **{field: st.session_state.get(key, "")})

def _on_number(store: ProductStore, pid: str, field: str, key: str):
    store.update(pid, **{field: st.session_state.get(key, 0)})

@st.dialog("Yangi kategoriya")
def _add_category_dialog(store: ProductStore):
    with st.form("add_cat", border=False):
        label = st.text_input("Kategoriya nomi", placeholder="Masalan: Turkiya")
        ok = st.form_submit_button("➕ Qo‘shish")
    if ok:
        store.add_category(label)
        st.rerun()

@st.dialog("Tozalash")
def _reset_dialog(store: ProductStore):
    st.write(RESET_PROMPT)
    c1, c2 = st.columns(2)
    with c1:
        if st.button("Ha", type="primary", width="stretch"):
            st.session_state["reset_confirmed"] = True
            store.reset()
            st.rerun()
    with c2:
        if st.button("Yo‘q", width="stretch"):
            st.rerun()

# -----------------------
# Sections
# -----------------------
def _render_header(store: ProductStore):
    c1, c2, c3 = st.columns([4, 1.3, 1])
    with c1:
        st.title(PAGE_TITLE)
        st.caption("Kategoriya bo‘yicha umumiy summa hisoblanadi va ulushlari aniqlanadi.")
    with c2:
        if st.button("🏭 Kategoriya qo‘shish", width="stretch"):
            _add_category_dialog(store)
    with c3:
        if st.button("🗑️ Tozalash", type="primary", width="stretch"):
            _reset_dialog(store)

def _render_products(store: ProductStore):
    with st.container(border=True):
        st.subheader("📦 Mahsulotlar")
        c1, c2 = st.columns([5, 1])
        with c1:
            st.caption("Jadvalga yangi qator qo‘shing. Ulush hisoblashda miqdor × narx summasi olinadi.")
        with c2:
            st.button("➕ Qator qo‘shish", on_click=store.add, width="stretch")

        widths = [0.5, 3, 1.5, 1.5, 1.6, 2.4, 0.6]
        head = st.columns(widths)
        for col, label in zip(head, ["#", "Mahsulot nomi", "Soni", "Narxi", "Umumiy summa", "Kategoriya", ""]):
            col.markdown(f"**{label}**" if label else "")

        if not store.products:
            st.info("Hozircha mahsulot yo‘q.")
            return

        cats = store.categories
        for idx, p in enumerate(store.products):
            row = st.columns(widths, vertical_alignment="center")
            name_key, qty_key, price_key, cat_key = (f"{f}_{p.id}" for f in ("name", "qty", "price", "cat"))
            row[0].write(idx + 1)
            row[1].text_input("Mahsulot nomi", value=p.name, key=name_key, placeholder="Masalan: Telefon",
                              label_visibility="collapsed",
                              on_change=_on_text, args=(store, p.id, "name", name_key))
            row[2].number_input("Soni", value=float(p.qty), min_value=0.0, step=1.0, key=qty_key,
                                label_visibility="collapsed",
                                on_change=_on_number, args=(store, p.id, "qty", qty_key))
            row[3].number_input("Narxi", value=float(p.price), min_value=0.0, step=1.0, key=price_key,
                                label_visibility="collapsed",
                                on_change=_on_number, args=(store, p.id, "price", price_key))
            row[4].markdown(f"**{format_number(p.line_total)}**")
            row[5].selectbox("Kategoriya", cats,
                             index=cats.index(p.category) if p.category in cats else None,
                             placeholder="Kategoriya tanlang", key=cat_key,
                             label_visibility="collapsed",
                             on_change=_on_text, args=(store, p.id, "category", cat_key))
            row[6].button("🗑️", key=f"del_{p.id}", on_click=store.remove, args=(p.id,))

def _render_summary(store: ProductStore):
    summary = summarize(store.products)
    with st.container(border=True):
        st.subheader("％ Kategoriya bo‘yicha natija")
        st.markdown(f"Jami summa: **{format_number(summary.total)}**  |  "
                    "Ulushlar umumiy summa asosida hisoblanadi.")
        if summary.empty:
            st.caption("Hali natija yo‘q — jadvalga kamida bitta mahsulot kiriting.")
        for r in summary.rows:
            with st.container(border=True):
                c1, c2 = st.columns([4, 1])
                c1.markdown(f"`{r.category}`  {format_number(r.subtotal)}")
                c2.markdown(f"**{fmt_pct(r.share)}**")
                st.progress(max(0.0, min(1.0, r.share / 100)))
    return summary

def _render_exports(store: ProductStore, summary):
    with st.expander("⬇️ Eksport"):
        c1, c2, c3 = st.columns(3)
        c1.download_button("Mahsulotlar (CSV)", data=to_csv_bytes(products_frame(store.products)),
                           file_name="mahsulotlar.csv", mime="text/csv")
        c2.download_button("Natija (CSV)", data=to_csv_bytes(summary_frame(summary)),
                           file_name="natija.csv", mime="text/csv")
        c3.download_button("Natija (PDF)", data=build_summary_pdf(summary, store.products, datetime.now()),
                           file_name="natija.pdf", mime="application/pdf")

# -----------------------
# Page
# -----------------------
def render_main_page():
    store = get_store()
    if store.errors:
        st.sidebar.warning(f"⚠️ Ma'lumotlarni saqlash/o‘qishda xatolik: {store.errors[-1]}")
    _render_header(store)
    _render_products(store)
    summary = _render_summary(store)
    _render_exports(store, summary)
