# tests/test_summary.py
import pytest
from conftest import make_product
from ulush_app.summary import (summarize, fmt_pct, format_number, products_frame,
                               summary_frame, to_csv_bytes)


def test_two_category_scenario():
    s = summarize([make_product("1", 10, 200, "A"), make_product("2", 20, 10, "B")])
    assert s.total == 2200
    assert [(r.category, r.subtotal) for r in s.rows] == [("A", 2000), ("B", 200)]
    assert round(s.rows[0].share, 2) == 90.91
    assert round(s.rows[1].share, 2) == 9.09
    assert [fmt_pct(r.share) for r in s.rows] == ["90.91%", "9.09%"]


def test_empty_list():
    s = summarize([])
    assert s.total == 0
    assert s.rows == []
    assert s.empty


def test_zero_total_keeps_rows_with_zero_share():
    s = summarize([make_product("1", 0, 5, "A"), make_product("2", 3, 0, "B")])
    assert s.total == 0
    assert {r.category for r in s.rows} == {"A", "B"}
    assert all(r.subtotal == 0 and r.share == 0 for r in s.rows)


def test_uncategorized_counts_toward_total_only():
    s = summarize([make_product("1", 1, 100, "A"), make_product("2", 1, 100, "")])
    assert s.total == 200
    assert len(s.rows) == 1
    assert s.rows[0].share == pytest.approx(50)


def test_non_numeric_fields_count_as_zero():
    s = summarize([make_product("1", "x", 10, "A"), make_product("2", "2", "5", "A")])
    assert s.total == 10
    assert s.rows[0].subtotal == 10


def test_sorted_descending_with_label_tie_break():
    products = [
        make_product("1", 1, 50, "C"),
        make_product("2", 1, 300, "B"),
        make_product("3", 1, 50, "A"),
        make_product("4", 2, 50, "D"),
    ]
    rows = summarize(products).rows
    assert [r.category for r in rows] == ["B", "D", "A", "C"]
    for a, b in zip(rows, rows[1:]):
        assert a.subtotal >= b.subtotal


def test_shares_sum_to_hundred():
    products = [make_product(str(i), i + 1, 3.3 * (i + 1), "ABCDE"[i % 5]) for i in range(17)]
    s = summarize(products)
    assert s.total == pytest.approx(sum(p.qty * p.price for p in products))
    assert sum(r.share for r in s.rows) == pytest.approx(100)
    for r in s.rows:
        assert r.share == pytest.approx(r.subtotal / s.total * 100)


def test_fmt_pct():
    assert fmt_pct(50) == "50%"
    assert fmt_pct(100) == "100%"
    assert fmt_pct(0) == "0%"
    assert fmt_pct(12.345) == "12.35%"
    assert fmt_pct(float("inf")) == "0%"
    assert fmt_pct(float("nan")) == "0%"


def test_format_number():
    assert format_number(2200) == "2 200"
    assert format_number(1234567.5) == "1 234 567.5"
    assert format_number(0) == "0"
    assert format_number(12) == "12"


def test_frames_and_csv():
    products = [make_product("1", 10, 200, "A", name="Telefon"), make_product("2", 20, 10, "B")]
    df = products_frame(products)
    assert list(df.columns) == ["#", "name", "qty", "price", "total", "category"]
    assert df["total"].tolist() == [2000, 200]
    sf = summary_frame(summarize(products))
    assert sf["share_pct"].tolist() == [90.91, 9.09]
    assert to_csv_bytes(sf).startswith(b"\xef\xbb\xbfcategory,subtotal,share_pct")


def test_frames_when_empty():
    assert products_frame([]).empty
    assert list(summary_frame(summarize([])).columns) == ["category", "subtotal", "share_pct"]


def test_overflowing_total_does_not_produce_nan_shares():
    s = summarize([make_product("1", 1e200, 1e200, "A"), make_product("2", 1, 5, "B")])
    assert s.total == float("inf")
    assert all(r.share == 0 for r in s.rows)
    assert format_number(s.total) == "∞"
    assert format_number(float("-inf")) == "-∞"
