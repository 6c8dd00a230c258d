from books.models import InventoryItem, Voucher
from books.stock import generate_stock_statement, stock_summary

ROD = 1
VENDOR = 10
CUSTOMER = 11


def movement(vid, vtype, date, qty, item_id=ROD):
    party = VENDOR if vtype == "Purchase" else CUSTOMER
    return Voucher.from_dict(
        {
            "id": vid,
            "type": vtype,
            "date": date,
            "referenceNo": f"REF-{vid}",
            "partyLedgerId": party,
            "items": [{"itemId": item_id, "quantity": qty, "rate": 50, "amount": qty * 50}],
            "totalAmount": qty * 50,
        }
    )


def rod():
    return InventoryItem(id=ROD, name="Rod", unit="PCS", purchase_price=50, stock={"G1": 10})


def movements():
    return [
        movement(1, "Purchase", "2025-01-05", 5),
        movement(2, "Sales", "2025-01-20", 3),
        movement(3, "Sales", "2025-02-10", 2),
        movement(4, "Sales", "2025-01-21", 7, item_id=2),
    ]


def test_stock_statement_window():
    report = generate_stock_statement(rod(), movements(), "2025-01-10", "2025-01-31")
    assert report["opening_stock"] == 15
    assert len(report["lines"]) == 1
    line = report["lines"][0]
    assert line["out"] == 3 and line["in"] == 0
    assert line["balance"] == 12
    assert line["voucher_no"] == "REF-2"
    assert report["closing_stock"] == 12


def test_stock_statement_in_and_out():
    report = generate_stock_statement(rod(), movements(), "2025-01-01", "2025-02-28")
    assert report["opening_stock"] == 10
    assert [(line["in"], line["out"], line["balance"]) for line in report["lines"]] == [
        (5, 0, 15),
        (0, 3, 12),
        (0, 2, 10),
    ]
    assert report["closing_stock"] == report["opening_stock"] + report["total_in"] - report["total_out"]


def test_ledger_lines_with_same_id_are_not_stock():
    receipt = Voucher.from_dict(
        {
            "id": 9,
            "type": "Receipt",
            "date": "2025-01-15",
            "partyLedgerId": CUSTOMER,
            "items": [{"itemId": ROD, "amount": 100}],
            "totalAmount": 100,
        }
    )
    report = generate_stock_statement(rod(), [receipt], "2025-01-01", "2025-01-31")
    assert report["lines"] == []


def test_missing_item_returns_none():
    assert generate_stock_statement(None, movements(), "2025-01-01", "2025-01-31") is None


def test_stock_summary():
    items = [
        rod(),
        InventoryItem(id=2, name="Nut", purchase_price=1, stock={"G1": 2}, min_stock_level=5),
    ]
    summary = stock_summary(items)
    assert summary["total_value"] == 502
    assert summary["rows"][0]["low_stock"] is False
    assert summary["rows"][1]["low_stock"] is True
