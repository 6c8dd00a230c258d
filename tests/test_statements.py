import pytest

from books.models import Account, Voucher
from books.statements import format_balance, format_money, generate_statement

ACME = 1
CASH = 2
SALES_AC = 3


def voucher(vid, vtype, date, party, target, amount, narration=""):
    return Voucher.from_dict(
        {
            "id": vid,
            "type": vtype,
            "date": date,
            "referenceNo": f"INV-{vid}",
            "partyLedgerId": party,
            "items": [{"itemId": target, "amount": amount}],
            "totalAmount": amount,
            "narration": narration,
        }
    )


def acme():
    return Account(
        id=ACME,
        name="Acme Traders",
        group="Sundry Debtors",
        opening_balance=1000,
        opening_balance_type="Dr",
    )


def journal():
    return [
        voucher(1, "Sales", "2025-01-01", ACME, SALES_AC, 5000),
        voucher(2, "Receipt", "2025-01-11", ACME, CASH, 3000, narration="Cheque 4411"),
        voucher(3, "Contra", "2025-01-12", CASH, 99, 500),
        voucher(4, "Sales", "2025-02-05", ACME, SALES_AC, 700),
    ]


def test_acme_statement():
    report = generate_statement(acme(), journal(), "2025-01-01", "2025-01-31")

    assert report["opening_balance"] == 1000
    assert [line["balance"] for line in report["lines"]] == [6000, 3000]
    assert report["lines"][0]["debit"] == 5000
    assert report["lines"][0]["credit"] == 0
    assert report["lines"][1]["credit"] == 3000
    assert report["lines"][1]["particulars"] == "Cheque 4411"
    assert report["lines"][0]["particulars"] == "Sales - Ref: INV-1"
    assert report["closing_balance"] == 3000
    assert report["closing_label"] == "3,000.00 Dr"


def test_unrelated_vouchers_are_omitted():
    report = generate_statement(acme(), journal(), "2025-01-01", "2025-01-31")
    assert [line["voucher_id"] for line in report["lines"]] == [1, 2]


def test_closing_equals_opening_plus_debits_minus_credits():
    report = generate_statement(acme(), journal(), "2024-12-01", "2025-03-31")
    expected = report["opening_balance"] + report["total_debit"] - report["total_credit"]
    assert report["closing_balance"] == pytest.approx(expected)
    assert report["total_debit"] == pytest.approx(sum(line["debit"] for line in report["lines"]))


def test_opening_continuity_across_periods():
    january = generate_statement(acme(), journal(), "2025-01-01", "2025-01-31")
    february = generate_statement(acme(), journal(), "2025-02-01", "2025-02-28")
    assert february["opening_balance"] == pytest.approx(january["closing_balance"])
    assert february["closing_balance"] == pytest.approx(3700)


def test_boundary_day_is_counted_once():
    first = generate_statement(acme(), journal(), "2025-01-01", "2025-01-10")
    second = generate_statement(acme(), journal(), "2025-01-11", "2025-01-31")
    assert second["opening_balance"] == pytest.approx(first["closing_balance"])
    assert [line["voucher_id"] for line in second["lines"]] == [2]


def test_empty_period_has_no_lines():
    report = generate_statement(acme(), journal(), "2025-06-01", "2025-06-30")
    assert report["lines"] == []
    assert report["closing_balance"] == report["opening_balance"] == pytest.approx(3700)


def test_missing_account_returns_none():
    assert generate_statement(None, journal(), "2025-01-01", "2025-01-31") is None


def test_credit_balance_label():
    vendor = Account(id=7, name="Steel Co", group="Sundry Creditors", opening_balance=1250.5, opening_balance_type="Cr")
    report = generate_statement(vendor, [], "2025-01-01", "2025-01-31")
    assert report["opening_balance"] == -1250.5
    assert report["opening_label"] == "1,250.50 Cr"


def test_indian_digit_grouping():
    assert format_money(1234567.891) == "12,34,567.89"
    assert format_money(999) == "999.00"
    assert format_money(100000) == "1,00,000.00"
    assert format_balance(0) == "0.00 Dr"
    assert format_balance(-25) == "25.00 Cr"
