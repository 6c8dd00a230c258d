import openpyxl
import pytest

from books.aging import BUCKETS, generate_aging_report
from books.export import write_report_xlsx
from books.financials import generate_financial_report
from books.models import Account, Voucher
from books.portal import partner_statement
from books.statements import generate_statement
from books.utils import BooksError


def journal():
    return [
        Voucher.from_dict(
            {
                "id": 1,
                "type": "Sales",
                "date": "2025-01-01",
                "referenceNo": "INV-1",
                "partyLedgerId": 1,
                "items": [{"itemId": 2, "quantity": 1, "amount": 5000}],
                "totalAmount": 5000,
            }
        )
    ]


def accounts():
    return [
        Account(id=1, name="Acme Traders", group="Sundry Debtors"),
        Account(id=2, name="Sales Account", group="Sales Accounts"),
    ]


def read_rows(path):
    wb = openpyxl.load_workbook(path)
    rows = [list(row) for row in wb.active.iter_rows(values_only=True)]
    wb.close()
    return rows


def test_statement_to_xlsx(tmp_path):
    report = generate_statement(accounts()[0], journal(), "2025-01-01", "2025-01-31")
    report["company"] = {"company_name": "Shree Traders", "gstin": "27ABCDE1234F1Z5", "address": "Pune"}
    out = tmp_path / "statement.xlsx"

    result = write_report_xlsx(report, str(out))

    assert result["rows"] == 2
    rows = read_rows(out)
    assert rows[0][0] == "Shree Traders"
    assert ["Date", "Voucher No", "Type", "Particulars", "Debit", "Credit", "Balance"] in rows
    assert any(row[1] == "INV-1" and row[4] == 5000 for row in rows)
    assert rows[-1][3] == "Closing Balance"


def test_trial_balance_to_xlsx(tmp_path):
    report = generate_financial_report("tb", accounts(), journal(), [], "2025-01-31")
    out = tmp_path / "tb.xlsx"
    write_report_xlsx(report, str(out))
    rows = read_rows(out)
    assert rows[0][0] == "Trial Balance"
    assert rows[-1][0] == "Total"
    assert rows[-1][2:4] == [5000, 5000]


def test_aging_to_xlsx(tmp_path):
    report = generate_aging_report(accounts(), journal(), "2025-01-20", "receivable")
    out = tmp_path / "aging.xlsx"
    write_report_xlsx(report, str(out))
    rows = read_rows(out)
    assert ["Acme Traders", 5000, 5000, 0, 0, 0] in rows


def test_unknown_shape_is_rejected(tmp_path):
    with pytest.raises(BooksError) as exc:
        write_report_xlsx({"rows": []}, str(tmp_path / "x.xlsx"))
    assert exc.value.code == "EXPORT_UNSUPPORTED"


def test_partner_statement_keeps_aging_block(tmp_path):
    report = partner_statement(accounts()[0], journal(), "2025-01-01", "2025-02-10")
    assert report["aging"]["31-60"] == 5000
    out = tmp_path / "portal.xlsx"
    write_report_xlsx(report, str(out))
    rows = read_rows(out)
    assert rows[-2][:5] == ["Aging", *BUCKETS]
    assert rows[-1][:5] == ["Outstanding", 0, 5000, 0, 0]


def test_statement_without_aging_has_no_aging_block(tmp_path):
    report = generate_statement(accounts()[0], journal(), "2025-01-01", "2025-01-31")
    out = tmp_path / "statement.xlsx"
    write_report_xlsx(report, str(out))
    assert all(row[0] != "Aging" for row in read_rows(out))
