import json
import subprocess
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]


def run_cli(args, db_path, input_data=None, expect_ok=True):
    cmd = [sys.executable, "-m", "books.cli", *args, "--db-path", str(db_path)]
    payload = json.dumps(input_data) if input_data is not None else None
    result = subprocess.run(
        cmd,
        input=payload,
        text=True,
        capture_output=True,
        cwd=ROOT,
    )
    if expect_ok:
        assert result.returncode == 0, result.stdout + result.stderr
    else:
        assert result.returncode != 0, result.stdout + result.stderr
    output = result.stdout.strip()
    return json.loads(output) if output else {}


def ledger_id(db_path, name):
    ledgers = run_cli(["ledger", "list"], db_path)["ledgers"]
    return next(row["id"] for row in ledgers if row["name"] == name)


def test_cli_statement_and_reports(tmp_path):
    db_path = tmp_path / "books.db"

    init = run_cli(["init"], db_path)
    assert init["ledgers_loaded"] == 6

    acme = run_cli(
        ["ledger", "add"],
        db_path,
        input_data={
            "name": "Acme Traders",
            "group": "Sundry Debtors",
            "openingBalance": 1000,
            "openingBalanceType": "Dr",
        },
    )["id"]
    cash = ledger_id(db_path, "Cash")
    sales = ledger_id(db_path, "Sales Account")

    run_cli(
        ["voucher", "record"],
        db_path,
        input_data={
            "type": "Sales",
            "date": "2025-01-01",
            "referenceNo": "INV-1",
            "partyLedgerId": acme,
            "items": [{"itemId": sales, "quantity": 1, "rate": 5000, "amount": 5000}],
            "totalAmount": 5000,
        },
    )
    receipt = run_cli(
        ["voucher", "record"],
        db_path,
        input_data={
            "type": "Receipt",
            "date": "2025-01-11",
            "partyLedgerId": acme,
            "items": [{"itemId": cash, "amount": 3000}],
            "totalAmount": 3000,
        },
    )
    assert receipt["balanced"] is True

    statement = run_cli(
        ["statement", "--ledger-id", str(acme), "--from", "2025-01-01", "--to", "2025-01-31"],
        db_path,
    )
    assert statement["opening_balance"] == 1000
    assert [line["balance"] for line in statement["lines"]] == [6000, 3000]
    assert statement["closing_label"] == "3,000.00 Dr"

    aging = run_cli(["aging", "--as-of", "2025-02-10"], db_path)
    assert aging["rows"][0]["buckets"]["31-60"] == 3000

    tb = run_cli(["report", "--kind", "tb", "--as-of", "2025-01-31"], db_path)
    assert tb["totals"]["debit"] == 6000
    assert tb["totals"]["credit"] == 5000

    xlsx = tmp_path / "bs.xlsx"
    exported = run_cli(["report", "--kind", "bs", "--as-of", "2025-01-31", "--xlsx", str(xlsx)], db_path)
    assert exported["status"] == "success"
    assert xlsx.exists()


def test_cli_missing_ledger_is_reported(tmp_path):
    db_path = tmp_path / "books.db"
    run_cli(["init", "--no-defaults"], db_path)
    result = run_cli(["statement", "--ledger-id", "42", "--from", "2025-01-01"], db_path)
    assert result == {"status": "not_found", "ledger_id": 42}


def test_cli_rejects_bad_voucher(tmp_path):
    db_path = tmp_path / "books.db"
    run_cli(["init", "--no-defaults"], db_path)
    error = run_cli(
        ["voucher", "record"],
        db_path,
        input_data={"type": "Memo", "date": "2025-01-01", "partyLedgerId": 1},
        expect_ok=False,
    )
    assert error["code"] == "VOUCHER_TYPE_INVALID"


def test_cli_stock_flow(tmp_path):
    db_path = tmp_path / "books.db"
    run_cli(["init", "--no-defaults"], db_path)
    item = run_cli(
        ["item", "add"],
        db_path,
        input_data={"name": "Rod", "sku": "ROD-1", "purchasePrice": 50, "stock": {"G1": 10}},
    )["id"]
    run_cli(
        ["voucher", "record"],
        db_path,
        input_data={
            "type": "Sales",
            "date": "2025-01-20",
            "partyLedgerId": 1,
            "items": [{"itemId": item, "quantity": 3, "rate": 60, "amount": 180}],
            "totalAmount": 180,
        },
    )
    stock = run_cli(["stock", "--item-id", str(item), "--from", "2025-01-01", "--to", "2025-01-31"], db_path)
    assert stock["opening_stock"] == 10
    assert stock["closing_stock"] == 7

    summary = run_cli(["item", "list"], db_path)
    assert summary["total_value"] == 500
