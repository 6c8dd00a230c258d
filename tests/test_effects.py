import pytest

from books.effects import effect, is_balanced, postings, stock_effect, touches
from books.models import Voucher

PARTY = 1
OTHER = 2


def make_voucher(vtype, amount=100.0, party=PARTY, target=OTHER, qty=0.0, vid=1):
    return Voucher.from_dict(
        {
            "id": vid,
            "type": vtype,
            "date": "2025-01-01",
            "partyLedgerId": party,
            "items": [{"itemId": target, "quantity": qty, "amount": amount}],
            "totalAmount": amount,
        }
    )


@pytest.mark.parametrize(
    "vtype, party_sign, line_sign",
    [
        ("Sales", 1, -1),
        ("Purchase", -1, 1),
        ("Receipt", -1, 1),
        ("Payment", 1, -1),
        ("Contra", -1, 1),
    ],
)
def test_posting_table(vtype, party_sign, line_sign):
    voucher = make_voucher(vtype, 250.0)
    assert effect(voucher, PARTY) == party_sign * 250.0
    assert effect(voucher, OTHER) == line_sign * 250.0


def test_postings_net_to_zero():
    for vtype in ("Sales", "Purchase", "Receipt", "Payment", "Contra"):
        voucher = make_voucher(vtype, 80.0)
        assert sum(p.amount for p in postings(voucher)) == 0
        assert is_balanced(voucher)


def test_journal_has_no_balance_effect():
    voucher = make_voucher("Journal", 400.0)
    assert effect(voucher, PARTY) == 0
    assert effect(voucher, OTHER) == 0
    assert postings(voucher) == []


def test_unrelated_account_has_zero_effect():
    voucher = make_voucher("Sales", 100.0)
    assert effect(voucher, 99) == 0
    assert not touches(voucher, 99)
    assert touches(voucher, OTHER)


def test_self_reference_sums_both_legs():
    voucher = Voucher.from_dict(
        {
            "id": 5,
            "type": "Payment",
            "date": "2025-01-01",
            "partyLedgerId": PARTY,
            "items": [{"itemId": PARTY, "amount": 30}],
            "totalAmount": 100,
        }
    )
    # party leg +100 (Dr), line leg -30 (Cr)
    assert effect(voucher, PARTY) == pytest.approx(70.0)


def test_multiple_lines_for_same_account_accumulate():
    voucher = Voucher.from_dict(
        {
            "id": 6,
            "type": "Sales",
            "date": "2025-01-01",
            "partyLedgerId": PARTY,
            "items": [
                {"itemId": OTHER, "quantity": 1, "amount": 40},
                {"itemId": OTHER, "quantity": 2, "amount": 60},
            ],
            "totalAmount": 100,
        }
    )
    assert effect(voucher, OTHER) == pytest.approx(-100.0)
    assert stock_effect(voucher, OTHER) == -3


def test_stock_effect_by_type():
    assert stock_effect(make_voucher("Purchase", qty=5), OTHER) == 5
    assert stock_effect(make_voucher("Sales", qty=4), OTHER) == -4
    assert stock_effect(make_voucher("Receipt", qty=4), OTHER) == 0
    assert stock_effect(make_voucher("Purchase", qty=5), 42) == 0


def test_sales_with_tax_is_not_balanced():
    voucher = Voucher.from_dict(
        {
            "id": 7,
            "type": "Sales",
            "date": "2025-01-01",
            "partyLedgerId": PARTY,
            "items": [{"itemId": OTHER, "quantity": 1, "amount": 100}],
            "totalAmount": 118,
        }
    )
    assert not is_balanced(voucher)
