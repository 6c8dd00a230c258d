#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Receivable / payable aging.

Outstanding balances are matched against bills most recent first: the
newest bill absorbs as much of the balance as it can, then the next newest,
and whatever no bill explains lands in the oldest bucket. This is not
oldest-first (FIFO) aging; a customer with many small recent bills and one
large old bill shows most of the debt as recent.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Optional, Sequence

from books.chart import SUNDRY_CREDITORS, SUNDRY_DEBTORS
from books.effects import touches
from books.models import JOURNAL, PURCHASE, SALES, Account, Voucher
from books.replay import account_balance
from books.utils import DEFAULT_ENGINE_CONFIG, BooksError, parse_date


logger = logging.getLogger(__name__)


RECEIVABLE = "Receivable"
PAYABLE = "Payable"

BUCKETS = ("0-30", "31-60", "61-90", ">90")

BILL_TYPES = {
    RECEIVABLE: (SALES, JOURNAL),
    PAYABLE: (PURCHASE, JOURNAL),
}

PARTY_GROUPS = {
    RECEIVABLE: SUNDRY_DEBTORS,
    PAYABLE: SUNDRY_CREDITORS,
}


def normalize_perspective(perspective: str) -> str:
    value = (perspective or "").strip().lower()
    if value in ("receivable", "receivables", "ar"):
        return RECEIVABLE
    if value in ("payable", "payables", "ap"):
        return PAYABLE
    raise BooksError(
        "PERSPECTIVE_INVALID",
        f"Unknown aging perspective: {perspective}",
        {"allowed": [RECEIVABLE, PAYABLE]},
    )


def perspective_sign(perspective: str) -> int:
    return 1 if normalize_perspective(perspective) == RECEIVABLE else -1


def empty_buckets() -> Dict[str, float]:
    return {name: 0.0 for name in BUCKETS}


def bucket_for(days: int, limits: List[int]) -> str:
    for limit, name in zip(limits, BUCKETS):
        if days <= limit:
            return name
    return BUCKETS[-1]


def collect_bills(
    vouchers: Iterable[Voucher], account_id, as_of: str, perspective: str
) -> List[Dict[str, Any]]:
    """Bills for the account dated on or before ``as_of``, newest first."""
    bill_types = BILL_TYPES[normalize_perspective(perspective)]
    as_of_d = parse_date(as_of)
    bills = []
    for voucher in vouchers:
        if voucher.type not in bill_types or not touches(voucher, account_id):
            continue
        day = parse_date(voucher.date)
        if day > as_of_d:
            continue
        if voucher.party_ledger_id == account_id:
            amount = float(voucher.total_amount or 0)
        else:
            line = next(ln for ln in voucher.lines if ln.target_id == account_id)
            amount = float(line.amount or 0)
        bills.append({"date": day, "amount": amount, "voucher_id": voucher.id})
    # reverse sort is stable too, same-day bills keep stored order
    return sorted(bills, key=lambda b: b["date"], reverse=True)


def age(
    closing_balance: float,
    vouchers: Iterable[Voucher],
    account_id,
    as_of: str,
    perspective: str = RECEIVABLE,
    bucket_days: Optional[Sequence[int]] = None,
) -> Optional[Dict[str, float]]:
    """Bucket an outstanding balance by bill age.

    ``closing_balance`` is the replayed Dr-positive balance; it is flipped
    for the payable side, so a creditor owed money has a positive amount to
    age. Returns ``None`` when nothing is outstanding.
    """
    outstanding = perspective_sign(perspective) * closing_balance
    if outstanding <= 0:
        return None
    limits = list(bucket_days or DEFAULT_ENGINE_CONFIG["aging_bucket_days"])
    as_of_d = parse_date(as_of)
    buckets = empty_buckets()
    remaining = outstanding

    for bill in collect_bills(vouchers, account_id, as_of, perspective):
        if remaining <= 0:
            break
        if bill["amount"] <= 0:
            continue
        matched = min(remaining, bill["amount"])
        days = (as_of_d - bill["date"]).days
        buckets[bucket_for(days, limits)] += matched
        remaining -= matched

    if remaining > 0:
        logger.debug(
            "ledger %s: %.2f not covered by bills, aged as %s",
            account_id,
            remaining,
            BUCKETS[-1],
        )
        buckets[BUCKETS[-1]] += remaining
    return buckets


def generate_aging_report(
    accounts: Iterable[Account],
    vouchers: Iterable[Voucher],
    as_of: str,
    perspective: str = RECEIVABLE,
    bucket_days: Optional[Sequence[int]] = None,
) -> Dict[str, Any]:
    perspective = normalize_perspective(perspective)
    vouchers = list(vouchers)
    group = PARTY_GROUPS[perspective]
    sign = perspective_sign(perspective)

    rows = []
    totals = empty_buckets()
    total_due = 0.0
    for account in accounts:
        if account.group != group:
            continue
        balance = account_balance(account, vouchers, as_of)
        buckets = age(balance, vouchers, account.id, as_of, perspective, bucket_days)
        if buckets is None:
            continue
        rows.append(
            {
                "ledger_id": account.id,
                "name": account.name,
                "total_due": sign * balance,
                "buckets": buckets,
            }
        )
        total_due += sign * balance
        for name in BUCKETS:
            totals[name] += buckets[name]

    return {
        "as_of": as_of,
        "perspective": perspective,
        "rows": rows,
        "totals": {"total_due": total_due, **totals},
    }
