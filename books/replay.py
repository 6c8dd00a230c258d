#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Balance replay over the voucher journal."""

from __future__ import annotations

from typing import Iterable, List, Optional, Tuple

from books.effects import effect
from books.models import CR, Account, Voucher
from books.utils import parse_date


def seed(opening_amount: float, opening_type: str) -> float:
    amount = float(opening_amount or 0)
    return -amount if opening_type == CR else amount


def sort_by_date(vouchers: Iterable[Voucher]) -> List[Voucher]:
    # sorted() is stable, same-day vouchers keep their stored order
    return sorted(vouchers, key=lambda v: parse_date(v.date))


def select(
    vouchers: Iterable[Voucher],
    *,
    as_of=None,
    before=None,
    start=None,
) -> List[Voucher]:
    as_of_d = parse_date(as_of) if as_of is not None else None
    before_d = parse_date(before) if before is not None else None
    start_d = parse_date(start) if start is not None else None
    picked = []
    for voucher in vouchers:
        day = parse_date(voucher.date)
        if as_of_d is not None and day > as_of_d:
            continue
        if before_d is not None and day >= before_d:
            continue
        if start_d is not None and day < start_d:
            continue
        picked.append(voucher)
    return sort_by_date(picked)


def replay(
    account_id,
    opening_amount: float,
    opening_type: str,
    vouchers: Iterable[Voucher],
    as_of=None,
    before=None,
) -> float:
    """Fold voucher effects onto the opening balance in date order.

    ``as_of`` keeps vouchers dated on or before it, ``before`` keeps those
    strictly earlier (the opening of a period starting on that date).
    """
    balance = seed(opening_amount, opening_type)
    for voucher in select(vouchers, as_of=as_of, before=before):
        balance += effect(voucher, account_id)
    return balance


def running_trail(
    account_id,
    opening_balance: float,
    vouchers: Iterable[Voucher],
    start=None,
    end=None,
) -> List[Tuple[Voucher, float, float]]:
    """(voucher, effect, balance after voucher) for each voucher in the window."""
    balance = opening_balance
    trail = []
    for voucher in select(vouchers, as_of=end, start=start):
        change = effect(voucher, account_id)
        balance += change
        trail.append((voucher, change, balance))
    return trail


def account_balance(
    account: Account, vouchers: Iterable[Voucher], as_of: Optional[str] = None
) -> float:
    return replay(
        account.id,
        account.opening_balance,
        account.opening_balance_type,
        vouchers,
        as_of=as_of,
    )
