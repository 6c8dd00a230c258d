#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Ledger statement generator."""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Optional

from books.models import CR, DR, Account, Voucher
from books.replay import replay, running_trail
from books.utils import parse_date


logger = logging.getLogger(__name__)

# effects smaller than this are treated as "no relation to the account"
_ZERO = 1e-9


def balance_side(amount: float) -> str:
    return DR if amount >= 0 else CR


def format_money(amount: float) -> str:
    """Format with Indian digit grouping, e.g. 12,34,567.89."""
    negative = amount < 0
    whole, frac = f"{abs(amount):.2f}".split(".")
    if len(whole) > 3:
        head, tail = whole[:-3], whole[-3:]
        groups = []
        while len(head) > 2:
            groups.insert(0, head[-2:])
            head = head[:-2]
        if head:
            groups.insert(0, head)
        whole = ",".join(groups + [tail])
    return f"{'-' if negative else ''}{whole}.{frac}"


def format_balance(amount: float) -> str:
    return f"{format_money(abs(amount))} {balance_side(amount)}"


def generate_statement(
    account: Optional[Account],
    vouchers: Iterable[Voucher],
    start_date: str,
    end_date: str,
) -> Optional[Dict[str, Any]]:
    """Opening balance, dated lines and closing balance for one account.

    Returns ``None`` when the account is missing from the snapshot.
    """
    if account is None:
        return None
    vouchers = list(vouchers)
    if parse_date(start_date) > parse_date(end_date):
        logger.debug("statement window %s..%s is empty", start_date, end_date)

    opening = replay(
        account.id,
        account.opening_balance,
        account.opening_balance_type,
        vouchers,
        before=start_date,
    )

    lines: List[Dict[str, Any]] = []
    total_debit = 0.0
    total_credit = 0.0
    closing = opening
    for voucher, change, balance in running_trail(
        account.id, opening, vouchers, start=start_date, end=end_date
    ):
        closing = balance
        if abs(change) < _ZERO:
            continue
        debit = change if change > 0 else 0.0
        credit = -change if change < 0 else 0.0
        total_debit += debit
        total_credit += credit
        lines.append(
            {
                "date": voucher.date,
                "voucher_id": voucher.id,
                "voucher_no": voucher.display_ref(),
                "voucher_type": voucher.type,
                "particulars": voucher.particulars(),
                "debit": debit,
                "credit": credit,
                "balance": balance,
                "balance_label": format_balance(balance),
            }
        )

    return {
        "ledger": {
            "id": account.id,
            "name": account.name,
            "group": account.group,
            "gstin": account.gstin,
        },
        "start_date": start_date,
        "end_date": end_date,
        "opening_balance": opening,
        "opening_label": format_balance(opening),
        "lines": lines,
        "total_debit": total_debit,
        "total_credit": total_credit,
        "closing_balance": closing,
        "closing_label": format_balance(closing),
    }
