#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Statement view for an external partner logged into the portal."""

from __future__ import annotations

from typing import Any, Dict, Iterable, Optional, Sequence

from books.aging import RECEIVABLE, age
from books.models import Account, Voucher
from books.statements import generate_statement


def partner_statement(
    account: Optional[Account],
    vouchers: Iterable[Voucher],
    start_date: str,
    end_date: str,
    bucket_days: Optional[Sequence[int]] = None,
) -> Optional[Dict[str, Any]]:
    """Partner ledger statement plus aging of what the partner owes at ``end_date``."""
    vouchers = list(vouchers)
    statement = generate_statement(account, vouchers, start_date, end_date)
    if statement is None:
        return None
    statement["aging"] = age(
        statement["closing_balance"],
        vouchers,
        account.id,
        end_date,
        RECEIVABLE,
        bucket_days,
    )
    return statement
