#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Voucher effect resolver.

Every voucher is a single stored record whose double entry is inferred at
read time. Amounts are signed with Dr positive and Cr negative for every
account; presentation layers flip the sign where they need a credit view.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List, Tuple

from books.models import (
    CONTRA,
    JOURNAL,
    PAYMENT,
    PURCHASE,
    RECEIPT,
    SALES,
    InventoryLine,
    Voucher,
)


logger = logging.getLogger(__name__)


# voucher type -> (primary leg sign, secondary leg sign)
POSTING_SIGNS: Dict[str, Tuple[int, int]] = {
    SALES: (1, -1),
    PURCHASE: (-1, 1),
    RECEIPT: (-1, 1),
    PAYMENT: (1, -1),
    CONTRA: (-1, 1),
}

# voucher type -> stock direction of its inventory lines
STOCK_SIGNS: Dict[str, int] = {
    PURCHASE: 1,
    SALES: -1,
}


@dataclass(frozen=True)
class Posting:
    account_id: int | None
    amount: float
    leg: str


def _signs(voucher: Voucher) -> Tuple[int, int]:
    signs = POSTING_SIGNS.get(voucher.type)
    if signs is None:
        if voucher.type == JOURNAL:
            logger.debug("journal voucher %s has no balance effect", voucher.id)
        return 0, 0
    return signs


def effect(voucher: Voucher, account_id) -> float:
    """Signed monetary effect of ``voucher`` on ``account_id``.

    Party and line roles are summed, so a voucher that names the same
    account on both legs contributes both.
    """
    primary, secondary = _signs(voucher)
    change = 0.0
    if voucher.party_ledger_id == account_id:
        change += primary * float(voucher.total_amount or 0)
    for line in voucher.lines:
        if line.target_id == account_id:
            change += secondary * float(line.amount or 0)
    return change


def stock_effect(voucher: Voucher, item_id) -> float:
    sign = STOCK_SIGNS.get(voucher.type, 0)
    if not sign:
        return 0.0
    qty = 0.0
    for line in voucher.lines:
        if isinstance(line, InventoryLine) and line.item_id == item_id:
            qty += float(line.quantity or 0)
    return sign * qty


def postings(voucher: Voucher) -> List[Posting]:
    primary, secondary = _signs(voucher)
    if not primary and not secondary:
        return []
    rows = [Posting(voucher.party_ledger_id, primary * float(voucher.total_amount or 0), "primary")]
    for line in voucher.lines:
        rows.append(Posting(line.target_id, secondary * float(line.amount or 0), "secondary"))
    return rows


def is_balanced(voucher: Voucher, tolerance: float = 0.01) -> bool:
    return abs(sum(p.amount for p in postings(voucher))) < tolerance


def touches(voucher: Voucher, account_id) -> bool:
    if voucher.party_ledger_id == account_id:
        return True
    return any(line.target_id == account_id for line in voucher.lines)
