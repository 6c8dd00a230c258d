#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Stock ledger replay.

Quantities only. The opening figure starts from the item master's live
stock and adds movements dated before the window; there is no stored
period-start snapshot, so this is an approximation once the master has
been updated by later vouchers.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional

from books.effects import stock_effect
from books.models import InventoryItem, InventoryLine, Voucher
from books.replay import select


def generate_stock_statement(
    item: Optional[InventoryItem],
    vouchers: Iterable[Voucher],
    start_date: str,
    end_date: str,
) -> Optional[Dict[str, Any]]:
    if item is None:
        return None
    relevant = [
        v
        for v in vouchers
        if any(
            isinstance(line, InventoryLine) and line.item_id == item.id
            for line in v.lines
        )
    ]

    running = item.total_stock()
    for voucher in select(relevant, before=start_date):
        running += stock_effect(voucher, item.id)
    opening = running

    lines: List[Dict[str, Any]] = []
    total_in = 0.0
    total_out = 0.0
    for voucher in select(relevant, start=start_date, as_of=end_date):
        change = stock_effect(voucher, item.id)
        qty_in = change if change > 0 else 0.0
        qty_out = -change if change < 0 else 0.0
        running += change
        total_in += qty_in
        total_out += qty_out
        lines.append(
            {
                "date": voucher.date,
                "voucher_id": voucher.id,
                "voucher_type": voucher.type,
                "voucher_no": voucher.display_ref(),
                "in": qty_in,
                "out": qty_out,
                "balance": running,
            }
        )

    return {
        "item": {"id": item.id, "name": item.name, "sku": item.sku, "unit": item.unit},
        "start_date": start_date,
        "end_date": end_date,
        "opening_stock": opening,
        "lines": lines,
        "total_in": total_in,
        "total_out": total_out,
        "closing_stock": running,
    }


def stock_summary(items: Iterable[InventoryItem]) -> Dict[str, Any]:
    rows = []
    total_value = 0.0
    for item in items:
        qty = item.total_stock()
        value = item.stock_value()
        total_value += value
        rows.append(
            {
                "item_id": item.id,
                "name": item.name,
                "sku": item.sku,
                "unit": item.unit,
                "stock": dict(item.stock),
                "total_stock": qty,
                "value": value,
                "low_stock": qty <= item.min_stock_level,
            }
        )
    return {"rows": rows, "total_value": total_value}
