#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Trial balance, profit & loss and balance sheet from one balance pass."""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List

from books.chart import (
    ASSET_GROUPS,
    EXPENSE_GROUPS,
    INCOME_GROUPS,
    LIABILITY_GROUPS,
    is_classified,
    nature,
)
from books.models import Account, InventoryItem, Voucher
from books.replay import account_balance, select
from books.utils import DEFAULT_ENGINE_CONFIG, BooksError


logger = logging.getLogger(__name__)


REPORT_KINDS = ("tb", "pl", "bs")

NET_PROFIT_LABEL = "Net Profit / (Loss)"
CLOSING_STOCK_LABEL = "Closing Stock"


def ledger_balances(
    accounts: Iterable[Account],
    vouchers: Iterable[Voucher],
    end_date: str,
    epsilon: float = DEFAULT_ENGINE_CONFIG["balance_epsilon"],
) -> List[Dict[str, Any]]:
    """Closing balance per classified account, dropping near-zero balances."""
    relevant = select(vouchers, as_of=end_date)
    rows = []
    for account in accounts:
        if not is_classified(account.group):
            logger.debug(
                "ledger %s (%s) has unclassified group %r, skipped",
                account.id,
                account.name,
                account.group,
            )
            continue
        balance = account_balance(account, relevant)
        if abs(balance) <= epsilon:
            continue
        rows.append(
            {
                "ledger_id": account.id,
                "name": account.name,
                "group": account.group,
                "nature": nature(account.group),
                "balance": balance,
            }
        )
    return rows


def closing_stock_value(items: Iterable[InventoryItem]) -> float:
    return sum(item.stock_value() for item in items)


def trial_balance(balances: List[Dict[str, Any]]) -> Dict[str, Any]:
    rows = [
        {
            "ledger_id": row["ledger_id"],
            "name": row["name"],
            "group": row["group"],
            "debit": max(row["balance"], 0.0),
            "credit": max(-row["balance"], 0.0),
        }
        for row in balances
    ]
    rows.sort(key=lambda r: r["name"].lower())
    total_debit = sum(r["debit"] for r in rows)
    total_credit = sum(r["credit"] for r in rows)
    return {
        "rows": rows,
        "totals": {"debit": total_debit, "credit": total_credit},
        "difference": total_debit - total_credit,
    }


def _section(name: str, rows: List[Dict[str, Any]]) -> Dict[str, Any]:
    return {
        "section": name,
        "items": rows,
        "total": sum(abs(r["balance"]) for r in rows),
    }


def _pick(balances: List[Dict[str, Any]], groups) -> List[Dict[str, Any]]:
    return [
        {"ledger_id": r["ledger_id"], "name": r["name"], "group": r["group"], "balance": r["balance"]}
        for r in balances
        if r["group"] in groups
    ]


def net_profit(balances: List[Dict[str, Any]], stock_value: float) -> float:
    total_income = sum(abs(r["balance"]) for r in balances if r["group"] in INCOME_GROUPS)
    total_expense = sum(abs(r["balance"]) for r in balances if r["group"] in EXPENSE_GROUPS)
    return (total_income + stock_value) - total_expense


def profit_and_loss(balances: List[Dict[str, Any]], stock_value: float) -> Dict[str, Any]:
    income = _section("Income", _pick(balances, INCOME_GROUPS))
    expense = _section("Expenses", _pick(balances, EXPENSE_GROUPS))
    stock = _section(
        CLOSING_STOCK_LABEL,
        [{"ledger_id": None, "name": CLOSING_STOCK_LABEL, "group": None, "balance": stock_value}],
    )
    profit = (income["total"] + stock_value) - expense["total"]
    return {
        "sections": [income, expense, stock],
        "total_income": income["total"],
        "total_expense": expense["total"],
        "closing_stock": stock_value,
        "net_profit": profit,
        "totals": {"debit": expense["total"], "credit": income["total"] + stock_value},
    }


def balance_sheet(balances: List[Dict[str, Any]], stock_value: float) -> Dict[str, Any]:
    profit = net_profit(balances, stock_value)
    liabilities = _pick(balances, LIABILITY_GROUPS)
    liabilities.append(
        {"ledger_id": None, "name": NET_PROFIT_LABEL, "group": None, "balance": -profit}
    )
    assets = _pick(balances, ASSET_GROUPS)
    assets.append(
        {"ledger_id": None, "name": CLOSING_STOCK_LABEL, "group": None, "balance": stock_value}
    )
    liability_section = _section("Liabilities", liabilities)
    asset_section = _section("Assets", assets)
    # the two sides are reported as computed, not forced to agree
    return {
        "sections": [liability_section, asset_section],
        "net_profit": profit,
        "closing_stock": stock_value,
        "total_liabilities": liability_section["total"],
        "total_assets": asset_section["total"],
    }


def generate_financial_report(
    kind: str,
    accounts: Iterable[Account],
    vouchers: Iterable[Voucher],
    items: Iterable[InventoryItem],
    end_date: str,
    epsilon: float = DEFAULT_ENGINE_CONFIG["balance_epsilon"],
) -> Dict[str, Any]:
    kind = (kind or "").lower()
    if kind not in REPORT_KINDS:
        raise BooksError(
            "REPORT_KIND_INVALID",
            f"Unknown report kind: {kind}",
            {"allowed": list(REPORT_KINDS)},
        )
    balances = ledger_balances(accounts, vouchers, end_date, epsilon)
    stock_value = closing_stock_value(items)

    if kind == "tb":
        body = trial_balance(balances)
    elif kind == "pl":
        body = profit_and_loss(balances, stock_value)
    else:
        body = balance_sheet(balances, stock_value)
    return {"kind": kind, "end_date": end_date, **body}
