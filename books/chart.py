#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Chart of accounts: group labels, accounting nature and report partitions."""

from __future__ import annotations

from typing import Dict, Tuple

from books.models import CR, DR


ASSET = "Asset"
LIABILITY = "Liability"
INCOME = "Income"
EXPENSE = "Expense"
EQUITY = "Equity"
UNCLASSIFIED = "Unclassified"

SUNDRY_DEBTORS = "Sundry Debtors"
SUNDRY_CREDITORS = "Sundry Creditors"
CASH_IN_HAND = "Cash-in-Hand"
BANK_ACCOUNTS = "Bank Accounts"
BANK_OD = "Bank OD A/c"


GROUP_NATURE: Dict[str, str] = {
    BANK_ACCOUNTS: ASSET,
    BANK_OD: LIABILITY,
    "Branch / Divisions": LIABILITY,
    "Capital Account": EQUITY,
    CASH_IN_HAND: ASSET,
    "Current Assets": ASSET,
    "Current Liabilities": LIABILITY,
    "Deposits (Asset)": ASSET,
    "Direct Expenses": EXPENSE,
    "Direct Incomes": INCOME,
    "Duties & Taxes": LIABILITY,
    "Expenses (Direct)": EXPENSE,
    "Expenses (Indirect)": EXPENSE,
    "Fixed Assets": ASSET,
    "Income (Direct)": INCOME,
    "Income (Indirect)": INCOME,
    "Indirect Expenses": EXPENSE,
    "Indirect Incomes": INCOME,
    "Investments": ASSET,
    "Loans & Advances (Asset)": ASSET,
    "Loans (Liability)": LIABILITY,
    "Misc. Expenses (ASSET)": ASSET,
    "Provisions": LIABILITY,
    "Purchase Accounts": EXPENSE,
    "Reserves & Surplus": EQUITY,
    "Retained Earnings": EQUITY,
    "Sales Accounts": INCOME,
    "Secured Loans": LIABILITY,
    "Stock-in-Hand": ASSET,
    SUNDRY_CREDITORS: LIABILITY,
    SUNDRY_DEBTORS: ASSET,
    "Suspense A/c": LIABILITY,
    "Unsecured Loans": LIABILITY,
}

# Groups offered by the ledger master form.
PRIMARY_GROUPS: Tuple[str, ...] = (
    BANK_ACCOUNTS,
    CASH_IN_HAND,
    SUNDRY_DEBTORS,
    SUNDRY_CREDITORS,
    "Purchase Accounts",
    "Sales Accounts",
    "Direct Expenses",
    "Indirect Expenses",
    "Direct Incomes",
    "Indirect Incomes",
    "Capital Account",
    "Loans (Liability)",
    "Fixed Assets",
    "Current Assets",
    "Current Liabilities",
    "Stock-in-Hand",
)

INCOME_GROUPS: Tuple[str, ...] = ("Sales Accounts", "Direct Incomes", "Indirect Incomes")
EXPENSE_GROUPS: Tuple[str, ...] = ("Purchase Accounts", "Direct Expenses", "Indirect Expenses")

LIABILITY_GROUPS: Tuple[str, ...] = (
    "Capital Account",
    "Loans (Liability)",
    "Current Liabilities",
    "Suspense A/c",
    SUNDRY_CREDITORS,
)
ASSET_GROUPS: Tuple[str, ...] = (
    "Fixed Assets",
    "Current Assets",
    "Investments",
    "Loans & Advances (Asset)",
    SUNDRY_DEBTORS,
    CASH_IN_HAND,
    BANK_ACCOUNTS,
)


def nature(group: str | None) -> str:
    return GROUP_NATURE.get(group or "", UNCLASSIFIED)


def normal_sign(group: str | None) -> str | None:
    """Default balance side of a group, ``None`` when the group is unknown."""
    kind = nature(group)
    if kind in (ASSET, EXPENSE):
        return DR
    if kind in (LIABILITY, INCOME, EQUITY):
        return CR
    return None


def is_classified(group: str | None) -> bool:
    return nature(group) != UNCLASSIFIED
