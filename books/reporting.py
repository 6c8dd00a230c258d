#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Report entry points over a store snapshot.

The engine config is read here, once per report, and handed to the pure
report functions as plain arguments.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from books.aging import RECEIVABLE
from books.aging import generate_aging_report as _aging_report
from books.financials import generate_financial_report as _financial_report
from books.portal import partner_statement
from books.statements import generate_statement as _statement
from books.stock import generate_stock_statement as _stock_statement
from books.stock import stock_summary
from books.store import Snapshot
from books.utils import load_engine_config


def _with_header(snapshot: Snapshot, report: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    if report is None:
        return None
    if snapshot.profile is not None:
        report["company"] = snapshot.profile.header()
    return report


def generate_statement(
    snapshot: Snapshot, ledger_id, start_date: str, end_date: str
) -> Optional[Dict[str, Any]]:
    report = _statement(snapshot.account(ledger_id), snapshot.vouchers, start_date, end_date)
    return _with_header(snapshot, report)


def generate_aging_report(
    snapshot: Snapshot, as_of: str, perspective: str = RECEIVABLE
) -> Dict[str, Any]:
    config = load_engine_config()
    report = _aging_report(
        snapshot.accounts,
        snapshot.vouchers,
        as_of,
        perspective,
        bucket_days=config["aging_bucket_days"],
    )
    return _with_header(snapshot, report)


def generate_financial_report(
    snapshot: Snapshot, kind: str, end_date: str
) -> Dict[str, Any]:
    config = load_engine_config()
    report = _financial_report(
        kind,
        snapshot.accounts,
        snapshot.vouchers,
        snapshot.items,
        end_date,
        epsilon=float(config["balance_epsilon"]),
    )
    return _with_header(snapshot, report)


def generate_stock_statement(
    snapshot: Snapshot, item_id, start_date: str, end_date: str
) -> Optional[Dict[str, Any]]:
    report = _stock_statement(snapshot.item(item_id), snapshot.vouchers, start_date, end_date)
    return _with_header(snapshot, report)


def generate_stock_summary(snapshot: Snapshot) -> Dict[str, Any]:
    return _with_header(snapshot, stock_summary(snapshot.items))


def generate_partner_statement(
    snapshot: Snapshot, ledger_id, start_date: str, end_date: str
) -> Optional[Dict[str, Any]]:
    config = load_engine_config()
    report = partner_statement(
        snapshot.account(ledger_id),
        snapshot.vouchers,
        start_date,
        end_date,
        bucket_days=config["aging_bucket_days"],
    )
    return _with_header(snapshot, report)
