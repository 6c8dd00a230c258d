#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Ledger, voucher and item persistence over the SQLite document store.

The engine modules never call into this module; callers load a
``Snapshot`` once and hand its collections to the pure report functions.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from books.chart import is_classified
from books.models import Account, BusinessProfile, InventoryItem, Voucher
from books.utils import BooksError, parse_date


logger = logging.getLogger(__name__)


PROFILE_KEY = "business_profile"


@dataclass
class Snapshot:
    accounts: List[Account] = field(default_factory=list)
    vouchers: List[Voucher] = field(default_factory=list)
    items: List[InventoryItem] = field(default_factory=list)
    profile: Optional[BusinessProfile] = None

    def account(self, ledger_id) -> Optional[Account]:
        return next((a for a in self.accounts if a.id == ledger_id), None)

    def item(self, item_id) -> Optional[InventoryItem]:
        return next((i for i in self.items if i.id == item_id), None)


def _load_docs(conn, table: str) -> List[Dict[str, Any]]:
    rows = conn.execute(f"SELECT id, doc FROM {table} ORDER BY id").fetchall()
    docs = []
    for row in rows:
        doc = json.loads(row["doc"])
        doc["id"] = row["id"]
        docs.append(doc)
    return docs


def _save_doc(conn, table: str, doc: Dict[str, Any], extra: Optional[Dict[str, Any]] = None) -> int:
    extra = extra or {}
    doc_id = doc.get("id")
    payload = json.dumps(doc, ensure_ascii=False)
    columns = ["doc", *extra.keys()]
    values = [payload, *extra.values()]
    if doc_id is None:
        placeholders = ", ".join("?" for _ in columns)
        cur = conn.execute(
            f"INSERT INTO {table} ({', '.join(columns)}) VALUES ({placeholders})",
            values,
        )
        return int(cur.lastrowid)
    assignments = ", ".join(f"{col} = ?" for col in columns)
    cur = conn.execute(
        f"UPDATE {table} SET {assignments}, updated_at = CURRENT_TIMESTAMP WHERE id = ?",
        [*values, doc_id],
    )
    if cur.rowcount == 0:
        conn.execute(
            f"INSERT INTO {table} (id, {', '.join(columns)}) VALUES (?, {', '.join('?' for _ in columns)})",
            [doc_id, *values],
        )
    return int(doc_id)


def get_all_ledgers(conn) -> List[Account]:
    return [Account.from_dict(doc) for doc in _load_docs(conn, "ledgers")]


def get_ledger(conn, ledger_id: int) -> Optional[Account]:
    row = conn.execute("SELECT id, doc FROM ledgers WHERE id = ?", (ledger_id,)).fetchone()
    if not row:
        return None
    doc = json.loads(row["doc"])
    doc["id"] = row["id"]
    return Account.from_dict(doc)


def save_ledger(conn, account: Account) -> int:
    if not account.name:
        raise BooksError("LEDGER_INVALID", "Ledger name is required")
    if account.opening_balance < 0:
        raise BooksError("LEDGER_INVALID", "Opening balance must not be negative")
    if account.opening_balance_type not in ("Dr", "Cr"):
        raise BooksError("LEDGER_INVALID", "Opening balance type must be Dr or Cr")
    if not is_classified(account.group):
        logger.warning(
            "ledger %r saved with unknown group %r; it will be left out of reports",
            account.name,
            account.group,
        )
    ledger_id = _save_doc(conn, "ledgers", account.to_dict())
    account.id = ledger_id
    logger.info("saved ledger %s (%s)", ledger_id, account.name)
    return ledger_id


def delete_ledger(conn, ledger_id: int) -> None:
    conn.execute("DELETE FROM ledgers WHERE id = ?", (ledger_id,))
    logger.info("deleted ledger %s", ledger_id)


def get_all_vouchers(conn) -> List[Voucher]:
    return [Voucher.from_dict(doc) for doc in _load_docs(conn, "vouchers")]


def save_voucher(conn, voucher: Voucher) -> int:
    day = parse_date(voucher.date)
    voucher.date = day.isoformat()
    voucher_id = _save_doc(conn, "vouchers", voucher.to_dict(), {"date": voucher.date})
    voucher.id = voucher_id
    logger.info("saved %s voucher %s dated %s", voucher.type, voucher_id, voucher.date)
    return voucher_id


def delete_voucher(conn, voucher_id: int) -> None:
    conn.execute("DELETE FROM vouchers WHERE id = ?", (voucher_id,))
    logger.info("deleted voucher %s", voucher_id)


def get_all_items(conn) -> List[InventoryItem]:
    return [InventoryItem.from_dict(doc) for doc in _load_docs(conn, "items")]


def save_item(conn, item: InventoryItem) -> int:
    if not item.name:
        raise BooksError("ITEM_INVALID", "Item name is required")
    item_id = _save_doc(conn, "items", item.to_dict())
    item.id = item_id
    logger.info("saved item %s (%s)", item_id, item.name)
    return item_id


def delete_item(conn, item_id: int) -> None:
    conn.execute("DELETE FROM items WHERE id = ?", (item_id,))
    logger.info("deleted item %s", item_id)


def get_business_profile(conn) -> Optional[BusinessProfile]:
    row = conn.execute("SELECT doc FROM settings WHERE key = ?", (PROFILE_KEY,)).fetchone()
    if not row:
        return None
    return BusinessProfile.from_dict(json.loads(row["doc"]))


def save_business_profile(conn, profile: BusinessProfile) -> str:
    conn.execute(
        """
        INSERT INTO settings (key, doc) VALUES (?, ?)
        ON CONFLICT(key) DO UPDATE SET doc = excluded.doc, updated_at = CURRENT_TIMESTAMP
        """,
        (PROFILE_KEY, json.dumps(profile.to_dict(), ensure_ascii=False)),
    )
    return PROFILE_KEY


def load_snapshot(conn) -> Snapshot:
    """Read all three collections inside one transaction."""
    started = not conn.in_transaction
    if started:
        conn.execute("BEGIN")
    try:
        snapshot = Snapshot(
            accounts=get_all_ledgers(conn),
            vouchers=get_all_vouchers(conn),
            items=get_all_items(conn),
            profile=get_business_profile(conn),
        )
    finally:
        if started:
            conn.execute("COMMIT")
    return snapshot
