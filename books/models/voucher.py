#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Voucher models.

A voucher stores one primary leg (``party_ledger_id`` for ``total_amount``)
and one or more secondary legs. The kind of a secondary leg depends on the
voucher type: Sales and Purchase lines carry stock (``InventoryLine``), the
cash, bank and transfer vouchers move money between ledgers (``LedgerLine``).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Union

from books.utils import BooksError


SALES = "Sales"
PURCHASE = "Purchase"
RECEIPT = "Receipt"
PAYMENT = "Payment"
JOURNAL = "Journal"
CONTRA = "Contra"

VOUCHER_TYPES = (SALES, PURCHASE, RECEIPT, PAYMENT, JOURNAL, CONTRA)
INVENTORY_VOUCHER_TYPES = (SALES, PURCHASE)


@dataclass
class InventoryLine:
    item_id: int
    quantity: float = 0.0
    rate: float = 0.0
    amount: float = 0.0
    item_name: str | None = None
    gst_rate: float = 0.0

    @property
    def target_id(self) -> int:
        return self.item_id

    def to_dict(self) -> Dict[str, Any]:
        return {
            "itemId": self.item_id,
            "itemName": self.item_name,
            "quantity": self.quantity,
            "rate": self.rate,
            "amount": self.amount,
            "gstRate": self.gst_rate,
        }


@dataclass
class LedgerLine:
    ledger_id: int
    amount: float = 0.0
    narration: str | None = None

    @property
    def target_id(self) -> int:
        return self.ledger_id

    @property
    def quantity(self) -> float:
        return 0.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "itemId": self.ledger_id,
            "amount": self.amount,
            "narration": self.narration,
        }


VoucherLine = Union[InventoryLine, LedgerLine]


def build_line(voucher_type: str, raw: Dict[str, Any]) -> VoucherLine:
    """Resolve a stored line document into its typed leg."""
    target = raw.get("itemId", raw.get("item_id", raw.get("ledger_id")))
    if target is None:
        raise BooksError("VOUCHER_LINE_INVALID", "Voucher line has no target id", {"line": raw})
    if voucher_type in INVENTORY_VOUCHER_TYPES:
        return InventoryLine(
            item_id=target,
            quantity=float(raw.get("quantity") or 0),
            rate=float(raw.get("rate") or 0),
            amount=float(raw.get("amount") or 0),
            item_name=raw.get("itemName", raw.get("item_name")),
            gst_rate=float(raw.get("gstRate", raw.get("gst_rate")) or 0),
        )
    return LedgerLine(
        ledger_id=target,
        amount=float(raw.get("amount") or 0),
        narration=raw.get("narration"),
    )


@dataclass
class Voucher:
    id: int | None
    type: str
    date: str
    party_ledger_id: int | None
    lines: List[VoucherLine] = field(default_factory=list)
    total_amount: float = 0.0
    reference_no: str = ""
    narration: str = ""
    total_tax: float = 0.0

    def display_ref(self) -> str:
        return self.reference_no or f"VCH-{self.id}"

    def particulars(self) -> str:
        return self.narration or f"{self.type} - Ref: {self.reference_no or '-'}"

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Voucher":
        voucher_type = data.get("type")
        if voucher_type not in VOUCHER_TYPES:
            raise BooksError(
                "VOUCHER_TYPE_INVALID",
                f"Unknown voucher type: {voucher_type}",
                {"allowed": list(VOUCHER_TYPES)},
            )
        raw_lines = data.get("items", data.get("lines")) or []
        return cls(
            id=data.get("id"),
            type=voucher_type,
            date=data.get("date", ""),
            party_ledger_id=data.get("partyLedgerId", data.get("party_ledger_id")),
            lines=[build_line(voucher_type, raw) for raw in raw_lines],
            total_amount=float(data.get("totalAmount", data.get("total_amount")) or 0),
            reference_no=data.get("referenceNo", data.get("reference_no")) or "",
            narration=data.get("narration") or "",
            total_tax=float(data.get("totalTax", data.get("total_tax")) or 0),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "type": self.type,
            "date": self.date,
            "referenceNo": self.reference_no,
            "partyLedgerId": self.party_ledger_id,
            "items": [line.to_dict() for line in self.lines],
            "totalAmount": self.total_amount,
            "totalTax": self.total_tax,
            "narration": self.narration,
        }
