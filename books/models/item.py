#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Inventory item model."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict


@dataclass
class InventoryItem:
    id: int | None
    name: str
    sku: str = ""
    unit: str = "PCS"
    purchase_price: float = 0.0
    stock: Dict[str, float] = field(default_factory=dict)
    hsn: str | None = None
    category: str | None = None
    selling_price: float = 0.0
    gst_rate: float = 0.0
    min_stock_level: float = 0.0

    def total_stock(self) -> float:
        return sum(float(qty or 0) for qty in (self.stock or {}).values())

    def stock_value(self) -> float:
        return self.total_stock() * float(self.purchase_price or 0)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "InventoryItem":
        return cls(
            id=data.get("id"),
            name=data.get("name", ""),
            sku=data.get("sku", ""),
            unit=data.get("unit", "PCS"),
            purchase_price=float(
                data.get("purchase_price", data.get("purchasePrice")) or 0
            ),
            stock={str(k): float(v or 0) for k, v in (data.get("stock") or {}).items()},
            hsn=data.get("hsn"),
            category=data.get("category"),
            selling_price=float(
                data.get("selling_price", data.get("sellingPrice")) or 0
            ),
            gst_rate=float(data.get("gst_rate", data.get("gstRate")) or 0),
            min_stock_level=float(
                data.get("min_stock_level", data.get("minStockLevel")) or 0
            ),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "sku": self.sku,
            "unit": self.unit,
            "hsn": self.hsn,
            "category": self.category,
            "purchasePrice": self.purchase_price,
            "sellingPrice": self.selling_price,
            "gstRate": self.gst_rate,
            "minStockLevel": self.min_stock_level,
            "stock": dict(self.stock),
        }
