#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Account (ledger) model."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict


DR = "Dr"
CR = "Cr"


@dataclass
class Account:
    id: int | None
    name: str
    group: str
    code: str | None = None
    opening_balance: float = 0.0
    opening_balance_type: str = DR
    gstin: str | None = None
    alias: str | None = None
    state: str | None = None
    pan: str | None = None
    portal_email: str | None = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Account":
        return cls(
            id=data.get("id"),
            name=data.get("name", ""),
            group=data.get("group", ""),
            code=data.get("code"),
            opening_balance=float(
                data.get("opening_balance", data.get("openingBalance")) or 0
            ),
            opening_balance_type=(
                data.get("opening_balance_type")
                or data.get("openingBalanceType")
                or DR
            ),
            gstin=data.get("gstin"),
            alias=data.get("alias"),
            state=data.get("state"),
            pan=data.get("pan"),
            portal_email=data.get("portal_email", data.get("portalEmail")),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "code": self.code,
            "name": self.name,
            "group": self.group,
            "openingBalance": self.opening_balance,
            "openingBalanceType": self.opening_balance_type,
            "gstin": self.gstin,
            "alias": self.alias,
            "state": self.state,
            "pan": self.pan,
            "portalEmail": self.portal_email,
        }
