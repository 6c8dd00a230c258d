#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Business profile model."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict


@dataclass
class BusinessProfile:
    company_name: str
    gstin: str = ""
    address_line1: str = ""
    address_line2: str | None = None
    city: str = ""
    state: str = ""
    pincode: str = ""
    email: str = ""
    phone: str = ""

    def address(self) -> str:
        parts = [self.address_line1, self.address_line2, self.city, self.state, self.pincode]
        return ", ".join(p for p in parts if p)

    def header(self) -> Dict[str, str]:
        return {
            "company_name": self.company_name,
            "gstin": self.gstin,
            "address": self.address(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BusinessProfile":
        return cls(
            company_name=data.get("company_name", data.get("companyName", "")),
            gstin=data.get("gstin", ""),
            address_line1=data.get("address_line1", data.get("addressLine1", "")),
            address_line2=data.get("address_line2", data.get("addressLine2")),
            city=data.get("city", ""),
            state=data.get("state", ""),
            pincode=data.get("pincode", ""),
            email=data.get("email", ""),
            phone=data.get("phone", ""),
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
