from .account import CR, DR, Account
from .item import InventoryItem
from .profile import BusinessProfile
from .voucher import (
    CONTRA,
    JOURNAL,
    PAYMENT,
    PURCHASE,
    RECEIPT,
    SALES,
    VOUCHER_TYPES,
    InventoryLine,
    LedgerLine,
    Voucher,
    VoucherLine,
    build_line,
)

__all__ = [
    "Account",
    "BusinessProfile",
    "CONTRA",
    "CR",
    "DR",
    "InventoryItem",
    "InventoryLine",
    "JOURNAL",
    "LedgerLine",
    "PAYMENT",
    "PURCHASE",
    "RECEIPT",
    "SALES",
    "VOUCHER_TYPES",
    "Voucher",
    "VoucherLine",
    "build_line",
]
