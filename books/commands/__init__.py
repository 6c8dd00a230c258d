from .init import add_parser as add_init_parser
from .ledger import add_parser as add_ledger_parser
from .voucher import add_parser as add_voucher_parser
from .item import add_parser as add_item_parser
from .profile import add_parser as add_profile_parser
from .statement import add_parser as add_statement_parser
from .aging import add_parser as add_aging_parser
from .report import add_parser as add_report_parser
from .stock import add_parser as add_stock_parser
from .portal import add_parser as add_portal_parser

__all__ = [
    "add_init_parser",
    "add_ledger_parser",
    "add_voucher_parser",
    "add_item_parser",
    "add_profile_parser",
    "add_statement_parser",
    "add_aging_parser",
    "add_report_parser",
    "add_stock_parser",
    "add_portal_parser",
]
