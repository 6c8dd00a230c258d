#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""books voucher command."""

from __future__ import annotations

from books.database import get_db
from books.effects import is_balanced
from books.models import Voucher
from books.replay import select
from books.store import delete_voucher, get_all_vouchers, save_voucher
from books.utils import BooksError, load_json_input, print_json


def add_parser(subparsers, parents):
    parser = subparsers.add_parser("voucher", help="Voucher entry", parents=parents)
    sub = parser.add_subparsers(dest="voucher_cmd")

    record_cmd = sub.add_parser("record", help="Record a voucher (JSON on stdin)", parents=parents)
    record_cmd.set_defaults(func=run_record)

    list_cmd = sub.add_parser("list", help="List vouchers by date", parents=parents)
    list_cmd.add_argument("--from", dest="start_date", help="Start date")
    list_cmd.add_argument("--to", dest="end_date", help="End date")
    list_cmd.add_argument("--type", dest="type", help="Voucher type")
    list_cmd.set_defaults(func=run_list)

    delete_cmd = sub.add_parser("delete", help="Delete a voucher", parents=parents)
    delete_cmd.add_argument("voucher_id", type=int, help="Voucher id")
    delete_cmd.set_defaults(func=run_delete)

    return parser


def run_record(args):
    data = load_json_input()
    for field in ("type", "date", "partyLedgerId"):
        if data.get(field) is None:
            raise BooksError("VOUCHER_INVALID", f"Missing field: {field}")
    voucher = Voucher.from_dict(data)
    with get_db(args.db_path) as conn:
        voucher_id = save_voucher(conn, voucher)
    print_json(
        {
            "status": "success",
            "id": voucher_id,
            "voucher_no": voucher.display_ref(),
            "balanced": is_balanced(voucher),
        }
    )


def run_list(args):
    with get_db(args.db_path) as conn:
        vouchers = get_all_vouchers(conn)
    vouchers = select(vouchers, start=args.start_date, as_of=args.end_date)
    if args.type:
        vouchers = [v for v in vouchers if v.type == args.type]
    print_json({"vouchers": [v.to_dict() for v in vouchers]})


def run_delete(args):
    with get_db(args.db_path) as conn:
        cur = conn.execute("SELECT id FROM vouchers WHERE id = ?", (args.voucher_id,)).fetchone()
        if not cur:
            raise BooksError("VOUCHER_NOT_FOUND", f"Voucher not found: {args.voucher_id}")
        delete_voucher(conn, args.voucher_id)
    print_json({"status": "success", "message": "Voucher deleted", "id": args.voucher_id})
