#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""books ledger command."""

from __future__ import annotations

from books.chart import nature
from books.database import get_db
from books.models import Account
from books.store import delete_ledger, get_all_ledgers, get_ledger, save_ledger
from books.utils import BooksError, load_json_input, print_json


def add_parser(subparsers, parents):
    parser = subparsers.add_parser("ledger", help="Chart of accounts", parents=parents)
    sub = parser.add_subparsers(dest="ledger_cmd")

    list_parser = sub.add_parser("list", help="List ledgers", parents=parents)
    list_parser.add_argument("--group", help="Only ledgers under this group")
    list_parser.set_defaults(func=run_list)

    add_cmd = sub.add_parser("add", help="Create or update a ledger (JSON on stdin)", parents=parents)
    add_cmd.set_defaults(func=run_add)

    delete_cmd = sub.add_parser("delete", help="Delete a ledger", parents=parents)
    delete_cmd.add_argument("ledger_id", type=int, help="Ledger id")
    delete_cmd.set_defaults(func=run_delete)

    return parser


def run_list(args):
    with get_db(args.db_path) as conn:
        accounts = get_all_ledgers(conn)
    if args.group:
        accounts = [a for a in accounts if a.group == args.group]
    accounts.sort(key=lambda a: a.name.lower())
    print_json(
        {
            "ledgers": [
                {**a.to_dict(), "nature": nature(a.group)}
                for a in accounts
            ]
        }
    )


def run_add(args):
    data = load_json_input()
    for field in ("name", "group"):
        if field not in data:
            raise BooksError("LEDGER_INVALID", f"Missing field: {field}")
    account = Account.from_dict(data)
    with get_db(args.db_path) as conn:
        ledger_id = save_ledger(conn, account)
    print_json({"status": "success", "message": "Ledger saved", "id": ledger_id})


def run_delete(args):
    with get_db(args.db_path) as conn:
        if get_ledger(conn, args.ledger_id) is None:
            raise BooksError("LEDGER_NOT_FOUND", f"Ledger not found: {args.ledger_id}")
        delete_ledger(conn, args.ledger_id)
    print_json({"status": "success", "message": "Ledger deleted", "id": args.ledger_id})
