#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""books item command."""

from __future__ import annotations

from books.database import get_db
from books.models import InventoryItem
from books.reporting import generate_stock_summary
from books.store import load_snapshot, save_item
from books.utils import BooksError, load_json_input, print_json


def add_parser(subparsers, parents):
    parser = subparsers.add_parser("item", help="Inventory items", parents=parents)
    sub = parser.add_subparsers(dest="item_cmd")

    add_cmd = sub.add_parser("add", help="Create or update an item (JSON on stdin)", parents=parents)
    add_cmd.set_defaults(func=run_add)

    list_cmd = sub.add_parser("list", help="Stock summary with valuation", parents=parents)
    list_cmd.set_defaults(func=run_list)

    return parser


def run_add(args):
    data = load_json_input()
    if not data.get("name"):
        raise BooksError("ITEM_INVALID", "Missing field: name")
    item = InventoryItem.from_dict(data)
    with get_db(args.db_path) as conn:
        item_id = save_item(conn, item)
    print_json({"status": "success", "message": "Item saved", "id": item_id})


def run_list(args):
    with get_db(args.db_path) as conn:
        snapshot = load_snapshot(conn)
    print_json(generate_stock_summary(snapshot))
