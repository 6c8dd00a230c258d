#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""books stock command."""

from __future__ import annotations

from books.commands.report import add_output_arguments, emit_report
from books.database import get_db
from books.reporting import generate_stock_statement
from books.store import load_snapshot
from books.utils import today


def add_parser(subparsers, parents):
    parser = subparsers.add_parser("stock", help="Stock movement for one item", parents=parents)
    parser.add_argument("--item-id", type=int, required=True, help="Item id")
    parser.add_argument("--from", dest="start_date", required=True, help="Start date")
    parser.add_argument("--to", dest="end_date", default=today(), help="End date")
    add_output_arguments(parser)
    parser.set_defaults(func=run)
    return parser


def run(args):
    with get_db(args.db_path) as conn:
        snapshot = load_snapshot(conn)
    report = generate_stock_statement(snapshot, args.item_id, args.start_date, args.end_date)
    emit_report(report, args, {"item_id": args.item_id})
