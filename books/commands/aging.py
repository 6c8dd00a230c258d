#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""books aging command."""

from __future__ import annotations

from books.commands.report import add_output_arguments, emit_report
from books.database import get_db
from books.reporting import generate_aging_report
from books.store import load_snapshot
from books.utils import today


def add_parser(subparsers, parents):
    parser = subparsers.add_parser("aging", help="Receivable / payable aging", parents=parents)
    parser.add_argument("--as-of", default=today(), help="Aging date")
    parser.add_argument(
        "--perspective",
        choices=["receivable", "payable"],
        default="receivable",
        help="Sundry Debtors or Sundry Creditors",
    )
    add_output_arguments(parser)
    parser.set_defaults(func=run)
    return parser


def run(args):
    with get_db(args.db_path) as conn:
        snapshot = load_snapshot(conn)
    emit_report(generate_aging_report(snapshot, args.as_of, args.perspective), args)
