#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""books report command: trial balance, profit & loss, balance sheet."""

from __future__ import annotations

import json
from pathlib import Path

from books.database import get_db
from books.export import write_report_xlsx
from books.financials import REPORT_KINDS
from books.reporting import generate_financial_report
from books.store import load_snapshot
from books.utils import print_json, today


def add_output_arguments(parser):
    parser.add_argument("--output", help="Write the JSON report to this path")
    parser.add_argument("--xlsx", help="Write the report to this Excel workbook")


def emit_report(report, args, not_found=None):
    if report is None:
        print_json({"status": "not_found", **(not_found or {})})
        return
    if args.xlsx:
        result = write_report_xlsx(report, args.xlsx)
        print_json({"status": "success", **result})
        return
    if args.output:
        out_path = Path(args.output)
        out_path.write_text(
            json.dumps(report, ensure_ascii=False, indent=2),
            encoding="utf-8",
        )
        print_json({"status": "success", "output": str(out_path)})
        return
    print_json(report)


def add_parser(subparsers, parents):
    parser = subparsers.add_parser("report", help="Financial statements", parents=parents)
    parser.add_argument("--kind", choices=REPORT_KINDS, default="tb", help="tb / pl / bs")
    parser.add_argument("--as-of", default=today(), help="Report date (YYYY-MM-DD)")
    add_output_arguments(parser)
    parser.set_defaults(func=run)
    return parser


def run(args):
    with get_db(args.db_path) as conn:
        snapshot = load_snapshot(conn)
    report = generate_financial_report(snapshot, args.kind, args.as_of)
    emit_report(report, args)
