#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""books init command."""

from __future__ import annotations

import json
from pathlib import Path

from books.database import get_db
from books.models import Account
from books.store import get_all_ledgers, save_ledger
from books.utils import BooksError, print_json


STANDARD_LEDGERS = Path(__file__).resolve().parents[2] / "data" / "standard_ledgers.json"


def add_parser(subparsers, parents):
    parser = subparsers.add_parser("init", help="Create the store and default ledgers", parents=parents)
    parser.add_argument("--no-defaults", action="store_true", help="Skip the default ledgers")
    parser.set_defaults(func=run)
    return parser


def run(args):
    loaded = 0
    with get_db(args.db_path) as conn:
        if not args.no_defaults and not get_all_ledgers(conn):
            if not STANDARD_LEDGERS.exists():
                raise BooksError("LEDGER_NOT_FOUND", "Default ledger file is missing")
            try:
                docs = json.loads(STANDARD_LEDGERS.read_text(encoding="utf-8"))
            except json.JSONDecodeError as exc:
                raise BooksError("LEDGER_INVALID", f"Default ledger file is not valid JSON: {exc}") from exc
            for doc in docs:
                save_ledger(conn, Account.from_dict(doc))
                loaded += 1

    print_json(
        {
            "status": "success",
            "message": "Store initialised",
            "ledgers_loaded": loaded,
        }
    )
