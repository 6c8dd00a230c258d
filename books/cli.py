#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Main CLI for books."""

from __future__ import annotations

import argparse
import logging

from books import commands
from books.utils import BooksError, handle_error


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="books",
        description="GST books: ledgers, vouchers and replayed reports",
    )
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--db-path", default="./books.db", help="Store path")
    common.add_argument("--verbose", "-v", action="store_true", help="Debug logging on stderr")

    subparsers = parser.add_subparsers(dest="command")

    commands.add_init_parser(subparsers, [common])
    commands.add_ledger_parser(subparsers, [common])
    commands.add_voucher_parser(subparsers, [common])
    commands.add_item_parser(subparsers, [common])
    commands.add_profile_parser(subparsers, [common])
    commands.add_statement_parser(subparsers, [common])
    commands.add_aging_parser(subparsers, [common])
    commands.add_report_parser(subparsers, [common])
    commands.add_stock_parser(subparsers, [common])
    commands.add_portal_parser(subparsers, [common])

    return parser


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main():
    parser = build_parser()
    args = parser.parse_args()
    if not hasattr(args, "func"):
        parser.print_help()
        return
    configure_logging(getattr(args, "verbose", False))
    try:
        args.func(args)
    except BooksError as exc:
        handle_error(exc)


if __name__ == "__main__":
    main()
