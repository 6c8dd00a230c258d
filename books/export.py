#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Write report results to an Excel workbook."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Sequence, Tuple

import openpyxl
from openpyxl.styles import Font

from books.aging import BUCKETS
from books.utils import BooksError


BOLD = Font(bold=True)


def _statement_table(report: Dict[str, Any]) -> Tuple[str, Sequence[str], List[list], list]:
    header = ["Date", "Voucher No", "Type", "Particulars", "Debit", "Credit", "Balance"]
    rows = [["", "", "", "Opening Balance", None, None, report["opening_label"]]]
    for line in report["lines"]:
        rows.append(
            [
                line["date"],
                line["voucher_no"],
                line["voucher_type"],
                line["particulars"],
                line["debit"] or None,
                line["credit"] or None,
                line["balance_label"],
            ]
        )
    footer = ["", "", "", "Closing Balance", report["total_debit"], report["total_credit"], report["closing_label"]]
    return f"Ledger - {report['ledger']['name']}", header, rows, footer


def _aging_table(report: Dict[str, Any]) -> Tuple[str, Sequence[str], List[list], list]:
    header = ["Party", "Total Due", *BUCKETS]
    rows = [
        [row["name"], row["total_due"], *(row["buckets"][b] for b in BUCKETS)]
        for row in report["rows"]
    ]
    totals = report["totals"]
    footer = ["Total", totals["total_due"], *(totals[b] for b in BUCKETS)]
    return f"{report['perspective'].title()} Aging", header, rows, footer


def _trial_balance_table(report: Dict[str, Any]) -> Tuple[str, Sequence[str], List[list], list]:
    header = ["Particulars", "Group", "Debit", "Credit"]
    rows = [[r["name"], r["group"], r["debit"] or None, r["credit"] or None] for r in report["rows"]]
    footer = ["Total", "", report["totals"]["debit"], report["totals"]["credit"]]
    return "Trial Balance", header, rows, footer


def _sections_table(report: Dict[str, Any]) -> Tuple[str, Sequence[str], List[list], list]:
    title = "Profit & Loss" if report["kind"] == "pl" else "Balance Sheet"
    header = ["Section", "Particulars", "Amount"]
    rows = []
    for section in report["sections"]:
        for item in section["items"]:
            rows.append([section["section"], item["name"], abs(item["balance"])])
        rows.append([section["section"], "Total", section["total"]])
    footer = ["Net Profit / (Loss)", "", report["net_profit"]]
    return title, header, rows, footer


def _stock_table(report: Dict[str, Any]) -> Tuple[str, Sequence[str], List[list], list]:
    header = ["Date", "Voucher No", "Type", "In", "Out", "Balance"]
    rows = [["", "", "Opening Stock", None, None, report["opening_stock"]]]
    rows += [
        [line["date"], line["voucher_no"], line["voucher_type"], line["in"] or None, line["out"] or None, line["balance"]]
        for line in report["lines"]
    ]
    footer = ["", "", "Closing Stock", report["total_in"], report["total_out"], report["closing_stock"]]
    return f"Stock - {report['item']['name']}", header, rows, footer


def _aging_rows(report: Dict[str, Any]) -> List[list]:
    buckets = report.get("aging")
    if not buckets:
        return []
    return [[], ["Aging", *BUCKETS], ["Outstanding", *(buckets[b] for b in BUCKETS)]]


def _table_for(report: Dict[str, Any]):
    if "ledger" in report:
        return _statement_table(report)
    if "perspective" in report:
        return _aging_table(report)
    if report.get("kind") == "tb":
        return _trial_balance_table(report)
    if report.get("kind") in ("pl", "bs"):
        return _sections_table(report)
    if "item" in report:
        return _stock_table(report)
    raise BooksError("EXPORT_UNSUPPORTED", "Report shape is not exportable")


def write_report_xlsx(report: Dict[str, Any], filepath: str) -> Dict[str, Any]:
    title, header, rows, footer = _table_for(report)

    wb = openpyxl.Workbook()
    sheet = wb.active
    # sheet titles are limited to 31 characters and may not contain "/"
    sheet.title = title.replace("/", "-")[:31]

    company = report.get("company")
    if company:
        sheet.append([company["company_name"]])
        sheet.cell(row=sheet.max_row, column=1).font = BOLD
        if company.get("address"):
            sheet.append([company["address"]])
        if company.get("gstin"):
            sheet.append([f"GSTIN: {company['gstin']}"])
    sheet.append([title])
    sheet.cell(row=sheet.max_row, column=1).font = BOLD
    sheet.append([])

    sheet.append(list(header))
    for cell in sheet[sheet.max_row]:
        cell.font = BOLD
    for row in rows:
        sheet.append(row)
    sheet.append(footer)
    for cell in sheet[sheet.max_row]:
        cell.font = BOLD

    for row in _aging_rows(report):
        sheet.append(row)
        if row and row[0] == "Aging":
            for cell in sheet[sheet.max_row]:
                cell.font = BOLD

    out_path = Path(filepath)
    wb.save(out_path)
    wb.close()
    return {"output": str(out_path), "rows": len(rows)}
