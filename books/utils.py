#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Shared helpers for the books engine and CLI."""

from __future__ import annotations

import json
import logging
import sys
from dataclasses import dataclass
from datetime import date, datetime
from pathlib import Path
from typing import Any, Dict, Optional


logger = logging.getLogger(__name__)


DEFAULT_ENGINE_CONFIG: Dict[str, Any] = {
    "balance_epsilon": 0.01,
    "aging_bucket_days": [30, 60, 90],
}

DATE_FORMAT = "%Y-%m-%d"


@dataclass
class BooksError(Exception):
    code: str
    message: str
    details: Optional[Dict[str, Any]] = None

    def __str__(self) -> str:
        return f"{self.code}: {self.message}"

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "error": True,
            "code": self.code,
            "message": self.message,
        }
        if self.details:
            payload["details"] = self.details
        return payload


ENGINE_CONFIG_PATH = Path(__file__).resolve().parents[1] / "data" / "engine_config.json"


def load_engine_config(config_path: Optional[Path] = None) -> Dict[str, Any]:
    config_path = Path(config_path or ENGINE_CONFIG_PATH)
    if not config_path.exists():
        return dict(DEFAULT_ENGINE_CONFIG)
    try:
        data = json.loads(config_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise BooksError("ENGINE_CONFIG_INVALID", f"Engine config is not valid JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise BooksError("ENGINE_CONFIG_INVALID", "Engine config must be an object")
    merged = dict(DEFAULT_ENGINE_CONFIG)
    merged.update(data)
    days = merged.get("aging_bucket_days")
    if (
        not isinstance(days, list)
        or len(days) != 3
        or sorted(days) != days
    ):
        raise BooksError(
            "ENGINE_CONFIG_INVALID",
            "aging_bucket_days must be three ascending day limits",
            {"aging_bucket_days": days},
        )
    return merged


def parse_date(value: Any) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return datetime.strptime(str(value)[:10], DATE_FORMAT).date()
    except ValueError as exc:
        raise BooksError("DATE_INVALID", f"Invalid date: {value!r}") from exc


def today() -> str:
    return datetime.now().strftime(DATE_FORMAT)


def load_json_input() -> Dict[str, Any]:
    """Load JSON object from stdin."""
    try:
        data = json.load(sys.stdin)
    except json.JSONDecodeError as exc:
        raise BooksError(
            code="INVALID_JSON",
            message=f"Invalid JSON input: {exc}",
        ) from exc

    if not isinstance(data, dict):
        raise BooksError(
            code="INVALID_JSON",
            message="Input must be a JSON object",
        )
    return data


def print_json(data: Dict[str, Any]) -> None:
    print(json.dumps(data, ensure_ascii=False, indent=2))


def print_error(err: BooksError) -> None:
    print_json(err.to_dict())


def handle_error(err: BooksError) -> None:
    logger.debug("command failed: %s", err)
    print_error(err)
    sys.exit(1)
