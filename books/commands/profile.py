#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""books profile command."""

from __future__ import annotations

from books.database import get_db
from books.models import BusinessProfile
from books.store import get_business_profile, save_business_profile
from books.utils import BooksError, load_json_input, print_json


def add_parser(subparsers, parents):
    parser = subparsers.add_parser("profile", help="Business profile for report headers", parents=parents)
    sub = parser.add_subparsers(dest="profile_cmd")

    set_cmd = sub.add_parser("set", help="Save the profile (JSON on stdin)", parents=parents)
    set_cmd.set_defaults(func=run_set)

    show_cmd = sub.add_parser("show", help="Show the profile", parents=parents)
    show_cmd.set_defaults(func=run_show)

    return parser


def run_set(args):
    profile = BusinessProfile.from_dict(load_json_input())
    if not profile.company_name:
        raise BooksError("PROFILE_INVALID", "Missing field: companyName")
    with get_db(args.db_path) as conn:
        save_business_profile(conn, profile)
    print_json({"status": "success", "message": "Profile saved"})


def run_show(args):
    with get_db(args.db_path) as conn:
        profile = get_business_profile(conn)
    if profile is None:
        raise BooksError("PROFILE_NOT_FOUND", "Business profile has not been set")
    print_json({"profile": profile.to_dict()})
