#!/usr/bin/env python3
"""
Reset a user's password in the Personal Finance MongoDB database.

This script DOES NOT read or reveal any existing passwords. It simply stores a new
password hash (PBKDF2-HMAC-SHA256, format "salthex$hashhex") for the user with the
given email.

Usage:
    python reset_password.py --email jane@example.com --password "NewStrongPass!234"

If --password is omitted, you will be prompted to enter it securely.  The connection
string and database name default to the CONNECTION_STRING and DATABASE_NAME
environment variables.
"""

import argparse
import getpass
import sys

from pymongo import MongoClient

from personal_finance_api.app.core.config import settings
from personal_finance_api.app.core.db import USERS
from personal_finance_api.app.core.security import hash_password


def main() -> None:
    ap = argparse.ArgumentParser(description="Reset a Personal Finance user password (MongoDB).")
    ap.add_argument("--email", required=True, help="User email to update")
    ap.add_argument("--password", help="New password. If omitted, you'll be prompted securely.")
    ap.add_argument("--connection-string", default=settings.connection_string, help="MongoDB connection string")
    ap.add_argument("--database", default=settings.database_name, help="Database name")
    args = ap.parse_args()

    new_password = args.password or getpass.getpass("Enter NEW password: ")
    if not new_password:
        print("[!] Empty password is not allowed.", file=sys.stderr)
        sys.exit(1)

    client = MongoClient(args.connection_string)
    try:
        users = client[args.database][USERS]
        result = users.update_one(
            {"email": args.email},
            {"$set": {"password_hash": hash_password(new_password)}},
        )
        if not result.matched_count:
            print(f"[!] No user found with email: {args.email}", file=sys.stderr)
            sys.exit(2)
        print(f"[+] Password updated for user: {args.email}")
    finally:
        client.close()


if __name__ == "__main__":
    main()
