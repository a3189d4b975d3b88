#!/usr/bin/env python3
"""
Provision an administrator account in the Event RSVP SQLite database.

The password is stored as an Argon2id hash; it is never printed.  With
``--reset`` an existing account keeps its name and membership date and
only receives the new password (its active session is cleared).

Usage:
    python create_admin.py --db ./event_rsvp.db --id admin --name "Site Admin"

If --password is omitted, you will be prompted to enter it securely.
"""

import argparse
import getpass
import sys
from datetime import datetime, timezone

from event_rsvp_api.app.core.db import get_cursor, init_db
from event_rsvp_api.app.core.exceptions import ConflictError
from event_rsvp_api.app.core.security import hash_password
from event_rsvp_api.app.repositories.sqlite import SQLiteAdminRepository
from event_rsvp_api.app.schemas.admin import AdminAccount


def main() -> None:
    ap = argparse.ArgumentParser(description="Create or reset an Event RSVP admin account.")
    ap.add_argument("--db", required=True, help="Path to SQLite DB file (e.g., ./event_rsvp.db)")
    ap.add_argument("--id", required=True, help="Admin id used to log in")
    ap.add_argument("--name", help="Display name (required when creating)")
    ap.add_argument("--password", help="Password. If omitted, you'll be prompted securely.")
    ap.add_argument("--reset", action="store_true", help="Replace the password of an existing admin")
    args = ap.parse_args()

    password = args.password or getpass.getpass("Enter password: ")
    if not password:
        print("[!] Empty password is not allowed.", file=sys.stderr)
        sys.exit(1)

    init_db(args.db)
    repository = SQLiteAdminRepository(args.db)

    if args.reset:
        if repository.get(args.id) is None:
            print(f"[!] No admin found with id: {args.id}", file=sys.stderr)
            sys.exit(2)
        with get_cursor(args.db) as cursor:
            cursor.execute(
                "UPDATE admin SET password_hash = ?, session_refresh_token = NULL, "
                "session_expires_at = NULL WHERE id = ?",
                (hash_password(password), args.id),
            )
        print(f"[+] Password updated for admin: {args.id}")
        return

    if not args.name:
        print("[!] --name is required when creating an admin.", file=sys.stderr)
        sys.exit(1)

    account = AdminAccount(
        id=args.id,
        password_hash=hash_password(password),
        name=args.name,
        member_since=datetime.now(timezone.utc),
    )
    try:
        repository.create(account)
    except ConflictError:
        print(f"[!] Admin already exists: {args.id} (use --reset to change the password)", file=sys.stderr)
        sys.exit(2)
    print(f"[+] Created admin: {args.id}")


if __name__ == "__main__":
    main()
