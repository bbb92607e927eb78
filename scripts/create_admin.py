"""Provision a dashboard login account.

Usage:
  python scripts/create_admin.py --email admin@example.com --password '...'
  python scripts/create_admin.py --email viewer@example.com --password '...' --role viewer
"""

from __future__ import annotations

import argparse
import getpass
import pathlib
import sys

PROJECT_ROOT = pathlib.Path(__file__).resolve().parents[1]
sys.path.insert(0, str(PROJECT_ROOT))

from lottery_admin import create_app  # noqa: E402
from lottery_admin.db import session_scope  # noqa: E402
from lottery_admin.errors import AppError  # noqa: E402
from lottery_admin.services.auth_service import AuthService  # noqa: E402


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
    parser.add_argument("--email", required=True)
    parser.add_argument("--password", help="Prompted for when omitted")
    parser.add_argument("--role", default="admin", help="Role claim stored on the account (default: admin)")
    args = parser.parse_args(argv)

    password = args.password or getpass.getpass("Password: ")

    app = create_app()
    try:
        with session_scope(app) as session:
            identity = AuthService().create_account(session, email=args.email, password=password, role=args.role)
    except AppError as exc:
        print(f"error: {exc.message}", file=sys.stderr)
        return 1

    print(f"Created account {identity.email} (role={identity.role}, id={identity.id})")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
