#!/usr/bin/env python
"""Inspect or reset the persisted session record.

Usage:
    python backend/scripts/session_store.py            # create the kv_store table if missing
    python backend/scripts/session_store.py --show     # print the stored session user as JSON
    python backend/scripts/session_store.py --clear    # sign the stored user out
"""
from __future__ import annotations
import os, sys, argparse, textwrap, json

# Allow running from repo root
sys.path.append(os.path.abspath('backend'))

from pharmasys import create_app  # type: ignore
from pharmasys.services.session import SessionStore, SESSION_KEY


def parse_args():
    p = argparse.ArgumentParser(
        description="Manage the persisted session record",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=textwrap.dedent("""Examples:\n  show: session_store.py --show\n  clear: session_store.py --clear\n""")
    )
    p.add_argument('--show', action='store_true', help='Print the stored session user')
    p.add_argument('--clear', action='store_true', help='Delete the stored session user')
    return p.parse_args()


def main():
    args = parse_args()
    # create_app() creates the table when it is missing
    app = create_app({'SEED_FIXTURES': False})
    with app.app_context():
        store = SessionStore()
        user = store.read()
        if args.show:
            if user is None:
                print(f"[INFO] No record under '{SESSION_KEY}'.")
            else:
                print(json.dumps(user.to_dict(), indent=2))
        if args.clear:
            if user is None:
                print('[INFO] Nothing to clear.')
            else:
                store.clear()
                print(f"[DONE] Cleared session for {user.email}")
        if not (args.show or args.clear):
            print(f"[DONE] Session store ready at {app.config['DATABASE_URL']}")


if __name__ == '__main__':
    main()
