import argparse
import json
import logging
import os
import sys
import uuid as _uuid
from dataclasses import replace

from config.settings import get_settings, validate_settings
from db.connection import get_connection
from db import schema
from models import LookupOutcome
from pipelines.lookup_company import MSG_FAILED, lookup_company
from services.contact_resolver import build_resolver
from services.errors import DirectoryLookupError
from utils.logging_setup import init_logging


logger = logging.getLogger(__name__)


def cmd_bootstrap(args):
    conn = get_connection(args.db)
    try:
        schema.bootstrap(conn)
    finally:
        conn.close()
    print("Schema ready")


def _print_outcome(outcome: LookupOutcome, as_json: bool) -> None:
    if as_json:
        if outcome.info is not None:
            print(json.dumps(outcome.info.model_dump(by_alias=True), indent=2, ensure_ascii=False))
        else:
            print(json.dumps(outcome.model_dump(exclude={"info"}), indent=2, ensure_ascii=False))
        return
    if outcome.info is None:
        print(outcome.message)
        return
    info = outcome.info
    print(outcome.message)
    print()
    print("Contact Information")
    print(f"  HR Email:  {info.hr_email}")
    print(f"  LinkedIn:  {info.linkedin_url}")
    print()
    print("Cold Email Template")
    print(info.email_template)


def cmd_lookup(args):
    settings = replace(get_settings(), db_path=args.db)
    if args.mode:
        settings = replace(settings, resolver_mode=args.mode)
    try:
        validate_settings(settings)
    except RuntimeError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2
    try:
        resolver = build_resolver(settings)
    except DirectoryLookupError as e:
        logger.error(
            "Contact directory unavailable",
            extra={"status": "failed", "mode": settings.resolver_mode, "error": str(e)},
        )
        _print_outcome(LookupOutcome(status="failed", message=MSG_FAILED), args.json)
        return 1
    try:
        outcome = lookup_company(args.company, resolver, settings.linkedin_company_base_url)
    finally:
        close = getattr(resolver, "close", None)
        if close is not None:
            close()
    _print_outcome(outcome, args.json)
    return 0 if outcome.ok else 1


def main(argv=None):
    settings = get_settings()
    init_logging(settings.log_level, settings.log_file)
    if not os.getenv("RUN_ID"):
        os.environ["RUN_ID"] = _uuid.uuid4().hex
    parser = argparse.ArgumentParser(description="HR contact finder CLI")
    parser.add_argument("--db", default=settings.db_path, help="Path to SQLite contact directory (default from settings)")
    sub = parser.add_subparsers(dest="cmd", required=True)

    p_boot = sub.add_parser("bootstrap", help="Create the contacts table and indexes")
    p_boot.set_defaults(func=cmd_bootstrap)

    p_look = sub.add_parser("lookup", help="Find the HR contact and cold email template for a company")
    p_look.add_argument("--company", "-c", required=True, help="Company name (partial, case-insensitive)")
    p_look.add_argument("--mode", choices=["directory", "synthetic"], default=None, help="Resolver strategy (default from settings)")
    p_look.add_argument("--json", action="store_true", help="Print CompanyInfo as JSON")
    p_look.set_defaults(func=cmd_lookup)

    args = parser.parse_args(argv)
    return args.func(args) or 0


if __name__ == "__main__":
    sys.exit(main())
