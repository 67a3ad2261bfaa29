"""Operator commands for provisioning the file server."""

import argparse
import sys
from typing import List, Optional

from common.logging_config import setup_logging
from fileserver import config
from fileserver.auth import hash_password
from fileserver.database import init_database
from fileserver.exceptions import CredentialExistsError
from fileserver.repositories.credential_repository import CredentialRepository


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="fileserver-manage", description=__doc__)
    parser.add_argument(
        "--database",
        default=config.DATABASE_PATH,
        help="Path to the SQLite database (default: %(default)s)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("init-db", help="Create the database schema")

    create_user = subparsers.add_parser("create-user", help="Register a login and password")
    create_user.add_argument("email")
    create_user.add_argument("password")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the management command line."""
    logger = setup_logging('fileserver')
    args = build_parser().parse_args(argv)

    init_database(args.database)

    if args.command == "init-db":
        logger.info(f"Database ready at {args.database}")
        return 0

    repo = CredentialRepository(args.database)
    try:
        repo.create_credential(args.email, hash_password(args.password))
    except CredentialExistsError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"Created user {args.email}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
