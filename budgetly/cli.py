#!/usr/bin/env python3
"""Budgetly CLI - run the Plaid proxy backend."""

import argparse
import getpass
import sys

from pydantic import ValidationError

from budgetly import credentials
from budgetly.logger import get_logger
from budgetly.models.config import DEFAULT_APP_NAME, DEFAULT_ENVIRONMENT, PlaidConfig
from budgetly.web import PORT, start_server

logger = get_logger()


def setup_credentials() -> bool:
    """Prompt for Plaid credentials and store them in the keyring."""
    logger.info("Budgetly credential setup")
    logger.info("=" * 25)

    current_client_id = credentials.get_credential(credentials.KEY_CLIENT_ID, fallback_to_env=False)
    current_secret = credentials.get_credential(credentials.KEY_SECRET, fallback_to_env=False)

    client_id = input(f"Plaid client ID (current: {current_client_id or 'none'}): ").strip() or current_client_id
    secret = getpass.getpass(f"Plaid secret (current: {credentials.mask(current_secret)}): ").strip() or current_secret
    environment = input(f"Plaid environment [{DEFAULT_ENVIRONMENT}]: ").strip() or DEFAULT_ENVIRONMENT
    app_name = input(f"App name shown in Plaid Link [{DEFAULT_APP_NAME}]: ").strip() or DEFAULT_APP_NAME

    if not client_id:
        logger.error("Plaid client ID is required")
        return False
    if not secret:
        logger.error("Plaid secret is required")
        return False

    values = [
        (credentials.KEY_CLIENT_ID, client_id),
        (credentials.KEY_SECRET, secret),
        (credentials.KEY_ENVIRONMENT, environment),
        (credentials.KEY_APP_NAME, app_name),
    ]
    for key, value in values:
        try:
            if not credentials.set_credential(key, value):
                return False
        except ValidationError as e:
            logger.error(f"Invalid {key}:")
            for error in e.errors():
                logger.error(f"  {error['msg']}")
            return False

    logger.info("Credentials saved to keyring")
    return True


def build_parser() -> argparse.ArgumentParser:
    """Build and return the CLI argument parser."""
    parser = argparse.ArgumentParser(
        description="Budgetly - Plaid proxy backend for the Budgetly app"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    serve_parser = subparsers.add_parser("serve", help="Run the backend HTTP server")
    serve_parser.add_argument(
        "--host",
        default="0.0.0.0",
        help="Interface to bind (default: 0.0.0.0)"
    )
    serve_parser.add_argument(
        "--port",
        type=int,
        default=PORT,
        help=f"Server port (default: {PORT})"
    )

    subparsers.add_parser("setup", help="Store Plaid credentials in the system keyring")

    return parser


def cmd_serve(host: str, port: int):
    """Load configuration once and run the server."""
    config = PlaidConfig.load()
    start_server(config, host=host, port=port)


def cmd_setup():
    if not setup_credentials():
        sys.exit(1)


def main():
    parser = build_parser()
    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        return

    commands = {
        "serve": lambda: cmd_serve(args.host, args.port),
        "setup": cmd_setup,
    }
    commands[args.command]()


if __name__ == "__main__":
    main()
