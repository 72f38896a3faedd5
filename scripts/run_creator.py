#!/usr/bin/env python3
"""
Command line access to the Zoho Creator client
"""
import sys
import json
import argparse
import logging
from pathlib import Path
from typing import Dict, List, Optional

from dotenv import load_dotenv
from pydantic import ValidationError

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from zoho_creator.integrations.clients.mocks import MockCreatorTransport
from zoho_creator.integrations.clients.real_http.creator import ZohoCreatorClient
from zoho_creator.integrations.contracts.interfaces import Credentials, OperationResult
from zoho_creator.utils.config_loader import (
    CreatorConfigError,
    load_creator_config,
    load_credentials_from_env,
)

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False, log_file: Optional[Path] = None):
    """Setup logging configuration"""
    level = logging.DEBUG if verbose else logging.INFO

    handlers = [logging.StreamHandler()]
    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=handlers
    )


def parse_fields(pairs: List[str]) -> Dict[str, str]:
    """Turn repeated --field key=value options into a dict"""
    fields = {}
    for pair in pairs:
        key, sep, value = pair.partition('=')
        if not sep or not key:
            raise argparse.ArgumentTypeError(f"Invalid --field '{pair}', expected key=value")
        fields[key] = value
    return fields


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Add or update Zoho Creator records',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Check that the credentials in .env can log in
  python scripts/run_creator.py login

  # Add a record
  python scripts/run_creator.py add Contacts --field Name=Ada --field Email=ada@example.com

  # Update matching records, adding one if nothing matches
  python scripts/run_creator.py upsert Contacts --field Name=Ada --criteria 'Email == "ada@example.com"'

  # Exercise the flow without network access
  python scripts/run_creator.py --mock upsert Contacts --field Name=Ada --criteria 'ID == 1'
        """
    )

    parser.add_argument(
        '--config',
        type=Path,
        default=None,
        help='Path to client config YAML file (default: config/creator_config.yml)'
    )
    parser.add_argument(
        '--application',
        type=str,
        default=None,
        help='Application path, e.g. owner/app-name (overrides config and env)'
    )
    parser.add_argument(
        '--insecure',
        action='store_true',
        help='Disable TLS certificate verification'
    )
    parser.add_argument(
        '--mock',
        action='store_true',
        help='Use canned Zoho responses instead of the network'
    )
    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Enable verbose (DEBUG) logging'
    )
    parser.add_argument(
        '--log-file',
        type=Path,
        default=None,
        help='Path to log file (optional)'
    )

    commands = parser.add_subparsers(dest='command', required=True)
    commands.add_parser('login', help='Acquire a ticket and log out again')

    for name, help_text in (
        ('add', 'Add a record'),
        ('update', 'Update records matching --criteria'),
        ('upsert', 'Update records matching --criteria, else add one'),
    ):
        sub = commands.add_parser(name, help=help_text)
        sub.add_argument('form', help='Form link name')
        sub.add_argument(
            '--field',
            action='append',
            default=[],
            metavar='KEY=VALUE',
            help='Record field, may be repeated'
        )
        if name != 'add':
            sub.add_argument('--criteria', required=True, help='Zoho criteria expression')
        if name == 'update':
            sub.add_argument(
                '--reloperator',
                choices=['AND', 'OR'],
                default='AND',
                help='How criteria clauses combine (default: AND)'
            )

    return parser


def run_command(client: ZohoCreatorClient, args: argparse.Namespace, fields: Dict[str, str]) -> OperationResult:
    """Log in, run the requested operation, log out"""
    login = client.acquire_ticket()
    if not login.success or args.command == 'login':
        if login.success:
            logout = client.destroy_ticket()
            if not logout.success:
                logger.warning(f"Logout failed: {logout.error.message}")
        return login

    try:
        if args.command == 'add':
            return client.add(args.form, fields)
        if args.command == 'update':
            return client.update(args.form, fields, args.criteria, args.reloperator)
        return client.update_else_add(args.form, fields, args.criteria)
    finally:
        logout = client.destroy_ticket()
        if not logout.success:
            logger.warning(f"Logout failed: {logout.error.message}")


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point"""
    parser = build_parser()
    args = parser.parse_args(argv)

    load_dotenv()
    setup_logging(verbose=args.verbose, log_file=args.log_file)

    try:
        fields = parse_fields(getattr(args, 'field', []))
    except argparse.ArgumentTypeError as e:
        parser.error(str(e))

    try:
        config = load_creator_config(args.config)
        if args.insecure:
            config = config.model_copy(update={'verify_ssl': False})
        application = args.application or config.application
        if args.mock:
            credentials = Credentials(
                login_id='mock@example.com',
                password='mock',
                api_key='mock',
                application_name=application or 'mock-owner/mock-app',
            )
        else:
            credentials = load_credentials_from_env(application)
    except (CreatorConfigError, FileNotFoundError, ValidationError) as e:
        logger.error(f"Configuration error: {e}")
        return 2

    transport = MockCreatorTransport() if args.mock else None
    client = ZohoCreatorClient(credentials, transport=transport, config=config)

    result = run_command(client, args, fields)

    print(json.dumps(result.as_dict(), indent=2, default=str))
    return 0 if result.success else 1


if __name__ == '__main__':
    sys.exit(main())
