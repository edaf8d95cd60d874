from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from eventportal.app import EventPortal
from eventportal.config import ConfigurationError, configure_logging, get_default_domain_name
from eventportal.provisioning import CatalogBlueprint, provision_catalog

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Manage an Event Portal catalog")
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging, including HTTP requests",
    )
    parser.add_argument(
        "--token",
        type=str,
        help="Event Portal bearer token (defaults to SOLACE_CLOUD_TOKEN)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    provision = subparsers.add_parser(
        "provision",
        help="Create a sample domain, schema, event and application",
    )
    provision.add_argument(
        "domain",
        nargs="?",
        help="Application domain name (defaults to SOLACE_APPLICATION_DOMAIN)",
    )
    provision.add_argument(
        "--schema-file",
        type=Path,
        help="JSON schema document used as schema version content",
    )
    provision.add_argument(
        "--version",
        type=str,
        default="0.0.1",
        help="Version string used for every created version (default: %(default)s)",
    )
    provision.add_argument(
        "--overwrite",
        action="store_true",
        help="Patch existing versions that are still in DRAFT",
    )

    domain_id = subparsers.add_parser("domain-id", help="Print the id of an application domain")
    domain_id.add_argument("name", help="Application domain name")

    return parser.parse_args(list(argv))


def _build_blueprint(args: argparse.Namespace) -> CatalogBlueprint:
    domain_name = args.domain or get_default_domain_name()
    if not domain_name:
        raise ConfigurationError("Define an application domain name")
    if args.schema_file is None:
        return CatalogBlueprint(domain_name=domain_name, version=args.version)
    try:
        content = args.schema_file.read_text()
    except OSError as exc:
        raise ConfigurationError(f"Cannot read schema file {args.schema_file}: {exc}") from exc
    return CatalogBlueprint(domain_name=domain_name, schema_content=content, version=args.version)


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args = _parse_args(args_list)
    configure_logging(level=logging.DEBUG if parsed_args.verbose else logging.INFO)

    try:
        portal = EventPortal(parsed_args.token)
        blueprint = _build_blueprint(parsed_args) if parsed_args.command == "provision" else None
    except ConfigurationError as exc:
        log.error(f"Configuration error: {exc}")  # noqa: TRY400
        sys.exit(2)

    try:
        if blueprint is not None:
            result = provision_catalog(portal, blueprint, overwrite=parsed_args.overwrite)
            log.info(
                "Provisioned domain=%s schema_version=%s event_version=%s application_version=%s",
                result.domain_id,
                result.schema_version_id,
                result.event_version_id,
                result.application_version_id,
            )
        elif parsed_args.command == "domain-id":
            found = portal.get_application_domain_id(parsed_args.name)
            if found is None:
                log.error(f"Application domain {parsed_args.name} not found")
                sys.exit(1)
            print(found)  # noqa: T201
        else:
            raise ValueError(f"Unsupported command: {parsed_args.command}")  # noqa: TRY301

    except Exception:
        log.exception("Fatal error while talking to Event Portal")
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
