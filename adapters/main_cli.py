import argparse
import sys

from infrastructure.logging import setup_logger
from infrastructure.telemetry import setup_opentelemetry

from adapters.harvest_cli import HarvestCLI, VersionCLI


def main() -> int:
    """
    Unified entry point for the `faostat-harvester` command.

    Subcommands:
        harvest   – Harvest all FAOSTAT domains as DataCite records.
        version   – Print the version fingerprint of the domain list.
    """
    setup_logger()
    setup_opentelemetry()

    # Each subcommand parses its own arguments.
    parser = argparse.ArgumentParser(
        prog="faostat-harvester",
        description="FAOSTAT metadata harvester with multiple subcommands",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)
    subparsers.add_parser("harvest", help="Harvest FAOSTAT domains")
    subparsers.add_parser("version", help="Print the FAOSTAT version fingerprint")

    args, remaining = parser.parse_known_args()

    if args.command == "harvest":
        return HarvestCLI().run(remaining)
    elif args.command == "version":
        return VersionCLI().run(remaining)
    else:
        parser.error(f"Unknown subcommand: {args.command}")
    return 2


if __name__ == "__main__":
    sys.exit(main())
