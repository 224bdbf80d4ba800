"""
Command-line interface adapter.

This module provides the CLI adapters for harvesting FAOSTAT records and for
printing the current FAOSTAT version fingerprint.
"""

import argparse
import json
import logging
import sys
from typing import Any, Dict, List, Optional

from opentelemetry import trace

from adapters.faostat_client import FaoStatClient
from adapters.http_client import HTTPClientAdapter
from application.faostat_extractor import FaoStatExtractor
from application.harvest_service import HarvestService
from domain.errors import HarvestError
from infrastructure.config import HarvesterConfig

# Get logger for this module
logger = logging.getLogger(__name__)

# Get tracer for this module
tracer = trace.get_tracer(__name__)


def build_client(config: HarvesterConfig) -> FaoStatClient:
    """Wire the FAOSTAT client from a configuration."""
    http_client = HTTPClientAdapter(
        timeout=config.timeout,
        max_retries=config.max_retries,
        base_wait_time=config.base_wait_time,
        user_agent=config.user_agent,
    )
    return FaoStatClient(http_client, language=config.language, version=config.version)


def build_service(config: HarvesterConfig) -> HarvestService:
    client = build_client(config)
    return HarvestService(extractor_factory=lambda: FaoStatExtractor(client))


def add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--language",
        default=None,
        help="Language of the harvested records (default: $FAOSTAT_LANGUAGE or en)",
    )
    parser.add_argument(
        "--api-version",
        dest="api_version",
        default=None,
        help="FAOSTAT API version (default: $FAOSTAT_VERSION or v1)",
    )


def setup_argument_parser() -> argparse.ArgumentParser:
    """Configure CLI arguments of the harvest command."""
    parser = argparse.ArgumentParser(
        description="Harvest FAOSTAT domains as DataCite records"
    )
    add_common_arguments(parser)
    parser.add_argument(
        "--previous-version",
        dest="previous_version",
        default=None,
        help="Version fingerprint of the last harvest; skip if unchanged",
    )
    parser.add_argument(
        "-out",
        "--output-file",
        dest="output_file",
        default=None,
        help="Write the records to this JSON file instead of stdout",
    )
    parser.add_argument(
        "--limit",
        type=int,
        default=None,
        help="Harvest at most this many domains",
    )
    return parser


def setup_version_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Print the version fingerprint of the FAOSTAT domain list"
    )
    add_common_arguments(parser)
    return parser


class HarvestCLI:
    """CLI for running a harvest."""

    def __init__(self, service: Optional[HarvestService] = None) -> None:
        self.parser = setup_argument_parser()
        self.service = service

    def write_records(
        self, records: List[Dict[str, Any]], output_file: Optional[str]
    ) -> None:
        """Write records as a JSON array to a file or stdout."""
        if output_file:
            logger.debug("Writing %d records to %s", len(records), output_file)
            with open(output_file, "w", encoding="utf-8") as f:
                json.dump(records, f, ensure_ascii=False, indent=2)
        else:
            json.dump(records, sys.stdout, ensure_ascii=False, indent=2)
            sys.stdout.write("\n")

    def run(self, args: Optional[List[str]] = None) -> int:
        """
        Run the harvest command.

        Returns:
            Exit code (0 for success, 1 for error)
        """
        with tracer.start_as_current_span("harvest_cli.run") as span:
            parsed_args = self.parser.parse_args(args)
            config = HarvesterConfig.from_env(
                language=parsed_args.language, version=parsed_args.api_version
            )
            logger.debug("Harvest configuration: %s", config)
            span.set_attribute("cli.language", config.language)
            span.set_attribute("cli.version", config.version)

            service = self.service or build_service(config)

            try:
                result = service.harvest(
                    config.language,
                    previous_version=parsed_args.previous_version,
                    limit=parsed_args.limit,
                )
                if not result.skipped:
                    self.write_records(
                        [record.to_dict() for record in result.records],
                        parsed_args.output_file,
                    )

                logger.info("Version: %s", result.version)
                logger.info("Records: %d", len(result.records))
                if result.failed_domains:
                    logger.warning(
                        "Failed domains: %s", ", ".join(sorted(result.failed_domains))
                    )

                span.set_attribute("success", True)
                span.set_attribute("exit_code", 0)
                return 0

            except (HarvestError, OSError) as e:
                logger.error("Harvest failed: %s", e)
                span.set_attribute("success", False)
                span.set_attribute("error.type", type(e).__name__)
                span.set_attribute("error.message", str(e))
                span.set_attribute("exit_code", 1)
                return 1


class VersionCLI:
    """CLI that prints the current version fingerprint."""

    def __init__(self, client: Optional[FaoStatClient] = None) -> None:
        self.parser = setup_version_parser()
        self.client = client

    def run(self, args: Optional[List[str]] = None) -> int:
        parsed_args = self.parser.parse_args(args)
        config = HarvesterConfig.from_env(
            language=parsed_args.language, version=parsed_args.api_version
        )
        extractor = FaoStatExtractor(self.client or build_client(config))

        try:
            extractor.init(config.language)
        except HarvestError as e:
            logger.error("Could not retrieve FAOSTAT domains: %s", e)
            return 1

        print(extractor.get_unique_version_string())
        return 0
