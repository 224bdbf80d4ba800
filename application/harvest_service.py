"""
Application service that drives one FAOSTAT harvest.

The service pulls domain value objects from the extractor one at a time and
maps each of them to a record.
"""

import logging
from itertools import islice
from typing import Callable, Dict, Iterator, List, Optional

from opentelemetry import trace

from application.faostat_extractor import FaoStatExtractor
from application.faostat_transformer import FaoStatTransformer
from domain.datacite_models import DataCiteRecord
from domain.errors import HarvestError

# Get logger for this module
logger = logging.getLogger(__name__)

# Get tracer for this module
tracer = trace.get_tracer(__name__)


class HarvestResult:
    """Outcome of a harvest run."""

    def __init__(
        self,
        version: Optional[str],
        size: int,
        records: Optional[List[DataCiteRecord]] = None,
        failed_domains: Optional[Dict[str, str]] = None,
        skipped: bool = False,
    ):
        self.version = version
        self.size = size
        self.records = records if records is not None else []
        self.failed_domains = failed_domains if failed_domains is not None else {}
        self.skipped = skipped

    def to_dict(self) -> Dict[str, object]:
        return {
            "version": self.version,
            "size": self.size,
            "harvested": len(self.records),
            "failed_domains": dict(self.failed_domains),
            "skipped": self.skipped,
        }


class HarvestService:
    """Runs Extract then Transform for every FAOSTAT domain."""

    def __init__(
        self,
        extractor_factory: Callable[[], FaoStatExtractor],
        transformer_factory: Callable[[str], FaoStatTransformer] = FaoStatTransformer,
    ) -> None:
        self.extractor_factory = extractor_factory
        self.transformer_factory = transformer_factory

    def harvest(
        self,
        language: str,
        previous_version: Optional[str] = None,
        limit: Optional[int] = None,
    ) -> HarvestResult:
        """
        Harvest all domains of a language.

        Args:
            language: The language of the harvested records
            previous_version: Fingerprint of the last harvest; an unchanged
                fingerprint skips the run
            limit: Stop after this many domains

        Returns:
            HarvestResult with the records and the failed domain codes
        """
        with tracer.start_as_current_span("harvest") as span:
            span.set_attribute("language", language)

            extractor = self.extractor_factory()
            extractor.init(language)
            version = extractor.get_unique_version_string()
            result = HarvestResult(version=version, size=extractor.size())

            if previous_version is not None and previous_version == version:
                logger.info("FAOSTAT data unchanged since last harvest, skipping")
                result.skipped = True
                span.set_attribute("skipped", True)
                return result

            transformer = self.transformer_factory(language)
            for code, record, error in self._iterate(extractor, transformer, limit):
                if error is not None:
                    result.failed_domains[code] = error
                elif record is not None:
                    result.records.append(record)

            span.set_attribute("records.count", len(result.records))
            span.set_attribute("failed.count", len(result.failed_domains))
            logger.info(
                "Harvested %d of %d domains (%d failed)",
                len(result.records),
                result.size,
                len(result.failed_domains),
            )
            return result

    def _iterate(
        self,
        extractor: FaoStatExtractor,
        transformer: FaoStatTransformer,
        limit: Optional[int],
    ) -> Iterator[tuple]:
        # islice stops before pulling a domain past the limit
        for domain in islice(extractor.remaining_domains(), limit):
            code = domain.domain_code or ""
            try:
                value_object = extractor.extract_domain(domain)
                yield code, transformer.transform(value_object), None
            except HarvestError as e:
                logger.error("Failed to harvest domain %s: %s", code, e)
                yield code, None, str(e)
