"""
Extraction of FAOSTAT domains.

This module contains the single-pass iterator that assembles one
``DomainValueObject`` per FAOSTAT domain.
"""

import logging
from typing import Iterator, List, Optional

from opentelemetry import trace

from adapters.faostat_client import DomainFetchSession, FaoStatClient
from domain.constants import YEAR_DIMENSION_ID
from domain.errors import FetchError
from domain.faostat_models import Dimension, DomainValueObject, FaoDomain, FaoFilter

# Get logger for this module
logger = logging.getLogger(__name__)

# Get tracer for this module
tracer = trace.get_tracer(__name__)


def compute_version(domains: List[FaoDomain]) -> str:
    """Concatenate the update dates of all domains into a version fingerprint."""
    return "".join(d.date_update for d in domains if d.date_update)


class FaoStatExtractor:
    """
    Lazily produces the domain value objects of one harvest pass.

    Each ``next`` call performs the dimension, filter, bulk-download, metadata
    and document requests of the next domain. The iterator cannot be
    restarted; create a new extractor for every harvest.
    """

    def __init__(self, client: FaoStatClient) -> None:
        self.client = client
        self.version: Optional[str] = None
        self._size = -1
        self._domains: Optional[Iterator[FaoDomain]] = None

    def init(self, language: Optional[str] = None) -> None:
        """Retrieve the domain list and compute size and version."""
        if language is not None and language != self.client.language:
            self.client = self.client.with_language(language)

        with tracer.start_as_current_span("extractor.init") as span:
            span.set_attribute("language", self.client.language)
            domains = self.client.fetch_domains().data

            self.version = compute_version(domains)
            self._size = len(domains)
            self._domains = iter(domains)

            span.set_attribute("domains.count", self._size)
            logger.info(
                "Found %d FAOSTAT domains (language=%s)",
                self._size,
                self.client.language,
            )

    def size(self) -> int:
        return self._size

    def get_unique_version_string(self) -> Optional[str]:
        return self.version

    def remaining_domains(self) -> Iterator[FaoDomain]:
        """Domains that have not been extracted yet, sharing this extractor's pass."""
        if self._domains is None:
            raise RuntimeError("FaoStatExtractor.init() must be called before iterating")
        return self._domains

    def __iter__(self) -> "FaoStatExtractor":
        return self

    def __next__(self) -> DomainValueObject:
        domain = next(self.remaining_domains())
        return self.extract_domain(domain)

    def extract_domain(self, domain: FaoDomain) -> DomainValueObject:
        """
        Fetch every resource of a domain.

        Raises:
            FetchError: If one of the required resources cannot be fetched
        """
        domain_code = domain.domain_code or ""
        session = self.client.for_domain(domain_code)

        with tracer.start_as_current_span("extractor.extract_domain") as span:
            span.set_attribute("domain.code", domain_code)
            logger.debug("Extracting domain %s", domain_code)

            dimensions = session.fetch_dimensions().data
            filters = self._fetch_filters(session, dimensions)

            value_object = DomainValueObject(
                domain=domain,
                bulk_downloads=session.fetch_bulk_downloads().data,
                metadata=session.fetch_metadata().data,
                documents=session.fetch_documents().data,
                dimensions=dimensions,
                filters=filters,
            )

            span.set_attribute("filters.count", len(filters))
            return value_object

    def _fetch_filters(
        self, session: DomainFetchSession, dimensions: List[Dimension]
    ) -> List[FaoFilter]:
        filters: List[FaoFilter] = []

        for dimension in dimensions:
            # the years dimension holds pure numbers
            if dimension.id == YEAR_DIMENSION_ID:
                continue

            try:
                response = session.fetch_filters(dimension)
            except FetchError as e:
                logger.warning(
                    "Skipping filters of dimension %s in domain %s: %s",
                    dimension.id,
                    session.domain_code,
                    e,
                )
                continue

            filters.extend(response.data)

        return filters
