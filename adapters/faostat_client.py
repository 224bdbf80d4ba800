"""
Typed access to the FAOSTAT REST API.

A client is an immutable configuration of API version and language. Per-domain
fetches either take the domain code explicitly or go through a short-lived
``DomainFetchSession`` obtained from ``for_domain``.
"""

import logging
from typing import Any, Callable, Dict, TypeVar

from adapters.http_client import HTTPClientAdapter
from domain.constants import (
    BASE_URL_TEMPLATE,
    BULK_DOWNLOADS_URL,
    DIMENSIONS_URL,
    DOCUMENTS_URL,
    GROUPS_AND_DOMAINS_URL,
    METADATA_URL,
    SHOW_LIST_SUFFIX,
)
from domain.errors import FetchError
from domain.faostat_models import (
    BulkDownload,
    Dimension,
    FaoDocument,
    FaoDomain,
    FaoFilter,
    FaoMetadata,
    FaoResponse,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_VERSION = "v1"
DEFAULT_LANGUAGE = "en"


class FaoStatClient:
    """Issues one typed GET per FAOSTAT endpoint kind."""

    def __init__(
        self,
        http_client: HTTPClientAdapter,
        language: str = DEFAULT_LANGUAGE,
        version: str = DEFAULT_VERSION,
    ) -> None:
        self.http_client = http_client
        self.language = language
        self.version = version
        self.base_url = BASE_URL_TEMPLATE % (version, language)

    def with_language(self, language: str) -> "FaoStatClient":
        """Return a client that targets the same API version in another language."""
        return FaoStatClient(self.http_client, language=language, version=self.version)

    def for_domain(self, domain_code: str) -> "DomainFetchSession":
        return DomainFetchSession(self, domain_code)

    def filter_url(self, dimension: Dimension, domain_code: str) -> str:
        """
        Build the URL listing the filter values of a dimension.

        e.g. http://fenixservices.fao.org/faostat/api/v1/en/codes/countries/QC/?show_lists=true
        """
        filter_url_prefix = self.base_url[:-1]
        return f"{filter_url_prefix}{dimension.href}{domain_code}{SHOW_LIST_SUFFIX}"

    def fetch_domains(self) -> FaoResponse[FaoDomain]:
        return self._fetch(self.base_url + GROUPS_AND_DOMAINS_URL, FaoDomain.from_dict)

    def fetch_documents(self, domain_code: str) -> FaoResponse[FaoDocument]:
        url = DOCUMENTS_URL % (self.base_url, domain_code)
        return self._fetch(url, FaoDocument.from_dict)

    def fetch_bulk_downloads(self, domain_code: str) -> FaoResponse[BulkDownload]:
        url = BULK_DOWNLOADS_URL % (self.base_url, domain_code)
        return self._fetch(url, BulkDownload.from_dict)

    def fetch_metadata(self, domain_code: str) -> FaoResponse[FaoMetadata]:
        url = METADATA_URL % (self.base_url, domain_code)
        return self._fetch(url, FaoMetadata.from_dict)

    def fetch_dimensions(self, domain_code: str) -> FaoResponse[Dimension]:
        url = DIMENSIONS_URL % (self.base_url, domain_code)
        return self._fetch(url, Dimension.from_dict)

    def fetch_filters(self, filter_url: str) -> FaoResponse[FaoFilter]:
        """Fetch filter values from an already fully qualified URL."""
        return self._fetch(filter_url, FaoFilter.from_dict)

    def _fetch(
        self, url: str, item_parser: Callable[[Dict[str, Any]], T]
    ) -> FaoResponse[T]:
        logger.debug("Fetching %s", url)
        payload = self.http_client.get_json(url)

        if not isinstance(payload, dict):
            raise FetchError(
                "Unexpected response shape",
                context={"url": url, "type": type(payload).__name__},
            )
        try:
            return FaoResponse.from_dict(payload, item_parser)
        except (AttributeError, TypeError) as e:
            raise FetchError(
                "Could not parse response", context={"url": url}, original_error=e
            )


class DomainFetchSession:
    """Fetches the resources of a single domain."""

    def __init__(self, client: FaoStatClient, domain_code: str) -> None:
        self.client = client
        self.domain_code = domain_code

    def fetch_documents(self) -> FaoResponse[FaoDocument]:
        return self.client.fetch_documents(self.domain_code)

    def fetch_bulk_downloads(self) -> FaoResponse[BulkDownload]:
        return self.client.fetch_bulk_downloads(self.domain_code)

    def fetch_metadata(self) -> FaoResponse[FaoMetadata]:
        return self.client.fetch_metadata(self.domain_code)

    def fetch_dimensions(self) -> FaoResponse[Dimension]:
        return self.client.fetch_dimensions(self.domain_code)

    def fetch_filters(self, dimension: Dimension) -> FaoResponse[FaoFilter]:
        return self.client.fetch_filters(
            self.client.filter_url(dimension, self.domain_code)
        )
