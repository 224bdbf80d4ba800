"""
Mapping of FAOSTAT domains to DataCite records.

Every function in this module is a pure function of the domain value object
and the harvest language.
"""

import logging
from typing import List, Optional, Union

from opentelemetry import trace

from domain import constants
from domain.datacite_models import (
    Contributor,
    ContributorType,
    Creator,
    DataCiteRecord,
    Date,
    DateRange,
    DateType,
    Description,
    NameType,
    PersonName,
    ResearchData,
    ResourceType,
    ResourceTypeGeneral,
    Subject,
    Title,
    TitleType,
    WebLink,
    WebLinkType,
)
from domain.errors import InvalidInputError
from domain.faostat_models import (
    BulkDownload,
    DomainValueObject,
    FaoDocument,
    FaoDomain,
    FaoFilter,
    FaoMetadata,
)

# Get logger for this module
logger = logging.getLogger(__name__)

# Get tracer for this module
tracer = trace.get_tracer(__name__)


class FaoStatTransformer:
    """Converts one ``DomainValueObject`` into one ``DataCiteRecord``."""

    def __init__(self, language: str) -> None:
        self.language = language

    def transform(self, source: DomainValueObject) -> DataCiteRecord:
        """
        Build the bibliographic record of a domain.

        Raises:
            InvalidInputError: If the domain or its metadata list is missing
        """
        if source is None or source.domain is None:
            raise InvalidInputError("Domain value object has no domain")
        if source.metadata is None:
            raise InvalidInputError(
                "Domain value object has no metadata",
                context={"domain_code": source.domain.domain_code},
            )

        with tracer.start_as_current_span("transformer.transform") as span:
            span.set_attribute("domain.code", source.domain.domain_code or "")

            record = DataCiteRecord(self.create_identifier(source.domain))
            record.language = self.language
            record.repository_identifier = constants.REPOSITORY_ID
            record.publication_year = constants.EARLIEST_PUBLICATION_YEAR
            record.resource_type = ResourceType(
                constants.RESOURCE_TYPE_VALUE, ResourceTypeGeneral.DATASET
            )
            record.formats = list(constants.FORMATS)
            record.research_disciplines = list(constants.DISCIPLINES)
            record.publisher = constants.PROVIDER

            record.titles = self.parse_titles(source.domain)
            record.research_data = parse_files(source.bulk_downloads or [])
            record.descriptions = self.parse_descriptions(source.metadata)
            record.subjects = self.parse_subjects(source.filters or [])
            record.dates = parse_dates(source.metadata)
            record.web_links = parse_web_links(source.domain, source.documents or [])
            record.contributors = parse_contributors(source.metadata)
            record.creators = [
                Creator(PersonName(constants.PROVIDER, NameType.ORGANISATIONAL))
            ]

            logger.debug("Transformed domain %s", record.identifier)
            return record

    def create_identifier(self, domain: FaoDomain) -> str:
        """Create an identifier that is unique within FAOSTAT."""
        return constants.SOURCE_ID % (
            domain.group_code,
            domain.domain_code,
            self.language,
        )

    def parse_titles(self, domain: FaoDomain) -> List[Title]:
        """Domain name first, group name second."""
        return [
            Title(domain.domain_name or "", lang=self.language),
            Title(domain.group_name or "", lang=self.language, type=TitleType.OTHER),
        ]

    def parse_descriptions(self, metadata: List[FaoMetadata]) -> List[Description]:
        descriptions = []

        for m in metadata:
            label = m.metadata_label
            description_type = (
                constants.RELEVANT_DESCRIPTIONS.get(label) if label else None
            )
            if description_type is None:
                continue

            text = constants.DESCRIPTION_FORMAT.format(
                label=label, text=m.metadata_text or ""
            )
            descriptions.append(Description(text, description_type, lang=self.language))

        return descriptions

    def parse_subjects(self, filters: List[FaoFilter]) -> List[Subject]:
        return [Subject(f.label or "", lang=self.language) for f in filters]


def parse_files(bulk_downloads: List[BulkDownload]) -> List[ResearchData]:
    """Convert each bulk download to a research data file."""
    return [
        ResearchData(bdl.url or "", bdl.file_content or "", type=bdl.file_extension)
        for bdl in bulk_downloads
    ]


def parse_time_coverage(text: str) -> Union[Date, DateRange]:
    """
    Parse a time coverage text such as ``Data available from 1961 to 2013``.

    Texts without two years fall back to an unparsed date.
    """
    match = constants.TIME_COVERAGE_PATTERN.search(text)
    if match:
        return DateRange(match.group(1), match.group(2), DateType.OTHER)

    logger.debug("Could not parse time coverage: %s", text)
    return Date(text, DateType.OTHER)


def parse_dates(metadata: List[FaoMetadata]) -> List[Union[Date, DateRange]]:
    dates: List[Union[Date, DateRange]] = []

    for m in metadata:
        date_text = m.metadata_text
        if not date_text:
            continue

        if m.metadata_label == constants.META_DATA_TIME_COVERAGE:
            dates.append(parse_time_coverage(date_text))
        elif m.metadata_label == constants.META_DATA_LAST_UPDATE:
            # kept verbatim, "MMM. yyyy" texts such as "Nov. 2015" are not parsed
            dates.append(Date(date_text, DateType.UPDATED))

    return dates


def parse_web_links(domain: FaoDomain, documents: List[FaoDocument]) -> List[WebLink]:
    """View link, logo link, then every related document except the template."""
    web_links = [
        WebLink(
            constants.VIEW_URL % domain.domain_code,
            name=domain.domain_name,
            type=WebLinkType.VIEW_URL,
        ),
        WebLink(constants.LOGO_URL, type=WebLinkType.PROVIDER_LOGO_URL),
    ]

    for d in documents:
        if d.file_title == constants.TEMPLATE_DOCUMENT_NAME:
            continue
        web_links.append(
            WebLink(d.download_path, name=d.file_title, type=WebLinkType.RELATED)
        )

    return web_links


def parse_contributors(metadata: List[FaoMetadata]) -> List[Contributor]:
    """Assemble the contact person from the contact metadata group."""
    name: Optional[PersonName] = None
    affiliations: List[str] = []

    for m in metadata:
        if m.metadata_group_code != constants.CONTACT_METADATA_GROUP:
            continue

        if m.metadata_label == constants.METADATA_CONTACT_NAME:
            name = PersonName(m.metadata_text or "", NameType.PERSONAL)
        elif m.metadata_label == constants.METADATA_CONTACT_ORGANISATION:
            affiliations.append(m.metadata_text or "")

    if name is None:
        return []

    return [Contributor(name, ContributorType.CONTACT_PERSON, affiliations)]
