"""
Fixed URLs, lookup tables and record constants for FAOSTAT.
"""

import re
from types import MappingProxyType
from typing import Mapping, Tuple

from domain.datacite_models import DescriptionType

# DOWNLOAD URLS
BASE_URL_TEMPLATE = "http://fenixservices.fao.org/faostat/api/%s/%s/"
GROUPS_AND_DOMAINS_URL = "groupsanddomains?section=download"
DOCUMENTS_URL = "%sdocuments/%s/"
BULK_DOWNLOADS_URL = "%sbulkdownloads/%s/"
METADATA_URL = "%smetadata/%s/"
DIMENSIONS_URL = "%sdimensions/%s/?full=true"
SHOW_LIST_SUFFIX = "/?show_lists=true"
DOCUMENT_URL = "http://fenixservices.fao.org/faostat/static/documents/%s"

# DIMENSIONS
YEAR_DIMENSION_ID = "year"

# SOURCE
PROVIDER = "Food and Agriculture Organization of the United Nations (FAO)"
PROVIDER_URI = "http://www.fao.org/faostat/en/#home"
REPOSITORY_ID = "FAOSTAT"
SOURCE_ID = "%s_%s_%s"
DISCIPLINES: Tuple[str, ...] = ("Statistics",)
FORMATS: Tuple[str, ...] = ("CSV",)
EARLIEST_PUBLICATION_YEAR = 1961
RESOURCE_TYPE_VALUE = "CSV"

# CONTRIBUTORS
CONTACT_METADATA_GROUP = "1"
METADATA_CONTACT_NAME = "Contact name"
METADATA_CONTACT_ORGANISATION = "Contact organisation"

# WEB LINKS
VIEW_URL = "http://www.fao.org/faostat/en/#data/%s"
LOGO_URL = (
    "http://data.fao.org/developers/api/catalog/resource/findDatastream"
    "?authKey=d30aebf0-ab2a-11e1-afa6-0800200c9a66&version=1.0&type=image"
    "&database=faostat&resource=logo&datastream=logo"
)
TEMPLATE_DOCUMENT_NAME = "About"

# DATES
META_DATA_TIME_COVERAGE = "Time coverage"
META_DATA_LAST_UPDATE = "Metadata last update"
TIME_COVERAGE_PATTERN = re.compile(r"^\D*(\d{4})\D+(\d{4})\D*$")

# DESCRIPTIONS
DESCRIPTION_FORMAT = "{label}: {text}"
RELEVANT_DESCRIPTIONS: Mapping[str, DescriptionType] = MappingProxyType(
    {
        "Data description": DescriptionType.ABSTRACT,
        "Statistical concepts and definitions": DescriptionType.TECHNICAL_INFO,
        "Documentation on methodology": DescriptionType.METHODS,
        "Quality documentation": DescriptionType.METHODS,
    }
)
