"""
Bibliographic record models.

This module contains the DataCite-shaped output entities produced by the
transformer and their JSON representation.
"""

from enum import Enum
from typing import Any, Dict, List, Optional


class TitleType(Enum):
    """DataCite title types used by the harvester."""

    OTHER = "Other"


class DescriptionType(Enum):
    """DataCite description types."""

    ABSTRACT = "Abstract"
    METHODS = "Methods"
    TECHNICAL_INFO = "TechnicalInfo"
    OTHER = "Other"


class DateType(Enum):
    """DataCite date types."""

    UPDATED = "Updated"
    COLLECTED = "Collected"
    OTHER = "Other"


class NameType(Enum):
    PERSONAL = "Personal"
    ORGANISATIONAL = "Organizational"


class ContributorType(Enum):
    CONTACT_PERSON = "ContactPerson"


class ResourceTypeGeneral(Enum):
    DATASET = "Dataset"


class WebLinkType(Enum):
    """Link categories of the GeRDI DataCite extension."""

    VIEW_URL = "ViewURL"
    PROVIDER_LOGO_URL = "ProviderLogoURL"
    RELATED = "Related"


def _without_none(values: Dict[str, Any]) -> Dict[str, Any]:
    return {key: value for key, value in values.items() if value is not None}


class Title:
    def __init__(
        self, value: str, lang: Optional[str] = None, type: Optional[TitleType] = None
    ):
        self.value = value
        self.lang = lang
        self.type = type

    def to_dict(self) -> Dict[str, Any]:
        return _without_none(
            {
                "value": self.value,
                "titleType": self.type.value if self.type else None,
                "lang": self.lang,
            }
        )


class Description:
    def __init__(self, value: str, type: DescriptionType, lang: Optional[str] = None):
        self.value = value
        self.type = type
        self.lang = lang

    def to_dict(self) -> Dict[str, Any]:
        return _without_none(
            {"value": self.value, "descriptionType": self.type.value, "lang": self.lang}
        )


class Subject:
    def __init__(self, value: str, lang: Optional[str] = None):
        self.value = value
        self.lang = lang

    def to_dict(self) -> Dict[str, Any]:
        return _without_none({"value": self.value, "lang": self.lang})


class Date:
    """A single, unparsed date value."""

    def __init__(self, value: str, type: DateType):
        self.value = value
        self.type = type

    def to_dict(self) -> Dict[str, Any]:
        return {"value": self.value, "dateType": self.type.value}


class DateRange:
    """A closed range between two date values."""

    def __init__(self, since: str, until: str, type: DateType):
        self.since = since
        self.until = until
        self.type = type

    def to_dict(self) -> Dict[str, Any]:
        return {"since": self.since, "until": self.until, "dateType": self.type.value}


class WebLink:
    def __init__(
        self,
        url: str,
        name: Optional[str] = None,
        type: Optional[WebLinkType] = None,
    ):
        self.url = url
        self.name = name
        self.type = type

    def to_dict(self) -> Dict[str, Any]:
        return _without_none(
            {
                "url": self.url,
                "name": self.name,
                "webLinkType": self.type.value if self.type else None,
            }
        )


class ResearchData:
    """A downloadable file of a dataset."""

    def __init__(self, url: str, label: str, type: Optional[str] = None):
        self.url = url
        self.label = label
        self.type = type

    def to_dict(self) -> Dict[str, Any]:
        return _without_none({"url": self.url, "label": self.label, "type": self.type})


class PersonName:
    def __init__(self, value: str, type: NameType):
        self.value = value
        self.type = type

    def to_dict(self) -> Dict[str, Any]:
        return {"value": self.value, "nameType": self.type.value}


class Creator:
    def __init__(self, name: PersonName):
        self.name = name

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name.to_dict()}


class Contributor:
    def __init__(
        self,
        name: PersonName,
        type: ContributorType,
        affiliations: Optional[List[str]] = None,
    ):
        self.name = name
        self.type = type
        self.affiliations = list(affiliations) if affiliations else []

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "name": self.name.to_dict(),
            "contributorType": self.type.value,
        }
        if self.affiliations:
            data["affiliations"] = list(self.affiliations)
        return data


class ResourceType:
    def __init__(self, value: str, general_type: ResourceTypeGeneral):
        self.value = value
        self.general_type = general_type

    def to_dict(self) -> Dict[str, Any]:
        return {"value": self.value, "resourceTypeGeneral": self.general_type.value}


class DataCiteRecord:
    """Bibliographic record of one harvested FAOSTAT domain."""

    def __init__(self, identifier: str):
        self.identifier = identifier
        self.language: Optional[str] = None
        self.repository_identifier: Optional[str] = None
        self.publication_year: Optional[int] = None
        self.resource_type: Optional[ResourceType] = None
        self.publisher: Optional[str] = None
        self.formats: List[str] = []
        self.research_disciplines: List[str] = []
        self.titles: List[Title] = []
        self.research_data: List[ResearchData] = []
        self.descriptions: List[Description] = []
        self.subjects: List[Subject] = []
        self.dates: List[Any] = []
        self.web_links: List[WebLink] = []
        self.contributors: List[Contributor] = []
        self.creators: List[Creator] = []

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the DataCite JSON representation."""
        data: Dict[str, Any] = _without_none(
            {
                "identifier": self.identifier,
                "language": self.language,
                "repositoryIdentifier": self.repository_identifier,
                "publicationYear": self.publication_year,
                "resourceType": self.resource_type.to_dict()
                if self.resource_type
                else None,
                "publisher": self.publisher,
            }
        )
        lists = {
            "formats": list(self.formats),
            "researchDisciplines": list(self.research_disciplines),
            "titles": [t.to_dict() for t in self.titles],
            "researchData": [r.to_dict() for r in self.research_data],
            "descriptions": [d.to_dict() for d in self.descriptions],
            "subjects": [s.to_dict() for s in self.subjects],
            "dates": [d.to_dict() for d in self.dates],
            "webLinks": [w.to_dict() for w in self.web_links],
            "contributors": [c.to_dict() for c in self.contributors],
            "creators": [c.to_dict() for c in self.creators],
        }
        data.update({key: value for key, value in lists.items() if value})
        return data

    def __repr__(self) -> str:
        return f"DataCiteRecord(identifier={self.identifier}, titles={len(self.titles)})"
