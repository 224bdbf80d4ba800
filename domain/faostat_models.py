"""
Domain models for FAOSTAT API responses.

Every FAOSTAT endpoint answers with the same envelope, a ``metadata`` block
describing the request processing and a ``data`` array of entities. The raw
payloads are loosely typed, so each model maps the raw keys onto semantic
attribute names in ``from_dict`` and restores them in ``to_dict``.
"""

from typing import Any, Callable, Dict, Generic, List, Optional, TypeVar

from domain.constants import DOCUMENT_URL

T = TypeVar("T")


def _pick(data: Dict[str, Any], *keys: str) -> Any:
    """Return the value of the first key present in ``data``."""
    for key in keys:
        if key in data:
            return data[key]
    return None


class FaoDomain:
    """One harvestable FAOSTAT dataset."""

    def __init__(
        self,
        group_code: Optional[str] = None,
        group_name: Optional[str] = None,
        domain_code: Optional[str] = None,
        domain_name: Optional[str] = None,
        date_update: Optional[str] = None,
        note_update: Optional[str] = None,
        release_current: Optional[str] = None,
        state_current: Optional[str] = None,
        year_current: Optional[str] = None,
        release_next: Optional[str] = None,
        state_next: Optional[str] = None,
        year_next: Optional[str] = None,
    ):
        self.group_code = group_code
        self.group_name = group_name
        self.domain_code = domain_code
        self.domain_name = domain_name
        self.date_update = date_update
        self.note_update = note_update
        self.release_current = release_current
        self.state_current = state_current
        self.year_current = year_current
        self.release_next = release_next
        self.state_next = state_next
        self.year_next = year_next

    # raw keys equal the attribute names
    FIELDS = (
        "group_code",
        "group_name",
        "domain_code",
        "domain_name",
        "date_update",
        "note_update",
        "release_current",
        "state_current",
        "year_current",
        "release_next",
        "state_next",
        "year_next",
    )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FaoDomain":
        return cls(**{field: data.get(field) for field in cls.FIELDS})

    def to_dict(self) -> Dict[str, Any]:
        return {field: getattr(self, field) for field in self.FIELDS}

    def __repr__(self) -> str:
        return f"FaoDomain(domain_code={self.domain_code}, group_code={self.group_code})"


class BulkDownload:
    """A downloadable archive of a domain's complete dataset."""

    def __init__(
        self,
        domain_code: Optional[str] = None,
        source: Optional[str] = None,
        file_name: Optional[str] = None,
        file_content: Optional[str] = None,
        created_date: Optional[str] = None,
        file_size: Optional[int] = None,
        file_size_unit: Optional[str] = None,
        type: Optional[str] = None,
        url: Optional[str] = None,
    ):
        self.domain_code = domain_code
        self.source = source
        self.file_name = file_name
        self.file_content = file_content
        self.created_date = created_date
        self.file_size = file_size
        self.file_size_unit = file_size_unit
        self.type = type
        self.url = url

    @property
    def file_extension(self) -> str:
        """Suffix after the last dot of the file name, e.g. ``zip``."""
        file_name = self.file_name or ""
        return file_name[file_name.rfind(".") + 1 :]

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BulkDownload":
        return cls(
            domain_code=_pick(data, "DomainCode", "domain_code"),
            source=_pick(data, "Source", "source"),
            file_name=_pick(data, "FileName", "file_name"),
            file_content=_pick(data, "FileContent", "file_content"),
            created_date=_pick(data, "CreatedDate", "created_date"),
            file_size=_pick(data, "FileSize", "file_size"),
            file_size_unit=_pick(data, "FileSizeUnit", "file_size_unit"),
            type=_pick(data, "Type", "type"),
            url=_pick(data, "URL", "url"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "DomainCode": self.domain_code,
            "Source": self.source,
            "FileName": self.file_name,
            "FileContent": self.file_content,
            "CreatedDate": self.created_date,
            "FileSize": self.file_size,
            "FileSizeUnit": self.file_size_unit,
            "Type": self.type,
            "URL": self.url,
        }


class FaoDocument:
    """A PDF document related to a domain."""

    def __init__(
        self,
        domain_code: Optional[str] = None,
        created_date: Optional[str] = None,
        file_name: Optional[str] = None,
        file_title: Optional[str] = None,
        file_path: Optional[str] = None,
    ):
        self.domain_code = domain_code
        self.created_date = created_date
        self.file_name = file_name
        self.file_title = file_title
        self.file_path = file_path

    @property
    def download_path(self) -> str:
        """e.g. http://fenixservices.fao.org/faostat/static/documents/QC/QC_methodology_e.pdf"""
        return DOCUMENT_URL % self.file_name

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FaoDocument":
        return cls(
            domain_code=_pick(data, "DomainCode", "domain_code"),
            created_date=_pick(data, "CreatedDate", "created_date"),
            file_name=_pick(data, "FileName", "file_name"),
            file_title=_pick(data, "FileTitle", "file_title"),
            file_path=_pick(data, "FilePath", "file_path"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "DomainCode": self.domain_code,
            "CreatedDate": self.created_date,
            "FileName": self.file_name,
            "FileTitle": self.file_title,
            "FilePath": self.file_path,
        }


class Dimension:
    """A filterable facet of a domain's data table."""

    def __init__(
        self,
        id: Optional[str] = None,
        label: Optional[str] = None,
        href: Optional[str] = None,
        parameter: Optional[str] = None,
    ):
        self.id = id
        self.label = label
        self.href = href
        self.parameter = parameter

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Dimension":
        # subdimensions are irrelevant to the harvest
        return cls(
            id=data.get("id"),
            label=data.get("label"),
            href=data.get("href"),
            parameter=data.get("parameter"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "label": self.label,
            "href": self.href,
            "parameter": self.parameter,
        }


class FaoFilter:
    """One concrete value of a dimension."""

    def __init__(
        self,
        code: Optional[str] = None,
        label: Optional[str] = None,
        aggregate_type: Optional[str] = None,
    ):
        self.code = code
        self.label = label
        self.aggregate_type = aggregate_type

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FaoFilter":
        return cls(
            code=data.get("code"),
            label=data.get("label"),
            aggregate_type=data.get("aggregate_type"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "code": self.code,
            "label": self.label,
            "aggregate_type": self.aggregate_type,
        }


class FaoMetadata:
    """A labeled free-text metadata field of a domain."""

    def __init__(
        self,
        domain_code: Optional[str] = None,
        metadata_group_code: Optional[str] = None,
        metadata_group_label: Optional[str] = None,
        metadata_code: Optional[str] = None,
        metadata_label: Optional[str] = None,
        metadata_text: Optional[str] = None,
        ord: Optional[int] = None,
    ):
        self.domain_code = domain_code
        self.metadata_group_code = metadata_group_code
        self.metadata_group_label = metadata_group_label
        self.metadata_code = metadata_code
        self.metadata_label = metadata_label
        self.metadata_text = metadata_text
        self.ord = ord

    FIELDS = (
        "domain_code",
        "metadata_group_code",
        "metadata_group_label",
        "metadata_code",
        "metadata_label",
        "metadata_text",
        "ord",
    )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FaoMetadata":
        values = {field: data.get(field) for field in cls.FIELDS}
        # group codes arrive as numbers on some API versions
        if values["metadata_group_code"] is not None:
            values["metadata_group_code"] = str(values["metadata_group_code"])
        return cls(**values)

    def to_dict(self) -> Dict[str, Any]:
        return {field: getattr(self, field) for field in self.FIELDS}


class ResponseMetadata:
    """Processing information attached to every FAOSTAT response."""

    def __init__(
        self, processing_time: Optional[float] = None, output_type: Optional[str] = None
    ):
        self.processing_time = processing_time
        self.output_type = output_type

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "ResponseMetadata":
        data = data or {}
        return cls(
            processing_time=data.get("processing_time"),
            output_type=data.get("output_type"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "processing_time": self.processing_time,
            "output_type": self.output_type,
        }


class FaoResponse(Generic[T]):
    """Generic ``{metadata, data[]}`` envelope of a FAOSTAT endpoint."""

    def __init__(self, metadata: ResponseMetadata, data: List[T]):
        self.metadata = metadata
        self.data = data

    @classmethod
    def from_dict(
        cls, payload: Dict[str, Any], item_parser: Callable[[Dict[str, Any]], T]
    ) -> "FaoResponse[T]":
        """
        Parse a raw response body.

        Args:
            payload: The decoded JSON object
            item_parser: Converts one entry of the ``data`` array

        Returns:
            The parsed response
        """
        items = payload.get("data") or []
        if not isinstance(items, list) or not all(isinstance(i, dict) for i in items):
            raise TypeError("'data' must be an array of objects")
        return cls(
            metadata=ResponseMetadata.from_dict(payload.get("metadata")),
            data=[item_parser(item) for item in items],
        )

    def __len__(self) -> int:
        return len(self.data)


class DomainValueObject:
    """All FAOSTAT resources of one domain, assembled by the extractor."""

    def __init__(
        self,
        domain: Optional[FaoDomain],
        bulk_downloads: Optional[List[BulkDownload]],
        metadata: Optional[List[FaoMetadata]],
        documents: Optional[List[FaoDocument]],
        dimensions: Optional[List[Dimension]],
        filters: Optional[List[FaoFilter]],
    ):
        self.domain = domain
        self.bulk_downloads = bulk_downloads
        self.metadata = metadata
        self.documents = documents
        self.dimensions = dimensions
        self.filters = filters

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DomainValueObject":
        def parse_list(key: str, parser: Callable[[Dict[str, Any]], Any]) -> Any:
            items = data.get(key)
            return None if items is None else [parser(item) for item in items]

        domain = data.get("domain")
        return cls(
            domain=FaoDomain.from_dict(domain) if domain is not None else None,
            bulk_downloads=parse_list("bulkDownloads", BulkDownload.from_dict),
            metadata=parse_list("metadata", FaoMetadata.from_dict),
            documents=parse_list("documents", FaoDocument.from_dict),
            dimensions=parse_list("dimensions", Dimension.from_dict),
            filters=parse_list("filters", FaoFilter.from_dict),
        )

    def to_dict(self) -> Dict[str, Any]:
        def dump_list(items: Optional[List[Any]]) -> Optional[List[Dict[str, Any]]]:
            return None if items is None else [item.to_dict() for item in items]

        return {
            "domain": self.domain.to_dict() if self.domain else None,
            "bulkDownloads": dump_list(self.bulk_downloads),
            "metadata": dump_list(self.metadata),
            "documents": dump_list(self.documents),
            "dimensions": dump_list(self.dimensions),
            "filters": dump_list(self.filters),
        }

    def __repr__(self) -> str:
        code = self.domain.domain_code if self.domain else None
        return f"DomainValueObject(domain_code={code})"
