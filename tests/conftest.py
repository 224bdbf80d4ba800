import pytest
from pathlib import Path
from typing import Any, Dict, List

from domain.faostat_models import (
    BulkDownload,
    Dimension,
    DomainValueObject,
    FaoDocument,
    FaoDomain,
    FaoFilter,
    FaoMetadata,
)
from tests.helpers.fixtures import (
    FakeHTTPClient,
    load_mocked_responses,
    metadata_item,
)


@pytest.fixture(scope="session")
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def fixtures_dir(project_root: Path) -> Path:
    """Return the fixtures directory path."""
    return project_root / "tests" / "fixtures"


@pytest.fixture
def mocked_responses(fixtures_dir: Path) -> Dict[str, Any]:
    """Recorded FAOSTAT responses keyed by URL."""
    return load_mocked_responses(fixtures_dir)


@pytest.fixture
def fake_http_client(mocked_responses: Dict[str, Any]) -> FakeHTTPClient:
    return FakeHTTPClient(mocked_responses)


@pytest.fixture
def sample_domain() -> FaoDomain:
    return FaoDomain(
        group_code="Q",
        group_name="Production",
        domain_code="QCL",
        domain_name="Crops and livestock products",
        date_update="2023-12-21",
    )


@pytest.fixture
def sample_metadata() -> List[FaoMetadata]:
    return [
        metadata_item("Contact name", "Jane Doe", group_code="1"),
        metadata_item("Contact organisation", "FAO", group_code="1"),
        metadata_item("Contact organisation", "UN", group_code="1"),
        metadata_item("Data description", "Crop statistics."),
        metadata_item("Time coverage", "Data available from 1961 to 2013 inclusive"),
        metadata_item("Metadata last update", "Nov. 2015", group_code="2"),
        metadata_item("Base period", "2014-2016"),
    ]


@pytest.fixture
def sample_value_object(
    sample_domain: FaoDomain, sample_metadata: List[FaoMetadata]
) -> DomainValueObject:
    """A domain value object as the extractor would assemble it."""
    return DomainValueObject(
        domain=sample_domain,
        bulk_downloads=[
            BulkDownload(
                domain_code="QCL",
                file_name="QCL_data.zip",
                file_content="All Data",
                url="http://example.org/QCL_data.zip",
            )
        ],
        metadata=sample_metadata,
        documents=[
            FaoDocument(
                domain_code="QCL",
                file_name="QCL/QCL_methodology_e.pdf",
                file_title="Methodology",
            ),
            FaoDocument(domain_code="QCL", file_name="QCL/about.pdf", file_title="About"),
        ],
        dimensions=[
            Dimension(id="area", label="Countries", href="/codes/area/"),
            Dimension(id="year", label="Years", href="/codes/year/"),
        ],
        filters=[
            FaoFilter(code="2", label="Afghanistan", aggregate_type="0"),
            FaoFilter(code="3", label="Albania", aggregate_type="0"),
        ],
    )
