import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, cast

from domain.errors import FetchError
from domain.faostat_models import FaoMetadata

logger = logging.getLogger(__name__)


def load_json_fixture(fixture_name: str, fixtures_dir: Path) -> Any:
    """
    Load a JSON fixture from the fixtures directory.

    Args:
        fixture_name: Name of the JSON fixture file
        fixtures_dir: Path to the fixtures directory

    Returns:
        The decoded JSON content

    Raises:
        FileNotFoundError: If fixture doesn't exist
    """
    fixture_path = fixtures_dir / "json" / fixture_name
    if not fixture_path.exists():
        raise FileNotFoundError(f"Fixture not found: {fixture_path}")
    logger.debug(f"Loading JSON from {fixture_path}")
    return json.loads(fixture_path.read_text(encoding="utf-8"))


def load_mocked_responses(fixtures_dir: Path) -> Dict[str, Any]:
    """Load the recorded FAOSTAT responses, keyed by request URL."""
    return cast(Dict[str, Any], load_json_fixture("faostat_responses.json", fixtures_dir))


class FakeHTTPClient:
    """Stands in for HTTPClientAdapter and answers from recorded responses."""

    def __init__(
        self,
        responses: Dict[str, Any],
        failing_urls: Optional[List[str]] = None,
    ) -> None:
        self.responses = responses
        self.failing_urls = set(failing_urls or [])
        self.requested_urls: List[str] = []

    def get_json(self, url: str) -> Any:
        self.requested_urls.append(url)
        if url in self.failing_urls or url not in self.responses:
            raise FetchError(f"Failed to fetch {url}", context={"url": url})
        return self.responses[url]


def metadata_item(
    label: str, text: Optional[str], group_code: str = "3"
) -> FaoMetadata:
    """Build a metadata entry of the QCL domain."""
    return FaoMetadata(
        domain_code="QCL",
        metadata_group_code=group_code,
        metadata_label=label,
        metadata_text=text,
    )
