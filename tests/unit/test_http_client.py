import pytest
from typing import Dict, Any, Optional
from types import TracebackType
from unittest.mock import MagicMock, patch
from adapters.http_client import HTTPClientAdapter
from domain.errors import FetchError
from requests.exceptions import HTTPError, RequestException


class DummySpan:
    """Simple mock for an OpenTelemetry span."""

    def __init__(self) -> None:
        self.attributes: Dict[str, Any] = {}

    def __enter__(self) -> "DummySpan":
        return self

    def __exit__(
        self,
        exc_type: Optional[BaseException],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        pass

    def set_attribute(self, key: str, value: Any) -> None:
        self.attributes[key] = value

    def set_attributes(self, attrs: Dict[str, Any]) -> None:
        self.attributes.update(attrs)


class DummyTracer:
    """Tracer mock that returns a DummySpan."""

    def __init__(self) -> None:
        self.last_span: Optional[DummySpan] = None

    def start_as_current_span(self, name: str) -> DummySpan:
        span = DummySpan()
        self.last_span = span
        return span


@pytest.fixture
def dummy_tracer() -> DummyTracer:
    """Provides a DummyTracer instance for tests."""
    return DummyTracer()


def json_response(payload: Any, status_code: int = 200) -> MagicMock:
    response = MagicMock()
    response.status_code = status_code
    response.content = b"{}"
    response.json.return_value = payload
    response.raise_for_status.return_value = None
    return response


def test_get_json_success(dummy_tracer: DummyTracer) -> None:
    mock_session = MagicMock()
    mock_session.get.return_value = json_response({"data": []})

    with patch("adapters.http_client.get_tracer", return_value=dummy_tracer):
        client = HTTPClientAdapter(session=mock_session, base_wait_time=0)
        payload = client.get_json("http://example.com/api")

    assert payload == {"data": []}
    span = dummy_tracer.last_span
    assert span is not None
    assert span.attributes["url"] == "http://example.com/api"
    assert span.attributes["status_code"] == 200
    assert "error" not in span.attributes


def test_get_json_sends_user_agent(dummy_tracer: DummyTracer) -> None:
    mock_session = MagicMock()
    mock_session.get.return_value = json_response({})

    with patch("adapters.http_client.get_tracer", return_value=dummy_tracer):
        client = HTTPClientAdapter(
            session=mock_session, base_wait_time=0, user_agent="test-agent"
        )
        client.get_json("http://example.com")

    _, kwargs = mock_session.get.call_args
    assert kwargs["headers"]["User-Agent"] == "test-agent"
    assert kwargs["timeout"] == 30


def test_get_json_retry_on_exception(dummy_tracer: DummyTracer) -> None:
    # First call raises an exception, second call succeeds
    mock_session = MagicMock()
    mock_session.get.side_effect = [
        RequestException("temp error"),
        json_response({"data": [1]}),
    ]

    with patch("adapters.http_client.get_tracer", return_value=dummy_tracer):
        client = HTTPClientAdapter(
            max_retries=1, session=mock_session, base_wait_time=0
        )
        payload = client.get_json("http://example.com")

    assert payload == {"data": [1]}
    assert mock_session.get.call_count == 2


def test_get_json_retry_and_failure(dummy_tracer: DummyTracer) -> None:
    # All attempts raise an exception, should surface as FetchError
    mock_session = MagicMock()
    mock_session.get.side_effect = RequestException("persistent error")

    with patch("adapters.http_client.get_tracer", return_value=dummy_tracer):
        client = HTTPClientAdapter(
            max_retries=2, session=mock_session, base_wait_time=0
        )
        with pytest.raises(FetchError) as exc_info:
            client.get_json("http://example.com")

    assert mock_session.get.call_count == 3
    assert isinstance(exc_info.value.original_error, RequestException)
    assert exc_info.value.context["attempts"] == 3
    span = dummy_tracer.last_span
    assert span is not None
    assert span.attributes["error"] == "persistent error"


def test_get_json_http_error_status(dummy_tracer: DummyTracer) -> None:
    response = json_response(None, status_code=500)
    response.raise_for_status.side_effect = HTTPError("500 Server Error")
    mock_session = MagicMock()
    mock_session.get.return_value = response

    with patch("adapters.http_client.get_tracer", return_value=dummy_tracer):
        client = HTTPClientAdapter(
            max_retries=0, session=mock_session, base_wait_time=0
        )
        with pytest.raises(FetchError):
            client.get_json("http://example.com")

    span = dummy_tracer.last_span
    assert span is not None
    assert span.attributes["status_code"] == 500


def test_get_json_invalid_body(dummy_tracer: DummyTracer) -> None:
    response = json_response(None)
    response.json.side_effect = ValueError("Expecting value")
    mock_session = MagicMock()
    mock_session.get.return_value = response

    with patch("adapters.http_client.get_tracer", return_value=dummy_tracer):
        client = HTTPClientAdapter(
            max_retries=3, session=mock_session, base_wait_time=0
        )
        with pytest.raises(FetchError, match="not valid JSON"):
            client.get_json("http://example.com")

    # a malformed body is not retried
    assert mock_session.get.call_count == 1


def test_get_json_without_attempts(dummy_tracer: DummyTracer) -> None:
    """When ``max_retries`` is ``-1`` the retry loop is skipped entirely."""
    mock_session = MagicMock()

    with patch("adapters.http_client.get_tracer", return_value=dummy_tracer):
        client = HTTPClientAdapter(
            session=mock_session, max_retries=-1, base_wait_time=0
        )
        with pytest.raises(FetchError):
            client.get_json("http://example.com")

    mock_session.get.assert_not_called()
