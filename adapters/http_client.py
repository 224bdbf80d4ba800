import logging
import time
from typing import Any, Optional

import requests
from requests import Session
from requests.exceptions import ConnectionError, RequestException, Timeout

from domain.errors import FetchError
from infrastructure.telemetry import get_tracer

logger = logging.getLogger(__name__)


class HTTPClientAdapter:
    """Adapter for fetching JSON documents with telemetry and retries."""

    def __init__(
        self,
        timeout: int = 30,
        max_retries: int = 3,
        base_wait_time: int = 2,
        user_agent: str = "FaoStatHarvester/1.0",
        verify_ssl: bool = True,
        session: Optional[Session] = None,
    ) -> None:
        self.timeout = timeout
        self.max_retries = max_retries
        self.base_wait_time = base_wait_time
        self.user_agent = user_agent
        self.verify_ssl = verify_ssl
        self.session = session if session is not None else requests.Session()
        self.headers = {"User-Agent": user_agent, "Accept": "application/json"}

    def get_json(self, url: str) -> Any:
        """
        Perform HTTP GET request and decode the JSON body.

        Returns:
            The decoded JSON value

        Raises:
            FetchError: If the request keeps failing or the body is not JSON
        """
        with get_tracer().start_as_current_span("http.get") as span:
            span.set_attribute("url", url)

            for attempt in range(self.max_retries + 1):
                try:
                    response = self.session.get(
                        url,
                        timeout=self.timeout,
                        headers=self.headers,
                        verify=self.verify_ssl,
                    )
                    span.set_attribute("status_code", response.status_code)
                    response.raise_for_status()
                except (RequestException, ConnectionError, Timeout) as e:
                    if attempt < self.max_retries:
                        wait_time = (
                            0
                            if self.base_wait_time == 0
                            else self.base_wait_time**attempt
                        )
                        logger.debug(
                            "GET %s failed (attempt %d): %s", url, attempt + 1, e
                        )
                        time.sleep(wait_time)
                        continue
                    span.set_attribute("error", str(e))
                    raise FetchError(
                        f"Failed to fetch {url}",
                        context={"url": url, "attempts": attempt + 1},
                        original_error=e,
                    )

                try:
                    payload = response.json()
                except ValueError as e:
                    span.set_attribute("error", str(e))
                    raise FetchError(
                        f"Response of {url} is not valid JSON",
                        context={"url": url},
                        original_error=e,
                    )
                span.set_attribute("content_length", len(response.content or b""))
                return payload

            raise FetchError(f"No request was made for {url}", context={"url": url})
