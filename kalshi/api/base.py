"""
Base HTTP client with typed error handling.

Wraps one requests.Session that every handle derived from the same
client shares. JSON bodies are parsed with orjson.
"""

import orjson
import requests
from typing import Optional, Any, Dict
import logging

from ..config import KalshiSettings
from ..exceptions import TransportError, DeserializationError

logger = logging.getLogger(__name__)


class BaseAPIClient:
    """
    Base HTTP client mapping transport failures to typed exceptions.

    Does not retry and does not rate limit; each call is one request.
    """

    def __init__(
        self,
        base_url: str,
        settings: KalshiSettings,
        session: Optional[requests.Session] = None
    ):
        """
        Initialize base API client.

        Args:
            base_url: API base URL
            settings: Client settings
            session: Optional pre-built session (a new one is created if omitted)
        """
        self.base_url = base_url.rstrip("/")
        self.settings = settings

        self.session = session or requests.Session()
        self.session.headers.update({
            "Accept": "application/json",
        })

        # Set timeouts
        self.timeout = (settings.connect_timeout, settings.request_timeout)

    def _url(self, path: str) -> str:
        """Join path onto the base URL, keeping the base URL's own path."""
        return f"{self.base_url}/{path.lstrip('/')}"

    def _make_request(
        self,
        method: str,
        path: str,
        headers: Optional[Dict[str, str]] = None,
        json_data: Optional[Dict[str, Any]] = None
    ) -> requests.Response:
        """
        Make HTTP request and check its status.

        Args:
            method: HTTP method
            path: Request path
            headers: Additional headers
            json_data: JSON body

        Returns:
            Response with a 2xx status

        Raises:
            TransportError: On connection failure, timeout or non-2xx status
        """
        url = self._url(path)

        if self.settings.log_requests:
            logger.debug(f"{method} {url}")

        try:
            response = self.session.request(
                method=method,
                url=url,
                headers=headers,
                json=json_data,
                timeout=self.timeout
            )
        except requests.exceptions.Timeout as e:
            logger.error(f"Request timeout: {method} {url}")
            raise TransportError(f"Request timeout: {method} {path}") from e
        except requests.exceptions.RequestException as e:
            logger.error(f"Connection error: {method} {url}")
            raise TransportError(f"Connection error: {method} {path}: {type(e).__name__}") from e

        if not 200 <= response.status_code < 300:
            error_msg = f"{method} {path} failed with {response.status_code}"
            error_data: Any = None
            try:
                error_data = orjson.loads(response.content)
                error_msg += f": {error_data}"
            except orjson.JSONDecodeError as e:
                logger.debug(f"Could not parse error response as JSON: {e}")
                error_msg += f": {response.text[:200]}"

            logger.warning(error_msg)
            raise TransportError(
                error_msg,
                status_code=response.status_code,
                response=error_data
            )

        if self.settings.log_requests:
            logger.debug(f"{method} {path} -> {response.status_code}")

        return response

    def _parse_json(self, response: requests.Response) -> Any:
        """
        Decode a response body.

        Raises:
            DeserializationError: If the body is not valid JSON
        """
        try:
            return orjson.loads(response.content)
        except orjson.JSONDecodeError as e:
            logger.error(f"Invalid JSON response: {response.text[:200]}")
            raise DeserializationError(
                f"Invalid JSON response: {e}",
                body=response.text[:200]
            ) from e

    def post(
        self,
        path: str,
        json_data: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None
    ) -> Any:
        """
        Make POST request.

        Args:
            path: Request path
            json_data: JSON body
            headers: Additional headers

        Returns:
            Response JSON
        """
        response = self._make_request(
            "POST",
            path,
            headers=headers,
            json_data=json_data
        )
        return self._parse_json(response)

    def post_no_content(
        self,
        path: str,
        headers: Optional[Dict[str, str]] = None
    ) -> None:
        """Make bodiless POST request and discard the response body."""
        self._make_request("POST", path, headers=headers)

    def close(self) -> None:
        """Close session and cleanup resources."""
        self.session.close()
        logger.info("API client session closed")
