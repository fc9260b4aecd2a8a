"""HTTP existence checks for candidate package URLs."""

import logging
from collections.abc import Callable

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from ubuntu_headers.config import DEFAULT_HTTP_TIMEOUT
from ubuntu_headers.exceptions import ResolverTransportError

logger = logging.getLogger(__name__)

# Given candidate URLs, return the ones that exist, in input order
URLResolver = Callable[[list[str]], list[str]]


class HTTPURLResolver:
    """Finds which candidate URLs exist by sending HEAD requests."""

    def __init__(self, timeout: float = DEFAULT_HTTP_TIMEOUT, max_retries: int = 3):
        """Initialize the resolver.

        Args:
            timeout: Request timeout in seconds
            max_retries: Maximum number of retry attempts on server errors
        """
        self.timeout = timeout
        self.max_retries = max_retries
        self.session = self._create_session()

    def _create_session(self) -> requests.Session:
        """Create a requests session with retry configuration."""
        session = requests.Session()

        # Configure retry strategy with exponential backoff
        retry_strategy = Retry(
            total=self.max_retries,
            backoff_factor=1,  # 1, 2, 4 seconds
            status_forcelist=[429, 500, 502, 503, 504],
            allowed_methods=["HEAD"],
            raise_on_status=False,
        )

        adapter = HTTPAdapter(max_retries=retry_strategy)
        session.mount("http://", adapter)
        session.mount("https://", adapter)

        return session

    def exists(self, url: str) -> bool:
        """Check whether a single URL can be fetched.

        Args:
            url: URL to probe

        Returns:
            True if the server answers 200, False for any other status

        Raises:
            ResolverTransportError: If the request fails at the network level
        """
        try:
            response = self.session.head(url, timeout=self.timeout, allow_redirects=True)
        except requests.RequestException as e:
            logger.error(f"Failed to check {url}: {e}")
            raise ResolverTransportError(url, f"Failed to check {url}: {e}") from e

        if response.status_code not in (requests.codes.ok, requests.codes.not_found):
            logger.warning(
                f"Unexpected status {response.status_code} for {url}, treating as missing"
            )
        else:
            logger.debug(f"HEAD {url} -> {response.status_code}")
        return response.status_code == requests.codes.ok

    def __call__(self, urls: list[str]) -> list[str]:
        """Return the subset of URLs that exist, preserving order.

        Raises:
            ResolverTransportError: If any request fails at the network level
        """
        found = [url for url in urls if self.exists(url)]
        for url in found:
            logger.info(f"Found package: {url}")
        return found
