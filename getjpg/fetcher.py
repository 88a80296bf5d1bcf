"""
Blocking HTTP GET against the image server.
Every HTTP response is returned as a FetchResult; transport failures are
logged and re-raised so that they abort the run.
"""
import logging
import time

import httpx

logger = logging.getLogger(__name__)


class FetchResult:
    def __init__(
        self,
        url: str,
        status_code: int,
        reason: str = '',
        content: bytes = b'',
        fetch_time: float = 0.0
    ):
        """Initialize a FetchResult with HTTP response data and metadata."""
        self.url = url
        self.status_code = status_code
        self.reason = reason
        self.content = content
        self.fetch_time = fetch_time

    @property
    def success(self) -> bool:
        """Only an exact 200 counts as a fetched image."""
        return self.status_code == 200

    @property
    def status(self) -> str:
        """Status line as the server sent it, e.g. '200 OK'."""
        return f"{self.status_code} {self.reason}".strip()

    @property
    def size(self) -> int:
        """Get the size of the response content in bytes."""
        return len(self.content)


class HTTPFetcher:
    def __init__(self, timeout: float = 30.0, user_agent: str = 'getjpg/1.0',
                 transport: httpx.BaseTransport = None):
        """Initialize the HTTP fetcher.

        Args:
            timeout: Seconds to wait on connect/read before giving up.
            user_agent: User-Agent header sent with every request.
            transport: Optional httpx transport, used to mock the server in tests.
        """
        self.user_agent = user_agent
        self.timeout = timeout
        self.max_redirects = 10

        self._client = httpx.Client(
            timeout=httpx.Timeout(self.timeout),
            follow_redirects=True,
            max_redirects=self.max_redirects,
            headers={'User-Agent': self.user_agent},
            transport=transport
        )

    def fetch(self, url: str) -> FetchResult:
        """GET a URL and return a FetchResult for whatever status the server answers."""
        start_time = time.time()

        try:
            response = self._client.get(url)
        except httpx.TimeoutException as e:
            logger.error(f"Timeout after {self.timeout}s for {url}: {e}")
            raise
        except httpx.TransportError as e:
            logger.error(f"Connection error for {url}: {e}")
            raise

        return FetchResult(
            url=url,
            status_code=response.status_code,
            reason=response.reason_phrase,
            content=response.content,
            fetch_time=time.time() - start_time
        )

    def close(self):
        self._client.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
