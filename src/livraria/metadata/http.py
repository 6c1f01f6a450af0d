# ABOUTME: HTTP client abstraction for calls to the external text-generation API.
# ABOUTME: Posts JSON, decodes JSON, and maps every failure to SourceUnavailableError.

import logging
from types import TracebackType
from typing import Any, Protocol, runtime_checkable

import httpx

from livraria import __version__
from livraria.errors import SourceUnavailableError

logger = logging.getLogger(__name__)


@runtime_checkable
class HttpClient(Protocol):
    """Protocol for JSON POST operations against the catalog source API."""

    def post_json(
        self,
        url: str,
        payload: dict[str, Any],
        headers: dict[str, str] | None = None,
    ) -> dict[str, Any]: ...


class LivrariaHttpClient:
    """HTTP client for the catalog source.

    Wraps httpx.Client. Failed requests are not retried: a non-200 answer
    aborts the ingestion call that made it.
    """

    def __init__(
        self,
        *,
        timeout: float = 120.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        client_kwargs: dict[str, Any] = {
            "headers": {"User-Agent": f"livraria/{__version__}"},
            "timeout": timeout,
        }
        if transport is not None:
            client_kwargs["transport"] = transport
        self._client = httpx.Client(**client_kwargs)

    def post_json(
        self,
        url: str,
        payload: dict[str, Any],
        headers: dict[str, str] | None = None,
    ) -> dict[str, Any]:
        """Send a JSON POST request and return the decoded JSON body.

        Raises:
            SourceUnavailableError: On transport errors, non-200 status, or
                a body that is not a JSON object.
        """
        try:
            response = self._client.post(url, json=payload, headers=headers)
        except httpx.HTTPError as exc:
            raise SourceUnavailableError(f"Request failed: {url}: {exc}") from exc

        if response.status_code != 200:
            raise SourceUnavailableError(
                f"HTTP {response.status_code} from {url}: {response.text[:500]}"
            )

        try:
            body = response.json()
        except ValueError as exc:
            raise SourceUnavailableError(f"Response from {url} is not valid JSON") from exc

        if not isinstance(body, dict):
            raise SourceUnavailableError(f"Response from {url} is not a JSON object")
        logger.debug("Response from %s: %s", url, body)
        return body

    @property
    def is_closed(self) -> bool:
        return self._client.is_closed

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "LivrariaHttpClient":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
