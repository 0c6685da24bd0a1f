"""HTTP client for the remote Todo REST API.

One shared httpx.AsyncClient per process, configured once from TodoSettings:

- Static API key authentication (`x-api-key` header on every request)
- JSON request bodies (orjson), `Content-Type` only when a body is sent
- 204 / empty responses map to None
- Non-2xx responses raise ApiError carrying status, reason and body text
- No retries: each call sends exactly one request

Example:
    >>> async with TodoApiClient.from_settings(load_settings()) as client:
    ...     todos = await client.request("GET", "/todos")
"""

from __future__ import annotations

import time
from typing import TYPE_CHECKING, Annotated, Literal

import httpx
import orjson
from pydantic import BaseModel, ConfigDict, Field, SecretStr, field_serializer

from todo_mcp.foundation.errors import ApiError, JsonValue
from todo_mcp.runtime.observability import get_logger

if TYPE_CHECKING:
    from types import TracebackType

    from todo_mcp.foundation.config import TodoSettings

HttpMethod = Literal["GET", "POST", "PATCH", "DELETE"]

log = get_logger("todo_mcp.http")


class ApiKeyAuth(BaseModel):
    """API key sent in a request header."""

    model_config = ConfigDict(frozen=True, extra="forbid", str_strip_whitespace=True)

    key: SecretStr = Field(..., description="API key value")
    header_name: Annotated[str, Field(
        default="x-api-key",
        pattern=r"^[A-Za-z][A-Za-z0-9-]*$",
        description="HTTP header name for the key",
    )]

    def apply(self, headers: dict[str, str]) -> dict[str, str]:
        headers[self.header_name] = self.key.get_secret_value()
        return headers

    @field_serializer("key", when_used="json")
    def _mask_key(self, v: SecretStr) -> str:
        secret = v.get_secret_value()
        return f"{secret[:4]}..." if len(secret) > 4 else "***"


class TodoApiClient:
    """Async client issuing exactly one HTTP request per call.

    Args:
        base_url: API root, e.g. "http://localhost:3000"
        auth: Credential applied to every request
        timeout: Request timeout in seconds
        user_agent: User-Agent header value
        transport: Optional httpx transport (tests pass httpx.MockTransport)
    """

    __slots__ = ("_base_url", "_auth", "_timeout", "_user_agent", "_transport", "_client")

    def __init__(
        self,
        base_url: str,
        auth: ApiKeyAuth,
        *,
        timeout: float = 5.0,
        user_agent: str = "todo-mcp-server/1.0.0",
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._auth = auth
        self._timeout = timeout
        self._user_agent = user_agent
        self._transport = transport
        self._client: httpx.AsyncClient | None = None  # Created on first request

    @classmethod
    def from_settings(cls, settings: TodoSettings, *, transport: httpx.AsyncBaseTransport | None = None) -> TodoApiClient:
        return cls(
            settings.api_url,
            ApiKeyAuth(key=settings.api_key),
            timeout=settings.http.timeout,
            user_agent=settings.http.user_agent,
            transport=transport,
        )

    @property
    def base_url(self) -> str:
        return self._base_url

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self._base_url,
                headers={"User-Agent": self._user_agent, "Accept": "application/json"},
                timeout=self._timeout,
                transport=self._transport,
            )
        return self._client

    async def request(self, method: HttpMethod, path: str, body: dict[str, object] | None = None) -> JsonValue:
        """Send one request and return the parsed JSON body (None for 204/empty).

        Raises:
            ApiError: Non-2xx response.
            TimeoutError: The request timed out.
            ConnectionError: The request could not be completed.
            orjson.JSONDecodeError: A 2xx body that is not JSON.
        """
        headers = self._auth.apply({})
        content: bytes | None = None
        if body is not None:
            content = orjson.dumps(body)
            headers["Content-Type"] = "application/json"

        start = time.perf_counter()
        try:
            response = await self._get_client().request(method, path, headers=headers, content=content)
        except httpx.TimeoutException as e:
            raise TimeoutError(f"Request {method} {path} timed out: {str(e) or type(e).__name__}") from e
        except httpx.TransportError as e:
            raise ConnectionError(f"Request {method} {self._base_url}{path} failed: {str(e) or type(e).__name__}") from e

        elapsed_ms = round((time.perf_counter() - start) * 1000, 1)
        log.debug("api response", method=method, path=path, status=response.status_code, elapsed_ms=elapsed_ms)

        if not response.is_success:
            raise ApiError(response.status_code, response.reason_phrase, response.text)
        if response.status_code == 204 or not response.content:
            return None
        return orjson.loads(response.content)

    async def aclose(self) -> None:
        """Close pooled connections. A later request opens a fresh client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> TodoApiClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()
