"""In-memory Todo REST API for testing the client and tools.

MockTodoAPI implements the six routes the tools call, records every request
it receives, and can be primed with canned responses or transport failures.
It plugs into TodoApiClient as an httpx.MockTransport, so the real client
code (headers, encoding, status handling) runs unchanged.

Example:
    >>> api = MockTodoAPI()
    >>> api.seed("Buy milk")
    >>> client = api.client()
    >>> await client.request("GET", "/todos/1")
    >>> assert api.last_request.path == "/todos/1"
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import UTC, datetime

import httpx
import orjson

from todo_mcp.foundation.errors import JsonValue
from todo_mcp.io import ApiKeyAuth, TodoApiClient

_TODO_PATH = re.compile(r"^/todos/(?P<id>-?\d+)(?P<toggle>/toggle)?$")


def _now() -> str:
    return datetime.now(UTC).isoformat().replace("+00:00", "Z")


@dataclass(slots=True)
class RecordedRequest:
    """A request as seen by the mock server."""

    method: str
    path: str
    headers: httpx.Headers
    body: JsonValue = None
    raw: bytes = b""

    @property
    def has_body(self) -> bool:
        return bool(self.raw)


@dataclass
class MockResponse:
    """Canned response. `data` is JSON-encoded unless it is already a string."""

    status: int = 200
    data: JsonValue = None

    def to_httpx(self) -> httpx.Response:
        if self.data is None:
            return httpx.Response(self.status)
        content = self.data.encode() if isinstance(self.data, str) else orjson.dumps(self.data)
        return httpx.Response(self.status, content=content, headers={"Content-Type": "application/json"})


@dataclass
class MockTodoAPI:
    """Simulated Todo API backend.

    Args:
        api_key: When set, requests without a matching `x-api-key` get 401
    """

    api_key: str | None = None
    todos: dict[int, dict[str, object]] = field(default_factory=dict)
    requests: list[RecordedRequest] = field(default_factory=list)
    _next_id: int = 1
    _responses: dict[tuple[str, str], MockResponse] = field(default_factory=dict)
    _failures: dict[tuple[str, str], Exception] = field(default_factory=dict)

    # ─────────────────────────────────────────────────────────────────
    # Setup
    # ─────────────────────────────────────────────────────────────────

    def seed(self, title: str, description: str | None = None, *, is_completed: bool = False) -> dict[str, object]:
        """Insert a todo directly, bypassing the request log."""
        todo_id = self._next_id
        self._next_id += 1
        stamp = _now()
        self.todos[todo_id] = todo = {
            "id": todo_id,
            "title": title,
            "description": description,
            "isCompleted": is_completed,
            "createdAt": stamp,
            "updatedAt": stamp,
        }
        return todo

    def set_response(self, method: str, path: str, response: MockResponse) -> None:
        """Serve `response` for every `method path` request instead of the route."""
        self._responses[(method.upper(), path)] = response

    def set_error(self, method: str, path: str, status: int = 500, message: str = "Internal Server Error") -> None:
        self.set_response(method, path, MockResponse(status, message))

    def set_failure(self, method: str, path: str, exc: Exception) -> None:
        """Raise `exc` from the transport (e.g. httpx.ConnectError, httpx.ReadTimeout)."""
        self._failures[(method.upper(), path)] = exc

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handle)

    def client(self, api_key: str = "test-key", base_url: str = "http://todo.test") -> TodoApiClient:
        return TodoApiClient(base_url, ApiKeyAuth(key=api_key), transport=self.transport)

    # ─────────────────────────────────────────────────────────────────
    # Inspection
    # ─────────────────────────────────────────────────────────────────

    @property
    def request_count(self) -> int:
        return len(self.requests)

    @property
    def last_request(self) -> RecordedRequest | None:
        return self.requests[-1] if self.requests else None

    def clear(self) -> None:
        self.requests.clear()

    def assert_not_called(self) -> None:
        if self.requests:
            raise AssertionError(f"Expected no API calls, got {[f'{r.method} {r.path}' for r in self.requests]}")

    # ─────────────────────────────────────────────────────────────────
    # Routing
    # ─────────────────────────────────────────────────────────────────

    def handle(self, request: httpx.Request) -> httpx.Response:
        raw = request.read()
        method, path = request.method, request.url.path
        self.requests.append(RecordedRequest(
            method=method,
            path=path,
            headers=request.headers,
            body=orjson.loads(raw) if raw else None,
            raw=raw,
        ))

        key = (method, path)
        if key in self._failures:
            raise self._failures[key]
        if key in self._responses:
            return self._responses[key].to_httpx()
        if self.api_key is not None and request.headers.get("x-api-key") != self.api_key:
            return MockResponse(401, {"message": "Invalid API key"}).to_httpx()
        return self._route(method, path, self.requests[-1].body).to_httpx()

    def _route(self, method: str, path: str, body: JsonValue) -> MockResponse:
        if path == "/todos":
            if method == "GET":
                return MockResponse(200, list(self.todos.values()))
            if method == "POST":
                return self._create(body)
            return MockResponse(405, {"message": "Method Not Allowed"})

        match = _TODO_PATH.match(path)
        if match is None:
            return MockResponse(404, {"message": "Not Found"})
        todo = self.todos.get(int(match["id"]))
        if todo is None:
            return MockResponse(404, {"message": "Todo not found"})

        match method, bool(match["toggle"]):
            case "GET", False:
                return MockResponse(200, todo)
            case "PATCH", False:
                return self._update(todo, body)
            case "PATCH", True:
                todo.update(isCompleted=not todo["isCompleted"], updatedAt=_now())
                return MockResponse(200, todo)
            case "DELETE", False:
                del self.todos[todo["id"]]  # type: ignore[arg-type]
                return MockResponse(204)
        return MockResponse(405, {"message": "Method Not Allowed"})

    def _create(self, body: JsonValue) -> MockResponse:
        if not isinstance(body, dict) or not body.get("title"):
            return MockResponse(400, {"message": "title is required"})
        todo = self.seed(body["title"], body.get("description"), is_completed=bool(body.get("isCompleted", False)))
        return MockResponse(201, todo)

    def _update(self, todo: dict[str, object], body: JsonValue) -> MockResponse:
        if not isinstance(body, dict):
            return MockResponse(400, {"message": "body must be an object"})
        todo.update({k: v for k, v in body.items() if k in ("title", "description", "isCompleted")})
        todo["updatedAt"] = _now()
        return MockResponse(200, todo)
