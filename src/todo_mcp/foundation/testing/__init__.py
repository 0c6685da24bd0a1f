"""Testing utilities: an in-memory Todo API served through httpx.MockTransport."""

from .fixture import MockResponse, MockTodoAPI, RecordedRequest

__all__ = ["MockResponse", "MockTodoAPI", "RecordedRequest"]
