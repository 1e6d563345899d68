"""Pytest configuration: 검색 클라이언트 / listener fake."""

from __future__ import annotations

import json
from typing import Any

import pytest

from core.types import SearchHit, SearchRequest, SearchResponse


class RecordingListener:
    """on_response / on_failure 호출을 기록하는 listener."""

    def __init__(self) -> None:
        self.responses: list[Any] = []
        self.failures: list[Exception] = []

    def on_response(self, response: Any) -> None:
        self.responses.append(response)

    def on_failure(self, exc: Exception) -> None:
        self.failures.append(exc)

    @property
    def calls(self) -> int:
        return len(self.responses) + len(self.failures)


class FakeSearchClient:
    """요청을 기록하고 미리 지정한 응답/에러로 listener를 바로 호출."""

    def __init__(
        self,
        response: SearchResponse | None = None,
        error: Exception | None = None,
    ) -> None:
        self.response = response
        self.error = error
        self.requests: list[SearchRequest] = []

    def search(self, request: SearchRequest, listener) -> None:
        self.requests.append(request)
        if self.error is not None:
            listener.on_failure(self.error)
        else:
            listener.on_response(self.response)


def make_hit(source: Any, hit_id: str = "1") -> SearchHit:
    if isinstance(source, dict):
        source = json.dumps(source).encode("utf-8")
    return SearchHit(id=hit_id, score=1.0, source=source)


@pytest.fixture
def listener() -> RecordingListener:
    return RecordingListener()


@pytest.fixture
def match_all() -> dict[str, Any]:
    return {"query": {"match_all": {}}}
