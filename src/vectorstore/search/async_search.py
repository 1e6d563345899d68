"""콜백 기반 비동기 Elasticsearch 검색 클라이언트.

동기 Elasticsearch 클라이언트의 search()를 스레드 풀에서 실행하고,
완료되면 Future의 done callback에서 listener를 호출합니다.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Any

from elasticsearch import Elasticsearch

from core.protocols import ActionListenerProtocol
from core.types import SearchHit, SearchRequest, SearchResponse

logger = logging.getLogger(__name__)


def to_search_response(resp: Mapping[str, Any]) -> SearchResponse:
    """ES 검색 응답(raw dict)을 SearchResponse로 변환.

    hits.total은 ES 7+ 형식({"value": n})과 정수 형식 모두 지원.
    """
    hits_obj = resp.get("hits") or {}
    total = hits_obj.get("total")
    if isinstance(total, Mapping):
        total = total.get("value")

    hits = [
        SearchHit(id=h.get("_id"), score=h.get("_score"), source=h.get("_source"))
        for h in hits_obj.get("hits") or []
    ]
    return SearchResponse(
        hits=hits,
        total=int(total) if total is not None else None,
        took_ms=resp.get("took"),
    )


class ElasticsearchSearchClient:
    """SearchClientProtocol 구현체.

    search()는 요청을 스레드 풀에 넣고 바로 반환합니다.
    Elasticsearch 클라이언트는 외부에서 생성/관리합니다 (여기서 닫지 않음).
    """

    def __init__(
        self,
        es: Elasticsearch,
        max_workers: int = 4,
        executor: ThreadPoolExecutor | None = None,
    ):
        self.es = es
        self._owns_executor = executor is None
        self._executor = executor or ThreadPoolExecutor(
            max_workers=max_workers, thread_name_prefix="es-search"
        )

    def _execute(self, request: SearchRequest) -> SearchResponse:
        resp = self.es.search(index=list(request.indices), **dict(request.source))
        # elasticsearch-py 8.x: ObjectApiResponse.body
        body = getattr(resp, "body", resp)
        return to_search_response(body)

    def search(
        self,
        request: SearchRequest,
        listener: ActionListenerProtocol[SearchResponse],
    ) -> None:
        """비동기 검색. listener는 스레드 풀 스레드에서 호출됩니다."""
        try:
            future = self._executor.submit(self._execute, request)
        except RuntimeError as e:
            # close() 이후 호출
            listener.on_failure(e)
            return

        def _done(f: Future[SearchResponse]) -> None:
            exc = f.exception()
            if exc is not None:
                listener.on_failure(exc)
                return
            listener.on_response(f.result())

        future.add_done_callback(_done)

    def close(self) -> None:
        """직접 생성한 스레드 풀 종료."""
        if self._owns_executor:
            self._executor.shutdown(wait=True)
