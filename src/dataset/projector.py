"""검색 결과 → DataFrame 변환 (SearchResultProjector).

검색은 비동기로 요청하고, 응답 콜백에서 히트를 row로 변환합니다.
호출 단위의 작업 상태(빌더, 히트 목록)는 모두 지역 변수이므로
여러 스레드에서 동시에 run()을 호출해도 안전합니다.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

import pandas as pd

from core.errors import EmptyResultError
from core.protocols import ActionListenerProtocol, SearchClientProtocol
from core.types import SearchRequest, SearchResponse
from dataframe import DataFrameBuilder
from dataset.listeners import NotifyOnceListener
from dataset.source_parser import parse_source

logger = logging.getLogger(__name__)


class SearchResultProjector:
    """검색 쿼리를 실행하고 히트를 DataFrame row로 투영."""

    def __init__(self, client: SearchClientProtocol):
        self.client = client

    def run(
        self,
        indices: Sequence[str],
        query: Mapping[str, Any],
        listener: ActionListenerProtocol[pd.DataFrame],
    ) -> None:
        """검색 요청 후 즉시 반환. 결과는 listener로 정확히 한 번 전달.

        Args:
            indices: 검색 대상 인덱스명
            query: 검색 쿼리 본문
            listener: DataFrame 또는 에러를 받을 continuation
        """
        request = SearchRequest(indices=tuple(indices), source=query)
        logger.debug(f"검색 요청: indices={list(request.indices)}")
        once = NotifyOnceListener(_SearchResponseListener(request, listener))
        try:
            self.client.search(request, once)
        except Exception as e:
            # 이미 전달된 뒤의 예외(listener 자체 예외 등)는 호출자에게 그대로 전파
            if once.notified:
                raise
            logger.error(f"검색 요청 실패: indices={list(request.indices)}, error={e!r}")
            once.on_failure(e)


class _SearchResponseListener:
    """검색 응답을 DataFrame으로 변환해 상위 listener에 전달."""

    def __init__(self, request: SearchRequest, listener: ActionListenerProtocol[pd.DataFrame]):
        self._request = request
        self._listener = listener

    def on_response(self, response: SearchResponse) -> None:
        hits = list(response.hits or [])
        if not hits:
            logger.warning(f"검색 결과가 없습니다: indices={list(self._request.indices)}")
            self._listener.on_failure(EmptyResultError(self._request.indices))
            return

        builder = DataFrameBuilder()
        try:
            for hit in hits:
                builder.append_row(parse_source(hit.source, hit_id=hit.id))
            df = builder.build()
        except Exception as e:
            logger.error(f"검색 결과 변환 실패: {e}")
            self._listener.on_failure(e)
            return

        logger.debug(f"검색 결과 {len(df)}건을 DataFrame으로 변환")
        # listener 자체의 예외는 on_failure로 되돌리지 않음
        self._listener.on_response(df)

    def on_failure(self, exc: Exception) -> None:
        logger.error(f"검색 실패: indices={list(self._request.indices)}, error={exc!r}")
        self._listener.on_failure(exc)
