"""검색 클라이언트 및 continuation Protocol(인터페이스) 정의.

이 모듈은 인프라에 의존하지 않습니다.
dataset, vectorstore 등 어디서든 import할 수 있습니다.

Protocol은 구조적 서브타이핑(Structural Subtyping)을 지원합니다.
구현체가 이 Protocol을 상속하지 않아도, 시그니처만 맞으면 호환됩니다.
"""

from __future__ import annotations

from typing import Protocol, TypeVar

from core.types import SearchRequest, SearchResponse

T_contra = TypeVar("T_contra", contravariant=True)


class ActionListenerProtocol(Protocol[T_contra]):
    """비동기 작업 결과를 전달받는 continuation 인터페이스.

    on_response / on_failure 중 정확히 하나가 정확히 한 번 호출됩니다.
    백엔드 콜백 스레드에서 호출될 수 있습니다.
    """

    def on_response(self, response: T_contra) -> None: ...

    def on_failure(self, exc: Exception) -> None: ...


class SearchClientProtocol(Protocol):
    """비동기 검색 클라이언트 인터페이스.

    search()는 호출 스레드를 블로킹하지 않고 즉시 반환해야 하며,
    listener는 SearchResponse 또는 에러로 정확히 한 번 호출됩니다.

    Example:
        >>> class ElasticsearchSearchClient:
        ...     def search(self, request: SearchRequest, listener) -> None:
        ...         ...  # 스레드 풀에서 es.search 실행 후 listener 호출
    """

    def search(
        self,
        request: SearchRequest,
        listener: ActionListenerProtocol[SearchResponse],
    ) -> None: ...
