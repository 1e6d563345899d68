"""Elasticsearch 검색 백엔드 (Infrastructure Layer).

이 모듈은 core.protocols.SearchClientProtocol의 Elasticsearch 구현체를 제공합니다.

주요 컴포넌트:
    - ESConfig / create_es_client: 클라이언트 설정 및 생성
    - ElasticsearchSearchClient: 스레드 풀 기반 콜백형 비동기 검색
    - create_input_dataset_handler: InputDatasetHandler 조립

Usage:
    >>> from vectorstore import ESConfig, create_input_dataset_handler
    >>>
    >>> components = create_input_dataset_handler(ESConfig())
    >>> df = components.handler.parse_search_query_input_future(dataset).result()
"""

from vectorstore.client import check_connection, create_es_client
from vectorstore.config import ESConfig
from vectorstore.factory import InputDatasetComponents, create_input_dataset_handler
from vectorstore.search import ElasticsearchSearchClient, to_search_response

__all__ = [
    # Config
    "ESConfig",
    # Client
    "create_es_client",
    "check_connection",
    # Search
    "ElasticsearchSearchClient",
    "to_search_response",
    # Factory
    "InputDatasetComponents",
    "create_input_dataset_handler",
]
