"""
Vectorstore 팩토리.

입력 데이터셋 처리에 필요한 Elasticsearch 컴포넌트를 생성하는 팩토리 함수.
"""

from __future__ import annotations

from dataclasses import dataclass

from elasticsearch import Elasticsearch

from dataset import InputDatasetHandler
from vectorstore.client import create_es_client
from vectorstore.config import ESConfig
from vectorstore.search import ElasticsearchSearchClient


@dataclass
class InputDatasetComponents:
    """입력 데이터셋 처리 컴포넌트 묶음."""

    es: Elasticsearch
    search_client: ElasticsearchSearchClient
    handler: InputDatasetHandler

    def close(self) -> None:
        """스레드 풀과 ES 연결 정리."""
        self.search_client.close()
        self.es.close()


def create_input_dataset_handler(
    config: ESConfig | None = None,
    es: Elasticsearch | None = None,
) -> InputDatasetComponents:
    """
    InputDatasetHandler와 의존 컴포넌트를 생성합니다.

    Args:
        config: ES 설정 (None이면 기본값 사용)
        es: 이미 생성된 ES 클라이언트 (None이면 config로 생성)

    Returns:
        InputDatasetComponents (es, search_client, handler)
    """
    cfg = config or ESConfig()
    es = es or create_es_client(cfg)
    search_client = ElasticsearchSearchClient(es, max_workers=cfg.search_max_workers)
    handler = InputDatasetHandler(search_client)

    return InputDatasetComponents(
        es=es,
        search_client=search_client,
        handler=handler,
    )
