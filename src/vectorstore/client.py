"""검색용 Elasticsearch 클라이언트 생성 및 연결 확인."""

from __future__ import annotations

import logging
from typing import Any

from elasticsearch import Elasticsearch
from elasticsearch.exceptions import TransportError

from .config import ESConfig

logger = logging.getLogger(__name__)


def _client_options(cfg: ESConfig) -> dict[str, Any]:
    """ESConfig → Elasticsearch 생성자 인자. 계정 정보가 모두 있을 때만 Basic Auth 사용."""
    options: dict[str, Any] = {
        "hosts": [cfg.es_url],
        "verify_certs": cfg.verify_certs,
        "request_timeout": cfg.request_timeout_s,
    }
    if cfg.es_username and cfg.es_password:
        options["basic_auth"] = (cfg.es_username, cfg.es_password)
    return options


def create_es_client(cfg: ESConfig | None = None) -> Elasticsearch:
    """검색 클라이언트가 공유할 Elasticsearch 인스턴스 생성.

    Raises:
        ValueError: ES_URL이 비어있는 경우.
    """
    cfg = cfg or ESConfig()
    if not cfg.es_url:
        raise ValueError("ES_URL 환경변수를 설정하세요.")

    options = _client_options(cfg)
    logger.debug(f"ES 클라이언트 생성: url={cfg.es_url}, auth={'basic_auth' in options}")
    return Elasticsearch(**options)


def check_connection(es: Elasticsearch) -> bool:
    """ES ping. 전송 계층 에러는 False로 처리."""
    try:
        return bool(es.ping())
    except TransportError as e:
        logger.warning(f"ES 연결 실패: {e}")
        return False
