"""Elasticsearch 설정 관리.

환경변수로 설정을 관리합니다.
로컬 서버 환경만 지원합니다 (Cloud 미사용).
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class ESConfig:
    """Elasticsearch 연결 및 검색 설정.

    Attributes:
        es_url: Elasticsearch 서버 URL (예: http://localhost:9200)
        es_username: HTTP Basic Auth 사용자명 (선택)
        es_password: HTTP Basic Auth 비밀번호 (선택)
        verify_certs: SSL 인증서 검증 여부
        request_timeout_s: 요청 타임아웃 (초). 타임아웃 정책은 클라이언트가 담당
        search_max_workers: 비동기 검색 스레드 풀 크기
    """

    # Connection
    es_url: str = field(default_factory=lambda: os.environ["ES_URL"])
    es_username: str | None = field(default_factory=lambda: os.getenv("ES_USERNAME"))
    es_password: str | None = field(default_factory=lambda: os.getenv("ES_PASSWORD"))

    verify_certs: bool = field(
        default_factory=lambda: os.getenv("ES_VERIFY_CERTS", "true").lower() == "true"
    )
    request_timeout_s: int = field(
        default_factory=lambda: int(os.getenv("ES_REQUEST_TIMEOUT_S", "30"))
    )

    # Async search
    search_max_workers: int = field(
        default_factory=lambda: int(os.getenv("ES_SEARCH_MAX_WORKERS", "4"))
    )
