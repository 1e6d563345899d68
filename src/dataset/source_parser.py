"""검색 히트 source → row(dict) 파싱."""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from core.errors import DeserializationError


def parse_source(raw: Any, *, hit_id: str | None = None) -> dict[str, Any]:
    """히트 하나의 source를 row로 변환.

    bytes/str은 JSON 문서 하나로 파싱하고, 이미 디코딩된 dict는 복사합니다.
    최상위 필드만 row 컬럼이 됩니다 (중첩 객체는 값 그대로 유지).

    Args:
        raw: 직렬화된 문서 또는 디코딩된 dict
        hit_id: 에러 메시지용 히트 ID

    Returns:
        컬럼명 → 값 dict

    Raises:
        DeserializationError: source가 없거나, JSON 객체로 파싱할 수 없는 경우.
    """
    if raw is None:
        raise DeserializationError("히트에 source가 없습니다", hit_id=hit_id)

    if isinstance(raw, Mapping):
        return dict(raw)

    if isinstance(raw, (bytes, bytearray, memoryview)):
        try:
            raw = bytes(raw).decode("utf-8")
        except UnicodeDecodeError as e:
            raise DeserializationError(f"source를 UTF-8로 디코딩할 수 없습니다: {e}", hit_id=hit_id) from e

    if not isinstance(raw, str):
        raise DeserializationError(f"지원하지 않는 source 타입: {type(raw).__name__}", hit_id=hit_id)

    try:
        doc = json.loads(raw)
    except json.JSONDecodeError as e:
        raise DeserializationError(f"source JSON 파싱 실패: {e}", hit_id=hit_id) from e

    if not isinstance(doc, dict):
        raise DeserializationError(f"source가 JSON 객체가 아닙니다: {type(doc).__name__}", hit_id=hit_id)
    return doc
