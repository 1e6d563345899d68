"""입력 데이터셋 처리 에러 정의.

백엔드(Elasticsearch) 에러는 여기서 감싸지 않고 그대로 전달합니다.
"""

from __future__ import annotations

from collections.abc import Sequence

from core.types import InputDataType


class InputDatasetError(Exception):
    """입력 데이터셋 처리 에러의 기본 클래스."""


class InvalidInputKindError(InputDatasetError, ValueError):
    """요청한 작업과 입력 데이터셋 종류가 맞지 않는 경우 (호출자 실수)."""

    def __init__(self, expected: InputDataType, actual: InputDataType | None = None):
        self.expected = expected
        self.actual = actual
        super().__init__(f"Input dataset is not {expected.value} type.")


class EmptyResultError(InputDatasetError):
    """검색 결과 히트가 0건인 경우.

    빈 DataFrame 대신 실패로 처리합니다.
    잘못된 인덱스/필터가 모델 학습까지 조용히 흘러가는 것을 막기 위함.
    """

    def __init__(self, indices: Sequence[str] = ()):
        self.indices = tuple(indices)
        super().__init__("No document found")


class DeserializationError(InputDatasetError, ValueError):
    """히트의 source를 row(dict)로 파싱할 수 없는 경우."""

    def __init__(self, message: str, hit_id: str | None = None):
        self.hit_id = hit_id
        if hit_id is not None:
            message = f"{message} (hit_id={hit_id})"
        super().__init__(message)
