"""입력 데이터셋 및 검색 관련 공용 타입 정의.

이 모듈은 인프라에 의존하지 않습니다.
dataset, vectorstore 등 어디서든 import할 수 있습니다.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar

import pandas as pd


class InputDataType(str, Enum):
    """입력 데이터셋 종류 (kind tag)."""

    DATA_FRAME = "DATA_FRAME"
    SEARCH_QUERY = "SEARCH_QUERY"


@dataclass(frozen=True, eq=False)
class DataFrameInputDataset:
    """이미 만들어진 DataFrame을 감싸는 입력 데이터셋."""

    input_data_type: ClassVar[InputDataType] = InputDataType.DATA_FRAME

    data_frame: pd.DataFrame


@dataclass(frozen=True)
class SearchQueryInputDataset:
    """검색 쿼리로 정의되는 입력 데이터셋.

    Attributes:
        indices: 검색 대상 인덱스명 (순서 유지, 비어있으면 안 됨)
        query: 검색 쿼리 본문 (ES DSL 형식, 예: {"query": {"match_all": {}}})
    """

    input_data_type: ClassVar[InputDataType] = InputDataType.SEARCH_QUERY

    indices: tuple[str, ...]
    query: Mapping[str, Any] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        if isinstance(self.indices, str):
            object.__setattr__(self, "indices", (self.indices,))
        else:
            object.__setattr__(self, "indices", tuple(self.indices))

        if not self.indices:
            raise ValueError("indices는 비어있을 수 없습니다.")
        if any(not isinstance(i, str) or not i.strip() for i in self.indices):
            raise ValueError(f"잘못된 인덱스명이 포함되어 있습니다: {list(self.indices)}")


InputDataset = DataFrameInputDataset | SearchQueryInputDataset


def input_dataset_from_dict(data: Mapping[str, Any]) -> InputDataset:
    """선언 dict에서 입력 데이터셋 생성.

    Example:
        >>> input_dataset_from_dict(
        ...     {"input_data_type": "SEARCH_QUERY", "indices": ["index1"], "query": {}}
        ... )
        SearchQueryInputDataset(indices=('index1',), query={})

    Raises:
        ValueError: input_data_type이 없거나 알 수 없는 값인 경우.
    """
    raw_type = data.get("input_data_type")
    try:
        kind = InputDataType(str(raw_type).upper())
    except ValueError:
        raise ValueError(f"알 수 없는 input_data_type: {raw_type!r}") from None

    if kind is InputDataType.SEARCH_QUERY:
        return SearchQueryInputDataset(
            indices=data.get("indices") or (),
            query=dict(data.get("query") or {}),
        )

    # DATA_FRAME: rows(list[dict])로 선언
    return DataFrameInputDataset(data_frame=pd.DataFrame.from_records(list(data.get("rows") or [])))


@dataclass(frozen=True)
class SearchRequest:
    """검색 클라이언트에 전달되는 요청 (대상 인덱스 + 쿼리 본문)."""

    indices: tuple[str, ...]
    source: Mapping[str, Any]


@dataclass
class SearchHit:
    """검색 결과 히트.

    source는 직렬화된 원본 문서(bytes/str)이거나,
    클라이언트가 이미 디코딩한 dict일 수 있습니다.
    """

    id: str | None
    score: float | None
    source: bytes | str | Mapping[str, Any] | None


@dataclass
class SearchResponse:
    """검색 응답. 히트 순서는 백엔드가 반환한 순서를 유지."""

    hits: Sequence[SearchHit] = field(default_factory=list)
    total: int | None = None
    took_ms: int | None = None
