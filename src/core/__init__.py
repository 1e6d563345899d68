"""Core 타입, 프로토콜, 에러.

이 모듈은 인프라에 의존하지 않습니다.
dataset, vectorstore 등 어디서든 import할 수 있습니다.
"""

from core.errors import (
    DeserializationError,
    EmptyResultError,
    InputDatasetError,
    InvalidInputKindError,
)
from core.protocols import ActionListenerProtocol, SearchClientProtocol
from core.types import (
    DataFrameInputDataset,
    InputDataset,
    InputDataType,
    SearchHit,
    SearchQueryInputDataset,
    SearchRequest,
    SearchResponse,
    input_dataset_from_dict,
)

__all__ = [
    # Types
    "InputDataType",
    "InputDataset",
    "DataFrameInputDataset",
    "SearchQueryInputDataset",
    "input_dataset_from_dict",
    "SearchRequest",
    "SearchHit",
    "SearchResponse",
    # Protocols
    "ActionListenerProtocol",
    "SearchClientProtocol",
    # Errors
    "InputDatasetError",
    "InvalidInputKindError",
    "EmptyResultError",
    "DeserializationError",
]
