"""입력 데이터셋 → DataFrame 변환 진입점 (InputDatasetHandler).

데이터셋 종류(kind tag)를 먼저 검사한 뒤 해당 변환 경로로 위임합니다.
종류가 맞지 않는 경우는 호출자 실수이므로 네트워크 요청 없이 바로 실패합니다.

Usage:
    >>> handler = InputDatasetHandler(search_client)
    >>> df = handler.parse_data_frame_input(DataFrameInputDataset(data_frame=df))
    >>>
    >>> dataset = SearchQueryInputDataset(
    ...     indices=["index1"], query={"query": {"match_all": {}}}
    ... )
    >>> handler.parse_search_query_input(dataset, listener)
"""

from __future__ import annotations

import logging
from concurrent.futures import Future

import pandas as pd

from core.errors import InvalidInputKindError
from core.protocols import ActionListenerProtocol, SearchClientProtocol
from core.types import InputDataset, InputDataType
from dataset.listeners import FutureActionListener
from dataset.projector import SearchResultProjector

logger = logging.getLogger(__name__)


class InputDatasetHandler:
    """입력 데이터셋 종류별 DataFrame 변환 디스패처."""

    def __init__(self, client: SearchClientProtocol):
        """
        Args:
            client: 검색 클라이언트 (외부에서 생성/관리, 여기서 닫지 않음)
        """
        self.client = client
        self.projector = SearchResultProjector(client)

    def parse_data_frame_input(self, dataset: InputDataset) -> pd.DataFrame:
        """DATA_FRAME 데이터셋의 DataFrame을 그대로 반환 (복사하지 않음).

        Raises:
            InvalidInputKindError: DATA_FRAME 타입이 아닌 경우.
        """
        kind = dataset.input_data_type
        if kind is not InputDataType.DATA_FRAME:
            raise InvalidInputKindError(InputDataType.DATA_FRAME, kind)
        return dataset.data_frame

    def parse_search_query_input(
        self,
        dataset: InputDataset,
        listener: ActionListenerProtocol[pd.DataFrame],
    ) -> None:
        """SEARCH_QUERY 데이터셋의 검색을 실행하고 결과 DataFrame을 listener로 전달.

        타입이 맞지 않으면 검색 없이 listener.on_failure가 동기적으로 호출됩니다.
        """
        kind = dataset.input_data_type
        if kind is not InputDataType.SEARCH_QUERY:
            logger.debug(f"SEARCH_QUERY가 아닌 입력 데이터셋: {kind}")
            listener.on_failure(InvalidInputKindError(InputDataType.SEARCH_QUERY, kind))
            return
        self.projector.run(dataset.indices, dataset.query, listener)

    def parse_search_query_input_future(self, dataset: InputDataset) -> Future[pd.DataFrame]:
        """parse_search_query_input의 Future 버전.

        Example:
            >>> df = handler.parse_search_query_input_future(dataset).result(timeout=30)
        """
        listener: FutureActionListener[pd.DataFrame] = FutureActionListener()
        self.parse_search_query_input(dataset, listener)
        return listener.future
