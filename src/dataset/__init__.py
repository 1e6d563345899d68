"""ML 입력 데이터셋 → pandas DataFrame 변환.

주요 컴포넌트:
    - InputDatasetHandler: 데이터셋 종류 검사 후 변환 경로로 위임
    - SearchResultProjector: 비동기 검색 결과를 DataFrame으로 변환
    - ActionListener / FutureActionListener: continuation 구현체
"""

from dataset.handler import InputDatasetHandler
from dataset.listeners import ActionListener, FutureActionListener, NotifyOnceListener
from dataset.projector import SearchResultProjector
from dataset.source_parser import parse_source

__all__ = [
    "InputDatasetHandler",
    "SearchResultProjector",
    "ActionListener",
    "FutureActionListener",
    "NotifyOnceListener",
    "parse_source",
]
