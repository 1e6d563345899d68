"""Row 단위로 pandas DataFrame을 조립하는 빌더.

row마다 컬럼 구성이 달라도 됩니다 (sparse schema).
컬럼 순서는 처음 등장한 순서를 따르고, 빈 칸은 pandas가 NaN으로 채웁니다.
각 row가 실제로 가진 키는 df.attrs[ROW_KEYS_ATTR]에 남겨서,
값이 null인 필드와 아예 없는 필드를 구분합니다.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

import pandas as pd

ROW_KEYS_ATTR = "row_keys"


class DataFrameBuilder:
    """append_row() 호출 순서를 그대로 row 순서로 유지하는 빌더."""

    def __init__(self) -> None:
        self._rows: list[dict[str, Any]] = []

    def __len__(self) -> int:
        return len(self._rows)

    def append_row(self, row: Mapping[str, Any]) -> DataFrameBuilder:
        """row 추가."""
        self._rows.append(dict(row))
        return self

    def build(self) -> pd.DataFrame:
        """누적된 row로 새 DataFrame 생성."""
        df = pd.DataFrame.from_records(self._rows)
        df.attrs[ROW_KEYS_ATTR] = [tuple(row) for row in self._rows]
        return df

    @classmethod
    def load(cls, rows: Iterable[Mapping[str, Any]]) -> pd.DataFrame:
        """row 목록에서 바로 DataFrame 생성."""
        builder = cls()
        for row in rows:
            builder.append_row(row)
        return builder.build()


def row_at(df: pd.DataFrame, i: int) -> dict[str, Any]:
    """i번째 row를 원래의 sparse dict로 반환.

    빌더로 만든 DataFrame이면 row가 가진 키만 돌려주고, 빈 칸은 None으로 복원합니다.
    그 외 DataFrame은 빈 칸(NaN/None)을 모두 제외합니다.
    """
    row = df.iloc[i]
    row_keys = df.attrs.get(ROW_KEYS_ATTR)
    if row_keys is None or len(row_keys) != len(df):
        return {k: v for k, v in row.items() if not _is_missing(v)}
    return {k: None if _is_missing(row[k]) else row[k] for k in row_keys[i]}


def _is_missing(value: Any) -> bool:
    # list/dict 값은 pd.isna가 배열을 반환하므로 스칼라만 검사
    if isinstance(value, (list, tuple, dict)):
        return False
    return bool(pd.isna(value))
