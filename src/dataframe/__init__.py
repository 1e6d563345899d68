"""pandas DataFrame 조립 유틸리티."""

from dataframe.builder import DataFrameBuilder, row_at

__all__ = [
    "DataFrameBuilder",
    "row_at",
]
