from __future__ import annotations

import pandas as pd
import pytest

from core.types import (
    DataFrameInputDataset,
    InputDataType,
    SearchQueryInputDataset,
    input_dataset_from_dict,
)


def test_kind_tags():
    frame = DataFrameInputDataset(data_frame=pd.DataFrame())
    search = SearchQueryInputDataset(indices=["index1"], query={})

    assert frame.input_data_type is InputDataType.DATA_FRAME
    assert search.input_data_type is InputDataType.SEARCH_QUERY


def test_search_query_indices_are_immutable_tuple():
    names = ["index1", "index2"]
    dataset = SearchQueryInputDataset(indices=names, query={"query": {"match_all": {}}})
    names.append("index3")

    assert dataset.indices == ("index1", "index2")


def test_search_query_single_index_string():
    assert SearchQueryInputDataset(indices="index1").indices == ("index1",)


@pytest.mark.parametrize("indices", [[], ["index1", ""], ["  "]])
def test_search_query_rejects_invalid_indices(indices):
    with pytest.raises(ValueError):
        SearchQueryInputDataset(indices=indices, query={})


def test_datasets_are_frozen():
    dataset = SearchQueryInputDataset(indices=["index1"], query={})
    with pytest.raises(AttributeError):
        dataset.indices = ("other",)


def test_from_dict_search_query():
    dataset = input_dataset_from_dict(
        {
            "input_data_type": "search_query",
            "indices": ["index1"],
            "query": {"query": {"match_all": {}}},
        }
    )

    assert isinstance(dataset, SearchQueryInputDataset)
    assert dataset.indices == ("index1",)
    assert dataset.query == {"query": {"match_all": {}}}


def test_from_dict_data_frame():
    dataset = input_dataset_from_dict(
        {"input_data_type": "DATA_FRAME", "rows": [{"key1": 2.0}, {"key1": 3.0}]}
    )

    assert isinstance(dataset, DataFrameInputDataset)
    assert dataset.data_frame["key1"].tolist() == [2.0, 3.0]


@pytest.mark.parametrize("data", [{}, {"input_data_type": "QUERY"}])
def test_from_dict_unknown_type(data):
    with pytest.raises(ValueError, match="input_data_type"):
        input_dataset_from_dict(data)


def test_from_dict_search_query_without_indices():
    with pytest.raises(ValueError):
        input_dataset_from_dict({"input_data_type": "SEARCH_QUERY", "query": {}})
