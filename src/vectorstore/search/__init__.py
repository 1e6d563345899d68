"""Search layer for callback-based Elasticsearch search."""

from .async_search import ElasticsearchSearchClient, to_search_response

__all__ = [
    "ElasticsearchSearchClient",
    "to_search_response",
]
