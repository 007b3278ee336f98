"""
Core domain layer: column schema, field and record decoders, the dataset
parser, query state and the query engine
"""

from .columns import Column, HeaderMap
from .dataset_parser import parse_dataset
from .keyword_row import KeywordRow
from .keyword_table import KeywordTable
from .query_engine import apply_query
from .query_state import QueryState, SortDirection, SortKey

__all__ = [
    "Column",
    "HeaderMap",
    "KeywordRow",
    "KeywordTable",
    "QueryState",
    "SortDirection",
    "SortKey",
    "apply_query",
    "parse_dataset",
]
