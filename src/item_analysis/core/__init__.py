"""
Core shared types and utilities for the item analysis service.

This module provides the response matrix data model and the CSV ingestion
layer used by the scoring engine, the HTTP API and the scripts.
"""

from item_analysis.core.data import (
    ParseError,
    load_csv_to_response_matrix,
    parse_response_csv,
    response_matrix_to_csv,
)
from item_analysis.core.data_models import ResponseMatrix
from item_analysis.core.utils import get_rng

__all__ = [
    "get_rng",
    "load_csv_to_response_matrix",
    "ParseError",
    "parse_response_csv",
    "response_matrix_to_csv",
    "ResponseMatrix",
]
