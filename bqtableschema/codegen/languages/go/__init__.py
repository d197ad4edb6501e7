"""
Go code generator module.

Generates Go structs with `bigquery` struct tags from BigQuery table metadata.
"""

from .generator import GoGenerator, assemble_file, create_go_generator
from .imports import ImportAggregator, aggregate_imports
from .naming import validate_go_package_name
from .types import GO_TYPE_MAP, GoType, GoTypeMapper, map_bigquery_type

__all__ = [
    "GoGenerator",
    "GoType",
    "GoTypeMapper",
    "GO_TYPE_MAP",
    "ImportAggregator",
    "aggregate_imports",
    "assemble_file",
    "create_go_generator",
    "map_bigquery_type",
    "validate_go_package_name",
]
