"""
bqtableschema

Generates Go struct definitions mirroring the table schemas of a BigQuery
dataset.
"""

__version__ = "0.1.0"

from .codegen import GenerationResult, generate_from_tables, get_generator
from .codegen.core.config import GeneratorConfig, resolve_config
from .codegen.core.schema import Column, TableMetadata

__all__ = [
    "Column",
    "GenerationResult",
    "GeneratorConfig",
    "TableMetadata",
    "generate_from_tables",
    "get_generator",
    "resolve_config",
    "__version__",
]
