"""
bqtableschema code generation module.

Generates Go struct declarations from BigQuery table metadata.
"""

from typing import Iterable, Optional

from .core.generator import CodeGenerator, GenerationResult, GeneratorError
from .core.schema import Column, FieldType, TableMetadata
from .core.config import GeneratorConfig
from .languages.go import GoGenerator, create_go_generator


def get_generator(config: Optional[GeneratorConfig] = None) -> GoGenerator:
    """Create the Go generator for a resolved configuration."""
    if config is None:
        return create_go_generator()
    return create_go_generator(
        {
            "package_name": config.package_name,
            "generator_invocation": config.generator_invocation,
        }
    )


def generate_from_tables(
    tables: Iterable[TableMetadata], config: Optional[GeneratorConfig] = None
) -> GenerationResult:
    """
    Generate Go code for a sequence of tables.

    Args:
        tables: Table metadata in remote listing order
        config: Resolved configuration (defaults when omitted)

    Returns:
        GenerationResult with generated code, warnings and skipped tables
    """
    generator = get_generator(config)
    return generator.generate(tables)


__all__ = [
    "CodeGenerator",
    "Column",
    "FieldType",
    "GenerationResult",
    "GeneratorConfig",
    "GeneratorError",
    "GoGenerator",
    "TableMetadata",
    "generate_from_tables",
    "get_generator",
]
