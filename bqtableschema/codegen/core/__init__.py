"""
Core code generation components.

Provides base classes and utilities used by all language generators.
"""

from .generator import (
    CodeGenerator,
    EmptyIdentifierError,
    GenerationResult,
    GeneratorError,
    TableMetadataError,
    UnsupportedTypeError,
)
from .schema import Column, EmittedStruct, FieldType, GeneratedFile, TableMetadata
from .naming import capitalize_initial
from .config import ConfigError, GeneratorConfig, resolve_config, validate_config
from .templates import TemplateEngine, TemplateError, create_template_engine

__all__ = [
    # Base generator interface
    "CodeGenerator",
    "GenerationResult",
    # Per-table errors
    "GeneratorError",
    "EmptyIdentifierError",
    "UnsupportedTypeError",
    "TableMetadataError",
    # Schema system - core data structures
    "Column",
    "EmittedStruct",
    "FieldType",
    "GeneratedFile",
    "TableMetadata",
    # Naming utilities
    "capitalize_initial",
    # Configuration system
    "ConfigError",
    "GeneratorConfig",
    "resolve_config",
    "validate_config",
    # Template system
    "TemplateEngine",
    "TemplateError",
    "create_template_engine",
]
