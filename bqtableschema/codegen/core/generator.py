"""
Base generator interface for all code generation targets.

Defines the contract language generators implement, the per-table error
family, and the result container handed back to the CLI.
"""

from abc import ABC, abstractmethod
from typing import Dict, Iterable, List, Any, Optional
from .schema import EmittedStruct, TableMetadata
from .templates import TemplateEngine, create_template_engine


class GeneratorError(Exception):
    """Base exception for per-table code generation errors.

    Raising one of these for a table makes the run skip that table.
    """

    pass


class EmptyIdentifierError(GeneratorError):
    """Raised when a table has an empty table id."""

    def __init__(self, table: TableMetadata):
        self.table = table
        super().__init__(f"table id is empty. table metadata dump: {table!r}")


class UnsupportedTypeError(GeneratorError):
    """Raised when a BigQuery column type has no target-language mapping."""

    def __init__(self, field_type: str):
        self.field_type = field_type
        super().__init__(f"BigQuery field type not supported. field_type={field_type}")


class TableMetadataError(GeneratorError):
    """Raised when the metadata of a single table cannot be fetched."""

    def __init__(self, table_id: str, cause: Exception):
        self.table_id = table_id
        self.cause = cause
        super().__init__(f"failed to fetch metadata for table {table_id}: {cause}")


class CodeGenerator(ABC):
    """Abstract base class for all code generators."""

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        """Initialize generator with optional configuration."""
        self.config = config or {}
        self._template_engine = None

    @property
    @abstractmethod
    def language_name(self) -> str:
        """Return the name of the target language (e.g., 'go')."""
        pass

    @property
    @abstractmethod
    def file_extension(self) -> str:
        """Return the file extension for generated files (e.g., '.go')."""
        pass

    def get_builtin_templates(self) -> Dict[str, str]:
        """
        Return in-memory templates for this generator.

        Returns:
            Mapping of template name to template source
        """
        return {}

    @property
    def template_engine(self) -> TemplateEngine:
        """Get the template engine for this generator."""
        if self._template_engine is None:
            self._template_engine = create_template_engine(
                self.get_builtin_templates()
            )
        return self._template_engine

    @abstractmethod
    def generate(self, tables: Iterable[TableMetadata]) -> "GenerationResult":
        """
        Generate one source file for all tables.

        Args:
            tables: Table metadata in remote listing order

        Returns:
            GenerationResult with the assembled code
        """
        pass

    @abstractmethod
    def generate_single_schema(self, table: TableMetadata) -> EmittedStruct:
        """
        Generate the declaration for a single table.

        Raises:
            GeneratorError: If the table cannot be represented
        """
        pass

    # Template helper methods

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """Render a template with context."""
        return self.template_engine.render_template(template_name, context)


class GenerationResult:
    """Container for generation results and metadata."""

    def __init__(
        self,
        code: str,
        warnings: List[str] = None,
        metadata: Dict[str, Any] = None,
        skipped_tables: List[str] = None,
    ):
        """
        Initialize generation result.

        Args:
            code: Generated code
            warnings: Any warnings from generation
            metadata: Additional metadata about generation
            skipped_tables: Ids of tables left out of the output
        """
        self.code = code
        self.warnings = warnings or []
        self.metadata = metadata or {}
        self.skipped_tables = skipped_tables or []
