"""
Go code generator implementation.

Generates Go structs with `bigquery` struct tags from BigQuery table metadata.
"""

from typing import Any, Dict, Iterable, List, Optional

from ...core.generator import (
    CodeGenerator,
    EmptyIdentifierError,
    GenerationResult,
    GeneratorError,
)
from ...core.naming import capitalize_initial
from ...core.schema import EmittedStruct, GeneratedFile, TableMetadata
from ...core.config import DEFAULT_GENERATOR_INVOCATION, DEFAULT_PACKAGE_NAME
from ....logging_config import get_logger
from .imports import IMPORTS_TEMPLATE, ImportAggregator
from .types import GoType, GoTypeMapper

logger = get_logger(__name__)


HEADER_TEMPLATE = """\
// Code generated by {{ generator_invocation }}; DO NOT EDIT.

package {{ package_name }}

"""

STRUCT_TEMPLATE = """\
// {{ struct_name }} is BigQuery Table ({{ full_id }}) schema struct.
// Description: {{ description }}
type {{ struct_name }} struct {
{% for field in fields %}
\t{{ field.name | pad(name_width) }} {{ field.type | pad(type_width) }} `bigquery:"{{ field.original_name }}"`
{% endfor %}
}
"""


class GoGenerator(CodeGenerator):
    """Code generator for Go structs mirroring BigQuery tables."""

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        """Initialize Go generator with configuration."""
        super().__init__(config)

        self.package_name = self.config.get("package_name", DEFAULT_PACKAGE_NAME)
        self.generator_invocation = self.config.get(
            "generator_invocation", DEFAULT_GENERATOR_INVOCATION
        )
        self.type_mapper = self.config.get("type_mapper") or GoTypeMapper()

    @property
    def language_name(self) -> str:
        """Return the language name."""
        return "go"

    @property
    def file_extension(self) -> str:
        """Return Go file extension."""
        return ".go"

    def get_builtin_templates(self) -> Dict[str, str]:
        return {
            "header.go.j2": HEADER_TEMPLATE,
            "imports.go.j2": IMPORTS_TEMPLATE,
            "struct.go.j2": STRUCT_TEMPLATE,
        }

    def generate(self, tables: Iterable[TableMetadata]) -> GenerationResult:
        """
        Generate a complete Go file for all tables.

        Tables are emitted in the order given. A table that cannot be
        represented is logged, recorded in the result and skipped; the
        remaining tables are still generated.
        """
        aggregator = ImportAggregator(self.template_engine)
        struct_blocks: List[str] = []
        warnings: List[str] = []
        skipped: List[str] = []
        table_count = 0

        for table in tables:
            table_count += 1
            try:
                emitted = self.generate_single_schema(table)
            except GeneratorError as e:
                logger.warning("Skipping table %r: %s", table.table_id, e)
                warnings.append(f"Skipped table {table.table_id!r}: {e}")
                skipped.append(table.table_id)
                continue

            logger.debug(
                "Generated struct %s (%d imports)", emitted.name, len(emitted.imports)
            )
            aggregator.add(emitted.imports)
            struct_blocks.append(emitted.code)

        generated = GeneratedFile(
            header=self.render_header(),
            import_block=aggregator.render(),
            struct_blocks=struct_blocks,
        )

        metadata = {
            "language": self.language_name,
            "file_extension": self.file_extension,
            "package_name": self.package_name,
            "table_count": table_count,
            "struct_count": len(struct_blocks),
            "imports": aggregator.packages,
        }

        return GenerationResult(generated.render(), warnings, metadata, skipped)

    def generate_single_schema(self, table: TableMetadata) -> EmittedStruct:
        """
        Generate the Go struct for one table.

        Raises:
            EmptyIdentifierError: If the table id is empty
            UnsupportedTypeError: If any column type cannot be mapped; no
                partial struct is produced
        """
        if not table.table_id:
            raise EmptyIdentifierError(table)

        struct_name = capitalize_initial(table.table_id)

        # Map every column up front so an unsupported type aborts the whole table
        fields = []
        imports = []
        for column in table.columns:
            go_type: GoType = self.type_mapper.map_field_type(column.field_type)
            if go_type.import_path:
                imports.append(go_type.import_path)
            fields.append(
                {
                    "name": capitalize_initial(column.name),
                    "type": go_type.name,
                    "original_name": column.name,
                }
            )

        # Widths count characters of the emitted names, so non-ASCII columns still align
        name_width = max((len(f["name"]) for f in fields), default=0)
        type_width = max((len(f["type"]) for f in fields), default=0)

        code = self.render_template(
            "struct.go.j2",
            {
                "struct_name": struct_name,
                "full_id": table.full_id,
                "description": table.description,
                "fields": fields,
                "name_width": name_width,
                "type_width": type_width,
            },
        )

        return EmittedStruct(name=struct_name, code=code, imports=imports)

    def render_header(self) -> str:
        """Render the generated-file header with its package declaration."""
        return self.render_template(
            "header.go.j2",
            {
                "generator_invocation": self.generator_invocation,
                "package_name": self.package_name,
            },
        )


def assemble_file(header: str, import_block: str, struct_texts: Iterable[str]) -> str:
    """Concatenate header, imports and structs with one blank line between structs."""
    return GeneratedFile(header, import_block, list(struct_texts)).render()


def create_go_generator(config: Optional[Dict[str, Any]] = None) -> GoGenerator:
    """Create a Go generator with default configuration."""
    default_config = {
        "package_name": DEFAULT_PACKAGE_NAME,
        "generator_invocation": DEFAULT_GENERATOR_INVOCATION,
    }

    merged_config = default_config.copy()
    if config:
        merged_config.update(config)

    return GoGenerator(merged_config)
