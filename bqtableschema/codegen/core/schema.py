"""
Core schema representation for code generation.

Holds the read-only snapshot of a BigQuery table's metadata that generators
work from, plus the transient structures they produce.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple
from enum import Enum


class FieldType(Enum):
    """BigQuery column type tags as reported by the table metadata API."""

    STRING = "STRING"
    BYTES = "BYTES"
    INTEGER = "INTEGER"
    FLOAT = "FLOAT"
    BOOLEAN = "BOOLEAN"
    TIMESTAMP = "TIMESTAMP"
    RECORD = "RECORD"  # Nested struct, not supported by the generators
    DATE = "DATE"
    TIME = "TIME"
    DATETIME = "DATETIME"
    NUMERIC = "NUMERIC"
    GEOGRAPHY = "GEOGRAPHY"

    @classmethod
    def from_tag(cls, tag: str) -> Optional["FieldType"]:
        """Return the member for an exact tag, or None if unrecognized."""
        try:
            return cls(tag)
        except ValueError:
            return None


@dataclass(frozen=True)
class Column:
    """A single column of a table schema."""

    name: str
    # Raw tag string; unrecognized tags are kept so the type mapper can reject them
    field_type: str


@dataclass(frozen=True)
class TableMetadata:
    """
    Snapshot of one remote table.

    Attributes:
        table_id: Bare table name (e.g. ``orders``)
        full_id: Fully-qualified id in ``project:dataset.table`` form
        description: Table description, empty string when unset
        columns: Columns in the remote schema's declared order
    """

    table_id: str
    full_id: str = ""
    description: str = ""
    columns: Tuple[Column, ...] = ()


@dataclass
class EmittedStruct:
    """Generated declaration for one table, consumed once by the file assembler."""

    name: str
    code: str
    # One entry per column needing an import; deduplicated later, globally
    imports: List[str] = field(default_factory=list)


@dataclass
class GeneratedFile:
    """Final artifact: header, import block and struct declarations."""

    header: str
    import_block: str = ""
    struct_blocks: List[str] = field(default_factory=list)

    def render(self) -> str:
        """Concatenate the parts with one blank line between struct blocks."""
        return self.header + self.import_block + "\n".join(self.struct_blocks)
