"""
Go-specific type system for code generation.

Maps BigQuery column types onto the Go types the BigQuery Go client
loads rows into, together with the import each one needs.
"""

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from ...core.generator import UnsupportedTypeError
from ...core.schema import FieldType

CIVIL_IMPORT = "cloud.google.com/go/civil"


@dataclass(frozen=True)
class GoType:
    """
    Immutable representation of a Go type.

    name is the spelling used in the struct field (e.g. "*big.Rat") and
    import_path the package it needs, if any (e.g. "math/big").
    """

    name: str
    import_path: Optional[str] = None


# RECORD is deliberately absent: nested rows are not generated
GO_TYPE_MAP: Dict[FieldType, GoType] = {
    FieldType.STRING: GoType("string"),
    FieldType.BYTES: GoType("[]uint8"),
    FieldType.INTEGER: GoType("int64"),
    FieldType.FLOAT: GoType("float64"),
    FieldType.BOOLEAN: GoType("bool"),
    FieldType.TIMESTAMP: GoType("time.Time", "time"),
    FieldType.DATE: GoType("civil.Date", CIVIL_IMPORT),
    FieldType.TIME: GoType("civil.Time", CIVIL_IMPORT),
    FieldType.DATETIME: GoType("civil.DateTime", CIVIL_IMPORT),
    FieldType.NUMERIC: GoType("*big.Rat", "math/big"),
    FieldType.GEOGRAPHY: GoType("string"),
}


class GoTypeMapper:
    """Maps BigQuery field type tags to Go types."""

    def __init__(self, type_map: Optional[Dict[FieldType, GoType]] = None):
        """Initialize with a type table, defaulting to GO_TYPE_MAP."""
        self._type_map = dict(type_map if type_map is not None else GO_TYPE_MAP)

    def map_field_type(self, field_type: str) -> GoType:
        """
        Map a BigQuery field type tag to a Go type.

        Matching is exact and case-sensitive.

        Args:
            field_type: Type tag as reported by BigQuery (e.g. "INTEGER")

        Returns:
            The mapped GoType

        Raises:
            UnsupportedTypeError: For RECORD and unrecognized tags
        """
        member = FieldType.from_tag(field_type)
        if member is None or member not in self._type_map:
            raise UnsupportedTypeError(field_type)
        return self._type_map[member]


_default_mapper = GoTypeMapper()


def map_bigquery_type(field_type: str) -> Tuple[str, Optional[str]]:
    """
    Map a BigQuery type tag using the default table.

    Returns:
        Tuple of (Go type name, import path or None)
    """
    go_type = _default_mapper.map_field_type(field_type)
    return go_type.name, go_type.import_path
