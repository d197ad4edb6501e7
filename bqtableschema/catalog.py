"""BigQuery metadata source.

Lists the tables of a dataset and fetches each table's schema, converting
it into the TableMetadata snapshots the generators consume.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Iterator

from google.api_core.exceptions import GoogleAPIError
from google.auth.exceptions import GoogleAuthError
from google.cloud import bigquery

from .codegen.core.generator import TableMetadataError
from .codegen.core.schema import Column, TableMetadata
from .logging_config import get_logger

logger = get_logger(__name__)


class CatalogError(Exception):
    """Raised when the dataset's tables cannot be listed."""

    pass


def table_metadata_from_bigquery(table: bigquery.Table) -> TableMetadata:
    """Convert a fetched BigQuery table into a TableMetadata snapshot.

    Args:
        table: Table returned by ``Client.get_table``.

    Returns:
        Snapshot with columns in schema order and a non-None description.
    """
    columns = tuple(
        Column(name=field.name, field_type=field.field_type) for field in table.schema
    )
    return TableMetadata(
        table_id=table.table_id or "",
        full_id=table.full_table_id or "",
        description=table.description or "",
        columns=columns,
    )


class BigQueryCatalog:
    """Reads table metadata for one dataset through a BigQuery client."""

    def __init__(self, client: Any):
        """Wrap an existing client (a ``bigquery.Client`` or a test double)."""
        self.client = client
        self.skipped_tables: list[str] = []
        self.warnings: list[str] = []

    @classmethod
    def from_service_account_json(
        cls, key_file: str | Path, project_id: str | None = None
    ) -> "BigQueryCatalog":
        """Create a catalog whose client authenticates with a key file.

        The key file is handed to the client directly; no environment
        variable is set.

        Raises:
            CatalogError: If the client cannot be created.
        """
        kwargs = {}
        if project_id:
            kwargs["project"] = project_id

        try:
            client = bigquery.Client.from_service_account_json(str(key_file), **kwargs)
        except (GoogleAuthError, GoogleAPIError, ValueError, OSError) as e:
            raise CatalogError(f"Failed to create BigQuery client: {e}") from e

        logger.debug("BigQuery client created for project %s", client.project)
        return cls(client)

    def close(self) -> None:
        """Close the underlying client, logging rather than raising on failure."""
        close = getattr(self.client, "close", None)
        if close is None:
            return
        try:
            close()
        except Exception as e:
            logger.warning("Failed to close BigQuery client: %s", e)

    def __enter__(self) -> "BigQueryCatalog":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def list_tables(self, dataset_id: str) -> list:
        """List every table of a dataset, draining all result pages.

        Args:
            dataset_id: ``dataset`` or ``project.dataset``.

        Returns:
            Table list items in the order the API returned them.

        Raises:
            CatalogError: If listing fails.
        """
        logger.info("Listing tables in dataset %s", dataset_id)
        try:
            tables = list(self.client.list_tables(dataset_id))
        except (GoogleAPIError, GoogleAuthError) as e:
            logger.error("Failed to list tables in %s: %s", dataset_id, e)
            raise CatalogError(f"Failed to list tables in {dataset_id}: {e}") from e

        logger.info("Found %d table(s) in %s", len(tables), dataset_id)
        return tables

    def get_table_metadata(self, item: Any) -> TableMetadata:
        """Fetch one table's metadata.

        Items without a table id are not fetched; they come back as an
        empty-id snapshot for the generator to reject.

        Raises:
            TableMetadataError: If the fetch fails.
        """
        table_id = getattr(item, "table_id", "") or ""
        if not table_id:
            return TableMetadata(
                table_id="", full_id=getattr(item, "full_table_id", "") or ""
            )

        logger.debug("Fetching metadata for table %s", table_id)
        try:
            table = self.client.get_table(item.reference)
        except (GoogleAPIError, GoogleAuthError) as e:
            raise TableMetadataError(table_id, e) from e

        return table_metadata_from_bigquery(table)

    def iter_table_metadata(self, dataset_id: str) -> Iterator[TableMetadata]:
        """Yield metadata for every table in listing order.

        A table whose metadata cannot be fetched is logged, recorded in
        ``skipped_tables`` and skipped.

        Raises:
            CatalogError: If listing fails.
        """
        for item in self.list_tables(dataset_id):
            try:
                yield self.get_table_metadata(item)
            except TableMetadataError as e:
                logger.warning("Skipping table %r: %s", e.table_id, e)
                self.skipped_tables.append(e.table_id)
                self.warnings.append(f"Skipped table {e.table_id!r}: {e}")
