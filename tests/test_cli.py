"""End-to-end tests for the command-line interface with a fake BigQuery client."""

import pytest
from google.api_core.exceptions import Forbidden
from google.cloud import bigquery

from bqtableschema import cli
from bqtableschema.catalog import BigQueryCatalog
from bqtableschema.codegen import generate_from_tables
from bqtableschema.codegen.core.config import GeneratorConfig
from bqtableschema.codegen.core.schema import Column, TableMetadata

from conftest import HEADER, ORDERS_STRUCT, USERS_STRUCT, FakeBigQueryClient

ALL_IMPORTS = (
    "import (\n"
    '\t"cloud.google.com/go/civil"\n'
    '\t"math/big"\n'
    '\t"time"\n'
    ")\n\n"
)


@pytest.fixture
def patched_client(monkeypatch, fake_client):
    """Route client creation to the fake client and record the arguments."""
    calls = []

    def fake_factory(path, **kwargs):
        calls.append((path, kwargs))
        return fake_client

    monkeypatch.setattr(
        bigquery.Client, "from_service_account_json", staticmethod(fake_factory)
    )
    fake_client.factory_calls = calls
    return fake_client


class TestRun:
    def test_writes_generated_file(self, tmp_path, fake_client):
        output = tmp_path / "gen" / "bqtableschema.generated.go"
        config = GeneratorConfig(key_file="unused", dataset="sales", output_file=str(output))

        result = cli.run(config, catalog=BigQueryCatalog(fake_client))

        expected = HEADER + ALL_IMPORTS + ORDERS_STRUCT + "\n" + USERS_STRUCT
        assert result.code == expected
        assert output.read_text(encoding="utf-8") == expected
        assert fake_client.closed

    def test_write_disabled(self, tmp_path, fake_client):
        output = tmp_path / "out.go"
        config = GeneratorConfig(key_file="unused", dataset="sales", output_file=str(output))

        cli.run(config, catalog=BigQueryCatalog(fake_client), write=False)

        assert not output.exists()

    def test_metadata_failures_are_reported(self, tmp_path, orders_table, users_table):
        client = FakeBigQueryClient([orders_table, users_table], missing={"users"})
        config = GeneratorConfig(
            key_file="unused", dataset="sales", output_file=str(tmp_path / "out.go")
        )

        result = cli.run(config, catalog=BigQueryCatalog(client))

        assert result.skipped_tables == ["users"]
        assert result.code == HEADER + 'import "time"\n\n' + ORDERS_STRUCT

    def test_identical_runs_are_byte_identical(self, tmp_path, orders_table, users_table):
        outputs = []
        for name in ("first.go", "second.go"):
            output = tmp_path / name
            config = GeneratorConfig(key_file="unused", dataset="sales", output_file=str(output))
            client = FakeBigQueryClient([orders_table, users_table])
            cli.run(config, catalog=BigQueryCatalog(client))
            outputs.append(output.read_bytes())

        assert outputs[0] == outputs[1]


class TestMain:
    def test_generates_file_from_options(self, tmp_path, key_file, patched_client):
        output = tmp_path / "models" / "sales.generated.go"

        exit_code = cli.main(
            ["--keyfile", str(key_file), "--dataset", "sales", "--output", str(output)],
            environ={},
        )

        assert exit_code == 0
        assert output.read_text(encoding="utf-8") == (
            HEADER + ALL_IMPORTS + ORDERS_STRUCT + "\n" + USERS_STRUCT
        )
        # Project comes from the key file when --project is absent
        assert patched_client.factory_calls == [(str(key_file), {"project": "my-project"})]
        assert patched_client.listed_datasets == ["sales"]

    def test_environment_fallback(self, tmp_path, key_file, patched_client):
        output = tmp_path / "env.go"
        environ = {
            "GOOGLE_APPLICATION_CREDENTIALS": str(key_file),
            "BIGQUERY_DATASET": "sales",
            "OUTPUT_FILE": str(output),
        }

        assert cli.main(["--project", "other-project"], environ=environ) == 0
        assert output.exists()
        assert patched_client.factory_calls[0][1] == {"project": "other-project"}

    def test_package_name_option(self, tmp_path, key_file, patched_client):
        output = tmp_path / "out.go"

        cli.main(
            [
                "--keyfile", str(key_file),
                "--dataset", "sales",
                "--output", str(output),
                "--package-name", "models",
            ],
            environ={},
        )

        assert "\npackage models\n" in output.read_text(encoding="utf-8")

    def test_stdout_prints_exact_code_without_writing(
        self, tmp_path, key_file, patched_client, capsys
    ):
        notes_table = TableMetadata(
            table_id="notes",
            full_id="my-project:sales.notes",
            description="free-form notes kept by the sales team " * 4,
            columns=(Column("body", "STRING"),),
        )
        patched_client.tables.append(notes_table)
        expected = generate_from_tables(list(patched_client.tables)).code
        output = tmp_path / "out.go"

        exit_code = cli.main(
            [
                "--keyfile", str(key_file),
                "--dataset", "sales",
                "--output", str(output),
                "--stdout",
            ],
            environ={},
        )

        captured = capsys.readouterr()
        assert exit_code == 0
        assert not output.exists()
        assert captured.out == expected
        assert "\tBody string `bigquery:\"body\"`\n" in captured.out

    def test_missing_dataset_fails(self, key_file, patched_client, capsys):
        exit_code = cli.main(["--keyfile", str(key_file)], environ={})

        assert exit_code == 1
        assert "BIGQUERY_DATASET" in capsys.readouterr().err
        assert patched_client.factory_calls == []

    def test_missing_key_file_fails(self, tmp_path, patched_client):
        output = tmp_path / "out.go"

        exit_code = cli.main(
            [
                "--keyfile", str(tmp_path / "missing.json"),
                "--dataset", "sales",
                "--output", str(output),
            ],
            environ={},
        )

        assert exit_code == 1
        assert not output.exists()

    def test_listing_failure_fails_without_output(
        self, tmp_path, key_file, patched_client
    ):
        patched_client.list_error = Forbidden("access denied")
        output = tmp_path / "out.go"

        exit_code = cli.main(
            ["--keyfile", str(key_file), "--dataset", "sales", "--output", str(output)],
            environ={},
        )

        assert exit_code == 1
        assert not output.exists()
        assert patched_client.closed

    def test_skipped_tables_are_warned(
        self, tmp_path, key_file, patched_client, nested_table, capsys
    ):
        patched_client.tables.append(nested_table)
        output = tmp_path / "out.go"

        exit_code = cli.main(
            ["--keyfile", str(key_file), "--dataset", "sales", "--output", str(output)],
            environ={},
        )

        assert exit_code == 0
        assert "type Events" not in output.read_text(encoding="utf-8")
        assert "Skipped table 'events'" in capsys.readouterr().err
