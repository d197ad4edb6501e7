"""Tests for credential loading and output writing."""

import pytest

from bqtableschema.utils import (
    CredentialsError,
    OutputError,
    load_credentials,
    write_generated_file,
)


class TestLoadCredentials:
    def test_loads_key_file(self, key_file):
        credentials = load_credentials(key_file)

        assert credentials.type == "service_account"
        assert credentials.project_id == "my-project"
        assert credentials.client_email == "generator@my-project.iam.gserviceaccount.com"
        assert credentials.auth_uri == ""

    def test_ignores_unknown_keys(self, tmp_path):
        path = tmp_path / "key.json"
        path.write_text('{"project_id": "p", "universe_domain": "googleapis.com"}')

        assert load_credentials(path).project_id == "p"

    def test_missing_file(self, tmp_path):
        with pytest.raises(CredentialsError, match="not found"):
            load_credentials(tmp_path / "missing.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "key.json"
        path.write_text("not json")

        with pytest.raises(CredentialsError, match="Invalid JSON"):
            load_credentials(path)

    def test_not_an_object(self, tmp_path):
        path = tmp_path / "key.json"
        path.write_text("[]")

        with pytest.raises(CredentialsError, match="JSON object"):
            load_credentials(path)


class TestWriteGeneratedFile:
    def test_creates_directory_and_writes(self, tmp_path):
        target = tmp_path / "bqtableschema" / "bqtableschema.generated.go"

        written = write_generated_file(target, "package bqtableschema\n")

        assert written == target
        assert target.read_text(encoding="utf-8") == "package bqtableschema\n"

    def test_overwrites_longer_previous_content(self, tmp_path):
        target = tmp_path / "out.go"
        target.write_text("x" * 100)

        write_generated_file(target, "short\n")

        assert target.read_text() == "short\n"

    def test_keeps_newlines_verbatim(self, tmp_path):
        target = tmp_path / "out.go"

        write_generated_file(target, "a\n\tb\n")

        assert target.read_bytes() == b"a\n\tb\n"

    def test_directory_creation_failure(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("i am a file")

        with pytest.raises(OutputError, match="Cannot create output directory"):
            write_generated_file(blocker / "out.go", "x")

    def test_write_failure(self, tmp_path):
        target = tmp_path / "is_a_dir.go"
        target.mkdir()

        with pytest.raises(OutputError, match="Error writing"):
            write_generated_file(target, "x")
