"""Tests for graph document reading and parsing."""

from __future__ import annotations

import datetime
from pathlib import Path

import pytest

from dagconfig.domain.models import DagConfig
from dagconfig.infrastructure.document import (
    DocumentError,
    DocumentParseError,
    DocumentReadError,
    parse_document,
    read_document,
)
from tests.conftest import HUB_ID, SAMPLE_DOCUMENT


class TestReadDocument:
    def test_reads_full_text(self, sample_file: Path) -> None:
        assert read_document(sample_file) == SAMPLE_DOCUMENT

    def test_missing_file(self, tmp_path: Path) -> None:
        missing = tmp_path / "nope.yaml"
        with pytest.raises(DocumentReadError) as excinfo:
            read_document(missing)
        assert excinfo.value.path == missing
        assert isinstance(excinfo.value.__cause__, OSError)
        assert str(missing) in str(excinfo.value)

    def test_directory_is_not_readable(self, tmp_path: Path) -> None:
        with pytest.raises(DocumentReadError):
            read_document(tmp_path)

    def test_invalid_utf8(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.yaml"
        path.write_bytes(b"Name: \xff\xfe\n")
        with pytest.raises(DocumentReadError):
            read_document(path)

    def test_read_error_is_document_error(self) -> None:
        assert issubclass(DocumentReadError, DocumentError)


class TestParseDocument:
    def test_sample(self) -> None:
        config = parse_document(SAMPLE_DOCUMENT)
        assert config.name == "Azure Event Hubs Sample"
        assert len(config.services) == 3
        assert len(config.relationships) == 2
        assert config.services[1].id == HUB_ID
        assert config.services[1].properties == {"partitions": 4, "sku": "Standard"}

    def test_empty_document_is_empty_config(self) -> None:
        assert parse_document("") == DagConfig()

    def test_comment_only_document(self) -> None:
        assert parse_document("# nothing here\n") == DagConfig()

    def test_round_trip_minimal(self) -> None:
        config = parse_document(
            "Services:\n"
            "  - {Name: svc1, Id: id1, Type: t}\n"
            "Relationships:\n"
            "  - {Name: rel1, Id: r1, From: id1, To: id1}\n"
        )
        assert config.services[0].id == "id1"
        assert config.relationships[0].from_id == "id1"
        assert config.relationships[0].to_id == "id1"

    def test_document_keys_are_case_sensitive(self) -> None:
        config = parse_document("name: lower\nservices:\n  - Name: x\n")
        assert config.name == ""
        assert config.services == ()

    def test_field_names_are_not_document_keys(self) -> None:
        config = parse_document("Relationships:\n  - from_id: a\n    From: b\n")
        assert config.relationships[0].from_id == "b"

    @pytest.mark.parametrize(
        "raw",
        ["true", "0123", "1e3", "0x1F", "2020-01-01", "1_000", "12.50", "no", "1234"],
    )
    def test_scalar_ids_keep_document_text(self, raw: str) -> None:
        config = parse_document(
            f"Id: {raw}\n"
            f"Services:\n  - Name: {raw}\n    Id: {raw}\n    Type: {raw}\n"
            f"Relationships:\n  - Id: {raw}\n    Description: {raw}\n"
            f"    From: {raw}\n    To: {raw}\n"
        )
        svc = config.services[0]
        rel = config.relationships[0]
        assert config.id == raw
        assert (svc.name, svc.id, svc.type) == (raw, raw, raw)
        assert (rel.id, rel.description, rel.from_id, rel.to_id) == (raw, raw, raw, raw)

    def test_quoted_scalar_text(self) -> None:
        config = parse_document("Services:\n  - Id: '0123'\n    Name: \"a: b\"\n")
        assert config.services[0].id == "0123"
        assert config.services[0].name == "a: b"

    @pytest.mark.parametrize("raw", ["", "~", "null"])
    def test_null_text_field_is_empty(self, raw: str) -> None:
        config = parse_document(f"Services:\n  - Name: x\n    Id: {raw}\n")
        assert config.services[0].id == ""

    def test_quoted_null_is_text(self) -> None:
        config = parse_document("Services:\n  - Id: 'null'\n")
        assert config.services[0].id == "null"

    def test_properties_stay_typed(self) -> None:
        config = parse_document(
            "Services:\n"
            "  - Id: 0123\n"
            "    Properties: {port: 0123, enabled: true, Id: 7, since: 2020-01-01}\n"
        )
        props = config.services[0].properties
        assert props["port"] == 123
        assert props["enabled"] is True
        assert props["Id"] == 7
        assert props["since"] == datetime.date(2020, 1, 1)

    def test_text_key_with_collection_value_is_rejected(self) -> None:
        with pytest.raises(DocumentParseError) as excinfo:
            parse_document("Services:\n  - Id: [a, b]\n")
        assert any("Services.0.Id" in err for err in excinfo.value.errors)

    def test_merge_keys(self) -> None:
        config = parse_document(
            "defaults: &svc\n"
            "  Type: EventHub\n"
            "  Properties: {sku: Standard}\n"
            "Services:\n"
            "  - <<: *svc\n"
            "    Name: hub\n"
            "    Id: 0042\n"
            "  - <<: *svc\n"
            "    Type: Override\n"
        )
        first, second = config.services
        assert (first.name, first.id, first.type) == ("hub", "0042", "EventHub")
        assert first.properties == {"sku": "Standard"}
        assert second.type == "Override"


class TestParseErrors:
    def test_services_as_scalar(self) -> None:
        with pytest.raises(DocumentParseError) as excinfo:
            parse_document("Name: x\nServices: 5\n")
        assert any(err.startswith("Services") for err in excinfo.value.errors)

    def test_yaml_syntax_error(self) -> None:
        with pytest.raises(DocumentParseError):
            parse_document("Name: [unclosed\n")

    def test_root_is_a_list(self) -> None:
        with pytest.raises(DocumentParseError):
            parse_document("- a\n- b\n")

    def test_root_is_a_scalar(self) -> None:
        with pytest.raises(DocumentParseError):
            parse_document("just a string\n")

    def test_nested_type_mismatch_reports_location(self) -> None:
        with pytest.raises(DocumentParseError) as excinfo:
            parse_document("Services:\n  - Name: a\n    Properties: [1, 2]\n")
        assert any("Services.0.Properties" in err for err in excinfo.value.errors)

    def test_parse_error_is_document_error(self) -> None:
        assert issubclass(DocumentParseError, DocumentError)

    def test_duplicate_key(self) -> None:
        with pytest.raises(DocumentParseError) as excinfo:
            parse_document("Services:\n  - Id: a\n    Id: b\n")
        assert "duplicate key 'Id'" in str(excinfo.value)

    def test_complex_key(self) -> None:
        with pytest.raises(DocumentParseError):
            parse_document("? [a, b]\n: c\n")

    def test_message_summarizes_extra_errors(self) -> None:
        err = DocumentParseError(["first", "second", "third"])
        assert "first" in str(err)
        assert "+2 more" in str(err)
