"""Shared pytest fixtures and test helpers for dagconfig tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from dagconfig.services.lookup import DagConfigService

GENERATOR_ID = "9e1bcb3d-ff58-41d4-8779-f71e7b8800f8"
HUB_ID = "3aa1e546-1ed5-4d67-a59c-be0d5905b490"
LOGGER_ID = "a268fae5-2a82-4a3e-ada7-a52eeb7019ac"

SAMPLE_DOCUMENT = f"""\
Name: "Azure Event Hubs Sample"
Id: "d6e4a5e9-696a-4626-ba7a-534d6ff450a5"
Services:
  - Name: "Event Generator"
    Id: "{GENERATOR_ID}"
    Type: "EventGenerator"
    Properties: {{}}
  - Name: "Azure Event Hub"
    Id: "{HUB_ID}"
    Type: "EventHub"
    Properties:
      partitions: 4
      sku: Standard
  - Name: "Event Logger"
    Id: "{LOGGER_ID}"
    Type: "EventLogger"
    Properties: {{}}
Relationships:
  - Name: "Generator to Event Hubs Link"
    Id: "211a55bd-5d92-446c-8be8-190f8f0e623e"
    Description: "Event Generator to Event Hub connection"
    From: "{GENERATOR_ID}"
    To: "{HUB_ID}"
    Properties: {{}}
  - Name: "Event Hubs to Event Logger Link"
    Id: "08ccbd67-456f-4349-854a-4e6959e5017b"
    Description: "Event Hubs to Event Logger connection"
    From: "{HUB_ID}"
    To: "{LOGGER_ID}"
    Properties: {{}}
"""


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def sample_file(tmp_path: Path) -> Path:
    """The sample document written to ``dag.yaml`` in a temp directory."""
    path = tmp_path / "dag.yaml"
    path.write_text(SAMPLE_DOCUMENT, encoding="utf-8")
    return path


@pytest.fixture
def lookup() -> DagConfigService:
    """Lookup service loaded with the sample document, exact matching only."""
    return DagConfigService.from_string(SAMPLE_DOCUMENT)


@pytest.fixture
def tolerant_lookup() -> DagConfigService:
    """Lookup service loaded with the sample document, case-insensitive fallback on."""
    return DagConfigService.from_string(SAMPLE_DOCUMENT, tolerate_miscased_keys=True)


@pytest.fixture
def _isolated_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to a temp directory with no dagconfig.toml above it.

    Use via ``@pytest.mark.usefixtures("_isolated_dir")``.
    """
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("DAGCONFIG_CONFIG", raising=False)
