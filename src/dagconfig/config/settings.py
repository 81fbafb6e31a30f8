"""Unified settings — CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``DAGCONFIG_*`` prefix
  3. TOML file    — ``dagconfig.toml`` discovered via walk-up
  4. Code defaults — baked into the section models
"""

from __future__ import annotations

import threading
import tomllib
from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from dagconfig.config.discovery import find_config
from dagconfig.config.models import DocumentConfig, LookupConfig


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from a ``dagconfig.toml`` file discovered via walk-up."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            raw = toml_path.read_text(encoding="utf-8")
            try:
                self._data = tomllib.loads(raw)
            except tomllib.TOMLDecodeError as exc:
                import click

                msg = f"Invalid TOML in {toml_path}: {exc}"
                raise click.ClickException(msg) from exc

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        """Return the full TOML data dict for Pydantic to merge."""
        return self._data


# Thread-local storage for TOML path during construction.
_tls = threading.local()


class DagSettings(BaseSettings):
    """Unified settings for the dagctl CLI.

    Stored on the ``AppContext`` at the CLI root level.

    Attributes:
        config_path: The TOML file the settings were read from, if any.
        base_dir: Directory relative document paths resolve against
            (parent of ``dagconfig.toml``, or CWD if no config found).
    """

    model_config = {
        "frozen": True,
        "env_prefix": "DAGCONFIG_",
        "env_nested_delimiter": "__",
    }

    base_dir: Path = Field(default_factory=Path.cwd)
    config_path: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    # --- TOML sections ---
    lookup: LookupConfig = Field(default_factory=LookupConfig)
    document: DocumentConfig = Field(default_factory=DocumentConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert TOML source between env vars and defaults."""
        toml_path = getattr(_tls, "toml_path", None)
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, toml_path),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        base_dir: Path | None = None,
        tolerate_miscased_keys: bool | None = None,
        **cli_flags: Any,
    ) -> DagSettings:
        """Construct settings from CLI invocation.

        Discovers ``dagconfig.toml`` via walk-up (or explicit *config_path*),
        resolves *base_dir* from the config file's parent directory,
        and merges CLI flags as highest-priority overrides.
        *tolerate_miscased_keys* overrides ``[lookup]`` only when not None.
        """
        toml_path: Path | None = None
        if config_path:
            p = Path(config_path)
            if p.is_file():
                toml_path = p
        else:
            toml_path = find_config(base_dir)

        resolved_base = base_dir
        if resolved_base is None:
            resolved_base = toml_path.parent if toml_path else Path.cwd()

        _tls.toml_path = toml_path
        try:
            settings = cls(
                base_dir=resolved_base,
                config_path=toml_path,
                **cli_flags,
            )
        finally:
            _tls.toml_path = None

        if tolerate_miscased_keys is None:
            return settings
        lookup = settings.lookup.model_copy(
            update={"tolerate_miscased_keys": tolerate_miscased_keys}
        )
        return settings.model_copy(update={"lookup": lookup})

    def resolve_document(self, document: str | None) -> Path:
        """Return the document path to load: *document* or ``[document] path``."""
        path = Path(document or self.document.path)
        if path.is_absolute() or document:
            return path
        return self.base_dir / path
