"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, dagconfig.toml only contains
overrides.
"""

from __future__ import annotations

from pydantic import BaseModel


class LookupConfig(BaseModel):
    """[lookup] section."""

    model_config = {"frozen": True}

    # Accept "ABC" for "abc" when no exact match precedes it.
    tolerate_miscased_keys: bool = False


class DocumentConfig(BaseModel):
    """[document] section."""

    model_config = {"frozen": True}

    path: str = "dag.yaml"

