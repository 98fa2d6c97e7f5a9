"""Application configuration: settings schema and docstore.yaml loader"""

import os
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import BaseModel, Field


CONFIG_FILE = "docstore.yaml"


class Settings(BaseModel):
    id_start:  int = Field(default=1, ge=1, description="First numeric id tried when minting ids")
    log_level: str = Field(default="WARNING", pattern="^(DEBUG|INFO|WARNING|ERROR)$", description="Root log level for the CLI")
    seed_file: Optional[str] = Field(default=None, description="YAML/JSON list of documents loaded by the CLI")


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from docstore.yaml, then DOCSTORE_<FIELD> env vars, then non-None CLI overrides."""
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e

    for name in Settings.model_fields:
        if val := os.getenv(f"DOCSTORE_{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**data)
