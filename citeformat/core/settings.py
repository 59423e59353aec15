"""Application settings: YAML file parsed into Pydantic models."""

import os
from functools import lru_cache
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field

from citeformat.core.reference import OutputFormat

DEFAULT_SETTINGS_PATH = Path(__file__).resolve().parents[2] / "config" / "settings.yaml"
SETTINGS_ENV_VAR = "CITEFORMAT_SETTINGS"


# ── Sections ─────────────────────────────────────────────────────────


class PubMedSettings(BaseModel):
    """NCBI E-utilities access."""

    email: str = Field(
        default="citeformat@example.org",
        description="Contact address NCBI requires for Entrez requests",
    )
    api_key: Optional[str] = None
    tool: str = "citeformat"
    max_results: int = Field(default=20, ge=1, le=10000)


class ServerSettings(BaseModel):
    host: str = "127.0.0.1"
    port: int = Field(default=3001, ge=1, le=65535)


class RenderingSettings(BaseModel):
    default_output_format: OutputFormat = OutputFormat.HTML


class Settings(BaseModel):
    """Top-level settings model."""

    pubmed: PubMedSettings = Field(default_factory=PubMedSettings)
    server: ServerSettings = Field(default_factory=ServerSettings)
    rendering: RenderingSettings = Field(default_factory=RenderingSettings)
    log_level: str = "INFO"


# ── Loading ──────────────────────────────────────────────────────────


def load_settings(path: str | Path) -> Settings:
    """Load a YAML settings file from disk and return a validated model."""
    path = Path(path)
    with open(path) as f:
        raw = yaml.safe_load(f) or {}
    return Settings.model_validate(raw)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Settings from ``$CITEFORMAT_SETTINGS`` or ``config/settings.yaml``.

    A file named by the environment variable must exist (FileNotFoundError
    otherwise). Without the variable, a missing bundled file means defaults.
    """
    env_path = os.environ.get(SETTINGS_ENV_VAR)
    if env_path:
        return load_settings(env_path)
    if DEFAULT_SETTINGS_PATH.exists():
        return load_settings(DEFAULT_SETTINGS_PATH)
    return Settings()
