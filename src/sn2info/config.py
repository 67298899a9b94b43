"""Configuration management for the sn2info CLI.

Loads credentials from the environment (and .env) and optional endpoint
overrides from config/endpoints.yaml.
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path

import yaml
from pydantic import BaseModel, Field
from dotenv import load_dotenv

from sn2info.utils.errors import ConfigError


DEFAULT_TOKEN_URL = "https://cloudsso.cisco.com/as/token.oauth2"
DEFAULT_COVERAGE_URL = "https://api.cisco.com/sn2info/v2/coverage/summary/serial_numbers/"
DEFAULT_PRODUCT_URL = "https://api.cisco.com/product/v1/information/serial_numbers/"


class Endpoints(BaseModel):
    """API endpoints. The serial number is appended to the coverage/product URLs."""
    token_url: str = DEFAULT_TOKEN_URL
    coverage_url: str = DEFAULT_COVERAGE_URL
    product_url: str = DEFAULT_PRODUCT_URL


class Settings(BaseModel):
    """Credentials loaded from environment variables."""
    client_id: str = Field(default="", description="OAuth2 client ID")
    client_secret: str = Field(default="", description="OAuth2 client secret")
    auth_token: str = Field(default="", description="Pre-issued bearer token; skips authentication")


class Config(BaseModel):
    """Full application configuration."""
    settings: Settings
    endpoints: Endpoints = Field(default_factory=Endpoints)

    @property
    def has_client_credentials(self) -> bool:
        return bool(self.settings.client_id and self.settings.client_secret)


def _find_project_root() -> Path:
    """Walk up from this file to find the project root (where config/ lives)."""
    current = Path(__file__).resolve().parent
    for parent in [current, *current.parents]:
        if (parent / "config" / "endpoints.yaml").exists():
            return parent
    # Fallback: cwd
    return Path.cwd()


def _load_endpoints(project_root: Path) -> Endpoints:
    """Load endpoint overrides from endpoints.yaml; defaults when absent."""
    endpoints_path = project_root / "config" / "endpoints.yaml"
    if not endpoints_path.exists():
        return Endpoints()

    try:
        with open(endpoints_path) as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid endpoints.yaml at {endpoints_path}: {e}") from e

    if data is None:
        return Endpoints()
    if not isinstance(data, dict):
        raise ConfigError(f"Invalid endpoints.yaml at {endpoints_path}: expected a mapping")

    return Endpoints(**{k: str(v) for k, v in data.items() if k in Endpoints.model_fields and v})


def _env(*keys: str, default: str = "") -> str:
    """Read the first non-empty env var from a list of keys."""
    for key in keys:
        val = os.environ.get(key)
        if val:
            return val.strip().strip('"')
    return default


def _load_settings() -> Settings:
    """Load settings from environment variables.

    SN2INFO_* names win over the bare CLIENT_ID / CLIENT_SECRET / AUTH_TOKEN.
    """
    return Settings(
        client_id=_env("SN2INFO_CLIENT_ID", "CLIENT_ID"),
        client_secret=_env("SN2INFO_CLIENT_SECRET", "CLIENT_SECRET"),
        auth_token=_env("SN2INFO_AUTH_TOKEN", "AUTH_TOKEN"),
    )


@lru_cache(maxsize=1)
def get_config() -> Config:
    """Load and cache the full application configuration."""
    project_root = _find_project_root()

    # Load .env from project root if it exists
    env_path = project_root / ".env"
    if env_path.exists():
        load_dotenv(env_path)

    settings = _load_settings()
    endpoints = _load_endpoints(project_root)

    return Config(settings=settings, endpoints=endpoints)
