"""Configuration for vault-blog: settings schema and vault-blog.yaml loader."""

import os
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from vault_blog.core.models import ConfigError


CONFIG_FILE = "vault-blog.yaml"
ENV_PREFIX = "VAULT_BLOG_"
DEFAULT_ENVIRONMENT_VARIABLE = "VAULT_BLOG_ENV"
PRODUCTION = "production"


def is_production(environment_variable: str = DEFAULT_ENVIRONMENT_VARIABLE) -> bool:
    """Whether the process runs in the production environment.

    Reads the environment on every call; nothing is cached.
    """
    return os.environ.get(environment_variable) == PRODUCTION


class PublisherConfig(BaseModel):
    """Where the vault lives and which documents it holds."""
    model_config = ConfigDict(extra="forbid")

    vault_path:           Path      = Field(default_factory=lambda: Path.cwd() / "vault",
                                            description="Root directory of the notes vault")
    extensions:           List[str] = Field(default_factory=lambda: ["md", "mdx"], min_length=1,
                                            description="Document extensions, without the dot")
    environment_variable: str       = Field(default=DEFAULT_ENVIRONMENT_VARIABLE, min_length=1,
                                            description="Variable whose value 'production' hides unpublished posts")

    @field_validator("vault_path", mode="before")
    @classmethod
    def _expand_vault_path(cls, value: Any) -> Any:
        if isinstance(value, str):
            return Path(value).expanduser()
        return value

    @field_validator("extensions", mode="before")
    @classmethod
    def _split_extensions(cls, value: Any) -> Any:
        """Accept 'md,mdx' as well as a list; leading dots are dropped."""
        if isinstance(value, str):
            value = [item.strip() for item in value.split(",") if item.strip()]
        if isinstance(value, (list, tuple)):
            return [item.lstrip(".") if isinstance(item, str) else item for item in value]
        return value


def _read_config_file(path: Path) -> Dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding='utf-8')) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid {path.name}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Invalid {path.name}: expected a mapping, got {type(data).__name__}")
    return data


def load_config(
    config_path: Optional[Union[str, Path]] = None,
    overrides: Optional[Dict[str, Any]] = None,
) -> PublisherConfig:
    """Load PublisherConfig from vault-blog.yaml, then VAULT_BLOG_<FIELD> env vars, then non-None overrides.

    A missing default config file is not an error; a missing explicitly given one is.

    Raises:
        ConfigError: On unreadable or invalid YAML, unknown keys or bad values
    """
    data: Dict[str, Any] = {}
    if config_path is not None:
        data.update(_read_config_file(Path(config_path)))
    elif Path(CONFIG_FILE).exists():
        data.update(_read_config_file(Path(CONFIG_FILE)))

    for name in PublisherConfig.model_fields:
        if val := os.getenv(f"{ENV_PREFIX}{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})

    try:
        return PublisherConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration: {e}") from e
