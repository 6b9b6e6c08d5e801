"""Configuration loader for janitor.toml."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any

try:
    import tomllib
except ImportError:
    import tomli as tomllib  # type: ignore

CONFIG_NAME = "janitor.toml"


class ConfigError(ValueError):
    """Raised for config values of the wrong type."""


@dataclass
class VaultConfig:
    """Vault-specific configuration."""
    root: Path


@dataclass
class ReferencesConfig:
    """Link reference block configuration."""
    include_unresolved: bool = False


@dataclass
class HeadingsConfig:
    """Missing heading generation."""
    enabled: bool = False


@dataclass
class LoggingConfig:
    level: str | None = None


@dataclass
class JanitorConfig:
    """Complete linkjanitor configuration."""
    vault: VaultConfig
    references: ReferencesConfig
    headings: HeadingsConfig
    logging: LoggingConfig


def _bool(section: dict[str, Any], key: str, default: bool) -> bool:
    value = section.get(key, default)
    if not isinstance(value, bool):
        raise ConfigError(f"{key} must be true or false, got {value!r}")
    return value


def load_config(config_path: Path | None = None, vault_path: Path | None = None) -> JanitorConfig:
    """
    Load configuration from janitor.toml.

    Search order:
    1. config_path (if provided)
    2. cwd/janitor.toml
    3. vault_path/janitor.toml

    Args:
        config_path: Explicit path to config file
        vault_path: Vault root path for fallback search

    Returns:
        JanitorConfig with resolved settings
    """
    toml_data: dict[str, Any] = {}

    search_paths = []
    if config_path:
        search_paths.append(config_path)
    search_paths.append(Path.cwd() / CONFIG_NAME)
    if vault_path:
        search_paths.append(vault_path / CONFIG_NAME)

    for path in search_paths:
        if path.exists():
            with open(path, "rb") as f:
                toml_data = tomllib.load(f)
            break

    vault_data = toml_data.get("vault", {})
    vault_config = VaultConfig(
        root=Path(vault_data.get("root", vault_path or Path("."))),
    )

    refs_data = toml_data.get("references", {})
    refs_config = ReferencesConfig(
        include_unresolved=_bool(refs_data, "include_unresolved", False),
    )

    headings_data = toml_data.get("headings", {})
    headings_config = HeadingsConfig(
        enabled=_bool(headings_data, "enabled", False),
    )

    logging_data = toml_data.get("logging", {})
    logging_config = LoggingConfig(level=logging_data.get("level"))

    return JanitorConfig(
        vault=vault_config,
        references=refs_config,
        headings=headings_config,
        logging=logging_config,
    )
