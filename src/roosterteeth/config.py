"""Configuration management for the roosterteeth command-line tool.

The library client never reads configuration; ``build_client`` turns a loaded
``AppConfig`` into a ``RoosterTeethClient``.
"""

from __future__ import annotations

import configparser
import os
import re
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field

from roosterteeth.auth import AUTH_URL, CLIENT_ID, Anonymous, Credential, Login
from roosterteeth.client import API_URL, RoosterTeethClient


class ApiConfig(BaseModel):
    """API endpoint configuration."""

    base_url: str = API_URL
    auth_url: str = AUTH_URL
    client_id: str = CLIENT_ID
    timeout: float = 30.0


class AccountConfig(BaseModel):
    """Rooster Teeth account used to unlock sponsor/member videos."""

    username: str | None = None
    password: str | None = None

    @property
    def has_login(self) -> bool:
        return bool(self.username and self.password)


class OutputConfig(BaseModel):
    """Output defaults for the CLI."""

    format: str = "text"


class AppConfig(BaseModel):
    """Application configuration."""

    api: ApiConfig = Field(default_factory=ApiConfig)
    account: AccountConfig = Field(default_factory=AccountConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)


# Global config instance
_config: AppConfig | None = None
_config_path: Path | None = None  # Track where config was loaded from


def get_config_dir() -> Path:
    """Get the user config directory (not created)."""
    return Path.home() / ".roosterteeth"


def get_config_paths() -> list[Path]:
    """Get list of config file paths to search, in priority order.

    Search order:
    1. Current working directory
    2. User home directory (~/.roosterteeth/)
    3. YAML files in the same two places

    Returns:
        List of paths to check for config files.
    """
    cwd = Path.cwd()
    home_dir = get_config_dir()

    return [
        cwd / "roosterteeth.ini",
        home_dir / "roosterteeth.ini",
        cwd / "roosterteeth.yaml",
        cwd / "roosterteeth.yml",
        home_dir / "config.yaml",
        home_dir / "config.yml",
    ]


def find_config_file() -> Path | None:
    """Find the first existing config file.

    Returns:
        Path to config file if found, None otherwise.
    """
    for path in get_config_paths():
        if path.exists():
            return path
    return None


_ENV_VAR_PATTERN = re.compile(r"\$\{([^}]+)\}|\$([A-Za-z_][A-Za-z0-9_]*)")


def _expand_env_vars(value: Any) -> Any:
    """Recursively expand environment variables in config values.

    Supports ${VAR} and $VAR syntax. Unset variables expand to "".
    """
    if isinstance(value, str):

        def replace(match: re.Match[str]) -> str:
            var_name = match.group(1) or match.group(2)
            return os.environ.get(var_name, "")

        return _ENV_VAR_PATTERN.sub(replace, value)
    elif isinstance(value, dict):
        return {k: _expand_env_vars(v) for k, v in value.items()}
    elif isinstance(value, list):
        return [_expand_env_vars(item) for item in value]
    return value


def _load_ini_config(path: Path) -> dict[str, Any]:
    """Load configuration from INI file.

    Args:
        path: Path to INI config file.

    Returns:
        Dictionary structure matching AppConfig schema. Empty values are
        dropped so the model defaults apply.
    """
    # No interpolation: passwords may contain '%'
    parser = configparser.ConfigParser(interpolation=None)
    parser.read(path, encoding="utf-8")

    config: dict[str, Any] = {}
    for section in AppConfig.model_fields:
        if not parser.has_section(section):
            continue
        values = {key: value.strip() for key, value in parser.items(section) if value.strip()}
        if values:
            config[section] = values

    return config


def _load_yaml_config(path: Path) -> dict[str, Any]:
    """Load configuration from YAML file."""
    with open(path, encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def _drop_empty(raw: dict[str, Any]) -> dict[str, Any]:
    """Remove values that expanded to empty strings."""
    cleaned: dict[str, Any] = {}
    for section, values in raw.items():
        if isinstance(values, dict):
            values = {k: v for k, v in values.items() if v not in ("", None)}
        cleaned[section] = values
    return cleaned


def load_config(path: Path | None = None) -> AppConfig:
    """Load configuration from file.

    Supports both INI (.ini/.cfg) and YAML (.yaml/.yml) formats.
    Environment variables are expanded in all values using ${VAR} syntax.

    Args:
        path: Explicit path to config file. If None, searches default locations.

    Returns:
        Loaded configuration with environment variables expanded.
    """
    global _config, _config_path

    if path is None:
        path = find_config_file()

    if path is None or not path.exists():
        # No config file, return defaults
        _config = AppConfig()
        _config_path = None
        return _config

    if path.suffix in (".ini", ".cfg"):
        raw_config = _load_ini_config(path)
    else:
        raw_config = _load_yaml_config(path)

    expanded_config = _drop_empty(_expand_env_vars(raw_config))

    _config = AppConfig.model_validate(expanded_config)
    _config_path = path
    return _config


def get_config_path() -> Path | None:
    """Get the path to the currently loaded config file."""
    return _config_path


def get_config() -> AppConfig:
    """Get the current configuration, loading it on first use."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reset_config() -> None:
    """Reset the cached configuration.

    Useful for testing or when config file changes.
    """
    global _config, _config_path
    _config = None
    _config_path = None


def save_default_config(
    path: Path | None = None,
    username: str = "",
    password: str = "",
) -> Path:
    """Save a default INI config file.

    Args:
        path: Where to save. Defaults to ~/.roosterteeth/roosterteeth.ini.
        username: Account username (optional, defaults to env var syntax).
        password: Account password (optional, defaults to env var syntax).

    Returns:
        Path to saved config file.
    """
    if path is None:
        path = get_config_dir() / "roosterteeth.ini"

    username_value = username or "${RT_USERNAME}"
    password_value = password or "${RT_PASSWORD}"

    default_config = f"""\
# roosterteeth configuration
# You can use environment variables with ${{VAR}} syntax

[api]
base_url = {API_URL}
auth_url = {AUTH_URL}
# Request timeout in seconds
timeout = 30

[account]
# Needed for sponsor/member only videos; leave empty to browse anonymously
username = {username_value}
password = {password_value}

[output]
# text or json
format = text
"""

    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, "w", encoding="utf-8") as f:
        f.write(default_config)

    return path


def build_client(
    cfg: AppConfig | None = None,
    username: str | None = None,
    password: str | None = None,
) -> RoosterTeethClient:
    """Create a client from configuration.

    Explicit username/password take precedence over the [account] section.
    Without any login the client is anonymous.

    Raises:
        AuthenticationError: If a login is configured but rejected.
    """
    if cfg is None:
        cfg = get_config()

    username = username or cfg.account.username
    password = password or cfg.account.password

    credential: Credential = Anonymous()
    if username or password:
        credential = Login(username or "", password or "")

    return RoosterTeethClient(
        credential,
        base_url=cfg.api.base_url,
        auth_url=cfg.api.auth_url,
        client_id=cfg.api.client_id,
        timeout=cfg.api.timeout,
    )
