"""Configuration loading from YAML, environment and ``.env``.

The API token is taken from the config file, environment variables, a
``.env`` file in the working directory, or a file path in the environment
(Docker secrets). Never put real tokens in config files committed to the
repo.
"""

import os
from pathlib import Path
from typing import Any

import yaml
from dotenv import dotenv_values
from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from changelogger.errors import ConfigError

# Env keys checked, in order, when no token is set in the config
TOKEN_ENV_KEYS = ("GITHUB_PERSONAL_ACCESS_TOKEN", "GITHUB_TOKEN")
TOKEN_FILE_ENV_KEY = "GITHUB_TOKEN_FILE"

# Injected by load_config so token resolution can read env/.env/file
_current_env: dict[str, str] = {}


def _read_secret(env_keys: tuple[str, ...], file_env_key: str) -> str | None:
    """Read secret from the first set env var, or from file path in env."""
    for key in env_keys:
        value = _current_env.get(key)
        if value and value.strip():
            return value.strip()
    file_path = _current_env.get(file_env_key)
    if file_path:
        try:
            return Path(file_path).read_text().strip()
        except OSError as e:
            raise ConfigError(f"Cannot read {file_env_key}={file_path}: {e}") from e
    return None


class GitHubConfig(BaseSettings):
    """GitHub GraphQL API settings."""

    model_config = SettingsConfigDict(env_prefix="GITHUB_", extra="ignore")

    token: str | None = Field(default=None, description="PAT from config.yaml; prefer env, .env or secret file")
    api_url: str = Field(default="https://api.github.com", description="API base URL")
    user_agent: str = Field(default="Changelogger CLI", description="User-Agent header")
    timeout: int = Field(default=30, ge=1, description="Request timeout in seconds")


class LoggingConfig(BaseSettings):
    """Logging settings."""

    model_config = SettingsConfigDict(env_prefix="LOGGING_", extra="ignore")

    level: str = Field(default="WARNING", description="Log level")
    format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Log format",
    )


class AppConfig(BaseSettings):
    """Root application config from YAML + env."""

    model_config = SettingsConfigDict(extra="ignore")

    github: GitHubConfig = Field(default_factory=GitHubConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @property
    def github_token_resolved(self) -> str | None:
        """Resolve GitHub token from config, env, .env or Docker secret
        file."""
        t = self.github.token
        if t and not t.startswith("$"):
            return t
        return _read_secret(TOKEN_ENV_KEYS, TOKEN_FILE_ENV_KEY)

    def require_github_token(self) -> str:
        """Return the GitHub token or raise ConfigError when none is set."""
        token = self.github_token_resolved
        if not token:
            keys = ", ".join(TOKEN_ENV_KEYS)
            raise ConfigError(f"GitHub token is not set; export one of {keys} or {TOKEN_FILE_ENV_KEY}")
        return token


def _substitute_env(value: Any) -> Any:
    """Replace ${VAR} and $VAR in strings with environment values."""
    if isinstance(value, str):
        if value.startswith("${") and value.endswith("}"):
            key = value[2:-1].strip()
            return _current_env.get(key, value)
        # Simple $VAR
        if value.startswith("$") and not value.startswith("${"):
            key = value[1:].strip()
            return _current_env.get(key, value)
        return value
    if isinstance(value, dict):
        return {k: _substitute_env(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_substitute_env(v) for v in value]
    return value


def _load_env(env_file: Path | None) -> dict[str, str]:
    """Merge .env values under os.environ (real env vars win)."""
    env: dict[str, str] = {}
    if env_file is not None and env_file.is_file():
        env.update({k: v for k, v in dotenv_values(env_file).items() if v is not None})
    env.update(os.environ)
    return env


def load_config(config_path: Path | None = None, env_file: Path | None = Path(".env")) -> AppConfig:
    """Load config from YAML file, environment and .env.

    Token: github.token in YAML, or GITHUB_PERSONAL_ACCESS_TOKEN, GITHUB_TOKEN,
    GITHUB_TOKEN_FILE from the environment or .env.
    """
    global _current_env

    _current_env = _load_env(env_file)

    path = config_path or Path("config.yaml")
    raw: dict[str, Any] = {}
    if path.is_file():
        try:
            raw = yaml.safe_load(path.read_text()) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid config file {path}: {e}") from e
        raw = _substitute_env(raw)

    # github.token comes from YAML only; env lookup follows TOKEN_ENV_KEYS order
    github_raw = dict(raw.get("github") or {})
    token = github_raw.pop("token", None)
    try:
        github = GitHubConfig(**github_raw).model_copy(update={"token": str(token) if token else None})
        logging = LoggingConfig(**(raw.get("logging") or {}))
    except ValidationError as e:
        raise ConfigError(f"Invalid config file {path}: {e}") from e

    return AppConfig(github=github, logging=logging)
