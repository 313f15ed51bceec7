"""Tests for config loading and token resolution."""

from pathlib import Path

import pytest

from changelogger.config import load_config
from changelogger.errors import ConfigError

TOKEN_KEYS = ("GITHUB_PERSONAL_ACCESS_TOKEN", "GITHUB_TOKEN", "GITHUB_TOKEN_FILE", "LOGGING_LEVEL", "GITHUB_API_URL")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in TOKEN_KEYS:
        monkeypatch.delenv(key, raising=False)


def test_defaults_without_files(tmp_path: Path) -> None:
    """Missing config.yaml and .env give defaults and no token."""
    config = load_config(tmp_path / "config.yaml", env_file=tmp_path / ".env")
    assert config.github.api_url == "https://api.github.com"
    assert config.github.user_agent == "Changelogger CLI"
    assert config.github.timeout == 30
    assert config.logging.level == "WARNING"
    assert config.github_token_resolved is None


def test_missing_token_raises_config_error(tmp_path: Path) -> None:
    """require_github_token fails when no token is available."""
    config = load_config(tmp_path / "config.yaml", env_file=None)
    with pytest.raises(ConfigError) as exc_info:
        config.require_github_token()
    assert "GITHUB_PERSONAL_ACCESS_TOKEN" in str(exc_info.value)


def test_token_from_personal_access_token_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """GITHUB_PERSONAL_ACCESS_TOKEN is picked up from the environment."""
    monkeypatch.setenv("GITHUB_PERSONAL_ACCESS_TOKEN", " pat-123 ")
    config = load_config(tmp_path / "config.yaml", env_file=None)
    assert config.require_github_token() == "pat-123"


def test_token_from_dotenv(tmp_path: Path) -> None:
    """Token in .env is used when the environment has none."""
    env_file = tmp_path / ".env"
    env_file.write_text("GITHUB_PERSONAL_ACCESS_TOKEN=from-dotenv\n")
    config = load_config(tmp_path / "config.yaml", env_file=env_file)
    assert config.github_token_resolved == "from-dotenv"


def test_environment_wins_over_dotenv(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Real environment variables override .env values."""
    env_file = tmp_path / ".env"
    env_file.write_text("GITHUB_PERSONAL_ACCESS_TOKEN=from-dotenv\n")
    monkeypatch.setenv("GITHUB_PERSONAL_ACCESS_TOKEN", "from-env")
    config = load_config(tmp_path / "config.yaml", env_file=env_file)
    assert config.github_token_resolved == "from-env"


def test_token_from_secret_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """GITHUB_TOKEN_FILE points to a file holding the token."""
    secret = tmp_path / "token"
    secret.write_text("secret-token\n")
    monkeypatch.setenv("GITHUB_TOKEN_FILE", str(secret))
    config = load_config(tmp_path / "config.yaml", env_file=None)
    assert config.github_token_resolved == "secret-token"


def test_unreadable_secret_file_raises(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """A missing secret file is a ConfigError."""
    monkeypatch.setenv("GITHUB_TOKEN_FILE", str(tmp_path / "nope"))
    config = load_config(tmp_path / "config.yaml", env_file=None)
    with pytest.raises(ConfigError):
        config.require_github_token()


def test_yaml_values_and_env_substitution(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """YAML sections are loaded and ${VAR} values substituted."""
    monkeypatch.setenv("MY_TOKEN", "yaml-token")
    path = tmp_path / "config.yaml"
    path.write_text(
        "github:\n"
        "  token: ${MY_TOKEN}\n"
        "  api_url: https://github.example.com/api\n"
        "logging:\n"
        "  level: DEBUG\n"
    )
    config = load_config(path, env_file=None)
    assert config.github_token_resolved == "yaml-token"
    assert config.github.api_url == "https://github.example.com/api"
    assert config.logging.level == "DEBUG"


def test_unresolved_placeholder_falls_back_to_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """An unset ${VAR} token in YAML is ignored in favour of env lookup."""
    monkeypatch.setenv("GITHUB_PERSONAL_ACCESS_TOKEN", "env-token")
    path = tmp_path / "config.yaml"
    path.write_text("github:\n  token: ${UNSET_TOKEN_VAR}\n")
    config = load_config(path, env_file=None)
    assert config.github_token_resolved == "env-token"


def test_invalid_yaml_raises_config_error(tmp_path: Path) -> None:
    """Broken YAML is reported as ConfigError."""
    path = tmp_path / "config.yaml"
    path.write_text("github: [unclosed\n")
    with pytest.raises(ConfigError):
        load_config(path, env_file=None)


def test_invalid_value_raises_config_error(tmp_path: Path) -> None:
    """Values failing validation are reported as ConfigError."""
    path = tmp_path / "config.yaml"
    path.write_text("github:\n  timeout: 0\n")
    with pytest.raises(ConfigError):
        load_config(path, env_file=None)


def test_personal_access_token_wins_over_github_token(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """GITHUB_PERSONAL_ACCESS_TOKEN is preferred when GITHUB_TOKEN is also set (CI runners)."""
    monkeypatch.setenv("GITHUB_PERSONAL_ACCESS_TOKEN", "pat")
    monkeypatch.setenv("GITHUB_TOKEN", "actions-token")
    config = load_config(tmp_path / "config.yaml", env_file=None)
    assert config.github.token is None
    assert config.github_token_resolved == "pat"


def test_github_token_used_when_alone(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """GITHUB_TOKEN is the fallback when no personal token is set."""
    monkeypatch.setenv("GITHUB_TOKEN", "actions-token")
    config = load_config(tmp_path / "config.yaml", env_file=None)
    assert config.github_token_resolved == "actions-token"


def test_yaml_token_wins_over_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """A literal token in config.yaml comes before any env variable."""
    monkeypatch.setenv("GITHUB_PERSONAL_ACCESS_TOKEN", "pat")
    path = tmp_path / "config.yaml"
    path.write_text("github:\n  token: yaml-literal\n")
    config = load_config(path, env_file=None)
    assert config.github_token_resolved == "yaml-literal"
