# ABOUTME: Explicit runtime configuration for Livraria, loaded from .env and the environment.
# ABOUTME: One LivrariaConfig instance is built at startup and passed to collaborators.

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from dotenv import dotenv_values

from livraria.errors import ConfigurationError

DEFAULT_DB_PATH = Path.home() / ".livraria" / "livraria.db"
GROQ_API_URL = "https://api.groq.com/openai/v1/chat/completions"
DEFAULT_MODEL = "openai/gpt-oss-120b"


@dataclass(frozen=True)
class LivrariaConfig:
    """Settings for the catalog database and the Groq text source."""

    db_path: Path = DEFAULT_DB_PATH
    groq_api_key: str | None = None
    groq_api_url: str = GROQ_API_URL
    groq_model: str = DEFAULT_MODEL
    temperature: float = 0.5
    max_tokens: int = 8192
    request_timeout: float = 120.0

    def require_api_key(self) -> str:
        """Return the Groq API key.

        Raises:
            ConfigurationError: If GROQ_API_KEY was not configured.
        """
        if not self.groq_api_key:
            raise ConfigurationError("GROQ_API_KEY is not set (environment or .env file)")
        return self.groq_api_key


def _as_float(env: Mapping[str, str | None], name: str, default: float) -> float:
    raw = env.get(name)
    if raw is None or raw == "":
        return default
    try:
        return float(raw)
    except ValueError as exc:
        raise ConfigurationError(f"{name} must be a number, got {raw!r}") from exc


def _as_int(env: Mapping[str, str | None], name: str, default: int) -> int:
    raw = env.get(name)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from exc


def load_config(
    env_file: Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> LivrariaConfig:
    """Build a LivrariaConfig from a .env file and the process environment.

    Values in the environment win over values in the .env file.

    Args:
        env_file: Path to a .env file. Defaults to ./.env when it exists.
        environ: Environment mapping. Defaults to os.environ.

    Raises:
        ConfigurationError: If a numeric setting cannot be parsed.
    """
    dotenv_path = env_file or Path(".env")
    env: dict[str, str | None] = {}
    if dotenv_path.is_file():
        env.update(dotenv_values(dotenv_path))
    env.update(os.environ if environ is None else environ)

    db_path = env.get("LIVRARIA_DB_PATH")
    return LivrariaConfig(
        db_path=Path(db_path).expanduser() if db_path else DEFAULT_DB_PATH,
        groq_api_key=env.get("GROQ_API_KEY") or None,
        groq_api_url=env.get("GROQ_API_URL") or GROQ_API_URL,
        groq_model=env.get("GROQ_MODEL") or DEFAULT_MODEL,
        temperature=_as_float(env, "GROQ_TEMPERATURE", 0.5),
        max_tokens=_as_int(env, "GROQ_MAX_TOKENS", 8192),
        request_timeout=_as_float(env, "GROQ_TIMEOUT", 120.0),
    )
