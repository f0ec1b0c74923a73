"""Application configuration: loaded from environment variables."""

from __future__ import annotations

from functools import lru_cache

from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from readme_synth.domain.value_objects import CredentialChain


class Settings(BaseSettings):
    """Central configuration loaded from env vars (or ``.env`` file)."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    openai_api_key: SecretStr | None = None
    openai_backup_api_key: SecretStr | None = None
    openai_model: str = "gpt-4o-mini"
    openai_base_url: str | None = None
    github_access_token: SecretStr | None = None
    github_token_as_generation_fallback: bool = True

    max_file_size_bytes: int = 100_000
    max_files_to_fetch: int = 50
    fetch_batch_size: int = 5

    summary_max_tokens: int = 800
    backfill_max_tokens: int = 1000
    autodoc_max_tokens: int = 2000
    autodoc_temperature: float = 0.3

    http_timeout_seconds: float = 30.0
    generation_timeout_seconds: float = 60.0
    redact_secrets: bool = True

    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 8000

    def github_token(self) -> str | None:
        if self.github_access_token is None:
            return None
        return self.github_access_token.get_secret_value() or None

    def credential_chain(self) -> CredentialChain:
        """Build the ordered generation credential chain.

        The GitHub token is only offered to the default OpenAI endpoint,
        never to a custom ``openai_base_url``.

        Raises :class:`CredentialChainEmptyError` when no key is configured.
        """
        sources: list[tuple[str, str | None]] = [
            ("OPENAI_API_KEY", _reveal(self.openai_api_key)),
            ("OPENAI_BACKUP_API_KEY", _reveal(self.openai_backup_api_key)),
        ]
        if self.github_token_as_generation_fallback and not self.openai_base_url:
            sources.append(("GITHUB_ACCESS_TOKEN", _reveal(self.github_access_token)))
        return CredentialChain.from_sources(sources)


def _reveal(secret: SecretStr | None) -> str | None:
    return secret.get_secret_value() if secret is not None else None


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the singleton application settings (cached after first call)."""
    return Settings()
