"""Application settings loaded from environment variables."""

from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

from serper_mcp.exceptions import ConfigurationError


class Settings(BaseSettings):
    """
    Application configuration loaded from environment variables.

    All settings can be overridden via environment variables prefixed with SERPER_.
    For example, SERPER_API_KEY=... sets api_key.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="SERPER_",
        case_sensitive=False,
        extra="ignore",
    )

    # ─── Serper API ──────────────────────────────────────────────────
    api_key: str | None = None
    base_url: str = "https://google.serper.dev"
    scrape_url: str = "https://scrape.serper.dev"

    # ─── Server Settings ─────────────────────────────────────────────
    transport: Literal["stdio", "http"] = "stdio"
    debug: bool = False
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 8000

    # CORS (comma-separated origins or "*")
    cors_origins: str = "*"

    def get_cors_origins(self) -> list[str]:
        """Get CORS origins as a list (parsed from comma-separated string)."""
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]

    # ─── HTTP Client Settings ────────────────────────────────────────
    max_connections: int = 100
    max_keepalive_connections: int = 20
    # None leaves upstream calls without a timeout
    request_timeout: float | None = None

    # ─── SSL/TLS Settings ───────────────────────────────────────────
    ssl_cert_dir: str | None = None
    ssl_ca_bundle: str | None = None
    # Disable SSL verification (NOT recommended for production)
    ssl_verify: bool = True

    def is_api_key_configured(self) -> bool:
        """Check if the Serper API key is configured."""
        return bool(self.api_key)

    def require_api_key(self) -> str:
        """
        Return the Serper API key.

        Raises:
            ConfigurationError: If SERPER_API_KEY is not set
        """
        if not self.api_key:
            raise ConfigurationError(
                "api_key", "SERPER_API_KEY environment variable is required"
            )
        return self.api_key

    def get_ssl_context(self) -> bool | str:
        """
        Get SSL verification configuration for httpx.

        Returns:
            - False if ssl_verify is disabled
            - Path to CA bundle/cert dir if configured
            - True for default SSL verification

        Priority: ssl_verify=False > ssl_ca_bundle > ssl_cert_dir > True
        """
        if not self.ssl_verify:
            return False
        if self.ssl_ca_bundle:
            return self.ssl_ca_bundle
        if self.ssl_cert_dir:
            return self.ssl_cert_dir
        return True


# Global settings instance
settings = Settings()
