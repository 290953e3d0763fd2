"""Application configuration."""

from pathlib import Path
from typing import Literal
from pydantic import BaseModel, computed_field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class SteamSettings(BaseModel):
    """Steam OpenID and Web API configuration."""

    # Steam Web API key (profile lookup and owned games)
    api_key: str | None = None

    openid_url: str = "https://steamcommunity.com/openid/login"
    api_url: str = "https://api.steampowered.com"
    store_url: str = "https://store.steampowered.com"

    # Number of games enriched with store categories/genres
    details_limit: int = 50
    # Fixed pause between store detail requests
    details_delay_seconds: float = 0.2

    timeout: float = 30.0


class EpicSettings(BaseModel):
    """Epic Games OAuth 2.0 configuration."""

    client_id: str | None = None
    client_secret: str | None = None

    authorize_url: str = "https://launcher.epicgames.com/oauth/authorize"
    token_url: str = "https://launcher.epicgames.com/oauth/token"
    account_url: str = "https://launcher.epicgames.com/api/v2/user/account"
    library_url: str = "https://api.epicgames.dev/epic/oauth/v2/library"

    timeout: float = 30.0


class StubProviderSettings(BaseModel):
    """Settings for catalog-only providers (GOG, PSN, Xbox)."""

    timeout: float = 10.0


class AuthSettings(BaseModel):
    """Authentication and cookie configuration."""

    # Session token settings
    session_secret: str = "CHANGE_ME_IN_PRODUCTION"  # Must be overridden in production
    session_algorithm: str = "HS256"
    session_expiry_days: int = 30

    # Cookie lifetimes
    state_max_age_seconds: int = 600
    transient_max_age_seconds: int = 60
    ledger_max_age_seconds: int = 60 * 60 * 24 * 365

    # Shared cookie domain for cross-subdomain deployments
    cookie_domain: str | None = None

    # Callback URLs (set by Settings validator from api.base_url)
    steam_callback_url: str = "http://localhost:8000/api/steam/callback"
    epic_callback_url: str = "http://localhost:8000/api/epic/callback"


class APISettings(BaseModel):
    """API configuration."""

    host: str
    port: int
    protocol: Literal["http", "https"]
    frontend_host: str
    base_url_override: str | None = None

    @computed_field
    @property
    def base_url(self) -> str:
        """Construct base URL from host.

        Returns base URL for this API server. Used as the OpenID realm and
        to build provider callback URLs. Hosted dev environments that sit
        behind a proxy set BASE_URL_OVERRIDE instead.
        """
        if self.base_url_override:
            return self.base_url_override.rstrip("/")
        if self.host == "localhost":
            return f"{self.protocol}://{self.host}:{self.port}"
        else:
            # Production uses standard ports (80/443)
            return f"{self.protocol}://{self.host}"

    @computed_field
    @property
    def frontend_url(self) -> str:
        """Frontend URL for post-login redirects.

        In development: http://localhost:3000
        """
        if self.frontend_host == "localhost":
            return "http://localhost:3000"
        else:
            return f"{self.protocol}://{self.frontend_host}"


class ObservabilitySettings(BaseModel):
    """Observability configuration for Logfire."""

    # Logfire API token (optional - if not set, logs only go to console)
    # Can be set via OBSERVABILITY__LOGFIRE_TOKEN env var
    logfire_token: str | None = None

    # If None, sends only when a token is present
    send_to_logfire: bool | None = None


class Settings(BaseSettings):
    """Application settings.

    Configuration is driven by environment and host values, with all URLs
    computed from them. Set environment variables to override:

    Development (default):
        HOST=localhost
        PORT=8000
        ENVIRONMENT=development
        -> API: http://localhost:8000
        -> Steam callback: http://localhost:8000/api/steam/callback
        -> Frontend: http://localhost:3000

    Production:
        HOST=api.games.example.com
        ENVIRONMENT=production
        FRONTEND_HOST=games.example.com
        STEAM__API_KEY=...
        EPIC__CLIENT_ID=...
        EPIC__CLIENT_SECRET=...
        AUTH__SESSION_SECRET=...
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",  # Allows STEAM__API_KEY syntax
    )

    environment: Literal["test", "development", "staging", "production"] = "development"
    debug: bool = False

    # Git commit SHA (loaded from version.txt file or defaults to "unknown")
    git_sha: str = "unknown"

    # Host configuration (all URLs computed from these)
    host: str = "localhost"
    port: int = 8000
    frontend_host: str = "localhost"
    base_url_override: str | None = None

    # Nested settings
    auth: AuthSettings = AuthSettings()
    api: APISettings = APISettings(
        host="localhost", port=8000, protocol="http", frontend_host="localhost"
    )  # Overwritten in validator
    steam: SteamSettings = SteamSettings()
    epic: EpicSettings = EpicSettings()
    gog: StubProviderSettings = StubProviderSettings()
    psn: StubProviderSettings = StubProviderSettings()
    xbox: StubProviderSettings = StubProviderSettings()
    observability: ObservabilitySettings = ObservabilitySettings()

    @model_validator(mode="after")
    def initialize_api_settings(self) -> "Settings":
        """Initialize API settings from host and environment."""
        protocol: Literal["http", "https"] = (
            "http" if self.environment in ("test", "development") else "https"
        )

        self.api = APISettings(
            host=self.host,
            port=self.port,
            protocol=protocol,
            frontend_host=self.frontend_host,
            base_url_override=self.base_url_override,
        )

        self.auth.steam_callback_url = f"{self.api.base_url}/api/steam/callback"
        self.auth.epic_callback_url = f"{self.api.base_url}/api/epic/callback"

        self.git_sha = self._load_git_sha()

        return self

    @property
    def is_production(self) -> bool:
        """Whether cookies must carry the secure attribute."""
        return self.environment == "production"

    @staticmethod
    def _load_git_sha() -> str:
        """Load git SHA from version file.

        Returns:
            Git SHA if version file exists, otherwise "unknown"
        """
        version_file = Path("/app/version.txt")
        if version_file.exists():
            try:
                return version_file.read_text().strip()
            except OSError:
                return "unknown"
        return "unknown"
