"""MCP server configuration loaded from environment variables.

Uses ``pydantic-settings`` for env-var loading, type coercion, and ``.env``
file support.  Read once at import; nothing mutates it afterwards.
"""

VERSION = "1.0.0"

SERVER_NAME = "osint-mcp-server"

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Server settings, sourced from the environment / ``.env`` file.

    Authentication precedence (see ``osint_mcp.client.build_auth_headers``):
      OSINT_JWT_TOKEN > OSINT_API_KEY > OSINT_ORY_USER_ID (+ email/role)
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    OSINT_API_URL: str = "http://localhost:8000"

    # -- credentials (all optional; anonymous when none are set) --
    OSINT_JWT_TOKEN: str = ""
    OSINT_API_KEY: str = ""  # ak_… keys, sent as a bearer token

    # Identity headers normally injected by the Oathkeeper proxy.  Set these
    # to talk to the API directly as a pre-authenticated user.
    OSINT_ORY_USER_ID: str = ""
    OSINT_ORY_USER_EMAIL: str = ""
    OSINT_ORY_USER_ROLE: str = ""

    # Seconds.  Leave unset to keep the httpx default.
    OSINT_HTTP_TIMEOUT: float | None = None

    LOG_LEVEL: str = "INFO"

    @property
    def has_credentials(self) -> bool:
        return bool(self.OSINT_JWT_TOKEN or self.OSINT_API_KEY or self.OSINT_ORY_USER_ID)


settings = Settings()
