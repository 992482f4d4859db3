from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # GitHub - empty token = unauthenticated calls (60 req/hour instead of 5000)
    github_token: str = ""
    github_api_url: str = "https://api.github.com"

    # Repository whose contributors are listed
    github_repo_owner: str = "CodeHarborHub"
    github_repo_name: str = "codeharborhub.github.io"

    # Roster pagination. GitHub caps per_page at 100.
    contributors_page_size: int = Field(default=30, ge=1, le=100)
    # Safety bound against an API that never returns a short page
    contributors_max_pages: int = Field(default=20, ge=1)

    # Commit history is a single page, no deep pagination
    commits_per_page: int = Field(default=30, ge=1, le=100)

    # HTTP timeouts (seconds)
    request_timeout: float = 30.0
    connect_timeout: float = 5.0

    # Logging
    log_level: str = "INFO"

    @property
    def github_authenticated(self) -> bool:
        """Check if a GitHub token is configured."""
        return bool(self.github_token)


settings = Settings()
