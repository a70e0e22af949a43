from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Config(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=True,
    )

    GITHUB_USER: str = Field(default="octocat", alias="GITHUB_USER")
    GITHUB_API_URL: str = Field(
        default="https://api.github.com", alias="GITHUB_API_URL"
    )
    REQUEST_TIMEOUT: float = Field(default=10, alias="REQUEST_TIMEOUT")


config = Config()
