from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class RuntimeConfig(BaseSettings):
    ENV: str = Field(default="dev")
    LOG_LEVEL: str = Field(default="INFO")

    model_config = SettingsConfigDict(env_prefix="NULLS_", case_sensitive=False)

    def to_dict(self) -> dict:
        """Full config as a dict."""
        return self.model_dump()


runtime_config = RuntimeConfig()
