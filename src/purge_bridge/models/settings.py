import dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict

from purge_bridge.models.purge import DEFAULT_API_BASE, DEFAULT_TIMEOUT, PurgeConfig


class EnvSettings(BaseSettings):
    # cloudflare
    cf_zone_id: str = ""
    cf_api_token: str = ""
    cf_api_base: str = DEFAULT_API_BASE
    cf_timeout: float = DEFAULT_TIMEOUT

    # debug
    verbose: bool = False

    model_config = SettingsConfigDict(
        env_file=dotenv.find_dotenv(usecwd=True) or None,
        env_prefix="armoury_",
        extra="ignore",
    )

    def to_purge_config(self, **overrides) -> PurgeConfig:
        values = {
            "zone_id": self.cf_zone_id.strip(),
            "api_token": self.cf_api_token.strip(),
            "api_base": self.cf_api_base,
            "timeout": self.cf_timeout,
            "verbose": self.verbose,
        }
        values.update(overrides)
        return PurgeConfig(**values)
