from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
import os

class Settings(BaseSettings):
    model_config = SettingsConfigDict(validate_default=True)

    source_url: str = os.getenv("SOURCE_URL", "https://wtxmd52.tele68.com/v1/txmd5/sessions")
    fetch_timeout: float = Field(default=float(os.getenv("FETCH_TIMEOUT", 10.0)), gt=0)
    db_dsn: str = os.getenv("DB_DSN", "sqlite:///./data/txpredict.db")
    journal: bool = os.getenv("JOURNAL", "1") not in ("0", "false", "False")
    window: int = Field(default=int(os.getenv("WINDOW", 50)), ge=1)
    freq_window: int = Field(default=int(os.getenv("FREQ_WINDOW", 20)), ge=1)
    extra_voters: int = Field(default=int(os.getenv("EXTRA_VOTERS", 5)), ge=0)
    extra_conf_low: float = Field(default=float(os.getenv("EXTRA_CONF_LOW", 0.6)), ge=0, le=1)
    extra_conf_high: float = Field(default=float(os.getenv("EXTRA_CONF_HIGH", 0.8)), ge=0, le=1)
    markov_alpha: float = Field(default=float(os.getenv("MARKOV_ALPHA", 0.0)), ge=0)
    seed: int | None = int(os.environ["SEED"]) if os.getenv("SEED") else None
    api_key: str | None = os.getenv("API_KEY")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    @model_validator(mode="after")
    def _conf_range(self):
        if self.extra_conf_low > self.extra_conf_high:
            raise ValueError("EXTRA_CONF_LOW must not exceed EXTRA_CONF_HIGH")
        return self

settings = Settings()
