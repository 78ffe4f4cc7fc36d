from decimal import Decimal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Fee schedule shown on the trade ticket
    EXECUTION_FEE_RATE: Decimal = Decimal("0.01")  # of matched notional
    WIN_FEE_RATE: Decimal = Decimal("0.02")  # of positive payout minus entry cost, opens only

    # App
    APP_NAME: str = "Covenant Trade Preview"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"


settings = Settings()
