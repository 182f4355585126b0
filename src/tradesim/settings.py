from datetime import date

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    random_seed: int | None = Field(default=None, alias="RANDOM_SEED")
    price_volatility: float = Field(default=0.02, alias="PRICE_VOLATILITY")

    sma_period: int = Field(default=20, alias="SMA_PERIOD")
    ema_period: int = Field(default=12, alias="EMA_PERIOD")
    rsi_period: int = Field(default=14, alias="RSI_PERIOD")

    forecast_latency_seconds: float = Field(default=1.5, alias="FORECAST_LATENCY_SECONDS")

    chart_start_date: date = Field(default=date(2025, 7, 1), alias="CHART_START_DATE")
    chart_end_date: date = Field(default=date(2025, 8, 31), alias="CHART_END_DATE")

    log_level: str = Field(default="INFO", alias="LOG_LEVEL")


settings = Settings()
