from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """애플리케이션 설정"""

    # Number formatting
    number_locale: str = "zh-CN"
    currency_symbol: str = "¥"
    rate_decimals: int = 1

    # Cost alert thresholds (percent of monthly revenue)
    food_cost_alert_rate: float = 40.0
    total_cost_alert_rate: float = 85.0

    # Logging
    log_dir: str = "logs"
    log_level: str = "INFO"
    log_to_file: bool = True
    max_log_files: int = 100

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="COSTCHECK_",
        case_sensitive=False,
        extra="ignore",
    )


settings = Settings()
