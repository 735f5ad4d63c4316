from decimal import Decimal

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "env_prefix": "CANMORTGAGE_"}

    # App
    debug: bool = False
    log_level: str = "INFO"
    cors_allow_origins: list[str] = ["*"]

    # Affordability qualification (CMHC guidelines)
    gds_limit: Decimal = Decimal("0.32")  # Gross debt service: housing costs / income
    tds_limit: Decimal = Decimal("0.40")  # Total debt service: all debts / income
    affordability_amortization_years: int = 25


settings = Settings()
