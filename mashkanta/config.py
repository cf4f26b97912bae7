from decimal import Decimal

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    # Amortization: stop the schedule once the closing balance drops to this
    balance_tolerance: Decimal = Decimal("0.01")

    # Mix builder warns when track amounts miss the total by this much (ILS)
    amount_tolerance: Decimal = Decimal("1000")

    # Scenarios
    scenario_min_rate: Decimal = Decimal("0.1")
    optimistic_rate_change: Decimal = Decimal("-1")
    pessimistic_rate_change: Decimal = Decimal("2")

    # Debt-to-income risk bands (percent of monthly income)
    dti_low_threshold: Decimal = Decimal("30")
    dti_medium_threshold: Decimal = Decimal("40")

    # App
    debug: bool = False
    log_level: str = "INFO"
    cors_origins: list[str] = ["*"]


settings = Settings()
