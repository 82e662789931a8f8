from pydantic_settings import BaseSettings

from .schemas import PricingSettings


class Settings(BaseSettings):
    # Market defaults used when a caller does not supply its own PricingSettings
    DEFAULT_METAL_UNIT_PRICE: float = 0.82   # per gram, silver
    DEFAULT_LOSS_PERCENTAGE: float = 10.0

    class Config:
        env_file = ".env"
        env_prefix = "COSTING_"


settings = Settings()


def default_pricing_settings() -> PricingSettings:
    """Explicit PricingSettings built from the environment defaults."""
    return PricingSettings(
        metal_unit_price=settings.DEFAULT_METAL_UNIT_PRICE,
        loss_percentage=settings.DEFAULT_LOSS_PERCENTAGE,
    )
