"""
Billing Cycle Settings for the Spendwise installment engine.

Default credit-card cycle used when a card does not define its own.
Purchases made after the closing day roll into the next statement;
every statement is due on the due day of its month.

Environment variables use the BILLING_ prefix:
    BILLING_CLOSING_DAY=4
    BILLING_DUE_DAY=11

Usage:
    from spendwise.service.installments.settings import billing_settings

    closing_day = billing_settings.closing_day

    # Or create custom settings for testing
    custom = BillingCycleSettings(closing_day=25, due_day=5)
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class BillingCycleSettings(BaseSettings):
    """
    Default billing cycle for credit cards.

    Both days are days of the month (1-31). A due day past the end of a
    short month is clamped to that month's last day.
    """

    model_config = SettingsConfigDict(
        env_prefix="BILLING_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    closing_day: int = Field(
        default=4,
        ge=1,
        le=31,
        description="Last day of the billing cycle; later purchases go to next month's statement",
    )
    due_day: int = Field(
        default=11,
        ge=1,
        le=31,
        description="Day of the month each statement is due",
    )


@lru_cache
def get_billing_settings() -> BillingCycleSettings:
    """Get cached billing settings instance."""
    return BillingCycleSettings()


billing_settings = get_billing_settings()
