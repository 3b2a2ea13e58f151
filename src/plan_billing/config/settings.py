"""
Centralized settings for the billing tool, with environment overrides.
"""
import logging
import os
from pathlib import Path
from dataclasses import dataclass
from typing import Optional


AMOUNT_STYLES = ('raw', 'fixed')


@dataclass
class Settings:
    """Application settings with sensible defaults."""

    # Requests billed by main() when no CSV is given on the command line
    requests_csv: Optional[Path] = None

    # "raw" keeps the float text as-is, "fixed" renders two decimal places
    amount_style: str = 'raw'
    currency_label: str = 'Rs.'

    log_level: str = 'INFO'

    def __post_init__(self):
        if self.amount_style not in AMOUNT_STYLES:
            raise ValueError(
                f"amount_style must be one of {AMOUNT_STYLES}, got {self.amount_style!r}"
            )

    @classmethod
    def load(cls) -> 'Settings':
        """Load settings from environment overrides."""
        requests_csv = os.environ.get('PLAN_BILLING_REQUESTS_CSV', '').strip()

        return cls(
            requests_csv=Path(requests_csv) if requests_csv else None,
            amount_style=os.environ.get('PLAN_BILLING_AMOUNT_STYLE', 'raw').strip().lower(),
            log_level=os.environ.get('PLAN_BILLING_LOG_LEVEL', 'INFO').strip().upper(),
        )


# Default settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings.load()
    return _settings


def configure_logging(level: Optional[str] = None):
    """Set up root logging for scripts and the API process."""
    level = level or get_settings().log_level
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
